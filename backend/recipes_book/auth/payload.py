from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from pydantic import AwareDatetime
from sqlmodel import SQLModel

from .errors import ExpiredTokenError, IDGenerationError


class Payload(SQLModel):
    id: UUID  # Unique token identifier
    username: str  # Subject the token was issued for
    issued_at: AwareDatetime
    expired_at: AwareDatetime

    @classmethod
    def new(cls, username: str, duration: timedelta) -> "Payload":
        """
        Builds the claims for a new token.
        A negative duration is allowed and gives an already expired payload.
        """
        try:
            token_id = uuid4()
        except (OSError, NotImplementedError) as e:
            raise IDGenerationError(f"cannot generate token id: {e}") from e

        issued_at = datetime.now(timezone.utc)
        return cls(
            id=token_id,
            username=username,
            issued_at=issued_at,
            expired_at=issued_at + duration,
        )

    def valid(self) -> None:
        if datetime.now(timezone.utc) > self.expired_at:
            raise ExpiredTokenError()
