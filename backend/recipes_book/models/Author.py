from datetime import datetime, timezone

from pydantic import BaseModel, EmailStr, Field as PydanticField, field_validator
from sqlmodel import Field, SQLModel

USERNAME_PATTERN = r"^[a-zA-Z0-9]+$"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ==========================================
# SQLModel (Database Entity)
# ==========================================
class Author(SQLModel, table=True):
    __tablename__ = "authors"

    username: str = Field(primary_key=True)
    hashed_password: str = Field(nullable=False)
    email: str = Field(unique=True, index=True, nullable=False)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Properties to receive via API on creation
class AuthorCreate(BaseModel):
    username: str = PydanticField(pattern=USERNAME_PATTERN)
    password: str = PydanticField(min_length=6, max_length=24)
    email: EmailStr

# Properties to receive via API on update.
# Blank email/password mean "keep the current value".
class AuthorUpdate(BaseModel):
    username: str = PydanticField(pattern=USERNAME_PATTERN)
    email: EmailStr | None = None
    password: str | None = PydanticField(default=None, min_length=6, max_length=24)

    @field_validator("email", "password", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
        return value

# Properties to receive via API on login
class LoginRequest(BaseModel):
    username: str = PydanticField(pattern=USERNAME_PATTERN)
    password: str = PydanticField(min_length=6)

# Properties to return via API
class AuthorCreated(SQLModel):
    username: str
    created_at: datetime

class AuthorResponse(SQLModel):
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
