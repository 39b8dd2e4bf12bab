import json
import logging
import secrets
import string
from abc import ABC, abstractmethod
from datetime import timedelta

import pyseto
from pydantic import ValidationError
from pyseto import Key, PysetoError

from .errors import InvalidKeySizeError, InvalidTokenError
from .payload import Payload

logger = logging.getLogger(__name__)

# PASETO v2.local encrypts with XChaCha20-Poly1305, which takes a 32 byte key
SYMMETRIC_KEY_SIZE = 32


class Maker(ABC):
    """Issues and verifies access tokens."""

    @abstractmethod
    def create_token(self, username: str, duration: timedelta) -> str:
        ...

    @abstractmethod
    def verify_token(self, token: str) -> Payload:
        ...


class PasetoMaker(Maker):
    def __init__(self, symmetric_key: str | bytes):
        if isinstance(symmetric_key, str):
            symmetric_key = symmetric_key.encode("utf-8")
        if len(symmetric_key) != SYMMETRIC_KEY_SIZE:
            raise InvalidKeySizeError(SYMMETRIC_KEY_SIZE)

        self._key = Key.new(version=2, purpose="local", key=symmetric_key)

    def create_token(self, username: str, duration: timedelta) -> str:
        payload = Payload.new(username, duration)
        token = pyseto.encode(self._key, payload.model_dump_json().encode("utf-8"))
        return token.decode("utf-8")

    def verify_token(self, token: str) -> Payload:
        try:
            decoded = pyseto.decode(self._key, token)
            payload = Payload.model_validate(json.loads(decoded.payload))
        except (PysetoError, ValidationError, ValueError) as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError() from e

        payload.valid()
        return payload


def generate_symmetric_key() -> str:
    """
    Returns a random key of SYMMETRIC_KEY_SIZE printable characters,
    usable as TOKEN_SYMMETRIC_KEY.
    """
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(SYMMETRIC_KEY_SIZE))
