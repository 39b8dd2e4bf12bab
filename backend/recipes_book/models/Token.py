from sqlmodel import SQLModel

from .Author import AuthorResponse


class LoginResponse(SQLModel):
    access_token: str # PASETO v2.local token
    token_type: str # Token type
    author: AuthorResponse
