class InvalidKeySizeError(ValueError):
    def __init__(self, expected: int):
        super().__init__(f"invalid key size: key must be exactly {expected} characters")
        self.expected = expected


class IDGenerationError(RuntimeError):
    pass


class AuthError(Exception):
    """
    Base class for every authentication/authorization failure.
    All of them end the request with a 401.
    """
    message = "unauthorized"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidTokenError(AuthError):
    message = "token is invalid"


class ExpiredTokenError(AuthError):
    message = "token has expired"


class MissingAuthorizationError(AuthError):
    message = "authorization not provided"


class MalformedAuthorizationError(AuthError):
    message = "invalid authorization header format"


class UnsupportedSchemeError(AuthError):
    def __init__(self, scheme: str):
        super().__init__(f"unsupported authorization format {scheme}")
        self.scheme = scheme


class UnauthorizedUserError(AuthError):
    message = "resource doesn't belong to the authenticated user"
