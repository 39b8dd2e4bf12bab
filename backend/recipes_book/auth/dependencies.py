import logging
from typing import Annotated

from fastapi import Depends, Header, Request

from .errors import (
    AuthError,
    MalformedAuthorizationError,
    MissingAuthorizationError,
    UnauthorizedUserError,
    UnsupportedSchemeError,
)
from .maker import Maker
from .payload import Payload

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER_KEY = "authorization"
AUTHORIZATION_TYPE_BEARER = "bearer"
AUTHORIZATION_PAYLOAD_KEY = "authorization_payload"


def get_token_maker(request: Request) -> Maker:
    return request.app.state.token_maker


def parse_authorization_header(authorization: str | None) -> str:
    """
    Extracts the token from an `authorization: <scheme> <token>` header.
    Only the bearer scheme is accepted, compared case-insensitively.
    """
    if not authorization:
        raise MissingAuthorizationError()

    fields = authorization.split()
    if len(fields) < 2:
        raise MalformedAuthorizationError()

    authorization_type = fields[0].lower()
    if authorization_type != AUTHORIZATION_TYPE_BEARER:
        raise UnsupportedSchemeError(authorization_type)

    return fields[1]


async def authorize(
    request: Request,
    maker: Annotated[Maker, Depends(get_token_maker)],
    authorization: Annotated[str | None, Header()] = None,
) -> Payload:
    """
    Dependency guarding protected routes.

    Verifies the bearer token and keeps the payload on the request state
    under AUTHORIZATION_PAYLOAD_KEY. Any failure aborts the request with a
    401 before the route handler runs.
    """
    try:
        token = parse_authorization_header(authorization)
        payload = maker.verify_token(token)
    except AuthError as e:
        logger.warning("Authentication failed on %s %s: %s", request.method, request.url.path, e)
        raise

    setattr(request.state, AUTHORIZATION_PAYLOAD_KEY, payload)
    return payload


def get_authorization_payload(request: Request) -> Payload:
    payload = getattr(request.state, AUTHORIZATION_PAYLOAD_KEY, None)
    if payload is None:
        raise MissingAuthorizationError()
    return payload


def ensure_owner(payload: Payload, owner: str) -> None:
    if payload.username != owner:
        logger.warning("User %s is not the owner (%s) of the requested resource", payload.username, owner)
        raise UnauthorizedUserError()


CurrentPayload = Annotated[Payload, Depends(authorize)]
