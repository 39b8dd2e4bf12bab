import logging
from datetime import timedelta

from ..auth.dependencies import ensure_owner
from ..auth.maker import Maker
from ..auth.passwords import get_password_hash, verify_password
from ..auth.payload import Payload
from ..core.store import Store
from ..models.Author import Author, AuthorCreate, AuthorUpdate, utcnow

logger = logging.getLogger(__name__)


async def create_author(store: Store, data: AuthorCreate) -> Author:
    author = store.create_author(
        username=data.username,
        hashed_password=get_password_hash(data.password),
        email=data.email,
    )
    logger.info("Author %s created", author.username)
    return author


async def authenticate_author(store: Store, username: str, password: str) -> Author | None:
    author = store.get_author(username)
    if not verify_password(password, author.hashed_password):
        return None
    return author


async def issue_access_token(maker: Maker, author: Author, duration: timedelta) -> str:
    token = maker.create_token(author.username, duration)
    logger.info("Issued access token for %s (valid for %s)", author.username, duration)
    return token


async def list_authors(store: Store, page_id: int, page_size: int) -> list[Author]:
    return store.list_authors(limit=page_size, offset=page_size * (page_id - 1))


async def update_author(store: Store, payload: Payload, data: AuthorUpdate) -> Author:
    author = store.get_author(data.username)
    ensure_owner(payload, author.username)

    email = author.email
    hashed_password = author.hashed_password
    updated_at = author.updated_at
    now = utcnow()

    if data.email is not None:
        email = data.email
        updated_at = now
    if data.password is not None:
        hashed_password = get_password_hash(data.password)
        updated_at = now

    updated = store.update_author(
        username=author.username,
        email=email,
        hashed_password=hashed_password,
        updated_at=updated_at,
    )
    logger.info("Author %s updated", updated.username)
    return updated


async def delete_author(store: Store, payload: Payload, username: str) -> None:
    author = store.get_author(username)
    ensure_owner(payload, author.username)

    store.delete_author(author.username)
    logger.info("Author %s deleted", author.username)
