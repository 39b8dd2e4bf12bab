from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, status

from ..auth.dependencies import CurrentPayload, get_token_maker
from ..auth.maker import Maker
from ..core.store import Store, get_store
from ..models.Author import USERNAME_PATTERN, AuthorCreate, AuthorCreated, AuthorResponse, AuthorUpdate, LoginRequest
from ..models.Token import LoginResponse
from . import service

router = APIRouter(prefix="/authors", tags=["authors"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: Request,
    login_data: LoginRequest,
    store: Store = Depends(get_store),
    maker: Maker = Depends(get_token_maker),
):
    """
    Login with username and password to get an access token.
    """
    author = await service.authenticate_author(store, login_data.username, login_data.password)
    if not author:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    duration = request.app.state.settings.access_token_duration
    access_token = await service.issue_access_token(maker, author, duration)
    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        author=AuthorResponse.model_validate(author),
    )


@router.post("", response_model=AuthorCreated)
async def create_author(author: AuthorCreate, store: Store = Depends(get_store)):
    """
    Register a new author.
    """
    return await service.create_author(store, author)


@router.get("/{username}", response_model=AuthorResponse)
async def read_author(username: Annotated[str, Path(pattern=USERNAME_PATTERN)], store: Store = Depends(get_store)):
    return store.get_author(username)


@router.get("", response_model=list[AuthorResponse])
async def list_authors(
    page_id: Annotated[int, Query(ge=1)],
    page_size: Annotated[int, Query(ge=5, le=10)],
    store: Store = Depends(get_store),
):
    return await service.list_authors(store, page_id, page_size)


@router.patch("", response_model=AuthorResponse)
async def update_author(
    update_data: AuthorUpdate,
    payload: CurrentPayload,
    store: Store = Depends(get_store),
):
    """
    Update the email and/or password of the authenticated author.
    """
    return await service.update_author(store, payload, update_data)


@router.delete("/{username}")
async def delete_author(
    username: Annotated[str, Path(pattern=USERNAME_PATTERN)],
    payload: CurrentPayload,
    store: Store = Depends(get_store),
):
    """
    Delete the authenticated author. Fails while they still own recipes.
    """
    await service.delete_author(store, payload, username)
    return "ok"
