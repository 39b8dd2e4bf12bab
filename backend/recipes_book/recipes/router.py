from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from ..auth.dependencies import authorize, CurrentPayload
from ..core.store import Store, get_store
from ..models.Recipe import RecipeCreate, RecipeResponse, RecipeUpdate
from . import service

# Every recipe route needs a valid token; mutations additionally need ownership
router = APIRouter(prefix="/recipes", tags=["recipes"], dependencies=[Depends(authorize)])


@router.post("", response_model=RecipeResponse)
async def create_recipe(
    recipe: RecipeCreate,
    payload: CurrentPayload,
    store: Store = Depends(get_store),
):
    """
    Create a recipe owned by the authenticated author.
    """
    return await service.create_recipe(store, payload, recipe)


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def read_recipe(
    recipe_id: Annotated[int, Path(ge=1)],
    store: Store = Depends(get_store),
):
    return store.get_recipe(recipe_id)


@router.get("", response_model=list[RecipeResponse])
async def list_recipes(
    page_id: Annotated[int, Query(ge=1)],
    page_size: Annotated[int, Query(ge=5, le=10)],
    store: Store = Depends(get_store),
):
    return await service.list_recipes(store, page_id, page_size)


@router.patch("", response_model=RecipeResponse)
async def update_recipe(
    update_data: RecipeUpdate,
    payload: CurrentPayload,
    store: Store = Depends(get_store),
):
    """
    Replace the steps and/or ingredients of a recipe (owner only).
    """
    return await service.update_recipe(store, payload, update_data)


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: Annotated[int, Path(ge=1)],
    payload: CurrentPayload,
    store: Store = Depends(get_store),
):
    await service.delete_recipe(store, payload, recipe_id)
    return "ok"
