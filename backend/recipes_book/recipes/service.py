import logging

from ..auth.dependencies import ensure_owner
from ..auth.payload import Payload
from ..core.store import Store
from ..models.Author import utcnow
from ..models.Recipe import Recipe, RecipeCreate, RecipeUpdate

logger = logging.getLogger(__name__)


async def create_recipe(store: Store, payload: Payload, data: RecipeCreate) -> Recipe:
    # The caller always becomes the owner
    recipe = store.create_recipe(
        author=payload.username,
        ingredients=data.ingredients,
        steps=data.steps,
    )
    logger.info("Recipe %s created by %s", recipe.id, recipe.author)
    return recipe


async def list_recipes(store: Store, page_id: int, page_size: int) -> list[Recipe]:
    return store.list_recipes(limit=page_size, offset=page_size * (page_id - 1))


async def update_recipe(store: Store, payload: Payload, data: RecipeUpdate) -> Recipe:
    recipe = store.get_recipe(data.id)
    ensure_owner(payload, recipe.author)

    ingredients = recipe.ingredients
    steps = recipe.steps
    updated_at = recipe.updated_at
    now = utcnow()

    if data.steps:
        steps = data.steps
        updated_at = now
    if data.ingredients:
        ingredients = data.ingredients
        updated_at = now

    updated = store.update_recipe(
        recipe_id=recipe.id,
        ingredients=ingredients,
        steps=steps,
        updated_at=updated_at,
    )
    logger.info("Recipe %s updated by %s", updated.id, payload.username)
    return updated


async def delete_recipe(store: Store, payload: Payload, recipe_id: int) -> None:
    recipe = store.get_recipe(recipe_id)
    ensure_owner(payload, recipe.author)

    store.delete_recipe(recipe.id)
    logger.info("Recipe %s deleted by %s", recipe.id, payload.username)
