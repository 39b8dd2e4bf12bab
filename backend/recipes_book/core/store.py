from datetime import datetime
from enum import Enum

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .database import get_session
from ..models.Author import Author
from ..models.Recipe import Recipe


class NotFoundError(LookupError):
    pass


class ConstraintKind(str, Enum):
    UNIQUE = "unique_violation"
    FOREIGN_KEY = "foreign_key_violation"


class ConstraintViolationError(Exception):
    def __init__(self, kind: ConstraintKind, message: str):
        super().__init__(message)
        self.kind = kind


class Store:
    """
    Persistence for authors and recipes.

    Lookups raise NotFoundError. Writes that would break a uniqueness or
    foreign key constraint raise ConstraintViolationError tagged with the
    constraint kind.
    """

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------
    # Authors
    # ------------------------------------------
    def create_author(self, username: str, hashed_password: str, email: str) -> Author:
        if self.session.get(Author, username):
            raise ConstraintViolationError(ConstraintKind.UNIQUE, "Username already registered")
        self._ensure_email_free(email)

        author = Author(username=username, hashed_password=hashed_password, email=email)
        return self._save(author, ConstraintKind.UNIQUE)

    def get_author(self, username: str) -> Author:
        author = self.session.get(Author, username)
        if not author:
            raise NotFoundError("Author not found")
        return author

    def list_authors(self, limit: int, offset: int) -> list[Author]:
        statement = select(Author).order_by(Author.username).offset(offset).limit(limit)
        return list(self.session.exec(statement).all())

    def update_author(self, username: str, email: str, hashed_password: str, updated_at: datetime) -> Author:
        author = self.get_author(username)
        if email != author.email:
            self._ensure_email_free(email)

        author.email = email
        author.hashed_password = hashed_password
        author.updated_at = updated_at
        return self._save(author, ConstraintKind.UNIQUE)

    def delete_author(self, username: str) -> None:
        author = self.get_author(username)
        statement = select(Recipe).where(Recipe.author == username)
        if self.session.exec(statement).first():
            raise ConstraintViolationError(ConstraintKind.FOREIGN_KEY, "Author still owns recipes")

        self.session.delete(author)
        self.session.commit()

    # ------------------------------------------
    # Recipes
    # ------------------------------------------
    def create_recipe(self, author: str, ingredients: list[str], steps: list[str]) -> Recipe:
        if not self.session.get(Author, author):
            raise ConstraintViolationError(ConstraintKind.FOREIGN_KEY, "Author does not exist")

        recipe = Recipe(author=author, ingredients=ingredients, steps=steps)
        return self._save(recipe, ConstraintKind.FOREIGN_KEY)

    def get_recipe(self, recipe_id: int) -> Recipe:
        recipe = self.session.get(Recipe, recipe_id)
        if not recipe:
            raise NotFoundError("Recipe not found")
        return recipe

    def list_recipes(self, limit: int, offset: int) -> list[Recipe]:
        statement = select(Recipe).order_by(Recipe.id).offset(offset).limit(limit)
        return list(self.session.exec(statement).all())

    def update_recipe(self, recipe_id: int, ingredients: list[str], steps: list[str], updated_at: datetime) -> Recipe:
        recipe = self.get_recipe(recipe_id)
        recipe.ingredients = list(ingredients)
        recipe.steps = list(steps)
        recipe.updated_at = updated_at
        return self._save(recipe, ConstraintKind.FOREIGN_KEY)

    def delete_recipe(self, recipe_id: int) -> None:
        recipe = self.get_recipe(recipe_id)
        self.session.delete(recipe)
        self.session.commit()

    def _ensure_email_free(self, email: str):
        statement = select(Author).where(Author.email == email)
        if self.session.exec(statement).first():
            raise ConstraintViolationError(ConstraintKind.UNIQUE, "Email already registered")

    def _save(self, row, kind: ConstraintKind):
        # Concurrent writers can still slip past the checks above
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConstraintViolationError(kind, str(e.orig)) from e
        self.session.refresh(row)
        return row


def get_store(session: Session = Depends(get_session)) -> Store:
    return Store(session)
