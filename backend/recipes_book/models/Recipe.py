from datetime import datetime

from pydantic import BaseModel, Field as PydanticField
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from .Author import utcnow


class Recipe(SQLModel, table=True):
    __tablename__ = "recipes"

    id: int | None = Field(default=None, primary_key=True)
    author: str = Field(foreign_key="authors.username", index=True)
    ingredients: list[str] = Field(sa_column=Column(JSON, nullable=False))
    steps: list[str] = Field(sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class RecipeCreate(BaseModel):
    ingredients: list[str] = PydanticField(min_length=1)
    steps: list[str] = PydanticField(min_length=1)


class RecipeUpdate(BaseModel):
    id: int = PydanticField(ge=1)
    ingredients: list[str] | None = None  # Empty or missing keeps the current list
    steps: list[str] | None = None


class RecipeResponse(SQLModel):
    id: int
    author: str
    ingredients: list[str]
    steps: list[str]
    created_at: datetime
    updated_at: datetime
