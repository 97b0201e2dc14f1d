"""Pydantic schemas for the books feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """A book author."""

    id: int = Field(description="Author identifier")
    name: str = Field(min_length=1, max_length=200, description="Author display name")

    model_config = ConfigDict(frozen=True)


class Book(BaseModel):
    """A catalog book.

    ``author`` may be None for books whose author was removed from the
    catalog, mirroring a nullable foreign key.
    """

    id: int = Field(description="Book identifier, assigned in creation order")
    title: str = Field(min_length=1, max_length=500, description="Book title")
    author: Author | None = Field(default=None, description="Book author")
    published_year: int | None = Field(
        default=None,
        alias="publishedYear",
        description="Year of first publication",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)
