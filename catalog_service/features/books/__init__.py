"""Books feature: authors, books and cursor-paginated listing."""

from catalog_service.features.books.repository import BookRepository
from catalog_service.features.books.schemas import Author, Book
from catalog_service.features.books.seed import create_seeded_repository, seed_catalog

__all__ = [
    "Author",
    "Book",
    "BookRepository",
    "create_seeded_repository",
    "seed_catalog",
]
