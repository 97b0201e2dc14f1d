"""Repository for the books feature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catalog_service.core.exceptions import (
    AuthorNotFoundError,
    ConflictException,
    StaleCursorError,
)
from catalog_service.core.pagination import Connection, decode_cursor, paginate
from catalog_service.core.settings import get_pagination_settings
from catalog_service.core.store import IdSequence, RecordStore
from catalog_service.features.books.schemas import Author, Book

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from catalog_service.core.settings import PaginationSettings

logger = logging.getLogger(__name__)


class BookRepository:
    """In-memory repository for books and their authors.

    Books and authors live in separate record stores, each with its own
    id sequence, so book ids follow book creation order independently of
    authors.

    Example:
        repo = BookRepository()
        repo.create_author("Martin Fowler")
        repo.create_book("Refactoring", "Martin Fowler", 2019)
        page = repo.find_books_paginated(first=10)
    """

    def __init__(
        self,
        settings: PaginationSettings | None = None,
        book_sequence: IdSequence | None = None,
        author_sequence: IdSequence | None = None,
    ) -> None:
        self._settings = settings or get_pagination_settings()
        self._books: RecordStore[Book] = RecordStore(book_sequence)
        self._authors: RecordStore[Author] = RecordStore(author_sequence)

    @property
    def settings(self) -> PaginationSettings:
        return self._settings

    # ──────────────────────────────────────────────────────────────
    # Books
    # ──────────────────────────────────────────────────────────────

    def find_all(self) -> tuple[Book, ...]:
        """Return every book in creation order."""
        return self._books.payloads()

    def find_by_id(self, book_id: int) -> Book | None:
        record = self._books.get(book_id)
        return record.payload if record else None

    def find_books_by_author_ids(self, author_ids: Iterable[int]) -> list[Book]:
        wanted = set(author_ids)
        return [
            book
            for book in self._books.payloads()
            if book.author is not None and book.author.id in wanted
        ]

    def create_book(
        self,
        title: str,
        author_name: str,
        published_year: int | None = None,
    ) -> Book:
        """Create a book for an existing author.

        Args:
            title: Book title
            author_name: Name of an author already in the catalog (case-insensitive)
            published_year: Year of first publication

        Returns:
            The created book

        Raises:
            AuthorNotFoundError: If no author has that name
        """
        author = self.find_author_by_name(author_name)
        if author is None:
            raise AuthorNotFoundError(author_name)
        return self.add_book(title, author, published_year)

    def add_book(
        self,
        title: str,
        author: Author | None,
        published_year: int | None = None,
    ) -> Book:
        """Store a book under the next book id."""
        record = self._books.add_with_id(
            lambda book_id: Book(
                id=book_id,
                title=title,
                author=author,
                published_year=published_year,
            )
        )
        logger.info("Created book", extra={"book_id": record.id})
        return record.payload

    def delete_book_by_id(self, book_id: int) -> bool:
        deleted = self._books.remove(book_id)
        if deleted:
            logger.info("Deleted book", extra={"book_id": book_id})
        return deleted

    # ──────────────────────────────────────────────────────────────
    # Authors
    # ──────────────────────────────────────────────────────────────

    def find_all_authors(self) -> tuple[Author, ...]:
        return self._authors.payloads()

    def find_author_by_id(self, author_id: int) -> Author | None:
        record = self._authors.get(author_id)
        return record.payload if record else None

    def find_author_by_name(self, name: str) -> Author | None:
        """Find an author by name, ignoring case."""
        wanted = name.casefold()
        for author in self._authors.payloads():
            if author.name.casefold() == wanted:
                return author
        return None

    def create_author(self, name: str) -> Author:
        """Create an author.

        Raises:
            ConflictException: If an author with the same name exists
        """
        if self.find_author_by_name(name) is not None:
            raise ConflictException(
                detail=f"Author {name!r} already exists",
                type="author-conflict",
                extra={"author_name": name},
            )
        record = self._authors.add_with_id(lambda author_id: Author(id=author_id, name=name))
        return record.payload

    # ──────────────────────────────────────────────────────────────
    # Pagination
    # ──────────────────────────────────────────────────────────────

    def find_books_paginated(
        self,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> Connection[Book]:
        """Page through books in creation order.

        Takes one snapshot of the book store, applies the configured page
        size limit and (in strict mode) cursor validation, then hands the
        snapshot to the pagination engine.

        Raises:
            InvalidCursorError: If a cursor cannot be decoded
            StaleCursorError: In strict mode, if a cursor's book no longer exists
        """
        books = self._books.payloads()

        if self._settings.strict_cursors:
            self._ensure_cursors_present(books, after, before)

        return paginate(
            books,
            first=self._settings.clamp(first),
            after=after,
            last=self._settings.clamp(last),
            before=before,
        )

    @staticmethod
    def _ensure_cursors_present(
        books: Sequence[Book],
        *cursors: str | None,
    ) -> None:
        present = {book.id for book in books}
        for cursor in cursors:
            if cursor is None:
                continue
            book_id = decode_cursor(cursor)
            if book_id not in present:
                raise StaleCursorError(cursor, book_id)
