"""Custom exception classes for the catalog service."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details so a transport layer can render
    any of them without knowing the concrete type.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies the specific occurrence of the problem.
        extra: Additional context-specific information about the error.

    Example:
        raise AppException(
            status_code=404,
            detail="Book not found",
            type="book-not-found",
            extra={"book_id": 42},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code."""
        titles = {
            400: "Bad Request",
            404: "Not Found",
            409: "Conflict",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
        }
        return titles.get(status_code, "Error")

    def to_problem_details(self) -> dict[str, Any]:
        """Render the exception as an RFC 7807 problem details mapping."""
        problem: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "status": self.status_code,
            "detail": self.detail,
        }
        if self.instance is not None:
            problem["instance"] = self.instance
        problem.update(self.extra)
        return problem


class NotFoundException(AppException):
    """Exception raised when a resource is not found.

    Example:
        raise NotFoundException(
            detail="Book with ID 42 not found",
            type="book-not-found",
            extra={"book_id": 42},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ConflictException(AppException):
    """Exception raised for resource conflicts.

    Example:
        raise ConflictException(
            detail="Author already exists",
            type="author-conflict",
            extra={"name": "Martin Fowler"},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "conflict",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=409,
            detail=detail,
            type=type,
            title="Conflict",
            instance=instance,
            extra=extra,
        )


class BadRequestException(AppException):
    """Exception raised for malformed requests."""

    def __init__(
        self,
        detail: str,
        type: str = "bad-request",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title="Bad Request",
            instance=instance,
            extra=extra,
        )


# ============================================================================
# Pagination Exceptions
# ============================================================================


class InvalidCursorError(BadRequestException):
    """Raised when a pagination cursor cannot be decoded.

    Example:
        raise InvalidCursorError("not-a-cursor")
    """

    def __init__(
        self,
        cursor: object,
        detail: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.cursor = cursor
        final_extra: dict[str, Any] = {"cursor": cursor}
        if extra:
            final_extra.update(extra)
        super().__init__(
            detail=detail or f"Invalid cursor: {cursor!r}",
            type="invalid-cursor",
            instance=instance,
            extra=final_extra,
        )


class StaleCursorError(NotFoundException):
    """Raised in strict mode when a cursor points at a record that no longer exists."""

    def __init__(
        self,
        cursor: str,
        record_id: int,
        instance: str | None = None,
    ) -> None:
        self.cursor = cursor
        self.record_id = record_id
        super().__init__(
            detail=f"Cursor {cursor!r} refers to record {record_id}, which is no longer present",
            type="stale-cursor",
            instance=instance,
            extra={"cursor": cursor, "record_id": record_id},
        )


# ============================================================================
# Catalog Exceptions
# ============================================================================


class AuthorNotFoundError(NotFoundException):
    """Raised when a book references an author that is not in the catalog."""

    def __init__(self, name: str, instance: str | None = None) -> None:
        self.name = name
        super().__init__(
            detail=f"Author {name!r} not found",
            type="author-not-found",
            instance=instance,
            extra={"author_name": name},
        )


__all__ = [
    "AppException",
    "AuthorNotFoundError",
    "BadRequestException",
    "ConflictException",
    "InvalidCursorError",
    "NotFoundException",
    "StaleCursorError",
]
