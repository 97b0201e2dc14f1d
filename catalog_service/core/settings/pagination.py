"""Pagination settings for the book catalog.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_MAX_PAGE_SIZE=100, PAGINATION_STRICT_CURSORS=true
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    These settings apply to the catalog layer only. The pagination engine
    itself takes no configuration.

    Attributes:
        max_page_size: Upper bound applied to positive ``first``/``last``.
            None leaves page sizes unbounded.
        strict_cursors: Reject cursors whose record is no longer present
            instead of ignoring them.

    Example:
        settings = PaginationSettings(max_page_size=50)
    """

    max_page_size: int | None = Field(
        default=None,
        ge=1,
        le=10000,
        description="Maximum page size for first/last (None for unbounded)",
    )
    strict_cursors: bool = Field(
        default=False,
        description="Raise StaleCursorError for cursors pointing at missing records",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    def clamp(self, count: int | None) -> int | None:
        """Apply ``max_page_size`` to a requested page size.

        Non-positive and missing counts pass through untouched so the
        engine's empty-page policy still applies to them.
        """
        if count is None or count <= 0 or self.max_page_size is None:
            return count
        return min(count, self.max_page_size)
