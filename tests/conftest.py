"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolated, cache-free settings
    - Record Fixtures: ordered snapshots for the pagination engine
    - Catalog Fixtures: seeded book repositories
"""

from __future__ import annotations

import os

import pytest

from catalog_service.core.pagination import encode_cursor
from catalog_service.core.settings import PaginationSettings, clear_all_caches
from catalog_service.core.store import Record, RecordStore
from catalog_service.features.books import BookRepository, seed_catalog

# Keep tests independent of a developer's local environment
for _var in ("PAGINATION_MAX_PAGE_SIZE", "PAGINATION_STRICT_CURSORS", "LOG_JSON"):
    os.environ.pop(_var, None)
os.environ.setdefault("LOG_FILE_ENABLED", "false")


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _clear_settings_caches():
    """Reload settings for every test so env overrides never leak."""
    clear_all_caches()
    yield
    clear_all_caches()


@pytest.fixture
def pagination_settings() -> PaginationSettings:
    """Default pagination settings (unbounded pages, lenient cursors)."""
    return PaginationSettings()


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def record_store() -> RecordStore[str]:
    """Store holding 25 payloads with sequential ids 1..25."""
    store: RecordStore[str] = RecordStore()
    for number in range(1, 26):
        store.add(f"record-{number}")
    return store


@pytest.fixture
def records(record_store: RecordStore[str]) -> tuple[Record[str], ...]:
    """Snapshot of the 25-record store."""
    return record_store.snapshot()


@pytest.fixture
def cursor_for():
    """Build the cursor for an id.

    Example:
        def test_after(records, cursor_for):
            paginate(records, after=cursor_for(5))
    """
    return encode_cursor


# ============================================================================
# Catalog Fixtures
# ============================================================================


@pytest.fixture
def book_repository(pagination_settings: PaginationSettings) -> BookRepository:
    """Repository seeded with the default 24 authors and 25 books."""
    return seed_catalog(BookRepository(settings=pagination_settings))
