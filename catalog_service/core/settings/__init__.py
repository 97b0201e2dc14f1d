"""Pydantic Settings v2 configuration.

Settings are split by domain, read from environment variables (or a local
``.env`` file) and frozen after validation. Import them via the cached loaders:

    from catalog_service.core.settings import get_pagination_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .loader import (
    clear_all_caches,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "LoggingSettings",
    "PaginationSettings",
    "clear_all_caches",
    "get_logging_settings",
    "get_pagination_settings",
]
