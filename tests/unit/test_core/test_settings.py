"""Unit tests for Pydantic Settings."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from catalog_service.core.settings import (
    LoggingSettings,
    PaginationSettings,
    get_logging_settings,
    get_pagination_settings,
)
from catalog_service.core.settings.loader import clear_all_caches


@pytest.mark.unit
class TestPaginationSettings:
    """Test suite for PaginationSettings."""

    def test_defaults(self):
        settings = PaginationSettings()

        assert settings.max_page_size is None
        assert settings.strict_cursors is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_MAX_PAGE_SIZE", "10")
        monkeypatch.setenv("PAGINATION_STRICT_CURSORS", "true")

        settings = PaginationSettings()

        assert settings.max_page_size == 10
        assert settings.strict_cursors is True

    def test_max_page_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            PaginationSettings(max_page_size=0)

    def test_frozen(self):
        settings = PaginationSettings()

        with pytest.raises(ValidationError):
            settings.strict_cursors = True

    @pytest.mark.parametrize(
        ("max_page_size", "count", "expected"),
        [
            (None, 500, 500),
            (10, 5, 5),
            (10, 50, 10),
            (10, None, None),
            (10, 0, 0),
            (10, -3, -3),
        ],
    )
    def test_clamp(self, max_page_size, count, expected):
        settings = PaginationSettings(max_page_size=max_page_size)

        assert settings.clamp(count) == expected


@pytest.mark.unit
class TestLoggingSettings:
    """Test suite for LoggingSettings."""

    def test_level_is_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")

    def test_effective_levels_fall_back_to_root(self):
        settings = LoggingSettings(level="WARNING", console_level="error")

        assert settings.effective_console_level == "ERROR"
        assert settings.effective_file_level == "WARNING"

    def test_file_path_only_when_enabled(self, tmp_path):
        path = tmp_path / "app.jsonl"

        assert LoggingSettings(file_enabled=False, file_path=path).effective_file_path is None
        assert LoggingSettings(file_enabled=True, file_path=path).effective_file_path == path

    def test_to_logging_kwargs(self):
        settings = LoggingSettings(
            service_name="books",
            level="INFO",
            json_logs=False,
            file_enabled=True,
            file_path=Path("logs/books.log"),
        )

        kwargs = settings.to_logging_kwargs()

        assert kwargs["service_name"] == "books"
        assert kwargs["log_level"] == "INFO"
        assert kwargs["json_logs"] is False
        assert kwargs["file_path"] == str(Path("logs/books.log"))
        assert kwargs["console_level"] == "INFO"

    def test_json_logs_read_from_log_json(self, monkeypatch):
        monkeypatch.setenv("LOG_JSON", "false")

        settings = LoggingSettings()

        assert settings.json_logs is False
        assert settings.to_logging_kwargs()["json_logs"] is False

    def test_json_logs_defaults_on(self):
        assert LoggingSettings().json_logs is True


@pytest.mark.unit
class TestSettingsLoaders:
    """Test suite for cached loaders."""

    def test_loaders_are_cached(self):
        assert get_pagination_settings() is get_pagination_settings()
        assert get_logging_settings() is get_logging_settings()

    def test_clear_all_caches_reloads(self, monkeypatch):
        first = get_pagination_settings()
        monkeypatch.setenv("PAGINATION_MAX_PAGE_SIZE", "7")

        assert get_pagination_settings() is first

        clear_all_caches()

        assert get_pagination_settings().max_page_size == 7
