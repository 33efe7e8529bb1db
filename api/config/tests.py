"""Tests for environment-driven project settings."""

# Standard library imports
import importlib
import sys

# Third-party imports
import pytest

# Application imports
from config import settings_base


@pytest.fixture()
def reload_base(monkeypatch: pytest.MonkeyPatch):
    """Reloads the base settings module, restoring it after the test."""
    yield lambda: importlib.reload(settings_base)
    monkeypatch.undo()
    importlib.reload(settings_base)


class TestDatabaseSettings:
    """Test cases for database connection settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, reload_base) -> None:
        for name in ("DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME"):
            monkeypatch.delenv(name, raising=False)

        database = reload_base().DATABASES["default"]

        assert database["ENGINE"] == "django.db.backends.postgresql"
        assert database["HOST"] == "localhost"
        assert database["PORT"] == "5432"
        assert database["USER"] == "example_user"
        assert database["PASSWORD"] == "Passwd@1234"
        assert database["NAME"] == "bicdatabase"

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch, reload_base) -> None:
        monkeypatch.setenv("DB_HOST", "db")
        monkeypatch.setenv("DB_PORT", "6543")
        monkeypatch.setenv("DB_NAME", "banks")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        module = reload_base()

        assert module.DATABASES["default"]["HOST"] == "db"
        assert module.DATABASES["default"]["PORT"] == "6543"
        assert module.DATABASES["default"]["NAME"] == "banks"
        assert module.LOG_LEVEL == "DEBUG"


class TestEnvironmentSelection:
    """Test cases for choosing a settings module."""

    def test_invalid_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Asserts that unknown environments are rejected at import."""
        monkeypatch.setenv("ENV", "staging")
        monkeypatch.delitem(sys.modules, "config.settings", raising=False)
        with pytest.raises(ValueError, match="staging"):
            importlib.import_module("config.settings")
