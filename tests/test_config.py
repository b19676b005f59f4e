"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from outreach_store.config import Settings, get_settings


class TestSettings:
    """Tests for Settings and get_settings()."""

    def test_defaults(self, monkeypatch):
        for var in ("MONGODB_URI", "MONGODB_DATABASE", "SCHEMA_EXIST_OK", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.mongodb_uri == "mongodb://localhost:27017"
        assert settings.mongodb_database == "linkedin_automation"
        assert settings.mongodb_timeout_seconds == 10
        assert settings.schema_exist_ok is True
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://db:27017")
        monkeypatch.setenv("MONGODB_DATABASE", "outreach_dev")
        monkeypatch.setenv("MONGODB_TIMEOUT_SECONDS", "3")

        settings = get_settings()

        assert settings.mongodb_uri == "mongodb://db:27017"
        assert settings.mongodb_database == "outreach_dev"
        assert settings.mongodb_timeout_seconds == 3

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("MONGODB_TIMEOUT_SECONDS", "0")

        with pytest.raises(ValidationError):
            Settings()
