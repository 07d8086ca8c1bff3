"""Unit tests for application configuration."""

import re

from vidshare.config import Settings, get_settings, settings


class TestDefaults:
    def test_environment_default(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        assert Settings(_env_file=None).environment == "development"

    def test_database_path_from_env(self, monkeypatch):
        monkeypatch.setenv("DATABASE_PATH", "/tmp/other.db")
        assert Settings(_env_file=None).database_path == "/tmp/other.db"

    def test_get_settings_returns_singleton(self):
        assert get_settings() is settings


class TestCorsOrigins:
    def test_splits_comma_separated_frontend_url(self):
        s = Settings(frontend_url="http://localhost:3000, https://vidshare.example ,")
        assert s.cors_origins == ["http://localhost:3000", "https://vidshare.example"]

    def test_single_origin(self):
        s = Settings(frontend_url="http://localhost:3000")
        assert s.cors_origins == ["http://localhost:3000"]


class TestAppVersion:
    def test_app_version_returns_semver(self):
        """app_version should return a valid semver string from pyproject.toml."""
        assert re.match(r"\d+\.\d+\.\d+", Settings().app_version)

    def test_is_development(self):
        assert Settings(environment="development").is_development is True
        assert Settings(environment="production").is_development is False
