"""
Tests pour la configuration (Settings).
"""

from pathlib import Path

from videocatalog.config import Settings


class TestSettings:
    """Tests pour les valeurs par defaut et les surcharges."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("VIDEOCATALOG_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///videocatalog.db"
        assert settings.database_echo is False
        assert settings.reset_schema_on_startup is False
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("VIDEOCATALOG_RESET_SCHEMA_ON_STARTUP", "true")
        monkeypatch.setenv("VIDEOCATALOG_LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.reset_schema_on_startup is True
        assert settings.log_level == "DEBUG"

    def test_log_file_expanded(self):
        settings = Settings(_env_file=None, log_file="~/logs/catalog.log")
        assert settings.log_file == Path.home() / "logs" / "catalog.log"
