"""
Tests de la configuration pydantic-settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cinecast.config import Settings


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self, monkeypatch):
        """Valeurs par defaut sans variable d'environnement."""
        monkeypatch.delenv("CINECAST_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///cinecast.db"
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.is_sqlite is True

    def test_environment_prefix(self, monkeypatch):
        """Les variables CINECAST_* surchargent la configuration."""
        monkeypatch.setenv("CINECAST_MAX_PAGE_SIZE", "25")
        monkeypatch.setenv("CINECAST_LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.max_page_size == 25
        assert settings.log_level == "DEBUG"

    def test_log_file_expands_home(self):
        """~ est etendu dans le chemin du fichier de log."""
        settings = Settings(_env_file=None, log_file="~/cinecast.log")
        assert settings.log_file == Path("~/cinecast.log").expanduser()

    def test_page_size_must_be_positive(self):
        """Une taille de page maximale nulle est refusee."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_page_size=0)

    def test_non_sqlite_url(self):
        """is_sqlite est faux pour une autre base."""
        settings = Settings(_env_file=None, database_url="postgresql://u:p@localhost/db")
        assert settings.is_sqlite is False
