"""
Tests pour Settings (pydantic-settings).
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from topics.config import Settings


class TestSettings:
    """Tests du chargement de la configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TOPICS_STORAGE_BACKEND", raising=False)
        settings = Settings(_env_file=None)
        assert settings.storage_backend == "memory"
        assert not settings.persistent

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("TOPICS_STORAGE_BACKEND", "sqlite")
        monkeypatch.setenv("TOPICS_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.persistent
        assert settings.log_level == "DEBUG"

    def test_log_file_expands_home(self):
        settings = Settings(_env_file=None, log_file="~/topics.log")
        assert settings.log_file == Path("~/topics.log").expanduser()

    def test_rejects_unknown_backend(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, storage_backend="redis")
