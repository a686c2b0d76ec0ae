"""Unit tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jira_testgen import config


@pytest.fixture(autouse=True)
def clear_settings_cache():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("JIRA_TESTGEN_BACKEND_URL", "JIRA_TESTGEN_TIMEOUT", "JIRA_TESTGEN_DEMO_MODE"):
            monkeypatch.delenv(key, raising=False)

        settings = config.get_settings()

        assert settings.backend.base_url == "http://localhost:8000"
        assert settings.backend.timeout == 120.0
        assert settings.app.demo_mode is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("JIRA_TESTGEN_BACKEND_URL", "http://api.internal:9000/")
        monkeypatch.setenv("JIRA_TESTGEN_TIMEOUT", "30")
        monkeypatch.setenv("JIRA_TESTGEN_DEMO_MODE", "yes")

        settings = config.get_settings()

        assert settings.backend.base_url == "http://api.internal:9000"
        assert settings.backend.timeout == 30.0
        assert settings.app.demo_mode is True

    def test_timeout_out_of_range_is_rejected(self, monkeypatch):
        monkeypatch.setenv("JIRA_TESTGEN_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            config.get_settings()
