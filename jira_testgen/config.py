"""Centralized configuration objects for the Jira AI TestCase Generator."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load .env file if it exists
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_PATH = PROJECT_ROOT / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

_TRUTHY = {"1", "true", "yes", "on"}


class AppSettings(BaseModel):
    """Streamlit/UI level configuration."""

    name: str = "Jira AI TestCase Generator"
    debug: bool = False
    demo_mode: bool = False


class BackendSettings(BaseModel):
    """Connection parameters for the test-case generation backend."""

    base_url: str = "http://localhost:8000"
    timeout: float = Field(120.0, ge=1.0, le=600.0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Backend URL must not be empty")
        return value.rstrip("/")


class Settings(BaseModel):
    """Top-level settings container."""

    project_root: Path = PROJECT_ROOT
    app: AppSettings = AppSettings()
    backend: BackendSettings = BackendSettings()


def _settings_from_env() -> Dict[str, Any]:
    """Allow lightweight overriding via environment variables."""

    overrides: Dict[str, Any] = {}

    backend_url = os.getenv("JIRA_TESTGEN_BACKEND_URL")
    if backend_url is not None:
        overrides.setdefault("backend", {})["base_url"] = backend_url

    timeout = os.getenv("JIRA_TESTGEN_TIMEOUT")
    if timeout is not None:
        overrides.setdefault("backend", {})["timeout"] = float(timeout)

    for env_key, field_name in (
        ("JIRA_TESTGEN_DEBUG", "debug"),
        ("JIRA_TESTGEN_DEMO_MODE", "demo_mode"),
    ):
        value = os.getenv(env_key)
        if value is not None:
            overrides.setdefault("app", {})[field_name] = value.lower() in _TRUTHY

    return overrides


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings(**_settings_from_env())


settings = get_settings()

__all__ = ["Settings", "AppSettings", "BackendSettings", "get_settings", "settings"]
