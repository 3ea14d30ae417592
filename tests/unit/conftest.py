"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads a real .env file during unit
tests, and clears RECAPTCHA_* env vars. Tests control config exclusively
through explicit construction or monkeypatch.setenv().
"""

import os

import pytest

from http_mocks import VERIFY_URL
from recaptcha_v2.config import RecaptchaSettings


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture(autouse=True)
def clean_recaptcha_env(monkeypatch):
    for var in list(os.environ):
        if var.startswith("RECAPTCHA_") or var in ("LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings():
    return RecaptchaSettings(verify_api_url=VERIFY_URL, user_agent="test-agent/1.0")
