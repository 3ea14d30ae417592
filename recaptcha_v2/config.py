"""
Client configuration via pydantic-settings.

All settings can be loaded from environment variables (and .env file), or
passed explicitly when constructing a client. Explicit construction is how
tests point the client at a mock endpoint.

Settings are frozen: one instance is safe to share across threads and
concurrent requests.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlencode

from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "0.1.0"

DEFAULT_WIDGET_API_URL = "https://www.google.com/recaptcha/api.js"
DEFAULT_VERIFY_API_URL = "https://www.google.com/recaptcha/api/siteverify"
DEFAULT_USER_AGENT = f"recaptcha-v2/{VERSION} (Python)"

# Name of the JS function the widget script calls once loaded
ONLOAD_CALLBACK = "onloadCallback"


class RecaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RECAPTCHA_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    widget_api_url: str = DEFAULT_WIDGET_API_URL
    verify_api_url: str = DEFAULT_VERIFY_API_URL
    user_agent: str = DEFAULT_USER_AGENT

    # Widget language code, e.g. "fr" or "pt-BR"; None lets Google auto-detect
    locale: Optional[str] = None

    # Seconds; passed straight to httpx
    timeout: float = 5.0

    # Optional defaults so callers holding a single key pair can omit them
    site_key: str = ""
    secret_key: str = ""

    @property
    def widget_script_url(self) -> str:
        params = {"onload": ONLOAD_CALLBACK, "render": "explicit"}
        if self.locale:
            params["hl"] = self.locale
        return f"{self.widget_api_url}?{urlencode(params)}"


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production
