"""
Public client facade.

ReCaptcha (sync): render() + verify() over httpx.Client
AsyncReCaptcha (async): render() + await verify() over httpx.AsyncClient

Construct one per process and share it; the only state is the frozen
settings and the HTTP client, both safe for concurrent use.

Example:
    >>> rc = ReCaptcha(RecaptchaSettings(locale="fr"))
    >>> html = rc.render("6LcPUBLICKEY", {"theme": "dark"})
    >>> result = rc.verify("6LcSECRET", form["g-recaptcha-response"], remote_ip)
    >>> if not result:
    ...     reject(result.error)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from markupsafe import Markup

from recaptcha_v2.config import RecaptchaSettings
from recaptcha_v2.infrastructure.captcha.protocol import (
    AsyncCaptchaProvider,
    CaptchaProvider,
)
from recaptcha_v2.infrastructure.captcha.recaptcha import (
    AsyncReCaptchaProvider,
    ReCaptchaProvider,
)
from recaptcha_v2.infrastructure.http_client import AsyncHttpClient, HttpClient
from recaptcha_v2.schemas.verify import VerifyResult
from recaptcha_v2.shared.widget import render_widget


class _BaseReCaptcha:
    def __init__(self, settings: Optional[RecaptchaSettings]) -> None:
        self.settings = settings or RecaptchaSettings()

    def render(
        self,
        site_key: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Markup:
        """Return the HTML snippet that embeds the widget.

        Falls back to ``settings.site_key`` when *site_key* is omitted.
        Raises ValidationError for an empty key or non-mapping options.
        """
        return render_widget(
            site_key if site_key is not None else self.settings.site_key,
            options,
            self.settings.widget_script_url,
        )

    def _secret(self, secret: Optional[str]) -> Optional[str]:
        return secret if secret is not None else self.settings.secret_key


class ReCaptcha(_BaseReCaptcha):
    def __init__(
        self,
        settings: Optional[RecaptchaSettings] = None,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        super().__init__(settings)
        self._http = http_client or HttpClient(
            timeout=self.settings.timeout, user_agent=self.settings.user_agent
        )
        self._provider: CaptchaProvider = ReCaptchaProvider(
            self.settings, self._http
        )

    def verify(
        self,
        secret: Optional[str],
        response_token: Optional[str],
        remote_ip: Optional[str] = None,
    ) -> VerifyResult:
        """Check a user's response token against siteverify.

        Raises ValidationError before any I/O if secret or token is empty,
        NetworkError if the endpoint can't be reached. A rejected token
        comes back as ``VerifyResult(success=False, error_codes=[...])``.
        """
        return self._provider.verify(self._secret(secret), response_token, remote_ip)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ReCaptcha":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncReCaptcha(_BaseReCaptcha):
    def __init__(
        self,
        settings: Optional[RecaptchaSettings] = None,
        http_client: Optional[AsyncHttpClient] = None,
    ) -> None:
        super().__init__(settings)
        self._http = http_client or AsyncHttpClient(
            timeout=self.settings.timeout, user_agent=self.settings.user_agent
        )
        self._provider: AsyncCaptchaProvider = AsyncReCaptchaProvider(
            self.settings, self._http
        )

    async def verify(
        self,
        secret: Optional[str],
        response_token: Optional[str],
        remote_ip: Optional[str] = None,
    ) -> VerifyResult:
        return await self._provider.verify(
            self._secret(secret), response_token, remote_ip
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncReCaptcha":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
