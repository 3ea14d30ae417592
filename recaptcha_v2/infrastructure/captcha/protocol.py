"""Captcha provider protocols. Callers depend on these, not the concrete implementation."""

from typing import Optional, Protocol

from recaptcha_v2.schemas.verify import VerifyResult


class CaptchaProvider(Protocol):
    def verify(
        self,
        secret: Optional[str],
        response_token: Optional[str],
        remote_ip: Optional[str] = None,
    ) -> VerifyResult: ...


class AsyncCaptchaProvider(Protocol):
    async def verify(
        self,
        secret: Optional[str],
        response_token: Optional[str],
        remote_ip: Optional[str] = None,
    ) -> VerifyResult: ...
