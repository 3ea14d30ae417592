"""reCAPTCHA v2 implementations of CaptchaProvider / AsyncCaptchaProvider.

- endpoint URL comes from injected RecaptchaSettings, not a module constant
- argument checks run before any I/O and raise ValidationError
- transport failures raise NetworkError instead of being swallowed
- ``success: false`` is returned as a VerifyResult, never raised
"""

from __future__ import annotations

from typing import Optional

import httpx

from recaptcha_v2.config import RecaptchaSettings
from recaptcha_v2.errors import NetworkError, ValidationError
from recaptcha_v2.infrastructure.http_client import AsyncHttpClient, HttpClient
from recaptcha_v2.schemas.verify import VerifyRequest, VerifyResult
from recaptcha_v2.shared.logging import get_logger

log = get_logger(__name__)


def build_verify_request(
    secret: Optional[str],
    response_token: Optional[str],
    remote_ip: Optional[str] = None,
) -> VerifyRequest:
    if not secret or not isinstance(secret, str):
        raise ValidationError(
            "Secret key is required to verify reCAPTCHA", field="secret"
        )
    if not response_token or not isinstance(response_token, str):
        raise ValidationError(
            "Response from user is required to verify reCAPTCHA",
            field="response_token",
        )
    if remote_ip is not None and not isinstance(remote_ip, str):
        raise ValidationError(
            "Remote IP must be a string",
            field="remote_ip",
            details={"type": type(remote_ip).__name__},
        )
    # An unknown address reported as "" is left out, not sent empty
    return VerifyRequest(
        secret=secret, response=response_token, remoteip=remote_ip or None
    )


def parse_verify_response(response: httpx.Response) -> VerifyResult:
    """Map a siteverify HTTP response to a VerifyResult.

    Raises NetworkError for a non-2xx status or a body that isn't the
    expected JSON object.
    """
    if not response.is_success:
        log.error(
            "recaptcha_api_error",
            status_code=response.status_code,
            response_text=response.text[:200],
        )
        raise NetworkError(
            f"reCAPTCHA verification endpoint returned HTTP {response.status_code}",
            details={"status_code": response.status_code},
        )
    try:
        result = VerifyResult.model_validate(response.json())
    except ValueError as e:
        log.error(
            "recaptcha_api_error",
            error=str(e),
            response_text=response.text[:200],
        )
        raise NetworkError(
            "reCAPTCHA verification endpoint returned an unreadable response"
        ) from e

    if not result.success:
        log.warning("recaptcha_verification_failed", error_codes=result.error_codes)
    return result


def _request_failed(e: httpx.HTTPError) -> NetworkError:
    log.error("recaptcha_request_failed", error=str(e), error_type=type(e).__name__)
    return NetworkError(
        "reCAPTCHA verification request failed",
        details={"error_type": type(e).__name__},
    )


class ReCaptchaProvider:
    def __init__(self, settings: RecaptchaSettings, http_client: HttpClient) -> None:
        self._settings = settings
        self._http = http_client

    def verify(
        self,
        secret: Optional[str],
        response_token: Optional[str],
        remote_ip: Optional[str] = None,
    ) -> VerifyResult:
        request = build_verify_request(secret, response_token, remote_ip)
        log.debug("recaptcha_verify_request", has_remote_ip=request.remoteip is not None)
        try:
            response = self._http.post(
                self._settings.verify_api_url, data=request.to_form()
            )
        except httpx.HTTPError as e:
            raise _request_failed(e) from e
        return parse_verify_response(response)


class AsyncReCaptchaProvider:
    def __init__(
        self, settings: RecaptchaSettings, http_client: AsyncHttpClient
    ) -> None:
        self._settings = settings
        self._http = http_client

    async def verify(
        self,
        secret: Optional[str],
        response_token: Optional[str],
        remote_ip: Optional[str] = None,
    ) -> VerifyResult:
        request = build_verify_request(secret, response_token, remote_ip)
        log.debug("recaptcha_verify_request", has_remote_ip=request.remoteip is not None)
        try:
            response = await self._http.post(
                self._settings.verify_api_url, data=request.to_form()
            )
        except httpx.HTTPError as e:
            raise _request_failed(e) from e
        return parse_verify_response(response)
