"""
Library error hierarchy.

RecaptchaError is the base for all typed errors. Each subclass carries an
HTTP-ish status_code and a machine-readable error_code so a host web app can
map it straight to a JSON response via to_dict().

A remote rejection (``success: false``) is not an error; it comes back as a
VerifyResult.
"""

from __future__ import annotations

from typing import Any, Optional


class RecaptchaError(Exception):
    """Base library error. All typed errors inherit from this."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(RecaptchaError, ValueError):
    """A required argument is missing or malformed. Raised before any I/O."""

    status_code = 400
    error_code = "validation_error"


class NetworkError(RecaptchaError):
    """The verification endpoint could not be reached or answered garbage."""

    status_code = 502
    error_code = "network_error"
