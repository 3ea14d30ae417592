"""
recaptcha-v2: render the Google reCAPTCHA v2 widget and verify responses.
"""

from recaptcha_v2.client import AsyncReCaptcha, ReCaptcha
from recaptcha_v2.config import VERSION as __version__
from recaptcha_v2.config import LoggingSettings, RecaptchaSettings
from recaptcha_v2.errors import NetworkError, RecaptchaError, ValidationError
from recaptcha_v2.schemas import RenderOptions, VerifyRequest, VerifyResult
from recaptcha_v2.shared.logging import configure_logging

__all__ = [
    "__version__",
    "AsyncReCaptcha",
    "LoggingSettings",
    "NetworkError",
    "ReCaptcha",
    "RecaptchaError",
    "RecaptchaSettings",
    "RenderOptions",
    "ValidationError",
    "VerifyRequest",
    "VerifyResult",
    "configure_logging",
]
