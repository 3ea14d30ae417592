"""
Verification request / result models.

VerifyRequest: form body POSTed to siteverify
VerifyResult: parsed siteverify JSON reply
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VerifyRequest(BaseModel):
    secret: str
    response: str
    remoteip: Optional[str] = None

    def to_form(self) -> dict[str, str]:
        """Form fields to send. ``remoteip`` is left out entirely when unset."""
        return self.model_dump(exclude_none=True)


class VerifyResult(BaseModel):
    """Outcome of one verification.

    ``success: false`` is a normal outcome (expired or forged token), not an
    error. ``error_codes`` holds the full list Google returned; ``error`` is
    the first of them for callers that only care about one.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool = False
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")
    challenge_ts: Optional[str] = None
    hostname: Optional[str] = None
    apk_package_name: Optional[str] = None

    @field_validator("error_codes", mode="before")
    @classmethod
    def _null_error_codes(cls, v):
        return [] if v is None else v

    @property
    def is_valid(self) -> bool:
        return self.success

    @property
    def error(self) -> Optional[str]:
        return self.error_codes[0] if self.error_codes else None

    def __bool__(self) -> bool:
        return self.success
