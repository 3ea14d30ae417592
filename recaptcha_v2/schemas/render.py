"""
Widget render options.

RenderOptions documents the grecaptcha.render parameters Google recognises.
Callers may build one and pass ``to_options()`` to the renderer, or hand the
renderer a plain dict; the renderer itself forwards any mapping verbatim.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class RenderOptions(BaseModel):
    """Display options for one widget instance.

    Unknown keys are allowed and forwarded as-is, so parameters Google adds
    later work without a library release.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    theme: Optional[Literal["dark", "light"]] = None
    type: Optional[Literal["audio", "image"]] = None
    size: Optional[Literal["compact", "normal"]] = None
    tabindex: Optional[int] = None
    callback: Optional[str] = None
    expired_callback: Optional[str] = Field(default=None, alias="expired-callback")
    error_callback: Optional[str] = Field(default=None, alias="error-callback")

    def to_options(self) -> dict:
        """Return the options as grecaptcha expects them, unset keys dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)
