"""
Widget HTML rendering: pure functions, no I/O.

The snippet uses reCAPTCHA's explicit render mode: an inline script defines
the onload callback that calls grecaptcha.render(), the api.js script tag
loads the widget and fires that callback, and an empty div is the anchor the
widget renders into.

Everything caller-supplied is escaped: attribute values through markupsafe,
JSON inside the inline script through jinja2's htmlsafe_json_dumps (so a
``</script>`` or quote in a key or option can't break out of the tag).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup

from recaptcha_v2.config import ONLOAD_CALLBACK
from recaptcha_v2.errors import ValidationError

ELEMENT_ID_PREFIX = "recaptcha_"
# Chars of the site key that go into the anchor id
ELEMENT_ID_KEY_CHARS = 10

_ONLOAD_SCRIPT = Markup(
    '<script type="text/javascript">'
    "var {callback} = function(){{grecaptcha.render({element_id},{params});}};"
    "</script>"
)
_API_SCRIPT = Markup('<script type="text/javascript" src="{src}" async defer></script>')
_CONTAINER = Markup('<div id="{element_id}"></div>')


def widget_element_id(site_key: str) -> str:
    """Return the DOM id of the widget anchor for *site_key*.

    Deterministic: the same key always maps to the same id, so the inline
    script and the container div agree.
    """
    return ELEMENT_ID_PREFIX + site_key[:ELEMENT_ID_KEY_CHARS]


def render_params(site_key: str, options: Mapping[str, Any]) -> dict[str, Any]:
    """Merge the site key with caller options, sitekey first."""
    return {"sitekey": site_key, **options}


def render_widget(
    site_key: Optional[str],
    options: Optional[Mapping[str, Any]],
    script_url: str,
) -> Markup:
    """Build the widget HTML snippet.

    Args:
        site_key: The site's public key. Required.
        options: grecaptcha.render parameters (theme, type, size, ...).
            Forwarded verbatim; ``None`` means no options.
        script_url: Fully built api.js URL, including the onload query.

    Raises:
        ValidationError: site_key is empty or options is not a mapping of
            JSON-serialisable values.
    """
    if not site_key or not isinstance(site_key, str):
        raise ValidationError(
            "Site key is required to render reCAPTCHA", field="site_key"
        )
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise ValidationError(
            "Options must be a mapping",
            field="options",
            details={"type": type(options).__name__},
        )

    element_id = widget_element_id(site_key)
    try:
        params_json = htmlsafe_json_dumps(
            render_params(site_key, options), separators=(",", ":")
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(
            "Options must be JSON-serialisable", field="options"
        ) from e

    return Markup("\n").join(
        [
            _ONLOAD_SCRIPT.format(
                callback=Markup(ONLOAD_CALLBACK),
                element_id=htmlsafe_json_dumps(element_id),
                params=params_json,
            ),
            _API_SCRIPT.format(src=script_url),
            _CONTAINER.format(element_id=element_id),
        ]
    )
