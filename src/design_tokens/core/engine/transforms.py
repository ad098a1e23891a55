from __future__ import annotations

"""
Token Name and Value Transforms.

Name transforms turn a token path into a CSS custom-property name. Value
transforms convert resolved literal values into their CSS form. Both are
plain functions handed to the builder explicitly; there is no registry.
"""

import re
from typing import Any, Callable, Dict, Sequence

from design_tokens.domain.token_models import TokenLeaf

NameTransform = Callable[[Sequence[str]], str]

_WHITESPACE_RX = re.compile(r"\s+")
_HEX8_RX = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_HEX_RX = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6})$")
_UNITLESS_NUMBER_RX = re.compile(r"^-?\d+(\.\d+)?$")

SIZE_TYPES = frozenset({"dimension", "fontSize"})
COLOR_TYPES = frozenset({"color"})


# -----------------------------------------------------------------------------
# NAME TRANSFORMS
# -----------------------------------------------------------------------------

def normalize_segment(segment: Any) -> str:
    """
    Lowercase a path segment and collapse whitespace runs into single dashes.

    Existing dashes are preserved: ``"Deep Sage"`` gives ``"deep-sage"`` and
    ``"text-size"`` stays ``"text-size"``.
    """
    return _WHITESPACE_RX.sub("-", str(segment).lower())


def kebab_with_spaces(path: Sequence[str]) -> str:
    """Join normalized segments with dashes: ``["A B", "c-D"]`` gives ``"a-b-c-d"``."""
    return "-".join(normalize_segment(segment) for segment in path)


# -----------------------------------------------------------------------------
# VALUE TRANSFORMS
# -----------------------------------------------------------------------------

def size_px(value: Any) -> Any:
    """Append ``px`` to unitless numbers; values that carry a unit are kept."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return f"{_format_number(value)}px"
    if isinstance(value, str) and _UNITLESS_NUMBER_RX.match(value.strip()):
        return f"{value.strip()}px"
    return value


def color_css(value: Any) -> Any:
    """
    Render translucent 8-digit hex colors as ``rgba()``.

    Opaque ``#rrggbbff`` collapses to ``#rrggbb`` and other hex notations are
    lowercased. Named colors and functional notations pass through unchanged.
    """
    if not isinstance(value, str):
        return value

    text = value.strip()
    if _HEX_RX.match(text):
        return text.lower()

    match = _HEX8_RX.match(text)
    if not match:
        return value

    r, g, b, a = (int(part, 16) for part in match.groups())
    if a == 255:
        return text[:7].lower()
    alpha = round(a / 255, 2)
    return f"rgba({r}, {g}, {b}, {_format_number(alpha)})"


def transform_value(value: Any, token: TokenLeaf) -> Any:
    """Apply the value transform matching the token's type, if any."""
    transform = _VALUE_TRANSFORMS.get(token.type or "")
    return transform(value) if transform else value


def to_css_value(value: Any) -> str:
    """
    Serialize a resolved value for a CSS declaration.

    Lists are comma-joined (font stacks); objects are space-joined in key
    order (``{"width": "1px", "style": "solid", "color": "#000"}`` gives
    ``1px solid #000``).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, list):
        return ", ".join(to_css_value(item) for item in value)
    if isinstance(value, dict):
        return " ".join(to_css_value(item) for item in value.values())
    if value is None:
        return ""
    return str(value)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


_VALUE_TRANSFORMS: Dict[str, Callable[[Any], Any]] = {
    **{t: size_px for t in SIZE_TYPES},
    **{t: color_css for t in COLOR_TYPES},
}
