"""Color detection and hex normalization for variable values."""

import re
import math
import logging
from typing import Optional, Sequence, Set

import webcolors

from .models import Variable
from ..utils.config import FALLBACK_COLOR, MAX_ALIAS_DEPTH

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')
_RGB_PREFIX = re.compile(r'^rgba?\(', re.IGNORECASE)
_HSL_PREFIX = re.compile(r'^hsla?\(', re.IGNORECASE)
_VAR_PREFIX = re.compile(r'^var\(--')
_VAR_REFERENCE = re.compile(r'^var\(\s*(--[a-zA-Z0-9-]+)')
_RGB_PATTERN = re.compile(r'^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)', re.IGNORECASE)
_HSL_PATTERN = re.compile(r'^hsla?\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%', re.IGNORECASE)

TRANSPARENT = 'transparent'
CURRENT_COLOR = 'currentColor'

# Keywords accepted as colors that have no hex form
SPECIAL_COLORS = {
    TRANSPARENT: TRANSPARENT,
    CURRENT_COLOR.lower(): CURRENT_COLOR,
}


def named_color_to_hex(name: str) -> Optional[str]:
    """Look up a CSS named color, case-insensitively.

    Returns:
        Lowercase hex string, the keyword itself for ``transparent`` and
        ``currentColor``, or None for an unknown name
    """
    name = name.strip().lower()
    if not name:
        return None
    if name in SPECIAL_COLORS:
        return SPECIAL_COLORS[name]
    try:
        return webcolors.name_to_hex(name)
    except ValueError:
        return None


def is_color(value: str) -> bool:
    """Check whether a value looks like a color.

    ``var(--...)`` references count as colors without looking at what they
    point to.
    """
    value = (value or '').strip()
    return bool(
        _HEX_PATTERN.match(value)
        or _RGB_PREFIX.match(value)
        or _HSL_PREFIX.match(value)
        or named_color_to_hex(value) is not None
        or _VAR_PREFIX.match(value)
    )


def _channel(value: float) -> int:
    # Half-up rounding, clamped to a byte
    return max(0, min(255, int(math.floor(value + 0.5))))


def _rgb_to_hex(r: float, g: float, b: float) -> str:
    return '#' + ''.join(f"{_channel(c):02x}" for c in (r, g, b))


def hsl_to_hex(h: int, s: int, l: int) -> str:
    """Convert HSL with h in degrees and s, l in percent to hex."""
    c = (1 - abs(2 * l / 100 - 1)) * s / 100
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l / 100 - c / 2

    if h < 60:
        r, g, b = c, x, 0
    elif h < 120:
        r, g, b = x, c, 0
    elif h < 180:
        r, g, b = 0, c, x
    elif h < 240:
        r, g, b = 0, x, c
    elif h < 300:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    return _rgb_to_hex((r + m) * 255, (g + m) * 255, (b + m) * 255)


def _resolve_alias(value: str, variables: Optional[Sequence[Variable]],
                   seen: Set[str]) -> str:
    match = _VAR_REFERENCE.match(value)
    if not match or not variables:
        return FALLBACK_COLOR

    name = match.group(1)
    if name in seen or len(seen) >= MAX_ALIAS_DEPTH:
        logger.debug(f"Alias chain through {name} does not terminate")
        return FALLBACK_COLOR

    referenced = next((v for v in variables if v.name == name), None)
    if referenced is None:
        return FALLBACK_COLOR
    return _to_hex(referenced.value, variables, seen | {name})


def _to_hex(value: str, variables: Optional[Sequence[Variable]], seen: Set[str]) -> str:
    value = (value or '').strip()

    if _VAR_PREFIX.match(value):
        return _resolve_alias(value, variables, seen)

    if _HEX_PATTERN.match(value):
        if len(value) == 4:
            return '#' + ''.join(digit * 2 for digit in value[1:]).lower()
        return value.lower()

    match = _RGB_PATTERN.match(value)
    if match:
        return _rgb_to_hex(*(int(group) for group in match.groups()))

    match = _HSL_PATTERN.match(value)
    if match:
        return hsl_to_hex(*(int(group) for group in match.groups()))

    return named_color_to_hex(value) or FALLBACK_COLOR


def to_hex(value: str, variables: Optional[Sequence[Variable]] = None) -> str:
    """Normalize a color value to a hex string.

    ``var()`` aliases are looked up in ``variables`` and resolved
    recursively; a missing referent or a cyclic chain gives the fallback
    color. ``transparent`` and ``currentColor`` are returned as-is.

    Args:
        value: Raw variable value
        variables: All variables of the current listing, for alias lookup

    Returns:
        Lowercase hex string, ``transparent``, ``currentColor`` or
        ``#000000`` when the value is not understood
    """
    return _to_hex(value, variables, frozenset())


__all__ = ['SPECIAL_COLORS', 'named_color_to_hex', 'TRANSPARENT', 'CURRENT_COLOR', 'is_color', 'hsl_to_hex', 'to_hex']
