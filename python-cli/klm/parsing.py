"""
MSIKLM - parsers for color, brightness and mode tokens.

All keywords are case-sensitive and must match exactly.
"""

import re

from klm.errors import ParseError
from klm.model import Brightness, Color, Mode, Profile

# ── Color keywords ───────────────────────────────────────────────────────
COLOR_NAMES = {
    "none":   Profile.none,
    "off":    Profile.none,
    "red":    Profile.red,
    "orange": Profile.orange,
    "yellow": Profile.yellow,
    "green":  Profile.green,
    "sky":    Profile.sky,
    "blue":   Profile.blue,
    "purple": Profile.purple,
    "white":  Profile.white,
}

BRIGHTNESS_NAMES = ("high", "medium", "low", "off")
MODE_NAMES = tuple(m.name for m in Mode)

_BRACKET_RE = re.compile(r"\[([0-9]+);([0-9]+);([0-9]+)\]")
_HEX_RE = re.compile(r"0[xX]([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def parse_color(color_str):
    """Parse a color keyword, '[r;g;b]' triple or '0xRRGGBB' hex code.

    Returns:
        Color: preset color for keywords, custom color otherwise.

    Raises:
        ParseError: the token matches none of the accepted forms.
    """
    if not isinstance(color_str, str):
        raise ParseError(f"Invalid color {color_str!r}")

    if color_str in COLOR_NAMES:
        return Color.preset(COLOR_NAMES[color_str])

    m = _BRACKET_RE.fullmatch(color_str)
    if m:
        channels = [int(v, 10) for v in m.groups()]
        if any(v > 255 for v in channels):
            raise ParseError(f"Color values in '{color_str}' must be in the range 0-255")
        return Color.custom(*channels)

    m = _HEX_RE.fullmatch(color_str)
    if m:
        return Color.custom(*(int(v, 16) for v in m.groups()))

    raise ParseError(f"Invalid color '{color_str}'")


def parse_brightness(brightness_str, allow_rgb=True):
    """Parse 'high', 'medium', 'low', 'off' and, if allowed, 'rgb'."""
    if brightness_str in BRIGHTNESS_NAMES or (allow_rgb and brightness_str == "rgb"):
        return Brightness[brightness_str]
    raise ParseError(f"Invalid brightness '{brightness_str}'")


def parse_mode(mode_str):
    """Parse one of 'normal', 'gaming', 'breathe', 'demo', 'wave'."""
    if mode_str in MODE_NAMES:
        return Mode[mode_str]
    raise ParseError(f"Invalid mode '{mode_str}'")
