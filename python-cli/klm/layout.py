"""
MSIKLM - zone layout: color list parsing and per-zone command routing.
"""

from klm.errors import ParseError
from klm.model import Brightness, Color, OPTIONAL_REGIONS, PRIMARY_REGIONS, Profile, ZONE_ORDER
from klm.parsing import parse_color

MAX_ZONES = len(ZONE_ORDER)


def parse_colors(colors_str, single_zone=False):
    """Parse a comma separated color list into one color per zone.

    Colors are assigned in zone order (left, middle, right, logo,
    front_left, front_right, mouse). A single color fills the three primary
    zones unless `single_zone` is set.

    Args:
        colors_str:  e.g. 'red' or 'red,[0;255;0],0x0000ff' (no spaces).
        single_zone: True when the selected mode only lights one zone.

    Returns:
        list of Color, index i belonging to ZONE_ORDER[i].

    Raises:
        ParseError: empty or malformed token, or more than 7 colors.
    """
    if not isinstance(colors_str, str) or not colors_str:
        raise ParseError("No color supplied")

    tokens = colors_str.split(",")
    if len(tokens) > MAX_ZONES:
        raise ParseError(f"At most {MAX_ZONES} colors can be supplied, got {len(tokens)}")

    colors = [parse_color(t) for t in tokens]

    if len(colors) == 1 and not single_zone:
        colors = colors * len(PRIMARY_REGIONS)
    return colors


def resolve_brightness(color, region, brightness):
    """Brightness to encode `color` with for `region`.

    Custom colors and the optional zones can only be sent with the raw-RGB
    command, so they resolve to Brightness.rgb. Brightness.off on a primary
    zone stays off whatever the color.
    """
    if brightness == Brightness.rgb:
        return Brightness.rgb
    if brightness == Brightness.off and region in PRIMARY_REGIONS:
        return Brightness.off
    if color.is_custom or region in OPTIONAL_REGIONS:
        return Brightness.rgb
    return brightness


def zone_plan(colors, brightness):
    """Pair each color with its region and resolved brightness.

    With Brightness.off, the primary zones are switched off (color 'none',
    custom colors included); the optional zones keep their color.

    Returns:
        list of (Color, Region, Brightness) in zone order.
    """
    plan = []
    for color, region in zip(colors, ZONE_ORDER):
        level = resolve_brightness(color, region, brightness)
        if level == Brightness.off:
            color = Color.preset(Profile.none)
        plan.append((color, region, level))
    return plan
