"""
MSIKLM - color, region, brightness and mode values.

The integer value of every enum member is its wire code.
"""

from dataclasses import dataclass
from enum import IntEnum


class Profile(IntEnum):
    """A predefined device color, or the marker for a custom RGB selection."""
    none   = 0
    red    = 1
    orange = 2
    yellow = 3
    green  = 4
    sky    = 5
    blue   = 6
    purple = 7
    white  = 8
    custom = 64  # same code as the raw-RGB command


class Region(IntEnum):
    left        = 1
    middle      = 2
    right       = 3
    logo        = 4
    front_left  = 5
    front_right = 6
    mouse       = 7


class Brightness(IntEnum):
    high   = 0
    medium = 1
    low    = 2
    off    = 3
    rgb    = 64  # brightness implied by the RGB channels


class Mode(IntEnum):
    normal  = 1
    gaming  = 2
    breathe = 3
    demo    = 4
    wave    = 5


# ── Preset color table ───────────────────────────────────────────────────
PRESETS = {
    Profile.none:   (0, 0, 0),
    Profile.red:    (255, 0, 0),
    Profile.orange: (255, 100, 0),
    Profile.yellow: (255, 255, 0),
    Profile.green:  (0, 255, 0),
    Profile.sky:    (0, 255, 255),
    Profile.blue:   (0, 0, 255),
    Profile.purple: (255, 0, 255),
    Profile.white:  (255, 255, 255),
}

# ── Zones ────────────────────────────────────────────────────────────────
PRIMARY_REGIONS = (Region.left, Region.middle, Region.right)
OPTIONAL_REGIONS = (Region.logo, Region.front_left, Region.front_right, Region.mouse)
ZONE_ORDER = PRIMARY_REGIONS + OPTIONAL_REGIONS

# Gaming mode only lights the left zone.
SINGLE_ZONE_MODES = frozenset({Mode.gaming})


@dataclass(frozen=True)
class Color:
    """Color of one zone: a preset profile or a custom RGB triple."""
    profile: Profile
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue):
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValueError(f"Channel value {channel!r} is not an integer")
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel value {channel} outside 0-255")
        if self.profile != Profile.custom and self.rgb != PRESETS[self.profile]:
            raise ValueError(f"Channels {self.rgb} do not match preset '{self.profile.name}'")

    @classmethod
    def preset(cls, profile):
        return cls(Profile(profile), *PRESETS[Profile(profile)])

    @classmethod
    def custom(cls, red, green, blue):
        return cls(Profile.custom, red, green, blue)

    @property
    def rgb(self):
        return (self.red, self.green, self.blue)

    @property
    def is_custom(self):
        return self.profile == Profile.custom

    def __str__(self):
        if self.is_custom:
            return f"[{self.red};{self.green};{self.blue}]"
        return self.profile.name
