"""Tests for the domain values."""

import pytest

from klm.model import (OPTIONAL_REGIONS, PRESETS, PRIMARY_REGIONS, ZONE_ORDER,
                       Brightness, Color, Profile, Region)


def test_region_codes_are_wire_codes():
    assert [int(r) for r in ZONE_ORDER] == [1, 2, 3, 4, 5, 6, 7]
    assert set(PRIMARY_REGIONS) | set(OPTIONAL_REGIONS) == set(Region)


def test_rgb_brightness_shares_custom_code():
    assert Brightness.rgb == Profile.custom == 64


def test_presets_cover_every_named_profile():
    assert set(PRESETS) == set(Profile) - {Profile.custom}


def test_preset_constructor():
    c = Color.preset(Profile.purple)
    assert c.rgb == (255, 0, 255)
    assert not c.is_custom
    assert str(c) == "purple"


def test_custom_constructor():
    c = Color.custom(1, 2, 3)
    assert c.is_custom
    assert str(c) == "[1;2;3]"


def test_preset_with_wrong_channels_rejected():
    with pytest.raises(ValueError):
        Color(Profile.red, 0, 255, 0)


@pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
def test_channel_range(rgb):
    with pytest.raises(ValueError):
        Color.custom(*rgb)


def test_immutable():
    c = Color.custom(1, 2, 3)
    with pytest.raises(AttributeError):
        c.red = 5


@pytest.mark.parametrize("rgb", [(1.5, 0, 0), (0, True, 0), (0, 0, "7"), (None, 0, 0)])
def test_channels_must_be_integers(rgb):
    with pytest.raises(ValueError):
        Color.custom(*rgb)
