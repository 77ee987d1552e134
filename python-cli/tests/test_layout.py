"""Tests for color list parsing and per-zone routing."""

import pytest

from klm.errors import ParseError
from klm.layout import parse_colors, resolve_brightness, zone_plan
from klm.model import Brightness, Color, Profile, Region

RED = Color.preset(Profile.red)
GREEN = Color.preset(Profile.green)
BLUE = Color.preset(Profile.blue)
NONE = Color.preset(Profile.none)


class TestParseColors:

    def test_single_color_fills_primary_zones(self):
        assert parse_colors("red") == [RED, RED, RED]

    def test_single_zone_no_expansion(self):
        assert parse_colors("red", single_zone=True) == [RED]

    def test_positional(self):
        assert parse_colors("red,green,blue") == [RED, GREEN, BLUE]

    def test_two_colors_not_expanded(self):
        assert parse_colors("red,green") == [RED, GREEN]

    def test_seven_zones(self):
        colors = parse_colors("red,green,blue,[1;2;3],0x040506,white,none")
        assert len(colors) == 7
        assert colors[3] == Color.custom(1, 2, 3)
        assert colors[4] == Color.custom(4, 5, 6)

    def test_more_than_seven(self):
        with pytest.raises(ParseError):
            parse_colors(",".join(["red"] * 8))

    @pytest.mark.parametrize("arg", [
        "red,grn,blue", "red,green,", ",red", "red,,blue", "red, green", "", "red;green",
    ])
    def test_any_bad_token_fails_whole_list(self, arg):
        with pytest.raises(ParseError):
            parse_colors(arg)


class TestRouting:

    def test_preset_on_primary_keeps_level(self):
        assert resolve_brightness(RED, Region.left, Brightness.low) == Brightness.low

    def test_custom_uses_rgb(self):
        assert resolve_brightness(Color.custom(1, 2, 3), Region.left, Brightness.low) == Brightness.rgb

    @pytest.mark.parametrize("region", [Region.logo, Region.front_left, Region.front_right, Region.mouse])
    def test_optional_zones_use_rgb(self, region):
        assert resolve_brightness(RED, region, Brightness.high) == Brightness.rgb

    def test_explicit_rgb(self):
        assert resolve_brightness(RED, Region.middle, Brightness.rgb) == Brightness.rgb

    def test_off_custom_on_primary_stays_off(self):
        assert resolve_brightness(Color.custom(1, 2, 3), Region.right, Brightness.off) == Brightness.off

    def test_off_custom_on_optional_zone_uses_rgb(self):
        assert resolve_brightness(Color.custom(1, 2, 3), Region.mouse, Brightness.off) == Brightness.rgb


class TestZonePlan:

    def test_regions_in_order(self):
        plan = zone_plan([RED, GREEN, BLUE], Brightness.medium)
        assert plan == [(RED, Region.left, Brightness.medium),
                        (GREEN, Region.middle, Brightness.medium),
                        (BLUE, Region.right, Brightness.medium)]

    def test_off_disables_every_primary_zone(self):
        teal = Color.custom(0, 128, 128)
        plan = zone_plan([RED, teal, BLUE, GREEN], Brightness.off)
        assert plan == [(NONE, Region.left, Brightness.off),
                        (NONE, Region.middle, Brightness.off),
                        (NONE, Region.right, Brightness.off),
                        (GREEN, Region.logo, Brightness.rgb)]

    def test_empty(self):
        assert zone_plan([], Brightness.high) == []
