"""
MSIKLM - CLI entry point (argparse).

    msiklm <colors> [<brightness>] [<mode>]
    msiklm <mode>
    msiklm help | test | list
"""

import argparse
import logging

from klm.errors import ParseError
from klm.layout import parse_colors
from klm.model import Brightness, SINGLE_ZONE_MODES
from klm.parsing import BRIGHTNESS_NAMES, COLOR_NAMES, MODE_NAMES, parse_brightness, parse_mode

HELP = f"""\
MSIKLM - MSI Keyboard Light Manager

Configure the SteelSeries keyboard of MSI gaming notebooks. Arguments:

help
    show this help

test
    test whether a compatible keyboard is connected

list
    list all HID devices

<color>  OR  <left>,<middle>[,<right>,<logo>,<front_left>,<front_right>,<mouse>]
    set the color of each zone at full brightness; several colors are
    separated by commas without spaces, e.g. 'red' or 'red,green,blue'
    (a single color is used for left, middle and right)
    predefined colors: {", ".join(COLOR_NAMES)}
    custom colors: '[r;g;b]' with values 0-255 (quote it for the shell)
    or a hex code '0xRRGGBB'

<colors> <brightness>
    set the colors at a brightness: {", ".join(BRIGHTNESS_NAMES)}, rgb
    ('rgb' sends the colors' channel values as they are)

<colors> <mode>
    set the colors and activate a mode: {", ".join(MODE_NAMES)}

<colors> <brightness> <mode>
    set the colors with a brightness and activate a mode

<mode>
    only activate a mode and keep the colors
"""

USAGE_HINT = "use 'msiklm help' to show a list of valid arguments"


def _parse_config(tokens):
    """Turn positional tokens into (colors, brightness, mode).

    Raises:
        ParseError: with a message naming the rejected argument.
    """
    if len(tokens) == 1:
        try:
            return [], Brightness.high, parse_mode(tokens[0])
        except ParseError:
            pass

    brightness = Brightness.high
    mode = None
    if len(tokens) == 2:
        try:
            brightness = parse_brightness(tokens[1])
        except ParseError:
            try:
                mode = parse_mode(tokens[1])
            except ParseError:
                raise ParseError(f"Invalid brightness / mode argument '{tokens[1]}'") from None
    elif len(tokens) == 3:
        try:
            brightness = parse_brightness(tokens[1])
        except ParseError:
            raise ParseError(f"Invalid brightness argument '{tokens[1]}'") from None
        try:
            mode = parse_mode(tokens[2])
        except ParseError:
            raise ParseError(f"Invalid mode argument '{tokens[2]}'") from None

    try:
        colors = parse_colors(tokens[0], single_zone=mode in SINGLE_ZONE_MODES)
    except ParseError:
        if len(tokens) == 1:
            raise ParseError(f"Invalid argument '{tokens[0]}'") from None
        raise ParseError(f"Invalid color argument '{tokens[0]}'") from None
    return colors, brightness, mode


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="msiklm",
        description="MSI Keyboard Light Manager - USB HID lighting control",
        usage="%(prog)s [-v] <colors> [<brightness>] [<mode>] | <mode> | help | test | list",
    )
    parser.add_argument("tokens", nargs="*", help="see 'msiklm help'")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every frame sent to the keyboard")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tokens = args.tokens
    if not tokens:
        print(f"No arguments supplied; {USAGE_HINT}")
        return 1
    if len(tokens) > 3:
        print(f"Invalid arguments supplied; {USAGE_HINT}")
        return 1

    from klm.commands import cmd_apply, cmd_list, cmd_test

    if len(tokens) == 1:
        if tokens[0] == "help":
            print(HELP)
            return 0
        elif tokens[0] == "test":
            return cmd_test()
        elif tokens[0] == "list":
            return cmd_list()

    try:
        colors, brightness, mode = _parse_config(tokens)
    except ParseError as e:
        print(f"{e} - {USAGE_HINT}")
        return 1

    return cmd_apply(colors, brightness, mode)
