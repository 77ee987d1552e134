#!/usr/bin/env python3
# /// script
# dependencies = ["hidapi>=0.14"]
# ///
"""
MSIKLM - MSI Keyboard Light Manager - Python CLI

Configure the SteelSeries RGB keyboard of MSI gaming notebooks via USB HID
feature reports (VID 0x1770, PID 0xFF00).

Usage:
    sudo uv run msiklm.py <arguments>

Arguments:
    <colors> [<brightness>] [<mode>]   Set zone colors, brightness and mode
    <mode>                             Only activate a mode
    test                               Check for a compatible keyboard
    list                               List all HID devices
    help                               Show detailed help
"""

import sys
from klm.cli import main

if __name__ == "__main__":
    sys.exit(main())
