"""
MSIKLM - commands. Each cmd_* function returns a process exit code.
"""

import logging

from klm.device import keyboard_found, list_devices, open_keyboard
from klm.errors import KlmError
from klm.layout import zone_plan
from klm.model import Brightness, Mode

log = logging.getLogger(__name__)


def apply_configuration(session, colors=(), brightness=Brightness.high, mode=None):
    """Send one color frame per zone, then commit the mode.

    The mode is always sent (normal when None) since colors only take effect
    once a mode is committed. The first failed send aborts the sequence;
    frames already sent stay applied.

    Returns:
        int: number of frames sent.
    """
    sent = 0
    for color, region, level in zone_plan(colors, brightness):
        session.set_color(color, region, level)
        sent += 1
    session.set_mode(Mode.normal if mode is None else mode)
    return sent + 1


def cmd_apply(colors=(), brightness=Brightness.high, mode=None):
    desc = []
    if colors:
        desc.append("colors=" + ",".join(str(c) for c in colors))
        desc.append(f"brightness={brightness.name}")
    desc.append(f"mode={(mode or Mode.normal).name}")
    log.info("Applying %s", "  ".join(desc))

    try:
        with open_keyboard() as kb:
            sent = apply_configuration(kb, colors, brightness, mode)
    except KlmError as e:
        print(e)
        return 1

    log.info("%d frame(s) sent", sent)
    return 0


def cmd_test():
    if keyboard_found():
        print("Compatible keyboard found!")
    else:
        print("No compatible keyboard found!")
    return 0


def cmd_list():
    devs = list_devices()
    if not devs:
        print("No HID device found!")
        return 0
    for d in devs:
        print(f"Device: {d.get('product_string')}")
        print(f"    Device Vendor ID:        0x{d.get('vendor_id', 0):04X}")
        print(f"    Device Product ID:       0x{d.get('product_id', 0):04X}")
        print(f"    Device Serial Number:    {d.get('serial_number')}")
        print(f"    Device Manufacturer:     {d.get('manufacturer_string')}")
        print(f"    Device Path:             {_path(d.get('path'))}")
        print(f"    Device Interface Number: {d.get('interface_number')}")
        print(f"    Device Release Number:   {d.get('release_number')}")
        print()
    return 0


def _path(p):
    if isinstance(p, bytes):
        return p.decode(errors="replace")
    return p
