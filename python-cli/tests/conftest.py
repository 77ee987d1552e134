"""Shared fixtures: a fake `hid` module so no hardware or hidapi is needed."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from klm.protocol import PRODUCT_ID, VENDOR_ID

KEYBOARD_INFO = {
    "path": b"/dev/hidraw3",
    "vendor_id": VENDOR_ID,
    "product_id": PRODUCT_ID,
    "serial_number": "",
    "release_number": 0x0110,
    "manufacturer_string": "MSI EPF USB",
    "product_string": "MSI EPF USB",
    "interface_number": 0,
}


def _make_fake_hid(devices):
    fake = MagicMock(name="hid")
    handle = MagicMock(name="hid.device()")
    handle.send_feature_report.side_effect = lambda buf: len(buf)
    fake.device.return_value = handle
    fake.enumerate.side_effect = (
        lambda vid=0, pid=0: [d for d in devices
                              if vid in (0, d["vendor_id"]) and pid in (0, d["product_id"])])
    return fake


@pytest.fixture
def fake_hid():
    """`hid` module with the keyboard attached."""
    fake = _make_fake_hid([KEYBOARD_INFO])
    with patch.dict(sys.modules, {"hid": fake}):
        yield fake


@pytest.fixture
def empty_hid():
    """`hid` module with no devices attached."""
    fake = _make_fake_hid([])
    with patch.dict(sys.modules, {"hid": fake}):
        yield fake


def sent_frames(fake):
    """Frames passed to send_feature_report, as bytes, in order."""
    handle = fake.device.return_value
    return [bytes(c.args[0]) for c in handle.send_feature_report.call_args_list]
