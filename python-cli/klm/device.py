"""
MSIKLM - HID device discovery and the keyboard session.
"""

import logging

from klm.errors import DeviceNotFound, EncodingError, TransportError
from klm.protocol import FRAME_SIZE, PRODUCT_ID, VENDOR_ID, _describe, encode_color, encode_mode

log = logging.getLogger(__name__)


class KeyboardSession:
    """Open handle to the keyboard.

    Use as a context manager so the handle is released on every exit path:

        with open_keyboard() as kb:
            kb.set_color(color, Region.left, Brightness.high)
            kb.set_mode(Mode.normal)
    """

    def __init__(self, dev, info=None):
        self._dev = dev
        self.info = info or {}

    @property
    def closed(self):
        return self._dev is None

    def send(self, frame):
        """Send one 8-byte frame as a feature report.

        Returns:
            int: number of bytes written.

        Raises:
            TransportError: closed session, hidapi error, or nothing written.
        """
        frame = bytes(frame)
        if len(frame) != FRAME_SIZE:
            raise EncodingError(f"Frame must be {FRAME_SIZE} bytes, got {len(frame)}")
        if self._dev is None:
            raise TransportError("Keyboard session is closed")

        log.debug("TX %s  (%s)", frame.hex(), _describe(frame))
        try:
            written = self._dev.send_feature_report(frame)
        except (OSError, ValueError) as e:
            log.error("Feature report %s failed: %s", frame.hex(), e)
            raise TransportError(f"Feature report failed: {e}") from e
        if written is None or written <= 0:
            log.error("Feature report %s wrote %s bytes", frame.hex(), written)
            raise TransportError(f"Feature report failed (wrote {written} bytes)")
        return written

    def set_color(self, color, region, brightness):
        """Set the color of one region; it shows once a mode is committed."""
        return self.send(encode_color(color, region, brightness))

    def set_mode(self, mode):
        return self.send(encode_mode(mode))

    def close(self):
        if self._dev is None:
            return
        dev, self._dev = self._dev, None
        dev.close()
        log.debug("Closed keyboard")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def open_keyboard():
    """Find and open the keyboard (VID 0x1770, PID 0xFF00).

    Returns:
        KeyboardSession

    Raises:
        DeviceNotFound: no matching device, or it could not be opened.
    """
    import hid

    devs = hid.enumerate(VENDOR_ID, PRODUCT_ID)
    if not devs:
        raise DeviceNotFound("No compatible keyboard found!")
    info = devs[0]

    dev = hid.device()
    try:
        dev.open_path(info["path"])
    except (OSError, ValueError) as e:
        # Linux denies hidraw access to normal users without a udev rule
        raise DeviceNotFound(
            f"Cannot open keyboard 0x{VENDOR_ID:04X}:0x{PRODUCT_ID:04X}: {e}\n"
            "  Try running as root."
        ) from e

    log.debug("Opened keyboard at %r", info["path"])
    return KeyboardSession(dev, info)


def keyboard_found():
    """Return True if the keyboard can be opened (it is closed again at once)."""
    try:
        session = open_keyboard()
    except DeviceNotFound as e:
        log.debug("%s", e)
        return False
    session.close()
    return True


def list_devices():
    """Return descriptors for every HID device on the system."""
    import hid

    return hid.enumerate(0, 0)
