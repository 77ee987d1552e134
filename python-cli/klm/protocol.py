"""
MSIKLM HID Protocol - constants, frame encoders and decoder.

Every request is an 8-byte feature report:

    [1, 2, command, target, payload0, payload1, payload2, 236]
"""

from klm.errors import EncodingError
from klm.model import Brightness, Color, Mode, Profile, Region

# ── USB Identifiers ──────────────────────────────────────────────────────
VENDOR_ID  = 0x1770
PRODUCT_ID = 0xFF00

# ── Frame layout ─────────────────────────────────────────────────────────
FRAME_SIZE = 8
HEADER = (1, 2)
EOR = 236  # end of request

CMD_RGB    = 64  # raw color
CMD_COMMIT = 65  # mode
CMD_SET    = 66  # preset color + brightness


# ── Frame builder ────────────────────────────────────────────────────────
def _build(cmd, target, payload=(0, 0, 0)):
    """Build an 8-byte feature report frame.

    Args:
        cmd:     Command byte (CMD_RGB, CMD_COMMIT or CMD_SET).
        target:  Region code for color commands, mode code for CMD_COMMIT.
        payload: Three payload bytes.

    Returns:
        bytes: 8-byte frame.
    """
    f = bytearray(FRAME_SIZE)
    f[0], f[1] = HEADER
    f[2] = cmd
    f[3] = target
    f[4:7] = bytes(payload)
    f[7] = EOR
    return bytes(f)


def encode_color(color, region, brightness):
    """Encode a color request for one region.

    `Brightness.rgb` selects the raw-RGB command carrying the channel values.
    Any other level selects the preset command carrying the preset code and
    the level; `Brightness.off` always sends preset code 0.

    Raises:
        EncodingError: unknown region/brightness, or a custom color paired
            with a discrete brightness level.
    """
    if not isinstance(color, Color):
        raise EncodingError(f"Not a color: {color!r}")
    if isinstance(region, bool) or isinstance(brightness, bool):
        raise EncodingError(f"Invalid region / brightness {region!r}, {brightness!r}")
    try:
        region = Region(region)
    except ValueError:
        raise EncodingError(f"Invalid region code {region!r}") from None
    try:
        brightness = Brightness(brightness)
    except ValueError:
        raise EncodingError(f"Invalid brightness {brightness!r}") from None

    if brightness == Brightness.rgb:
        return _build(CMD_RGB, region, color.rgb)

    if color.is_custom:
        raise EncodingError(
            f"Custom color {color} cannot be sent with brightness '{brightness.name}'")
    preset = 0 if brightness == Brightness.off else int(color.profile)
    return _build(CMD_SET, region, (preset, brightness, 0))


def encode_mode(mode):
    """Encode the commit request that activates `mode`."""
    if isinstance(mode, bool):
        raise EncodingError(f"Invalid mode {mode!r}")
    try:
        mode = Mode(mode)
    except ValueError:
        raise EncodingError(f"Invalid mode {mode!r}") from None
    return _build(CMD_COMMIT, mode)


def decode_frame(frame):
    """Decode a frame produced by one of the encoders into a dict.

    Raises:
        EncodingError: wrong length, header, end marker or command byte.
    """
    f = bytes(frame)
    if len(f) != FRAME_SIZE or tuple(f[0:2]) != HEADER or f[7] != EOR:
        raise EncodingError(f"Malformed frame {f.hex()}")
    cmd = f[2]
    try:
        return _decode_fields(cmd, f)
    except ValueError as e:
        raise EncodingError(f"Malformed frame {f.hex()}: {e}") from None


def _decode_fields(cmd, f):
    if cmd == CMD_RGB:
        return {"command": "rgb", "region": Region(f[3]),
                "color": Color.custom(f[4], f[5], f[6])}
    if cmd == CMD_SET:
        return {"command": "set", "region": Region(f[3]),
                "profile": Profile(f[4]), "brightness": Brightness(f[5])}
    if cmd == CMD_COMMIT:
        return {"command": "commit", "mode": Mode(f[3])}
    raise ValueError(f"unknown command byte {cmd}")


def _describe(frame):
    """One-line human readable summary of a frame, for logging."""
    try:
        fields = decode_frame(frame)
    except EncodingError:
        return "?"
    parts = [fields.pop("command")]
    for key, value in fields.items():
        parts.append(f"{key}={getattr(value, 'name', value)}")
    return " ".join(parts)
