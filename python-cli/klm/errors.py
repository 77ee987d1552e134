"""
MSIKLM - exception types.
"""


class KlmError(Exception):
    """Base class for every error raised by this package."""


class ParseError(KlmError, ValueError):
    """A color, brightness or mode token could not be parsed."""


class EncodingError(KlmError, ValueError):
    """An inconsistent combination reached the frame encoder."""


class DeviceNotFound(KlmError):
    """No compatible keyboard is connected, or it could not be opened."""


class TransportError(KlmError, IOError):
    """A feature report write failed or wrote no bytes."""
