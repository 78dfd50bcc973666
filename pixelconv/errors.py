"""
Contract violations raised by the conversion layer.
"""


class PixelFormatError(ValueError):
    """Base class for malformed pixel data or image shapes."""


class DimensionError(PixelFormatError):
    """Width or height is negative."""


class ChannelCountError(PixelFormatError):
    """Channel count or channel index the container cannot represent."""


class BufferSizeError(PixelFormatError):
    """Byte buffer length does not match width * height * channels."""

    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(f"Expected buffer of {expected} bytes, got {actual}")


class SampleRangeError(PixelFormatError):
    """A sample falls outside [0.0, 1.0] while output clamping is disabled."""
