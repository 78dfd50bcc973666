"""
pixelconv - conversion between interleaved 8-bit pixel buffers and
channel-array images of normalized floats.
"""
from .config import Settings, settings, configure_logging
from .errors import (
    PixelFormatError,
    DimensionError,
    ChannelCountError,
    BufferSizeError,
    SampleRangeError,
)
from .image import Image, ChannelSource
from .codec import decode_interleaved, encode_rgba, quantize
from .rgba import RGBAImage

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "PixelFormatError",
    "DimensionError",
    "ChannelCountError",
    "BufferSizeError",
    "SampleRangeError",
    "Image",
    "ChannelSource",
    "decode_interleaved",
    "encode_rgba",
    "quantize",
    "RGBAImage",
]
