"""
Conversion between interleaved 8-bit buffers and channel-array images.

Decoding is a pure scale (``byte / 255.0``). Encoding quantizes each
``sample * 255`` to the nearest integer; truncation would darken values
sitting just below an integer boundary.
"""
import logging
from typing import Callable, Optional

import numpy as np

from . import config
from .config import Settings
from .errors import BufferSizeError, ChannelCountError, PixelFormatError, SampleRangeError
from .image import ChannelSource, Image, validate_shape

logger = logging.getLogger(__name__)

MAX_BYTE = 255
BYTE_SCALE = 255.0  # divisor, never a truncated reciprocal literal


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

def _as_byte_array(data) -> np.ndarray:
    """View bytes-like input (or an integer sequence) as flat uint8."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        if len(data) == 0:
            return np.empty(0, dtype=np.uint8)
        return np.frombuffer(data, dtype=np.uint8)

    arr = np.asarray(data).reshape(-1)
    if arr.dtype == np.uint8:
        return arr
    if arr.size and (arr.dtype.kind not in "iu" or arr.min() < 0 or arr.max() > MAX_BYTE):
        raise PixelFormatError(f"Expected 8-bit unsigned values, got dtype {arr.dtype}")
    return arr.astype(np.uint8)


def _decode_rgb(src: np.ndarray, channels: np.ndarray) -> None:
    np.divide(src[0::3], BYTE_SCALE, out=channels[0], dtype=np.float64)
    np.divide(src[1::3], BYTE_SCALE, out=channels[1], dtype=np.float64)
    np.divide(src[2::3], BYTE_SCALE, out=channels[2], dtype=np.float64)


def _decode_rgba(src: np.ndarray, channels: np.ndarray) -> None:
    np.divide(src[0::4], BYTE_SCALE, out=channels[0], dtype=np.float64)
    np.divide(src[1::4], BYTE_SCALE, out=channels[1], dtype=np.float64)
    np.divide(src[2::4], BYTE_SCALE, out=channels[2], dtype=np.float64)
    np.divide(src[3::4], BYTE_SCALE, out=channels[3], dtype=np.float64)


def _decode_general(src: np.ndarray, channels: np.ndarray) -> None:
    num_channels = channels.shape[0]
    pixels = src.reshape(-1, num_channels)
    for c in range(num_channels):
        np.divide(pixels[:, c], BYTE_SCALE, out=channels[c], dtype=np.float64)


# Channel count -> unrolled decoder; anything else takes _decode_general
DECODE_FAST_PATHS: dict[int, Callable[[np.ndarray, np.ndarray], None]] = {
    3: _decode_rgb,
    4: _decode_rgba,
}


def decode_interleaved(
    data,
    width: int,
    height: int,
    num_channels: int,
    fast_path: bool = True,
) -> Image:
    """
    Build an image from interleaved 8-bit channel data.

    Args:
        data: Bytes-like buffer (RGBRGB..., RGBARGBA..., or any channel
            count), row-major, tightly packed
        width: Width in pixels
        height: Height in pixels
        num_channels: Bytes per pixel; becomes the image's channel count
        fast_path: Use the unrolled 3/4-channel decoders when available

    Returns:
        New Image with samples ``byte / 255.0``

    Raises:
        BufferSizeError: If len(data) != width * height * num_channels
        DimensionError, ChannelCountError: If the shape is not representable
    """
    validate_shape(width, height, num_channels)
    src = _as_byte_array(data)

    expected = width * height * num_channels
    if src.size != expected:
        raise BufferSizeError(src.size, expected)

    image = Image(width, height, num_channels, zero_initialize=False)

    decoder = DECODE_FAST_PATHS.get(num_channels) if fast_path else None
    if decoder is None:
        decoder = _decode_general

    logger.debug(f"Decoding {width}x{height} image, {num_channels} channels via {decoder.__name__}")
    decoder(src, image.channels)
    return image


# ---------------------------------------------------------------------------
# Encoder
# ---------------------------------------------------------------------------

def _round_half_even(scaled: np.ndarray) -> np.ndarray:
    return np.rint(scaled)


def _round_half_away(scaled: np.ndarray) -> np.ndarray:
    return np.copysign(np.floor(np.abs(scaled) + 0.5), scaled)


ROUNDING_MODES: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "half_even": _round_half_even,
    "half_away": _round_half_away,
}


def quantize(samples, settings: Optional[Settings] = None) -> np.ndarray:
    """
    Convert normalized samples to bytes, rounding to nearest.

    Args:
        samples: Float samples, nominally in [0.0, 1.0]
        settings: Overrides the module settings

    Returns:
        uint8 array of the same length

    Raises:
        SampleRangeError: On NaN, or on out-of-range samples when
            clamp_output is off
    """
    settings = settings or config.settings

    rounded = ROUNDING_MODES[settings.rounding](np.asarray(samples, dtype=np.float64) * BYTE_SCALE)

    if rounded.size == 0:
        return rounded.astype(np.uint8)

    if np.isnan(rounded).any():
        raise SampleRangeError("Cannot quantize NaN samples")

    if settings.clamp_output:
        np.clip(rounded, 0, MAX_BYTE, out=rounded)
    elif rounded.min() < 0 or rounded.max() > MAX_BYTE:
        raise SampleRangeError(
            f"Samples outside [0.0, 1.0]: min={rounded.min() / BYTE_SCALE}, "
            f"max={rounded.max() / BYTE_SCALE}"
        )

    return rounded.astype(np.uint8)


def encode_rgba(image: ChannelSource, settings: Optional[Settings] = None) -> bytes:
    """
    Get RGBA bytes from any image with at least 3 channels.

    Works directly on the source channels, so there is no need to build an
    RGBAImage first. Channels past the fourth are ignored; a 3-channel image
    gets an opaque (255) alpha byte.

    Args:
        image: Object exposing width, height, num_channels and channel(index)
        settings: Overrides the module settings

    Returns:
        ``width * height * 4`` bytes, row-major, RGBA per pixel

    Raises:
        ChannelCountError: If the image has fewer than 3 channels
        SampleRangeError: See ``quantize``
    """
    num_channels = image.num_channels
    if num_channels < 3:
        raise ChannelCountError(f"Expected at least 3 channels to encode RGBA, got {num_channels}")

    num_pixels = image.width * image.height
    out = np.empty((num_pixels, 4), dtype=np.uint8)

    has_alpha = num_channels > 3
    logger.debug(
        f"Encoding {image.width}x{image.height} image, {num_channels} channels, "
        f"{'source' if has_alpha else 'opaque'} alpha"
    )

    # Branch once per image, not per pixel
    sampled_channels = 4 if has_alpha else 3
    for c in range(sampled_channels):
        samples = np.asarray(image.channel(c))
        if samples.size != num_pixels:
            raise PixelFormatError(f"Channel {c} has {samples.size} samples, expected {num_pixels}")
        out[:, c] = quantize(samples.reshape(-1), settings)

    if not has_alpha:
        out[:, 3] = MAX_BYTE

    return out.tobytes()
