"""
In-memory interop with numpy arrays and Pillow images.
"""
import logging

import numpy as np
from PIL import Image as PILImage

from ..codec import decode_interleaved, encode_rgba
from ..errors import PixelFormatError
from ..image import ChannelSource, Image

logger = logging.getLogger(__name__)

# Pillow modes that map straight onto interleaved 8-bit channels
PIL_MODE_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


def from_array(pixels: np.ndarray) -> Image:
    """
    Convert an 8-bit numpy array to a channel-array image.

    Args:
        pixels: uint8 array (H, W) or (H, W, C)

    Returns:
        Image with C channels (1 for 2D input)
    """
    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]

    if pixels.ndim != 3:
        raise PixelFormatError(f"Expected (H, W) or (H, W, C) array, got shape {pixels.shape}")

    if pixels.dtype != np.uint8:
        raise PixelFormatError(f"Expected uint8 array, got {pixels.dtype}")

    height, width, num_channels = pixels.shape
    return decode_interleaved(np.ascontiguousarray(pixels), width, height, num_channels)


def to_array(image: ChannelSource) -> np.ndarray:
    """
    Convert an image with 3 or more channels to an RGBA numpy array.

    Args:
        image: Image to encode

    Returns:
        RGBA image as numpy array (H, W, 4)
    """
    rgba_bytes = encode_rgba(image)
    return np.frombuffer(rgba_bytes, dtype=np.uint8).reshape(image.height, image.width, 4).copy()


def from_pil(pil_image: PILImage.Image) -> Image:
    """
    Convert a Pillow image to a channel-array image.

    L, LA, RGB and RGBA keep their channel layout; every other mode is
    converted to RGBA first.
    """
    if pil_image.mode not in PIL_MODE_CHANNELS:
        logger.debug(f"Converting Pillow mode {pil_image.mode} to RGBA")
        pil_image = pil_image.convert("RGBA")

    width, height = pil_image.size
    num_channels = PIL_MODE_CHANNELS[pil_image.mode]
    return decode_interleaved(pil_image.tobytes(), width, height, num_channels)


def to_pil(image: ChannelSource) -> PILImage.Image:
    """
    Convert an image with 3 or more channels to a Pillow RGBA image.
    """
    return PILImage.frombytes("RGBA", (image.width, image.height), encode_rgba(image))
