"""
RGBA specialization of the channel-array image.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Union

import numpy as np

from .codec import decode_interleaved, encode_rgba
from .config import Settings
from .filters import ChannelFilter
from .image import ChannelSource, Image

logger = logging.getLogger(__name__)

NUM_RGBA_CHANNELS = 4
ALPHA_CHANNEL = 3
OPAQUE = 1.0


class RGBAImage(Image):
    """
    A 4-channel image: channels 0-2 are color, channel 3 is alpha.

    Filtering without a channel index leaves alpha alone.
    """

    def __init__(self, width: int, height: int, zero_initialize: bool = True):
        """
        Args:
            width: Width in pixels
            height: Height in pixels
            zero_initialize: Start as transparent black
        """
        super().__init__(width, height, NUM_RGBA_CHANNELS, zero_initialize)

    @classmethod
    def from_image(cls, source: ChannelSource) -> RGBAImage:
        """
        Copy an image of any channel count into RGBA form.

        Up to four channels are copied by value. Missing color channels stay
        black and a missing alpha channel is set to opaque; channels past the
        fourth are dropped.

        Args:
            source: Image to copy; not retained

        Returns:
            New RGBAImage
        """
        num_copied = min(NUM_RGBA_CHANNELS, source.num_channels)
        has_alpha = num_copied == NUM_RGBA_CHANNELS

        # Every sample gets overwritten when the source has alpha
        image = cls(source.width, source.height, zero_initialize=not has_alpha)

        for c in range(num_copied):
            np.copyto(image.channel(c), np.asarray(source.channel(c)).reshape(-1))

        if not has_alpha:
            image.channel(ALPHA_CHANNEL).fill(OPAQUE)

        logger.debug(
            f"Built RGBA image from {source.num_channels}-channel source "
            f"({source.width}x{source.height})"
        )
        return image

    # Decoding yields a generic Image with the buffer's channel count
    image_from_bytes = staticmethod(decode_interleaved)

    def get_rgba_bytes(self, settings: Optional[Settings] = None) -> bytes:
        """
        Get pixel data as bytes.

        Returns:
            ``width * height * 4`` bytes, row-major, RGBA per pixel
        """
        return encode_rgba(self, settings)

    def copy_rgba(self) -> RGBAImage:
        """Copy this image, keeping the RGBA type."""
        copied = RGBAImage(self.width, self.height)
        copied.paste(self)
        return copied

    def filter(
        self,
        channel_filter: Union[ChannelFilter, Callable],
        channel: Optional[int] = None,
    ) -> None:
        """
        Apply a filter in place.

        Args:
            channel_filter: ChannelFilter or plain callable
            channel: Single channel to filter, alpha included; when None,
                every channel except alpha
        """
        if channel is not None:
            super().filter(channel_filter, channel)
            return

        for c in range(self.num_channels - 1):
            super().filter(channel_filter, c)
