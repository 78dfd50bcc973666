"""
Channel-array image container.

Every channel is a 1-D float64 array of ``width * height`` normalized
samples in row-major pixel order. Channels live as rows of one
``(num_channels, width * height)`` array, so ``channel(i)`` is a view.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, Union

import numpy as np

from . import config
from .errors import ChannelCountError, DimensionError
from .filters import ChannelFilter, as_channel_filter

logger = logging.getLogger(__name__)


class ChannelSource(Protocol):
    """Anything the encoder can read: dimensions plus per-channel samples."""

    width: int
    height: int
    num_channels: int

    def channel(self, index: int) -> np.ndarray: ...


def validate_shape(width: int, height: int, num_channels: int) -> None:
    """
    Check image dimensions against the container limits.

    Raises:
        DimensionError: If width or height is negative
        ChannelCountError: If the channel count is below 1 or above max_channels
    """
    if width < 0 or height < 0:
        raise DimensionError(f"Image dimensions must be non-negative, got {width}x{height}")

    max_channels = config.settings.max_channels
    if not 1 <= num_channels <= max_channels:
        raise ChannelCountError(
            f"Channel count must be between 1 and {max_channels}, got {num_channels}"
        )


class Image:
    """A multi-channel image of normalized float samples."""

    def __init__(
        self,
        width: int,
        height: int,
        num_channels: int,
        zero_initialize: bool = True,
    ):
        """
        Args:
            width: Width in pixels
            height: Height in pixels
            num_channels: Number of channel arrays
            zero_initialize: Fill with 0.0; otherwise contents are undefined
                until the caller writes every sample
        """
        width = int(width)
        height = int(height)
        num_channels = int(num_channels)
        validate_shape(width, height, num_channels)

        self._width = width
        self._height = height
        shape = (num_channels, width * height)
        self._channels = np.zeros(shape) if zero_initialize else np.empty(shape)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def num_channels(self) -> int:
        return self._channels.shape[0]

    @property
    def num_pixels(self) -> int:
        return self._width * self._height

    @property
    def channels(self) -> np.ndarray:
        """Backing ``(num_channels, num_pixels)`` array."""
        return self._channels

    def channel(self, index: int) -> np.ndarray:
        """
        Get a writable view of one channel.

        Raises:
            ChannelCountError: If index is out of range
        """
        if not 0 <= index < self.num_channels:
            raise ChannelCountError(
                f"Channel index {index} out of range for {self.num_channels}-channel image"
            )
        return self._channels[index]

    def copy(self) -> Image:
        """
        Deep copy as a plain Image, whatever the runtime type of self.

        Use ``RGBAImage.copy_rgba`` for a 4-channel copy.
        """
        copied = Image(self._width, self._height, self.num_channels, zero_initialize=False)
        np.copyto(copied._channels, self._channels)
        return copied

    def paste(self, source: ChannelSource) -> None:
        """
        Overlay source onto this image.

        The overlapping top-left region is copied for the channels both
        images have; everything else is left untouched.
        """
        overlap_w = min(self._width, source.width)
        overlap_h = min(self._height, source.height)
        num_channels = min(self.num_channels, source.num_channels)
        logger.debug(f"Pasting {overlap_w}x{overlap_h} region, {num_channels} channels")

        for c in range(num_channels):
            dest = self._channels[c].reshape(self._height, self._width)
            src = np.asarray(source.channel(c)).reshape(source.height, source.width)
            dest[:overlap_h, :overlap_w] = src[:overlap_h, :overlap_w]

    def filter(
        self,
        channel_filter: Union[ChannelFilter, Callable],
        channel: Optional[int] = None,
    ) -> None:
        """
        Apply a filter in place.

        Args:
            channel_filter: ChannelFilter or plain callable
            channel: Single channel to filter; all channels when None
        """
        channel_filter = as_channel_filter(channel_filter)
        indices = range(self.num_channels) if channel is None else [channel]
        for c in indices:
            channel_filter.apply(self.channel(c), self._width, self._height)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and np.array_equal(self._channels, other._channels)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width={self._width}, height={self._height}, "
            f"num_channels={self.num_channels})"
        )
