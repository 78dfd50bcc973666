"""
Base filter interface for per-channel transforms.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np


class ChannelFilter(ABC):
    """Abstract base class for filters applied to a single channel."""

    name: str = "base"

    @abstractmethod
    def apply(self, channel: np.ndarray, width: int, height: int) -> None:
        """
        Transform a channel in place.

        Args:
            channel: 1-D float array of ``width * height`` samples, row-major
            width: Image width in pixels
            height: Image height in pixels
        """
        pass

    def validate_input(self, channel: np.ndarray, width: int, height: int) -> None:
        """
        Validate channel shape.

        Args:
            channel: Channel samples
            width: Image width in pixels
            height: Image height in pixels

        Raises:
            ValueError: If the channel does not hold width * height samples
        """
        if channel is None:
            raise ValueError("Channel cannot be None")

        if channel.ndim != 1:
            raise ValueError(f"Expected 1D channel array, got shape {channel.shape}")

        if channel.shape[0] != width * height:
            raise ValueError(f"Expected {width * height} samples, got {channel.shape[0]}")


class CallableFilter(ChannelFilter):
    """
    Adapts a plain function to the filter interface.

    The function receives the channel array. If it returns an array, the
    result is written back into the channel; returning None means it
    mutated the channel itself.
    """

    name = "callable"

    def __init__(self, fn: Callable[[np.ndarray], Optional[np.ndarray]]):
        self.fn = fn

    def apply(self, channel: np.ndarray, width: int, height: int) -> None:
        self.validate_input(channel, width, height)
        result = self.fn(channel)
        if result is not None:
            channel[:] = result


def as_channel_filter(obj) -> ChannelFilter:
    """Wrap callables so images can take either form."""
    if isinstance(obj, ChannelFilter):
        return obj
    if callable(obj):
        return CallableFilter(obj)
    raise TypeError(f"Expected ChannelFilter or callable, got {type(obj).__name__}")
