"""
Simple point filters on normalized channels.
"""
import numpy as np

from .base import ChannelFilter


class InvertFilter(ChannelFilter):
    """Maps each sample x to 1 - x."""

    name = "invert"

    def apply(self, channel: np.ndarray, width: int, height: int) -> None:
        self.validate_input(channel, width, height)
        np.subtract(1.0, channel, out=channel)


class MultiplyFilter(ChannelFilter):
    """Scales every sample by a constant factor."""

    name = "multiply"

    def __init__(self, factor: float = 1.0):
        """
        Args:
            factor: Multiplier applied to each sample
        """
        self.factor = factor

    def apply(self, channel: np.ndarray, width: int, height: int) -> None:
        self.validate_input(channel, width, height)
        np.multiply(channel, self.factor, out=channel)


class OffsetFilter(ChannelFilter):
    """Adds a constant to every sample. Results are not clamped."""

    name = "offset"

    def __init__(self, offset: float = 0.0):
        self.offset = offset

    def apply(self, channel: np.ndarray, width: int, height: int) -> None:
        self.validate_input(channel, width, height)
        np.add(channel, self.offset, out=channel)


class ClampFilter(ChannelFilter):
    """Clips samples into [low, high]."""

    name = "clamp"

    def __init__(self, low: float = 0.0, high: float = 1.0):
        if low > high:
            raise ValueError(f"Clamp bounds reversed: low={low}, high={high}")
        self.low = low
        self.high = high

    def apply(self, channel: np.ndarray, width: int, height: int) -> None:
        self.validate_input(channel, width, height)
        np.clip(channel, self.low, self.high, out=channel)
