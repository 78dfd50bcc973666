import numpy as np
import pytest

from pixelconv import Image


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_image():
    """Build an Image from per-pixel sample tuples, row-major."""

    def _make(width, height, pixels):
        num_channels = len(pixels[0]) if pixels else 1
        image = Image(width, height, num_channels)
        for p, samples in enumerate(pixels):
            for c, value in enumerate(samples):
                image.channel(c)[p] = value
        return image

    return _make


class PlainChannels:
    """Duck-typed channel source that is not an Image subclass."""

    def __init__(self, width, height, channels):
        self.width = width
        self.height = height
        self.num_channels = len(channels)
        self._channels = [np.asarray(ch, dtype=np.float64) for ch in channels]

    def channel(self, index):
        return self._channels[index]


@pytest.fixture
def plain_channels():
    return PlainChannels
