import numpy as np
import pytest

from pixelconv.filters import (
    FILTER_REGISTRY,
    CallableFilter,
    ClampFilter,
    InvertFilter,
    MultiplyFilter,
    OffsetFilter,
    as_channel_filter,
    get_filter,
)


def _channel(*values):
    return np.array(values, dtype=np.float64)


def test_invert():
    channel = _channel(0.0, 0.25, 1.0)

    InvertFilter().apply(channel, 3, 1)

    assert list(channel) == [1.0, 0.75, 0.0]


def test_multiply():
    channel = _channel(0.5, 1.0)

    MultiplyFilter(0.5).apply(channel, 1, 2)

    assert list(channel) == [0.25, 0.5]


def test_offset_does_not_clamp():
    channel = _channel(0.5, 1.0)

    OffsetFilter(0.5).apply(channel, 2, 1)

    assert list(channel) == [1.0, 1.5]


def test_clamp():
    channel = _channel(-0.5, 0.5, 1.5)

    ClampFilter().apply(channel, 3, 1)

    assert list(channel) == [0.0, 0.5, 1.0]


def test_clamp_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        ClampFilter(low=1.0, high=0.0)


def test_callable_returning_array_is_written_back():
    channel = _channel(0.25)

    CallableFilter(lambda ch: ch * 2).apply(channel, 1, 1)

    assert channel[0] == 0.5


def test_callable_mutating_in_place():
    channel = _channel(0.25, 0.5)

    def zero_first(ch):
        ch[0] = 0.0

    CallableFilter(zero_first).apply(channel, 2, 1)

    assert list(channel) == [0.0, 0.5]


def test_channel_length_is_validated():
    with pytest.raises(ValueError, match="Expected 4 samples"):
        InvertFilter().apply(_channel(0.0, 1.0), 2, 2)


def test_as_channel_filter():
    invert = InvertFilter()

    assert as_channel_filter(invert) is invert
    assert isinstance(as_channel_filter(abs), CallableFilter)
    with pytest.raises(TypeError):
        as_channel_filter(42)


def test_registry_factory():
    assert set(FILTER_REGISTRY) == {"invert", "multiply", "offset", "clamp"}

    scale = get_filter("multiply", factor=3.0)

    assert isinstance(scale, MultiplyFilter)
    assert scale.factor == 3.0


def test_unknown_filter_name():
    with pytest.raises(ValueError, match="Unknown filter"):
        get_filter("blur")
