"""Per-channel filters."""
from .base import ChannelFilter, CallableFilter, as_channel_filter
from .basic import InvertFilter, MultiplyFilter, OffsetFilter, ClampFilter

# Filter registry for factory pattern
FILTER_REGISTRY: dict[str, type[ChannelFilter]] = {
    "invert": InvertFilter,
    "multiply": MultiplyFilter,
    "offset": OffsetFilter,
    "clamp": ClampFilter,
}


def get_filter(name: str, **kwargs) -> ChannelFilter:
    """
    Factory function to get filter instance by name.

    Args:
        name: Filter name (invert, multiply, offset, clamp)
        **kwargs: Constructor arguments for the filter

    Returns:
        Filter instance

    Raises:
        ValueError: If name is not recognized
    """
    if name not in FILTER_REGISTRY:
        raise ValueError(f"Unknown filter: {name}. Available: {list(FILTER_REGISTRY.keys())}")

    return FILTER_REGISTRY[name](**kwargs)


__all__ = [
    "ChannelFilter",
    "CallableFilter",
    "as_channel_filter",
    "InvertFilter",
    "MultiplyFilter",
    "OffsetFilter",
    "ClampFilter",
    "FILTER_REGISTRY",
    "get_filter",
]
