"""Interop helpers."""
from .image_utils import from_array, to_array, from_pil, to_pil

__all__ = ["from_array", "to_array", "from_pil", "to_pil"]
