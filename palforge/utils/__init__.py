"""Utility functions for palforge.

Modules:
- loader: Load/save Pillow <-> NumPy conversion utilities.
- palette: Palette parsing and extraction from images.
- compose: Side-by-side comparison images.
"""
from .loader import load_image, save_image, to_uint8, to_unit
from .palette import extract_palette, parse_palette
from .compose import side_by_side

__all__ = [
    "load_image",
    "save_image",
    "to_unit",
    "to_uint8",
    "extract_palette",
    "parse_palette",
    "side_by_side",
]
