"""
color_distance
==============

Does: Root package for hex color distances (RGB, HSV, CIEDE2000).
Returns: Re-exports the public API from `color` and `distance`.
Used by: Callers comparing `#RGB` / `#RRGGBB` colors.
"""

from .color import ColorParseError, ColorSample, normalize_hex, parse_hex
from .engine import (
    Algorithm,
    UnknownAlgorithmError,
    ciede2000,
    ciede2000_distance,
    distance,
    hsv_distance,
    rgb_distance,
    verify_reference_table,
)

__all__ = [
    "ColorSample",
    "ColorParseError",
    "normalize_hex",
    "parse_hex",
    "Algorithm",
    "UnknownAlgorithmError",
    "distance",
    "rgb_distance",
    "hsv_distance",
    "ciede2000",
    "ciede2000_distance",
    "verify_reference_table",
]
__docformat__ = "google"
