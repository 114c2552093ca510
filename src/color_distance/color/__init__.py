"""
color.
=====

Does: Parse hex strings into ColorSample values and expose the RGB/HSV/LAB
      conversions the distance functions rely on.
Used By: distance metrics, CIEDE2000, dispatcher.
"""

from .conversion import HSV, LAB, hex_to_lab, rgb_to_hsv, rgb_to_lab
from .hex import RGB, normalize_hex, parse_hex
from .sample import ColorParseError, ColorSample

__all__ = [
    # types
    "RGB",
    "HSV",
    "LAB",
    # parsing
    "normalize_hex",
    "parse_hex",
    # conversions
    "rgb_to_hsv",
    "rgb_to_lab",
    "hex_to_lab",
    # sample
    "ColorSample",
    "ColorParseError",
]
