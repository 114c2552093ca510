"""
conversion.py
=============

Does: Convert RGB triples to HSV (degrees / percent) and hex/RGB to CIELAB (D65).
Used By: ColorSample (HSV) and the CIEDE2000 distance (LAB).
Returns: HSV (tuple[float,float,float]) and LAB (tuple[float,float,float]).

HSV convention: hue in degrees [0, 360), saturation and value in percent [0, 100].
"""

from __future__ import annotations

import colorsys
import logging
from functools import lru_cache

from color_distance.color.hex import RGB, parse_hex

__all__ = ["HSV", "LAB", "rgb_to_hsv", "rgb_to_lab", "hex_to_lab"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
HSV = tuple[float, float, float]
LAB = tuple[float, float, float]


def _validate_rgb(rgb: RGB) -> None:
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {rgb}")


# =============================================================================
# 1) HSV
# =============================================================================

def rgb_to_hsv(rgb: RGB) -> HSV:
    """Does: Convert sRGB ints to (hue°, saturation %, value %)."""
    _validate_rgb(rgb)
    r, g, b = (c / 255.0 for c in rgb)
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    return (h * 360.0, s * 100.0, v * 100.0)


# =============================================================================
# 2) CIELAB
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    v = v / 255.0
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _rgb_to_xyz(rgb: RGB) -> tuple[float, float, float]:
    r, g, b = (_srgb_to_linear(float(c)) for c in rgb)
    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b
    return x, y, z


def _f_lab(t: float) -> float:
    d = 6 / 29
    return t ** (1 / 3) if t > d ** 3 else (t / (3 * d * d) + 4 / 29)


@lru_cache(maxsize=4096)
def rgb_to_lab(rgb: RGB) -> LAB:
    """Does: Convert sRGB ints to CIELAB under the D65 white point."""
    _validate_rgb(rgb)
    Xn, Yn, Zn = 0.95047, 1.00000, 1.08883  # D65 white
    x, y, z = _rgb_to_xyz(rgb)
    fx, fy, fz = _f_lab(x / Xn), _f_lab(y / Yn), _f_lab(z / Zn)
    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return L, a, b


def hex_to_lab(hex_value: str) -> LAB:
    """
    Does: Convert a hex color straight to CIELAB.
    Raises: ValueError when `hex_value` is not a `#RGB`/`#RRGGBB` string.
    """
    rgb = parse_hex(hex_value)
    if rgb is None:
        raise ValueError(f"Not a hex color: {hex_value!r}")
    return rgb_to_lab(rgb)
