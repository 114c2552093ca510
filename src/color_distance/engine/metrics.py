"""
metrics.py
==========

Does: Geometric distances between two ColorSamples in RGB and HSV space.
Used By: The distance dispatcher (Algorithm.RGB, Algorithm.HSV).
Returns: Non-negative floats.
"""

from __future__ import annotations

import math

from color_distance.color import ColorSample

__all__ = ["rgb_distance", "hsv_distance", "hue_difference"]
__docformat__ = "google"


def rgb_distance(color1: ColorSample, color2: ColorSample) -> float:
    """Does: Euclidean distance between the two samples' RGB channels."""
    r1, g1, b1 = color1.rgb
    r2, g2, b2 = color2.rgb
    return math.sqrt((r1 - r2) ** 2 + (g1 - g2) ** 2 + (b1 - b2) ** 2)


def hue_difference(h1: float, h2: float) -> float:
    """Does: Shortest angular distance in degrees between two hues, in [0, 180]."""
    d = abs(h1 - h2) % 360.0
    return min(d, 360.0 - d)


def hsv_distance(color1: ColorSample, color2: ColorSample) -> float:
    """
    Does: Cylindrical HSV distance with hue wraparound at 0°/360°.

    Hue is measured in degrees and saturation/value in percent, so one degree of
    hue weighs the same as one percent of saturation. Not perceptually calibrated.
    """
    h1, s1, v1 = color1.hsv
    h2, s2, v2 = color2.hsv
    dh = hue_difference(h1, h2)
    return math.sqrt(dh ** 2 + (s1 - s2) ** 2 + (v1 - v2) ** 2)
