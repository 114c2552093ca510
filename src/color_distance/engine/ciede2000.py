"""
ciede2000.py
============

Does: CIEDE2000 color difference (ΔE00) between two CIELAB colors, with
      kL = kC = kH = 1 (graphic-arts weighting).
Used By: The distance dispatcher (Algorithm.CIEDE2000) and the reference table check.
Returns: Non-negative float; 0.0 for identical inputs; symmetric in its arguments.

Reference: G. Sharma, W. Wu, E. N. Dalal, "The CIEDE2000 color-difference
formula: implementation notes, supplementary test data, and mathematical
observations", Color Res. Appl. 30 (2005).
"""

from __future__ import annotations

import logging
import math

from color_distance.color import LAB, ColorSample, hex_to_lab

__all__ = ["ciede2000", "ciede2000_distance"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

KL = KC = KH = 1.0
_POW25_7 = 25.0 ** 7


def _hue_angle(b: float, a_prime: float) -> float:
    """Does: Hue angle h' in degrees, wrapped to [0, 360); 0 for the neutral axis."""
    if a_prime == 0 and b == 0:
        return 0.0
    h = math.degrees(math.atan2(b, a_prime))
    return h if h >= 0 else h + 360.0


def _mean_hue(h1p: float, h2p: float, c_product: float) -> float:
    if c_product == 0:
        return h1p + h2p
    if abs(h1p - h2p) <= 180:
        return (h1p + h2p) / 2
    if h1p + h2p < 360:
        return (h1p + h2p + 360) / 2
    return (h1p + h2p - 360) / 2


def _hue_delta(h1p: float, h2p: float, c_product: float) -> float:
    """Does: Signed hue difference h2' − h1' folded into [-180, 180]."""
    if c_product == 0:
        return 0.0
    d = h2p - h1p
    if abs(d) <= 180:
        return d
    return d - 360 if d > 180 else d + 360


def ciede2000(lab1: LAB, lab2: LAB) -> float:
    """
    Does: Compute ΔE00 between two (L, a, b) triples.

    Args:
        lab1: First color, L in [0, 100].
        lab2: Second color.

    Returns:
        The color difference. The radicand is clamped at zero so float rounding
        near identical colors never yields NaN.
    """
    L1, a1, b1 = (float(v) for v in lab1)
    L2, a2, b2 = (float(v) for v in lab2)

    # 1–4) chroma and the a-axis correction
    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar7 = ((c1 + c2) / 2) ** 7
    g = 0.5 * (1 - math.sqrt(c_bar7 / (c_bar7 + _POW25_7)))

    a1p = (1 + g) * a1
    a2p = (1 + g) * a2
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)

    # 5) hue angles
    h1p = _hue_angle(b1, a1p)
    h2p = _hue_angle(b2, a2p)

    # 6–7) deltas
    c_product = c1p * c2p
    dLp = L2 - L1
    dCp = c2p - c1p
    dhp = _hue_delta(h1p, h2p, c_product)
    dHp = 2 * math.sqrt(c_product) * math.sin(math.radians(dhp / 2))

    # 8–9) means
    l_bar = (L1 + L2) / 2
    cp_bar = (c1p + c2p) / 2
    hp_bar = _mean_hue(h1p, h2p, c_product)

    # 10) weighting functions
    t = (
        1
        - 0.17 * math.cos(math.radians(hp_bar - 30))
        + 0.24 * math.cos(math.radians(2 * hp_bar))
        + 0.32 * math.cos(math.radians(3 * hp_bar + 6))
        - 0.20 * math.cos(math.radians(4 * hp_bar - 63))
    )
    d_theta = 30 * math.exp(-(((hp_bar - 275) / 25) ** 2))
    cp_bar7 = cp_bar ** 7
    r_c = math.sqrt(cp_bar7 / (cp_bar7 + _POW25_7))
    l_off2 = (l_bar - 50) ** 2
    s_l = 1 + (0.015 * l_off2) / math.sqrt(20 + l_off2)
    s_c = 1 + 0.045 * cp_bar
    s_h = 1 + 0.015 * cp_bar * t
    r_t = -2 * r_c * math.sin(math.radians(2 * d_theta))

    # 11) combine
    tl = dLp / (s_l * KL)
    tc = dCp / (s_c * KC)
    th = dHp / (s_h * KH)
    radicand = tl ** 2 + tc ** 2 + th ** 2 + r_t * tc * th
    return math.sqrt(max(radicand, 0.0))


def ciede2000_distance(color1: ColorSample, color2: ColorSample) -> float:
    """Does: ΔE00 between two samples, converting each hex to CIELAB first."""
    lab1 = hex_to_lab(color1.hex)
    lab2 = hex_to_lab(color2.hex)
    logger.debug("CIEDE2000 %s %s → lab %s %s", color1.hex, color2.hex, lab1, lab2)
    return ciede2000(lab1, lab2)
