"""
algorithms.py
=============

Does: Name the supported distance algorithms and route a pair of samples to the
      matching distance function.
Used By: Public `distance()` entry point.
Returns: Non-negative float; raises UnknownAlgorithmError for unsupported identifiers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from color_distance.color import ColorSample
from color_distance.engine.ciede2000 import ciede2000_distance
from color_distance.engine.metrics import hsv_distance, rgb_distance

__all__ = ["Algorithm", "UnknownAlgorithmError", "distance", "resolve_algorithm"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

DistanceFn = Callable[[ColorSample, ColorSample], float]


class Algorithm(str, Enum):
    """Distance algorithms; members compare equal to their string names."""

    CIEDE2000 = "CIEDE2000"
    HSV = "HSV"
    RGB = "RGB"


class UnknownAlgorithmError(ValueError):
    """Raise when a distance is requested with an unrecognized algorithm identifier."""

    def __init__(self, algorithm: object):
        self.algorithm = algorithm
        known = ", ".join(a.value for a in Algorithm)
        super().__init__(f"Unknown distance algorithm {algorithm!r} (expected one of: {known})")


# One entry per Algorithm member
_DISTANCE_FUNCTIONS: dict[Algorithm, DistanceFn] = {
    Algorithm.CIEDE2000: ciede2000_distance,
    Algorithm.HSV: hsv_distance,
    Algorithm.RGB: rgb_distance,
}


def resolve_algorithm(algorithm: Algorithm | str) -> Algorithm:
    """Does: Turn an Algorithm or its exact string name into an Algorithm member."""
    if isinstance(algorithm, Algorithm):
        return algorithm
    if not isinstance(algorithm, str):
        raise UnknownAlgorithmError(algorithm)
    try:
        return Algorithm(algorithm)
    except ValueError as e:
        raise UnknownAlgorithmError(algorithm) from e


def distance(
    color1: ColorSample,
    color2: ColorSample,
    algorithm: Algorithm | str = Algorithm.CIEDE2000,
) -> float:
    """
    Does: Compute the distance between two samples under `algorithm`.

    Args:
        color1: First sample.
        color2: Second sample.
        algorithm: `Algorithm` member or its name ("CIEDE2000", "HSV", "RGB").

    Raises:
        UnknownAlgorithmError: `algorithm` is not one of the supported names.
    """
    algo = resolve_algorithm(algorithm)
    result = _DISTANCE_FUNCTIONS[algo](color1, color2)
    logger.debug("%s distance %s ↔ %s = %.6f", algo.value, color1.hex, color2.hex, result)
    return result
