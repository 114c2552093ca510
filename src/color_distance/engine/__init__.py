"""
engine.
======

Does: Expose the RGB, HSV and CIEDE2000 distances plus the algorithm dispatcher
      and the CIEDE2000 reference-table check.
"""

from .algorithms import Algorithm, UnknownAlgorithmError, distance, resolve_algorithm
from .ciede2000 import ciede2000, ciede2000_distance
from .metrics import hsv_distance, hue_difference, rgb_distance
from .reference import (
    ReferenceMismatch,
    ReferencePair,
    load_reference_pairs,
    verify_reference_table,
)

__all__ = [
    # dispatch
    "Algorithm",
    "UnknownAlgorithmError",
    "distance",
    "resolve_algorithm",
    # metrics
    "rgb_distance",
    "hsv_distance",
    "hue_difference",
    "ciede2000",
    "ciede2000_distance",
    # reference data
    "ReferencePair",
    "ReferenceMismatch",
    "load_reference_pairs",
    "verify_reference_table",
]
