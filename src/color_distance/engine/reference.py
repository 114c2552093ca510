"""
reference.py
============

Does: Load the published CIEDE2000 test pairs (Sharma et al., 2005) shipped in
      `data/ciede2000_reference.json` and check `ciede2000` against them.
Used By: Tests and callers wanting a self-check of the ΔE00 implementation.
Returns: ReferencePair lists and the pairs that disagree beyond a tolerance.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NamedTuple

from color_distance.color import LAB
from color_distance.engine.ciede2000 import ciede2000
from color_distance.general.utils import DataFileTypeError, debug, load_data_file

__all__ = [
    "REFERENCE_FILE",
    "ReferencePair",
    "ReferenceMismatch",
    "load_reference_pairs",
    "verify_reference_table",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

REFERENCE_FILE = "ciede2000_reference"


class ReferencePair(NamedTuple):
    lab1: LAB
    lab2: LAB
    delta_e: float


class ReferenceMismatch(NamedTuple):
    index: int
    pair: ReferencePair
    computed: float

    @property
    def error(self) -> float:
        return abs(self.computed - self.pair.delta_e)


def _as_lab(value: Any, where: str) -> LAB:
    if not isinstance(value, list) or len(value) != 3:
        raise DataFileTypeError(f"{where}: expected [L, a, b], got {value!r}")
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
        raise DataFileTypeError(f"{where}: LAB components must be numbers, got {value!r}")
    L, a, b = (float(v) for v in value)
    return (L, a, b)


def _validate_table(data: dict[str, Any]) -> dict[str, Any]:
    """Does: Check the table layout and convert rows to ReferencePair."""
    rows = data.get("pairs")
    if not isinstance(rows, list) or not rows:
        raise DataFileTypeError("'pairs' must be a non-empty list")
    pairs = []
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            raise DataFileTypeError(f"pairs[{i}]: expected object, got {type(row).__name__}")
        expected = row.get("delta_e")
        if not isinstance(expected, (int, float)) or isinstance(expected, bool):
            raise DataFileTypeError(f"pairs[{i}].delta_e: expected number, got {expected!r}")
        pairs.append(
            ReferencePair(
                _as_lab(row.get("lab1"), f"pairs[{i}].lab1"),
                _as_lab(row.get("lab2"), f"pairs[{i}].lab2"),
                float(expected),
            )
        )
    return {**data, "pairs": pairs}


def load_reference_pairs(base_dir: Path | None = None) -> list[ReferencePair]:
    """
    Does: Read and validate the reference table.

    Reads from `base_dir` when given, else COLOR_DISTANCE_DATA_DIR, else the
    table shipped in the package.
    """
    table = load_data_file(REFERENCE_FILE, base_dir=base_dir, validator=_validate_table)
    return list(table["pairs"])


def verify_reference_table(
    tolerance: float = 1e-3,
    pairs: list[ReferencePair] | None = None,
) -> list[ReferenceMismatch]:
    """
    Does: Recompute ΔE00 for every reference pair.

    Args:
        tolerance: Maximum absolute deviation from the published value.
        pairs: Pairs to check; defaults to the shipped table.

    Returns:
        Mismatches (empty when every pair is within tolerance).
    """
    if pairs is None:
        pairs = load_reference_pairs()
    mismatches = []
    for i, pair in enumerate(pairs):
        computed = ciede2000(pair.lab1, pair.lab2)
        if abs(computed - pair.delta_e) > tolerance:
            mismatches.append(ReferenceMismatch(i, pair, computed))
            debug(
                f"pair {i}: expected {pair.delta_e:.4f}, got {computed:.4f}",
                topic="reference",
                level="WARNING",
            )
    logger.debug(
        "Checked %d reference pairs (tolerance=%g): %d mismatches",
        len(pairs), tolerance, len(mismatches),
    )
    return mismatches
