"""
hex.py
======

Does: Normalize `#RGB` / `#RRGGBB` strings and parse them into RGB triples.
Used By: ColorSample construction.
Returns: Normalized hex (str) or RGB (tuple[int,int,int]); None for invalid input.
"""

from __future__ import annotations

import logging
import re

from webcolors import hex_to_rgb

__all__ = ["RGB", "normalize_hex", "parse_hex"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

_HEX = re.compile(r"#([a-fA-F0-9]{6})")
_HEX_SHORT = re.compile(r"#([a-fA-F0-9]{3})")


def normalize_hex(value: object) -> str | None:
    """
    Does: Return `#RRGGBB` unchanged (case preserved) or expand `#RGB` to `#RRGGBB`.
    Returns: The normalized string, or None when `value` is not a hex color.
    """
    if not isinstance(value, str):
        return None
    if _HEX.fullmatch(value):
        return value
    m = _HEX_SHORT.fullmatch(value)
    if m:
        return "#" + "".join(ch * 2 for ch in m.group(1))
    return None


def parse_hex(value: object) -> RGB | None:
    """Does: Normalize then convert a hex string to an (r, g, b) triple of 0–255 ints."""
    normalized = normalize_hex(value)
    if normalized is None:
        logger.debug("Rejected hex input %r", value)
        return None
    r, g, b = hex_to_rgb(normalized)
    return (int(r), int(g), int(b))
