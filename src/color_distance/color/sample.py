"""
sample.py
=========

Does: Define ColorSample, the immutable bundle of a hex color with its RGB and HSV forms.
Used By: Every distance function (RGB, HSV, CIEDE2000) and the dispatcher.
Returns: ColorSample instances; raises ColorParseError for invalid hex input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from color_distance.color.conversion import HSV, rgb_to_hsv
from color_distance.color.hex import RGB, normalize_hex, parse_hex
from color_distance.general.utils import debug

__all__ = ["ColorSample", "ColorParseError"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class ColorParseError(ValueError):
    """Raise when a string cannot be turned into a ColorSample."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r} (expected '#RGB' or '#RRGGBB')")


@dataclass(frozen=True)
class ColorSample:
    """
    A color parsed once from its hex string.

    Only `original` is passed in; `hex`, `rgb` and `hsv` are derived from it on
    construction, so a sample either exists fully populated or not at all.

    Attributes:
        original: The input string exactly as supplied.
        hex: `#RRGGBB` form (short forms expanded, letter case kept).
        rgb: (r, g, b) ints in [0, 255].
        hsv: (hue in degrees [0, 360), saturation %, value %).
    """

    original: str
    hex: str = field(init=False)
    rgb: RGB = field(init=False, repr=False)
    hsv: HSV = field(init=False, repr=False)

    def __post_init__(self) -> None:
        normalized = normalize_hex(self.original)
        rgb = parse_hex(normalized) if normalized is not None else None
        if rgb is None:
            debug(f"rejected color input {self.original!r}", topic="color")
            raise ColorParseError(self.original)

        # frozen dataclass: derived fields are set once here
        object.__setattr__(self, "hex", normalized)
        object.__setattr__(self, "rgb", rgb)
        object.__setattr__(self, "hsv", rgb_to_hsv(rgb))
        logger.debug("Parsed %r → rgb=%s hsv=%s", self.original, self.rgb, self.hsv)

    @classmethod
    def from_hex(cls, value: str) -> ColorSample:
        """Does: Build a sample from `#RGB` / `#RRGGBB`; raises ColorParseError otherwise."""
        return cls(value)
