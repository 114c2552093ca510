# tests/test_color_sample.py
"""
ColorSample & conversion tests
==============================

Does: Check eager, all-or-nothing sample construction and the HSV / LAB
      conversions it relies on.
"""

from __future__ import annotations

import dataclasses

import pytest

from color_distance.color import conversion as cv
from color_distance.color.sample import ColorParseError, ColorSample
from color_distance.general.utils import log


# ──────────────────────────────────────────────────────────────────────────────
# Construction
# ──────────────────────────────────────────────────────────────────────────────
def test_sample_fields_derived_from_hex():
    c = ColorSample("#f80")
    assert c.original == "#f80"
    assert c.hex == "#ff8800"
    assert c.rgb == (255, 136, 0)
    h, s, v = c.hsv
    assert h == pytest.approx(32.0, abs=1e-9)
    assert s == pytest.approx(100.0)
    assert v == pytest.approx(100.0)


def test_sample_keeps_letter_case():
    assert ColorSample("#AbCdEf").hex == "#AbCdEf"


def test_from_hex_matches_constructor():
    assert ColorSample.from_hex("#123456") == ColorSample("#123456")


@pytest.mark.parametrize("value", ["notacolor", "#12", "123456", "#12345g", "", None])
def test_invalid_input_raises_color_parse_error(value):
    with pytest.raises(ColorParseError) as ei:
        ColorSample(value)
    assert ei.value.value == value
    assert isinstance(ei.value, ValueError)
    assert repr(value) in str(ei.value)


def test_sample_is_immutable():
    c = ColorSample("#000")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.hex = "#ffffff"  # type: ignore[misc]


def test_derived_fields_are_not_constructor_arguments():
    with pytest.raises(TypeError):
        ColorSample("#000", "#ffffff", (255, 255, 255), (0.0, 0.0, 100.0))  # type: ignore[call-arg]


def test_samples_are_hashable_values():
    assert len({ColorSample("#abc"), ColorSample("#abc"), ColorSample("#aabbcc")}) == 2


def test_rejected_input_is_reported_on_color_topic(monkeypatch, capsys):
    monkeypatch.setenv("COLOR_DISTANCE_DEBUG_TOPICS", "color")
    log.reload_topics()
    try:
        with pytest.raises(ColorParseError):
            ColorSample("#nope")
    finally:
        monkeypatch.delenv("COLOR_DISTANCE_DEBUG_TOPICS")
        log.reload_topics()
    err = capsys.readouterr().err
    assert "[color][DEBUG]" in err and "#nope" in err


# ──────────────────────────────────────────────────────────────────────────────
# HSV conversion (hue in degrees, saturation/value in percent)
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "rgb,expect",
    [
        ((255, 0, 0), (0.0, 100.0, 100.0)),
        ((0, 255, 0), (120.0, 100.0, 100.0)),
        ((0, 0, 255), (240.0, 100.0, 100.0)),
        ((0, 0, 0), (0.0, 0.0, 0.0)),
        ((255, 255, 255), (0.0, 0.0, 100.0)),
    ],
)
def test_rgb_to_hsv_primaries(rgb, expect):
    assert cv.rgb_to_hsv(rgb) == pytest.approx(expect)


def test_rgb_to_hsv_hue_stays_below_360():
    h, _, _ = cv.rgb_to_hsv((255, 0, 1))
    assert 359.0 < h < 360.0


def test_rgb_to_hsv_rejects_out_of_range():
    with pytest.raises(ValueError):
        cv.rgb_to_hsv((256, 0, 0))


# ──────────────────────────────────────────────────────────────────────────────
# LAB conversion
# ──────────────────────────────────────────────────────────────────────────────
def test_hex_to_lab_black_and_white():
    assert cv.hex_to_lab("#000000") == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    assert cv.hex_to_lab("#fff") == pytest.approx((100.0, 0.0, 0.0), abs=1e-2)


def test_hex_to_lab_srgb_red():
    L, a, b = cv.hex_to_lab("#ff0000")
    assert L == pytest.approx(53.24, abs=0.05)
    assert a == pytest.approx(80.09, abs=0.1)
    assert b == pytest.approx(67.20, abs=0.1)


def test_hex_to_lab_rejects_invalid():
    with pytest.raises(ValueError):
        cv.hex_to_lab("#xyz")
