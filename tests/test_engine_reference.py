# tests/test_engine_reference.py
"""
reference table tests
=====================

Does: Load the shipped Sharma et al. (2005) CIEDE2000 table through the data
      loader and verify every pair; check table validation errors.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import color_distance
from color_distance.engine import reference as ref
from color_distance.general.utils import DataFileTypeError

PACKAGE_DATA = Path(color_distance.__file__).resolve().parent / "data"
PAIRS = ref.load_reference_pairs(base_dir=PACKAGE_DATA)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("COLOR_DISTANCE_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)


def test_table_is_complete():
    assert len(PAIRS) == 34
    assert all(isinstance(p, ref.ReferencePair) for p in PAIRS)
    assert PAIRS[0] == ref.ReferencePair((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425)


@pytest.mark.parametrize("index", range(34))
def test_each_published_pair(index):
    pair = PAIRS[index]
    assert ref.ciede2000(pair.lab1, pair.lab2) == pytest.approx(pair.delta_e, abs=1e-3)


def test_verify_reference_table_finds_no_mismatch():
    assert ref.verify_reference_table() == []


def test_verify_reference_table_reports_bad_pairs():
    wrong = ref.ReferencePair((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 9.9)
    mismatches = ref.verify_reference_table(pairs=[PAIRS[0], wrong])
    assert [m.index for m in mismatches] == [1]
    assert mismatches[0].error == pytest.approx(9.9 - 2.3669, abs=1e-3)


def _write_table(tmp_path, rows) -> Path:
    (tmp_path / f"{ref.REFERENCE_FILE}.json").write_text(json.dumps({"pairs": rows}), encoding="utf-8")
    return tmp_path


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [{"lab1": [50, 0], "lab2": [50, 0, 0], "delta_e": 0}],
        [{"lab1": [50, 0, 0], "lab2": [50, "a", 0], "delta_e": 0}],
        [{"lab1": [50, 0, 0], "lab2": [50, 0, 0]}],
        ["not an object"],
    ],
)
def test_malformed_table_raises_type_error(tmp_path, rows):
    with pytest.raises(DataFileTypeError):
        ref.load_reference_pairs(base_dir=_write_table(tmp_path, rows))


def test_custom_table_via_env(tmp_path, monkeypatch):
    _write_table(tmp_path, [{"lab1": [50, 0, 0], "lab2": [50, 0, 0], "delta_e": 0}])
    monkeypatch.setenv("COLOR_DISTANCE_DATA_DIR", str(tmp_path))
    pairs = ref.load_reference_pairs()
    assert pairs == [ref.ReferencePair((50.0, 0.0, 0.0), (50.0, 0.0, 0.0), 0.0)]
    assert ref.verify_reference_table(pairs=pairs) == []


def test_generic_data_dir_env_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert len(ref.load_reference_pairs()) == 34
    assert ref.verify_reference_table() == []
