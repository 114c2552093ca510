"""
data_files.py
=============

Does: Read JSON tables shipped in the package `data/` directory, optionally
      checked by a validator.
Used By: The CIEDE2000 reference table loader.
Returns: The parsed (and validated) top-level object.

Set COLOR_DISTANCE_DATA_DIR to read the tables from another directory.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV",
    "PACKAGE_DATA_DIR",
    "data_dir",
    "load_data_file",
    "DataFileNotFound",
    "DataFileParseError",
    "DataFileTypeError",
]

log = logging.getLogger(__name__)

DATA_DIR_ENV = "COLOR_DISTANCE_DATA_DIR"
PACKAGE_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class DataFileNotFound(FileNotFoundError):
    """Raise when a data table cannot be found or read."""


class DataFileParseError(ValueError):
    """Raise when a data table is not valid JSON or its validator fails."""


class DataFileTypeError(TypeError):
    """Raise when a data table doesn't have the expected structure."""


def data_dir() -> Path:
    """Does: Return the override directory from the environment, else the package `data/`."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(os.path.expanduser(override)).resolve()
    return PACKAGE_DATA_DIR


def load_data_file(
    name: str,
    *,
    base_dir: Path | None = None,
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """
    Does: Load `<base_dir>/<name>.json`, which must hold a JSON object.

    Args:
        name: Table name, with or without the `.json` suffix.
        base_dir: Directory to read from; defaults to `data_dir()`.
        validator: Receives the parsed object and returns the value to hand back.
            Its DataFileTypeError/DataFileParseError pass through; any other
            exception is wrapped in DataFileParseError.
    """
    file_name = name if name.endswith(".json") else f"{name}.json"
    path = (base_dir or data_dir()) / file_name

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DataFileParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise DataFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise DataFileTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    if validator is not None:
        try:
            data = validator(data)
        except (DataFileTypeError, DataFileParseError):
            raise
        except Exception as e:
            raise DataFileParseError(f"{path.name}: validator failed: {e}") from e

    log.debug("Loaded data table %s", path)
    return data
