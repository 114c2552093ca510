# color_distance/general/utils/__init__.py
"""

Does: Provide the packaged data-table reader and the topic debug printer.
Returns: Public API via load_data_file/data_dir and debug/reload_topics.
Used by: Reference table loader, color sample construction, tests.
"""

from __future__ import annotations

from .data_files import (
    DATA_DIR_ENV,
    PACKAGE_DATA_DIR,
    DataFileNotFound,
    DataFileParseError,
    DataFileTypeError,
    data_dir,
    load_data_file,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Data tables
    "load_data_file",
    "data_dir",
    "DATA_DIR_ENV",
    "PACKAGE_DATA_DIR",
    "DataFileNotFound",
    "DataFileParseError",
    "DataFileTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
