"""Configuration utilities for StudyBook.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

import platformdirs

APP_NAME = "studybook"  # pragma: no mutate
DATA_PATH_ENV_VAR = "STUDYBOOK_DATA_PATH"  # pragma: no mutate
DATA_FILE_NAME = "studybook.json"  # pragma: no mutate


def default_data_path() -> Path:
    """Return the per-user location of the data file."""
    return Path(platformdirs.user_data_dir(APP_NAME)) / DATA_FILE_NAME


def get_data_path() -> Path:
    """Get the data file path from the environment.

    Returns:
        The value of the `STUDYBOOK_DATA_PATH` environment variable if it is
        set and non-empty, otherwise `default_data_path()`.
    """
    if path := os.environ.get(DATA_PATH_ENV_VAR):
        return Path(path).expanduser()
    return default_data_path()
