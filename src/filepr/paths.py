"""Path helpers for locating the filepr configuration file."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

FILEPR_APP_NAME = "filepr"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "FILEPR_CONFIG"


def filepr_config_dir() -> Path:
    """Return the per-user configuration directory.

    Example:
        >>> isinstance(filepr_config_dir(), Path)
        True
    """
    return Path(user_config_dir(FILEPR_APP_NAME))


def config_path() -> Path:
    """Return the configuration file path, honoring ``FILEPR_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return filepr_config_dir() / CONFIG_FILENAME
