"""Configuration loading for filepr.

The configuration file is optional JSON validated with Pydantic. A missing
file yields the defaults.

Example:
    >>> from pathlib import Path
    >>> load_config(Path("missing-filepr-config.json")).selector.height
    '40%'
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from . import log, paths
from .models import FileprConfig
from .services.errors import ConfigError


def load_json(path: Path) -> dict | None:
    """Load a JSON object from ``path``, or ``None`` if the file is absent."""
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_config(path: Path | None = None) -> FileprConfig:
    """Load and validate the configuration file.

    Args:
        path: Explicit config path; defaults to ``paths.config_path()``.

    Returns:
        Validated ``FileprConfig``.

    Raises:
        ConfigError: The file is unreadable, not JSON, or fails validation.
    """
    config_file = path or paths.config_path()
    try:
        payload = load_json(config_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"failed to read config {config_file}: {exc}") from exc
    if payload is None:
        log.trace(f"no config at {config_file}; using defaults")
        return FileprConfig()
    try:
        return FileprConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config {config_file}: {exc}") from exc
