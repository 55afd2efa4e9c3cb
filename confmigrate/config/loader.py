"""Locations of confmigrate's own data and config directories."""

from __future__ import annotations

import os
from pathlib import Path

HOME_ENV_VAR = "CONFMIGRATE_HOME"


def get_data_dir() -> Path:
    """``$CONFMIGRATE_HOME`` if set, else ``~/.confmigrate``."""
    override = os.environ.get(HOME_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".confmigrate"


def get_config_dir() -> Path:
    return get_data_dir() / "configs"
