from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

__all__ = [
    "APP_NAME",
    "APP_SLUG",
    "CONFIG_FILENAME",
    "portable_mode_enabled",
    "get_config_dir",
    "get_data_dir",
    "default_config_path",
    "ensure_exists",
]

# Basic app identity used for directories
APP_NAME = "Epic Text Adventure"
APP_SLUG = "epic-adventure"
CONFIG_FILENAME = "adventure.yaml"

_logger = logging.getLogger(__name__)


def portable_mode_enabled() -> bool:
    """Return True if user data should live beside the working directory.

    Enabled when the environment variable EPIC_ADVENTURE_PORTABLE is set to one
    of "1", "true", "yes" or "on" (case-insensitive).
    """
    env = os.getenv("EPIC_ADVENTURE_PORTABLE", "").strip().lower()
    return env in {"1", "true", "yes", "on"}


def _portable_root() -> Path:
    return Path.cwd().resolve() / "userdata"


def ensure_exists(path: Path) -> None:
    """Create the directory if it doesn't exist. Log and raise on failure."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _logger.error("Failed to create directory '%s': %s", path, exc)
        raise


def get_config_dir(create: bool = False) -> Path:
    """Return directory for config files.

    Portable: <cwd>/userdata/config
    Otherwise the platformdirs user config dir for the app.
    """
    if portable_mode_enabled():
        path = _portable_root() / "config"
    else:
        path = Path(user_config_dir(appname=APP_SLUG, appauthor=False))
    if create:
        ensure_exists(path)
    return path


def get_data_dir(create: bool = False) -> Path:
    """Return directory for persisted data (result files when not overridden)."""
    if portable_mode_enabled():
        path = _portable_root() / "data"
    else:
        path = Path(user_data_dir(appname=APP_SLUG, appauthor=False))
    if create:
        ensure_exists(path)
    return path


def default_config_path() -> Path:
    return get_config_dir() / CONFIG_FILENAME
