"""Helpers for environment flags shared across the app."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_config_path(default_path: Path) -> Path:
    """Pick config path based on environment overrides."""

    env_path = os.environ.get("PLAYLISTER_CONFIG_PATH")
    if env_path:
        return Path(env_path)
    env_dir = os.environ.get("PLAYLISTER_CONFIG_DIR")
    if env_dir:
        return Path(env_dir) / "settings.yaml"
    return default_path


def resolve_data_path(default_path: Path) -> Path:
    """Return the playlists file, honoring ``PLAYLISTER_DATA_PATH``."""

    env_path = os.environ.get("PLAYLISTER_DATA_PATH")
    if env_path:
        return Path(env_path)
    return default_path
