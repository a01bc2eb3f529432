"""Entry point that wires an editing session for a presentation layer."""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from playlister.core.config import SettingsManager
from playlister.core.playlist_state import PlaylistState
from playlister.core.store import YamlPlaylistStore


def _configure_logging(level_override: Optional[str] = None, logs_dir: Optional[Path] = None) -> Optional[Path]:
    env_level = os.environ.get("LOGLEVEL")
    level_name = (env_level or level_override or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    primary_dir = logs_dir or Path.cwd() / "logs"
    fallback_dir = Path(tempfile.gettempdir()) / "playlister_logs"
    target_dir = primary_dir

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        target_dir = fallback_dir
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            logging.basicConfig(level=level)
            return None

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = target_dir / f"playlister-{timestamp}.log"
    try:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        logging.basicConfig(level=level)
        return None
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    file_handler.setFormatter(formatter)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=[file_handler, stream_handler])
    logging.getLogger(__name__).info("Writing log to %s", log_path)
    if target_dir is fallback_dir:
        logging.getLogger(__name__).warning("Using fallback log directory %s", target_dir)
    return log_path


def create_session(settings: Optional[SettingsManager] = None) -> PlaylistState:
    """Build a session backed by the configured playlist file and load it."""

    settings = settings or SettingsManager()
    store = YamlPlaylistStore(settings.get_playlists_path())
    state = PlaylistState.from_settings(settings, store=store)
    if not state.load_lists():
        logging.getLogger(__name__).info("No saved playlists in %s", store.path)
    return state


def run(settings: Optional[SettingsManager] = None) -> PlaylistState:
    """Configure logging and return a ready editing session."""

    settings = settings or SettingsManager()
    _configure_logging(settings.get_diagnostics_log_level())
    return create_session(settings)
