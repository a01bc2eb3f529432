"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: Dict[str, Any] = {
    "editor": {
        "default_list_name": "Untitled",
        "clear_history_on_list_switch": True,
        "default_song": {
            "title": "Untitled",
            "artist": "???",
            "youtube_id": "dQw4w9WgXcQ",
            "year": None,
        },
    },
    "storage": {
        "playlists_path": "data/playlists.yaml",
    },
    "diagnostics": {
        "log_level": "WARNING",
    },
}
