"""Application configuration management module."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_CONFIG, LOG_LEVELS
from .merge import deep_merge
from playlister.core.env import resolve_config_path, resolve_data_path

logger = logging.getLogger(__name__)

_SONG_FIELDS = ("title", "artist", "youtube_id")


@dataclass
class SettingsManager:
    """YAML configuration with defaults for missing or malformed values."""

    config_path: Path = Path("config/settings.yaml")

    def __post_init__(self) -> None:
        self.config_path = resolve_config_path(self.config_path)
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as file:
                user_config = yaml.safe_load(file) or {}
            if not isinstance(user_config, dict):
                logger.warning("Ignoring malformed settings file %s", self.config_path)
                user_config = {}
            self._data = deep_merge(DEFAULT_CONFIG, user_config)
        else:
            self._data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=True, sort_keys=True)

    def get_raw(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    # --- editor ---
    def get_default_list_name(self) -> str:
        editor = self._data.get("editor", {})
        raw = editor.get("default_list_name", DEFAULT_CONFIG["editor"]["default_list_name"])
        value = str(raw).strip() if raw is not None else ""
        return value or DEFAULT_CONFIG["editor"]["default_list_name"]

    def set_default_list_name(self, name: str) -> None:
        editor = self._data.setdefault("editor", {})
        editor["default_list_name"] = str(name).strip()

    def get_clear_history_on_list_switch(self) -> bool:
        editor = self._data.get("editor", {})
        return bool(
            editor.get(
                "clear_history_on_list_switch",
                DEFAULT_CONFIG["editor"]["clear_history_on_list_switch"],
            )
        )

    def set_clear_history_on_list_switch(self, enabled: bool) -> None:
        editor = self._data.setdefault("editor", {})
        editor["clear_history_on_list_switch"] = bool(enabled)

    def get_default_song(self) -> Dict[str, Any]:
        defaults = DEFAULT_CONFIG["editor"]["default_song"]
        raw = self._data.get("editor", {}).get("default_song", {})
        if not isinstance(raw, dict):
            raw = {}
        result: Dict[str, Any] = {}
        for key in _SONG_FIELDS:
            value = raw.get(key)
            text = str(value).strip() if value is not None else ""
            result[key] = text or defaults[key]
        year = raw.get("year")
        try:
            result["year"] = int(year) if year not in (None, "") else None
        except (TypeError, ValueError):
            result["year"] = None
        return result

    def set_default_song(self, **fields: Any) -> None:
        song = self._data.setdefault("editor", {}).setdefault("default_song", {})
        for key, value in fields.items():
            if key in _SONG_FIELDS:
                song[key] = str(value)
            elif key == "year":
                song["year"] = int(value) if value not in (None, "") else None

    # --- storage ---
    def get_playlists_path(self) -> Path:
        storage = self._data.get("storage", {})
        raw = storage.get("playlists_path", DEFAULT_CONFIG["storage"]["playlists_path"])
        if raw in (None, "", False):
            raw = DEFAULT_CONFIG["storage"]["playlists_path"]
        return resolve_data_path(Path(str(raw)).expanduser())

    def set_playlists_path(self, path: Path | str | None) -> None:
        storage = self._data.setdefault("storage", {})
        storage["playlists_path"] = str(path) if path else ""

    # --- diagnostics ---
    def get_diagnostics_log_level(self) -> str:
        diagnostics = self._data.get("diagnostics", {})
        level = str(diagnostics.get("log_level", DEFAULT_CONFIG["diagnostics"]["log_level"])).upper()
        return level if level in LOG_LEVELS else DEFAULT_CONFIG["diagnostics"]["log_level"]

    def set_diagnostics_log_level(self, level: Optional[str]) -> None:
        diagnostics = self._data.setdefault("diagnostics", {})
        diagnostics["log_level"] = str(level or DEFAULT_CONFIG["diagnostics"]["log_level"]).upper()
