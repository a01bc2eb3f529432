"""Durable storage for the playlist collection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol

import yaml

from playlister.core.playlist import Playlist, Song

logger = logging.getLogger(__name__)


class PlaylistStore(Protocol):
    def load_lists(self) -> List[Playlist]:
        ...

    def save_lists(self, playlists: Iterable[Playlist]) -> None:
        ...


def song_from_dict(data: Dict[str, Any]) -> Song:
    year = data.get("year")
    try:
        year_value = int(year) if year not in (None, "") else None
    except (TypeError, ValueError):
        year_value = None
    return Song(
        title=str(data.get("title") or ""),
        artist=str(data.get("artist") or ""),
        youtube_id=str(data.get("youTubeId") or data.get("youtube_id") or ""),
        year=year_value,
    )


def playlist_from_dict(data: Dict[str, Any]) -> Optional[Playlist]:
    playlist_id = data.get("id")
    if playlist_id in (None, ""):
        return None
    songs_raw = data.get("songs") or []
    songs = [song_from_dict(entry) for entry in songs_raw if isinstance(entry, dict)]
    return Playlist(id=str(playlist_id), name=str(data.get("name") or ""), songs=songs)


def playlist_to_dict(playlist: Playlist) -> Dict[str, Any]:
    return {
        "id": playlist.id,
        "name": playlist.name,
        "songs": [song.to_dict() for song in playlist.songs],
    }


class YamlPlaylistStore:
    """Keeps all playlists in a single YAML document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load_lists(self) -> List[Playlist]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as file:
            document = yaml.safe_load(file) or {}
        entries = document.get("playlists") if isinstance(document, dict) else None
        if not isinstance(entries, list):
            logger.warning("Playlist file %s has no playlist list, ignoring it", self.path)
            return []
        playlists: List[Playlist] = []
        for entry in entries:
            playlist = playlist_from_dict(entry) if isinstance(entry, dict) else None
            if playlist is None:
                logger.warning("Skipping malformed playlist entry in %s", self.path)
                continue
            playlists.append(playlist)
        return playlists

    def save_lists(self, playlists: Iterable[Playlist]) -> None:
        document = {"playlists": [playlist_to_dict(playlist) for playlist in playlists]}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(document, file, allow_unicode=True, sort_keys=False)
        logger.debug("Saved %d playlist(s) to %s", len(document["playlists"]), self.path)


__all__ = [
    "PlaylistStore",
    "YamlPlaylistStore",
    "playlist_from_dict",
    "playlist_to_dict",
    "song_from_dict",
]
