"""Playlist collection and factories for new playlists and songs."""

from __future__ import annotations

import itertools
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from playlister.core.playlist import Playlist, Song


@dataclass
class AppState:
    """Ordered collection of the user's playlists."""

    playlists: List[Playlist] = field(default_factory=list)

    def add_playlist(self, playlist: Playlist) -> None:
        self.playlists.append(playlist)

    def insert_playlist(self, index: int, playlist: Playlist) -> None:
        self.playlists.insert(index, playlist)

    def remove_playlist_at(self, index: int) -> Playlist:
        return self.playlists.pop(index)

    def index_of(self, playlist_id: str) -> Optional[int]:
        for index, playlist in enumerate(self.playlists):
            if playlist.id == playlist_id:
                return index
        return None

    def get_playlist(self, playlist_id: str) -> Optional[Playlist]:
        index = self.index_of(playlist_id)
        return self.playlists[index] if index is not None else None

    def iter_playlists(self) -> Iterable[Playlist]:
        return iter(self.playlists)

    def replace_all(self, playlists: Iterable[Playlist]) -> None:
        self.playlists = list(playlists)


class PlaylistFactory:
    """Creates playlists with unique identifiers and songs with default fields."""

    def __init__(self, default_song: Optional[Dict[str, Any]] = None) -> None:
        self._playlist_counter = itertools.count(1)
        self._default_song: Dict[str, Any] = {
            "title": "Untitled",
            "artist": "???",
            "youtube_id": "dQw4w9WgXcQ",
            "year": None,
        }
        if default_song:
            self._default_song.update(default_song)

    def new_playlist_id(self) -> str:
        return f"pl-{next(self._playlist_counter)}-{uuid.uuid4().hex[:6]}"

    def create_playlist(self, name: str, songs: Iterable[Song] | None = None) -> Playlist:
        return Playlist(
            id=self.new_playlist_id(),
            name=name,
            songs=[song.clone() for song in songs or []],
        )

    def duplicate_playlist(self, source: Playlist, name: str | None = None) -> Playlist:
        return source.clone(new_id=self.new_playlist_id(), name=name or f"{source.name} (Copy)")

    def create_song(self, **overrides: Any) -> Song:
        values = dict(self._default_song)
        values.update({key: value for key, value in overrides.items() if key in values})
        return Song(
            title=values["title"],
            artist=values["artist"],
            youtube_id=values["youtube_id"],
            year=values["year"],
        )
