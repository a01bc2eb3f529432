"""Playlist data models and index-addressed primitives."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from playlister.core.playlist_ops import relocate


@dataclass
class Song:
    title: str
    artist: str
    youtube_id: str
    year: Optional[int] = None

    def clone(self) -> "Song":
        return replace(self)

    @property
    def display_label(self) -> str:
        if self.year is not None:
            return f"{self.title} ({self.year}) by {self.artist}"
        return f"{self.title} by {self.artist}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "artist": self.artist,
            "youTubeId": self.youtube_id,
            "year": self.year,
        }


@dataclass
class Playlist:
    id: str
    name: str
    songs: List[Song] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.songs)

    def get_song(self, index: int) -> Song:
        return self.songs[index]

    def insert_song(self, index: int, song: Song) -> None:
        self.songs.insert(index, song.clone())

    def remove_song(self, index: int) -> Song:
        return self.songs.pop(index)

    def update_song(self, index: int, song: Song) -> None:
        self.songs[index] = song.clone()

    def move_song(self, from_index: int, to_index: int) -> None:
        relocate(self.songs, from_index, to_index)

    def clone(self, new_id: Optional[str] = None, name: Optional[str] = None) -> "Playlist":
        return Playlist(
            id=new_id if new_id is not None else self.id,
            name=name if name is not None else self.name,
            songs=[song.clone() for song in self.songs],
        )
