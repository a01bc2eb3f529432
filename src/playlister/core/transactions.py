"""Reversible transactions applied to playlists and the playlist collection.

Song transactions capture copies of the songs they need when they are
constructed, so ``reverse`` restores the exact prior state even if the live
song is later edited or removed. Transactions do not validate indices;
``PlaylistState`` checks bounds before building them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol

from playlister.core.playlist import Playlist, Song

if TYPE_CHECKING:
    from playlister.core.app_state import AppState


class Transaction(Protocol):
    label: ClassVar[str]

    def perform(self) -> None:
        ...

    def reverse(self) -> None:
        ...


@dataclass(eq=False)
class CreateSongTransaction:
    playlist: Playlist
    index: int
    song: Song

    label: ClassVar[str] = "Create Song"

    def __post_init__(self) -> None:
        self.song = self.song.clone()

    def perform(self) -> None:
        self.playlist.insert_song(self.index, self.song)

    def reverse(self) -> None:
        self.playlist.remove_song(self.index)


@dataclass(eq=False)
class EditSongTransaction:
    playlist: Playlist
    index: int
    old_song: Song
    new_song: Song

    label: ClassVar[str] = "Edit Song"

    def __post_init__(self) -> None:
        self.old_song = self.old_song.clone()
        self.new_song = self.new_song.clone()

    def perform(self) -> None:
        self.playlist.update_song(self.index, self.new_song)

    def reverse(self) -> None:
        self.playlist.update_song(self.index, self.old_song)


@dataclass(eq=False)
class RemoveSongTransaction:
    playlist: Playlist
    index: int
    song: Song

    label: ClassVar[str] = "Remove Song"

    def __post_init__(self) -> None:
        self.song = self.song.clone()

    def perform(self) -> None:
        self.playlist.remove_song(self.index)

    def reverse(self) -> None:
        self.playlist.insert_song(self.index, self.song)


@dataclass(eq=False)
class MoveSongTransaction:
    playlist: Playlist
    from_index: int
    to_index: int

    label: ClassVar[str] = "Move Song"

    def perform(self) -> None:
        self.playlist.move_song(self.from_index, self.to_index)

    def reverse(self) -> None:
        self.playlist.move_song(self.to_index, self.from_index)


@dataclass(eq=False)
class RenameListTransaction:
    playlist: Playlist
    old_name: str
    new_name: str

    label: ClassVar[str] = "Rename List"

    def perform(self) -> None:
        self.playlist.name = self.new_name

    def reverse(self) -> None:
        self.playlist.name = self.old_name


@dataclass(eq=False)
class DuplicateListTransaction:
    """Insert an already copied playlist into the collection.

    The same copy is inserted on every redo so later transactions that refer
    to it keep addressing the playlist that is in the collection.
    """

    state: "AppState"
    index: int
    copy: Playlist

    label: ClassVar[str] = "Duplicate List"

    def perform(self) -> None:
        self.state.insert_playlist(self.index, self.copy)

    def reverse(self) -> None:
        self.state.remove_playlist_at(self.index)


@dataclass(eq=False)
class DeleteListTransaction:
    """Remove a playlist from the collection and put it back on undo.

    The removed playlist is unreachable until the undo, so restoring the
    instance itself restores its full state, songs included.
    """

    state: "AppState"
    index: int
    playlist: Playlist

    label: ClassVar[str] = "Delete List"

    def perform(self) -> None:
        self.state.remove_playlist_at(self.index)

    def reverse(self) -> None:
        self.state.insert_playlist(self.index, self.playlist)


__all__ = [
    "CreateSongTransaction",
    "DeleteListTransaction",
    "DuplicateListTransaction",
    "EditSongTransaction",
    "MoveSongTransaction",
    "RemoveSongTransaction",
    "RenameListTransaction",
    "Transaction",
]
