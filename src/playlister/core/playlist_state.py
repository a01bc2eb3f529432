"""Editing session: turns user intents into transactions on the open playlist.

The presentation layer calls the ``add_transaction_to_*`` methods when the
user commits an edit. Each one validates the request against the current
state, captures what the transaction needs to reverse itself, and pushes it
onto the session's :class:`TransactionStack`. Invalid requests raise
``ValueError`` before any transaction exists, so the stack only ever holds
transactions that can be performed and reversed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from playlister.core.app_state import AppState, PlaylistFactory
from playlister.core.config import SettingsManager
from playlister.core.playlist import Playlist, Song
from playlister.core.playlist_ops import check_index
from playlister.core.store import PlaylistStore
from playlister.core.transaction_stack import TransactionStack
from playlister.core.transactions import (
    CreateSongTransaction,
    DeleteListTransaction,
    DuplicateListTransaction,
    EditSongTransaction,
    MoveSongTransaction,
    RemoveSongTransaction,
    RenameListTransaction,
    Transaction,
)

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("title", "artist", "youtube_id")
_FIELD_ALIASES = {"youTubeId": "youtube_id"}


@dataclass(frozen=True)
class ToolbarState:
    """Which edit controls the presentation layer should enable."""

    add_list: bool
    add_song: bool
    undo: bool
    redo: bool
    close: bool


def _normalize_year(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid year: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid year: {value!r}") from None


def normalize_song_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the recognised song fields from ``fields`` in canonical form.

    Unknown keys are ignored. Text fields are stripped and must not be blank.
    """

    result: Dict[str, Any] = {}
    for key, value in fields.items():
        key = _FIELD_ALIASES.get(key, key)
        if key in _TEXT_FIELDS:
            text = str(value).strip() if value is not None else ""
            if not text:
                raise ValueError(f"Song {key} is required")
            result[key] = text
        elif key == "year":
            result["year"] = _normalize_year(value)
    return result


class PlaylistState:
    """Playlists, the open playlist and the undo history of one editing session."""

    def __init__(
        self,
        app_state: Optional[AppState] = None,
        transactions: Optional[TransactionStack] = None,
        factory: Optional[PlaylistFactory] = None,
        store: Optional[PlaylistStore] = None,
        *,
        default_list_name: str = "Untitled",
        clear_history_on_list_switch: bool = True,
    ) -> None:
        self.app_state = app_state if app_state is not None else AppState()
        self.transactions = transactions if transactions is not None else TransactionStack()
        self.factory = factory if factory is not None else PlaylistFactory()
        self.store = store
        self.default_list_name = default_list_name
        self.clear_history_on_list_switch = clear_history_on_list_switch
        self._current: Optional[Playlist] = None
        self._confirm_dialog_open = False
        self._listeners: List[Callable[[], None]] = []

    @classmethod
    def from_settings(cls, settings: SettingsManager, store: Optional[PlaylistStore] = None) -> "PlaylistState":
        return cls(
            factory=PlaylistFactory(settings.get_default_song()),
            store=store,
            default_list_name=settings.get_default_list_name(),
            clear_history_on_list_switch=settings.get_clear_history_on_list_switch(),
        )

    # --- observers and persistence ---
    def add_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    def load_lists(self) -> bool:
        """Replace the collection with the stored playlists.

        Returns ``True`` when the store held at least one playlist.
        """

        if self.store is None:
            return False
        playlists = self.store.load_lists()
        self._current = None
        self.transactions.clear()
        self.app_state.replace_all(playlists)
        logger.info("Loaded %d playlist(s)", len(playlists))
        self._notify()
        return bool(playlists)

    def save_lists(self) -> None:
        if self.store is not None:
            self.store.save_lists(self.app_state.iter_playlists())

    def _after_change(self) -> None:
        self.save_lists()
        self._notify()

    # --- playlists ---
    @property
    def playlists(self) -> List[Playlist]:
        return list(self.app_state.iter_playlists())

    @property
    def current_list(self) -> Optional[Playlist]:
        return self._current

    def has_current_list(self) -> bool:
        return self._current is not None

    def _require_playlist(self, playlist_id: str) -> Playlist:
        playlist = self.app_state.get_playlist(playlist_id)
        if playlist is None:
            raise ValueError(f"Unknown playlist: {playlist_id}")
        return playlist

    def _require_current(self) -> Playlist:
        if self._current is None:
            raise ValueError("No playlist is open")
        return self._current

    def add_new_list(self, name: Optional[str] = None, songs: Iterable[Song] | None = None) -> Playlist:
        playlist = self.factory.create_playlist((name or "").strip() or self.default_list_name, songs)
        self.app_state.add_playlist(playlist)
        logger.info("Added playlist %s (%s)", playlist.id, playlist.name)
        self._after_change()
        return playlist

    def load_list(self, playlist_id: str) -> Playlist:
        playlist = self._require_playlist(playlist_id)
        if playlist is not self._current:
            self._switch_to(playlist)
            logger.info("Opened playlist %s", playlist.id)
            self._notify()
        return playlist

    def close_list(self) -> None:
        if self._current is None:
            return
        logger.info("Closed playlist %s", self._current.id)
        self._switch_to(None)
        self._notify()

    def _switch_to(self, playlist: Optional[Playlist]) -> None:
        self._current = playlist
        if self.clear_history_on_list_switch:
            self.transactions.clear()

    def playlist_size(self) -> int:
        return self._current.size if self._current is not None else 0

    def get_song(self, index: int) -> Song:
        playlist = self._require_current()
        return playlist.get_song(check_index(index, playlist.size))

    # --- song transactions ---
    def _commit(self, transaction: Transaction) -> None:
        self.transactions.push(transaction)
        self._after_change()

    def add_transaction_to_create_song(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        index: Optional[int] = None,
    ) -> None:
        playlist = self._require_current()
        position = playlist.size if index is None else check_index(index, playlist.size, allow_end=True)
        song = self.factory.create_song(**normalize_song_fields(fields or {}))
        self._commit(CreateSongTransaction(playlist, position, song))

    def add_transaction_to_edit_song(self, index: int, new_fields: Mapping[str, Any]) -> None:
        playlist = self._require_current()
        check_index(index, playlist.size)
        old_song = playlist.get_song(index)
        values = {
            "title": old_song.title,
            "artist": old_song.artist,
            "youtube_id": old_song.youtube_id,
            "year": old_song.year,
        }
        values.update(normalize_song_fields(new_fields))
        new_song = Song(**values)
        self._commit(EditSongTransaction(playlist, index, old_song, new_song))

    def add_transaction_to_remove_song(self, index: int) -> None:
        playlist = self._require_current()
        check_index(index, playlist.size)
        self._commit(RemoveSongTransaction(playlist, index, playlist.get_song(index)))

    def add_transaction_to_move_song(self, from_index: int, to_index: int) -> None:
        playlist = self._require_current()
        check_index(from_index, playlist.size)
        check_index(to_index, playlist.size)
        if from_index == to_index:
            raise ValueError("Song is already at that position")
        self._commit(MoveSongTransaction(playlist, from_index, to_index))

    # --- list transactions ---
    def add_transaction_to_rename_list(self, playlist_id: str, name: str) -> None:
        playlist = self._require_playlist(playlist_id)
        new_name = (name or "").strip()
        if not new_name:
            raise ValueError("Playlist name is required")
        if new_name == playlist.name:
            raise ValueError("Playlist already has that name")
        self._commit(RenameListTransaction(playlist, playlist.name, new_name))

    def add_transaction_to_duplicate_list(self, playlist_id: str) -> Playlist:
        source = self._require_playlist(playlist_id)
        index = self.app_state.index_of(playlist_id)
        copy = self.factory.duplicate_playlist(source)
        self._commit(DuplicateListTransaction(self.app_state, index + 1, copy))
        return copy

    def add_transaction_to_delete_list(self, playlist_id: str) -> None:
        playlist = self._require_playlist(playlist_id)
        if playlist is self._current:
            self._switch_to(None)
            logger.info("Closed playlist %s before deleting it", playlist.id)
        index = self.app_state.index_of(playlist_id)
        self._commit(DeleteListTransaction(self.app_state, index, playlist))

    # --- history ---
    def undo(self) -> bool:
        if not self.transactions.undo():
            return False
        self._forget_removed_current()
        self._after_change()
        return True

    def redo(self) -> bool:
        if not self.transactions.redo():
            return False
        self._forget_removed_current()
        self._after_change()
        return True

    def _forget_removed_current(self) -> None:
        # Only reachable when history survives list switches.
        if self._current is not None and self.app_state.index_of(self._current.id) is None:
            logger.info("Open playlist %s left the collection", self._current.id)
            self._current = None

    def can_undo(self) -> bool:
        return self.transactions.can_undo()

    def can_redo(self) -> bool:
        return self.transactions.can_redo()

    def clear_history(self) -> None:
        self.transactions.clear()
        self._notify()

    # --- foolproof controls ---
    @property
    def confirm_dialog_open(self) -> bool:
        return self._confirm_dialog_open

    def set_confirm_dialog_open(self, is_open: bool) -> None:
        self._confirm_dialog_open = bool(is_open)
        self._notify()

    def toggle_confirm_dialog_open(self) -> bool:
        self.set_confirm_dialog_open(not self._confirm_dialog_open)
        return self._confirm_dialog_open

    def toolbar_state(self) -> ToolbarState:
        editable = self.has_current_list() and not self._confirm_dialog_open
        idle = not self._confirm_dialog_open
        return ToolbarState(
            add_list=idle,
            add_song=editable,
            undo=idle and self.can_undo(),
            redo=idle and self.can_redo(),
            close=editable,
        )


__all__ = [
    "PlaylistState",
    "ToolbarState",
    "normalize_song_fields",
]
