from playlister.core.playlist import Playlist, Song
from playlister.core.store import YamlPlaylistStore


def test_missing_file_loads_nothing(tmp_path) -> None:
    store = YamlPlaylistStore(tmp_path / "missing.yaml")
    assert store.load_lists() == []


def test_saved_playlists_load_back(tmp_path) -> None:
    store = YamlPlaylistStore(tmp_path / "nested" / "playlists.yaml")
    playlists = [
        Playlist(id="pl-1", name="Żółta", songs=[Song("A", "Artist", "yt-a", 1990), Song("B", "Other", "yt-b")]),
        Playlist(id="pl-2", name="Empty"),
    ]

    store.save_lists(playlists)

    assert store.load_lists() == playlists


def test_document_uses_form_field_names(tmp_path) -> None:
    path = tmp_path / "playlists.yaml"
    YamlPlaylistStore(path).save_lists([Playlist(id="pl-1", name="Mix", songs=[Song("A", "B", "yt")])])
    assert "youTubeId: yt" in path.read_text(encoding="utf-8")


def test_malformed_entries_are_skipped(tmp_path) -> None:
    path = tmp_path / "playlists.yaml"
    path.write_text(
        "playlists:\n"
        "  - name: no id\n"
        "  - just text\n"
        "  - id: pl-1\n"
        "    name: Kept\n"
        "    songs:\n"
        "      - title: A\n"
        "        artist: B\n"
        "        youTubeId: yt\n"
        "        year: not a year\n",
        encoding="utf-8",
    )
    playlists = YamlPlaylistStore(path).load_lists()
    assert playlists == [Playlist(id="pl-1", name="Kept", songs=[Song("A", "B", "yt", None)])]


def test_document_without_playlists_loads_nothing(tmp_path) -> None:
    path = tmp_path / "playlists.yaml"
    path.write_text("settings: {}\n", encoding="utf-8")
    assert YamlPlaylistStore(path).load_lists() == []
