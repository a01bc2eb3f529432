from pathlib import Path

import yaml

from playlister.core.config import DEFAULT_CONFIG, SettingsManager


def test_missing_file_uses_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("PLAYLISTER_DATA_PATH", raising=False)
    manager = SettingsManager(config_path=tmp_path / "settings.yaml")
    assert manager.get_default_list_name() == "Untitled"
    assert manager.get_clear_history_on_list_switch() is True
    assert manager.get_default_song() == DEFAULT_CONFIG["editor"]["default_song"]
    assert manager.get_playlists_path() == Path("data/playlists.yaml")
    assert manager.get_diagnostics_log_level() == "WARNING"


def test_user_values_merge_over_defaults(tmp_path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(
        yaml.safe_dump({"editor": {"default_song": {"artist": "Unknown", "year": "1999"}}}),
        encoding="utf-8",
    )
    manager = SettingsManager(config_path=config_path)
    song = manager.get_default_song()
    assert song["artist"] == "Unknown"
    assert song["title"] == "Untitled"
    assert song["year"] == 1999
    assert manager.get_clear_history_on_list_switch() is True


def test_invalid_values_fall_back(tmp_path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "editor": {"default_list_name": "  ", "default_song": {"title": "", "year": "soon"}},
                "diagnostics": {"log_level": "chatty"},
            }
        ),
        encoding="utf-8",
    )
    manager = SettingsManager(config_path=config_path)
    assert manager.get_default_list_name() == "Untitled"
    assert manager.get_default_song()["title"] == "Untitled"
    assert manager.get_default_song()["year"] is None
    assert manager.get_diagnostics_log_level() == "WARNING"


def test_malformed_document_is_ignored(tmp_path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    manager = SettingsManager(config_path=config_path)
    assert manager.get_raw() == DEFAULT_CONFIG


def test_settings_roundtrip(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("PLAYLISTER_DATA_PATH", raising=False)
    config_path = tmp_path / "settings.yaml"
    manager = SettingsManager(config_path=config_path)
    manager.set_default_list_name("Nowa lista")
    manager.set_clear_history_on_list_switch(False)
    manager.set_default_song(title="Bez tytułu", year=2024)
    manager.set_playlists_path(tmp_path / "lists.yaml")
    manager.set_diagnostics_log_level("debug")
    manager.save()

    reloaded = SettingsManager(config_path=config_path)
    assert reloaded.get_default_list_name() == "Nowa lista"
    assert reloaded.get_clear_history_on_list_switch() is False
    assert reloaded.get_default_song()["title"] == "Bez tytułu"
    assert reloaded.get_default_song()["year"] == 2024
    assert reloaded.get_playlists_path() == tmp_path / "lists.yaml"
    assert reloaded.get_diagnostics_log_level() == "DEBUG"


def test_environment_overrides_paths(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PLAYLISTER_CONFIG_DIR", str(tmp_path / "conf"))
    monkeypatch.setenv("PLAYLISTER_DATA_PATH", str(tmp_path / "data.yaml"))
    manager = SettingsManager()
    assert manager.config_path == tmp_path / "conf" / "settings.yaml"
    assert manager.get_playlists_path() == tmp_path / "data.yaml"
