import json

from circussync.core.preferences import PreferenceFile
from circussync.stores.theme_store import THEME_KEY, ThemeStore


def test_defaults_to_light_without_a_stored_preference(tmp_path) -> None:
    store = ThemeStore(PreferenceFile(tmp_path / "prefs.json"))

    store.init()

    assert store.theme == "light"


def test_toggle_persists_under_the_theme_key(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    store = ThemeStore(PreferenceFile(path))
    store.init()

    store.toggle()

    assert store.theme == "dark"
    assert json.loads(path.read_text())[THEME_KEY] == "dark"

    reloaded = ThemeStore(PreferenceFile(path))
    reloaded.init()
    assert reloaded.theme == "dark"


def test_invalid_stored_value_falls_back_to_light(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({THEME_KEY: "neon"}))
    store = ThemeStore(PreferenceFile(path))

    store.init()

    assert store.theme == "light"


def test_unreadable_file_is_not_fatal(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("{not json")
    store = ThemeStore(PreferenceFile(path))

    store.init()
    store.set_theme("dark")

    assert store.theme == "dark"
