import pytest

from edhighway.settings import (
    BoolSetting,
    ComboSetting,
    FileSetting,
    HotkeySetting,
    IntSetting,
    SettingsMap,
    StringSetting,
)
from edhighway.settings_store import SettingsStore


@pytest.fixture
def store():
    return SettingsStore()


def test_int_setting_hint_text_includes_range(store):
    setting = IntSetting("k", 10, "Text", "Some hint", 3, 30, store=store)
    assert setting.hint_text() == "Some hint\nRange: 3-30"


def test_int_setting_default_with_unit_step(store):
    setting = IntSetting("k", 704, "t", "h", 1, 2000, store=store)
    assert setting.value == 704
    assert int(setting) == 704


def test_int_setting_rejects_bad_arguments(store):
    with pytest.raises(ValueError):
        IntSetting("k", 1, "t", "h", 0, 10, step=0, store=store)
    with pytest.raises(ValueError):
        IntSetting("k", 1, "t", "h", 10, 0, store=store)


def test_int_setting_persists_through_store(store):
    first = IntSetting("k", 10, "t", "h", 0, 100, store=store)
    first.set(42)
    first.flush()
    second = IntSetting("k", 10, "t", "h", 0, 100, store=store)
    assert second.value == 42


def test_bool_setting_converts_strings(store):
    setting = BoolSetting("flag", False, "t", "h", store)
    setting.set("true")
    assert bool(setting) is True
    setting.set_default()
    assert setting.value is False


def test_file_setting_keeps_exec_text(store):
    setting = FileSetting("dir", "/tmp", "t", "h", "Pick folder", store=store)
    assert setting.exec_text == "Pick folder"
    assert str(setting) == "/tmp"


def test_hotkey_setting_is_string_setting(store):
    setting = HotkeySetting("hot", "CTRL+ALT+M", "t", "h", store)
    setting.set("Ctrl+X")
    assert str(setting) == "Ctrl+X"
    assert isinstance(setting, StringSetting)


def _items():
    return [("A", "a"), ("B", "b"), "C"]


def test_combo_items_fill_missing_data(store):
    setting = ComboSetting("c", 0, "t", "h", _items, store=store)
    assert setting.items() == [("A", "a"), ("B", "b"), ("C", None)]


def test_combo_stored_selection_out_of_range(store):
    setting = ComboSetting("c", 3, "t", "h", _items, store=store)
    assert setting.stored_selection(2) == -1
    assert setting.stored_selection(5) == 3
    assert setting.stored_selection() == 3


def test_combo_user_data(store):
    setting = ComboSetting("c", 0, "t", "h", _items, store=store)
    setting.set(1)
    assert setting.user_data() == "b"
    setting.set(7)
    assert setting.user_data() is None


def _make_map(store):
    return SettingsMap(
        [
            IntSetting("b_int", 5, "t", "h", 0, 10, store=store),
            BoolSetting("a_bool", True, "t", "h", store),
            StringSetting("c_str", "text", "t", "h", store),
        ]
    )


def test_map_keys_sorted(store):
    settings = _make_map(store)
    assert settings.keys() == sorted(settings.keys())
    assert list(settings) == settings.keys()
    assert len(settings) == 3


def test_map_typed_reads(store):
    settings = _make_map(store)
    assert settings.read_bool("a_bool") is True
    assert settings.read_int("b_int") == 5
    assert settings.read_string("c_str") == "text"
    assert settings.read_int("missing") == 0
    assert settings.read_string("b_int") == ""
    assert settings.read_bool("b_int") is False
    assert settings.read_value("missing", "x") == "x"


def test_map_store_value_notifies(store):
    settings = _make_map(store)
    seen = []
    settings.subscribe(seen.append)
    settings.store_value("b_int", 9)
    settings.store_value("missing", 1)
    assert seen == ["b_int"]
    assert settings.read_int("b_int") == 9


def test_map_from_mapping(store):
    setting = BoolSetting("x", False, "t", "h", store)
    settings = SettingsMap({"x": setting})
    assert settings["x"] is setting