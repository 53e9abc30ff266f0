import json

from edhighway.settings_store import DEFAULT_GROUP, Setting, SettingsStore


def test_store_value_default_and_contains():
    store = SettingsStore()
    assert store.value("g", "k", 5) == 5
    assert not store.contains("g", "k")
    store.set_value("g", "k", 7)
    assert store.contains("g", "k")
    assert store.value("g", "k", 5) == 7
    assert not store.contains("other", "k")


def test_store_sync_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    store.set_value("a", "name", "Sol")
    store.set_value("a", "flag", True)
    store.sync()
    reopened = SettingsStore(path)
    assert reopened.value("a", "name") == "Sol"
    assert reopened.value("a", "flag") is True


def test_store_corrupt_file_starts_empty(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    store = SettingsStore(path)
    assert store.value("a", "b", "fallback") == "fallback"


def test_setting_uses_default_when_missing():
    setting = Setting("02_Int_SHIP_LY", 70, store=SettingsStore())
    assert setting.value == 70
    assert setting.group == DEFAULT_GROUP


def test_setting_flush_writes_subgroup_path(tmp_path):
    path = tmp_path / "s.json"
    setting = Setting("key", 3, store=SettingsStore(path))
    setting.set(9)
    setting.flush()
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[f"{DEFAULT_GROUP}/sub_0"]["key"] == 9


def test_setting_reload_reads_store():
    store = SettingsStore()
    setting = Setting("key", 1, store=store)
    store.set_value(f"{DEFAULT_GROUP}/sub_0", "key", 4)
    setting.reload()
    assert setting.value == 4


def test_setting_converts_to_default_type():
    store = SettingsStore()
    store.set_value(f"{DEFAULT_GROUP}/sub_0", "flag", "true")
    store.set_value(f"{DEFAULT_GROUP}/sub_0", "num", "12")
    assert Setting("flag", False, store=store).value is True
    assert Setting("num", 0, store=store).value == 12


def test_set_default_and_listeners():
    seen = []
    setting = Setting("key", 10, store=SettingsStore())
    setting.listeners.append(lambda s: seen.append(s.value))
    setting.set(20)
    setting.set_default()
    assert seen == [20, 10]
    assert setting.value == 10


def test_switch_subgroup_copies_existing_value():
    store = SettingsStore()
    setting = Setting("key", 1, store=store)
    setting.set(5)
    setting.flush()
    setting.switch_subgroup(2)
    assert setting.subgroup == 2
    assert setting.value == 5
    assert store.value(f"{DEFAULT_GROUP}/sub_2", "key") == 5


def test_switch_subgroup_without_stored_value_uses_default():
    store = SettingsStore()
    setting = Setting("key", 1, store=store)
    setting.set(5)  # not flushed
    setting.switch_subgroup(1)
    assert setting.value == 1


def test_switch_back_restores_each_subgroup():
    store = SettingsStore()
    setting = Setting("key", 1, store=store)
    setting.flush()
    setting.switch_subgroup(1)
    setting.set(8)
    setting.switch_subgroup(0)
    assert setting.value == 1
    setting.switch_subgroup(1)
    assert setting.value == 8


def test_set_group_then_reload():
    store = SettingsStore()
    store.set_value("Other/sub_0", "key", "x")
    setting = Setting("key", "d", store=store)
    setting.set_group("Other")
    setting.reload()
    assert setting.value == "x"


def test_context_manager_flushes():
    store = SettingsStore()
    with Setting("key", 0, store=store) as setting:
        setting.set(3)
    assert store.value(f"{DEFAULT_GROUP}/sub_0", "key") == 3