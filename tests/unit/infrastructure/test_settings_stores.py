"""
Unit Tests: settings stores (memória e arquivo JSON)
"""
import json

import pytest

from infrastructure.adapters.output.storage import InMemorySettingsStore, JsonFileSettingsStore


class TestInMemorySettingsStore:

    def test_set_get_remove(self):
        store = InMemorySettingsStore()

        assert store.get("lastSelection") is None
        store.set("lastSelection", "a")
        store.set("lastSelection", "b")
        assert store.get("lastSelection") == "b"

        store.remove("lastSelection")
        store.remove("lastSelection")
        assert store.get("lastSelection") is None

    def test_initial_values_are_copied(self):
        initial = {"k": "v"}
        store = InMemorySettingsStore(initial)
        store.set("k", "other")

        assert initial == {"k": "v"}


class TestJsonFileSettingsStore:

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileSettingsStore(tmp_path / "settings.json")

        assert store.get("lastSelection") is None

    def test_persists_between_instances(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        JsonFileSettingsStore(path).set("lastSelection", '{"type": "city", "name": "São Paulo"}')

        assert JsonFileSettingsStore(path).get("lastSelection") == '{"type": "city", "name": "São Paulo"}'
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "lastSelection": '{"type": "city", "name": "São Paulo"}'
        }
        assert not (tmp_path / "nested" / "settings.json.tmp").exists()

    def test_keeps_other_keys(self, tmp_path):
        store = JsonFileSettingsStore(tmp_path / "settings.json")
        store.set("a", "1")
        store.set("b", "2")
        store.remove("a")

        assert store.get("a") is None
        assert store.get("b") == "2"

    @pytest.mark.parametrize("content", ["[1, 2]", "{not json", '{"lastSelection": "{\\"ty'])
    def test_unreadable_file_is_treated_as_empty(self, tmp_path, content):
        path = tmp_path / "settings.json"
        path.write_text(content, encoding="utf-8")

        assert JsonFileSettingsStore(path).get("lastSelection") is None

    def test_write_replaces_corrupt_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileSettingsStore(path)

        store.set("lastSelection", "x")

        assert json.loads(path.read_text(encoding="utf-8")) == {"lastSelection": "x"}
        assert store.get("lastSelection") == "x"

    def test_default_path_comes_from_settings(self, tmp_path, monkeypatch):
        from shared.config import settings

        monkeypatch.setattr(settings, "LAST_SELECTION_STORE_PATH", str(tmp_path / "prefs.json"))

        assert JsonFileSettingsStore().path == tmp_path / "prefs.json"
