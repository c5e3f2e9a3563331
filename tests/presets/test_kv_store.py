"""
Unit Tests for key-value stores.
"""

import json
import logging

from vision_trainer.presets import JsonFileKeyValueStore, MemoryKeyValueStore


class TestMemoryKeyValueStore:
    """Tests for MemoryKeyValueStore."""

    def test_get_when_missing_then_none(self):
        assert MemoryKeyValueStore().get("absent") is None

    def test_set_when_called_then_value_returned(self):
        store = MemoryKeyValueStore({"a": "1"})
        store.set("b", "2")
        assert (store.get("a"), store.get("b")) == ("1", "2")


class TestJsonFileKeyValueStore:
    """Tests for JsonFileKeyValueStore."""

    def test_set_when_new_store_then_persisted_for_new_instance(self, tmp_path):
        # Arrange
        path = tmp_path / "nested" / "storage.json"
        JsonFileKeyValueStore(path).set("visionTrainerPresets", "[]")

        # Act
        value = JsonFileKeyValueStore(path).get("visionTrainerPresets")

        # Assert
        assert value == "[]"
        assert not path.with_suffix(".tmp").exists()

    def test_set_when_other_keys_present_then_preserved(self, tmp_path):
        path = tmp_path / "storage.json"
        store = JsonFileKeyValueStore(path)
        store.set("one", "1")
        store.set("two", "2")
        assert json.loads(path.read_text(encoding="utf-8")) == {"one": "1", "two": "2"}

    def test_get_when_file_missing_then_none(self, tmp_path):
        assert JsonFileKeyValueStore(tmp_path / "nothing.json").get("k") is None

    def test_get_when_file_corrupt_then_none_and_warning(self, tmp_path, caplog):
        path = tmp_path / "storage.json"
        path.write_text("{broken", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert JsonFileKeyValueStore(path).get("k") is None
        assert "corrupted" in caplog.text

    def test_get_when_value_not_string_then_none(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text(json.dumps({"k": [1, 2]}), encoding="utf-8")
        assert JsonFileKeyValueStore(path).get("k") is None

    def test_set_when_file_not_object_then_overwritten_with_valid_json(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[]", encoding="utf-8")

        JsonFileKeyValueStore(path).set("k", "v")

        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}
