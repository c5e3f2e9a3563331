"""
Unit Tests for preset JSON serialization.
"""

import json
import logging

import pytest

from vision_trainer.core.geometry import Orientation
from vision_trainer.core.models import GridLayout, PageSettings, PositionedCharacter, Preset
from vision_trainer.core.utils.serialization import (
    deserialize_preset,
    presets_from_json,
    presets_to_json,
    serialize_preset,
)


@pytest.fixture
def custom_preset(small_layout):
    return Preset(
        name="Clinic A",
        is_built_in=False,
        letters=tuple(small_layout),
        page_settings=PageSettings("#000000", "#FFFFFF"),
        orientation=Orientation.PORTRAIT,
        created_at="2026-01-02T03:04:05+00:00",
        grid_layout=GridLayout(3, 1),
    )


class TestSerializePreset:
    """Tests for serialize_preset()."""

    def test_serialize_when_full_preset_then_camel_case_keys(self, custom_preset):
        data = serialize_preset(custom_preset)

        assert data["name"] == "Clinic A"
        assert data["isBuiltIn"] is False
        assert data["orientation"] == "portrait"
        assert data["createdAt"] == "2026-01-02T03:04:05+00:00"
        assert data["gridLayout"] == {"rows": 3, "cols": 1}
        assert data["pageSettings"]["bgColor"] == "#000000"
        assert data["letters"][2] == {"id": 5, "char": "C", "x": 60.0, "y": 40.0, "fontSize": 24.0}

    def test_serialize_when_no_grid_layout_then_key_omitted(self, small_layout):
        preset = Preset(name="x", is_built_in=True, letters=tuple(small_layout))
        assert "gridLayout" not in serialize_preset(preset)


class TestDeserializePreset:
    """Tests for deserialize_preset()."""

    def test_deserialize_when_optional_fields_missing_then_defaults(self):
        preset = deserialize_preset({
            "name": "Bare",
            "letters": [{"id": 0, "char": "Q", "x": 1, "y": 2, "fontSize": 12}],
        })

        assert preset.orientation is Orientation.LANDSCAPE
        assert preset.page_settings == PageSettings()
        assert preset.grid_layout is None
        assert preset.created_at == ""
        assert preset.is_built_in is False
        assert preset.letters == (PositionedCharacter(0, "Q", 1.0, 2.0, 12.0),)

    def test_deserialize_when_unknown_fields_then_ignored(self):
        preset = deserialize_preset({"name": "Extra", "letters": [], "colour": "teal"})
        assert preset.name == "Extra"

    def test_deserialize_when_name_missing_then_raises_key_error(self):
        with pytest.raises(KeyError):
            deserialize_preset({"letters": []})

    def test_deserialize_when_not_object_then_raises_type_error(self):
        with pytest.raises(TypeError):
            deserialize_preset(["name"])


class TestPresetsJson:
    """Tests for presets_to_json() / presets_from_json()."""

    def test_from_json_when_document_written_then_presets_equal(self, custom_preset):
        text = presets_to_json([custom_preset])
        assert presets_from_json(text) == [custom_preset]

    @pytest.mark.parametrize("text", [None, "", "{not json", '{"name": "obj"}', "42"])
    def test_from_json_when_malformed_then_empty_list(self, text):
        assert presets_from_json(text) == []

    def test_from_json_when_one_entry_bad_then_others_kept(self, custom_preset, caplog):
        # Arrange
        good = serialize_preset(custom_preset)
        bad = {"name": "Broken", "letters": [{"id": 0, "char": "", "x": 0, "y": 0, "fontSize": 1}]}
        text = json.dumps([bad, good])

        # Act
        with caplog.at_level(logging.WARNING):
            presets = presets_from_json(text)

        # Assert
        assert [p.name for p in presets] == ["Clinic A"]
        assert "Skipping malformed preset at index 0" in caplog.text
