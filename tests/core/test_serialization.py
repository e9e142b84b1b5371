"""
Unit Tests for lexicon serialization and schema validation.
"""

import json

import pytest

from assembly_toolkit.core.models import Connector, Section
from assembly_toolkit.core.schemas import ValidationError, validate_dictionary
from assembly_toolkit.core.utils.serialization import (
    LexiconData,
    LexiconLoadError,
    deserialize_lexicon,
    read_lexicon,
    serialize_section,
    write_lexicon,
)


@pytest.fixture
def lexicon_data() -> dict:
    return {
        "schema_version": 1,
        "pole_pairs": [["+", "-"], ["-", "+"]],
        "sections": [
            {"point": "A", "connectors": [["S", "+"]], "weights": {"weight": 3}},
            {"point": "B", "connectors": [["S", "-"], ["O", "+"]]},
        ],
    }


class TestValidateDictionary:
    """Tests for validate_dictionary."""

    def test_validate_when_valid_then_passes(self, lexicon_data):
        validate_dictionary(lexicon_data)

    def test_validate_when_connector_is_string_then_raises_with_path(self, lexicon_data):
        """A connector must be a [label, pole] pair."""
        # Arrange
        lexicon_data["sections"][1]["connectors"][0] = "S-"

        # Act & Assert
        with pytest.raises(ValidationError) as exc:
            validate_dictionary(lexicon_data)
        assert exc.value.path == "sections.1.connectors.0"

    def test_validate_when_negative_weight_then_raises(self, lexicon_data):
        lexicon_data["sections"][0]["weights"]["weight"] = -1
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_dictionary(lexicon_data)

    def test_validate_when_wrong_version_then_raises(self, lexicon_data):
        lexicon_data["schema_version"] = 99
        with pytest.raises(ValidationError, match="Unsupported dictionary schema version"):
            validate_dictionary(lexicon_data)

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_dictionary([])


class TestLexiconSerialization:
    """Tests for lexicon (de)serialization."""

    def test_deserialize_when_valid_then_builds_templates_in_order(self, lexicon_data):
        # Act
        lexicon = deserialize_lexicon(lexicon_data)

        # Assert
        assert lexicon.pole_pairs == (("+", "-"), ("-", "+"))
        assert [s.point.name for s in lexicon.sections] == ["A", "B"]
        assert lexicon.sections[0].weight("weight") == 3
        assert lexicon.sections[1].connectors == (Connector("S", "-"), Connector("O", "+"))

    def test_serialize_section_when_copy_then_writes_template(self):
        copy = Section.build("A", [Connector("S", "+")]).with_instance("4")
        assert serialize_section(copy) == {"point": "A", "connectors": [["S", "+"]]}

    def test_write_then_read_when_round_tripped_then_equal(self, tmp_lexicon_path, lexicon_data):
        # Arrange
        lexicon = deserialize_lexicon(lexicon_data)

        # Act
        write_lexicon(lexicon, tmp_lexicon_path)
        restored = read_lexicon(tmp_lexicon_path)

        # Assert
        assert restored == lexicon

    def test_read_when_missing_file_then_raises_load_error(self, tmp_lexicon_path):
        with pytest.raises(LexiconLoadError, match="Cannot read"):
            read_lexicon(tmp_lexicon_path)

    def test_read_when_bad_json_then_raises_load_error(self, tmp_lexicon_path):
        tmp_lexicon_path.parent.mkdir(parents=True)
        tmp_lexicon_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LexiconLoadError, match="Invalid JSON"):
            read_lexicon(tmp_lexicon_path)

    def test_write_when_called_then_file_is_valid_json(self, tmp_lexicon_path):
        write_lexicon(LexiconData(pole_pairs=(), sections=()), tmp_lexicon_path)
        data = json.loads(tmp_lexicon_path.read_text(encoding="utf-8"))
        assert data == {"schema_version": 1, "pole_pairs": [], "sections": []}
