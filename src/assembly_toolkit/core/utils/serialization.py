"""
Serialization Utilities

Provides to/from JSON utilities for sections and lexicon files.

Lexicon file layout::

    {
      "schema_version": 1,
      "pole_pairs": [["+", "-"]],
      "sections": [
        {"point": "A", "connectors": [["c1", "+"]], "weights": {"weight": 2.0}}
      ]
    }

Every lexicon is validated against ``dictionary.schema.json`` before any
section is built, so model constructors never see malformed input.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..models.sections import Section
from ..schemas.validator import (
    DICTIONARY_SCHEMA_VERSION,
    ValidationError,
    validate_dictionary,
)

logger = logging.getLogger(__name__)


class LexiconLoadError(Exception):
    """Error reading or parsing a lexicon file."""
    pass


@dataclass(frozen=True)
class LexiconData:
    """
    Parsed lexicon contents (immutable).

    Attributes:
        pole_pairs: Declared (from_pole, to_pole) mating pairs
        sections: Template sections in file order
    """

    pole_pairs: tuple[tuple[str, str], ...]
    sections: tuple[Section, ...]


# ─────────────────────────────────────────────────────────────────────────────
# Section Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_section(section: Section) -> dict[str, Any]:
    """
    Serialize a Section to a dictionary.

    Note:
        Instance ids are NOT written - only templates belong in a lexicon.
    """
    return section.template.to_dict()


def deserialize_section(data: dict[str, Any]) -> Section:
    """Deserialize a template Section from a dictionary."""
    return Section.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Lexicon Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_lexicon(lexicon: LexiconData) -> dict[str, Any]:
    """Serialize lexicon contents to a JSON-ready dictionary."""
    return {
        "schema_version": DICTIONARY_SCHEMA_VERSION,
        "pole_pairs": [list(pair) for pair in lexicon.pole_pairs],
        "sections": [serialize_section(s) for s in lexicon.sections],
    }


def deserialize_lexicon(data: dict[str, Any], *, validate: bool = True) -> LexiconData:
    """
    Deserialize lexicon contents.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against schema first

    Returns:
        LexiconData instance

    Raises:
        ValidationError: If validate=True and data is invalid, or a
            section is rejected by the model (e.g. a NaN weight, which
            JSON Schema cannot express)
    """
    if validate:
        validate_dictionary(data)

    pole_pairs = tuple(
        (str(a), str(b)) for a, b in data.get("pole_pairs", [])
    )
    sections = []
    for index, section_data in enumerate(data.get("sections", [])):
        try:
            sections.append(deserialize_section(section_data))
        except ValueError as e:
            raise ValidationError(f"Invalid section: {e}", path=f"sections.{index}") from e
    return LexiconData(pole_pairs=pole_pairs, sections=tuple(sections))


def read_lexicon(path: Path) -> LexiconData:
    """
    Load and validate a lexicon file.

    Args:
        path: Path to the JSON lexicon

    Returns:
        LexiconData instance

    Raises:
        LexiconLoadError: If the file cannot be read or parsed
        ValidationError: If the contents fail schema validation
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise LexiconLoadError(f"Cannot read lexicon {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LexiconLoadError(f"Invalid JSON in lexicon {path}: {e}") from e

    lexicon = deserialize_lexicon(data)
    logger.debug(f"Read {len(lexicon.sections)} sections from {path}")
    return lexicon


def write_lexicon(lexicon: LexiconData, path: Path) -> None:
    """Write lexicon contents as formatted JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_lexicon(lexicon), f, indent=2)


__all__ = [
    "LexiconData",
    "LexiconLoadError",
    "ValidationError",
    "serialize_section",
    "deserialize_section",
    "serialize_lexicon",
    "deserialize_lexicon",
    "read_lexicon",
    "write_lexicon",
]
