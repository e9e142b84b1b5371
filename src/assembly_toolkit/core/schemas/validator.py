"""
Schema Validation Utilities

Validates lexicon JSON data against the bundled schema.

Lexicon files are hand-written and easy to get subtly wrong (a
connector given as a string instead of a [label, pole] pair, a negative
weight). Every file is validated with jsonschema before any section is
built, and the first violation is reported with its JSON path.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
DICTIONARY_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_dictionary(data: dict[str, Any]) -> None:
    """
    Validate lexicon data against the dictionary schema.

    Args:
        data: Parsed lexicon JSON

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Lexicon must be a JSON object, got {type(data).__name__}")

    schema = _load_schema("dictionary")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        first = errors[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )

    version = data.get("schema_version")
    if version != DICTIONARY_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported dictionary schema version: {version} (expected {DICTIONARY_SCHEMA_VERSION})",
            path="schema_version",
        )
