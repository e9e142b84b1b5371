"""Lexicon JSON schemas and validation."""

from .validator import (
    DICTIONARY_SCHEMA_VERSION,
    ValidationError,
    validate_dictionary,
)

__all__ = [
    "DICTIONARY_SCHEMA_VERSION",
    "ValidationError",
    "validate_dictionary",
]
