"""Core utilities: lexicon serialization."""

from .serialization import (
    LexiconData,
    LexiconLoadError,
    deserialize_lexicon,
    read_lexicon,
    serialize_lexicon,
    write_lexicon,
)

__all__ = [
    "LexiconData",
    "LexiconLoadError",
    "deserialize_lexicon",
    "read_lexicon",
    "serialize_lexicon",
    "write_lexicon",
]
