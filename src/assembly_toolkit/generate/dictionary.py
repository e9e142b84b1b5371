"""
Module: generate.dictionary

Purpose:
    The lexicon: a static pool of template sections indexed by the
    connectors they expose, plus the pole-pair rules that say which
    connectors may mate.

Key Classes:
    - Dictionary: sections(connector), joints(connector)

Dependencies:
    - core.models: Connector, Section
    - core.utils.serialization: lexicon file reading/writing

Used By:
    - generate.callbacks: candidate pool for select(), joints()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from assembly_toolkit.core.models import Connector, Section
from assembly_toolkit.core.utils.serialization import (
    LexiconData,
    read_lexicon,
    write_lexicon,
)

logger = logging.getLogger(__name__)


class Dictionary:
    """
    Lexicon of template sections.

    Sections are kept in insertion order; ``sections(con)`` returns the
    entries exposing ``con`` in that order, which is the order the
    deterministic policy tries them in.

    Example:
        >>> lexis = Dictionary()
        >>> lexis.add_pole_pair("+", "-")
        >>> lexis.add_section(Section.build("A", [Connector("S", "+")]))
        >>> lexis.joints(Connector("S", "-"))
        (Connector(label='S', pole='+'),)
    """

    def __init__(self) -> None:
        """Initialize an empty lexicon."""
        self._sections: List[Section] = []
        self._known: Set[Section] = set()
        self._by_connector: Dict[Connector, List[Section]] = {}
        self._pole_pairs: Dict[str, List[str]] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # Building
    # ─────────────────────────────────────────────────────────────────────────

    def add_section(self, section: Section) -> None:
        """
        Add a template section to the lexicon.

        Args:
            section: Template to add; unique copies are stored as their template
        """
        section = section.template
        if section in self._known:
            logger.debug(f"Ignoring duplicate lexicon entry {section}")
            return

        if section.is_degenerate:
            logger.warning(f"Section {section.point} has no connectors and can never be attached")

        self._sections.append(section)
        self._known.add(section)
        for con in dict.fromkeys(section.connectors):
            self._by_connector.setdefault(con, []).append(section)

    def add_sections(self, sections: Iterable[Section]) -> None:
        for section in sections:
            self.add_section(section)

    def add_pole_pair(self, from_pole: str, to_pole: str, symmetric: bool = True) -> None:
        """
        Declare that ``from_pole`` connectors mate with ``to_pole`` ones.

        Args:
            from_pole: Pole of the connector being extended
            to_pole: Pole it may attach to
            symmetric: Also declare the reverse pairing
        """
        self._add_pole(from_pole, to_pole)
        if symmetric:
            self._add_pole(to_pole, from_pole)

    def _add_pole(self, from_pole: str, to_pole: str) -> None:
        mates = self._pole_pairs.setdefault(from_pole, [])
        if to_pole not in mates:
            mates.append(to_pole)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def sections(self, connector: Connector) -> Tuple[Section, ...]:
        """
        Get template sections exposing ``connector``.

        Returns:
            Entries in lexicon order; empty for an unknown connector
        """
        return tuple(self._by_connector.get(connector, ()))

    def joints(self, connector: Connector) -> Tuple[Connector, ...]:
        """
        Get the connectors ``connector`` may mate with.

        Returns:
            Same-label connectors with each paired pole, in declaration order
        """
        return tuple(connector.mated(p) for p in self._pole_pairs.get(connector.pole, ()))

    @property
    def connectors(self) -> Tuple[Connector, ...]:
        """All connectors exposed by some lexicon entry."""
        return tuple(self._by_connector)

    @property
    def pole_pairs(self) -> Tuple[Tuple[str, str], ...]:
        return tuple((a, b) for a, mates in self._pole_pairs.items() for b in mates)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __repr__(self) -> str:
        return (
            f"Dictionary(sections={len(self._sections)}, "
            f"connectors={len(self._by_connector)})"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_lexicon(cls, lexicon: LexiconData) -> Dictionary:
        dictionary = cls()
        for from_pole, to_pole in lexicon.pole_pairs:
            dictionary.add_pole_pair(from_pole, to_pole, symmetric=False)
        dictionary.add_sections(lexicon.sections)
        return dictionary

    def to_lexicon(self) -> LexiconData:
        return LexiconData(pole_pairs=self.pole_pairs, sections=tuple(self._sections))

    @classmethod
    def load(cls, path: Path) -> Dictionary:
        """
        Load a dictionary from a lexicon JSON file.

        Raises:
            LexiconLoadError: If the file cannot be read
            ValidationError: If the contents are invalid
        """
        dictionary = cls.from_lexicon(read_lexicon(path))
        logger.info(f"Loaded lexicon {path}: {dictionary!r}")
        return dictionary

    def save(self, path: Path) -> None:
        write_lexicon(self.to_lexicon(), path)
