"""
Module: generate.callbacks.simple

Purpose:
    Deterministic selection policy. Candidates are tried in a fixed
    order: open sections in frame order, then dictionary entries in
    lexicon order. Every candidate is offered exactly once per branch.

    Useful only where the lexicon has been designed to have a finite
    number of solutions, which can then be enumerated completely.

Key Classes:
    - SimpleCallback: Exhaustive, order-stable selection

Dependencies:
    - generate.callbacks.phased: PhasedCallback

Used By:
    - generate.callbacks.create_callback (PolicyKind.SIMPLE)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from assembly_toolkit.core.models import Connector, Frame, Section

from .checkpoints import SelectionPhase
from .phased import PhasedCallback


@dataclass(frozen=True)
class OpenCursor:
    """
    Frame-scope cursor over the open candidates for one connector.

    Attributes:
        phase: Selection phase of the connector in this frame
        candidates: Open sections exposing the connector, in frame order
        offset: Index of the next candidate to try
    """

    phase: SelectionPhase
    candidates: Tuple[Section, ...] = ()
    offset: int = 0


class SimpleCallback(PhasedCallback):
    """
    Exhaustive selection in a fixed order.

    The proposed connection always tries to join two open connectors
    first, else draws a new section from the dictionary. Dictionary
    sections are handed out as unique copies, so the same entry may be
    attached any number of times.

    Example:
        >>> cb = SimpleCallback(lexis)
        >>> cb.select(Frame(), a, 0, c1).template == b
        True
        >>> cb.select(Frame(), a, 0, c1) is None
        True
    """

    def _begin_open(self, frame: Frame, to_con: Connector) -> OpenCursor:
        return OpenCursor(SelectionPhase.OPEN, frame.open_with(to_con))

    def _next_open(self, fm_sect: Section, to_con: Connector) -> Optional[Section]:
        cursor: OpenCursor = self._open.get(to_con)
        to_sects = cursor.candidates
        fit = cursor.offset

        found = None
        while fit < len(to_sects):
            candidate = to_sects[fit]
            fit += 1
            # Make sure we are not self-connecting
            if not self._is_self(candidate, fm_sect):
                found = candidate
                break

        self._open.set(to_con, replace(cursor, offset=fit))
        return found

    def _next_lexical(self, fm_sect: Section, to_con: Connector) -> Optional[Section]:
        to_sects = self._lexical_candidates(to_con)

        # 0 means no cursor yet: start at the first entry
        curit = self._lexis.get(to_con, 0)
        while curit < len(to_sects):
            candidate = to_sects[curit]
            curit += 1
            if not self._is_self(candidate, fm_sect):
                self._lexis.set(to_con, curit)
                return self.links.create_unique_section(candidate)

        # Iterated to the end; we're done
        self._lexis.erase(to_con)
        return None
