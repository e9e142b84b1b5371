"""
Module: generate.callbacks.phased

Purpose:
    Shared machinery for the open-then-lexicon selection policies.

Algorithm (per connector, per frame):
    1. First try to join an open section of the current frame
    2. Once those are used up, draw new sections from the dictionary
    3. Once those are used up too, answer None until the frame is popped

    How a candidate is picked inside each source is left to the
    subclass (in order for SimpleCallback, weighted draws for
    RandomCallback).

Key Classes:
    - PhasedCallback: select(), push/pop scopes, link/solution wiring

Dependencies:
    - generate.callbacks.checkpoints: ScopedState, SelectionPhase
    - generate.dictionary: Dictionary
    - generate.link_style: LinkStyle
    - generate.collect_style: SolutionCollector

Used By:
    - generate.callbacks.simple: SimpleCallback
    - generate.callbacks.weighted: RandomCallback
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from dataclasses import replace
from typing import Any, List, Optional, Set, Tuple

from assembly_toolkit.core.models import (
    Connector,
    Frame,
    Link,
    Odometer,
    Point,
    Section,
)

from ..collect_style import SolutionCollector
from ..config import GenerateConfig
from ..dictionary import Dictionary
from ..link_style import LinkStyle
from .base import GenerateCallback
from .checkpoints import Checkpoint, CheckpointError, ScopedState, SelectionPhase

logger = logging.getLogger(__name__)


class PhasedCallback(GenerateCallback):
    """
    Open-section-first selection with a dictionary fallback.

    Cursor state lives in two scopes:
        - frame scope (``_open``): one record per connector holding the
          SelectionPhase and the open-candidate cursor. Cleared by
          push_frame, restored by pop_frame.
        - odometer scope (``_lexis``): the dictionary cursor per
          connector. Cleared by push_odometer, restored by pop_odometer.

    Open records must be dataclasses with a ``phase`` field.

    Attributes:
        dictionary: Lexicon supplying new sections
        links: Link store and section copier
        collector: Solution sink
    """

    def __init__(
        self,
        dictionary: Dictionary,
        config: Optional[GenerateConfig] = None,
        links: Optional[LinkStyle] = None,
        collector: Optional[SolutionCollector] = None,
    ) -> None:
        super().__init__(config)
        self.dictionary = dictionary
        self.links = links if links is not None else LinkStyle()
        self.collector = collector if collector is not None else SolutionCollector()
        self._open: ScopedState[Any] = ScopedState("frame")
        self._lexis: ScopedState[Any] = ScopedState("odometer")
        self._frame_tokens: List[Checkpoint] = []
        self._odometer_tokens: List[Checkpoint] = []
        self._num_solutions = 0
        self._dead_ends: Set[Connector] = set()

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    def joints(self, connector: Connector) -> Tuple[Connector, ...]:
        return self.dictionary.joints(connector)

    def select(
        self,
        frame: Frame,
        fm_sect: Section,
        offset: int,
        to_con: Connector,
    ) -> Optional[Section]:
        """
        Return a section containing ``to_con``.

        First try to attach to an existing open section; if that fails,
        pick a new section from the dictionary.
        """
        phase = self.phase(to_con)

        if phase is SelectionPhase.UNATTEMPTED:
            self._open.set(to_con, self._begin_open(frame, to_con))
            phase = SelectionPhase.OPEN

        if phase is SelectionPhase.OPEN:
            found = self._next_open(fm_sect, to_con)
            if found is not None:
                logger.debug(f"{fm_sect.point}[{offset}] -> open {found.point} via {to_con}")
                return found
            self._set_phase(to_con, SelectionPhase.LEXICON)
            phase = SelectionPhase.LEXICON

        if phase is SelectionPhase.LEXICON:
            found = self._next_lexical(fm_sect, to_con)
            if found is not None:
                logger.debug(f"{fm_sect.point}[{offset}] -> new {found.point} via {to_con}")
                return found
            self._set_phase(to_con, SelectionPhase.EXHAUSTED)
            logger.debug(f"{fm_sect.point}[{offset}] exhausted {to_con}")

        return None

    def phase(self, to_con: Connector) -> SelectionPhase:
        """Current selection phase of ``to_con`` in this frame."""
        record = self._open.get(to_con)
        if record is None:
            return SelectionPhase.UNATTEMPTED
        return record.phase

    def _set_phase(self, to_con: Connector, phase: SelectionPhase) -> None:
        self._open.set(to_con, replace(self._open.get(to_con), phase=phase))

    def _is_self(self, candidate: Section, fm_sect: Section) -> bool:
        """True when picking ``candidate`` would connect ``fm_sect`` to itself."""
        return not self.config.allow_self_connections and candidate == fm_sect

    def _lexical_candidates(self, to_con: Connector) -> Tuple[Section, ...]:
        to_sects = self.dictionary.sections(to_con)
        if not to_sects and to_con not in self._dead_ends:
            self._dead_ends.add(to_con)
            logger.warning(f"Dead end: no dictionary section exposes {to_con}")
        return to_sects

    @abstractmethod
    def _begin_open(self, frame: Frame, to_con: Connector) -> Any:
        """Build the frame-scope record for ``to_con`` in phase OPEN."""

    @abstractmethod
    def _next_open(self, fm_sect: Section, to_con: Connector) -> Optional[Section]:
        """Next open candidate, or None once the open candidates are used up."""

    @abstractmethod
    def _next_lexical(self, fm_sect: Section, to_con: Connector) -> Optional[Section]:
        """Next fresh dictionary section, or None once the dictionary is used up."""

    # ─────────────────────────────────────────────────────────────────────────
    # Edges
    # ─────────────────────────────────────────────────────────────────────────

    def make_link(
        self,
        fm_con: Connector,
        to_con: Connector,
        fm_pnt: Point,
        to_pnt: Point,
    ) -> Link:
        """
        Create an undirected edge connecting ``fm_pnt`` and ``to_pnt``
        using the connectors ``fm_con`` and ``to_con``.
        """
        return self.links.create_undirected_link(fm_con, to_con, fm_pnt, to_pnt)

    def have_link(
        self,
        fm_con: Connector,
        to_con: Connector,
        fm_pnt: Point,
        to_pnt: Point,
    ) -> Optional[Link]:
        return self.links.have_undirected_link(fm_con, to_con, fm_pnt, to_pnt)

    def pair_links_exhausted(self, fm_pnt: Point, to_pnt: Point) -> bool:
        """True when max_pair_links links already join the two points."""
        return self.links.pair_link_count(fm_pnt, to_pnt) >= self.config.max_pair_links

    # ─────────────────────────────────────────────────────────────────────────
    # Branch Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def push_frame(self, frame: Frame) -> None:
        self._frame_tokens.append(self._open.push(frame))

    def pop_frame(self, frame: Frame) -> None:
        self._open.pop(_take_token(self._frame_tokens, frame, "frame"))

    def push_odometer(self, odometer: Odometer) -> None:
        self._odometer_tokens.append(self._lexis.push(odometer))

    def pop_odometer(self, odometer: Odometer) -> None:
        self._lexis.pop(_take_token(self._odometer_tokens, odometer, "odometer"))

    # ─────────────────────────────────────────────────────────────────────────
    # Solutions
    # ─────────────────────────────────────────────────────────────────────────

    def solution(self, frame: Frame) -> None:
        if self.collector.record_solution(frame):
            self._num_solutions += 1

    @property
    def num_solutions(self) -> int:
        """Number of new solutions recorded through this callback."""
        return self._num_solutions

    @property
    def solutions_exhausted(self) -> bool:
        """True once max_solutions solutions have been recorded."""
        return self.config.solutions_reached(self._num_solutions)


def _take_token(tokens: List[Checkpoint], owner: Any, scope: str) -> Checkpoint:
    """
    Remove and return the innermost token, which must belong to ``owner``.

    Raises:
        CheckpointError: If no push is outstanding, or the innermost one
            was made for a different frame/odometer
    """
    if not tokens:
        raise CheckpointError(f"pop_{scope} without a matching push_{scope}")
    if not tokens[-1].belongs_to(owner):
        raise CheckpointError(
            f"pop_{scope} out of order: innermost push is at depth {tokens[-1].depth}"
        )
    return tokens.pop()
