"""
Module: generate.callbacks.weighted

Purpose:
    Stochastic selection policy. Same open-then-dictionary precedence as
    SimpleCallback, but inside each source the next section is a weighted
    random draw without replacement.

Key Classes:
    - RandomCallback: Weighted random selection
    - OpenDraws: Frame-scope record of open candidates and draws

Dependencies:
    - numpy: seeded Generator
    - generate.callbacks.distribution: DiscreteDistribution
    - generate.callbacks.phased: PhasedCallback

Used By:
    - generate.callbacks.create_callback (PolicyKind.RANDOM)

Weights:
    Each candidate's weight is read from the section attribute named by
    the weight key (GenerateConfig.weight_key, or set_weight_key()).
    Sections without it get GenerateConfig.default_weight.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Optional, Tuple

import numpy as np

from assembly_toolkit.core.models import Connector, Frame, Section

from ..collect_style import SolutionCollector
from ..config import GenerateConfig
from ..dictionary import Dictionary
from ..link_style import LinkStyle
from .checkpoints import SelectionPhase
from .distribution import DiscreteDistribution
from .phased import PhasedCallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenDraws:
    """
    Frame-scope draw state for one connector.

    Attributes:
        phase: Selection phase of the connector in this frame
        candidates: Open sections exposing the connector, in frame order
        distribution: Chooser over ``candidates``
        drawn: Indices already drawn in this frame
    """

    phase: SelectionPhase
    candidates: Tuple[Section, ...] = ()
    distribution: Optional[DiscreteDistribution] = None
    drawn: FrozenSet[int] = frozenset()


class RandomCallback(PhasedCallback):
    """
    Weighted random selection of sections.

    The dictionary distribution for a connector is built once and kept
    for the lifetime of the callback; the open-section distribution is
    rebuilt per frame. Within one branch no candidate is returned twice
    for the same connector.

    Example:
        >>> cb = RandomCallback(lexis, GenerateConfig(seed=7))
        >>> picks = [cb.select(frame, a, 0, c1) for _ in range(3)]
    """

    def __init__(
        self,
        dictionary: Dictionary,
        config: Optional[GenerateConfig] = None,
        links: Optional[LinkStyle] = None,
        collector: Optional[SolutionCollector] = None,
    ) -> None:
        super().__init__(dictionary, config, links, collector)
        self._rng = np.random.default_rng(self.config.seed)
        self._weight_key = self.config.weight_key
        self._distmap: Dict[Connector, DiscreteDistribution] = {}
        self._steps_taken = 0

    @property
    def weight_key(self) -> str:
        return self._weight_key

    def set_weight_key(self, key: str) -> None:
        """
        Choose the section attribute used as weight.

        Raises:
            RuntimeError: If a distribution was already built with the
                previous key
        """
        if self._distmap:
            raise RuntimeError("weight key cannot change once selection has started")
        self._weight_key = key

    def distribution(self, to_con: Connector) -> DiscreteDistribution:
        """
        Get the cached dictionary distribution for ``to_con``.

        Built on first use from the weights of ``dictionary.sections(to_con)``.
        """
        dist = self._distmap.get(to_con)
        if dist is None:
            dist = DiscreteDistribution.from_sections(
                self.dictionary.sections(to_con),
                self._weight_key,
                self.config.default_weight,
            )
            self._distmap[to_con] = dist
        return dist

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    def _draw(
        self,
        candidates: Tuple[Section, ...],
        dist: DiscreteDistribution,
        drawn: FrozenSet[int],
        fm_sect: Section,
    ) -> Tuple[Optional[int], FrozenSet[int]]:
        """Draw until a non-self candidate turns up; return it with the new drawn set."""
        while True:
            index = dist.draw(self._rng, exclude=drawn)
            if index is None:
                return None, drawn
            drawn = drawn | {index}
            if not self._is_self(candidates[index], fm_sect):
                return index, drawn

    def _begin_open(self, frame: Frame, to_con: Connector) -> OpenDraws:
        to_sects = frame.open_with(to_con)
        return OpenDraws(
            SelectionPhase.OPEN,
            to_sects,
            DiscreteDistribution.from_sections(
                to_sects, self._weight_key, self.config.default_weight
            ),
        )

    def _next_open(self, fm_sect: Section, to_con: Connector) -> Optional[Section]:
        draws: OpenDraws = self._open.get(to_con)
        index, drawn = self._draw(draws.candidates, draws.distribution, draws.drawn, fm_sect)
        self._open.set(to_con, replace(draws, drawn=drawn))
        if index is None:
            return None
        return draws.candidates[index]

    def _next_lexical(self, fm_sect: Section, to_con: Connector) -> Optional[Section]:
        to_sects = self._lexical_candidates(to_con)
        drawn = self._lexis.get(to_con, frozenset())
        index, drawn = self._draw(to_sects, self.distribution(to_con), drawn, fm_sect)
        if index is None:
            self._lexis.erase(to_con)
            return None

        self._lexis.set(to_con, drawn)
        return self.links.create_unique_section(to_sects[index])

    # ─────────────────────────────────────────────────────────────────────────
    # Stepping
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def steps_taken(self) -> int:
        return self._steps_taken

    def step(self, frame: Frame) -> bool:
        """
        Allow the odometer step unless a hard limit is hit.

        Refuses once max_steps steps were taken, or when the frame has
        grown beyond max_network_size points.
        """
        if not self.config.within_steps(self._steps_taken):
            logger.debug(f"Step limit reached after {self._steps_taken} steps")
            return False
        if not self.config.within_network_size(frame.size):
            logger.debug(f"Network size {frame.size} exceeds {self.config.max_network_size}")
            return False
        self._steps_taken += 1
        return True
