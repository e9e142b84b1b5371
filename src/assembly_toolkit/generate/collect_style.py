"""
Module: generate.collect_style

Purpose:
    Records solutions - fully closed assemblies - reported by the
    selection callbacks.

Key Classes:
    - SolutionCollector: Deduplicating solution sink

Used By:
    - generate.callbacks.phased: solution()
"""

from __future__ import annotations

import logging
from typing import FrozenSet, List, Set, Tuple

from assembly_toolkit.core.models import Frame, Link

logger = logging.getLogger(__name__)

Solution = FrozenSet[Link]


class SolutionCollector:
    """
    Collects the linkage of every closed frame, without duplicates.

    Two frames reached along different search paths but with the same
    set of links are the same solution and are recorded once.
    """

    def __init__(self) -> None:
        self._solutions: List[Solution] = []
        self._seen: Set[Solution] = set()

    def record_solution(self, frame: Frame) -> bool:
        """
        Record the linkage of a closed frame.

        Args:
            frame: Frame with no open sections

        Returns:
            True if this is a new solution, False for a duplicate
        """
        if not frame.is_closed:
            logger.warning(
                f"Recording a frame with {len(frame.open_sections)} open sections as a solution"
            )

        solution = frozenset(frame.linkage)
        if solution in self._seen:
            logger.debug("Duplicate solution ignored")
            return False

        self._seen.add(solution)
        self._solutions.append(solution)
        logger.info(
            f"Solution {len(self._solutions)}: {len(solution)} links, {frame.size} points"
        )
        return True

    @property
    def solutions(self) -> Tuple[Solution, ...]:
        return tuple(self._solutions)

    def clear(self) -> None:
        self._solutions.clear()
        self._seen.clear()

    def __len__(self) -> int:
        return len(self._solutions)
