"""
Module: generate.callbacks.base

Purpose:
    The callback contract between the assembly driver and a section
    selection policy.

    As an assembly is built it has open, unconnected connectors.
    Aggregation proceeds by attaching sections ("puzzle pieces") to open
    connectors until none are left. The driver manages that process and
    the backtracking stacks (one level per odometer, one frame per
    odometer step); what to connect next is deferred to a callback.

Key Classes:
    - GenerateCallback: Abstract contract plus the generic tunables

Dependencies:
    - abc (std)
    - core.models: Connector, Frame, Link, Odometer, Point, Section
    - generate.config: GenerateConfig

Used By:
    - generate.callbacks.phased: PhasedCallback
    - Assembly drivers (external)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from assembly_toolkit.core.models import (
    Connector,
    Frame,
    Link,
    Odometer,
    Point,
    Section,
)

from ..config import GenerateConfig


class GenerateCallback(ABC):
    """
    Selection callback contract.

    Subclasses choose which section to attach next; the driver calls
    ``select`` repeatedly for the same connector and treats ``None`` as
    "no more options here, backtrack".

    The push/pop hooks bracket every branch of the search. They default
    to no-ops; policies keeping cursor state override them.

    Attributes:
        config: Immutable tunables, fixed for the whole search
    """

    def __init__(self, config: Optional[GenerateConfig] = None) -> None:
        self.config = config or GenerateConfig()

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    @abstractmethod
    def joints(self, connector: Connector) -> Tuple[Connector, ...]:
        """
        Get the connectors ``connector`` could connect to.

        The result may be empty or hold more than one match.
        """

    @abstractmethod
    def select(
        self,
        frame: Frame,
        fm_sect: Section,
        offset: int,
        to_con: Connector,
    ) -> Optional[Section]:
        """
        Get the next section that could be attached at ``to_con``.

        ``to_con`` mates with the connector at ``offset`` in ``fm_sect``.
        Behaves like a resumable cursor: each call for the same
        connector, within the same branch, returns the next candidate
        from a (virtual) list of eligible sections.

        Returns:
            A section exposing ``to_con``, or None when exhausted
        """

    # ─────────────────────────────────────────────────────────────────────────
    # Edges
    # ─────────────────────────────────────────────────────────────────────────

    @abstractmethod
    def make_link(
        self,
        fm_con: Connector,
        to_con: Connector,
        fm_pnt: Point,
        to_pnt: Point,
    ) -> Link:
        """Create a link from ``fm_con`` to ``to_con``, joining ``fm_pnt`` to ``to_pnt``."""

    @abstractmethod
    def have_link(
        self,
        fm_con: Connector,
        to_con: Connector,
        fm_pnt: Point,
        to_pnt: Point,
    ) -> Optional[Link]:
        """Like make_link(), but only return a link that already exists."""

    # ─────────────────────────────────────────────────────────────────────────
    # Branch Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def push_frame(self, frame: Frame) -> None:
        pass

    def pop_frame(self, frame: Frame) -> None:
        pass

    def push_odometer(self, odometer: Odometer) -> None:
        pass

    def pop_odometer(self, odometer: Odometer) -> None:
        pass

    def step(self, frame: Frame) -> bool:
        """
        Called before taking a step of the odometer.

        Returning False aborts the current odometer; traversal resumes
        at an earlier level. The default allows unbounded recursion.
        """
        return True

    @abstractmethod
    def solution(self, frame: Frame) -> None:
        """Called once per solution: a linkage with no open connectors."""

    # ─────────────────────────────────────────────────────────────────────────
    # Generic Parameters
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def max_solutions(self) -> Optional[int]:
        return self.config.max_solutions

    @property
    def allow_self_connections(self) -> bool:
        return self.config.allow_self_connections

    @property
    def max_pair_links(self) -> int:
        return self.config.max_pair_links

    @property
    def max_network_size(self) -> Optional[int]:
        return self.config.max_network_size

    @property
    def max_depth(self) -> Optional[int]:
        return self.config.max_depth
