"""
Module: frames

Purpose:
    Provides Frame and Odometer - the read-only views of the assembly
    driver's state that are handed to the selection callbacks.

Key Classes:
    - Frame: Snapshot of an in-progress assembly (open sections + linkage)
    - Odometer: One level of the driver's backtracking stack

Dependencies:
    - dataclasses (std)
    - .sections.Section, .links.Link

Used By:
    - generate.callbacks: select(), push_frame(), push_odometer(), ...
    - generate.collect_style.SolutionCollector

Note:
    The callbacks never construct or mutate these; they only read
    ``open_sections`` and use the object itself to pair push/pop calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .connectors import Connector
from .links import Link
from .sections import Point, Section


@dataclass(frozen=True)
class Frame:
    """
    Snapshot of the in-progress assembly (immutable).

    Attributes:
        open_sections: Sections that still have unmatched connectors, in
            the order the driver opened them
        linkage: Links made so far
        open_points: Points of the open sections, in order

    Example:
        >>> frame = Frame(open_sections=(section_a,))
        >>> frame.is_closed
        False
    """

    open_sections: Tuple[Section, ...] = ()
    linkage: FrozenSet[Link] = frozenset()
    open_points: Tuple[Point, ...] = field(default=())

    @property
    def is_closed(self) -> bool:
        """A frame with no open connectors is a solution."""
        return len(self.open_sections) == 0

    @property
    def size(self) -> int:
        """Number of distinct points in the assembly."""
        points = {s.point for s in self.open_sections}
        points.update(self.open_points)
        for link in self.linkage:
            points.update(link.points)
        return len(points)

    def open_with(self, connector: Connector) -> Tuple[Section, ...]:
        """
        Get open sections exposing ``connector``.

        Each section is listed once, in frame order, even when it
        exposes the connector more than once.
        """
        return tuple(s for s in self.open_sections if s.has_connector(connector))


@dataclass(frozen=True)
class Odometer:
    """
    One level of the driver's backtracking stack (opaque to callbacks).

    Attributes:
        frame: Frame the odometer was started from
        to_connectors: Connectors whose wheels this odometer turns
        level: Depth of this odometer in the driver's stack
    """

    frame: Frame
    to_connectors: Tuple[Connector, ...] = ()
    level: int = 0
