"""
Module: links

Purpose:
    Provides the Link dataclass - an undirected edge joining the points
    of two mated connectors.

Key Functions:
    - Link.between(fm_con, to_con, fm_pnt, to_pnt): Build an edge
    - Link.points / Link.connectors: Endpoint views

Dependencies:
    - dataclasses (std)
    - .connectors.Connector
    - .sections.Point

Used By:
    - core.models.frames.Frame (linkage)
    - generate.link_style.LinkStyle
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .connectors import Connector
from .sections import Point

Endpoint = Tuple[Point, Connector]


@dataclass(frozen=True, slots=True)
class Link:
    """
    Undirected edge between two (point, connector) endpoints (immutable).

    The endpoints are held in a frozenset, so neither end can be
    identified as head or tail: ``Link.between(a, b, p, q)`` equals
    ``Link.between(b, a, q, p)``.

    Attributes:
        endpoints: One or two (point, connector) pairs

    Example:
        >>> s, o = Connector("S", "+"), Connector("S", "-")
        >>> Link.between(s, o, Point("A"), Point("B")) == \\
        ...     Link.between(o, s, Point("B"), Point("A"))
        True
    """

    endpoints: FrozenSet[Endpoint]

    def __post_init__(self) -> None:
        if not 1 <= len(self.endpoints) <= 2:
            raise ValueError(f"Link must have one or two endpoints: {len(self.endpoints)}")

    @classmethod
    def between(
        cls,
        fm_con: Connector,
        to_con: Connector,
        fm_pnt: Point,
        to_pnt: Point,
    ) -> Link:
        """Create the edge joining ``fm_pnt`` (via fm_con) to ``to_pnt`` (via to_con)."""
        return cls(frozenset({(fm_pnt, fm_con), (to_pnt, to_con)}))

    @property
    def points(self) -> FrozenSet[Point]:
        return frozenset(p for p, _ in self.endpoints)

    @property
    def connectors(self) -> FrozenSet[Connector]:
        return frozenset(c for _, c in self.endpoints)

    @property
    def is_self_link(self) -> bool:
        """True when both ends sit on the same point."""
        return len(self.points) == 1

    def joins(self, p1: Point, p2: Point) -> bool:
        """Check whether this edge connects the two points (in any order)."""
        return self.points == frozenset({p1, p2})

    def __str__(self) -> str:
        ends = sorted(f"{p}/{c}" for p, c in self.endpoints)
        return " -- ".join(ends)
