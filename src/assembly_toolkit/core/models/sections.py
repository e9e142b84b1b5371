"""
Module: sections

Purpose:
    Provides the Point and Section dataclasses. A Section is a "puzzle
    piece": one point together with its ordered outgoing connectors.
    Lexicon entries are template sections; every section attached to an
    assembly from the lexicon is a unique copy of a template.

Key Functions:
    - Section.has_connector(con): Does this piece expose the connector?
    - Section.weight(key): Numeric weight attribute for random selection
    - Section.template: Strip the instance id from the point
    - Section.to_dict() / Section.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .connectors.Connector

Used By:
    - core.models.frames.Frame
    - generate.dictionary.Dictionary
    - generate.link_style.LinkStyle
    - generate.callbacks: SimpleCallback, RandomCallback

Design Note:
    Sections are compared structurally (point + connectors). The weights
    are metadata and take no part in equality or hashing, so a weighted
    and an unweighted copy of the same piece are the same section.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Tuple

from .connectors import Connector


@dataclass(frozen=True, slots=True)
class Point:
    """
    Vertex of the assembly under construction.

    Attributes:
        name: Point name as given in the lexicon, e.g. "A"
        instance: None for lexicon templates; a unique id for copies

    Example:
        >>> Point("A")
        Point(name='A', instance=None)
        >>> str(Point("A", "3"))
        'A@3'
    """

    name: str
    instance: Optional[str] = None

    @property
    def is_template(self) -> bool:
        return self.instance is None

    def __str__(self) -> str:
        if self.instance is None:
            return self.name
        return f"{self.name}@{self.instance}"


@dataclass(frozen=True, slots=True)
class Section:
    """
    Puzzle piece: a point plus its ordered outgoing connectors (immutable).

    Attributes:
        point: The vertex this piece contributes
        connectors: Ordered outgoing connectors
        weights: Named numeric attributes (not part of equality)

    Invariants:
        - Two sections are equal iff point and connectors are equal
        - A section without connectors is allowed but can never be matched

    Example:
        >>> s = Section(Point("A"), (Connector("c1", "+"),))
        >>> s.has_connector(Connector("c1", "+"))
        True
        >>> s.weight("weight")
        1.0
    """

    point: Point
    connectors: Tuple[Connector, ...]
    weights: Tuple[Tuple[str, float], ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        """Validate weights on construction."""
        for key, value in self.weights:
            if not math.isfinite(value):
                raise ValueError(f"Weight {key!r} of section {self.point} must be finite: {value}")
            if value < 0:
                raise ValueError(
                    f"Weight {key!r} of section {self.point} must be non-negative: {value}"
                )

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_template(self) -> bool:
        """True for lexicon entries, False for unique copies."""
        return self.point.is_template

    @property
    def template(self) -> Section:
        """
        Get the lexicon template this section was copied from.

        Returns:
            The section itself when it already is a template
        """
        if self.point.is_template:
            return self
        return replace(self, point=Point(self.point.name))

    @property
    def is_degenerate(self) -> bool:
        """A section with no connectors cannot take part in any link."""
        return len(self.connectors) == 0

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def has_connector(self, connector: Connector) -> bool:
        return connector in self.connectors

    def weight(self, key: str, default: float = 1.0) -> float:
        """
        Read a weight attribute.

        Args:
            key: Attribute name, e.g. "weight"
            default: Value used when the attribute is absent

        Returns:
            The stored weight or ``default``
        """
        for name, value in self.weights:
            if name == key:
                return value
        return default

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def build(
        cls,
        name: str,
        connectors: list[Connector] | tuple[Connector, ...],
        weights: Optional[Mapping[str, float]] = None,
    ) -> Section:
        """
        Create a template section.

        Args:
            name: Point name
            connectors: Outgoing connectors in order
            weights: Optional named weights

        Returns:
            New template Section
        """
        return cls(
            point=Point(name),
            connectors=tuple(connectors),
            weights=tuple(sorted((weights or {}).items())),
        )

    def with_instance(self, instance: str) -> Section:
        """Return a copy of this section whose point carries ``instance``."""
        return replace(self, point=Point(self.point.name, instance))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "point": self.point.name,
            "connectors": [c.to_list() for c in self.connectors],
        }
        if self.weights:
            data["weights"] = dict(self.weights)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Section:
        return cls.build(
            data["point"],
            [Connector.from_list(c) for c in data.get("connectors", [])],
            data.get("weights"),
        )

    def __str__(self) -> str:
        cons = " ".join(str(c) for c in self.connectors)
        return f"{self.point}: {cons}" if cons else f"{self.point}:"
