"""
Module: connectors

Purpose:
    Provides the Connector dataclass - a typed attachment point on a
    section. Two connectors mate when their labels agree and their poles
    form a declared pole pair (see generate.dictionary.Dictionary).

Key Functions:
    - Connector.mated(pole): Same connector type with a different pole
    - Connector.to_list() / Connector.from_list(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.sections.Section
    - core.models.links.Link
    - generate.dictionary.Dictionary
    - generate.callbacks: select() keys all cursor state by connector
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Connector:
    """
    Typed attachment point (immutable).

    Connectors are compared by value: two connectors built from the
    same label and pole are the same connector, whichever section
    they were read from.

    Attributes:
        label: Connector type, e.g. "S", "O", "c1"
        pole: Parity flag, e.g. "+" or "-"

    Invariants:
        - label and pole are non-empty

    Example:
        >>> Connector("S", "+").mated("-")
        Connector(label='S', pole='-')
    """

    label: str
    pole: str

    def __post_init__(self) -> None:
        """Validate connector on construction."""
        if not self.label:
            raise ValueError("Connector label must be non-empty")
        if not self.pole:
            raise ValueError(f"Connector {self.label!r} must have a pole")

    def mated(self, pole: str) -> Connector:
        """Return the connector of the same type carrying ``pole``."""
        return Connector(self.label, pole)

    def to_list(self) -> list[str]:
        return [self.label, self.pole]

    @classmethod
    def from_list(cls, data: Sequence[str]) -> Connector:
        label, pole = data
        return cls(label=label, pole=pole)

    def __str__(self) -> str:
        return f"{self.label}{self.pole}"
