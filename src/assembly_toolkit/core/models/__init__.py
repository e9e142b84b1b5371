"""
Core Models Package

Immutable, value-compared data models for the assembly graph.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. Connectors and sections compare structurally, never by identity
2. Models can be used as dict keys (cursor state is keyed by connector)
3. Snapshots handed to callbacks cannot be mutated behind the driver's back

| Model | Represents |
|-------|------------|
| `Connector` | Typed attachment point with a pole |
| `Point` | Vertex of the assembly |
| `Section` | Point + ordered connectors ("puzzle piece") |
| `Link` | Undirected edge between two endpoints |
| `Frame` | Snapshot of an in-progress assembly |
| `Odometer` | One level of the driver's backtracking stack |
"""

from .connectors import Connector
from .sections import Point, Section
from .links import Link
from .frames import Frame, Odometer

__all__ = [
    "Connector",
    "Point",
    "Section",
    "Link",
    "Frame",
    "Odometer",
]
