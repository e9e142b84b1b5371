"""
Module: generate.config

Purpose:
    Configuration dataclass for the selection callbacks. Immutable
    configuration with validation on construction; set before a search
    starts and never changed during it.

Key Classes:
    - GenerateConfig: Tunables consulted by the driver and the policies

Dependencies:
    - dataclasses (std)

Used By:
    - generate.callbacks.base: GenerateCallback
    - generate.callbacks.weighted: RandomCallback (seed, weights, max_steps)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .policy_kind import PolicyKind


@dataclass(frozen=True)
class GenerateConfig:
    """
    Configuration for assembly generation (immutable).

    The limits are consulted by the driver; the callbacks expose them
    but do not enforce them, except ``allow_self_connections`` (used by
    ``select``) and ``max_steps`` / ``max_network_size`` (used by
    ``RandomCallback.step``).

    Attributes:
        policy: Which selection policy create_callback() builds
        max_solutions: Halt after this many solutions (None = unlimited)
        allow_self_connections: Allow a section to mate with itself
        max_pair_links: Maximum number of links between a pair of points
        max_network_size: Maximum number of points (None = unlimited)
        max_depth: Maximum odometer stack depth (None = unlimited)
        max_steps: Odometer steps before RandomCallback.step() refuses
            (None = unlimited)
        seed: Random seed for reproducible random selection
        weight_key: Section weight attribute used by RandomCallback
        default_weight: Weight of a section lacking ``weight_key``

    Invariants:
        - Every limit that is set is positive
        - default_weight >= 0

    Example:
        >>> config = GenerateConfig(max_solutions=10)
        >>> config.solutions_reached(10)
        True
    """

    policy: PolicyKind = PolicyKind.SIMPLE

    # Search limits
    max_solutions: Optional[int] = None
    allow_self_connections: bool = False
    max_pair_links: int = 1
    max_network_size: Optional[int] = None
    max_depth: Optional[int] = None
    max_steps: Optional[int] = None

    # Random selection
    seed: int = 42
    weight_key: str = "weight"
    default_weight: float = 1.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for name in ("max_solutions", "max_network_size", "max_depth", "max_steps"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive: {value}")
        if self.max_pair_links <= 0:
            raise ValueError(f"max_pair_links must be positive: {self.max_pair_links}")
        if not math.isfinite(self.default_weight):
            raise ValueError(f"default_weight must be finite: {self.default_weight}")
        if self.default_weight < 0:
            raise ValueError(f"default_weight must be non-negative: {self.default_weight}")
        if not self.weight_key:
            raise ValueError("weight_key must be non-empty")

    # ─────────────────────────────────────────────────────────────────────────
    # Limit Checks
    # ─────────────────────────────────────────────────────────────────────────

    def solutions_reached(self, count: int) -> bool:
        """True once ``count`` solutions satisfy max_solutions."""
        return self.max_solutions is not None and count >= self.max_solutions

    def within_network_size(self, size: int) -> bool:
        return self.max_network_size is None or size <= self.max_network_size

    def within_depth(self, depth: int) -> bool:
        return self.max_depth is None or depth <= self.max_depth

    def within_steps(self, steps: int) -> bool:
        return self.max_steps is None or steps < self.max_steps
