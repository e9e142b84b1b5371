"""
Module: generate.callbacks

Purpose:
    Section selection policies called by the assembly driver. The driver
    holds a GenerateCallback reference; the concrete policy is one of a
    closed set tagged by PolicyKind.

Key Functions:
    - create_callback(): Build the policy named by a PolicyKind

Key Classes:
    - GenerateCallback: Callback contract
    - SimpleCallback: Deterministic, exhaustive selection
    - RandomCallback: Weighted random selection
    - ScopedState / SelectionPhase: Branch-scoped cursor state
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from ..collect_style import SolutionCollector
from ..config import GenerateConfig
from ..dictionary import Dictionary
from ..link_style import LinkStyle
from ..policy_kind import PolicyKind
from .base import GenerateCallback
from .checkpoints import Checkpoint, CheckpointError, ScopedState, SelectionPhase
from .distribution import DiscreteDistribution
from .phased import PhasedCallback
from .simple import SimpleCallback
from .weighted import RandomCallback

_POLICIES: Dict[PolicyKind, Type[PhasedCallback]] = {
    PolicyKind.SIMPLE: SimpleCallback,
    PolicyKind.RANDOM: RandomCallback,
}


def create_callback(
    dictionary: Dictionary,
    config: Optional[GenerateConfig] = None,
    kind: Optional[PolicyKind] = None,
    links: Optional[LinkStyle] = None,
    collector: Optional[SolutionCollector] = None,
) -> GenerateCallback:
    """
    Build a selection policy.

    Args:
        dictionary: Lexicon of candidate sections
        config: Tunables (defaults to GenerateConfig())
        kind: Policy to build; defaults to config.policy
        links: Shared link store (a new one if omitted)
        collector: Shared solution sink (a new one if omitted)

    Returns:
        The policy, typed as the GenerateCallback contract

    Example:
        >>> cb = create_callback(lexis, GenerateConfig(policy=PolicyKind.RANDOM))
        >>> type(cb).__name__
        'RandomCallback'
    """
    config = config or GenerateConfig()
    kind = PolicyKind(kind) if kind is not None else config.policy
    return _POLICIES[kind](dictionary, config, links=links, collector=collector)


__all__ = [
    "GenerateCallback",
    "PhasedCallback",
    "SimpleCallback",
    "RandomCallback",
    "DiscreteDistribution",
    "ScopedState",
    "SelectionPhase",
    "Checkpoint",
    "CheckpointError",
    "create_callback",
]
