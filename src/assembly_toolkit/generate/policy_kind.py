"""
Module: generate.policy_kind

Purpose:
    Enum naming the closed set of section selection policies.

Key Classes:
    - PolicyKind: Tag used by create_callback() to build a policy

Used By:
    - generate.config: GenerateConfig
    - generate.callbacks: create_callback
"""

from enum import Enum


class PolicyKind(str, Enum):
    """
    Selection policy variants.

    Attributes:
        SIMPLE: Deterministic and exhaustive. Every candidate is tried
                exactly once, in a fixed order, so finite solution spaces
                are enumerated completely.
        RANDOM: Weighted random sampling without replacement, for
                generative use over large or unbounded spaces.

    Example:
        >>> PolicyKind("random") is PolicyKind.RANDOM
        True
    """

    SIMPLE = "simple"
    RANDOM = "random"

    def __str__(self) -> str:
        return self.value
