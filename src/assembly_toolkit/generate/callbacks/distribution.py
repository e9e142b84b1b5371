"""
Module: generate.callbacks.distribution

Purpose:
    Normalized discrete distributions over candidate sections, with
    sampling without replacement.

Key Classes:
    - DiscreteDistribution: Weighted chooser over candidate indices

Dependencies:
    - numpy: weight vectors, normalization, seeded Generator.choice

Used By:
    - generate.callbacks.weighted: RandomCallback
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Optional, Sequence

import numpy as np

from assembly_toolkit.core.models import Section


class DiscreteDistribution:
    """
    Discrete probability distribution over indices ``0..n-1``.

    Probabilities are the weights normalized to sum to 1. If every
    weight is zero the distribution is uniform instead. When drawing
    with some indices excluded, the remaining weights are renormalized
    the same way: zero-weight candidates are only drawn once no
    positive-weight candidate is left.

    Example:
        >>> dist = DiscreteDistribution([1.0, 3.0])
        >>> dist.probabilities.tolist()
        [0.25, 0.75]
        >>> dist.draw(np.random.default_rng(0), exclude={1})
        0
    """

    def __init__(self, weights: Sequence[float]) -> None:
        w = np.asarray(weights, dtype=np.float64)
        if w.ndim != 1:
            raise ValueError(f"weights must be one-dimensional, got shape {w.shape}")
        if not np.all(np.isfinite(w)):
            raise ValueError("weights must be finite")
        if np.any(w < 0):
            raise ValueError(f"weights must be non-negative: {w.tolist()}")
        self._weights = w
        self._probabilities = _normalize(w, np.ones(len(w), dtype=bool))

    @classmethod
    def from_sections(
        cls,
        sections: Iterable[Section],
        key: str,
        default: float = 1.0,
    ) -> DiscreteDistribution:
        """Build a distribution from each section's ``key`` weight."""
        return cls([s.weight(key, default) for s in sections])

    @property
    def probabilities(self) -> np.ndarray:
        """Normalized probabilities (read-only copy)."""
        return self._probabilities.copy()

    def __len__(self) -> int:
        return len(self._weights)

    def remaining(self, exclude: AbstractSet[int] = frozenset()) -> Optional[np.ndarray]:
        """
        Probabilities renormalized over the indices not in ``exclude``.

        Returns:
            Probability vector (zero at excluded indices), or None when
            every index is excluded
        """
        mask = np.ones(len(self._weights), dtype=bool)
        for index in exclude:
            mask[index] = False
        if not mask.any():
            return None
        return _normalize(self._weights, mask)

    def draw(
        self,
        rng: np.random.Generator,
        exclude: AbstractSet[int] = frozenset(),
    ) -> Optional[int]:
        """
        Draw one index not in ``exclude``.

        Returns:
            The drawn index, or None when every index is excluded
        """
        p = self.remaining(exclude)
        if p is None:
            return None
        return int(rng.choice(len(p), p=p))


def _normalize(weights: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Normalize the masked weights; uniform over the mask if they sum to zero."""
    probabilities = np.zeros(len(weights), dtype=np.float64)
    if not mask.any():
        return probabilities
    masked = np.where(mask, weights, 0.0)
    peak = masked.max()
    if peak > 0:
        # Scaled into [0, 1], so the sum is at most len(weights)
        scaled = masked / peak
        probabilities = scaled / scaled.sum()
    else:
        probabilities[mask] = 1.0 / mask.sum()
    return probabilities
