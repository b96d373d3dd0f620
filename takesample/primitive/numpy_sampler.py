"""Numpy-backed index sampler."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from takesample.errors import InvalidSizeError, InvalidWeightsError, PopulationExceededError
from takesample.primitive.base import IndexSampler


def _normalize_weights(weights: Sequence[float], n: int) -> np.ndarray:
    """Validate relative weights and rescale them to probabilities."""
    try:
        arr = np.asarray(weights, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidWeightsError(f"weights must be numeric: {exc}") from exc
    if arr.ndim != 1 or arr.shape[0] != n:
        raise InvalidWeightsError(f"expected {n} weights, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidWeightsError("weights must be finite")
    if np.any(arr < 0.0):
        raise InvalidWeightsError("weights must be non-negative")
    total = float(arr.sum())
    if total <= 0.0:
        raise InvalidWeightsError("at least one weight must be positive")
    return arr / total


class NumpyIndexSampler(IndexSampler):
    """Draw positions with :meth:`numpy.random.Generator.choice`."""

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        """Initialize the sampler.

        Args:
            seed: Random seed for reproducibility, or an existing generator to
                share its stream.
        """
        if isinstance(seed, np.random.Generator):
            self._rng = seed
        else:
            self._rng = np.random.default_rng(seed)

    @property
    def rng(self) -> np.random.Generator:
        """Underlying numpy generator."""
        return self._rng

    def draw(
        self,
        n: int,
        k: int,
        replace: bool = False,
        weights: Sequence[float] | None = None,
    ) -> list[int]:
        """Draw ``k`` positions out of ``range(n)``."""
        if n < 0 or k < 0:
            raise InvalidSizeError(f"population and draw sizes must be >= 0, got n={n}, k={k}")
        if not replace and k > n:
            raise PopulationExceededError(
                f"cannot take a sample of {k} from a population of {n} without replacement"
            )
        if k == 0:
            return []
        if n == 0:
            raise PopulationExceededError(f"cannot take a sample of {k} from an empty population")

        probs = None
        if weights is not None:
            probs = _normalize_weights(weights, n)
            if not replace and int(np.count_nonzero(probs)) < k:
                raise PopulationExceededError(
                    f"only {int(np.count_nonzero(probs))} positive weights for {k} draws "
                    "without replacement"
                )
        return self._rng.choice(n, size=k, replace=replace, p=probs).tolist()
