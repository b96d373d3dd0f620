"""Index sampler interface consumed by the sampling engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class IndexSampler(ABC):
    """Base interface for drawing positions out of ``range(n)``."""

    @abstractmethod
    def draw(
        self,
        n: int,
        k: int,
        replace: bool = False,
        weights: Sequence[float] | None = None,
    ) -> list[int]:
        """Return ``k`` zero-based positions from ``range(n)`` in draw order.

        Args:
            n: Population size.
            k: Number of positions to draw.
            replace: Whether a position may be drawn more than once.
            weights: Optional relative selection weights, one per position.

        Raises:
            PopulationExceededError: If ``k > n`` and ``replace`` is False.
        """
