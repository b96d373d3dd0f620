"""Tests for the numpy-backed index sampler."""

from __future__ import annotations

import numpy as np
import pytest

from takesample.errors import InvalidWeightsError, PopulationExceededError
from takesample.primitive.numpy_sampler import NumpyIndexSampler


def test_draw_without_replacement_is_distinct() -> None:
    """Draws without replacement never repeat a position."""
    sampler = NumpyIndexSampler(seed=7)
    idx = sampler.draw(10, 10, replace=False)
    assert sorted(idx) == list(range(10))


def test_draw_with_replacement_may_exceed_population() -> None:
    """With replacement, more draws than positions are allowed."""
    sampler = NumpyIndexSampler(seed=7)
    idx = sampler.draw(3, 50, replace=True)
    assert len(idx) == 50
    assert set(idx).issubset({0, 1, 2})


def test_draw_rejects_oversized_sample_without_replacement() -> None:
    """Asking for more than the population without replacement fails."""
    sampler = NumpyIndexSampler(seed=1)
    with pytest.raises(PopulationExceededError):
        sampler.draw(3, 4, replace=False)


def test_draw_zero_from_empty_population() -> None:
    """Zero draws from nothing is an empty result, not an error."""
    assert NumpyIndexSampler(seed=1).draw(0, 0) == []


def test_draw_from_empty_population_with_replacement_fails() -> None:
    """Even with replacement there is nothing to draw from an empty population."""
    with pytest.raises(PopulationExceededError):
        NumpyIndexSampler(seed=1).draw(0, 2, replace=True)


def test_zero_weights_are_never_drawn() -> None:
    """Positions with zero weight are excluded."""
    sampler = NumpyIndexSampler(seed=3)
    idx = sampler.draw(4, 200, replace=True, weights=[0.0, 1.0, 0.0, 3.0])
    assert set(idx).issubset({1, 3})


def test_weighted_full_permutation_is_allowed() -> None:
    """Weights with size equal to the population give a weighted permutation."""
    sampler = NumpyIndexSampler(seed=3)
    idx = sampler.draw(4, 4, replace=False, weights=[1.0, 2.0, 3.0, 4.0])
    assert sorted(idx) == [0, 1, 2, 3]


def test_too_few_positive_weights_without_replacement() -> None:
    """Zero-weight positions cannot fill a sample without replacement."""
    sampler = NumpyIndexSampler(seed=3)
    with pytest.raises(PopulationExceededError):
        sampler.draw(3, 3, replace=False, weights=[1.0, 0.0, 0.0])


@pytest.mark.parametrize(
    "weights",
    [[1.0, 2.0], [1.0, -1.0, 1.0], [0.0, 0.0, 0.0], [1.0, np.nan, 1.0]],
)
def test_invalid_weights_are_rejected(weights: list[float]) -> None:
    """Malformed weights raise InvalidWeightsError."""
    with pytest.raises(InvalidWeightsError):
        NumpyIndexSampler(seed=0).draw(3, 2, replace=True, weights=weights)


def test_same_seed_is_reproducible() -> None:
    """Equal seeds produce equal draws."""
    a = NumpyIndexSampler(seed=11).draw(20, 5)
    b = NumpyIndexSampler(seed=11).draw(20, 5)
    assert a == b


def test_shared_generator_is_used() -> None:
    """A generator passed in place of a seed is used as-is."""
    rng = np.random.default_rng(0)
    sampler = NumpyIndexSampler(rng)
    assert sampler.rng is rng
