"""``take_sample`` and its wrappers: one entry point for every input kind."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pandas as pd

from takesample.engine import is_vector_like, sample_vector
from takesample.errors import UnsupportedInputKindError
from takesample.simulation import DataSimulation, run_simulation
from takesample.tabular import slice_sample

DEFAULT_SIMULATION_SIZE = 5


class InputKind(Enum):
    """Container kinds ``take_sample`` can draw from."""

    VECTOR = "vector"
    TABULAR = "tabular"
    SIMULATION = "simulation"


def input_kind(x: Any) -> InputKind:
    """Classify ``x`` as a vector, a table or a simulation.

    Raises:
        UnsupportedInputKindError: If ``x`` is none of these.
    """
    if isinstance(x, DataSimulation):
        return InputKind.SIMULATION
    if isinstance(x, pd.DataFrame):
        return InputKind.TABULAR
    if is_vector_like(x):
        return InputKind.VECTOR
    raise UnsupportedInputKindError(f"unsupported input kind: {type(x).__name__}")


def take_sample(x: Any, n: int | None = None, replace: bool = False, **kwargs: Any) -> Any:
    """Draw a random sample from a vector, a DataFrame or a simulation.

    * Vectors (lists, tuples, ranges, 1-D arrays, Series, or a count ``k``
      meaning ``1..k``) go to :func:`~takesample.engine.sample_vector`, which
      accepts ``weights``, ``groups``, ``report_provenance``, ``sampler`` and
      ``seed``.
    * DataFrames go to :func:`~takesample.tabular.slice_sample`; ``n`` is the
      number of rows per group and ``by``, ``weights``, ``sampler`` and
      ``seed`` are accepted.
    * Simulations go to :func:`~takesample.simulation.run_simulation` with
      ``n`` defaulting to 5; ``seed`` and ``report_hidden`` are accepted and
      ``replace`` is ignored.

    Args:
        x: Object to sample from.
        n: Sample size. Defaults to the length of ``x`` for vectors and tables.
        replace: Whether to sample with replacement.
        **kwargs: Passed through to the kind-specific sampler.

    Returns:
        A :class:`~takesample.result.SampleResult` for vectors, otherwise a
        ``pandas.DataFrame``.
    """
    kind = input_kind(x)
    if kind is InputKind.VECTOR:
        return sample_vector(x, size=n, replace=replace, **kwargs)
    if kind is InputKind.TABULAR:
        return slice_sample(x, n=n, replace=replace, **kwargs)
    return run_simulation(x, n=DEFAULT_SIMULATION_SIZE if n is None else n, **kwargs)


def resample(x: Any, *args: Any, replace: bool = True, **kwargs: Any) -> Any:
    """Sample with replacement; otherwise identical to :func:`take_sample`."""
    return take_sample(x, *args, replace=replace, **kwargs)


def shuffle(x: Any, *args: Any, **kwargs: Any) -> Any:
    """Reorder ``x`` at random (a permutation for vectors and tables)."""
    return take_sample(x, *args, **kwargs)
