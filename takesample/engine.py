"""Grouped and weighted sampling from vector-like containers.

:func:`sample_vector` is the engine behind ``take_sample`` for lists, tuples,
ranges, 1-D numpy arrays, pandas Series and bare counts. It either makes one
call to an :class:`~takesample.primitive.base.IndexSampler` over the whole
source, or, when ``groups`` are given, one call per group so that every group
is reshuffled (or resampled) independently and keeps its size.
"""

from __future__ import annotations

import inspect
import itertools
import logging
import math
import numbers
import os
import warnings
from collections.abc import Sequence
from typing import Any, Hashable, Iterable

import numpy as np
import pandas as pd

from takesample.errors import (
    GroupSizeConflictWarning,
    InvalidGroupsError,
    InvalidSizeError,
    InvalidWeightsError,
    UnsupportedInputKindError,
)
from takesample.primitive.base import IndexSampler
from takesample.primitive.numpy_sampler import NumpyIndexSampler
from takesample.result import SampleResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Argument normalization
# ---------------------------------------------------------------------------


def is_scalar_count(x: Any) -> bool:
    """Return True if ``x`` is a bare real number (booleans excluded)."""
    return isinstance(x, numbers.Real) and not isinstance(x, (bool, np.bool_))


def is_vector_like(x: Any) -> bool:
    """Return True if ``x`` can be sampled element-wise."""
    if isinstance(x, pd.Series):
        return True
    if isinstance(x, np.ndarray):
        return x.ndim == 1
    if isinstance(x, (str, bytes, bytearray)):
        return False
    return isinstance(x, Sequence) or is_scalar_count(x)


def validate_size(size: Any, default: int) -> int:
    """Return ``size`` as a non-negative int, or ``default`` when it is None.

    Raises:
        InvalidSizeError: If ``size`` is negative, fractional or not a number.
    """
    if size is None:
        return default
    if isinstance(size, (bool, np.bool_)):
        raise InvalidSizeError(f"size must be a non-negative integer, got {size!r}")
    if isinstance(size, numbers.Integral):
        value = int(size)
    elif isinstance(size, numbers.Real) and math.isfinite(size) and float(size).is_integer():
        value = int(size)
    else:
        raise InvalidSizeError(f"size must be a non-negative integer, got {size!r}")
    if value < 0:
        raise InvalidSizeError(f"size must be a non-negative integer, got {size!r}")
    return value


def _working_source(source: Any) -> Any:
    """Expand a bare count ``k >= 1`` to ``[1, ..., k]``."""
    if is_scalar_count(source):
        if math.isfinite(source) and source >= 1:
            return list(range(1, int(math.floor(source)) + 1))
        return [source]
    if not is_vector_like(source):
        raise UnsupportedInputKindError(
            f"cannot sample elements of {type(source).__name__!r}; "
            "expected a list, tuple, range, 1-D array, Series or a count"
        )
    return source


def _as_weights(weights: Any, n: int) -> np.ndarray:
    """Convert weights to a float array with exactly ``n`` entries."""
    try:
        arr = np.asarray(weights, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidWeightsError(f"weights must be numeric: {exc}") from exc
    if arr.ndim != 1 or arr.shape[0] != n:
        raise InvalidWeightsError(f"weights must have one entry per element ({n}), got {arr.shape}")
    return arr


def recycle(labels: Iterable[Hashable] | Hashable, size: int) -> list[Hashable]:
    """Repeat or truncate ``labels`` cyclically to exactly ``size`` entries.

    A single string or other non-iterable label is treated as a one-element
    label sequence.

    Raises:
        InvalidGroupsError: If ``labels`` is empty and ``size`` is positive.
    """
    if isinstance(labels, (str, bytes)) or not isinstance(labels, Iterable):
        labels = [labels]
    pool = list(labels)
    if size == 0:
        return []
    if not pool:
        raise InvalidGroupsError(f"cannot recycle an empty group sequence to length {size}")
    return list(itertools.islice(itertools.cycle(pool), size))


def _is_missing(label: Any) -> bool:
    """Return True for None, NaN, NaT and other scalar missing markers."""
    return pd.api.types.is_scalar(label) and bool(pd.isna(label))


def partition_by_group(labels: Sequence[Hashable]) -> dict[Hashable, list[int]]:
    """Map each label to its member positions, in first-seen label order.

    Missing labels (None, NaN, NaT) form a single group keyed by the first
    missing label seen.
    """
    partition: dict[Hashable, list[int]] = {}
    missing_key: list[Hashable] = []
    for pos, label in enumerate(labels):
        if _is_missing(label):
            if not missing_key:
                missing_key.append(label)
            label = missing_key[0]
        try:
            partition.setdefault(label, []).append(pos)
        except TypeError as exc:
            raise InvalidGroupsError(f"group label {label!r} is not hashable") from exc
    return partition


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside the takesample package."""
    package_dir = os.path.dirname(os.path.abspath(__file__)) + os.sep
    frame = inspect.currentframe()
    level = 0
    while frame is not None and frame.f_code.co_filename.startswith(package_dir):
        frame = frame.f_back
        level += 1
    return level


def take_positions(source: Any, positions: list[int]) -> Any:
    """Look up ``positions`` in ``source``, keeping its container type."""
    if isinstance(source, pd.Series):
        return source.iloc[positions]
    if isinstance(source, np.ndarray):
        return source[np.asarray(positions, dtype=np.intp)]
    if isinstance(source, tuple):
        return tuple(source[i] for i in positions)
    return [source[i] for i in positions]


# ---------------------------------------------------------------------------
# Sampling
# ---------------------------------------------------------------------------


def _draw_within_groups(
    sampler: IndexSampler,
    labels: list[Hashable],
    replace: bool,
    weights: np.ndarray | None,
) -> list[int]:
    """Draw every group independently and concatenate in first-seen order."""
    positions: list[int] = []
    for label, members in partition_by_group(labels).items():
        group_weights = None if weights is None else weights[members]
        local = sampler.draw(len(members), len(members), replace=replace, weights=group_weights)
        logger.debug(f"Group {label!r}: drew {len(local)} positions from {len(members)} members")
        positions.extend(members[i] for i in local)
    return positions


def sample_vector(
    source: Any,
    size: int | None = None,
    replace: bool = False,
    weights: Sequence[float] | np.ndarray | None = None,
    groups: Iterable[Hashable] | None = None,
    report_provenance: bool = False,
    sampler: IndexSampler | None = None,
    seed: int | None = None,
) -> SampleResult:
    """Draw a sample of elements from a vector-like source.

    Args:
        source: Elements to sample from. A bare number ``k >= 1`` stands for
            the values ``1..k``.
        size: Number of values to draw. Defaults to the source length.
        replace: Whether to sample with replacement.
        weights: Optional relative selection weight for each source element.
        groups: Optional group labels, recycled to the source length. Each
            group is resampled independently and keeps its size; an explicit
            ``size`` different from the source length is ignored with a
            :class:`~takesample.errors.GroupSizeConflictWarning`.
        report_provenance: Whether to return the source position of each
            drawn value.
        sampler: Index sampler to draw with. Defaults to a
            :class:`~takesample.primitive.numpy_sampler.NumpyIndexSampler`.
        seed: Seed for the default sampler. Cannot be combined with
            ``sampler``.

    Returns:
        :class:`~takesample.result.SampleResult` with the drawn values and,
        if requested, their zero-based source positions.

    Raises:
        InvalidSizeError: If ``size`` is negative or not an integer.
        InvalidWeightsError: If ``weights`` does not match the source length.
        PopulationExceededError: Propagated from the sampler when more values
            are requested than can be drawn without replacement.
    """
    if sampler is None:
        sampler = NumpyIndexSampler(seed)
    elif seed is not None:
        raise ValueError("pass either sampler or seed, not both")

    data = _working_source(source)
    n_source = len(data)
    n_draw = validate_size(size, n_source)
    arr_weights = None if weights is None else _as_weights(weights, n_source)

    if groups is not None:
        if n_draw != n_source:
            warnings.warn(
                f"size={n_draw} is ignored when using groups; drawing {n_source} values",
                GroupSizeConflictWarning,
                stacklevel=_caller_stacklevel(),
            )
            n_draw = n_source
        labels = recycle(groups, n_draw)
        positions = _draw_within_groups(sampler, labels, replace, arr_weights)
    elif n_draw == 0:
        positions = []
    else:
        positions = list(sampler.draw(n_source, n_draw, replace=replace, weights=arr_weights))

    logger.debug(
        f"Sampled {len(positions)} of {n_source} elements "
        f"(replace={replace}, grouped={groups is not None})"
    )
    return SampleResult(
        values=take_positions(data, positions),
        provenance=list(positions) if report_provenance else None,
    )
