"""Row sampling for pandas DataFrames, optionally within groups."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np
import pandas as pd

from takesample.engine import validate_size
from takesample.errors import InvalidWeightsError
from takesample.primitive.base import IndexSampler
from takesample.primitive.numpy_sampler import NumpyIndexSampler

logger = logging.getLogger(__name__)


def _resolve_by(table: pd.DataFrame, by: str | Sequence[str] | None) -> list[str]:
    """Normalize ``by`` to a list of existing column names."""
    if by is None:
        return []
    columns = [by] if isinstance(by, str) else list(by)
    missing = [col for col in columns if col not in table.columns]
    if missing:
        raise KeyError(
            f"grouping columns {missing} not found in DataFrame. "
            f"Available columns: {list(table.columns)}"
        )
    return columns


def _resolve_weights(table: pd.DataFrame, weights: Any) -> np.ndarray | None:
    """Return per-row weights from a column name or an aligned array-like."""
    if weights is None:
        return None
    if isinstance(weights, str):
        if weights not in table.columns:
            raise KeyError(
                f"weights column '{weights}' not found in DataFrame. "
                f"Available columns: {list(table.columns)}"
            )
        weights = table[weights]
    try:
        arr = np.asarray(weights, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidWeightsError(f"weights must be numeric: {exc}") from exc
    if arr.ndim != 1 or arr.shape[0] != len(table):
        raise InvalidWeightsError(
            f"weights must have one entry per row ({len(table)}), got {arr.shape}"
        )
    return arr


def slice_sample(
    table: pd.DataFrame,
    n: int | None = None,
    by: str | Sequence[str] | None = None,
    replace: bool = False,
    weights: str | Sequence[float] | np.ndarray | None = None,
    sampler: IndexSampler | None = None,
    seed: int | None = None,
) -> pd.DataFrame:
    """Randomly select rows of ``table``, per group when ``by`` is given.

    ``n`` applies to each group. Without replacement it is truncated to the
    number of rows in the group, so ``n=None`` (all rows) shuffles the rows
    of every group. Groups are emitted in order of first appearance and rows
    keep their original index labels.

    Args:
        table: DataFrame to sample rows from.
        n: Rows per group. Defaults to ``len(table)``.
        by: Column name or list of column names defining groups.
        replace: Whether to sample rows with replacement.
        weights: Column name or array-like of per-row selection weights.
        sampler: Index sampler to draw with.
        seed: Seed for the default sampler. Cannot be combined with ``sampler``.

    Returns:
        A new DataFrame with the sampled rows.
    """
    if sampler is None:
        sampler = NumpyIndexSampler(seed)
    elif seed is not None:
        raise ValueError("pass either sampler or seed, not both")

    n_rows = len(table)
    n_per_group = validate_size(n, n_rows)
    by_columns = _resolve_by(table, by)
    row_weights = _resolve_weights(table, weights)

    if n_rows == 0:
        return table.iloc[0:0].copy()

    if by_columns:
        codes = table.groupby(by_columns, sort=False, dropna=False).ngroup().to_numpy()
        members_by_group = [np.flatnonzero(codes == g) for g in range(int(codes.max()) + 1)]
    else:
        members_by_group = [np.arange(n_rows)]

    positions: list[int] = []
    for members in members_by_group:
        k = n_per_group if replace else min(n_per_group, len(members))
        group_weights = None if row_weights is None else row_weights[members]
        local = sampler.draw(len(members), k, replace=replace, weights=group_weights)
        positions.extend(int(members[i]) for i in local)

    logger.debug(
        f"Selected {len(positions)} of {n_rows} rows across {len(members_by_group)} group(s)"
    )
    return table.iloc[positions].copy()
