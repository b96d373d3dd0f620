"""Tests for the take_sample dispatcher and its wrappers."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from takesample.dispatch import InputKind, input_kind, resample, shuffle, take_sample
from takesample.errors import GroupSizeConflictWarning, UnsupportedInputKindError
from takesample.result import SampleResult
from takesample.simulation import DataSimulation


def _sim() -> DataSimulation:
    return DataSimulation({"x": lambda n, rng, data: rng.normal(size=n)})


@pytest.mark.parametrize(
    ("x", "kind"),
    [
        ([1, 2, 3], InputKind.VECTOR),
        ((1, 2), InputKind.VECTOR),
        (range(4), InputKind.VECTOR),
        (np.arange(3), InputKind.VECTOR),
        (pd.Series([1, 2]), InputKind.VECTOR),
        (6, InputKind.VECTOR),
        (pd.DataFrame({"a": [1]}), InputKind.TABULAR),
    ],
)
def test_input_kind_classifies_containers(x: object, kind: InputKind) -> None:
    """Vectors and tables are recognised."""
    assert input_kind(x) is kind


def test_input_kind_recognises_simulations() -> None:
    """DataSimulation instances are routed to the simulation service."""
    assert input_kind(_sim()) is InputKind.SIMULATION


@pytest.mark.parametrize("x", ["abc", {"a": 1}, None, {1, 2}, np.zeros((2, 2)), True])
def test_unsupported_input_kinds(x: object) -> None:
    """Anything else fails with UnsupportedInputKindError."""
    with pytest.raises(UnsupportedInputKindError):
        take_sample(x)


def test_take_sample_vector_returns_sample_result() -> None:
    """Vectors produce a SampleResult that behaves like the sample."""
    result = take_sample([1, 2, 3, 4, 5, 6], n=6, seed=0)
    assert isinstance(result, SampleResult)
    assert sorted(result) == [1, 2, 3, 4, 5, 6]


def test_take_sample_passes_vector_options_through() -> None:
    """Grouping and provenance options reach the vector engine."""
    result = take_sample(
        [10, 20, 30, 40], groups=["a", "b"], report_provenance=True, seed=2
    )
    assert set(result.provenance[:2]) == {0, 2}


def test_take_sample_table() -> None:
    """DataFrames are sampled by rows, per group with by."""
    df = pd.DataFrame({"g": ["a", "a", "b"], "v": [1, 2, 3]})
    out = take_sample(df, n=1, by="g", seed=0)
    assert isinstance(out, pd.DataFrame)
    assert sorted(out["g"]) == ["a", "b"]


def test_take_sample_simulation_defaults_to_five_rows() -> None:
    """Simulations default to n=5 and ignore replace."""
    out = take_sample(_sim(), replace=True, seed=1)
    assert isinstance(out, pd.DataFrame)
    assert len(out) == 5
    assert len(take_sample(_sim(), n=12, seed=1)) == 12


def test_unknown_keyword_for_target_is_a_type_error() -> None:
    """Options the selected sampler does not take are rejected."""
    with pytest.raises(TypeError):
        take_sample(_sim(), groups=["a"])


def test_resample_draws_with_replacement() -> None:
    """resample defaults to replace=True, so size may exceed the source."""
    result = resample([1, 2, 3], n=10, seed=3)
    assert len(result) == 10


def test_resample_table_with_replacement() -> None:
    """resample of a table may repeat rows."""
    df = pd.DataFrame({"v": [1, 2]})
    assert len(resample(df, n=6, seed=0)) == 6


def test_shuffle_is_a_permutation() -> None:
    """shuffle returns every element exactly once."""
    source = list(range(20))
    result = shuffle(source, seed=4)
    assert len(result) == 20
    assert sorted(result) == source


def test_shuffle_usually_changes_order() -> None:
    """Over repeated shuffles at least one differs from the input order."""
    source = list(range(10))
    assert any(shuffle(source).tolist() != source for _ in range(5))


@pytest.mark.parametrize("entry", [take_sample, resample, shuffle])
def test_group_override_warning_skips_dispatch_frames(entry) -> None:
    """Warnings raised through the wrappers point at the user's call."""
    with pytest.warns(GroupSizeConflictWarning) as record:
        entry([1, 2, 3, 4], 2, groups=["a", "b"], seed=0)
    assert record[0].filename == __file__
