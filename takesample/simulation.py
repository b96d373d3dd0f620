"""Procedural data simulations that generate tables on demand.

A :class:`DataSimulation` is an ordered set of named nodes. Each node is a
callable ``fn(n, rng, data)`` returning a scalar or ``n`` values; ``data``
holds the columns generated so far, so later nodes may depend on earlier
ones. Nodes whose name starts with ``.`` are hidden from the output unless
``report_hidden=True``::

    sim = DataSimulation(
        {
            ".noise": lambda n, rng, data: rng.normal(size=n),
            "x": lambda n, rng, data: rng.uniform(0, 10, size=n),
            "y": lambda n, rng, data: 2.0 * data["x"] + data[".noise"],
        }
    )
    df = run_simulation(sim, n=10, seed=42)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import numpy as np
import pandas as pd

from takesample.engine import validate_size
from takesample.errors import SimulationError

logger = logging.getLogger(__name__)

NodeFn = Callable[[int, np.random.Generator, Mapping[str, np.ndarray]], Any]

HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    """Return True for node names that are hidden by default."""
    return name.startswith(HIDDEN_PREFIX)


class DataSimulation:
    """Ordered collection of named column generators."""

    def __init__(self, nodes: Mapping[str, NodeFn]) -> None:
        """Initialize the simulation.

        Args:
            nodes: Mapping of column name to generator callable, evaluated in
                insertion order.

        Raises:
            SimulationError: If there are no nodes, or a name is empty or a
                generator is not callable.
        """
        if not nodes:
            raise SimulationError("a simulation needs at least one node")
        for name, fn in nodes.items():
            if not isinstance(name, str) or not name or name == HIDDEN_PREFIX:
                raise SimulationError(f"invalid node name {name!r}")
            if not callable(fn):
                raise SimulationError(f"node '{name}' is not callable")
        self.nodes: dict[str, NodeFn] = dict(nodes)

    @property
    def names(self) -> list[str]:
        """All node names in evaluation order."""
        return list(self.nodes)

    @property
    def visible_names(self) -> list[str]:
        """Node names reported by default."""
        return [name for name in self.nodes if not is_hidden(name)]

    def run(self, n: int = 5, seed: int | None = None, report_hidden: bool = False) -> pd.DataFrame:
        """Generate ``n`` rows; see :func:`run_simulation`."""
        return run_simulation(self, n=n, seed=seed, report_hidden=report_hidden)

    def __repr__(self) -> str:
        return f"DataSimulation(nodes={self.names})"


def _as_column(name: str, value: Any, n: int) -> np.ndarray:
    """Broadcast a node output to exactly ``n`` values."""
    arr = np.asarray(value)
    if arr.ndim == 0:
        return np.full(n, arr.item())
    if arr.ndim != 1:
        raise SimulationError(f"node '{name}' returned an array of shape {arr.shape}")
    if len(arr) == n:
        return arr
    if len(arr) == 1:
        return np.repeat(arr, n)
    raise SimulationError(f"node '{name}' returned {len(arr)} values, expected {n} or 1")


def run_simulation(
    simulation: DataSimulation,
    n: int = 5,
    seed: int | None = None,
    report_hidden: bool = False,
) -> pd.DataFrame:
    """Run ``simulation`` and return ``n`` rows.

    Args:
        simulation: Simulation to run.
        n: Number of rows to generate.
        seed: Seed for the generator shared by all nodes.
        report_hidden: Whether to include columns whose names start with ``.``.

    Returns:
        DataFrame with one column per (visible) node, in declaration order.
    """
    n_rows = validate_size(n, 5)
    rng = np.random.default_rng(seed)

    data: dict[str, np.ndarray] = {}
    for name, fn in simulation.nodes.items():
        data[name] = _as_column(name, fn(n_rows, rng, data), n_rows)

    columns = simulation.names if report_hidden else simulation.visible_names
    logger.debug(f"Simulated {n_rows} rows for columns {columns}")
    return pd.DataFrame({name: data[name] for name in columns}, columns=columns)
