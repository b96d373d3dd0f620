"""takesample: draw random samples from vectors, tables and simulations.

Public API
----------
The usable surface is importable directly from ``takesample``::

    from takesample import take_sample, resample, shuffle
    from takesample import sample_vector, slice_sample, DataSimulation, run_simulation
    from takesample.primitive import IndexSampler, NumpyIndexSampler
"""

from __future__ import annotations

# Dispatcher and wrappers
from takesample.dispatch import InputKind, input_kind, resample, shuffle, take_sample

# Vector engine
from takesample.engine import partition_by_group, recycle, sample_vector

# Errors and warnings
from takesample.errors import (
    GroupSizeConflictWarning,
    InvalidGroupsError,
    InvalidSizeError,
    InvalidWeightsError,
    PopulationExceededError,
    SimulationError,
    TakeSampleError,
    UnsupportedInputKindError,
)

# Sampler primitive
from takesample.primitive import IndexSampler, NumpyIndexSampler
from takesample.result import SampleResult

# Simulations and tables
from takesample.simulation import DataSimulation, run_simulation
from takesample.tabular import slice_sample

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "take_sample",
    "resample",
    "shuffle",
    "InputKind",
    "input_kind",
    # Engines
    "sample_vector",
    "slice_sample",
    "run_simulation",
    "DataSimulation",
    "SampleResult",
    "recycle",
    "partition_by_group",
    # Primitive
    "IndexSampler",
    "NumpyIndexSampler",
    # Errors
    "TakeSampleError",
    "InvalidSizeError",
    "PopulationExceededError",
    "InvalidWeightsError",
    "InvalidGroupsError",
    "SimulationError",
    "UnsupportedInputKindError",
    "GroupSizeConflictWarning",
    "__version__",
]
