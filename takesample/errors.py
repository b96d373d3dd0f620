"""Exception and warning types raised by takesample."""

from __future__ import annotations


class TakeSampleError(Exception):
    """Base class for all takesample errors."""


class InvalidSizeError(TakeSampleError, ValueError):
    """Requested sample size is negative, fractional, or not a number."""


class PopulationExceededError(TakeSampleError, ValueError):
    """More draws requested than the population allows without replacement."""


class InvalidWeightsError(TakeSampleError, ValueError):
    """Selection weights are malformed (wrong length, negative, all zero)."""


class InvalidGroupsError(TakeSampleError, ValueError):
    """Group labels cannot be recycled to the requested size."""


class SimulationError(TakeSampleError, ValueError):
    """A data simulation is malformed or produced a column of the wrong length."""


class UnsupportedInputKindError(TakeSampleError, TypeError):
    """``take_sample`` was given a container it does not know how to sample."""


class GroupSizeConflictWarning(UserWarning):
    """An explicit size was ignored because group labels define the size."""
