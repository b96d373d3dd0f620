"""Index sampler primitives."""

from takesample.primitive.base import IndexSampler
from takesample.primitive.numpy_sampler import NumpyIndexSampler

__all__ = [
    "IndexSampler",
    "NumpyIndexSampler",
]
