"""Result container for vector sampling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True, eq=False)
class SampleResult:
    """Values drawn from a vector-like source.

    Behaves as a read-only sequence over :attr:`values`, so a result can be
    iterated, indexed and measured like the sample itself.

    Attributes:
        values: Drawn values. Lists, ranges and scalar counts give a ``list``;
            tuples, numpy arrays and pandas Series keep their own type.
        provenance: Zero-based source position of each drawn value, or
            ``None`` when provenance was not requested.
    """

    values: Any
    provenance: list[int] | None = None

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __getitem__(self, item: Any) -> Any:
        if hasattr(self.values, "iloc"):
            return self.values.iloc[item]
        return self.values[item]

    def tolist(self) -> list[Any]:
        """Return the drawn values as a plain list."""
        return list(self.values)
