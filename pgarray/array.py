"""Multi-dimensional arrays with a lower bound chosen per dimension."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator, Sequence

_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Dimension:
    """The length and first index of one dimension of an array."""

    len: int
    lower_bound: int

    def shift(self, idx: int) -> int:
        """Return the zero-based position of ``idx`` within this dimension."""
        offset = self.lower_bound
        if idx < offset:
            raise IndexError("out of bounds array access")
        if not (offset >= 0 or idx <= 0 or _I32_MAX - (-offset) >= idx):
            raise IndexError("out of bounds array access")
        return idx - offset


class Array:
    """A multi-dimensional array stored in row-major order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Iterable[Any], dimensions: Iterable[Dimension]) -> None:
        data = list(data)
        dims = list(dimensions)
        expected = math.prod(dim.len for dim in dims)
        if not ((not data and not dims) or len(data) == expected):
            raise ValueError("size mismatch")
        self._data = data
        self._dims = dims

    @classmethod
    def from_vec(cls, data: Iterable[Any], lower_bound: int) -> Array:
        """Create a one-dimensional array starting at ``lower_bound``."""
        data = list(data)
        return cls(data, [Dimension(len(data), lower_bound)])

    def wrap(self, lower_bound: int) -> None:
        """Wrap this array in a new outer dimension of length 1."""
        self._dims.insert(0, Dimension(1, lower_bound))

    def push(self, other: Array) -> None:
        """Append ``other`` along the outermost dimension of this array.

        ``other`` must have exactly the dimensions of this array with the
        first one removed, lower bounds included.
        """
        if len(self._dims) - 1 != len(other._dims):
            raise ValueError("cannot append differently shaped arrays")
        if any(mine != theirs for mine, theirs in zip(self._dims[1:], other._dims)):
            raise ValueError("cannot append differently shaped arrays")
        first = self._dims[0]
        self._dims[0] = replace(first, len=first.len + 1)
        self._data.extend(other._data)

    def dimensions(self) -> tuple[Dimension, ...]:
        """Return the dimensions of this array, outermost first."""
        return tuple(self._dims)

    def to_list(self) -> list[Any]:
        """Return a copy of the elements in row-major order."""
        return list(self._data)

    def _position(self, index: int | Sequence[int]) -> int:
        indices = (index,) if isinstance(index, int) else tuple(index)
        if len(indices) != len(self._dims):
            raise IndexError(
                f"expected {len(self._dims)} indices, got {len(indices)}"
            )
        position = 0
        stride = 1
        for dim, idx in reversed(list(zip(self._dims, indices))):
            position += dim.shift(idx) * stride
            stride *= dim.len
        if position >= len(self._data):
            raise IndexError("out of bounds array access")
        return position

    def __getitem__(self, index: int | Sequence[int]) -> Any:
        return self._data[self._position(index)]

    def __setitem__(self, index: int | Sequence[int], value: Any) -> None:
        self._data[self._position(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._dims == other._dims and self._data == other._data

    def __repr__(self) -> str:
        return f"Array({self._data!r}, {self._dims!r})"

    def __str__(self) -> str:
        prefix = ""
        if any(dim.lower_bound != 1 for dim in self._dims):
            prefix = "".join(
                f"[{dim.lower_bound}:{dim.lower_bound + dim.len - 1}]"
                for dim in self._dims
            ) + "="
        return prefix + self._format(0, iter(self._data))

    def _format(self, depth: int, items: Iterator[Any]) -> str:
        if not self._dims:
            return "{}"
        if depth == len(self._dims):
            return str(next(items))
        parts = [self._format(depth + 1, items) for _ in range(self._dims[depth].len)]
        return "{" + ",".join(parts) + "}"