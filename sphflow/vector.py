"""Small two-dimensional vector types used by the particle solver."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Float2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def dot(self, other: Float2) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y

    def min_val(self) -> float:
        """The smaller of the two components."""
        return min(self.x, self.y)

    def max_val(self) -> float:
        """The larger of the two components."""
        return max(self.x, self.y)

    def replace(self, index: int, value: float) -> Float2:
        """Return a copy with the component at ``index`` set to ``value``."""
        if index == 0:
            return Float2(value, self.y)
        if index == 1:
            return Float2(self.x, value)
        raise IndexError(f"Float2 index out of range: {index}")

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Float2 index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __add__(self, other: Float2) -> Float2:
        if not isinstance(other, Float2):
            return NotImplemented
        return Float2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Float2) -> Float2:
        if not isinstance(other, Float2):
            return NotImplemented
        return Float2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Float2:
        return Float2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Float2:
        if isinstance(factor, Float2):
            return NotImplemented
        return Float2(factor * self.x, factor * self.y)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Float2:
        if isinstance(divisor, Float2):
            return NotImplemented
        return Float2(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class Int2:
    """An immutable 2D vector of integers, used for grid cells."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Int2) -> Int2:
        if not isinstance(other, Int2):
            return NotImplemented
        return Int2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Int2) -> Int2:
        if not isinstance(other, Int2):
            return NotImplemented
        return Int2(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y