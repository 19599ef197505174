"""
Square matrices over exact rationals.

Characteristic matrices map a control point column to the column of
monomial coefficients (``coefficients = M @ points``). Inversion is
exact Gauss-Jordan elimination, so any nonzero pivot is usable and
only zero pivots force a row interchange.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .rational import Rational, RationalLike, as_rational
from ..utils.exceptions import IndexOutOfRangeError, NotInvertibleError


class RationalMatrix:
    """An immutable n x n matrix of Rationals."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[RationalLike]]):
        grid = tuple(tuple(as_rational(v) for v in row) for row in rows)
        if not grid:
            raise ValueError("Matrix needs at least one row")
        for row in grid:
            if len(row) != len(grid):
                raise ValueError(f"Matrix must be square, got a row of {len(row)} in a {len(grid)}-row matrix")
        self._rows = grid

    @classmethod
    def from_rows(cls, *rows: Sequence[RationalLike]) -> RationalMatrix:
        return cls(rows)

    @classmethod
    def identity(cls, size: int) -> RationalMatrix:
        return cls([[1 if r == c else 0 for c in range(size)] for r in range(size)])

    @property
    def size(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Tuple[Tuple[Rational, ...], ...]:
        return self._rows

    def _check(self, what: str, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexOutOfRangeError(what, index, self.size)

    def row(self, index: int) -> Tuple[Rational, ...]:
        self._check("Matrix row", index)
        return self._rows[index]

    def column(self, index: int) -> Tuple[Rational, ...]:
        self._check("Matrix column", index)
        return tuple(row[index] for row in self._rows)

    def __getitem__(self, key: Tuple[int, int]) -> Rational:
        row, col = key
        self._check("Matrix row", row)
        self._check("Matrix column", col)
        return self._rows[row][col]

    def __matmul__(self, other):
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        if other.size != self.size:
            raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
        cols = [other.column(c) for c in range(other.size)]
        return RationalMatrix(
            [[_dot(row, col) for col in cols] for row in self._rows]
        )

    def __mul__(self, scalar):
        if not isinstance(scalar, (Rational, int)):
            return NotImplemented
        return RationalMatrix([[v * scalar for v in row] for row in self._rows])

    __rmul__ = __mul__

    def apply(self, values: Sequence) -> List:
        """
        Multiply this matrix with a column of values.

        The values can be anything that supports multiplication by a
        Rational and addition (ints, Rationals).
        """
        if len(values) != self.size:
            raise ValueError(f"Expected {self.size} values, got {len(values)}")
        return [_dot(row, values) for row in self._rows]

    def determinant(self) -> Rational:
        grid = [list(row) for row in self._rows]
        n = self.size
        det = Rational.ONE
        for col in range(n):
            pivot = _find_pivot(grid, col)
            if pivot is None:
                return Rational.ZERO
            if pivot != col:
                grid[col], grid[pivot] = grid[pivot], grid[col]
                det = -det
            p = grid[col][col]
            det = det * p
            for r in range(col + 1, n):
                factor = grid[r][col] / p
                if factor:
                    grid[r] = [a - factor * b for a, b in zip(grid[r], grid[col])]
        return det

    def inverse(self) -> RationalMatrix:
        n = self.size
        aug = [
            list(row) + [Rational.ONE if r == c else Rational.ZERO for c in range(n)]
            for r, row in enumerate(self._rows)
        ]
        for col in range(n):
            pivot = _find_pivot(aug, col)
            if pivot is None:
                raise NotInvertibleError(n, col)
            if pivot != col:
                aug[col], aug[pivot] = aug[pivot], aug[col]
            p = aug[col][col]
            aug[col] = [v / p for v in aug[col]]
            for r in range(n):
                factor = aug[r][col]
                if r != col and factor:
                    aug[r] = [a - factor * b for a, b in zip(aug[r], aug[col])]
        return RationalMatrix(row[n:] for row in aug)

    def __eq__(self, other):
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        body = ", ".join("[" + ", ".join(str(v) for v in row) + "]" for row in self._rows)
        return f"RationalMatrix([{body}])"


def _dot(row: Sequence[Rational], values: Sequence):
    total = Rational.ZERO
    for coeff, value in zip(row, values):
        if coeff:
            total = total + coeff * value
    return total


def _find_pivot(grid: List[List[Rational]], col: int):
    for r in range(col, len(grid)):
        if grid[r][col]:
            return r
    return None
