"""Dense numeric matrices with identity-by-default construction."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class Matrix:
    """A ``height`` x ``width`` grid of numbers.

    ``m[i]`` is the ``i``-th stored row, a list that may be modified in place.
    Values passed to the constructor fill the rows in order. Multiplication
    treats each stored row as a column, so ``translate(a) * translate(b)``
    composes the two translations.
    """

    __slots__ = ("_rows",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, height: int, width: int, *args: Any) -> None:
        if height < 1 or width < 1:
            raise ValueError(f"matrix dimensions must be positive, got {height}x{width}")
        if args:
            if len(args) != height * width:
                raise ValueError(
                    f"a {height}x{width} matrix needs {height * width} values, got {len(args)}"
                )
            values = list(args)
            self._rows = [values[row * width : (row + 1) * width] for row in range(height)]
        else:
            self._rows = [[1 if r == c else 0 for c in range(width)] for r in range(height)]

    @classmethod
    def _from_rows(cls, rows: list[list[Any]]) -> Matrix:
        result = object.__new__(cls)
        result._rows = rows
        return result

    @classmethod
    def identity(cls, height: int, width: int) -> Matrix:
        """Ones on the main diagonal, zeroes elsewhere."""
        return cls(height, width)

    @classmethod
    def zeroed(cls, height: int, width: int) -> Matrix:
        """A matrix of zeroes."""
        return cls(height, width, *([0] * (height * width)))

    @property
    def height(self) -> int:
        """Number of stored rows."""
        return len(self._rows)

    @property
    def width(self) -> int:
        """Length of each stored row."""
        return len(self._rows[0])

    def __getitem__(self, index: int) -> list[Any]:
        return self._rows[index]

    def __setitem__(self, index: int, value: Iterable[Any]) -> None:
        row = list(value)
        if len(row) != self.width:
            raise ValueError(f"row must have {self.width} values, got {len(row)}")
        self._rows[index] = row

    def __repr__(self) -> str:
        return f"Matrix({self.height}, {self.width}, {self._rows!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def _same_shape(self, other: Matrix) -> None:
        if (self.height, self.width) != (other.height, other.width):
            raise ValueError(
                f"matrix shapes differ: {self.height}x{self.width} and {other.height}x{other.width}"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        return Matrix._from_rows(
            [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        return Matrix._from_rows(
            [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.height != other.width:
            raise ValueError(
                f"cannot multiply {self.height}x{self.width} by {other.height}x{other.width}"
            )
        columns = list(zip(*self._rows))
        return Matrix._from_rows(
            [
                [sum(a * b for a, b in zip(column, row)) for column in columns]
                for row in other._rows
            ]
        )

    def transposed(self) -> Matrix:
        """Rows and columns swapped."""
        return Matrix._from_rows([list(column) for column in zip(*self._rows)])