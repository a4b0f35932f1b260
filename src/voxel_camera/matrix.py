"""
Dense Matrix Primitive

A small immutable 2D matrix used as the linear-algebra substrate for the
camera transform: 3x3 rotation operators and 3x1 column vectors.

The data lives in a read-only float64 numpy array, so every product yields
a fresh Matrix and no caller can mutate a shared operator in place.
"""

from typing import Sequence, Tuple, Union
import numpy as np


ArrayLike = Union[np.ndarray, Sequence[Sequence[float]]]


class Matrix:
    """
    Immutable dense numeric matrix.

    Example:
        rot = Matrix([[0, -1], [1, 0]])
        v = Matrix.column([1, 0])
        (rot @ v).at(1, 0)  # 1.0
    """

    __slots__ = ("_data",)

    def __init__(self, values: ArrayLike):
        """
        Build a matrix from nested rows or a 2D array.

        Args:
            values: Row-major values, shape (rows, cols)
        """
        data = np.array(values, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError(f"Matrix requires 2D values, got {data.ndim}D")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def column(cls, values: Sequence[float]) -> "Matrix":
        """Build an n x 1 column vector."""
        return cls(np.asarray(values, dtype=np.float64).reshape(-1, 1))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Build an n x n identity matrix."""
        return cls(np.eye(n, dtype=np.float64))

    @property
    def shape(self) -> Tuple[int, int]:
        """Get (rows, cols)."""
        return self._data.shape

    def at(self, row: int, col: int) -> float:
        """
        Look up a single cell.

        Raises:
            IndexError: If row or col is outside the matrix
        """
        rows, cols = self.shape
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(f"Cell ({row}, {col}) outside {rows}x{cols} matrix")
        return float(self._data[row, col])

    def to_array(self) -> np.ndarray:
        """Return a writable copy of the underlying data."""
        return self._data.copy()

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError(
                f"Cannot multiply {self.shape[0]}x{self.shape[1]} "
                f"by {other.shape[0]}x{other.shape[1]}"
            )
        return Matrix(self._data @ other._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        return hash((self.shape, self._data.tobytes()))

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()})"
