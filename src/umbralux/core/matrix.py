# core/matrix.py
from typing import List, Optional, Sequence

import numpy as np

from umbralux.config import EPSILON
from umbralux.core.vector import Point3, Vector3


class MatrixError(ValueError):
    """Raised for malformed matrix data or mismatched dimensions."""


class MatrixInversionError(MatrixError):
    """Raised when a matrix is not square or its determinant is ~0."""


class Matrix:
    """
    An immutable matrix of floats backed by a read-only numpy array.

    Multiplying a 4x4 matrix by a Point3 or Vector3 treats the tuple as a
    homogeneous column vector and returns the same kind of tuple.
    """
    def __init__(self, rows: Sequence[Sequence[float]]):
        if any(np.ndim(row) != 1 for row in rows):
            raise MatrixError("Matrix data must be a sequence of rows")
        if len(rows) == 0 or len(rows[0]) == 0:
            raise MatrixError("Matrix data must contain at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise MatrixError("All matrix rows must have the same length")
        self._data = np.array(rows, dtype=np.float64)
        self._data.flags.writeable = False
        self._inverse: Optional["Matrix"] = None

    @classmethod
    def _from_array(cls, data: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        m._data = np.array(data, dtype=np.float64)
        m._data.flags.writeable = False
        m._inverse = None
        return m

    @classmethod
    def identity(cls, n: int = 4) -> "Matrix":
        return cls._from_array(np.identity(n))

    @classmethod
    def zeros(cls, num_rows: int, num_cols: int) -> "Matrix":
        return cls._from_array(np.zeros((num_rows, num_cols)))

    @property
    def num_rows(self) -> int:
        return self._data.shape[0]

    @property
    def num_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    def is_square(self) -> bool:
        return self.num_rows == self.num_cols

    def get(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def __getitem__(self, index) -> float:
        row, col = index
        return self.get(row, col)

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """
        Returns a writable copy of the underlying data.
        """
        return self._data.copy()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def multiply(self, other: "Matrix") -> "Matrix":
        if self.num_cols != other.num_rows:
            raise MatrixError(
                f"Cannot multiply {self.num_rows}x{self.num_cols} matrix "
                f"by {other.num_rows}x{other.num_cols} matrix")
        return Matrix._from_array(self._data @ other._data)

    def transform(self, value):
        """
        Applies this 4x4 matrix to a Point3 or Vector3.
        """
        if self.shape != (4, 4):
            raise MatrixError("Only 4x4 matrices can transform points and vectors")
        x, y, z, _ = self._data @ np.array(value.as_homogeneous())
        return type(value)(float(x), float(y), float(z))

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, (Point3, Vector3)):
            return self.transform(other)
        return NotImplemented

    __matmul__ = __mul__

    def transpose(self) -> "Matrix":
        return Matrix._from_array(self._data.T)

    # ------------------------------------------------------------------
    # Determinant and inverse by cofactor expansion
    # ------------------------------------------------------------------
    def submatrix(self, row: int, col: int) -> "Matrix":
        """
        Returns a copy of this matrix with the given row and column removed.
        """
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix._from_array(data)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        sign = -1.0 if (row + col) % 2 else 1.0
        return sign * self.minor(row, col)

    def determinant(self) -> float:
        if not self.is_square():
            raise MatrixError("Determinant is only defined for square matrices")
        if self.num_rows == 1:
            return float(self._data[0, 0])

        det = 0.0
        for col in range(self.num_cols):
            det += self._data[0, col] * self.cofactor(0, col)
        return float(det)

    def is_invertible(self) -> bool:
        return self.is_square() and abs(self.determinant()) >= EPSILON

    def inverse(self) -> "Matrix":
        """
        Returns the inverse (adjugate over determinant). The result is
        cached, since matrices never change after construction.
        """
        if self._inverse is not None:
            return self._inverse
        if not self.is_square():
            raise MatrixInversionError("Cannot invert non-square matrix")

        det = self.determinant()
        if abs(det) < EPSILON:
            raise MatrixInversionError("Cannot invert matrix with zero determinant")

        n = self.num_rows
        data = np.empty((n, n))
        for r in range(n):
            for c in range(n):
                # Note the transpose: entry (r, c) uses the cofactor at (c, r)
                data[r, c] = self.cofactor(c, r) / det

        self._inverse = Matrix._from_array(data)
        return self._inverse

    invert = inverse

    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()})"
