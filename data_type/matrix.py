"""
Dense matrix storage.

The data lives in a flat one-dimensional numpy array in row-major order, so element (i, j) is
stored at position ``i * num_cols + j``. Indexes are zero-based. The element type is the numpy
dtype passed at construction; new slots always hold that dtype's zero.
"""

import copy

import numpy as np

from common.constants import MATRIX
from common.exceptions import IndexOutOfRange, InvalidDimension, LengthMismatch


class Matrix:
    """Growable dense matrix with bounds-checked element access."""

    def __init__(self, num_rows: int, num_cols: int, dtype=None):
        if num_rows < 0:
            raise InvalidDimension(f"num_rows must be at least 0, got {num_rows}")
        if num_cols < 0:
            raise InvalidDimension(f"num_cols must be at least 0, got {num_cols}")

        self.dim1 = num_rows
        self.dim2 = num_cols
        if dtype is None:
            dtype = MATRIX["default_dtype"]
        self.data = np.zeros(num_rows * num_cols, dtype=dtype)

    @classmethod
    def from_matrix(cls, matrix: "Matrix") -> "Matrix":
        """Create a deep copy of the given matrix."""
        result = cls(matrix.dim1, matrix.dim2, dtype=matrix.dtype)
        if matrix.data.dtype == object:
            result.data = copy.deepcopy(matrix.data)
        else:
            result.data = matrix.data.copy()
        return result

    def copy(self) -> "Matrix":
        return Matrix.from_matrix(self)

    @property
    def dtype(self):
        return self.data.dtype

    @property
    def num_rows(self) -> int:
        return self.dim1

    @property
    def num_cols(self) -> int:
        return self.dim2

    @property
    def shape(self):
        return self.dim1, self.dim2

    @property
    def is_symmetric(self) -> bool:
        """
        True if M[i, j] == M[j, i] for every pair of positions.

        Scans every pair above the diagonal, O(n^2). Do not call this on a hot path.
        Non-square matrices are never symmetric. NaN entries equal other NaN entries.
        """
        if self.dim1 != self.dim2:
            return False
        for i in range(self.dim1):
            for j in range(i + 1, self.dim2):
                upper = self.data[i * self.dim2 + j]
                lower = self.data[j * self.dim2 + i]
                # NaN mirrored by NaN counts as symmetric
                if upper != lower and not (upper != upper and lower != lower):
                    return False
        return True

    # region Element access
    def _check_row(self, i):
        if i < 0 or i >= self.dim1:
            raise IndexOutOfRange(f"row index {i} out of range, dim1 is {self.dim1}")

    def _check_col(self, j):
        if j < 0 or j >= self.dim2:
            raise IndexOutOfRange(f"column index {j} out of range, dim2 is {self.dim2}")

    def __getitem__(self, index):
        i, j = index
        self._check_row(i)
        self._check_col(j)
        return self.data[i * self.dim2 + j]

    def __setitem__(self, index, value):
        i, j = index
        self._check_row(i)
        self._check_col(j)
        self.data[i * self.dim2 + j] = value

    def get_row(self, i: int) -> np.ndarray:
        """Return a copy of the i-th row."""
        self._check_row(i)
        start = i * self.dim2
        return self.data[start : start + self.dim2].copy()

    def get_column(self, j: int) -> np.ndarray:
        """Return a copy of the j-th column."""
        self._check_col(j)
        return self.data[j :: self.dim2].copy()

    def set_row(self, i: int, row):
        """Set the values of the i-th row; ``row`` must have num_cols entries."""
        self._check_row(i)
        if len(row) != self.dim2:
            raise LengthMismatch(f"Row length ({len(row)}) must equal number of columns ({self.dim2})")
        start = i * self.dim2
        self.data[start : start + self.dim2] = row

    def set_column(self, j: int, column):
        """Set the values of the j-th column; ``column`` must have num_rows entries."""
        self._check_col(j)
        if len(column) != self.dim1:
            raise LengthMismatch(f"Column length ({len(column)}) must equal number of rows ({self.dim1})")
        self.data[j :: self.dim2] = column

    def set_row_to_one_value(self, i: int, value):
        self._check_row(i)
        start = i * self.dim2
        self.data[start : start + self.dim2] = value

    def set_column_to_one_value(self, j: int, value):
        self._check_col(j)
        self.data[j :: self.dim2] = value

    def fill(self, value):
        """Overwrite every entry with ``value``."""
        self.data[:] = value

    init = fill

    # endregion

    # region Growth
    def add_rows(self, num_rows: int):
        """
        Enlarge the matrix to ``num_rows`` rows, filling new rows with zeros.
        Does nothing if ``num_rows`` does not exceed the current row count.
        """
        if num_rows > self.dim1:
            new_data = np.zeros(num_rows * self.dim2, dtype=self.data.dtype)
            # Row-major layout: existing rows keep their offsets when the column count is unchanged
            new_data[: self.data.size] = self.data
            self.dim1 = num_rows
            self.data = new_data

    def grow(self, num_rows: int, num_cols: int):
        """
        Grow the matrix to at least ``num_rows`` x ``num_cols``, filling new entries with zeros.
        Every existing (i, j) keeps its logical position. Never shrinks either dimension.
        """
        if num_rows > self.dim1 or num_cols > self.dim2:
            new_rows = max(self.dim1, num_rows)
            new_cols = max(self.dim2, num_cols)
            new_data = np.zeros((new_rows, new_cols), dtype=self.data.dtype)
            new_data[: self.dim1, : self.dim2] = self.data.reshape(self.dim1, self.dim2)

            self.dim1 = new_rows
            self.dim2 = new_cols
            self.data = new_data.ravel()

    # endregion

    def to_numpy(self) -> np.ndarray:
        """Return a 2-D copy of the matrix contents."""
        return self.data.reshape(self.dim1, self.dim2).copy()

    def __repr__(self):
        return f"Matrix(num_rows={self.dim1}, num_cols={self.dim2}, dtype={self.data.dtype})"
