import numpy as np
import pytest

from common.exceptions import IndexOutOfRange, InvalidDimension, LengthMismatch
from data_type import Matrix


@pytest.fixture
def matrix():
    # 3 x 4 with m[i, j] = 10 * i + j
    m = Matrix(3, 4)
    for i in range(3):
        for j in range(4):
            m[i, j] = 10 * i + j
    return m


def test_construct_allocates_zeros():
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert m.num_rows == 2
    assert m.num_cols == 3
    assert m.data.size == 6
    assert (m.data == 0).all()


def test_construct_empty_dimensions():
    assert Matrix(0, 0).shape == (0, 0)
    assert Matrix(0, 5).data.size == 0


@pytest.mark.parametrize("rows, cols", [(-1, 2), (2, -1)])
def test_construct_rejects_negative_dimensions(rows, cols):
    with pytest.raises(InvalidDimension):
        Matrix(rows, cols)


def test_dtype_is_kept():
    m = Matrix(2, 2, dtype=np.int32)
    assert m.dtype == np.int32
    m[1, 1] = 7
    assert m[1, 1] == 7


def test_set_then_get(matrix):
    matrix[2, 3] = -1.5
    assert matrix[2, 3] == -1.5
    assert matrix[1, 2] == 12


def test_row_major_layout(matrix):
    assert matrix.data[1 * 4 + 2] == 12


@pytest.mark.parametrize("index", [(3, 0), (0, 4), (-1, 0), (0, -1)])
def test_access_out_of_range(matrix, index):
    with pytest.raises(IndexOutOfRange):
        matrix[index]
    with pytest.raises(IndexOutOfRange):
        matrix[index] = 1.0


def test_failed_set_leaves_values(matrix):
    before = matrix.to_numpy()
    with pytest.raises(IndexOutOfRange):
        matrix[5, 5] = 99
    np.testing.assert_array_equal(matrix.to_numpy(), before)


def test_get_row_and_column_are_copies(matrix):
    row = matrix.get_row(1)
    column = matrix.get_column(2)
    np.testing.assert_array_equal(row, [10, 11, 12, 13])
    np.testing.assert_array_equal(column, [2, 12, 22])

    row[:] = -1
    column[:] = -1
    assert matrix[1, 0] == 10
    assert matrix[0, 2] == 2


def test_set_row_and_column(matrix):
    matrix.set_row(0, [1, 2, 3, 4])
    matrix.set_column(3, [7, 8, 9])
    np.testing.assert_array_equal(matrix.get_row(0), [1, 2, 3, 7])
    np.testing.assert_array_equal(matrix.get_column(3), [7, 8, 9])


def test_set_row_length_mismatch(matrix):
    with pytest.raises(LengthMismatch):
        matrix.set_row(0, [1, 2, 3])
    with pytest.raises(LengthMismatch):
        matrix.set_column(0, [1, 2, 3, 4])
    assert matrix[0, 0] == 0
    assert matrix[0, 1] == 1


def test_fill(matrix):
    matrix.fill(0.5)
    assert (matrix.data == 0.5).all()


def test_set_row_and_column_to_one_value(matrix):
    matrix.set_row_to_one_value(0, 5)
    matrix.set_column_to_one_value(3, 9)
    np.testing.assert_array_equal(matrix.get_row(0), [5, 5, 5, 9])
    np.testing.assert_array_equal(matrix.get_column(3), [9, 9, 9])
    assert matrix[2, 2] == 22


def test_add_rows_keeps_values(matrix):
    before = matrix.to_numpy()
    matrix.add_rows(5)
    assert matrix.shape == (5, 4)
    np.testing.assert_array_equal(matrix.to_numpy()[:3], before)
    assert (matrix.to_numpy()[3:] == 0).all()


@pytest.mark.parametrize("num_rows", [0, 2, 3])
def test_add_rows_not_larger_is_noop(matrix, num_rows):
    before = matrix.to_numpy()
    matrix.add_rows(num_rows)
    assert matrix.shape == (3, 4)
    np.testing.assert_array_equal(matrix.to_numpy(), before)


def test_grow_remaps_positions(matrix):
    before = matrix.to_numpy()
    matrix.grow(4, 6)
    assert matrix.shape == (4, 6)
    for i in range(3):
        for j in range(4):
            assert matrix[i, j] == before[i, j]
    assert (matrix.to_numpy()[3, :] == 0).all()
    assert (matrix.to_numpy()[:, 4:] == 0).all()


def test_grow_rows_only(matrix):
    matrix.grow(6, 4)
    assert matrix.shape == (6, 4)
    assert matrix[2, 3] == 23


def test_grow_never_shrinks(matrix):
    matrix.grow(1, 6)
    assert matrix.shape == (3, 6)
    assert matrix[2, 3] == 23


def test_grow_not_larger_is_noop(matrix):
    before = matrix.to_numpy()
    matrix.grow(2, 4)
    assert matrix.shape == (3, 4)
    np.testing.assert_array_equal(matrix.to_numpy(), before)


def test_grow_from_empty():
    m = Matrix(0, 0)
    m.grow(2, 2)
    m[1, 1] = 3
    assert m.shape == (2, 2)
    assert m[1, 1] == 3


def test_copy_is_independent(matrix):
    clone = matrix.copy()
    clone[0, 0] = 100
    clone.grow(5, 5)
    assert matrix[0, 0] == 0
    assert matrix.shape == (3, 4)

    other = Matrix.from_matrix(matrix)
    np.testing.assert_array_equal(other.to_numpy(), matrix.to_numpy())


def test_copy_object_dtype_is_deep():
    m = Matrix(1, 2, dtype=object)
    m[0, 0] = [1, 2]
    clone = m.copy()
    clone[0, 0].append(3)
    assert m[0, 0] == [1, 2]


def test_is_symmetric():
    m = Matrix(3, 3)
    assert m.is_symmetric
    m[0, 2] = 1.0
    assert not m.is_symmetric
    m[2, 0] = 1.0
    assert m.is_symmetric


def test_non_square_is_not_symmetric(matrix):
    assert not matrix.is_symmetric


def test_mirrored_nan_is_symmetric():
    m = Matrix(2, 2)
    m[0, 1] = np.nan
    m[1, 0] = np.nan
    assert m.is_symmetric

    m[1, 0] = 0.5
    assert not m.is_symmetric
