import math
from operator import sub

import numpy as np
import pytest

from rootwise import DenseMatrix, DimensionMismatchError, NonInvertibleZeroError, nth_root
from rootwise.array_api._dispatch import (
    dense_dense,
    dense_scalar,
    dense_sparse,
    sparse_scalar,
    sparse_sparse,
)
from rootwise.sparse import CSC


def make_csc():
    # [[4,0,8],[0,9,0]]
    indptr = np.array([0, 1, 2, 3], dtype=np.int64)
    indices = np.array([0, 1, 0], dtype=np.int64)
    data = np.array([4.0, 9.0, 8.0], dtype=np.float64)
    return CSC(indptr, indices, data, (2, 3))


def make_full_csc(values):
    return CSC.from_dense(np.asarray(values, dtype=np.float64))


def test_dense_dense_order_matters():
    x = DenseMatrix([[5.0, 7.0]])
    y = DenseMatrix([[2.0, 3.0]])
    np.testing.assert_allclose(dense_dense(x, y, sub).toarray(), [[3.0, 4.0]])
    np.testing.assert_allclose(dense_dense(y, x, sub).toarray(), [[-3.0, -4.0]])


def test_dense_dense_nd():
    x = DenseMatrix(np.arange(1.0, 9.0).reshape(2, 2, 2))
    y = DenseMatrix(np.ones((2, 2, 2)))
    R = dense_dense(x, y, sub)
    assert R.shape == (2, 2, 2)
    np.testing.assert_allclose(R.toarray(), x.toarray() - 1.0)


def test_dense_dense_shape_mismatch():
    with pytest.raises(DimensionMismatchError) as exc:
        dense_dense(DenseMatrix([[1.0, 2.0]]), DenseMatrix([[1.0], [2.0]]), sub)
    assert exc.value.shape_a == (1, 2)
    assert exc.value.shape_b == (2, 1)


def test_dense_sparse_uses_zero_for_implicit_entries():
    D = DenseMatrix([[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]])
    R = dense_sparse(D, make_csc(), sub)
    assert isinstance(R, DenseMatrix)
    np.testing.assert_allclose(R.toarray(), [[-3.0, 1.0, -7.0], [1.0, -8.0, 1.0]])


def test_dense_sparse_inverse():
    D = DenseMatrix([[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]])
    R = dense_sparse(D, make_csc(), sub, inverse=True)
    np.testing.assert_allclose(R.toarray(), [[3.0, -1.0, 7.0], [-1.0, 8.0, -1.0]])


def test_dense_sparse_requires_matching_2d_shape():
    with pytest.raises(DimensionMismatchError):
        dense_sparse(DenseMatrix(np.ones((3, 2))), make_csc(), sub)
    with pytest.raises(DimensionMismatchError):
        dense_sparse(DenseMatrix(np.ones(6)), make_csc(), sub)


def test_sparse_sparse_keeps_pattern_of_first_operand():
    A = make_csc()
    B = make_full_csc([[2.0, 2.0, 3.0], [2.0, 2.0, 2.0]])
    R = sparse_sparse(A, B, nth_root)
    assert isinstance(R, CSC)
    np.testing.assert_array_equal(R.indptr, A.indptr)
    np.testing.assert_array_equal(R.indices, A.indices)
    np.testing.assert_allclose(R.toarray(), [[2.0, 0.0, 2.0], [0.0, 3.0, 0.0]])


def test_sparse_sparse_negative_root_on_implicit_zero_raises():
    A = make_csc()
    B = make_full_csc([[2.0, -2.0, 3.0], [2.0, 2.0, 2.0]])
    with pytest.raises(NonInvertibleZeroError):
        sparse_sparse(A, B, nth_root)


def test_sparse_sparse_shape_mismatch():
    with pytest.raises(DimensionMismatchError):
        sparse_sparse(make_csc(), make_full_csc(np.ones((3, 2))), nth_root)


def test_sparse_scalar_touches_stored_values_only():
    calls = []

    def op(x, y):
        calls.append((x, y))
        return x * y

    R = sparse_scalar(make_csc(), 2.0, op)
    assert isinstance(R, CSC)
    np.testing.assert_allclose(R.data, [8.0, 18.0, 16.0])
    # one evaluation of the implicit zero plus one call per stored value
    assert len(calls) == 4


def test_sparse_scalar_rejects_nonzero_image_of_zero():
    with pytest.raises(NonInvertibleZeroError) as exc:
        sparse_scalar(make_csc(), -2.0, nth_root)
    assert exc.value.shape == (2, 3)
    assert exc.value.density == pytest.approx(0.5)


def test_sparse_scalar_inverse_on_full_matrix():
    A = make_full_csc([[2.0, 3.0]])
    R = sparse_scalar(A, 64.0, nth_root, inverse=True)
    np.testing.assert_allclose(R.toarray(), [[8.0, 4.0]])


def test_dense_scalar_both_orders():
    D = DenseMatrix([[8.0, 27.0], [64.0, 125.0]])
    np.testing.assert_allclose(dense_scalar(D, 3.0, nth_root).toarray(), [[2.0, 3.0], [4.0, 5.0]])
    E = DenseMatrix([[1.0, 2.0], [3.0, 6.0]])
    np.testing.assert_allclose(
        dense_scalar(E, 64.0, nth_root, inverse=True).toarray(),
        [[64.0, 8.0], [4.0, 2.0]],
    )


def test_dense_scalar_propagates_infinity():
    D = DenseMatrix([0.0, 4.0])
    R = dense_scalar(D, -2.0, nth_root)
    assert R.toarray()[0] == math.inf
    assert R.toarray()[1] == pytest.approx(0.5)


def test_traversals_do_not_mutate_inputs():
    A = make_csc()
    D = DenseMatrix([[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]])
    before = (A.indptr.copy(), A.indices.copy(), A.data.copy(), D.toarray())
    dense_sparse(D, A, sub)
    sparse_scalar(A, 2.0, nth_root)
    np.testing.assert_array_equal(A.indptr, before[0])
    np.testing.assert_array_equal(A.indices, before[1])
    np.testing.assert_array_equal(A.data, before[2])
    np.testing.assert_array_equal(D.toarray(), before[3])
