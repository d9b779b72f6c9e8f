"""Elementwise traversals over dense, sparse and scalar operand pairs.

Every function applies a binary callable ``op(x, y)`` and returns a new
container; inputs are only read. Sparse results keep the sparsity pattern of
their sparse operand, so an implicit zero must map to zero under ``op``.
When it does not, :class:`~rootwise.errors.NonInvertibleZeroError` is raised
before anything is returned.
"""

import numpy as np

from ...dense import DenseMatrix, _storage
from ...errors import DimensionMismatchError, NonInvertibleZeroError
from ...sparse import CSC


def _check_same_shape(x, y):
    if tuple(x.shape) != tuple(y.shape):
        raise DimensionMismatchError(tuple(x.shape), tuple(y.shape))


def _check_2d(x, other):
    if len(x.shape) != 2:
        raise DimensionMismatchError(
            tuple(x.shape), tuple(other.shape), reason="sparse operands require 2D partners"
        )


def _apply(op, x, y):
    # frompyfunc hands Python objects to op and broadcasts like a ufunc
    return np.asarray(np.frompyfunc(op, 2, 1)(x, y), dtype=object)


def dense_dense(x: DenseMatrix, y: DenseMatrix, op) -> DenseMatrix:
    """``C[i] = op(x[i], y[i])`` for every coordinate of two equally shaped dense matrices."""
    _check_same_shape(x, y)
    return DenseMatrix(_storage(_apply(op, x.data, y.data)))


def dense_sparse(dense: DenseMatrix, sparse: CSC, op, inverse=False) -> DenseMatrix:
    """Dense result of ``op(dense, sparse)``, or ``op(sparse, dense)`` when ``inverse``.

    Implicit zeros of ``sparse`` take part as the zero of its value domain.
    """
    _check_2d(dense, sparse)
    _check_same_shape(dense, sparse)
    nrows, ncols = sparse.shape
    values = dense.data.tolist()
    zero = sparse.zero
    out = np.empty((nrows, ncols), dtype=object)
    for j in range(ncols):
        rows, stored = sparse.column(j)
        column = dict(zip(rows, stored))
        for i in range(nrows):
            v = column.get(i, zero)
            out[i, j] = op(v, values[i][j]) if inverse else op(values[i][j], v)
    return DenseMatrix(_storage(out))


def sparse_sparse(x: CSC, y: CSC, op) -> CSC:
    """``op(x, y)`` over the stored coordinates of ``x``.

    The result has exactly the sparsity pattern of ``x``. Where ``x`` is an
    implicit zero and ``y`` stores a value, ``op(0, y)`` must be zero.
    """
    _check_same_shape(x, y)
    zero = x.zero
    data = []
    for j in range(x.shape[1]):
        xrows, xvals = x.column(j)
        yrows, yvals = y.column(j)
        column = dict(zip(yrows, yvals))
        for i, v in zip(xrows, xvals):
            data.append(op(v, column.pop(i, y.zero)))
        # remaining entries of y sit on implicit zeros of x
        for w in column.values():
            if op(zero, w) != 0:
                raise NonInvertibleZeroError(x.shape, x.density())
    return CSC.from_arrays(
        x.indptr.copy(), x.indices.copy(), _storage(data), x.shape, check=False
    )


def sparse_scalar(sparse: CSC, scalar, op, inverse=False) -> CSC:
    """``op(sparse, scalar)``, or ``op(scalar, sparse)`` when ``inverse``, over stored values.

    Implicit zeros stay implicit; if ``op`` of an implicit zero and the
    scalar is non-zero the broadcast is rejected.
    """
    if sparse.nnz < sparse.nelements():
        z = op(scalar, sparse.zero) if inverse else op(sparse.zero, scalar)
        if z != 0:
            raise NonInvertibleZeroError(sparse.shape, sparse.density())
    values = sparse.data.tolist()
    data = [op(scalar, v) if inverse else op(v, scalar) for v in values]
    return CSC.from_arrays(
        sparse.indptr.copy(), sparse.indices.copy(), _storage(data), sparse.shape, check=False
    )


def dense_scalar(dense: DenseMatrix, scalar, op, inverse=False) -> DenseMatrix:
    """Broadcast ``op(cell, scalar)``, or ``op(scalar, cell)`` when ``inverse``, over every cell."""
    s = np.empty((), dtype=object)
    s[()] = scalar
    out = _apply(op, s, dense.data) if inverse else _apply(op, dense.data, s)
    return DenseMatrix(_storage(out))
