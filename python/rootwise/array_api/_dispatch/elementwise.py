import enum
import logging
import numbers
import sys
from decimal import Decimal
from functools import partial

import numpy as np

from ... import _runtime, _scalar
from ...dense import DenseMatrix
from ...errors import NonInvertibleZeroError, UnsupportedTypeError
from ...sparse import CSC
from ..creation import matrix
from . import traversal as _tr

logger = logging.getLogger("rootwise.dispatch")

_COMPLEX_ERR = "Complex number not supported in function nth_root. Use nth_roots instead."


class Kind(enum.Enum):
    NUMBER = "number"
    DECIMAL = "Decimal"
    ARRAY = "Array"
    DENSE = "DenseMatrix"
    SPARSE = "SparseMatrix"
    COMPLEX = "Complex"


def kind_of(x) -> Kind:
    """Classify an ``nth_root`` operand."""
    if isinstance(x, DenseMatrix):
        return Kind.DENSE
    if isinstance(x, CSC):
        return Kind.SPARSE
    if isinstance(x, Decimal):
        return Kind.DECIMAL
    if isinstance(x, numbers.Real):
        return Kind.NUMBER
    if isinstance(x, numbers.Complex):
        return Kind.COMPLEX
    if isinstance(x, (list, tuple, np.ndarray)):
        return Kind.ARRAY
    raise UnsupportedTypeError(x)


def _require_full(y):
    # density must be one (no implicit zeros acting as a root)
    if y.density() != 1:
        raise NonInvertibleZeroError(y.shape, y.density())


def _exceeds_float(v):
    return isinstance(v, numbers.Integral) and abs(int(v)) > sys.float_info.max


def _number_number(x, y, precision):
    if _exceeds_float(x) or _exceeds_float(y):
        # huge integers are only exact in the Decimal domain
        if not (isinstance(x, numbers.Integral) and isinstance(y, numbers.Integral)):
            raise UnsupportedTypeError(
                x if _exceeds_float(x) else y,
                "Integer too large for float in function nth_root; pass Decimal values.",
            )
        return _scalar.nth_root_decimal(Decimal(int(x)), Decimal(int(y)), precision=precision)
    return _scalar.nth_root_float(x, y)


def _decimal_decimal(x, y, precision):
    return _scalar.nth_root_decimal(x, y, precision=precision)


def _decimal_number(x, y, precision):
    # integers are exact in both domains, floats are not
    if isinstance(x, numbers.Integral):
        x = Decimal(int(x))
    elif isinstance(y, numbers.Integral):
        y = Decimal(int(y))
    else:
        raise UnsupportedTypeError(
            y if isinstance(x, Decimal) else x,
            "Cannot mix float and Decimal in function nth_root; convert explicitly.",
        )
    return _scalar.nth_root_decimal(x, y, precision=precision)


def _sparse_sparse(x, y, precision):
    _require_full(y)
    return _tr.sparse_sparse(x, y, _op(precision))


def _sparse_dense(x, y, precision):
    return _tr.dense_sparse(y, x, _op(precision), inverse=True)


def _dense_sparse(x, y, precision):
    _require_full(y)
    return _tr.dense_sparse(x, y, _op(precision))


def _dense_dense(x, y, precision):
    return _tr.dense_dense(x, y, _op(precision))


def _sparse_scalar(x, y, precision):
    return _tr.sparse_scalar(x, y, _op(precision))


def _dense_scalar(x, y, precision):
    return _tr.dense_scalar(x, y, _op(precision))


def _scalar_sparse(x, y, precision):
    _require_full(y)
    return _tr.sparse_scalar(y, x, _op(precision), inverse=True)


def _scalar_dense(x, y, precision):
    return _tr.dense_scalar(y, x, _op(precision), inverse=True)


def _array_array(x, y, precision):
    # use matrix implementation
    return nth_root(matrix(x), matrix(y), precision=precision).tolist()


def _array_matrix(x, y, precision):
    return nth_root(matrix(x), y, precision=precision)


def _matrix_array(x, y, precision):
    return nth_root(x, matrix(y), precision=precision)


def _array_scalar(x, y, precision):
    return nth_root(matrix(x), y, precision=precision).tolist()


def _scalar_array(x, y, precision):
    return nth_root(x, matrix(y), precision=precision).tolist()


_N, _D, _A, _DM, _SM = Kind.NUMBER, Kind.DECIMAL, Kind.ARRAY, Kind.DENSE, Kind.SPARSE

_TABLE = {
    (_A, _A): _array_array,
    (_A, _DM): _array_matrix,
    (_A, _SM): _array_matrix,
    (_DM, _A): _matrix_array,
    (_SM, _A): _matrix_array,
    (_A, _N): _array_scalar,
    (_A, _D): _array_scalar,
    (_N, _A): _scalar_array,
    (_D, _A): _scalar_array,
    (_SM, _SM): _sparse_sparse,
    (_SM, _DM): _sparse_dense,
    (_DM, _SM): _dense_sparse,
    (_DM, _DM): _dense_dense,
    (_SM, _N): _sparse_scalar,
    (_SM, _D): _sparse_scalar,
    (_DM, _N): _dense_scalar,
    (_DM, _D): _dense_scalar,
    (_N, _SM): _scalar_sparse,
    (_D, _SM): _scalar_sparse,
    (_N, _DM): _scalar_dense,
    (_D, _DM): _scalar_dense,
    (_N, _N): _number_number,
    (_D, _D): _decimal_decimal,
    (_D, _N): _decimal_number,
    (_N, _D): _decimal_number,
}


def _op(precision):
    return partial(nth_root, precision=precision)


def nth_root(x, root=None, /, *, precision=None):
    """Elementwise real nth root of ``x``, solving ``result**root == x``.

    Parameters
    ----------
    x : number, Decimal, array_like, DenseMatrix or CSC
        Base value(s).
    root : number, Decimal, array_like, DenseMatrix or CSC, optional
        Root value(s), default 2.
    precision : int, optional
        Significant digits for ``Decimal`` results; defaults to
        :func:`rootwise.get_precision`.

    Returns
    -------
    number, Decimal, list, DenseMatrix or CSC
        A sparse result is returned only when every matrix operand is sparse.

    Raises
    ------
    UnsupportedTypeError
        For complex operands (use :func:`nth_roots`) and unknown types.
    NonInvertibleZeroError
        When a sparse operand's implicit zeros would act as a root, or
        would map to a non-zero value.
    """
    if precision is None:
        precision = _runtime.get_precision()
    kx = kind_of(x)
    if root is None:
        if kx is Kind.COMPLEX:
            raise UnsupportedTypeError(x, _COMPLEX_ERR)
        root = Decimal(2) if kx is Kind.DECIMAL else 2
    ky = kind_of(root)
    if Kind.COMPLEX in (kx, ky):
        raise UnsupportedTypeError(x if kx is Kind.COMPLEX else root, _COMPLEX_ERR)
    handler = _TABLE[kx, ky]
    if kx not in (_N, _D) or ky not in (_N, _D):
        logger.debug("nth_root(%s, %s) -> %s", kx.value, ky.value, handler.__name__)
    return handler(x, root, precision)
