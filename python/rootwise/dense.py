from decimal import Decimal

import numpy as np


def value_dtype(dtype) -> np.dtype:
    """Storage dtype for values of ``dtype``: integers stay exact, other reals become ``float64``."""
    dtype = np.dtype(dtype)
    if dtype == object:
        return dtype
    if dtype.kind in "biu":
        return np.dtype(np.int64)
    return np.dtype(np.float64)


def _storage(values) -> np.ndarray:
    """Array holding ``values``: ``object`` when any is a ``Decimal``, else a real dtype."""
    arr = np.asarray(values)
    if arr.dtype == object:
        if any(isinstance(v, Decimal) for v in arr.flat):
            return arr
        return arr.astype(np.float64)
    if arr.dtype.kind in "biuf":
        return arr.astype(value_dtype(arr.dtype))
    return arr


class DenseMatrix:
    """Dense N-dimensional matrix with an explicit value at every coordinate.

    Parameters
    ----------
    data : array_like
        Nested sequences or an ``ndarray``. The input is copied.

    Attributes
    ----------
    data : numpy.ndarray
        Backing storage: ``int64`` for integers, ``float64`` for other
        native numbers and ``object`` for ``Decimal`` values.
    shape : tuple[int, ...]
        Matrix dimensions.
    """

    def __init__(self, data):
        self.data = _storage(np.array(data))

    @property
    def shape(self):
        return self.data.shape

    @property
    def ndim(self):
        return self.data.ndim

    @property
    def dtype(self):
        return self.data.dtype

    def size(self):
        """Size vector of the matrix, one entry per dimension."""
        return list(self.data.shape)

    def toarray(self):
        """Return a copy of the backing ``ndarray``."""
        return self.data.copy()

    def tolist(self):
        """Return the matrix as nested Python lists."""
        return self.data.tolist()

    def __getitem__(self, key):
        return self.data[key]

    def __repr__(self):
        return f"DenseMatrix(shape={self.shape}, dtype={self.data.dtype.name})"

    def __str__(self):
        return self.__repr__()
