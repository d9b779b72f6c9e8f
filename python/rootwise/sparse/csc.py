from decimal import Decimal

import numpy as np

from ..dense import value_dtype
from .base import SparseMatrix


class CSC(SparseMatrix):
    """Compressed Sparse Column (CSC) matrix.

    Parameters
    ----------
    indptr : array_like of int64, shape ``(ncols + 1,)``
        Column pointer array.
    indices : array_like of int64, shape ``(nnz,)``
        Row indices of stored values.
    data : array_like, shape ``(nnz,)``
        Stored values. ``Decimal`` values are kept in an ``object`` array,
        integers as ``int64`` and other reals as ``float64``.
    shape : tuple of int
        Matrix shape ``(nrows, ncols)``.
    dtype : numpy.dtype, optional
        Value dtype, inferred from ``data`` when omitted.
    check : bool, optional
        If True, validate the storage invariants (may be slower).

    Attributes
    ----------
    indptr, indices, data : numpy.ndarray
        Storage arrays for CSC structure and values.
    shape : tuple[int, int]
        Matrix dimensions.
    nnz : int
        Number of stored elements.

    Notes
    -----
    Coordinates not listed in ``indices`` are implicit zeros. Within each
    column row indices are strictly increasing, so a coordinate is stored at
    most once.

    Examples
    --------
    Construct a small CSC::

        >>> import numpy as np
        >>> from rootwise.sparse import CSC
        >>> indptr = np.array([0, 1, 2, 3])
        >>> indices = np.array([0, 1, 1])
        >>> data = np.array([1.0, 2.0, 3.0])
        >>> a = CSC(indptr, indices, data, shape=(2, 3))
        >>> a.nnz
        3
        >>> a.density()
        0.5
    """

    def __init__(self, indptr, indices, data, shape, dtype=None, check=True):
        data = np.asarray(data)
        if dtype is None:
            dtype = value_dtype(data.dtype)
        super().__init__(shape=shape, dtype=np.dtype(dtype))
        self.indptr = np.asarray(indptr, dtype=np.int64)
        self.indices = np.asarray(indices, dtype=np.int64)
        self.data = np.asarray(data, dtype=self.dtype)
        if check:
            self._check()

    def _check(self):
        nrows, ncols = self.shape
        if self.indptr.ndim != 1 or self.indptr.size != ncols + 1:
            raise ValueError("indptr length must equal ncols + 1")
        if self.indptr[0] != 0:
            raise ValueError("indptr must start at 0")
        if np.any(np.diff(self.indptr) < 0):
            raise ValueError("indptr must be non-decreasing")
        if self.indices.size != self.data.size or self.indptr[-1] != self.data.size:
            raise ValueError("indices and data must have length indptr[-1]")
        if self.indices.size and (self.indices.min() < 0 or self.indices.max() >= nrows):
            raise ValueError("row index out of bounds")
        for j in range(ncols):
            rows = self.indices[self.indptr[j] : self.indptr[j + 1]]
            if np.any(np.diff(rows) <= 0):
                raise ValueError(f"row indices in column {j} must be strictly increasing")

    @classmethod
    def from_arrays(cls, indptr, indices, data, shape, check=True):
        """Construct from CSC arrays.

        Parameters
        ----------
        indptr, indices, data : array_like
            CSC structure and values.
        shape : tuple[int, int]
            Matrix shape.
        check : bool, optional
            Validate invariants.
        """
        return cls(indptr, indices, data, shape, check=check)

    @classmethod
    def from_dense(cls, array):
        """Build a CSC storing the non-zero entries of a dense 2D array."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError("CSC.from_dense requires a 2D array")
        dtype = value_dtype(arr.dtype)
        indptr = [0]
        indices = []
        data = []
        for j in range(arr.shape[1]):
            rows = np.flatnonzero(arr[:, j] != 0)
            indices.extend(rows.tolist())
            data.extend(arr[rows, j].tolist())
            indptr.append(len(indices))
        return cls(indptr, indices, np.asarray(data, dtype=dtype), arr.shape, check=False)

    @classmethod
    def from_scipy(cls, mat):
        """Convert any ``scipy.sparse`` matrix or array to :class:`CSC`.

        Duplicate coordinates are summed and row indices sorted.
        """
        import scipy.sparse as sp

        m = sp.csc_matrix(mat, copy=True)
        m.sum_duplicates()
        return cls(m.indptr, m.indices, m.data, m.shape, check=False)

    def to_scipy(self):
        """Return an equivalent ``scipy.sparse.csc_matrix`` (float data only)."""
        import scipy.sparse as sp

        if self.dtype == object:
            raise TypeError("scipy.sparse does not support Decimal values")
        return sp.csc_matrix(
            (self.data.copy(), self.indices.copy(), self.indptr.copy()), shape=self.shape
        )

    @property
    def nnz(self):
        """Number of stored values."""
        return int(self.data.size)

    @property
    def zero(self):
        """The implicit zero in this matrix's value domain."""
        if self.dtype == object:
            return Decimal(0)
        return 0 if self.dtype.kind == "i" else 0.0

    def column(self, j):
        """Row indices and stored values of column ``j`` as Python lists."""
        s = int(self.indptr[j])
        e = int(self.indptr[j + 1])
        return self.indices[s:e].tolist(), self.data[s:e].tolist()

    def toarray(self):
        """Convert to a dense NumPy ``ndarray`` of shape ``(nrows, ncols)``."""
        nrows, ncols = self.shape
        out = np.full((nrows, ncols), self.zero, dtype=self.dtype)
        for j in range(ncols):
            s = int(self.indptr[j])
            e = int(self.indptr[j + 1])
            if s < e:
                out[self.indices[s:e], j] = self.data[s:e]
        return out

    def __repr__(self):
        return f"CSC(shape={self.shape}, nnz={self.nnz}, dtype={self.dtype.name})"

    def __str__(self):
        return self.__repr__()
