import numpy as np

from ..dense import DenseMatrix
from ..errors import DimensionMismatchError
from ..sparse import CSC


def matrix(data, format="dense"):
    """Create a matrix from nested sequences, an ``ndarray`` or another matrix.

    Parameters
    ----------
    data : array_like, DenseMatrix or CSC
        Matrix contents. Nested sequences must be rectangular.
    format : {"dense", "sparse"}, optional
        Storage of the result (default: "dense"). Sparse matrices are CSC
        and must be two-dimensional.

    Returns
    -------
    DenseMatrix or CSC
        A new matrix; ``data`` is copied.

    Examples
    --------
    >>> import rootwise.array_api as xp
    >>> A = xp.matrix([[4.0, 0.0], [0.0, 9.0]], format="sparse")
    >>> A.nnz
    2
    >>> xp.matrix(A).tolist()
    [[4.0, 0.0], [0.0, 9.0]]
    """
    if format not in ("dense", "sparse"):
        raise ValueError("format must be 'dense' or 'sparse'")
    if isinstance(data, (DenseMatrix, CSC)):
        data = data.toarray()
    try:
        arr = np.array(data)
    except ValueError as e:
        raise DimensionMismatchError(None, None, reason=f"ragged nested sequence ({e})") from e
    if format == "sparse":
        if arr.ndim != 2:
            raise DimensionMismatchError(arr.shape, None, reason="sparse matrices must be 2D")
        return CSC.from_dense(arr)
    return DenseMatrix(arr)
