from ._runtime import get_precision, set_precision
from . import array_api as array_api
from .array_api import matrix, nth_root, nth_roots
from .dense import DenseMatrix
from .errors import (
    DimensionMismatchError,
    InvalidRootError,
    InvalidRootParityError,
    NonInvertibleZeroError,
    NthRootError,
    UnsupportedTypeError,
)
from .sparse import CSC

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "set_precision",
    "get_precision",
    "array_api",
    "matrix",
    "nth_root",
    "nth_roots",
    "DenseMatrix",
    "CSC",
    "NthRootError",
    "InvalidRootError",
    "InvalidRootParityError",
    "NonInvertibleZeroError",
    "DimensionMismatchError",
    "UnsupportedTypeError",
]
