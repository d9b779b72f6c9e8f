from .base import SparseArray, SparseMatrix
from .csc import CSC

__all__ = [
    "CSC",
    "SparseArray",
    "SparseMatrix",
]
