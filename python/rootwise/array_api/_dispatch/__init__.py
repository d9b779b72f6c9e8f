from .elementwise import Kind, kind_of, nth_root
from .traversal import dense_dense, dense_scalar, dense_sparse, sparse_scalar, sparse_sparse

__all__ = [
    "Kind",
    "kind_of",
    "nth_root",
    "dense_dense",
    "dense_sparse",
    "sparse_sparse",
    "sparse_scalar",
    "dense_scalar",
]
