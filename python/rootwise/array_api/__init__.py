from .creation import matrix
from .elementwise.roots import nth_root, nth_roots

__all__ = [
    "matrix",
    "nth_root",
    "nth_roots",
]
