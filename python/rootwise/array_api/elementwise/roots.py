from ... import _scalar
from .. import _dispatch as _dp


def nth_root(x, root=None, /, *, precision=None):
    return _dp.nth_root(x, root, precision=precision)


def nth_roots(x, root=2):
    return _scalar.nth_roots(x, root)
