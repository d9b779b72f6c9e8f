"""Scalar nth root in double and arbitrary precision.

Both variants share one edge-case policy: a negative root inverts the
result, a zero root is rejected, a negative base needs an odd integer root,
and zero/non-finite bases are returned without calling ``pow``.
"""

import cmath
import math
from decimal import Context, Decimal

from . import _runtime
from .errors import InvalidRootError, InvalidRootParityError


def nth_root_float(a, root=2):
    """Real ``root``-th root of ``a`` as a float, solving ``x**root == a``."""
    inv = root < 0
    if inv:
        root = -root

    if root == 0:
        raise InvalidRootError(root)
    if a < 0 and abs(root) % 2 != 1:
        raise InvalidRootParityError(a, root)

    # edge cases zero and infinity
    if a == 0:
        return math.inf if inv else 0.0
    if not math.isfinite(a):
        return 0.0 if inv else float(a)

    x = math.pow(abs(a), 1.0 / root)
    # an odd root keeps the sign of a
    x = -x if a < 0 else x
    return 1.0 / x if inv else x


def _is_odd_integer(root: Decimal) -> bool:
    return root.is_finite() and root == root.to_integral_value() and int(root) % 2 == 1


def nth_root_decimal(a: Decimal, root: Decimal = Decimal(2), precision=None) -> Decimal:
    """Real ``root``-th root of ``a`` rounded to ``precision`` significant digits.

    Intermediate steps run with two guard digits. ``precision`` defaults to
    :func:`rootwise._runtime.get_precision`.
    """
    if precision is None:
        precision = _runtime.get_precision()
    ctx = Context(prec=precision + 2)
    root = Decimal(root)
    if root.is_nan():
        return Decimal("NaN")

    inv = root < 0
    if inv:
        root = -root

    if root.is_zero():
        raise InvalidRootError(root)
    if a.is_nan():
        return a
    if a < 0 and not _is_odd_integer(root):
        raise InvalidRootParityError(a, root)

    if a.is_zero():
        return Decimal("Infinity") if inv else Decimal(0)
    if not a.is_finite():
        return Decimal(0) if inv else a

    x = ctx.power(a.copy_abs(), ctx.divide(1, root))
    x = ctx.minus(x) if a < 0 else x
    result = ctx.divide(1, x) if inv else x
    return Context(prec=precision).plus(result)


def nth_roots(x, root=2):
    """All ``root`` complex roots of ``x``, ordered by increasing angle.

    Parameters
    ----------
    x : number or complex
        Value whose roots are computed.
    root : int, optional
        Positive integer degree (default 2).

    Returns
    -------
    list of complex
        ``[r**(1/root) * exp(1j * (phi + 2*pi*k) / root) for k in range(root)]``.
    """
    if isinstance(root, float) and root.is_integer():
        root = int(root)
    if not isinstance(root, int) or isinstance(root, bool) or root <= 0:
        raise InvalidRootError(root)
    z = complex(x)
    if z == 0:
        return [0j]
    r, phi = cmath.polar(z)
    magnitude = r ** (1.0 / root)
    return [cmath.rect(magnitude, (phi + 2.0 * math.pi * k) / root) for k in range(root)]
