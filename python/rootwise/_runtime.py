import logging
import os

logger = logging.getLogger("rootwise.runtime")

_default_precision = 64
_current_precision = _default_precision


def set_precision(n: int) -> None:
    """Set the default number of significant digits for ``Decimal`` roots."""
    global _current_precision
    n = int(n)
    if n <= 0:
        raise ValueError("precision must be a positive integer")
    _current_precision = n


def get_precision() -> int:
    # If user set env externally, honor it
    env = os.environ.get("ROOTWISE_PRECISION")
    if env:
        try:
            value = int(env)
        except ValueError:
            logger.warning("ignoring malformed ROOTWISE_PRECISION=%r", env)
            return _current_precision
        if value > 0:
            return value
        logger.warning("ignoring non-positive ROOTWISE_PRECISION=%r", env)
    return _current_precision
