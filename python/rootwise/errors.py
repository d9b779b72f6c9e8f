class NthRootError(ValueError):
    """Base class for nth-root domain errors."""
    pass


class InvalidRootError(NthRootError):
    """Raised when the root is zero."""

    def __init__(self, root):
        self.root = root
        super().__init__(f"Root must be non-zero, got {root!r}")


class InvalidRootParityError(NthRootError):
    """Raised when a negative base is combined with a root that is not an odd integer."""

    def __init__(self, base, root):
        self.base = base
        self.root = root
        super().__init__(f"Root must be odd when a is negative (a={base!r}, root={root!r})")


class NonInvertibleZeroError(NthRootError):
    """Raised when implicit zeros of a sparse operand cannot stay implicit in the result."""

    def __init__(self, shape, density=None):
        self.shape = tuple(shape)
        self.density = density
        detail = f" (density {density:g})" if density is not None else ""
        super().__init__(
            f"sparse operand of shape {self.shape}{detail} has implicit zeros "
            "whose root is not representable as an implicit zero"
        )


class DimensionMismatchError(NthRootError):
    """Raised when operand shapes disagree."""

    def __init__(self, shape_a, shape_b, reason=None):
        self.shape_a = shape_a
        self.shape_b = shape_b
        if reason is None:
            message = f"Dimension mismatch: {shape_a} != {shape_b}"
        else:
            message = f"Dimension mismatch: {reason}"
        super().__init__(message)


class UnsupportedTypeError(NthRootError, TypeError):
    """Raised for operands nth_root does not handle, complex numbers included."""

    def __init__(self, value, message=None):
        self.value = value
        if message is None:
            message = f"Unexpected type of argument in function nth_root: {type(value).__name__}"
        super().__init__(message)
