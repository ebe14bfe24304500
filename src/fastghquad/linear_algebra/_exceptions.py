"""Exception classes for linear algebra routines."""


class LinearAlgebraError(Exception):
    """Base exception for linear algebra errors."""

    pass


class EigenConvergenceError(LinearAlgebraError):
    """Raised when an eigensolver fails to converge.

    The underlying LAPACK routine exhausted its iteration limit or
    produced non-finite output. Retrying on the same input will not help.
    """

    pass


class DimensionMismatchError(LinearAlgebraError, ValueError):
    """Raised when tensor shapes are inconsistent with each other."""

    pass
