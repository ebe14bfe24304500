"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base exception for polynomial operations."""

    pass


class DegreeError(PolynomialError):
    """Raised when degree is invalid for operation."""

    pass


class InvalidOrderError(DegreeError, ValueError):
    """Invalid polynomial order or quadrature order.

    Raised when an order is not an integer or is below the minimum the
    operation accepts (n >= 1 for quadrature rules, n >= 0 for Hermite
    coefficients and evaluation).
    """

    pass


class DegenerateLeadingCoefficientError(DegreeError):
    """Leading coefficient is zero.

    Raised by root finding, where the companion matrix is normalized by the
    leading coefficient.
    """

    pass


class ComplexRootWarning(UserWarning):
    """Warning for roots with a non-negligible imaginary part.

    Emitted when real-part-only root finding discards an imaginary part
    larger than the requested tolerance.
    """

    pass
