"""Polynomial roots and physicists' Hermite polynomial utilities.

Root finding:
    polynomial_companion, find_poly_roots

Hermite polynomials (H_n convention, weight exp(-x^2)):
    hermite_poly_coef, hermite_poly, eval_hermite_poly

Validation:
    check_order

Exceptions:
    PolynomialError, DegreeError, InvalidOrderError,
    DegenerateLeadingCoefficientError, ComplexRootWarning
"""

from fastghquad.polynomial._check_order import check_order
from fastghquad.polynomial._eval_hermite_poly import (
    eval_hermite_poly,
    hermite_poly,
)
from fastghquad.polynomial._exceptions import (
    ComplexRootWarning,
    DegenerateLeadingCoefficientError,
    DegreeError,
    InvalidOrderError,
    PolynomialError,
)
from fastghquad.polynomial._find_poly_roots import find_poly_roots
from fastghquad.polynomial._hermite_poly_coef import (
    HERMITE_COEFFICIENT_EXACT_LIMIT,
    hermite_poly_coef,
)
from fastghquad.polynomial._polynomial_companion import polynomial_companion

__all__ = [
    # Root finding
    "polynomial_companion",
    "find_poly_roots",
    # Hermite
    "HERMITE_COEFFICIENT_EXACT_LIMIT",
    "hermite_poly_coef",
    "hermite_poly",
    "eval_hermite_poly",
    # Validation
    "check_order",
    # Exceptions
    "PolynomialError",
    "DegreeError",
    "InvalidOrderError",
    "DegenerateLeadingCoefficientError",
    "ComplexRootWarning",
]
