"""fastghquad: Gauss-Hermite quadrature rules for PyTorch."""

from . import linear_algebra, polynomial, quadrature
from .linear_algebra import DimensionMismatchError, EigenConvergenceError
from .polynomial import (
    DegenerateLeadingCoefficientError,
    InvalidOrderError,
    eval_hermite_poly,
    find_poly_roots,
    hermite_poly_coef,
)
from .quadrature import (
    GaussHermite,
    QuadratureRule,
    adaptive_gauss_hermite_quad,
    gauss_hermite_data,
    gauss_hermite_data_direct,
    gauss_hermite_quad,
    normal_expectation,
)

__all__ = [
    "linear_algebra",
    "polynomial",
    "quadrature",
    # Quadrature
    "GaussHermite",
    "QuadratureRule",
    "adaptive_gauss_hermite_quad",
    "gauss_hermite_data",
    "gauss_hermite_data_direct",
    "gauss_hermite_quad",
    "normal_expectation",
    # Polynomials
    "eval_hermite_poly",
    "find_poly_roots",
    "hermite_poly_coef",
    # Errors
    "DegenerateLeadingCoefficientError",
    "DimensionMismatchError",
    "EigenConvergenceError",
    "InvalidOrderError",
]

__version__ = "0.1.0"
