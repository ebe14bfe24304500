"""
Gauss-Hermite quadrature module.

Node/weight computation:
    gauss_hermite_data (Golub-Welsch, stable),
    gauss_hermite_data_direct (root finding, n <= 20)

Building blocks:
    build_hermite_jacobi, golub_welsch

Function-based integration (evaluates callable):
    gauss_hermite_quad, adaptive_gauss_hermite_quad, normal_expectation

Quadrature rule classes:
    GaussHermite

Result types:
    QuadratureRule, SymmetricTridiagonal

Exceptions:
    QuadratureWarning, QuadratureError, InvalidOrderError
"""

from fastghquad.quadrature._exceptions import (
    InvalidOrderError,
    QuadratureError,
    QuadratureWarning,
)
from fastghquad.quadrature._gauss_hermite_data import gauss_hermite_data
from fastghquad.quadrature._gauss_hermite_data_direct import (
    DIRECT_STABILITY_LIMIT,
    gauss_hermite_data_direct,
)
from fastghquad.quadrature._gauss_hermite_quad import (
    adaptive_gauss_hermite_quad,
    gauss_hermite_quad,
    normal_expectation,
)
from fastghquad.quadrature._golub_welsch import golub_welsch
from fastghquad.quadrature._hermite_jacobi import build_hermite_jacobi
from fastghquad.quadrature._result_types import (
    QuadratureRule,
    SymmetricTridiagonal,
)
from fastghquad.quadrature._rules import GaussHermite

__all__ = [
    # Node/weight computation
    "gauss_hermite_data",
    "gauss_hermite_data_direct",
    "DIRECT_STABILITY_LIMIT",
    # Building blocks
    "build_hermite_jacobi",
    "golub_welsch",
    # Function-based
    "gauss_hermite_quad",
    "adaptive_gauss_hermite_quad",
    "normal_expectation",
    # Rule classes
    "GaussHermite",
    # Result types
    "QuadratureRule",
    "SymmetricTridiagonal",
    # Exceptions
    "QuadratureWarning",
    "QuadratureError",
    "InvalidOrderError",
]
