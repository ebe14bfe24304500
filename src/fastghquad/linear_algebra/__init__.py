"""Eigenvalue routines used to build quadrature rules and find roots.

Functions
---------
symmetric_tridiagonal_eigenvalue
    Eigenvalues and unit-norm eigenvectors of a real symmetric tridiagonal
    matrix given by its diagonal and sub-diagonal.

eigenvalues
    Eigenvalues of a general real square matrix (no eigenvectors).

Result Types
------------
SymmetricTridiagonalEigenvalueResult
    Named tuple with eigenvalues, eigenvectors.

Exceptions
----------
LinearAlgebraError, EigenConvergenceError, DimensionMismatchError
"""

from fastghquad.linear_algebra._eigenvalues import eigenvalues
from fastghquad.linear_algebra._exceptions import (
    DimensionMismatchError,
    EigenConvergenceError,
    LinearAlgebraError,
)
from fastghquad.linear_algebra._result_types import (
    SymmetricTridiagonalEigenvalueResult,
)
from fastghquad.linear_algebra._symmetric_tridiagonal_eigenvalue import (
    symmetric_tridiagonal_eigenvalue,
)

__all__ = [
    "SymmetricTridiagonalEigenvalueResult",
    "eigenvalues",
    "symmetric_tridiagonal_eigenvalue",
    # Exceptions
    "DimensionMismatchError",
    "EigenConvergenceError",
    "LinearAlgebraError",
]
