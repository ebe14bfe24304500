from typing import NamedTuple

from torch import Tensor


class SymmetricTridiagonalEigenvalueResult(NamedTuple):
    """Result of symmetric tridiagonal eigenvalue decomposition T = VΛV^T."""

    eigenvalues: Tensor  # (n,) - ascending
    eigenvectors: Tensor  # (n, n) - column j pairs with eigenvalues[j]
