"""Symmetric tridiagonal eigenvalue decomposition."""

import numpy as np
import torch
from scipy import linalg
from torch import Tensor

from fastghquad.linear_algebra._exceptions import (
    DimensionMismatchError,
    EigenConvergenceError,
)
from fastghquad.linear_algebra._result_types import (
    SymmetricTridiagonalEigenvalueResult,
)


def symmetric_tridiagonal_eigenvalue(
    diagonal: Tensor,
    off_diagonal: Tensor,
) -> SymmetricTridiagonalEigenvalueResult:
    r"""
    Eigenvalues and eigenvectors of a real symmetric tridiagonal matrix.

    The matrix is given implicitly by its diagonal and its sub-diagonal
    (equal to the super-diagonal by symmetry):

    .. math::

        T = \begin{pmatrix}
            d_0 & e_0 &        &         \\
            e_0 & d_1 & \ddots &         \\
                & \ddots & \ddots & e_{n-2} \\
                &        & e_{n-2} & d_{n-1}
        \end{pmatrix}

    Parameters
    ----------
    diagonal : Tensor
        Diagonal entries, shape (n,), n >= 1.
    off_diagonal : Tensor
        Sub-diagonal entries, shape (n - 1,).

    Returns
    -------
    SymmetricTridiagonalEigenvalueResult
        eigenvalues : Tensor of shape (n,), sorted ascending
        eigenvectors : Tensor of shape (n, n), column j is the unit-norm
        eigenvector for eigenvalues[j]

    Raises
    ------
    DimensionMismatchError
        If diagonal is not a non-empty 1-D tensor or off_diagonal does not
        have exactly n - 1 entries.
    EigenConvergenceError
        If the inputs are not finite or the eigensolver fails to converge.

    Notes
    -----
    The decomposition is delegated to LAPACK ``stev`` (implicit QL/QR with
    Wilkinson shifts) through ``scipy.linalg.eigh_tridiagonal``. Unlike the
    divide-and-conquer ``syevd`` behind ``torch.linalg.eigh``, it resolves
    eigenvector components many orders of magnitude below the largest one,
    which Golub-Welsch weights for large n depend on.

    The computation runs on CPU copies of the inputs; results are returned
    on the device of ``diagonal``. The inputs are not modified and no
    gradient flows through the result.
    """
    if diagonal.dim() != 1 or diagonal.shape[0] < 1:
        raise DimensionMismatchError(
            f"diagonal must be a non-empty 1-D tensor, got shape "
            f"{tuple(diagonal.shape)}"
        )
    n = diagonal.shape[0]
    if off_diagonal.dim() != 1 or off_diagonal.shape[0] != n - 1:
        raise DimensionMismatchError(
            f"off_diagonal must have shape ({n - 1},) for a diagonal of "
            f"length {n}, got {tuple(off_diagonal.shape)}"
        )

    dtype = torch.promote_types(diagonal.dtype, off_diagonal.dtype)
    if dtype not in (torch.float32, torch.float64):
        dtype = torch.float64
    device = diagonal.device

    d = diagonal.detach().to(device="cpu", dtype=dtype).numpy().copy()
    e = off_diagonal.detach().to(device="cpu", dtype=dtype).numpy().copy()

    if not (np.isfinite(d).all() and np.isfinite(e).all()):
        raise EigenConvergenceError(
            f"symmetric tridiagonal eigensolver received non-finite "
            f"entries (n={n})"
        )

    if n == 1:
        return SymmetricTridiagonalEigenvalueResult(
            eigenvalues=torch.from_numpy(d).to(device=device),
            eigenvectors=torch.ones(1, 1, dtype=dtype, device=device),
        )

    try:
        eigenvalues, eigenvectors = linalg.eigh_tridiagonal(
            d, e, lapack_driver="stev", check_finite=False
        )
    except linalg.LinAlgError as err:
        raise EigenConvergenceError(
            f"symmetric tridiagonal eigensolver failed to converge (n={n})"
        ) from err

    if not (
        np.isfinite(eigenvalues).all() and np.isfinite(eigenvectors).all()
    ):
        raise EigenConvergenceError(
            f"symmetric tridiagonal eigensolver produced non-finite values "
            f"(n={n})"
        )

    return SymmetricTridiagonalEigenvalueResult(
        eigenvalues=torch.from_numpy(eigenvalues).to(dtype=dtype, device=device),
        eigenvectors=torch.from_numpy(eigenvectors).to(
            dtype=dtype, device=device
        ),
    )
