"""General (non-symmetric) eigenvalues."""

import torch
from torch import Tensor

from fastghquad.linear_algebra._exceptions import (
    DimensionMismatchError,
    EigenConvergenceError,
)


def eigenvalues(matrix: Tensor) -> Tensor:
    """
    Eigenvalues of a general real square matrix, without eigenvectors.

    Parameters
    ----------
    matrix : Tensor
        Square matrix, shape (n, n).

    Returns
    -------
    Tensor
        Complex eigenvalues, shape (n,). complex128 for float64 input,
        complex64 for float32 input. Order is whatever LAPACK returns.

    Raises
    ------
    DimensionMismatchError
        If matrix is not a non-empty square 2-D tensor.
    EigenConvergenceError
        If the QR iteration fails to converge.

    Notes
    -----
    Delegates to ``torch.linalg.eigvals`` (LAPACK ``geev`` with
    ``jobvl = jobvr = 'N'``). The workspace size query and allocation are
    handled inside torch.
    """
    if matrix.dim() != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionMismatchError(
            f"matrix must be square, got shape {tuple(matrix.shape)}"
        )
    if matrix.shape[0] < 1:
        raise DimensionMismatchError("matrix must be non-empty")

    if not (matrix.is_floating_point() or matrix.is_complex()):
        matrix = matrix.to(torch.float64)

    try:
        values = torch.linalg.eigvals(matrix)
    except torch.linalg.LinAlgError as err:
        raise EigenConvergenceError(
            f"general eigensolver failed to converge (n={matrix.shape[0]})"
        ) from err

    if not torch.isfinite(values).all():
        raise EigenConvergenceError(
            f"general eigensolver produced non-finite values "
            f"(n={matrix.shape[0]})"
        )

    return values
