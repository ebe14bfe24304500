from typing import Optional

import torch

from fastghquad.polynomial import check_order
from fastghquad.quadrature._result_types import SymmetricTridiagonal


def build_hermite_jacobi(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> SymmetricTridiagonal:
    r"""
    Symmetric tridiagonal matrix similar to the Hermite Jacobi matrix.

    Parameters
    ----------
    n : int
        Matrix size (quadrature order), n >= 1.
    dtype : torch.dtype
        Data type for output tensors.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    SymmetricTridiagonal
        diagonal : Tensor of shape (n,), all zero
        off_diagonal : Tensor of shape (n - 1,), off_diagonal[i] = sqrt((i + 1) / 2)

    Raises
    ------
    InvalidOrderError
        If n is not an integer or n < 1.

    Notes
    -----
    The monic Hermite polynomials p_k(x) = H_k(x) / 2^k satisfy

    .. math::

        p_{k+1}(x) + (B_k - x) p_k(x) + A_k p_{k-1}(x) = 0,
        \qquad B_k = 0, \quad A_k = k / 2.

    The symmetrized Jacobi matrix J has J_{k,k} = B_k and
    J_{k,k+1} = J_{k+1,k} = sqrt(A_{k+1}).
    """
    n = check_order(n, minimum=1)

    diagonal = torch.zeros(n, dtype=dtype, device=device)

    k = torch.arange(1, n, dtype=dtype, device=device)
    off_diagonal = torch.sqrt(k / 2)

    return SymmetricTridiagonal(diagonal=diagonal, off_diagonal=off_diagonal)
