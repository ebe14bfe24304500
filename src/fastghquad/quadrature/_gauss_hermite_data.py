"""Gauss-Hermite nodes and weights via the Golub-Welsch algorithm."""

import math
from typing import Optional

import torch

from fastghquad.polynomial import check_order
from fastghquad.quadrature._golub_welsch import golub_welsch
from fastghquad.quadrature._hermite_jacobi import build_hermite_jacobi
from fastghquad.quadrature._result_types import QuadratureRule


def gauss_hermite_data(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> QuadratureRule:
    r"""
    Compute Gauss-Hermite nodes and weights for the physicists' convention.

    Integrates functions with weight w(x) = exp(-x^2) on (-infinity, infinity):

    .. math::

        \int_{-\infty}^{\infty} f(x) e^{-x^2} dx \approx \sum_{i=1}^{n} w_i f(x_i)

    Uses the Golub-Welsch algorithm.

    Parameters
    ----------
    n : int
        Number of quadrature points.
    dtype : torch.dtype
        Data type for output tensors.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    QuadratureRule
        nodes : Tensor of shape (n,), sorted ascending
        weights : Tensor of shape (n,), strictly positive, summing to sqrt(pi)

    Raises
    ------
    InvalidOrderError
        If n is not an integer or n < 1.
    EigenConvergenceError
        If the eigensolver fails to converge.

    Notes
    -----
    Gauss-Hermite quadrature is exact for polynomials of degree <= 2n-1
    multiplied by the weight function exp(-x^2).

    No polynomial is evaluated and no roots are searched for, so the rule
    stays accurate for n >= 100. Prefer this over
    ``gauss_hermite_data_direct``.

    Examples
    --------
    >>> nodes, weights = gauss_hermite_data(2)
    >>> nodes
    tensor([-0.7071,  0.7071], dtype=torch.float64)
    >>> weights
    tensor([0.8862, 0.8862], dtype=torch.float64)

    References
    ----------
    Golub, G. H., & Welsch, J. H. (1969). Calculation of Gauss quadrature rules.
    """
    n = check_order(n, minimum=1)

    diagonal, off_diagonal = build_hermite_jacobi(n, dtype=dtype, device=device)

    # Total weight: integral of exp(-x^2) over the real line
    mu0 = math.sqrt(math.pi)

    return golub_welsch(diagonal, off_diagonal, mu0)
