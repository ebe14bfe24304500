"""Gauss-Hermite nodes and weights by direct root finding."""

import math
import warnings
from typing import Optional

import torch

from fastghquad.polynomial import (
    check_order,
    find_poly_roots,
    hermite_poly,
    hermite_poly_coef,
)
from fastghquad.quadrature._exceptions import QuadratureWarning
from fastghquad.quadrature._result_types import QuadratureRule

# Orders above this lose accuracy to root finding and coefficient growth
DIRECT_STABILITY_LIMIT = 20


def gauss_hermite_data_direct(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> QuadratureRule:
    r"""
    Gauss-Hermite nodes and weights from the roots of H_n.

    Parameters
    ----------
    n : int
        Number of quadrature points.
    dtype : torch.dtype
        Data type for output tensors. Computation is always float64.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    QuadratureRule
        nodes : Tensor of shape (n,), sorted ascending
        weights : Tensor of shape (n,)

    Raises
    ------
    InvalidOrderError
        If n is not an integer or n < 1.
    EigenConvergenceError
        If the companion eigenvalue iteration fails to converge.

    Warns
    -----
    QuadratureWarning
        If n > ``DIRECT_STABILITY_LIMIT`` (20).

    Notes
    -----
    The nodes are the roots of H_n, found from the companion matrix of its
    power-series coefficients. The weights use the closed form

    .. math::

        w_i = \frac{2^{n-1} n! \sqrt{\pi}}{n^2 H_{n-1}(x_i)^2}

    evaluated in log space.

    Error compounds through the coefficient recurrence and the root finding,
    so this is only usable up to n of about 20. Use ``gauss_hermite_data``
    for anything larger.
    """
    n = check_order(n, minimum=1)

    if n > DIRECT_STABILITY_LIMIT:
        warnings.warn(
            f"gauss_hermite_data_direct is numerically unstable for "
            f"n > {DIRECT_STABILITY_LIMIT} (got n={n}); use "
            f"gauss_hermite_data instead",
            QuadratureWarning,
            stacklevel=2,
        )

    coefficients = hermite_poly_coef(n, dtype=torch.float64, device=device)
    nodes = find_poly_roots(coefficients)

    log_weights = (
        (n - 1) * math.log(2.0)
        + math.lgamma(n + 1)
        + 0.5 * math.log(math.pi)
        - 2 * math.log(n)
        - 2 * torch.log(torch.abs(hermite_poly(nodes, n - 1)))
    )
    weights = torch.exp(log_weights)

    sorted_idx = torch.argsort(nodes)
    nodes = nodes[sorted_idx]
    weights = weights[sorted_idx]

    return QuadratureRule(nodes=nodes.to(dtype), weights=weights.to(dtype))
