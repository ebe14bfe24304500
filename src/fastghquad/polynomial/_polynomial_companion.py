import torch
from torch import Tensor

from fastghquad.linear_algebra import DimensionMismatchError
from fastghquad.polynomial._exceptions import (
    DegenerateLeadingCoefficientError,
    DegreeError,
)


def polynomial_companion(coefficients: Tensor) -> Tensor:
    """Companion matrix of a power-series polynomial.

    Parameters
    ----------
    coefficients : Tensor
        Coefficients in ascending order, shape (n + 1,).
        coefficients[i] multiplies x^i.

    Returns
    -------
    Tensor
        Companion matrix, shape (n, n). Its eigenvalues are the roots of
        the polynomial.

    Raises
    ------
    DimensionMismatchError
        If coefficients is not 1-D.
    DegreeError
        If the polynomial is constant (fewer than two coefficients).
    DegenerateLeadingCoefficientError
        If coefficients[n] == 0.
    TypeError
        If coefficients are complex.

    Notes
    -----
    For p(x) = a_0 + a_1*x + ... + a_{n-1}*x^{n-1} + x^n (after dividing by
    the leading coefficient) the companion matrix is:

        [[0, 0, ..., 0, -a_0    ],
         [1, 0, ..., 0, -a_1    ],
         [0, 1, ..., 0, -a_2    ],
         [.                     ],
         [0, 0, ..., 1, -a_{n-1}]]

    Examples
    --------
    >>> polynomial_companion(torch.tensor([2.0, -3.0, 1.0]))  # (x-1)(x-2)
    tensor([[ 0., -2.],
            [ 1.,  3.]])
    """
    if coefficients.dim() != 1:
        raise DimensionMismatchError(
            f"coefficients must be 1-D, got shape {tuple(coefficients.shape)}"
        )

    degree = coefficients.shape[0] - 1
    if degree < 1:
        raise DegreeError(
            f"Cannot find roots of constant polynomial (degree 0), got "
            f"{coefficients.shape[0]} coefficients"
        )

    if coefficients.is_complex():
        raise TypeError(
            f"coefficients must be real, got dtype {coefficients.dtype}"
        )
    if not coefficients.is_floating_point():
        coefficients = coefficients.to(torch.float64)

    leading = coefficients[-1]
    if leading == 0:
        raise DegenerateLeadingCoefficientError(
            "Leading coefficient must be non-zero for root finding"
        )

    companion = torch.zeros(
        degree,
        degree,
        dtype=coefficients.dtype,
        device=coefficients.device,
    )

    # Sub-diagonal of ones
    if degree > 1:
        indices = torch.arange(degree - 1, device=coefficients.device)
        companion[indices + 1, indices] = 1.0

    # Last column holds the negated monic coefficients
    companion[:, -1] = -coefficients[:-1] / leading

    return companion
