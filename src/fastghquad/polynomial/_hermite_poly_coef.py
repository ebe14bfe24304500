from typing import Optional

import torch
from torch import Tensor

from fastghquad.polynomial._check_order import check_order

# Largest order whose int64 coefficients are exact. The largest coefficient
# of H_26 (|c_6| ~ 9.9e18) no longer fits in a signed 64-bit integer.
HERMITE_COEFFICIENT_EXACT_LIMIT = 25


def hermite_poly_coef(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Power-series coefficients of the physicists' Hermite polynomial H_n.

    Parameters
    ----------
    n : int
        Polynomial order, n >= 0.
    dtype : torch.dtype
        Data type for the output tensor.
    device : torch.device, optional
        Device for the output tensor.

    Returns
    -------
    Tensor
        Coefficients in ascending order, shape (n + 1,).
        result[i] multiplies x^i.

    Raises
    ------
    InvalidOrderError
        If n is not an integer or n < 0.

    Notes
    -----
    Runs the recurrence

        H_0(x) = 1
        H_1(x) = 2x
        H_{i}(x) = 2x * H_{i-1}(x) - 2(i-1) * H_{i-2}(x)

    on ``torch.int64`` coefficients so that no rounding happens during the
    recursion; conversion to ``dtype`` is the last step.

    The coefficients grow factorially. They are exact for
    n <= ``HERMITE_COEFFICIENT_EXACT_LIMIT`` (25); beyond that the int64
    arithmetic wraps around and the result is meaningless. Use
    ``gauss_hermite_data`` rather than anything built on these coefficients
    for large n.

    Examples
    --------
    >>> hermite_poly_coef(2)  # H_2(x) = 4x^2 - 2
    tensor([-2.,  0.,  4.], dtype=torch.float64)
    """
    n = check_order(n, minimum=0)

    if n == 0:
        return torch.tensor([1.0], dtype=dtype, device=device)
    if n == 1:
        return torch.tensor([0.0, 2.0], dtype=dtype, device=device)

    # Rows hold H_{i-2} and H_{i-1}, padded to n + 1 coefficients
    previous = torch.zeros(n + 1, dtype=torch.int64)
    previous[0] = 1
    current = torch.zeros(n + 1, dtype=torch.int64)
    current[1] = 2

    for i in range(2, n + 1):
        following = -2 * (i - 1) * previous
        following[1:] += 2 * current[:-1]
        previous, current = current, following

    return current.to(dtype=dtype, device=device)
