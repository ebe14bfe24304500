from typing import Sequence, Union

import torch
from torch import Tensor

from fastghquad.linear_algebra import DimensionMismatchError
from fastghquad.polynomial._check_order import check_order
from fastghquad.polynomial._exceptions import InvalidOrderError


def _as_real_tensor(x) -> Tensor:
    if not isinstance(x, Tensor):
        x = torch.as_tensor(x, dtype=torch.float64)
    if not x.is_floating_point():
        x = x.to(torch.float64)
    return x


def hermite_poly(x: Union[float, Tensor], n: int) -> Tensor:
    """Evaluate the physicists' Hermite polynomial H_n at x.

    Parameters
    ----------
    x : float or Tensor
        Evaluation point(s). Evaluated elementwise.
    n : int
        Polynomial order, n >= 0.

    Returns
    -------
    Tensor
        H_n(x), same shape as x.

    Raises
    ------
    InvalidOrderError
        If n is not an integer or n < 0.

    Notes
    -----
    Uses the three-term recurrence directly, O(n) per call:

        H_0(x) = 1
        H_1(x) = 2x
        H_{i+1}(x) = 2x * H_i(x) - 2i * H_{i-1}(x)
    """
    n = check_order(n, minimum=0)
    x = _as_real_tensor(x)

    if n == 0:
        return torch.ones_like(x)
    if n == 1:
        return 2 * x

    h_previous = torch.ones_like(x)
    h = 2 * x
    for i in range(1, n):
        h_previous, h = h, 2 * x * h - 2 * i * h_previous

    return h


def eval_hermite_poly(
    x: Union[Tensor, Sequence[float]],
    n: Union[Tensor, Sequence[int]],
) -> Tensor:
    """Evaluate H_{n[i]}(x[i]) for paired points and orders.

    Parameters
    ----------
    x : Tensor or sequence of float
        Evaluation points, flattened to 1-D.
    n : Tensor or sequence of int
        Orders, flattened to 1-D. Each must be a non-negative integer.

    Returns
    -------
    Tensor
        Values, shape (max(len(x), len(n)),).

    Raises
    ------
    DimensionMismatchError
        If x or n is empty.
    InvalidOrderError
        If any order is negative or not integral.

    Notes
    -----
    When the lengths differ, only the first element of the shorter argument
    is used and it is repeated against every element of the longer one.

    Examples
    --------
    >>> eval_hermite_poly([0.0, 1.0], [0, 1])  # H_0(0), H_1(1)
    tensor([1., 2.], dtype=torch.float64)
    """
    x = _as_real_tensor(x).reshape(-1)
    n = torch.as_tensor(n).reshape(-1)

    if x.numel() == 0 or n.numel() == 0:
        raise DimensionMismatchError(
            f"x and n must be non-empty, got lengths {x.numel()} and "
            f"{n.numel()}"
        )

    if n.is_floating_point():
        if not torch.equal(n, torch.round(n)):
            raise InvalidOrderError("orders must be integers")
    n = n.to(dtype=torch.int64, device=x.device)
    if (n < 0).any():
        raise InvalidOrderError(
            f"orders must be at least 0, got {int(n.min())}"
        )

    if x.numel() > n.numel():
        n = n[:1].expand(x.numel())
    elif n.numel() > x.numel():
        x = x[:1].expand(n.numel())

    # Single sweep up to the largest order, keeping each element's H_{n[i]}
    result = torch.ones_like(x)
    h_previous = torch.ones_like(x)
    h = 2 * x
    result = torch.where(n == 1, h, result)
    for i in range(1, int(n.max())):
        h_previous, h = h, 2 * x * h - 2 * i * h_previous
        result = torch.where(n == i + 1, h, result)

    return result
