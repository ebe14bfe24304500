"""Function-based Gauss-Hermite integration."""

from typing import Callable, Optional, Union

import torch
from torch import Tensor

from fastghquad.quadrature._rules import GaussHermite


def gauss_hermite_quad(
    f: Callable[[Tensor], Tensor],
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Integrate f(x) * exp(-x^2) over the real line with an n-point rule.

    .. math::

        \int_{-\infty}^{\infty} f(x) e^{-x^2} dx \approx \sum_{i=1}^{n} w_i f(x_i)

    Parameters
    ----------
    f : callable
        Integrand without the weight function.
    n : int
        Number of quadrature points.
    dtype : torch.dtype
        Data type of the nodes passed to f.
    device : torch.device, optional
        Device of the nodes passed to f.

    Returns
    -------
    Tensor
        Integral approximation.

    Examples
    --------
    >>> gauss_hermite_quad(lambda x: x**2, 10)  # sqrt(pi) / 2
    """
    nodes, weights = GaussHermite(n).nodes_and_weights(
        dtype=dtype, device=device
    )
    return (f(nodes) * weights).sum(dim=-1)


def adaptive_gauss_hermite_quad(
    g: Callable[[Tensor], Tensor],
    mu: Union[float, Tensor],
    sigma: Union[float, Tensor],
    n: int,
) -> Tensor:
    """
    Integrate g over the real line with a rule centered at mu, scaled by sigma.

    Parameters
    ----------
    g : callable
        Integrand. Takes tensor of shape (*batch, n), returns same.
    mu : float or Tensor
        Mode of g. Can be batched.
    sigma : float or Tensor
        Scale of g at its mode, e.g. ``(-d^2/dx^2 log g(mu)) ** -0.5``.
        Must be > 0. Can be batched.
    n : int
        Number of quadrature points.

    Returns
    -------
    Tensor
        Integral value(s). Shape matches broadcast(mu, sigma) or scalar.

    Raises
    ------
    InvalidOrderError
        If n < 1.
    ValueError
        If any sigma <= 0.

    Notes
    -----
    With n = 1 this reduces to the Laplace approximation
    sqrt(2 pi) * sigma * g(mu).

    Examples
    --------
    >>> # Marginal likelihood of y = 1 under y | t ~ N(t, 1), t ~ N(0, 1)
    >>> def joint(t):
    ...     return torch.exp(-0.5 * (1 - t) ** 2 - 0.5 * t**2) / (2 * torch.pi)
    >>> adaptive_gauss_hermite_quad(joint, 0.5, 0.5**0.5, 10)
    """
    return GaussHermite(n).integrate_adaptive(g, mu, sigma)


def normal_expectation(
    f: Callable[[Tensor], Tensor],
    mean: Union[float, Tensor],
    std: Union[float, Tensor],
    n: int,
) -> Tensor:
    """
    Expectation E[f(Y)] for Y ~ N(mean, std^2) with an n-point rule.

    Parameters
    ----------
    f : callable
        Function of the random variable.
    mean : float or Tensor
        Mean of Y. Can be batched.
    std : float or Tensor
        Standard deviation of Y. Must be > 0. Can be batched.
    n : int
        Number of quadrature points.

    Returns
    -------
    Tensor
        Expectation value(s).

    Examples
    --------
    >>> normal_expectation(lambda y: y**2, 1.0, 2.0, 10)  # 1 + 4
    """
    return GaussHermite(n).expectation(f, mean, std)
