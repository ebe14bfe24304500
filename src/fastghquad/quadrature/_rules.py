"""Gauss-Hermite quadrature rule class."""

import math
from typing import Callable, Optional, Tuple, Union

import torch
from torch import Tensor

from fastghquad.polynomial import check_order
from fastghquad.quadrature._gauss_hermite_data import gauss_hermite_data


def _location_scale_tensors(
    loc: Union[float, Tensor],
    scale: Union[float, Tensor],
    dtype: Optional[torch.dtype],
    device: Optional[torch.device],
) -> Tuple[Tensor, Tensor]:
    # Infer dtype and device
    if isinstance(loc, Tensor):
        dtype = dtype or loc.dtype
        device = device or loc.device
    elif isinstance(scale, Tensor):
        dtype = dtype or scale.dtype
        device = device or scale.device
    else:
        dtype = dtype or torch.float64
        device = device or torch.device("cpu")

    if not isinstance(loc, Tensor):
        loc = torch.tensor(loc, dtype=dtype, device=device)
    if not isinstance(scale, Tensor):
        scale = torch.tensor(scale, dtype=dtype, device=device)

    if not (scale > 0).all():
        raise ValueError("scale must be strictly positive")

    return loc.to(dtype=dtype, device=device), scale.to(
        dtype=dtype, device=device
    )


class GaussHermite:
    r"""
    Gauss-Hermite quadrature rule.

    Exact for p(x) * exp(-x^2) with p a polynomial of degree <= 2n-1.

    Parameters
    ----------
    n : int
        Number of quadrature points.

    Examples
    --------
    >>> rule = GaussHermite(20)
    >>> rule.integrate(lambda x: x**2)  # sqrt(pi) / 2
    >>> # Normalizing constant of exp(-(x - 1)^2 / 8), i.e. sqrt(8 * pi)
    >>> rule.integrate_adaptive(lambda x: torch.exp(-((x - 1) ** 2) / 8), 1.0, 2.0)

    Attributes
    ----------
    n : int
        Number of points.

    Notes
    -----
    Adaptive Gauss-Hermite quadrature integrates g over the real line by
    centering the rule at the mode ``mu`` of g and scaling it by ``sigma``
    (typically the square root of the inverse negative Hessian of log g at
    the mode):

    .. math::

        \int g(x) dx \approx \sqrt{2} \sigma \sum_{i=1}^{n}
            w_i e^{z_i^2} g(\mu + \sqrt{2} \sigma z_i)

    This is the standard Laplace-corrected rule for marginal likelihoods.
    """

    def __init__(self, n: int):
        self.n = check_order(n, minimum=1)
        self._cache: dict = {}

    def _get_base_nodes_weights(
        self,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Tuple[Tensor, Tensor]:
        """Get cached base nodes/weights for the weight exp(-x^2)."""
        key = (str(dtype), str(device))
        if key not in self._cache:
            self._cache[key] = gauss_hermite_data(
                self.n, dtype=dtype, device=device
            )
        return self._cache[key]

    def nodes_and_weights(
        self,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tuple[Tensor, Tensor]:
        """
        Return nodes and weights for the weight function exp(-x^2).

        Parameters
        ----------
        dtype : torch.dtype, optional
            Output dtype. Default float64.
        device : torch.device, optional
            Output device. Default CPU.

        Returns
        -------
        nodes : Tensor
            Shape (n,).
        weights : Tensor
            Shape (n,).
        """
        dtype = dtype or torch.float64
        device = device or torch.device("cpu")
        return self._get_base_nodes_weights(dtype, device)

    def adaptive_nodes_and_weights(
        self,
        mu: Union[float, Tensor],
        sigma: Union[float, Tensor],
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tuple[Tensor, Tensor]:
        """
        Return nodes and weights for unweighted integration over the real line.

        If mu or sigma are tensors, returns batched nodes/weights.

        Parameters
        ----------
        mu : float or Tensor
            Center of the rule (mode of the integrand). Can be batched.
        sigma : float or Tensor
            Scale of the rule. Must be > 0. Can be batched.
        dtype : torch.dtype, optional
            Output dtype. Inferred from mu/sigma if not specified.
        device : torch.device, optional
            Output device. Inferred from mu/sigma if not specified.

        Returns
        -------
        nodes : Tensor
            Shape (*batch, n) if mu/sigma are tensors, else (n,).
        weights : Tensor
            Shape (*batch, n) if mu/sigma are tensors, else (n,).

        Raises
        ------
        ValueError
            If any sigma <= 0.
        """
        mu, sigma = _location_scale_tensors(mu, sigma, dtype, device)

        base_nodes, base_weights = self._get_base_nodes_weights(
            mu.dtype, mu.device
        )

        # w_i * exp(z_i^2), combined in log space
        log_weights = torch.log(base_weights) + base_nodes**2

        if mu.dim() > 0 or sigma.dim() > 0:
            mu = mu.unsqueeze(-1)  # (*batch, 1)
            sigma = sigma.unsqueeze(-1)  # (*batch, 1)

        nodes = mu + math.sqrt(2.0) * sigma * base_nodes
        weights = math.sqrt(2.0) * sigma * torch.exp(log_weights)

        return nodes, weights

    def integrate(self, f: Callable[[Tensor], Tensor]) -> Tensor:
        """
        Approximate the integral of f(x) * exp(-x^2) over the real line.

        Parameters
        ----------
        f : callable
            Integrand without the weight. Takes tensor of shape (n,).

        Returns
        -------
        Tensor
            Scalar integral value.
        """
        nodes, weights = self.nodes_and_weights()
        values = f(nodes)
        return (values * weights).sum(dim=-1)

    def integrate_adaptive(
        self,
        g: Callable[[Tensor], Tensor],
        mu: Union[float, Tensor],
        sigma: Union[float, Tensor],
    ) -> Tensor:
        """
        Approximate the integral of g(x) over the real line.

        Parameters
        ----------
        g : callable
            Integrand. Takes tensor of shape (*batch, n), returns same.
        mu : float or Tensor
            Mode of g. Can be batched.
        sigma : float or Tensor
            Scale of g around its mode. Must be > 0. Can be batched.

        Returns
        -------
        Tensor
            Integral value(s). Shape matches broadcast(mu, sigma) or scalar.
        """
        nodes, weights = self.adaptive_nodes_and_weights(mu, sigma)
        values = g(nodes)
        return (values * weights).sum(dim=-1)

    def expectation(
        self,
        f: Callable[[Tensor], Tensor],
        mean: Union[float, Tensor] = 0.0,
        std: Union[float, Tensor] = 1.0,
    ) -> Tensor:
        """
        Approximate E[f(Y)] for Y ~ N(mean, std^2).

        Parameters
        ----------
        f : callable
            Function of the random variable. Takes tensor of shape
            (*batch, n), returns same.
        mean : float or Tensor
            Mean of Y. Can be batched.
        std : float or Tensor
            Standard deviation of Y. Must be > 0. Can be batched.

        Returns
        -------
        Tensor
            Expectation value(s).

        Notes
        -----
        Uses the change of variables y = sqrt(2) * std * x + mean, under
        which the weights are normalized by sqrt(pi).
        """
        mean, std = _location_scale_tensors(mean, std, None, None)
        base_nodes, base_weights = self._get_base_nodes_weights(
            mean.dtype, mean.device
        )

        if mean.dim() > 0 or std.dim() > 0:
            mean = mean.unsqueeze(-1)
            std = std.unsqueeze(-1)

        values = f(mean + math.sqrt(2.0) * std * base_nodes)
        return (values * base_weights).sum(dim=-1) / math.sqrt(math.pi)
