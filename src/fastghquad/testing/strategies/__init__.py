"""Hypothesis strategies for quadrature and Hermite polynomial testing."""

from ._hermite_arguments import hermite_arguments
from ._quadrature_orders import quadrature_orders
from ._tensor_options import devices, floating_dtypes

__all__ = [
    # Numeric strategies
    "quadrature_orders",
    "hermite_arguments",
    # Tensor option strategies
    "floating_dtypes",
    "devices",
]
