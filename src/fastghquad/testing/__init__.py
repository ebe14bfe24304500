"""Testing helpers for fastghquad.

Example usage:

    import hypothesis
    from fastghquad.testing import quadrature_orders

    @hypothesis.given(n=quadrature_orders())
    def test_weights_positive(n):
        ...
"""

from .strategies import (
    devices,
    floating_dtypes,
    hermite_arguments,
    quadrature_orders,
)

__all__ = [
    # Strategies - numeric
    "quadrature_orders",
    "hermite_arguments",
    # Strategies - tensor options
    "floating_dtypes",
    "devices",
]
