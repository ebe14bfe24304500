"""Exceptions for Gauss-Hermite quadrature."""

from fastghquad.polynomial import InvalidOrderError


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., a numerically unstable path)."""

    pass


class QuadratureError(Exception):
    """Error when a quadrature rule cannot be built or applied."""

    pass


__all__ = ["InvalidOrderError", "QuadratureError", "QuadratureWarning"]
