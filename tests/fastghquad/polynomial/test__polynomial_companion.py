import pytest
import torch

from fastghquad.linear_algebra import DimensionMismatchError
from fastghquad.polynomial import (
    DegenerateLeadingCoefficientError,
    DegreeError,
    polynomial_companion,
)


class TestPolynomialCompanion:
    def test_quadratic(self):
        # (x - 1)(x - 2) = x^2 - 3x + 2
        c = torch.tensor([2.0, -3.0, 1.0], dtype=torch.float64)

        expected = torch.tensor(
            [[0.0, -2.0], [1.0, 3.0]], dtype=torch.float64
        )
        torch.testing.assert_close(polynomial_companion(c), expected)

    def test_structure(self):
        c = torch.tensor([4.0, 3.0, 2.0, 1.0, 2.0], dtype=torch.float64)

        m = polynomial_companion(c)

        assert m.shape == (4, 4)
        # Sub-diagonal of ones
        torch.testing.assert_close(
            torch.diagonal(m, offset=-1), torch.ones(3, dtype=torch.float64)
        )
        # Last column is -c[i] / c[n]
        torch.testing.assert_close(m[:, -1], -c[:-1] / c[-1])
        # Everything else is zero
        mask = torch.ones(4, 4, dtype=torch.bool)
        mask[:, -1] = False
        mask[torch.arange(1, 4), torch.arange(3)] = False
        assert torch.all(m[mask] == 0)

    def test_characteristic_polynomial(self):
        """det(xI - C) equals the monic polynomial."""
        c = torch.tensor([-6.0, 11.0, -6.0, 1.0], dtype=torch.float64)
        m = polynomial_companion(c)

        for x in [0.0, 0.5, 4.0]:
            det = torch.linalg.det(x * torch.eye(3, dtype=torch.float64) - m)
            value = c[0] + c[1] * x + c[2] * x**2 + c[3] * x**3
            torch.testing.assert_close(det, value)

    def test_linear(self):
        c = torch.tensor([-4.0, 2.0], dtype=torch.float64)

        torch.testing.assert_close(
            polynomial_companion(c),
            torch.tensor([[2.0]], dtype=torch.float64),
        )

    def test_integer_coefficients(self):
        m = polynomial_companion(torch.tensor([2, -3, 1]))
        assert m.dtype == torch.float64

    def test_zero_leading_coefficient_raises(self):
        c = torch.tensor([1.0, 2.0, 0.0], dtype=torch.float64)

        with pytest.raises(DegenerateLeadingCoefficientError):
            polynomial_companion(c)

    def test_constant_raises(self):
        with pytest.raises(DegreeError, match="constant"):
            polynomial_companion(torch.tensor([5.0]))

    def test_two_dimensional_raises(self):
        with pytest.raises(DimensionMismatchError):
            polynomial_companion(torch.ones(2, 3))

    def test_complex_coefficients_raise(self):
        c = torch.tensor([1.0 + 2.0j, 0.0, 1.0], dtype=torch.complex128)

        with pytest.raises(TypeError, match="real"):
            polynomial_companion(c)
