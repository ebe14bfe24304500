import hypothesis
import numpy as np
import pytest
import torch

from fastghquad.linear_algebra import DimensionMismatchError
from fastghquad.polynomial import (
    InvalidOrderError,
    eval_hermite_poly,
    hermite_poly,
    hermite_poly_coef,
)
from fastghquad.testing import hermite_arguments


class TestHermitePoly:
    def test_order_zero(self):
        x = torch.tensor([-1.0, 0.0, 3.0], dtype=torch.float64)
        torch.testing.assert_close(hermite_poly(x, 0), torch.ones_like(x))

    def test_order_one(self):
        x = torch.tensor([-1.0, 0.0, 3.0], dtype=torch.float64)
        torch.testing.assert_close(hermite_poly(x, 1), 2 * x)

    def test_order_three(self):
        # H_3(x) = 8x^3 - 12x
        x = torch.linspace(-2, 2, 9, dtype=torch.float64)
        torch.testing.assert_close(hermite_poly(x, 3), 8 * x**3 - 12 * x)

    def test_scalar_input(self):
        result = hermite_poly(0.5, 2)

        assert result.dim() == 0
        assert result.item() == pytest.approx(4 * 0.25 - 2)

    def test_values_at_zero(self):
        """H_{2k}(0) = (-1)^k (2k)! / k!"""
        assert hermite_poly(0.0, 4).item() == 12.0
        assert hermite_poly(0.0, 6).item() == -120.0
        assert hermite_poly(0.0, 7).item() == 0.0

    def test_matches_numpy_hermval(self):
        x = np.linspace(-3, 3, 13)
        basis = np.zeros(9)
        basis[8] = 1.0

        result = hermite_poly(torch.from_numpy(x), 8).numpy()

        np.testing.assert_allclose(
            result, np.polynomial.hermite.hermval(x, basis), rtol=1e-10, atol=1e-8
        )

    @hypothesis.settings(deadline=None)
    @hypothesis.given(args=hermite_arguments())
    def test_matches_coefficients(self, args):
        x, n = args
        c = hermite_poly_coef(n)
        powers = torch.tensor(x, dtype=torch.float64) ** torch.arange(
            n + 1, dtype=torch.float64
        )

        expected = (c * powers).sum()
        torch.testing.assert_close(
            hermite_poly(x, n), expected, rtol=1e-9, atol=1e-4
        )

    def test_negative_order_raises(self):
        with pytest.raises(InvalidOrderError):
            hermite_poly(1.0, -1)


class TestEvalHermitePoly:
    def test_paired(self):
        # H_0(0) = 1, H_1(1) = 2
        torch.testing.assert_close(
            eval_hermite_poly([0.0, 1.0], [0, 1]),
            torch.tensor([1.0, 2.0], dtype=torch.float64),
        )

    def test_paired_mixed_orders(self):
        x = torch.tensor([0.5, -1.0, 2.0, 0.0], dtype=torch.float64)
        n = torch.tensor([3, 0, 2, 4])

        expected = torch.stack(
            [hermite_poly(x[i], int(n[i])) for i in range(4)]
        )
        torch.testing.assert_close(eval_hermite_poly(x, n), expected)

    def test_scalar_order_repeated(self):
        x = torch.tensor([-1.0, 0.0, 1.0, 2.0], dtype=torch.float64)

        torch.testing.assert_close(
            eval_hermite_poly(x, [2]), hermite_poly(x, 2)
        )

    def test_scalar_point_repeated(self):
        result = eval_hermite_poly([1.0], [0, 1, 2, 3])

        torch.testing.assert_close(
            result, torch.tensor([1.0, 2.0, 2.0, -4.0], dtype=torch.float64)
        )

    def test_shorter_argument_uses_first_element(self):
        result = eval_hermite_poly([1.0, 2.0, 3.0], [2, 5])

        torch.testing.assert_close(
            result, hermite_poly(torch.tensor([1.0, 2.0, 3.0]).double(), 2)
        )

    def test_integral_float_orders_accepted(self):
        torch.testing.assert_close(
            eval_hermite_poly([1.0, 1.0], torch.tensor([1.0, 2.0])),
            torch.tensor([2.0, 2.0], dtype=torch.float64),
        )

    def test_empty_raises(self):
        with pytest.raises(DimensionMismatchError):
            eval_hermite_poly([], [1])

    def test_negative_order_raises(self):
        with pytest.raises(InvalidOrderError):
            eval_hermite_poly([1.0, 2.0], [1, -2])

    def test_fractional_order_raises(self):
        with pytest.raises(InvalidOrderError):
            eval_hermite_poly([1.0], torch.tensor([1.5]))
