import numpy as np
import pytest
import torch

from fastghquad.polynomial import (
    HERMITE_COEFFICIENT_EXACT_LIMIT,
    InvalidOrderError,
    hermite_poly_coef,
)


def _exact_hermite_coefficients(n):
    """Reference recurrence on Python ints (arbitrary precision)."""
    previous = [1] + [0] * n
    current = [0, 2] + [0] * (n - 1)
    if n == 0:
        return previous[:1]
    for i in range(2, n + 1):
        following = [-2 * (i - 1) * p for p in previous]
        for j in range(1, n + 1):
            following[j] += 2 * current[j - 1]
        previous, current = current, following
    return current


class TestHermitePolyCoef:
    def test_order_zero(self):
        torch.testing.assert_close(
            hermite_poly_coef(0), torch.tensor([1.0], dtype=torch.float64)
        )

    def test_order_one(self):
        torch.testing.assert_close(
            hermite_poly_coef(1), torch.tensor([0.0, 2.0], dtype=torch.float64)
        )

    def test_order_two(self):
        # H_2(x) = 4x^2 - 2
        torch.testing.assert_close(
            hermite_poly_coef(2),
            torch.tensor([-2.0, 0.0, 4.0], dtype=torch.float64),
        )

    def test_order_five(self):
        # H_5(x) = 32x^5 - 160x^3 + 120x
        torch.testing.assert_close(
            hermite_poly_coef(5),
            torch.tensor(
                [0.0, 120.0, 0.0, -160.0, 0.0, 32.0], dtype=torch.float64
            ),
        )

    @pytest.mark.parametrize("n", [0, 1, 3, 8, 12])
    def test_matches_numpy_herm2poly(self, n):
        basis = np.zeros(n + 1)
        basis[n] = 1.0
        expected = np.polynomial.hermite.herm2poly(basis)

        np.testing.assert_allclose(hermite_poly_coef(n).numpy(), expected)

    def test_length(self):
        for n in range(0, 10):
            assert hermite_poly_coef(n).shape == (n + 1,)

    def test_leading_coefficient_is_power_of_two(self):
        for n in range(0, 20):
            assert hermite_poly_coef(n)[-1].item() == 2.0**n

    def test_parity(self):
        """H_n has only even or only odd powers."""
        c = hermite_poly_coef(9)
        assert torch.all(c[0::2] == 0)

    def test_exact_through_limit(self):
        n = HERMITE_COEFFICIENT_EXACT_LIMIT
        expected = torch.tensor(
            _exact_hermite_coefficients(n), dtype=torch.float64
        )

        assert torch.equal(hermite_poly_coef(n), expected)

    def test_wraps_beyond_limit(self):
        """int64 overflow past the documented ceiling is not hidden."""
        n = HERMITE_COEFFICIENT_EXACT_LIMIT + 1
        expected = torch.tensor(
            [float(c) for c in _exact_hermite_coefficients(n)],
            dtype=torch.float64,
        )

        assert not torch.equal(hermite_poly_coef(n), expected)

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_dtype(self, dtype):
        assert hermite_poly_coef(4, dtype=dtype).dtype == dtype

    def test_negative_order_raises(self):
        with pytest.raises(InvalidOrderError):
            hermite_poly_coef(-1)

    def test_non_integer_order_raises(self):
        with pytest.raises(InvalidOrderError):
            hermite_poly_coef(2.5)
