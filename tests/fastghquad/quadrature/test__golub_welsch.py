import numpy as np
import pytest
import torch

from fastghquad.linear_algebra import DimensionMismatchError
from fastghquad.quadrature import QuadratureRule, golub_welsch


class TestGolubWelsch:
    def test_legendre(self):
        """Legendre Jacobi matrix gives Gauss-Legendre nodes and weights."""
        n = 6
        k = torch.arange(1, n, dtype=torch.float64)
        d = torch.zeros(n, dtype=torch.float64)
        e = k / torch.sqrt(4 * k**2 - 1)

        nodes, weights = golub_welsch(d, e, mu0=2.0)
        expected_nodes, expected_weights = np.polynomial.legendre.leggauss(n)

        np.testing.assert_allclose(nodes.numpy(), expected_nodes, atol=1e-13)
        np.testing.assert_allclose(
            weights.numpy(), expected_weights, atol=1e-13
        )

    def test_weights_sum_to_mu0(self):
        d = torch.tensor([0.5, -0.2, 1.0, 0.3], dtype=torch.float64)
        e = torch.tensor([0.7, 0.4, 0.9], dtype=torch.float64)

        _, weights = golub_welsch(d, e, mu0=3.0)

        torch.testing.assert_close(
            weights.sum(), torch.tensor(3.0, dtype=torch.float64)
        )

    def test_nodes_sorted(self):
        d = torch.tensor([4.0, -2.0, 1.0], dtype=torch.float64)
        e = torch.tensor([0.1, 0.2], dtype=torch.float64)

        rule = golub_welsch(d, e, mu0=1.0)

        assert isinstance(rule, QuadratureRule)
        assert torch.all(rule.nodes[1:] > rule.nodes[:-1])

    def test_dimension_mismatch_propagates(self):
        with pytest.raises(DimensionMismatchError):
            golub_welsch(
                torch.zeros(3, dtype=torch.float64),
                torch.zeros(3, dtype=torch.float64),
                mu0=1.0,
            )
