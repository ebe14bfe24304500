from typing import NamedTuple

from torch import Tensor


class SymmetricTridiagonal(NamedTuple):
    """Symmetric tridiagonal matrix stored as its two distinct diagonals."""

    diagonal: Tensor  # (n,)
    off_diagonal: Tensor  # (n - 1,)


class QuadratureRule(NamedTuple):
    """Nodes and weights of a Gaussian quadrature rule.

    Unpacks as ``nodes, weights = rule``.
    """

    nodes: Tensor  # (n,) - ascending
    weights: Tensor  # (n,)
