import torch
from torch import Tensor

from fastghquad.linear_algebra import symmetric_tridiagonal_eigenvalue
from fastghquad.quadrature._result_types import QuadratureRule


def golub_welsch(
    diagonal: Tensor,
    off_diagonal: Tensor,
    mu0: float,
) -> QuadratureRule:
    """
    Gaussian quadrature rule from a symmetric tridiagonal Jacobi matrix.

    Parameters
    ----------
    diagonal : Tensor
        Diagonal of the Jacobi matrix, shape (n,).
    off_diagonal : Tensor
        Sub-diagonal of the Jacobi matrix, shape (n - 1,).
    mu0 : float
        Zeroth moment of the weight function, the integral of w(x) over the
        interval of orthogonality.

    Returns
    -------
    QuadratureRule
        nodes : Tensor of shape (n,), sorted ascending
        weights : Tensor of shape (n,)

    Raises
    ------
    DimensionMismatchError
        If the diagonals have inconsistent lengths.
    EigenConvergenceError
        If the eigensolver fails to converge.

    Notes
    -----
    The eigenvalues of the Jacobi matrix are the nodes. With v_j the
    unit-norm eigenvector for node j, the weights are

        w_j = mu0 * v_j[0] ** 2

    References
    ----------
    Golub, G. H., & Welsch, J. H. (1969). Calculation of Gauss quadrature rules.
    Mathematics of Computation, 23(106), 221-230.
    """
    eigenvalues, eigenvectors = symmetric_tridiagonal_eigenvalue(
        diagonal, off_diagonal
    )

    nodes = eigenvalues
    weights = mu0 * eigenvectors[0, :] ** 2

    # Ascending nodes, weights follow
    sorted_idx = torch.argsort(nodes)
    nodes = nodes[sorted_idx]
    weights = weights[sorted_idx]

    return QuadratureRule(nodes=nodes, weights=weights)
