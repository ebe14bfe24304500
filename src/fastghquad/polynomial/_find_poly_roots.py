import warnings
from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from fastghquad.linear_algebra import eigenvalues
from fastghquad.polynomial._exceptions import ComplexRootWarning
from fastghquad.polynomial._polynomial_companion import polynomial_companion


def find_poly_roots(
    coefficients: Union[Tensor, Sequence[float]],
    *,
    imaginary_tolerance: Optional[float] = None,
) -> Tensor:
    """Real parts of polynomial roots via companion matrix eigenvalues.

    Parameters
    ----------
    coefficients : Tensor or sequence of float
        Coefficients in ascending order, shape (n + 1,).
        coefficients[i] multiplies x^i; coefficients[n] must be non-zero.
    imaginary_tolerance : float, optional
        If given, emit a ``ComplexRootWarning`` when any discarded imaginary
        part exceeds this value in magnitude. The real parts are returned
        either way. Default ``None`` performs no check.

    Returns
    -------
    Tensor
        Real parts of the n roots, shape (n,). Order is unspecified.

    Raises
    ------
    DimensionMismatchError
        If coefficients is not 1-D.
    DegreeError
        If the polynomial is constant.
    DegenerateLeadingCoefficientError
        If the leading coefficient is zero.
    EigenConvergenceError
        If the eigenvalue iteration fails to converge.

    Warns
    -----
    ComplexRootWarning
        If ``imaginary_tolerance`` is set and exceeded.

    Notes
    -----
    The imaginary parts of the eigenvalues are computed and then dropped.
    This is only meaningful for polynomials known to have real roots, such
    as Hermite polynomials; for anything else the result is a lossy
    approximation.

    Examples
    --------
    >>> find_poly_roots([2.0, -3.0, 1.0])  # (x-1)(x-2), any order
    tensor([1., 2.], dtype=torch.float64)
    """
    if not isinstance(coefficients, Tensor):
        coefficients = torch.as_tensor(coefficients, dtype=torch.float64)

    companion = polynomial_companion(coefficients)
    roots = eigenvalues(companion)

    if imaginary_tolerance is not None:
        largest_imaginary = roots.imag.abs().max().item()
        if largest_imaginary > imaginary_tolerance:
            warnings.warn(
                f"Discarding imaginary part {largest_imaginary:.3g} larger "
                f"than tolerance {imaginary_tolerance:.3g}; polynomial does "
                f"not have all-real roots",
                ComplexRootWarning,
                stacklevel=2,
            )

    return roots.real.contiguous()
