import numbers

from fastghquad.polynomial._exceptions import InvalidOrderError


def check_order(n, *, minimum: int = 1) -> int:
    """Validate an integer order and return it as a Python int.

    Parameters
    ----------
    n : int
        Order to validate. ``bool`` is rejected.
    minimum : int
        Smallest accepted order.

    Raises
    ------
    InvalidOrderError
        If n is not an integer or n < minimum.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidOrderError(
            f"n must be an integer, got {type(n).__name__}"
        )
    if n < minimum:
        raise InvalidOrderError(f"n must be at least {minimum}, got {n}")
    return int(n)
