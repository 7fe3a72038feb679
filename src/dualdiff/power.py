import numbers
from typing import TypeVar

from dualdiff.typing import Scalar

T = TypeVar("T", bound=Scalar)


def ipow(base: T, n: int) -> T:
    """Raise `base` to the integer power `n` by repeated squaring.

    Only multiplication (and, for negative `n`, one division) of `base` is used, so
    this works for any type closed under ``*``.

    Parameters
    ----------
    base : Scalar
    n : int

    Returns
    -------
    Scalar
        ``base**n``. If `n` is zero, the multiplicative identity of the type of
        `base`.

    Raises
    ------
    TypeError
        If `n` is not an integer.

    Examples
    --------
    >>> ipow(3, 4)
    81
    >>> ipow(2.0, -2)
    0.25
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"exponent must be an integer, not {type(n).__name__}")

    n = int(n)

    if n < 0:
        return 1 / ipow(base, -n)

    result = base * 0 + 1
    tmp = base

    while n != 0:
        if n % 2 != 0:
            result = result * tmp

        n //= 2

        if n != 0:
            tmp = tmp * tmp

    return result
