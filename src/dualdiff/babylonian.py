from typing import TypeVar

from dualdiff.context import _check_iterations, getcontext
from dualdiff.typing import Scalar

T = TypeVar("T", bound=Scalar)


def _iterations(n: int | None) -> int:
    if n is None:
        return getcontext().iterations

    return _check_iterations(n)


def babylonian(x: T, n: int | None = None) -> T:
    r"""Compute the square root by the Babylonian method.

    Starting from :math:`t_1=(1+x)/2`, the recurrence :math:`t_{k+1}=(t_k+x/t_k)/2` is
    applied until :math:`t_n` is obtained. No convergence check is performed.

    Parameters
    ----------
    x : Scalar
        Radicand. Since only addition and division are used, `x` may be a
        :class:`dualdiff.DualNumber`, in which case the derivative of the square root
        is obtained as well.
    n : int, optional
        Number of iterations. Defaults to ``getcontext().iterations``.

    Returns
    -------
    Scalar
        Approximation of the square root of `x`.

    Raises
    ------
    ValueError
        If `n` is less than 1.

    Examples
    --------
    >>> from dualdiff import DualNumber
    >>> print(format(babylonian(2.0), ".12f"))
    1.414213562373
    >>> print(format(babylonian(DualNumber(4.0, 1.0)), ".6f"))
    DualNumber(value=2.000000, epsilon=0.250000)
    """
    n = _iterations(n)
    t = (1 + x) / 2

    for _ in range(n - 1):
        t = (t + x / t) / 2

    return t


def dbabylonian(x: T, n: int | None = None) -> tuple[T, T]:
    """Compute the square root and its derivative by the Babylonian method, with the
    derivative of each step written out by hand.

    This is the same recurrence as :func:`babylonian`, but the derivative is tracked
    explicitly instead of through dual numbers.

    Parameters
    ----------
    x : Scalar
    n : int, optional
        Number of iterations. Defaults to ``getcontext().iterations``.

    Returns
    -------
    tuple[Scalar, Scalar]
        Approximations of the square root of `x` and its derivative.

    Examples
    --------
    >>> t, dt = dbabylonian(4.0)
    >>> print(format(t, ".6f"), format(dt, ".6f"))
    2.000000 0.250000
    """
    n = _iterations(n)
    t = (1 + x) / 2
    dt = (x * 0 + 1) / 2

    for _ in range(n - 1):
        t, dt = (t + x / t) / 2, (dt + (t - x * dt) / t**2) / 2

    return t, dt
