import functools
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from dualdiff.dual import DualNumber
from dualdiff.typing import is_real

T = TypeVar("T")
P = ParamSpec("P")


def derivative(fun: Callable[[Any], Any], x: T) -> T:
    """Evaluate the derivative of the univariate scalar-valued function at `x`.

    Parameters
    ----------
    fun : Callable
        Differentiated function. It must be written only in terms of the arithmetic
        operations of :class:`dualdiff.typing.Scalar` (and primitives such as
        :func:`dualdiff.function.sqrt`), so that a :class:`DualNumber` can be passed
        in place of a real number.
    x : T
        Point at which the derivative is evaluated.

    Returns
    -------
    T
        Derivative of `fun` at `x`.

    Raises
    ------
    TypeError
        If `x` is not a real number, or `fun` returns neither a dual number nor a
        real number.

    Warnings
    --------
    No error is raised even if `fun` is not differentiable at `x`. The returned value
    is the result of applying the rules of dual arithmetic mechanically.

    Examples
    --------
    >>> derivative(lambda x: 1 + x + 3 * x**2, 1.0)
    7.0
    """
    return value_and_derivative(fun, x)[1]


def value_and_derivative(fun: Callable[[Any], Any], x: T) -> tuple[T, T]:
    """Evaluate the univariate scalar-valued function and its derivative at `x`.

    See :func:`derivative` for the requirements on `fun` and `x`.

    Examples
    --------
    >>> value_and_derivative(lambda x: x**3 - x, 2.0)
    (6.0, 11.0)
    """
    if isinstance(x, DualNumber):
        raise TypeError("differentiation w.r.t. DualNumber is not allowed")

    if not is_real(x):
        raise TypeError(f"{type(x).__name__!r} is not a real number")

    result = fun(DualNumber.variable(x))

    if isinstance(result, DualNumber):
        return result.value, result.epsilon

    # fun ignored its argument
    if is_real(result):
        return result, result * 0

    raise TypeError(f"function returned {type(result).__name__!r}, not a number")


def deriv(fun: Callable[[Any], Any]) -> Callable[[T], T]:
    """Return a function that evaluates the derivative of the univariate
    scalar-valued function.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Examples
    --------
    >>> df = deriv(lambda x: x**2 / (x + 1))
    >>> df(1.0)
    0.75
    """

    @functools.wraps(fun)
    def result(x):
        return derivative(fun, x)

    return result


def _defderiv(fun: Callable, deriv: Callable, *, argnum: int = 0) -> None:
    if "_dualdiff_is_primitive" not in fun.__dict__:
        raise ValueError(f"{fun.__name__} is not a primitive")

    fun.__dict__["_dualdiff_derivs"][argnum] = deriv


def _primitive(fun: Callable[P, T]) -> Callable[P, T]:
    derivs: dict[int, Callable] = {}

    @functools.wraps(fun)
    def wrapper(*args, **kwargs):
        if not any(isinstance(x, DualNumber) for x in args):
            return fun(*args, **kwargs)

        args_real = [x.value if isinstance(x, DualNumber) else x for x in args]
        epsilon: Any = 0

        for argnum, arg in enumerate(args):
            if isinstance(arg, DualNumber):
                epsilon = epsilon + derivs[argnum](*args_real, **kwargs) * arg.epsilon

        return DualNumber(wrapper(*args_real, **kwargs), epsilon)

    wrapper.__dict__["_dualdiff_is_primitive"] = True
    wrapper.__dict__["_dualdiff_derivs"] = derivs
    return wrapper  # type: ignore
