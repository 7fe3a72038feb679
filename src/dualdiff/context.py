"""
#######################################
Configuration (:mod:`dualdiff.context`)
#######################################

.. currentmodule:: dualdiff.context

This module provides the context holding default parameters of iterative algorithms.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
import numbers
from typing import Self


class Context:
    """Create a new context.

    Parameters
    ----------
    iterations : int, default=10
        Number of iterations performed by :func:`dualdiff.babylonian` and
        :func:`dualdiff.dbabylonian` when not given explicitly.

    Raises
    ------
    TypeError
        If `iterations` is not an integer.
    ValueError
        If `iterations` is less than 1.
    """

    __slots__ = ("_iterations",)
    _iterations: int

    def __init__(self, iterations: int = 10):
        self._iterations = _check_iterations(iterations)

    @property
    def iterations(self) -> int:
        return self._iterations

    def copy(self) -> Self:
        return self.__class__(self._iterations)

    def __repr__(self):
        return f"{type(self).__name__}(iterations={self._iterations!r})"

    def __copy__(self) -> Self:
        return self.copy()


def _check_iterations(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"number of iterations must be an integer, not {n!r}")

    if n < 1:
        raise ValueError(f"number of iterations must be positive, not {n}")

    return int(n)


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("dualdiff")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(ctx: Context | None = None, *, iterations: int | None = None):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> with localcontext(iterations=3) as ctx:
    ...     ctx.iterations
    3
    >>> getcontext().iterations
    10
    """
    if ctx is None:
        ctx = getcontext()

    if iterations is None:
        iterations = ctx.iterations

    ctx = Context(iterations)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
