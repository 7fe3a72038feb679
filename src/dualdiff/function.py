"""
#################################################
Mathematical functions (:mod:`dualdiff.function`)
#################################################

.. currentmodule:: dualdiff.function

This module provides elementary functions that can be differentiated, i.e. they
accept :class:`dualdiff.DualNumber` as well as real numbers.

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    exp
    log
    sqrt

"""

import math
import numbers
from typing import Any, overload

import mpmath
import mpmath.ctx_mp_python

from dualdiff.autodiff import _defderiv, _primitive
from dualdiff.dual import DualNumber


@overload
def exp(x: DualNumber, /) -> DualNumber: ...


@overload
def exp(x: float | int, /) -> float: ...


@overload
def exp(x: Any, /) -> Any: ...


@_primitive
def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    >>> print(format(exp(DualNumber(2.0, 1.0)), ".6f"))
    DualNumber(value=7.389056, epsilon=7.389056)
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.exp(x)

        case numbers.Real():
            return math.exp(x)

        case _:
            raise TypeError(f"exp is not defined for {type(x).__name__!r}")


@overload
def log(x: DualNumber, /) -> DualNumber: ...


@overload
def log(x: float | int, /) -> float: ...


@overload
def log(x: Any, /) -> Any: ...


@_primitive
def log(x, /):
    """Natural logarithm.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    >>> print(format(log(DualNumber(5.0, 1.0)), ".6f"))
    DualNumber(value=1.609438, epsilon=0.200000)
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.log(x)

        case numbers.Real():
            return math.log(x)

        case _:
            raise TypeError(f"log is not defined for {type(x).__name__!r}")


@overload
def sqrt(x: DualNumber, /) -> DualNumber: ...


@overload
def sqrt(x: float | int, /) -> float: ...


@overload
def sqrt(x: Any, /) -> Any: ...


@_primitive
def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    >>> print(format(sqrt(DualNumber(4.0, 1.0)), ".6f"))
    DualNumber(value=2.000000, epsilon=0.250000)
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sqrt(x)

        case numbers.Real():
            return math.sqrt(x)

        case _:
            raise TypeError(f"sqrt is not defined for {type(x).__name__!r}")


_defderiv(exp, exp)
_defderiv(log, lambda x: 1 / x)
_defderiv(sqrt, lambda x: 1 / (2 * sqrt(x)))
