"""
###############################
Typing (:mod:`dualdiff.typing`)
###############################

This module provides type definitions commonly used between modules.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

.. autodata:: REAL_TYPES

"""

import numbers
from abc import abstractmethod
from typing import Final, Protocol, Self

import mpmath

REAL_TYPES: Final = (numbers.Real, mpmath.mpf)
"""Types treated as real numbers, i.e. promoted to dual numbers with zero tangent."""


class Scalar(Protocol):
    """Protocol that ensures scalar-like behavior.

    Objects implementing this protocol must have four arithmetic operations and
    integer power defined, and four arithmetic operations must be compatible with
    integers. Functions passed to :func:`dualdiff.derivative` must be written against
    this protocol only.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __pow__(self, rhs: int) -> Self: ...

    @abstractmethod
    def __radd__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rtruediv__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __pos__(self) -> Self: ...


def is_real(value: object) -> bool:
    """Return ``True`` if `value` is an instance of one of :data:`REAL_TYPES`."""
    return isinstance(value, REAL_TYPES)
