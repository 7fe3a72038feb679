import numbers
from typing import Any, Generic, Self, TypeVar

from dualdiff.power import ipow
from dualdiff.typing import Scalar, is_real

T = TypeVar("T", bound=Scalar)


class DualNumber(Scalar, Generic[T]):
    r"""Dual number.

    Parameters
    ----------
    value : T
        Primal part.
    epsilon : T
        Coefficient of the infinitesimal unit.

    Attributes
    ----------
    value : T
    epsilon : T

    Raises
    ------
    TypeError
        If `value` or `epsilon` is not a real number. In particular, dual numbers
        whose components are dual numbers are not allowed.

    Notes
    -----
    Instances of this class behave like elements of the ring

    .. math::

        T[\varepsilon]/(\varepsilon^2).

    A real number :math:`r` that appears as an operand of an arithmetic operation
    together with a dual number is treated as :math:`r+0\varepsilon`.

    Only integer powers are supported. Raising a dual number to a non-integer power,
    or a real number to a dual power, raises :class:`TypeError`.

    Examples
    --------
    >>> x = DualNumber(3.0, 1.0)
    >>> x * x + 2
    DualNumber(value=11.0, epsilon=6.0)
    >>> 1 / x
    DualNumber(value=0.3333333333333333, epsilon=-0.1111111111111111)
    """

    __slots__ = ("_value", "_epsilon")
    __array_ufunc__ = None
    _value: T
    _epsilon: T

    def __init__(self, value: T, epsilon: T):
        for x in (value, epsilon):
            if isinstance(x, DualNumber):
                raise TypeError("components of DualNumber must not be DualNumber")

            if not is_real(x):
                raise TypeError(f"{type(x).__name__!r} is not a real number")

        self._value = value
        self._epsilon = epsilon

    @classmethod
    def constant(cls, value: T) -> Self:
        """Return ``value + 0ε``."""
        return cls(value, value * 0)

    @classmethod
    def variable(cls, value: T) -> Self:
        """Return the seed ``value + 1ε``, which represents the independent variable."""
        return cls(value, value * 0 + 1)

    @property
    def value(self) -> T:
        return self._value

    @property
    def epsilon(self) -> T:
        return self._epsilon

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r}, epsilon={self._epsilon!r})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(value={self._value}, epsilon={self._epsilon})"

    def __format__(self, format_spec: str) -> str:
        value = format(self._value, format_spec)
        epsilon = format(self._epsilon, format_spec)
        return f"{type(self).__name__}(value={value}, epsilon={epsilon})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return other._value == self._value and other._epsilon == self._epsilon  # type: ignore

    def __hash__(self) -> int:
        return hash((self._value, self._epsilon))

    def __lt__(self, rhs: Self | T) -> bool:
        if not _is_acceptable(rhs):
            return NotImplemented

        return self._value < promote(rhs)._value

    def __le__(self, rhs: Self | T) -> bool:
        if not _is_acceptable(rhs):
            return NotImplemented

        return self._value <= promote(rhs)._value

    def __gt__(self, rhs: Self | T) -> bool:
        if not _is_acceptable(rhs):
            return NotImplemented

        return self._value > promote(rhs)._value

    def __ge__(self, rhs: Self | T) -> bool:
        if not _is_acceptable(rhs):
            return NotImplemented

        return self._value >= promote(rhs)._value

    def __add__(self, rhs: Self | T) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = promote(rhs)
        return self.__class__(self._value + rhs._value, self._epsilon + rhs._epsilon)

    def __sub__(self, rhs: Self | T) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = promote(rhs)
        return self.__class__(self._value - rhs._value, self._epsilon - rhs._epsilon)

    def __mul__(self, rhs: Self | T) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = promote(rhs)
        epsilon = self._value * rhs._epsilon + self._epsilon * rhs._value
        return self.__class__(self._value * rhs._value, epsilon)

    def __truediv__(self, rhs: Self | T) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = promote(rhs)
        value = self._value / rhs._value
        s = rhs._value**2
        epsilon = (self._epsilon * rhs._value - self._value * rhs._epsilon) / s
        return self.__class__(value, epsilon)

    def __pow__(self, rhs: int) -> Self:
        if isinstance(rhs, numbers.Integral) and not isinstance(rhs, bool):
            return ipow(self, rhs)

        if _is_acceptable(rhs):
            raise TypeError(
                f"unsupported power: {type(self).__name__} ** {type(rhs).__name__} "
                "(only integer exponents are supported)"
            )

        return NotImplemented

    def __neg__(self) -> Self:
        return self.__class__(-self._value, -self._epsilon)

    def __pos__(self) -> Self:
        return self.__class__(+self._value, +self._epsilon)

    def __radd__(self, lhs: Self | T) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return promote(lhs).__add__(self)

    def __rsub__(self, lhs: Self | T) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return promote(lhs).__sub__(self)

    def __rmul__(self, lhs: Self | T) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return promote(lhs).__mul__(self)

    def __rtruediv__(self, lhs: Self | T) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return promote(lhs).__truediv__(self)

    def __rpow__(self, lhs: Any) -> Self:
        if is_real(lhs):
            raise TypeError(
                f"unsupported power: {type(lhs).__name__} ** {type(self).__name__} "
                "(dual exponents are not supported)"
            )

        return NotImplemented


def _is_acceptable(value: object) -> bool:
    return isinstance(value, DualNumber) or is_real(value)


def promote(value: DualNumber[T] | T) -> DualNumber[T]:
    """Convert the real number to a dual number with zero infinitesimal part.

    Dual numbers are returned as they are, so promotion never wraps twice.

    Raises
    ------
    TypeError
        If `value` is neither a dual number nor a real number.

    Examples
    --------
    >>> promote(2.5)
    DualNumber(value=2.5, epsilon=0.0)
    >>> z = DualNumber(1.0, 2.0)
    >>> promote(z) is z
    True
    """
    if isinstance(value, DualNumber):
        return value

    if not is_real(value):
        raise TypeError(f"cannot promote {type(value).__name__!r} to DualNumber")

    return DualNumber.constant(value)


def make_dual(value: T, epsilon: T | int = 0) -> DualNumber[T]:
    """Create a dual number ``value + epsilon ε``.

    Examples
    --------
    >>> make_dual(2.0, 1.0)
    DualNumber(value=2.0, epsilon=1.0)
    """
    return DualNumber(value, epsilon)  # type: ignore


def value(z: DualNumber[T] | T) -> T:
    """Return the primal part of `z`. A real number is its own primal part."""
    return promote(z).value


def epsilon(z: DualNumber[T] | T) -> T:
    """Return the infinitesimal part of `z`, which is zero for a real number."""
    return promote(z).epsilon
