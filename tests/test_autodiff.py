import fractions

import mpmath
import pytest

from dualdiff import function as ddf
from dualdiff.autodiff import deriv, derivative, value_and_derivative
from dualdiff.dual import make_dual


def test_polynomial():
    assert derivative(lambda x: 1 + x + 3 * x**2, 1) == 7
    assert derivative(lambda x: 1 + x + 3 * x**2, fractions.Fraction(1, 3)) == 3


def test_value_and_derivative():
    v, d = value_and_derivative(lambda x: x**3 / (x - 1), 3.0)
    assert v == pytest.approx(13.5)
    assert d == pytest.approx((2 * 27 - 3 * 9) / 4)


def test_deriv():
    def rational(x):
        return x**2 / (x**3 + 2 * x + 1)

    df = deriv(rational)
    assert df.__name__ == "rational"
    assert df(4.0) == pytest.approx(
        (2 * 4.0 * 73.0 - 16.0 * (3 * 16.0 + 2)) / 73.0**2
    )


def test_composition():
    def g(x):
        return (x + 1) / (x - 2)

    def f(x):
        return g(x) ** 3 / g(x)

    # f = g**2, f' = 2 g g' with g' = -3 / (x - 2)**2
    x = 5.0
    assert derivative(f, x) == pytest.approx(2 * g(x) * -3 / (x - 2) ** 2)


def test_primitives():
    assert derivative(ddf.sqrt, 2.0) == pytest.approx(0.5 / ddf.sqrt(2.0))
    assert derivative(lambda x: ddf.exp(2 * x), 0.5) == pytest.approx(2 * ddf.exp(1.0))
    assert derivative(lambda x: x * ddf.log(x), 3.0) == pytest.approx(ddf.log(3.0) + 1)


def test_constant_function():
    assert derivative(lambda x: 5.0, 1.0) == 0.0
    assert value_and_derivative(lambda x: 2, 1.0) == (2, 0)


def test_non_differentiable_point():
    # |x| written with a branch; the branch taken decides the result
    assert derivative(lambda x: x if x >= 0 else -x, 0.0) == 1.0


def test_extended_precision():
    with mpmath.workdps(50):
        d = derivative(lambda x: x**2 / ddf.sqrt(x), mpmath.mpf(2))
        expected = mpmath.mpf(3) / 2 * mpmath.sqrt(2)
        assert abs(d - expected) < mpmath.mpf(10) ** -45


def test_invalid_argument():
    with pytest.raises(TypeError):
        derivative(lambda x: x, make_dual(1.0, 1.0))

    with pytest.raises(TypeError):
        derivative(lambda x: x, "1")

    with pytest.raises(TypeError):
        derivative(lambda x: str(x), 1.0)

    with pytest.raises(TypeError):
        ddf.sqrt("2")
