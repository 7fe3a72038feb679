import math

import mpmath
import pytest

from dualdiff import function as ddf
from dualdiff.autodiff import derivative
from dualdiff.babylonian import babylonian, dbabylonian
from dualdiff.context import localcontext
from dualdiff.dual import epsilon, make_dual


def test_babylonian():
    for x in (0.25, 1.0, 2.0, 10.0, 123.0):
        assert babylonian(x) == pytest.approx(math.sqrt(x), rel=1e-12)

    assert babylonian(2.0, 1) == 1.5
    assert babylonian(2.0, 2) == pytest.approx(17 / 12)


def test_dual_derivative():
    z = babylonian(make_dual(2, 1))
    assert z.value == pytest.approx(math.sqrt(2), abs=1e-10)
    assert epsilon(z) == pytest.approx(0.5 / math.sqrt(2), abs=1e-10)

    t, dt = dbabylonian(2)
    assert t == pytest.approx(z.value, abs=1e-10)
    assert dt == pytest.approx(epsilon(z), abs=1e-10)


def test_agreement_with_manual_derivative():
    for x in (0.5, 2.0, 3.0, 49.0):
        for n in (1, 2, 5, 10):
            _, dt = dbabylonian(x, n)
            assert derivative(lambda y: babylonian(y, n), x) == pytest.approx(dt, abs=1e-10)

    for x in (0.5, 2.0, 3.0, 49.0):
        assert derivative(babylonian, x) == pytest.approx(
            derivative(ddf.sqrt, x), abs=1e-10
        )


def test_composed_function():
    def f(x):
        return (1 + 3 * babylonian(x)) ** 3 / babylonian(x)

    x, h = 2.0, 1e-5
    d = derivative(f, x)
    assert math.isfinite(d)
    assert d == pytest.approx((f(x + h) - f(x - h)) / (2 * h), abs=1e-6)


def test_extended_precision():
    with mpmath.workdps(50):
        d = derivative(lambda x: babylonian(x, 20), mpmath.mpf(2))
        assert abs(d - 1 / (2 * mpmath.sqrt(2))) < mpmath.mpf(10) ** -40


def test_iterations_from_context():
    with localcontext(iterations=2):
        assert babylonian(2.0) == pytest.approx(17 / 12)
        assert dbabylonian(2.0)[0] == pytest.approx(17 / 12)

    assert babylonian(2.0) == pytest.approx(math.sqrt(2))


def test_invalid_iterations():
    with pytest.raises(ValueError):
        babylonian(2.0, 0)

    with pytest.raises(ValueError):
        dbabylonian(2.0, -1)

    with pytest.raises(TypeError):
        babylonian(2.0, 2.5)
