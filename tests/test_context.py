import copy

import pytest

from dualdiff.context import Context, getcontext, localcontext, setcontext


def test_default():
    assert getcontext().iterations == 10


def test_localcontext():
    before = getcontext()

    with localcontext(iterations=4) as ctx:
        assert getcontext() is ctx
        assert ctx.iterations == 4

        with localcontext() as inner:
            assert inner.iterations == 4

    assert getcontext() is before


def test_setcontext():
    before = getcontext()

    try:
        setcontext(Context(iterations=3))
        assert getcontext().iterations == 3
        assert copy.copy(getcontext()).iterations == 3
    finally:
        setcontext(before)


def test_invalid():
    with pytest.raises(ValueError):
        Context(iterations=0)

    with pytest.raises(TypeError):
        Context(iterations=1.5)  # type: ignore
