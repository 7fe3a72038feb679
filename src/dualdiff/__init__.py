"""
########################################################
Forward-mode automatic differentiation (:mod:`dualdiff`)
########################################################

.. currentmodule:: dualdiff

This package computes first derivatives of univariate scalar-valued functions by
evaluating them on dual numbers.

Differential operators
----------------------

.. autosummary::
    :toctree: generated/

    derivative
    value_and_derivative
    deriv

Dual numbers
------------

.. autosummary::
    :toctree: generated/

    DualNumber
    make_dual
    promote
    value
    epsilon
    ipow

Iterative algorithms
--------------------

.. autosummary::
    :toctree: generated/

    babylonian
    dbabylonian

"""

from .autodiff import deriv, derivative, value_and_derivative
from .babylonian import babylonian, dbabylonian
from .dual import DualNumber, epsilon, make_dual, promote, value
from .power import ipow

__all__ = [
    "deriv",
    "derivative",
    "value_and_derivative",
    "babylonian",
    "dbabylonian",
    "DualNumber",
    "epsilon",
    "make_dual",
    "promote",
    "value",
    "ipow",
]
