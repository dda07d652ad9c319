# File: tests/test_sympy_bridge.py

import pytest
from sympy import Integer, Float, Symbol, expand
from expression import constant, variable, add, multiply
from sympy_bridge import X, to_sympy, agrees_with_sympy


def test_leaves():
    assert to_sympy(constant(3)) == Integer(3)
    assert isinstance(to_sympy(constant(3)), Integer)
    assert to_sympy(constant(2.5)) == Float(2.5)
    assert to_sympy(variable()) == Symbol("x") == X

@pytest.mark.parametrize("expr, expected", [
    (add(variable(), multiply(constant(2), variable())), 3 * X),
    (multiply(variable(), variable()),                    X**2),
    (multiply(add(variable(), constant(1)), variable()),  X**2 + X),
])
def test_to_sympy(expr, expected):
    assert expand(to_sympy(expr) - expected) == 0

@pytest.mark.parametrize("expr", [
    constant(4),
    variable(),
    add(variable(), multiply(constant(2), variable())),
    multiply(variable(), variable()),
    multiply(add(multiply(constant(3), variable()), constant(1)),
             add(multiply(variable(), variable()), constant(2))),
    add(variable(), multiply(variable(), constant(2))),
])
def test_derivatives_agree_with_sympy(expr):
    assert agrees_with_sympy(expr)
