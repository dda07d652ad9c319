from typing import assert_never

import sympy
from sympy import Symbol, Integer, Float, diff as sym_diff, simplify as sym_simplify

from expression import Expression, Constant, Variable, Add, Multiply, derivative
from simplifier import simplify

X = Symbol("x")


def to_sympy(expr: Expression) -> sympy.Expr:
    """
    Turn an expression tree into the equivalent SymPy expression.
    Integral constants become Integer so SymPy can cancel them exactly.
    """
    match expr:
        case Constant(value):
            if value.is_integer():
                return Integer(int(value))
            return Float(value)
        case Variable():
            return X
        case Add(left, right):
            return sympy.Add(to_sympy(left), to_sympy(right))
        case Multiply(left, right):
            return sympy.Mul(to_sympy(left), to_sympy(right))
        case _:
            assert_never(expr)

def _same(a: sympy.Expr, b: sympy.Expr) -> bool:
    return sym_simplify(a - b) == 0

def agrees_with_sympy(expr: Expression) -> bool:
    """
    Check our derivative of `expr`, both raw and simplified, against SymPy's.
    """
    expected = sym_diff(to_sympy(expr), X)
    raw = derivative(expr)
    return _same(to_sympy(raw), expected) and _same(to_sympy(simplify(raw)), expected)
