import logging
from typing import assert_never

from expression import (
    Expression, Constant, Variable, Add, Multiply,
    constant, variable, add, multiply,
)

logger = logging.getLogger(__name__)


def _fired(rule: str, result: Expression) -> Expression:
    logger.debug("%s -> %s", rule, result)
    return result

def _simplify_multiply(l: Expression, r: Expression) -> Expression:
    # Both-constant is matched first, so each zero/one arm sees one constant.
    match l, r:
        case Constant(a), Constant(b):
            return _fired("fold a*b", constant(a * b))
        case _, Constant(0):
            return _fired("e*0", constant(0))
        case Constant(0), _:
            return _fired("0*e", constant(0))
        case _, Constant(1):
            return _fired("e*1", l)
        case Constant(1), _:
            return _fired("1*e", r)
    return multiply(l, r)

def _simplify_add(l: Expression, r: Expression) -> Expression:
    # Like terms are collected only as Constant * Variable, never x * C.
    match l, r:
        case Constant(a), Constant(b):
            return _fired("fold a+b", constant(a + b))
        case _, Constant(0):
            return _fired("e+0", l)
        case Constant(0), _:
            return _fired("0+e", r)
        case Multiply(Constant(a), Variable()), Multiply(Constant(b), Variable()):
            return _fired("a*x + b*x", multiply(constant(a + b), variable()))
        case Variable(), Multiply(Constant(c), Variable()):
            return _fired("x + c*x", multiply(constant(1 + c), variable()))
        case Multiply(Constant(c), Variable()), Variable():
            return _fired("c*x + x", multiply(constant(c + 1), variable()))
    return add(l, r)

def simplify(expr: Expression) -> Expression:
    """
    Bottom-up rewrite pass:
      1) simplify both children
      2) try the Add / Multiply rules, in order, on the simplified children
      3) otherwise rebuild the node around the simplified children

    Only the listed patterns are recognized; this is not a normal form.
    """
    match expr:
        case Constant(value):
            return constant(value)
        case Variable():
            return variable()
        case Add(left, right):
            return _simplify_add(simplify(left), simplify(right))
        case Multiply(left, right):
            return _simplify_multiply(simplify(left), simplify(right))
        case _:
            assert_never(expr)
