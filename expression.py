from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias, assert_never


class _Node:
    __slots__ = ()

    def __str__(self) -> str:
        return to_string(self)


@dataclass(frozen=True, slots=True)
class Constant(_Node):
    value: float


@dataclass(frozen=True, slots=True)
class Variable(_Node):
    name: ClassVar[str] = "x"


@dataclass(frozen=True, slots=True)
class Add(_Node):
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Multiply(_Node):
    left: Expression
    right: Expression


Expression: TypeAlias = Constant | Variable | Add | Multiply


# ─── Construction ────────────────────────────────────────────────────────────

def constant(v: float) -> Constant:
    return Constant(float(v))

def variable() -> Variable:
    return Variable()

def add(l: Expression, r: Expression) -> Add:
    return Add(l, r)

def multiply(l: Expression, r: Expression) -> Multiply:
    return Multiply(l, r)


# ─── Operations ──────────────────────────────────────────────────────────────

def evaluate(expr: Expression, x: float) -> float:
    """Value of `expr` at the point `x`. NaN and inf propagate per IEEE."""
    match expr:
        case Constant(value):
            return value
        case Variable():
            return x
        case Add(left, right):
            return evaluate(left, x) + evaluate(right, x)
        case Multiply(left, right):
            return evaluate(left, x) * evaluate(right, x)
        case _:
            assert_never(expr)

def derivative(expr: Expression) -> Expression:
    """
    Symbolic d/dx of `expr`.

    The result is left exactly as the sum and product rules build it,
    zeros and ones included; run it through `simplifier.simplify` to tidy up.
    """
    match expr:
        case Constant():
            return constant(0)
        case Variable():
            return constant(1)
        case Add(left, right):
            return add(derivative(left), derivative(right))
        case Multiply(left, right):
            return add(
                multiply(derivative(left), right),
                multiply(left, derivative(right)),
            )
        case _:
            assert_never(expr)

def _format_constant(value: float) -> str:
    """Shortest round-trip form, without a trailing '.0': 2.0 -> '2'."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text

def to_string(expr: Expression) -> str:
    """Fully parenthesized rendering, e.g. '(x + (2 * x))'."""
    match expr:
        case Constant(value):
            return _format_constant(value)
        case Variable():
            return Variable.name
        case Add(left, right):
            return f"({to_string(left)} + {to_string(right)})"
        case Multiply(left, right):
            return f"({to_string(left)} * {to_string(right)})"
        case _:
            assert_never(expr)
