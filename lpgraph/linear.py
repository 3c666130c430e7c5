"""Reduction of expression trees to linear forms ``sum(coeff * var) + constant``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

import numpy as np

from .ast import Expression, Number, Operation, Variable
from .logging_utils import apply_debug_logging
from .printer import format_expression

logger = logging.getLogger(__name__)

Coefficients = Dict[str, float]


class NonLinearError(ValueError):
    pass


@dataclass(frozen=True)
class LinearForm:
    """Per-variable coefficients plus a scalar constant.

    A variable absent from ``coefficients`` has coefficient 0; a present key
    may also hold 0 after cancellation (``x - x``). Use :meth:`coefficient`
    rather than indexing.
    """

    coefficients: Mapping[str, float] = field(default_factory=dict)
    constant: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "coefficients",
            MappingProxyType({name: float(value) for name, value in self.coefficients.items()}),
        )
        object.__setattr__(self, "constant", float(self.constant))

    def coefficient(self, name: str) -> float:
        return self.coefficients.get(name, 0.0)

    @property
    def has_variables(self) -> bool:
        return bool(self.coefficients)


def _quotient(numerator: float, denominator: float) -> float:
    # a zero constant divisor is allowed and produces inf/nan
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def _accumulate(target: Coefficients, source: Mapping[str, float], scale: float = 1.0) -> None:
    for name, value in source.items():
        target[name] = target.get(name, 0.0) + value * scale


def _combine(
    expr: Operation, left: Tuple[Coefficients, float], right: Tuple[Coefficients, float]
) -> Tuple[Coefficients, float]:
    left_coeffs, left_const = left
    right_coeffs, right_const = right
    coeffs: Coefficients = {}
    op = expr.operator

    if op == '+':
        _accumulate(coeffs, left_coeffs)
        _accumulate(coeffs, right_coeffs)
        return coeffs, left_const + right_const
    if op == '-':
        _accumulate(coeffs, left_coeffs)
        _accumulate(coeffs, right_coeffs, -1.0)
        return coeffs, left_const - right_const
    if op == '*':
        if left_coeffs and right_coeffs:
            raise NonLinearError(f"Expression is not linear: product of two variable terms in {format_expression(expr)}")
        _accumulate(coeffs, left_coeffs, right_const)
        _accumulate(coeffs, right_coeffs, left_const)
        return coeffs, left_const * right_const
    if op == '/':
        if right_coeffs:
            raise NonLinearError(f"Expression is not linear: division by a variable term in {format_expression(expr)}")
        for name, value in left_coeffs.items():
            coeffs[name] = _quotient(value, right_const)
        return coeffs, _quotient(left_const, right_const)
    raise ValueError(f"Unknown operation: {op}")


def _reduce(expr: Expression) -> Tuple[Coefficients, float]:
    # post-order walk on an explicit stack; additive chains nest as deep as
    # the number of terms
    stack: List[Tuple[Expression, bool]] = [(expr, False)]
    results: List[Tuple[Coefficients, float]] = []
    while stack:
        node, children_done = stack.pop()
        if isinstance(node, Number):
            results.append(({}, float(node.value)))
        elif isinstance(node, Variable):
            results.append(({node.name: 1.0}, 0.0))
        elif not isinstance(node, Operation):
            raise TypeError(f"unknown expression node {node!r}")
        elif children_done:
            right = results.pop()
            left = results.pop()
            results.append(_combine(node, left, right))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return results[0]


def linearize(expr: Expression) -> LinearForm:
    coeffs, constant = _reduce(expr)
    return LinearForm(coeffs, constant)


def evaluate(form: LinearForm, point: Mapping[str, float]) -> float:
    """Value of ``form`` at ``point``; every variable of the form must be given."""
    total = form.constant
    for name, coeff in form.coefficients.items():
        total += coeff * float(point[name])
    return total


apply_debug_logging(globals(), logger=logger, skip={"_accumulate", "_combine", "_quotient", "LinearForm.coefficient"})
