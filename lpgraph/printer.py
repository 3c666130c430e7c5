from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

from .ast import Constraint, Expression, Number, Operation, Variable

if TYPE_CHECKING:  # pragma: no cover - import cycle through logging_utils
    from .linear import LinearForm

_PRECEDENCE = {'+': 1, '-': 1, '*': 2, '/': 2}


def number_str(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _needs_parens(child: Expression, parent: Operation, *, right: bool) -> bool:
    if not isinstance(child, Operation):
        return False
    child_prec = _PRECEDENCE[child.operator]
    parent_prec = _PRECEDENCE[parent.operator]
    if child_prec < parent_prec:
        return True
    if right:
        # a - (b + c); right-nested multiplicative chains read back flat
        return parent.operator == '-' and child_prec == 1
    # (a / b) / c: the parser nests multiplicative chains to the right
    return child_prec == parent_prec == 2


def format_expression(expr: Expression) -> str:
    if isinstance(expr, Number):
        return number_str(expr.value)
    if isinstance(expr, Variable):
        return expr.name
    if isinstance(expr, Operation):
        left = format_expression(expr.left)
        right = format_expression(expr.right)
        if _needs_parens(expr.left, expr, right=False):
            left = f"({left})"
        if _needs_parens(expr.right, expr, right=True):
            right = f"({right})"
        if expr.operator in ('*', '/'):
            return f"{left}{expr.operator}{right}"
        return f"{left} {expr.operator} {right}"
    raise ValueError(f"unknown expression node {expr!r}")


def format_constraint(constraint: Constraint) -> str:
    return f"{format_expression(constraint.left)} {constraint.operator} {format_expression(constraint.right)}"


def format_linear_form(form: LinearForm, variables: Sequence[str] = ()) -> str:
    """Render ``form`` as ``a*x + b*y + c``; ``variables`` fixes the term order."""

    names = list(variables) + sorted(k for k in form.coefficients if k not in variables)
    parts = []
    for name in names:
        coeff = form.coefficient(name)
        if coeff == 0:
            continue
        sign = '-' if coeff < 0 else '+'
        magnitude = abs(coeff)
        term = name if magnitude == 1 else f"{number_str(magnitude)}*{name}"
        parts.append((sign, term))
    if form.constant != 0 or not parts:
        sign = '-' if form.constant < 0 else '+'
        parts.append((sign, number_str(abs(form.constant))))

    first_sign, first_term = parts[0]
    text = f"-{first_term}" if first_sign == '-' else first_term
    for sign, term in parts[1:]:
        text += f" {sign} {term}"
    return text
