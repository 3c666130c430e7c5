import logging
import re
from typing import List, Sequence

from .ast import COMPARISON_OPERATORS, OPERATORS, Constraint, Expression, Number, Operation, Variable
from .lexer import split_additive, split_comparison, split_multiplicative
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r'^[0-9]+$')


class ParseError(SyntaxError):
    pass


def parse_operator(token: str) -> str:
    if token not in OPERATORS:
        raise ParseError(f'Unknown operation: {token}')
    return token


def parse_comparison_operator(token: str) -> str:
    if token not in COMPARISON_OPERATORS:
        raise ParseError(f'Unknown comparison operator: {token}')
    return token


def parse_primitive(token: str, variables: Sequence[str]) -> Expression:
    if _NUMBER_RE.match(token):
        return Number(float(token))
    if token in variables:
        return Variable(token)
    raise ParseError(f'Unknown variable or number: {token}')


def _parse_clause(text: str, variables: Sequence[str]) -> Expression:
    parts = split_multiplicative(text)
    if len(parts) == 1:
        return parse_primitive(parts[0], variables)
    if len(parts) < 3:
        raise ParseError(f'Invalid clause: {text}')
    left = parse_primitive(parts[0], variables)
    operator = parse_operator(parts[1])
    right = _parse_clause(' '.join(parts[2:]), variables)
    return Operation(operator, left, right)


def _parse_expression(text: str, variables: Sequence[str]) -> Expression:
    parts: List[str] = split_additive(text)
    if len(parts) == 1:
        return _parse_clause(parts[0], variables)
    if len(parts) == 2 and parts[0] == '-':
        return Operation(parse_operator(parts[0]), Number(0.0), _parse_clause(parts[1], variables))
    if len(parts) < 3:
        raise ParseError(f'Invalid expression: {text}')

    left = _parse_expression(' '.join(parts[:-2]), variables)
    operator = parse_operator(parts[-2])
    right = _parse_clause(parts[-1], variables)
    return Operation(operator, left, right)


def parse_clause(text: str, variables: Sequence[str]) -> Expression:
    """Parse a ``*``/``/`` chain of primitives.

    The chain nests to the right: ``a * b / c`` becomes ``a * (b / c)``.
    """
    try:
        return _parse_clause(text, variables)
    except RecursionError:
        raise ParseError(f'Clause is too long: {len(text)} characters') from None


def parse_expression(text: str, variables: Sequence[str]) -> Expression:
    """Parse ``clause (('+'|'-') clause)*`` over the given variable names.

    Additive terms fold to the left, so ``a + b - c`` is ``(a + b) - c``.
    A single leading ``-`` negates a lone clause as ``0 - clause``.
    """
    try:
        return _parse_expression(text, variables)
    except RecursionError:
        raise ParseError(f'Expression is too long: {len(text)} characters') from None


def parse_constraint(text: str, variables: Sequence[str]) -> Constraint:
    parts = split_comparison(text)
    if len(parts) != 3:
        raise ParseError(f'Invalid constraint: {text}')
    left_text, op_text, right_text = parts
    left = parse_expression(left_text, variables)
    operator = parse_comparison_operator(op_text)
    right = parse_expression(right_text, variables)
    return Constraint(operator, left, right)


# recursive helpers are not traced
apply_debug_logging(globals(), logger=logger, skip={"_parse_clause", "_parse_expression"})
