from dataclasses import dataclass
from typing import Tuple, Union

OPERATORS: Tuple[str, ...] = ('+', '-', '*', '/')
COMPARISON_OPERATORS: Tuple[str, ...] = ('>', '<')


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class Operation:
    operator: str  # one of OPERATORS
    left: "Expression"
    right: "Expression"


Expression = Union[Number, Variable, Operation]


@dataclass(frozen=True)
class Constraint:
    """``left operator right``; sides are kept as written."""

    operator: str  # one of COMPARISON_OPERATORS
    left: Expression
    right: Expression
