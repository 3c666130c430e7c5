"""Interactive session state: the objective and constraint texts being edited."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .ast import Constraint, Expression
from .config import ViewportConfig, get_viewport_config
from .linear import NonLinearError
from .parser import ParseError, parse_constraint, parse_expression
from .projection import NoVariablesError
from .scene import Scene, build_scene, half_plane, objective_arrow

logger = logging.getLogger(__name__)

DEFAULT_OBJECTIVE = "3*x + 2*y - 10"
DEFAULT_CONSTRAINT = "x + y > 10"

INPUT_ERRORS = (ParseError, NonLinearError, NoVariablesError)


@dataclass
class ObjectiveEntry:
    text: str
    expression: Optional[Expression] = None
    error: Optional[str] = None


@dataclass
class ConstraintEntry:
    text: str = ""
    constraint: Optional[Constraint] = None
    error: Optional[str] = None


@dataclass
class Workspace:
    """Objective and constraints as typed, each with its last valid parse.

    An edit that fails to parse records the new text and the error message
    but keeps the previously valid value, so the scene keeps rendering it.
    """

    variables: Sequence[str] = ()
    config: ViewportConfig = field(default_factory=get_viewport_config)
    objective: ObjectiveEntry = field(default_factory=lambda: ObjectiveEntry(""))
    constraints: List[ConstraintEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.variables:
            self.variables = self.config.variables

    @classmethod
    def with_defaults(cls, config: Optional[ViewportConfig] = None) -> "Workspace":
        workspace = cls(config=config or get_viewport_config())
        workspace.set_objective(DEFAULT_OBJECTIVE)
        workspace.add_constraint(DEFAULT_CONSTRAINT)
        return workspace

    def set_objective(self, text: str) -> ObjectiveEntry:
        entry = self.objective
        entry.text = text
        try:
            expression = parse_expression(text, self.variables)
            # reject inputs the scene could not draw
            objective_arrow(expression, self.config)
        except INPUT_ERRORS as exc:
            logger.info("Objective %r rejected: %s", text, exc)
            entry.error = str(exc)
            return entry
        entry.expression = expression
        entry.error = None
        return entry

    def add_constraint(self, text: str = "") -> ConstraintEntry:
        entry = ConstraintEntry(text)
        self.constraints.append(entry)
        if text:
            self.set_constraint(len(self.constraints) - 1, text)
        return entry

    def set_constraint(self, index: int, text: str) -> ConstraintEntry:
        entry = self.constraints[index]
        entry.text = text
        try:
            constraint = parse_constraint(text, self.variables)
            half_plane(constraint, self.config)
        except INPUT_ERRORS as exc:
            logger.info("Constraint %d %r rejected: %s", index, text, exc)
            entry.error = str(exc)
            return entry
        entry.constraint = constraint
        entry.error = None
        return entry

    def remove_constraint(self, index: int) -> ConstraintEntry:
        return self.constraints.pop(index)

    @property
    def errors(self) -> List[str]:
        messages = []
        if self.objective.error:
            messages.append(f"objective: {self.objective.error}")
        for idx, entry in enumerate(self.constraints):
            if entry.error:
                messages.append(f"constraint {idx}: {entry.error}")
        return messages

    def scene(self) -> Scene:
        return build_scene(
            self.objective.expression,
            [entry.constraint for entry in self.constraints],
            self.config,
        )
