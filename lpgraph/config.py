"""Viewport configuration shared by projection, scene building and the CLI."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple

X_VARIABLE = "x"
Y_VARIABLE = "y"
VARIABLES: Tuple[str, str] = (X_VARIABLE, Y_VARIABLE)
MIN_VARIABLES_VALUE = -1000.0
MAX_VARIABLES_VALUE = 1000.0


@dataclass
class ViewportConfig:
    """Axis variables (horizontal, vertical) and the square viewport bounds."""

    variables: Tuple[str, str] = VARIABLES
    minimum: float = MIN_VARIABLES_VALUE
    maximum: float = MAX_VARIABLES_VALUE

    def __post_init__(self) -> None:
        if len(self.variables) != 2:
            raise ValueError(f"viewport needs exactly two axis variables, got {len(self.variables)}")
        if self.variables[0] == self.variables[1]:
            raise ValueError("axis variables must be distinct")
        if not self.minimum < self.maximum:
            raise ValueError(f"viewport minimum {self.minimum} must be below maximum {self.maximum}")
        self.variables = tuple(self.variables)  # type: ignore[assignment]
        self.minimum = float(self.minimum)
        self.maximum = float(self.maximum)

    @property
    def horizontal(self) -> str:
        return self.variables[0]

    @property
    def vertical(self) -> str:
        return self.variables[1]


_VIEWPORT_CONFIG = ViewportConfig()


def get_viewport_config() -> ViewportConfig:
    return copy.deepcopy(_VIEWPORT_CONFIG)


def set_viewport_config(config: ViewportConfig) -> None:
    global _VIEWPORT_CONFIG
    _VIEWPORT_CONFIG = copy.deepcopy(config)
