"""Projection of two-variable linear expressions onto viewport coordinates."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .ast import Expression
from .config import ViewportConfig, get_viewport_config
from .linear import LinearForm, linearize
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class NoVariablesError(ValueError):
    pass


@dataclass(frozen=True)
class LineProjection:
    """Two endpoints; in normal mode ``(x1, y1)`` is the origin."""

    x1: float
    y1: float
    x2: float
    y2: float

    def points(self) -> Tuple[Point, Point]:
        return (self.x1, self.y1), (self.x2, self.y2)

    def as_array(self) -> np.ndarray:
        return np.array([[self.x1, self.y1], [self.x2, self.y2]], dtype=float)


def _absent(coeff: float) -> bool:
    return coeff == 0 or math.isnan(coeff)


def axis_coefficients(form: LinearForm, config: ViewportConfig) -> Tuple[float, float, float]:
    """Return ``(a, b, c)`` for ``a*X + b*Y + c = 0`` in render coordinates.

    The vertical coefficient is negated because the render axis grows downward.
    A NaN coefficient (from ``inf - inf`` or ``0 / 0``) counts as absent.
    """
    a = form.coefficient(config.horizontal)
    b = -form.coefficient(config.vertical)
    if _absent(a) and _absent(b):
        raise NoVariablesError("No variables in the expression")
    return a, b, form.constant


def _line(a: float, b: float, c: float, config: ViewportConfig) -> LineProjection:
    lo, hi = config.minimum, config.maximum
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if b != 0:
            ys = (-c - a * np.array([lo, hi])) / b
            return LineProjection(lo, float(ys[0]), hi, float(ys[1]))
        # vertical line
        x = float(np.float64(-c) / np.float64(a))
    return LineProjection(x, lo, x, hi)


def _normal(a: float, b: float) -> LineProjection:
    vec = np.array([a, b], dtype=float)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        unit = vec / np.linalg.norm(vec)
    return LineProjection(0.0, 0.0, float(-unit[0]), float(-unit[1]))


def project_form(form: LinearForm, normal: bool = False, *, config: Optional[ViewportConfig] = None) -> LineProjection:
    config = config or get_viewport_config()
    a, b, c = axis_coefficients(form, config)
    if normal:
        # the offset does not change the direction
        return _normal(a, b)
    return _line(a, b, c, config)


def project(expression: Expression, normal: bool = False, *, config: Optional[ViewportConfig] = None) -> LineProjection:
    """Project ``expression = 0`` onto the viewport.

    With ``normal=False`` the result is the chord of the line across the
    viewport (a vertical segment when the vertical coefficient is 0). With
    ``normal=True`` it is the unit direction of steepest decrease of the
    expression, anchored at the origin.

    Raises ``NoVariablesError`` when neither axis variable appears.
    """
    return project_form(linearize(expression), normal, config=config)


apply_debug_logging(globals(), logger=logger, skip={"_absent", "LineProjection.points", "LineProjection.as_array"})
