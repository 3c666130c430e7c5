"""Geometry handed to a renderer: shaded half-planes, objective arrow, axes.

Nothing here draws; every shape is a list of render-space points inside (or
extending past) the configured viewport.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .ast import Constraint, Expression, Operation
from .config import ViewportConfig, get_viewport_config
from .logging_utils import apply_debug_logging
from .projection import LineProjection, Point, project

logger = logging.getLogger(__name__)

# how far (in viewport maxima) the shading quad reaches past the boundary
SHADE_EXTENT = 4.0
ARROW_LENGTH_FACTOR = 1.0 / 4.0
ARROW_HEAD_FACTOR = 1.0 / 15.0
ARROW_HEAD_ANGLE = math.pi / 6


@dataclass(frozen=True)
class HalfPlane:
    constraint: Constraint
    boundary: LineProjection
    normal: Point
    polygon: Tuple[Point, Point, Point, Point]


@dataclass(frozen=True)
class Arrow:
    tail: Point
    head: Point
    barbs: Tuple[Point, Point]


@dataclass
class Scene:
    axes: Tuple[LineProjection, LineProjection]
    half_planes: List[HalfPlane] = field(default_factory=list)
    objective: Optional[Arrow] = None


def constraint_expression(constraint: Constraint) -> Operation:
    """Rewrite ``left OP right`` as an expression that is positive where it holds."""
    if constraint.operator == '>':
        return Operation('-', constraint.left, constraint.right)
    return Operation('-', constraint.right, constraint.left)


def _pt(vec: np.ndarray) -> Point:
    return float(vec[0]), float(vec[1])


def half_plane(constraint: Constraint, config: Optional[ViewportConfig] = None) -> HalfPlane:
    config = config or get_viewport_config()
    expression = constraint_expression(constraint)
    boundary = project(expression, config=config)
    normal = project(expression, normal=True, config=config)

    start, end = boundary.as_array()
    with np.errstate(invalid="ignore", over="ignore"):
        offset = np.array([normal.x2, normal.y2]) * config.maximum * SHADE_EXTENT
        polygon = (_pt(start), _pt(end), _pt(end + offset), _pt(start + offset))
    return HalfPlane(constraint, boundary, (normal.x2, normal.y2), polygon)


def objective_arrow(objective: Expression, config: Optional[ViewportConfig] = None) -> Arrow:
    """Arrow from the origin along the direction in which ``objective`` decreases."""
    config = config or get_viewport_config()
    direction = project(objective, normal=True, config=config)
    head = np.array([direction.x2, direction.y2]) * config.maximum * ARROW_LENGTH_FACTOR

    barb_length = config.maximum * ARROW_HEAD_FACTOR
    angle = math.atan2(head[1], head[0])
    barbs = tuple(
        (
            float(head[0] - barb_length * math.cos(angle + turn)),
            float(head[1] - barb_length * math.sin(angle + turn)),
        )
        for turn in (-ARROW_HEAD_ANGLE, ARROW_HEAD_ANGLE)
    )
    return Arrow((0.0, 0.0), _pt(head), barbs)  # type: ignore[arg-type]


def axes(config: Optional[ViewportConfig] = None) -> Tuple[LineProjection, LineProjection]:
    config = config or get_viewport_config()
    lo, hi = config.minimum, config.maximum
    return LineProjection(lo, 0.0, hi, 0.0), LineProjection(0.0, lo, 0.0, hi)


def build_scene(
    objective: Optional[Expression],
    constraints: Iterable[Optional[Constraint]],
    config: Optional[ViewportConfig] = None,
) -> Scene:
    config = config or get_viewport_config()
    scene = Scene(axes=axes(config))
    for constraint in constraints:
        if constraint is None:
            continue
        scene.half_planes.append(half_plane(constraint, config))
    if objective is not None:
        scene.objective = objective_arrow(objective, config)
    logger.debug(
        "Built scene with %d half-plane(s), objective=%s",
        len(scene.half_planes),
        scene.objective is not None,
    )
    return scene


apply_debug_logging(globals(), logger=logger, skip={"_pt"})
