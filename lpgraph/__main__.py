import argparse
import logging
from typing import List, Optional, Sequence

from lpgraph import (
    NoVariablesError,
    NonLinearError,
    ParseError,
    ViewportConfig,
    build_scene,
    format_constraint,
    format_expression,
    format_linear_form,
    linearize,
    parse_constraint,
    parse_expression,
    project,
)
from lpgraph.ast import Constraint
from lpgraph.reference import BNF
from lpgraph.scene import constraint_expression

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _fmt_point(point) -> str:
    return f"({point[0]:.6g}, {point[1]:.6g})"


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Project a two-variable linear program onto the plane")
    parser.add_argument(
        "-o",
        "--objective",
        help="Objective expression, e.g. '3*x + 2*y - 10'",
    )
    parser.add_argument(
        "-c",
        "--constraint",
        action="append",
        default=[],
        help="Constraint such as 'x + y > 10' (repeatable)",
    )
    parser.add_argument(
        "--variables",
        default="x,y",
        help="Horizontal and vertical axis variables (default: x,y)",
    )
    parser.add_argument(
        "--min",
        type=float,
        default=-1000.0,
        dest="minimum",
        help="Viewport minimum (default: -1000)",
    )
    parser.add_argument(
        "--max",
        type=float,
        default=1000.0,
        dest="maximum",
        help="Viewport maximum (default: 1000)",
    )
    parser.add_argument(
        "--grammar",
        action="store_true",
        help="Print the input grammar and exit",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.grammar:
        print(BNF)
        return

    variables = tuple(part.strip() for part in args.variables.split(",") if part.strip())
    try:
        config = ViewportConfig(variables=variables, minimum=args.minimum, maximum=args.maximum)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        objective = parse_expression(args.objective, variables) if args.objective else None
        constraints: List[Constraint] = [parse_constraint(text, variables) for text in args.constraint]
        scene = build_scene(objective, constraints, config)
    except (ParseError, NonLinearError, NoVariablesError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    logger.info(
        "Projected %d constraint(s) onto [%g, %g]",
        len(scene.half_planes),
        config.minimum,
        config.maximum,
    )

    if objective is not None and scene.objective is not None:
        print(f"objective: {format_expression(objective)}")
        print(f"  linear form: {format_linear_form(linearize(objective), variables)}")
        direction = project(objective, normal=True, config=config)
        print(f"  descent direction: {_fmt_point((direction.x2, direction.y2))}")
        print(f"  arrow head: {_fmt_point(scene.objective.head)}")

    for idx, plane in enumerate(scene.half_planes):
        expression = constraint_expression(plane.constraint)
        print(f"constraint {idx}: {format_constraint(plane.constraint)}")
        print(f"  normalized: {format_linear_form(linearize(expression), variables)} > 0")
        start, end = plane.boundary.points()
        print(f"  boundary: {_fmt_point(start)} -> {_fmt_point(end)}")
        print(f"  shading: {' '.join(_fmt_point(p) for p in plane.polygon)}")


if __name__ == "__main__":
    main()
