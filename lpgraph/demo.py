from . import Workspace, format_constraint, format_expression, format_linear_form, linearize
from .scene import constraint_expression

EDITS = [
    ("objective", None, "3*x + 2*y - 10"),
    ("constraint", 0, "x + y > 10"),
    ("constraint", 1, "x * y > 4"),
    ("constraint", 1, "2*x < 600 - y"),
    ("objective", None, "x = y"),
]


def run():
    ws = Workspace.with_defaults()
    ws.add_constraint()
    for target, idx, text in EDITS:
        if target == "objective":
            ws.set_objective(text)
        else:
            ws.set_constraint(idx, text)
        print(f"edit {target}{'' if idx is None else f' {idx}'}: {text!r}")
        for message in ws.errors:
            print(f"  error: {message}")

    expr = ws.objective.expression
    print(f"\nObjective: {format_expression(expr)} -> {format_linear_form(linearize(expr), ws.variables)}")
    scene = ws.scene()
    for plane in scene.half_planes:
        form = linearize(constraint_expression(plane.constraint))
        print(f"Constraint: {format_constraint(plane.constraint)} -> {format_linear_form(form, ws.variables)} > 0")
        print(f"  boundary {plane.boundary.points()}")
    print(f"Objective arrow head: {scene.objective.head}")


if __name__ == "__main__":
    run()
