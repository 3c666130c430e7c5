"""Reference text for the objective/constraint input language."""

from textwrap import dedent

BNF = dedent(
"""
```
Constraint := Expression CompOp Expression
CompOp     := '>' | '<'

Expression := '-' Clause
            | Clause { AddOp Clause }
AddOp      := '+' | '-'

Clause     := Primitive { MulOp Primitive }
MulOp      := '*' | '/'

Primitive  := NUMBER | VARIABLE
NUMBER     := DIGIT { DIGIT }
VARIABLE   := one of the recognized variable names (x, y)
```

Notes:
- No parentheses and no unary operators other than one leading '-'.
- '+'/'-' group to the left: `a - b - c` is `(a - b) - c`.
- '*'/'/' group to the right: `a / b * c` is `a / (b * c)`.
- Only linear expressions are accepted downstream: a product may have a
  variable on at most one side, and a divisor may not contain a variable.
- `=` is recognised as a comparison but rejected; use `>` or `<`.
"""
).strip()

EXAMPLES = (
    ("objective", "3*x + 2*y - 10"),
    ("objective", "- x"),
    ("objective", "x / 2 + 4*y"),
    ("constraint", "x + y > 10"),
    ("constraint", "2*x < 3*y - 600"),
    ("constraint", "x > 0"),
)
