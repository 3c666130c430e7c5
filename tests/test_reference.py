import pytest

from lpgraph.config import VARIABLES
from lpgraph.linear import linearize
from lpgraph.parser import parse_constraint, parse_expression
from lpgraph.reference import BNF, EXAMPLES


def test_bnf_lists_every_rule():
    for rule in ('Constraint', 'Expression', 'Clause', 'Primitive'):
        assert f'{rule} ' in BNF


@pytest.mark.parametrize('kind, text', EXAMPLES)
def test_examples_parse_and_linearize(kind, text):
    if kind == 'objective':
        linearize(parse_expression(text, VARIABLES))
    else:
        constraint = parse_constraint(text, VARIABLES)
        linearize(constraint.left)
        linearize(constraint.right)
