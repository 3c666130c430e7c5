import pytest

from lpgraph.ast import Constraint, Number, Operation, Variable
from lpgraph.config import VARIABLES
from lpgraph.parser import ParseError, parse_clause, parse_constraint, parse_expression, parse_primitive

X, Y = Variable('x'), Variable('y')


def test_primitives():
    assert parse_primitive('42', VARIABLES) == Number(42.0)
    assert parse_primitive('x', VARIABLES) == X


@pytest.mark.parametrize('token', ['z', '1.5', 'xy', '-3'])
def test_unknown_primitive(token):
    with pytest.raises(ParseError) as exc:
        parse_primitive(token, VARIABLES)
    assert 'Unknown variable or number' in str(exc.value)


def test_unknown_variable_in_expression():
    with pytest.raises(ParseError):
        parse_expression('z', VARIABLES)


def test_recognized_variables_are_a_parameter():
    assert parse_expression('z', ['z']) == Variable('z')
    with pytest.raises(ParseError):
        parse_expression('x', ['a', 'b'])


def test_additive_terms_fold_left():
    expr = parse_expression('x + y - 10', VARIABLES)
    assert expr == Operation('-', Operation('+', X, Y), Number(10.0))


def test_multiplicative_chain_nests_right():
    expr = parse_clause('2 * x / 4', VARIABLES)
    assert expr == Operation('*', Number(2.0), Operation('/', X, Number(4.0)))


def test_mixed_precedence():
    expr = parse_expression('3*x + 2*y - 10', VARIABLES)
    assert expr == Operation(
        '-',
        Operation('+', Operation('*', Number(3.0), X), Operation('*', Number(2.0), Y)),
        Number(10.0),
    )


def test_leading_minus_negates_clause():
    assert parse_expression('- 2*x', VARIABLES) == Operation('-', Number(0.0), Operation('*', Number(2.0), X))


def test_leading_minus_before_longer_expression():
    expr = parse_expression('-x + y', VARIABLES)
    assert expr == Operation('+', Operation('-', Number(0.0), X), Y)


@pytest.mark.parametrize(
    'text',
    ['', '   ', '+ x', 'x +', 'x + + y', 'x * * y', 'x *', '2 x', '(x + y)'],
)
def test_malformed_expressions(text):
    with pytest.raises(ParseError):
        parse_expression(text, VARIABLES)


def test_parse_error_is_a_syntax_error():
    with pytest.raises(SyntaxError):
        parse_expression('x +', VARIABLES)


def test_constraint():
    constraint = parse_constraint('x + y > 10', VARIABLES)
    assert constraint == Constraint('>', Operation('+', X, Y), Number(10.0))


def test_constraint_keeps_sides_as_written():
    constraint = parse_constraint('10 < x', VARIABLES)
    assert constraint.operator == '<'
    assert constraint.left == Number(10.0)
    assert constraint.right == X


def test_equality_is_rejected():
    with pytest.raises(ParseError) as exc:
        parse_constraint('x = y', VARIABLES)
    assert 'Unknown comparison operator: =' in str(exc.value)


@pytest.mark.parametrize('text', ['x + y', 'x >= 1', 'x > y > 1', '1 < x < 2'])
def test_constraint_needs_exactly_one_comparison(text):
    with pytest.raises(ParseError) as exc:
        parse_constraint(text, VARIABLES)
    assert 'Invalid constraint' in str(exc.value)


def test_constraint_side_errors_propagate():
    with pytest.raises(ParseError):
        parse_constraint('x > ', VARIABLES)
    with pytest.raises(ParseError):
        parse_constraint('x > z', VARIABLES)


def test_long_sum_parses():
    text = ' + '.join(['x'] * 600)
    expr = parse_expression(text, VARIABLES)
    assert isinstance(expr, Operation) and expr.operator == '+'


def test_overlong_input_is_a_parse_error():
    with pytest.raises(ParseError) as exc:
        parse_expression(' + '.join(['x'] * 3000), VARIABLES)
    assert 'Expression is too long' in str(exc.value)

    with pytest.raises(ParseError) as exc:
        parse_constraint(' * '.join(['2'] * 3000) + ' > x', VARIABLES)
    assert 'too long' in str(exc.value)
