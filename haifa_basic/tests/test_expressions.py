import pytest

from haifa_basic.ast import Multiplication, NumberLiteral, OperatorTerm, Summation
from haifa_basic.environment import BasicEnvironment
from haifa_basic.errors import (
    ErrorKind,
    OperatorApplicationError,
    ParseFloatError,
    UnknownOperatorError,
)
from haifa_basic.evaluator import ExpressionEvaluator
from haifa_basic.lexer import Token
from haifa_basic.parser import BasicParser


def _expression(text: str):
    program = BasicParser.parse(f"10 PRINT {text}")
    return program.lines[0].statements[0].values[0]


def _eval(text: str, env=None) -> float:
    if env is None:
        env = BasicEnvironment()
    evaluator = ExpressionEvaluator(env, source_name="expr.bas")
    return evaluator.evaluate(_expression(text))


def _number(value: str, column: int = 1) -> Multiplication:
    token = Token("NUMBER", value, 1, column)
    return Multiplication(1, column, NumberLiteral(1, column, token))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2 + 3 * 4", 14.0),
        ("(2 + 3) * 4", 20.0),
        ("10 - 4 - 3", 3.0),
        ("8 / 4 / 2", 1.0),
        ("-3 * 2", -6.0),
        ("--3", 3.0),
        ("-(1 + 2)", -3.0),
        ("1.5E3", 1500.0),
        (".5 + 2.5e-1", 0.75),
        ("7 / 2", 3.5),
    ],
)
def test_arithmetic(text, expected):
    assert _eval(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 < 2", 1.0),
        ("2 <= 1", 0.0),
        ("1 <> 2", 1.0),
        ("1 >< 1", 0.0),
        ("3 = 3", 1.0),
        ("1 + 1 = 2", 1.0),
        ("1 < 2 < 3", 1.0),
        ("3 > 2 > 1", 0.0),
    ],
)
def test_relational(text, expected):
    assert _eval(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 AND 0", 0.0),
        ("1 OR 0", 1.0),
        ("NOT 0", 1.0),
        ("NOT 5", 0.0),
        ("NOT 1 = 2", 1.0),
        ("0 OR 1 AND 0", 0.0),
        ("1 OR 0 AND 0", 1.0),
        ("1 < 2 AND 2 < 3", 1.0),
    ],
)
def test_logical(text, expected):
    assert _eval(text) == expected


def test_variables_read_from_environment():
    env = BasicEnvironment()
    env.write("A", 2.0)
    assert _eval("A + 1", env) == 3.0
    assert _eval("B * 10", env) == 0.0


def test_logical_operators_do_not_short_circuit():
    with pytest.raises(OperatorApplicationError):
        _eval("0 AND 1 / 0")
    with pytest.raises(OperatorApplicationError):
        _eval("1 OR 1 / 0")


def test_division_by_zero_carries_location():
    with pytest.raises(OperatorApplicationError) as info:
        _eval("4 / (2 - 2)")
    error = info.value
    assert error.kind is ErrorKind.OPERATOR_APPLICATION_FAILURE
    assert error.context == "process_multiplication"
    assert error.source_name == "expr.bas"
    assert (error.line, error.column) == (1, 12)


def test_overflowing_result_is_an_error():
    with pytest.raises(OperatorApplicationError):
        _eval("1E200 * 1E200")


def test_operator_not_belonging_to_level_is_unknown():
    expr = Summation(1, 1, _number("2"), [OperatorTerm(Token("OP", "*", 1, 3), _number("3", 5))])
    evaluator = ExpressionEvaluator(BasicEnvironment())
    with pytest.raises(UnknownOperatorError) as info:
        evaluator.evaluate(expr)
    assert info.value.context == "process_summation"


def test_unrecognised_operator_lexeme():
    expr = Summation(1, 1, _number("2"), [OperatorTerm(Token("OP", "%", 1, 3), _number("3", 5))])
    with pytest.raises(UnknownOperatorError):
        ExpressionEvaluator(BasicEnvironment()).evaluate(expr)


@pytest.mark.parametrize("lexeme", ["1.2.3", "nan", "inf", ""])
def test_invalid_numeric_literal(lexeme):
    expr = _number(lexeme)
    with pytest.raises(ParseFloatError) as info:
        ExpressionEvaluator(BasicEnvironment()).evaluate(expr)
    assert info.value.kind is ErrorKind.PARSE_FLOAT
    assert info.value.context == "process_factor"


def test_nesting_at_the_limit_evaluates():
    from haifa_basic.parser import MAX_NESTING

    assert _eval("(" * MAX_NESTING + "2" + ")" * MAX_NESTING) == 2.0
    assert _eval("-" * MAX_NESTING + "3") == 3.0
