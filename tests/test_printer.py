import pytest

from loxlang.expressions import Binary, Grouping, Literal, Unary
from loxlang.printer import AstPrinter, format_number, print_ast
from loxlang.tokens import Token, TokenType


def test_simple_syntax_tree():
    expression = Binary(
        Unary(Token(TokenType.MINUS, "-", 1), Literal(123.0)),
        Token(TokenType.STAR, "*", 1),
        Grouping(Literal(45.67)),
    )
    assert AstPrinter().print(expression) == "(* (- 123) (group 45.67))"
    assert print_ast(expression) == "(* (- 123) (group 45.67))"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        ("hello", "hello"),
        (123.0, "123"),
        (45.67, "45.67"),
    ],
)
def test_literals(value, expected):
    assert print_ast(Literal(value)) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (123.0, "123"),
        (45.67, "45.67"),
        (0.0, "0"),
        (-0.0, "-0"),
        (0.5, "0.5"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (float("nan"), "NaN"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_round_trips():
    for value in (0.1, 2.5, 1234.5678, 3.0e15, 7e-5):
        assert float(format_number(value)) == value


def test_nested_groupings():
    expr = Grouping(Grouping(Literal(1.0)))
    assert print_ast(expr) == "(group (group 1))"


def test_unary_on_literal():
    expr = Unary(Token(TokenType.BANG, "!", 1), Literal(True))
    assert print_ast(expr) == "(! true)"