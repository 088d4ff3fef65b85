import pytest

from loxlang.expressions import Binary, Expr, Grouping, Literal, Unary, Visitor
from loxlang.tokens import Token, TokenType


class RecordingVisitor(Visitor[str]):
    def __init__(self):
        self.seen = []

    def visit_binary(self, binary):
        self.seen.append(binary)
        return "binary"

    def visit_grouping(self, grouping):
        self.seen.append(grouping)
        return "grouping"

    def visit_literal(self, literal):
        self.seen.append(literal)
        return "literal"

    def visit_unary(self, unary):
        self.seen.append(unary)
        return "unary"


MINUS = Token(TokenType.MINUS, "-", 1)
PLUS = Token(TokenType.PLUS, "+", 1)


@pytest.mark.parametrize(
    "node, expected",
    [
        (Binary(Literal(1.0), PLUS, Literal(2.0)), "binary"),
        (Grouping(Literal(None)), "grouping"),
        (Literal("text"), "literal"),
        (Unary(MINUS, Literal(3.0)), "unary"),
    ],
)
def test_accept_dispatches_to_matching_method(node, expected):
    visitor = RecordingVisitor()
    assert node.accept(visitor) == expected
    assert visitor.seen == [node]


def test_accept_does_not_descend_by_itself():
    inner = Literal(True)
    outer = Grouping(inner)
    visitor = RecordingVisitor()
    outer.accept(visitor)
    assert visitor.seen == [outer]


def test_nodes_keep_their_parts():
    left = Literal(1.0)
    right = Literal(2.0)
    node = Binary(left, PLUS, right)
    assert node.left is left
    assert node.operator is PLUS
    assert node.right is right


def test_nodes_compare_by_value():
    assert Unary(MINUS, Literal(5.0)) == Unary(MINUS, Literal(5.0))
    assert Literal(5.0) != Literal("5")


def test_expr_is_abstract():
    with pytest.raises(TypeError):
        Expr()


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()