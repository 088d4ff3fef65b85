"""Renders expression trees as parenthesised prefix text."""

from __future__ import annotations

import math
from decimal import Decimal

from loxlang.expressions import Binary, Expr, Grouping, Literal, Unary, Visitor


def format_number(value: float) -> str:
    """Format a number plainly: no exponent, no trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class AstPrinter(Visitor[str]):
    """Visitor that produces a Lisp-like rendering of an expression."""

    def print(self, expr: Expr) -> str:
        """Return the rendering of ``expr``."""
        return expr.accept(self)

    def visit_binary(self, binary: Binary) -> str:
        return self._parenthesize(binary.operator.lexeme, binary.left, binary.right)

    def visit_grouping(self, grouping: Grouping) -> str:
        return self._parenthesize("group", grouping.expression)

    def visit_literal(self, literal: Literal) -> str:
        value = literal.value
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return value
        return format_number(value)

    def visit_unary(self, unary: Unary) -> str:
        return self._parenthesize(unary.operator.lexeme, unary.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name, *(self.print(expr) for expr in exprs)]
        return "(" + " ".join(parts) + ")"


def print_ast(expr: Expr) -> str:
    """Return the parenthesised rendering of ``expr``."""
    return AstPrinter().print(expr)