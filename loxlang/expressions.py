"""Expression syntax tree nodes and the visitor that walks them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from loxlang.tokens import Number, Token

T = TypeVar("T")

LiteralValue = Union[str, Number, bool, None]
"""A literal's value: a string, a number, a boolean or nil (None)."""


class Visitor(ABC, Generic[T]):
    """Operations over expressions, one method per kind of node."""

    @abstractmethod
    def visit_binary(self, binary: Binary) -> T:
        """Handle a binary expression."""

    @abstractmethod
    def visit_grouping(self, grouping: Grouping) -> T:
        """Handle a parenthesised expression."""

    @abstractmethod
    def visit_literal(self, literal: Literal) -> T:
        """Handle a literal value."""

    @abstractmethod
    def visit_unary(self, unary: Unary) -> T:
        """Handle a unary expression."""


class Expr(ABC):
    """Base class of every expression node."""

    @abstractmethod
    def accept(self, visitor: Visitor[T]) -> T:
        """Dispatch to the visitor method matching this node."""


@dataclass(frozen=True)
class Binary(Expr):
    """Two operands joined by an infix operator."""

    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_binary(self)


@dataclass(frozen=True)
class Grouping(Expr):
    """An expression wrapped in parentheses."""

    expression: Expr

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_grouping(self)


@dataclass(frozen=True)
class Literal(Expr):
    """A constant value written in the source."""

    value: LiteralValue

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_literal(self)


@dataclass(frozen=True)
class Unary(Expr):
    """A prefix operator applied to one operand."""

    operator: Token
    right: Expr

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_unary(self)