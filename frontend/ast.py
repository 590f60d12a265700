"""
Expression Language Abstract Syntax Tree

Defines expression node classes, the visitor interface every tree
consumer implements, and a printer for debugging.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional
from .tokens import Token, LiteralValue


# =============================================================================
# Base Classes
# =============================================================================

class Expression(ABC):
    """Base class for expression nodes."""

    @abstractmethod
    def accept(self, visitor: 'ASTVisitor') -> Any:
        """Accept a visitor for traversal."""
        pass


# =============================================================================
# Expressions
# =============================================================================

@dataclass(frozen=True)
class LiteralExpr(Expression):
    """Literal value expression (number, string, true, false, nil)."""
    value: Optional[LiteralValue]

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_literal(self)


@dataclass(frozen=True)
class GroupingExpr(Expression):
    """Parenthesized expression."""
    expression: Expression

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_grouping(self)


@dataclass(frozen=True)
class UnaryExpr(Expression):
    """Unary operator expression (!, -)."""
    operator: Token
    right: Expression

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_unary(self)


@dataclass(frozen=True)
class BinaryExpr(Expression):
    """Binary operator expression."""
    left: Expression
    operator: Token
    right: Expression

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_binary(self)


# =============================================================================
# Visitor Interface
# =============================================================================

class ASTVisitor(ABC):
    """Visitor interface for AST traversal.

    Each method returns whatever the consumer chooses; exceptions raised
    inside a visit method propagate out of ``accept`` unchanged.
    """

    @abstractmethod
    def visit_literal(self, node: LiteralExpr) -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, node: GroupingExpr) -> Any:
        pass

    @abstractmethod
    def visit_unary(self, node: UnaryExpr) -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: BinaryExpr) -> Any:
        pass


# =============================================================================
# AST Printer (for debugging)
# =============================================================================

class ASTPrinter(ASTVisitor):
    """Prints an expression in fully parenthesized prefix form."""

    def print(self, node: Expression) -> str:
        return node.accept(self)

    def parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"

    def visit_literal(self, node: LiteralExpr) -> str:
        if node.value is None:
            return "nil"
        return str(node.value)

    def visit_grouping(self, node: GroupingExpr) -> str:
        return self.parenthesize("group", node.expression)

    def visit_unary(self, node: UnaryExpr) -> str:
        return self.parenthesize(node.operator.lexeme, node.right)

    def visit_binary(self, node: BinaryExpr) -> str:
        return self.parenthesize(node.operator.lexeme, node.left, node.right)
