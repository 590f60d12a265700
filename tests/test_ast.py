"""
AST Tests

Tests for expression nodes, visitor dispatch and the AST printer.
"""

import dataclasses

import pytest
from frontend import parse_source
from frontend.ast import (
    Expression, LiteralExpr, GroupingExpr, UnaryExpr, BinaryExpr,
    ASTVisitor, ASTPrinter,
)
from frontend.tokens import Token, TokenType, Number, Str, Identifier


PLUS = Token(TokenType.PLUS, "+", None, 1)
MINUS = Token(TokenType.MINUS, "-", None, 1)


class NodeCounter(ASTVisitor):
    """Counts nodes by variant."""

    def __init__(self):
        self.counts = {}

    def _count(self, name):
        self.counts[name] = self.counts.get(name, 0) + 1

    def visit_literal(self, node):
        self._count("literal")

    def visit_grouping(self, node):
        self._count("grouping")
        node.expression.accept(self)

    def visit_unary(self, node):
        self._count("unary")
        node.right.accept(self)

    def visit_binary(self, node):
        self._count("binary")
        node.left.accept(self)
        node.right.accept(self)


class Calculator(ASTVisitor):
    """Evaluates arithmetic over number literals."""

    def visit_literal(self, node):
        if not isinstance(node.value, Number):
            raise ValueError(f"not a number: {node.value}")
        return float(node.value.value)

    def visit_grouping(self, node):
        return node.expression.accept(self)

    def visit_unary(self, node):
        return -node.right.accept(self)

    def visit_binary(self, node):
        left = node.left.accept(self)
        right = node.right.accept(self)
        return {
            TokenType.PLUS: left + right,
            TokenType.MINUS: left - right,
            TokenType.STAR: left * right,
            TokenType.SLASH: left / right if right else float("inf"),
        }[node.operator.type]


# =============================================================================
# Node Tests
# =============================================================================

class TestNodes:
    """Expression node tests."""

    def test_expression_is_abstract(self):
        with pytest.raises(TypeError):
            Expression()

    def test_visitor_is_abstract(self):
        with pytest.raises(TypeError):
            ASTVisitor()

    def test_nodes_are_immutable(self):
        node = LiteralExpr(Number(1.0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = Number(2.0)

    def test_structural_equality(self):
        a = BinaryExpr(LiteralExpr(Number(1.0)), PLUS, LiteralExpr(Number(2.0)))
        b = BinaryExpr(LiteralExpr(Number(1.0)), PLUS, LiteralExpr(Number(2.0)))
        assert a == b
        assert a != BinaryExpr(LiteralExpr(Number(1.0)), MINUS, LiteralExpr(Number(2.0)))

    def test_literal_values_compare_by_variant(self):
        assert Str("1") != Identifier("1")
        assert Identifier("x") == Identifier("x")


# =============================================================================
# Visitor Tests
# =============================================================================

class TestVisitorDispatch:
    """Double dispatch tests."""

    @pytest.mark.parametrize("node,method", [
        (LiteralExpr(None), "visit_literal"),
        (GroupingExpr(LiteralExpr(None)), "visit_grouping"),
        (UnaryExpr(MINUS, LiteralExpr(None)), "visit_unary"),
        (BinaryExpr(LiteralExpr(None), PLUS, LiteralExpr(None)), "visit_binary"),
    ])
    def test_accept_calls_matching_method(self, node, method):
        class Recorder(ASTVisitor):
            def visit_literal(self, node):
                return ("visit_literal", node)

            def visit_grouping(self, node):
                return ("visit_grouping", node)

            def visit_unary(self, node):
                return ("visit_unary", node)

            def visit_binary(self, node):
                return ("visit_binary", node)

        assert node.accept(Recorder()) == (method, node)

    def test_counts_every_node(self):
        counter = NodeCounter()
        parse_source("-(1 + 2) * 3").accept(counter)
        assert counter.counts == {"binary": 2, "unary": 1, "grouping": 1, "literal": 3}

    def test_consumer_chosen_result(self):
        assert parse_source("-(1 + 2) * 3").accept(Calculator()) == -9.0

    def test_visitor_errors_propagate(self):
        with pytest.raises(ValueError, match="not a number"):
            parse_source('1 + "two"').accept(Calculator())


# =============================================================================
# Printer Tests
# =============================================================================

class TestASTPrinter:
    """AST printer tests."""

    def test_literals(self):
        printer = ASTPrinter()
        assert printer.print(LiteralExpr(Number(1.5))) == "1.5"
        assert printer.print(LiteralExpr(Str("hi"))) == '"hi"'
        assert printer.print(LiteralExpr(Identifier("true"))) == "true"
        assert printer.print(LiteralExpr(None)) == "nil"

    def test_nested_expression(self):
        expr = BinaryExpr(
            UnaryExpr(MINUS, LiteralExpr(Number(123.0))),
            Token(TokenType.STAR, "*", None, 1),
            GroupingExpr(LiteralExpr(Number(45.67))),
        )
        assert ASTPrinter().print(expr) == "(* (- 123.0) (group 45.67))"

    def test_parsed_source(self):
        assert ASTPrinter().print(parse_source("1 + 2 * 3")) == "(+ 1.0 (* 2.0 3.0))"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
