"""
Expression Language Parser

Recursive descent parser that produces an expression AST from tokens.
"""

from typing import Callable, List
from .tokens import (
    Token, TokenType, STATEMENT_KEYWORDS,
    TRUE_LITERAL, FALSE_LITERAL, NIL_LITERAL,
)
from .ast import Expression, LiteralExpr, GroupingExpr, UnaryExpr, BinaryExpr
from .errors import ParseError, report as default_report


class Parser:
    """Recursive descent parser over the expression precedence ladder."""

    def __init__(self, tokens: List[Token],
                 report: Callable[[str], None] = default_report):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
            report: Diagnostic sink called with each error message
                before the ParseError is raised
        """
        self.tokens = tokens
        self.current = 0
        self.report = report

    def parse(self) -> Expression:
        """
        Parse a single expression from the token stream.

        Tokens after the expression are left unconsumed.

        Returns:
            Root expression node

        Raises:
            ParseError: If the tokens do not form an expression or nest
                deeper than the interpreter stack allows
        """
        try:
            return self.expression()
        except RecursionError:
            raise self.error(self.peek(), "Expression nests too deeply.") from None

    # =========================================================================
    # Expressions
    # =========================================================================

    def expression(self) -> Expression:
        """Parse a comma sequence; only the last operand is kept."""
        expr = self.equality()

        while self.match(TokenType.COMMA):
            expr = self.equality()

        return expr

    def equality(self) -> Expression:
        """Parse an equality expression."""
        return self.binary(self.comparison,
                           TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def comparison(self) -> Expression:
        """Parse a comparison expression."""
        return self.binary(self.term,
                           TokenType.GREATER, TokenType.GREATER_EQUAL,
                           TokenType.LESS, TokenType.LESS_EQUAL)

    def term(self) -> Expression:
        """Parse addition/subtraction."""
        return self.binary(self.factor, TokenType.PLUS, TokenType.MINUS)

    def factor(self) -> Expression:
        """Parse multiplication/division."""
        return self.binary(self.unary, TokenType.STAR, TokenType.SLASH)

    def binary(self, operand: Callable[[], Expression],
               *types: TokenType) -> Expression:
        """Fold a left-associative run of operators at one precedence level."""
        expr = operand()

        while self.match(*types):
            operator = self.previous()
            right = operand()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def unary(self) -> Expression:
        """Parse unary expressions."""
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            right = self.unary()
            return UnaryExpr(operator, right)

        return self.primary()

    def primary(self) -> Expression:
        """Parse primary expressions."""
        if self.match(TokenType.FALSE):
            return LiteralExpr(FALSE_LITERAL)
        if self.match(TokenType.TRUE):
            return LiteralExpr(TRUE_LITERAL)
        if self.match(TokenType.NIL):
            return LiteralExpr(NIL_LITERAL)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return LiteralExpr(self.previous().literal)

        # Grouped expression
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return GroupingExpr(expr)

        raise self.error(self.peek(), "Expect expression.")

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types and advance."""
        for type in types:
            if self.check(type):
                self.advance()
                return True
        return False

    def check(self, type: TokenType) -> bool:
        """Check if current token is of given type."""
        if self.is_at_end():
            return False
        return self.peek().type == type

    def advance(self) -> Token:
        """Consume and return the current token."""
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        """Return the current token."""
        return self.tokens[self.current]

    def previous(self) -> Token:
        """Return the previous token."""
        return self.tokens[self.current - 1]

    def consume(self, type: TokenType, message: str) -> Token:
        """Consume a token of the expected type or raise an error."""
        if self.check(type):
            return self.advance()

        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        """Report a diagnostic for token and return the error to raise."""
        if token.type == TokenType.EOF:
            description = f"{token.line} at end. {message}"
        else:
            description = f"{token.line} at `{token.lexeme}`. {message}"
        self.report(description)
        return ParseError(description)

    def synchronize(self) -> None:
        """Discard tokens until a statement boundary after an error."""
        self.advance()

        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return

            if self.peek().type in STATEMENT_KEYWORDS:
                return

            self.advance()


def parse(tokens: List[Token],
          report: Callable[[str], None] = default_report) -> Expression:
    """Parse a token list into a single expression."""
    return Parser(tokens, report).parse()
