"""
Expression Language Lexer

Tokenizes source code into a stream of tokens.
"""

import logging
from typing import List, Optional

import numpy as np

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIXED,
    LiteralValue, Number, Str, Identifier,
)
from .errors import UnexpectedCharacter, UnterminatedString


logger = logging.getLogger(__name__)


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return c.isalpha()


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Lexer:
    """Lexical analyzer for expression language source code."""

    def __init__(self, source: str):
        """
        Initialize the lexer.

        Args:
            source: Source code to tokenize
        """
        self.source = source
        self.tokens: List[Token] = []
        self.start = 0      # Start of current token
        self.current = 0    # Current position
        self.line = 1       # Current line number

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens terminated by a single EOF token; repeated
            calls return the same list

        Raises:
            UnexpectedCharacter: On a character outside the grammar
            UnterminatedString: If input ends inside a string literal
        """
        if self.tokens and self.tokens[-1].type == TokenType.EOF:
            return self.tokens

        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("scanned %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def scan_token(self) -> None:
        """Scan the next token."""
        c = self.advance()

        # Whitespace
        if c in ' \t\r':
            return

        if c == '\n':
            self.line += 1
            return

        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIXED:
            single, double = EQUAL_SUFFIXED[c]
            self.add_token(double if self.match('=') else single)
        elif c == '/':
            if self.match('/'):
                # Line comment; the newline is left for the main loop
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            elif self.match('*'):
                self.block_comment()
            else:
                self.add_token(TokenType.SLASH)
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            raise UnexpectedCharacter(self.line, c)

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the next character without consuming it."""
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def match(self, expected: str) -> bool:
        """Consume the current character if it matches expected."""
        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def is_at_end(self) -> bool:
        """Check if we've reached the end of the source."""
        return self.current >= len(self.source)

    def add_token(self, type: TokenType, literal: Optional[LiteralValue] = None) -> None:
        """Add a token spanning start..current to the token list."""
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(type, lexeme, literal, self.line))

    def string(self) -> None:
        """Scan a string literal. No escape sequences are processed."""
        start_line = self.line

        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == '\n':
                self.line += 1
            self.advance()

        if self.is_at_end():
            raise UnterminatedString(start_line)

        # Consume closing quote
        self.advance()

        value = self.source[self.start + 1:self.current - 1]
        self.add_token(TokenType.STRING, Str(value))

    def number(self) -> None:
        """Scan a number literal."""
        while is_digit(self.peek()):
            self.advance()

        # Fractional part; a bare trailing '.' is left for the next token
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()  # Consume '.'
            while is_digit(self.peek()):
                self.advance()

        value = np.float64(self.source[self.start:self.current])
        self.add_token(TokenType.NUMBER, Number(value))

    def identifier(self) -> None:
        """Scan an identifier or keyword."""
        while is_alphanumeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
        self.add_token(token_type, Identifier(text))

    def block_comment(self) -> None:
        """Skip a block comment /* ... */. Block comments do not nest."""
        while not self.is_at_end():
            if self.peek() == '*' and self.peek_next() == '/':
                self.advance()
                self.advance()
                return
            if self.peek() == '\n':
                self.line += 1
            self.advance()


def scan(source: str) -> List[Token]:
    """Scan source text into a token list ending with EOF."""
    return Lexer(source).tokenize()
