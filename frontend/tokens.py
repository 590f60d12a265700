"""
Expression Language Token Definitions

Defines all token types, literal payloads and the Token class for lexical analysis.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np


class TokenType(Enum):
    """All token types in the expression language."""

    # Single-character punctuation
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    STAR = auto()           # *
    SLASH = auto()          # /

    # One or two character operators
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=

    # Literals
    NUMBER = auto()
    STRING = auto()
    IDENTIFIER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # Special
    EOF = auto()


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# Operators that may be followed by '=': (one-char kind, two-char kind)
EQUAL_SUFFIXED = {
    '!': (TokenType.BANG, TokenType.BANG_EQUAL),
    '=': (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    '<': (TokenType.LESS, TokenType.LESS_EQUAL),
    '>': (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

# Keyword mapping
KEYWORDS = {
    'and': TokenType.AND,
    'class': TokenType.CLASS,
    'else': TokenType.ELSE,
    'false': TokenType.FALSE,
    'for': TokenType.FOR,
    'fun': TokenType.FUN,
    'if': TokenType.IF,
    'nil': TokenType.NIL,
    'or': TokenType.OR,
    'print': TokenType.PRINT,
    'return': TokenType.RETURN,
    'super': TokenType.SUPER,
    'this': TokenType.THIS,
    'true': TokenType.TRUE,
    'var': TokenType.VAR,
    'while': TokenType.WHILE,
}

# Keywords that begin a statement; the parser resynchronizes on these.
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


# =============================================================================
# Literal Values
# =============================================================================

@dataclass(frozen=True)
class Number:
    """Numeric literal payload."""
    value: np.float64

    def __str__(self) -> str:
        return str(float(self.value))


@dataclass(frozen=True)
class Str:
    """String literal payload (the text between the quotes)."""
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Identifier:
    """Identifier or keyword text."""
    name: str

    def __str__(self) -> str:
        return self.name


LiteralValue = Union[Number, Str, Identifier]

TRUE_LITERAL = Identifier('true')
FALSE_LITERAL = Identifier('false')
NIL_LITERAL = Identifier('nil')


@dataclass(frozen=True)
class Token:
    """Represents a single token from the source code."""

    type: TokenType
    lexeme: str
    literal: Optional[LiteralValue]
    line: int

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"

    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.NUMBER, TokenType.STRING,
                             TokenType.TRUE, TokenType.FALSE, TokenType.NIL)

    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in (
            TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH,
            TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
        )
