"""
Expression Language Front End

Scans source text into tokens and parses them into an expression AST
for downstream consumers (printers, evaluators, compilers).
"""

from typing import Callable

from .tokens import Token, TokenType, Number, Str, Identifier
from .lexer import Lexer, scan
from .ast import *
from .parser import Parser, parse
from .errors import (
    FrontendError, FileNotFound, FileNotUtf8, LexError,
    UnexpectedCharacter, UnterminatedString, ParseError, report,
)

__version__ = "0.1.0"
__all__ = [
    "Token",
    "TokenType",
    "Number",
    "Str",
    "Identifier",
    "Lexer",
    "scan",
    "Parser",
    "parse",
    "Expression",
    "LiteralExpr",
    "GroupingExpr",
    "UnaryExpr",
    "BinaryExpr",
    "ASTVisitor",
    "ASTPrinter",
    "FrontendError",
    "FileNotFound",
    "FileNotUtf8",
    "LexError",
    "UnexpectedCharacter",
    "UnterminatedString",
    "ParseError",
    "parse_source",
    "parse_file",
    "print_source",
]


def parse_source(source: str, report: Callable[[str], None] = report) -> Expression:
    """
    Scan and parse source code into an expression.

    Args:
        source: Source code string
        report: Diagnostic sink for parse errors

    Returns:
        Root expression node

    Raises:
        LexError: If scanning fails
        ParseError: If parsing fails
    """
    tokens = Lexer(source).tokenize()
    return Parser(tokens, report).parse()


def parse_file(filepath: str, report: Callable[[str], None] = report) -> Expression:
    """
    Scan and parse a UTF-8 source file.

    Args:
        filepath: Path to the source file

    Raises:
        FileNotFound: If the file cannot be opened
        FileNotUtf8: If the file is not valid UTF-8
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        raise FileNotFound(str(filepath)) from e
    except UnicodeDecodeError as e:
        raise FileNotUtf8(str(filepath)) from e
    return parse_source(source, report)


def print_source(source: str, report: Callable[[str], None] = report) -> str:
    """Parse source code and render it with ASTPrinter."""
    return ASTPrinter().print(parse_source(source, report))
