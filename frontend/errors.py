"""
Expression Language Front End Errors

Defines exception classes for file loading, lexing and parsing errors,
and the default diagnostic sink.
"""

import logging
from typing import Optional


logger = logging.getLogger("frontend")


def report(message: str) -> None:
    """Default diagnostic sink: log the message at error level."""
    logger.error(message)


class FrontendError(Exception):
    """Base exception for all front end errors."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location information."""
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


class FileNotFound(FrontendError):
    """Raised when a source file cannot be opened."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class FileNotUtf8(FrontendError):
    """Raised when a source file is not valid UTF-8."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File is not valid UTF-8: {path}")


class LexError(FrontendError):
    """Raised for errors during scanning."""
    pass


class UnexpectedCharacter(LexError):
    """Raised when the lexer meets a character outside the grammar."""

    def __init__(self, line: int, character: str = ''):
        self.character = character
        message = "Unexpected character"
        if character:
            message = f"Unexpected character: {character!r}"
        super().__init__(message, line)


class UnterminatedString(LexError):
    """Raised when input ends inside a string literal."""

    def __init__(self, line: int):
        super().__init__("Unterminated string", line)


class ParseError(FrontendError):
    """Raised when the parser cannot match the grammar.

    The description already embeds the line and the offending lexeme
    (or "at end"), so no separate location prefix is added.
    """

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)
