"""
Character scanner and lexing helpers for call expressions.

The parser is scannerless: it drives a Scanner directly and asks the
lexing helpers for one token at a time. Each helper either returns a
token and advances the scanner, or returns None and leaves the scanner
where it was.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .limits import ExpressionLimits, check_string_length


class TokenType(Enum):
    """Token types produced by the lexing helpers."""

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    STRING = "STRING"
    IDENTIFIER = "IDENTIFIER"


@dataclass
class Token:
    """A token produced by a lexing helper."""

    type: TokenType
    value: str
    position: int


STRING_QUOTE = "'"


def is_digit(ch: str) -> bool:
    """Checks if a character is an ASCII digit."""
    return "0" <= ch <= "9"


def is_identifier_part(ch: str) -> bool:
    """Checks if a character can appear in an identifier."""
    return ch.isalnum() or ch == "_"


def is_whitespace(ch: str) -> bool:
    """Checks if a character is whitespace."""
    return ch in (" ", "\t", "\n", "\r")


class Scanner:
    """Cursor over an expression string."""

    def __init__(self, source: str):
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = value

    @property
    def remainder(self) -> str:
        return self._source[self._position :]

    def is_at_end(self) -> bool:
        return self._position >= len(self._source)

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self._source[self._position]

    def advance(self) -> str:
        ch = self._source[self._position]
        self._position += 1
        return ch

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self._source[self._position] != expected:
            return False
        self._position += 1
        return True

    def skip_whitespace(self) -> None:
        while not self.is_at_end() and is_whitespace(self.peek()):
            self._position += 1


def lex_identifier(scanner: Scanner) -> Optional[Token]:
    """Lexes a maximal run of alphanumerics and underscores."""
    start_position = scanner.position

    while not scanner.is_at_end() and is_identifier_part(scanner.peek()):
        scanner.advance()

    if scanner.position == start_position:
        return None

    value = scanner.source[start_position : scanner.position]
    return Token(TokenType.IDENTIFIER, value, start_position)


def lex_number(scanner: Scanner) -> Optional[Token]:
    """
    Lexes a number: digits, optionally followed by '.' and more digits.

    A '.' makes the token a FLOAT even without fractional digits ("3.").
    """
    start_position = scanner.position

    while is_digit(scanner.peek()):
        scanner.advance()

    if scanner.position == start_position:
        return None

    token_type = TokenType.INTEGER
    if scanner.match("."):
        token_type = TokenType.FLOAT
        while is_digit(scanner.peek()):
            scanner.advance()

    value = scanner.source[start_position : scanner.position]
    return Token(token_type, value, start_position)


def lex_string(
    scanner: Scanner, limits: Optional[ExpressionLimits] = None
) -> Optional[Token]:
    """
    Lexes a single-quoted string literal.

    The body is everything up to the next quote; there are no escapes.
    An unterminated literal is rejected and the scanner is restored.
    """
    start_position = scanner.position

    if not scanner.match(STRING_QUOTE):
        return None

    body_start = scanner.position
    while not scanner.is_at_end() and scanner.peek() != STRING_QUOTE:
        scanner.advance()

    if scanner.is_at_end():
        scanner.position = start_position
        return None

    value = scanner.source[body_start : scanner.position]

    # Consume closing quote
    scanner.advance()

    check_string_length(len(value), limits, start_position, scanner.source)
    return Token(TokenType.STRING, value, start_position)

