"""
Parser for call expressions.

Parses source text directly into an Abstract Syntax Tree (AST) using
recursive descent with ordered choice.

Grammar:
    expr       := ws* identifier '(' ws* arglist? ws* ')'
    arglist    := param (ws* ',' param)*
    param      := ws* (number | string | expr)
    number     := digit+ ('.' digit*)?
    string     := "'" (any char except "'")* "'"
    identifier := (alnum | '_')+

Each rule returns its node, or None when it does not match. A rejected
rule leaves the scanner where it started, so the caller can try the next
alternative. The parser remembers the furthest rejection and reports it
as a ParseError if the whole expression fails to parse.
"""

import math
from typing import List, Optional, Tuple

from .ast import CallNode, LiteralNode, Parameter
from .errors import InternalParserError, ParseError
from .lexer import (
    STRING_QUOTE,
    Scanner,
    Token,
    TokenType,
    lex_identifier,
    lex_number,
    lex_string,
)
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
    check_ast_depth,
    check_ast_node_count,
    check_expression_length,
    check_function_arg_count,
)
from .values import INT64_MAX, FloatValue, IntegerValue, TextValue, Value


class Parser:
    """Parser for call expression strings."""

    def __init__(
        self,
        source: str,
        limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS,
    ):
        self._source = source
        self._limits = limits
        self._scanner = Scanner(source)
        self._depth = 0
        self._node_count = 0
        self._failure: Optional[Tuple[int, str]] = None

    def parse(self) -> CallNode:
        """Parses the whole source into a call node."""
        node, remainder = self.parse_prefix()

        if remainder.strip(" \t\r\n"):
            self._scanner.skip_whitespace()
            raise ParseError(
                f"Unexpected input after expression: {self._scanner.remainder!r}",
                self._scanner.position,
                self._source,
            )

        return node

    def parse_prefix(self) -> Tuple[CallNode, str]:
        """
        Parses one call from the start of the source.

        Returns:
            The call node and the unconsumed remainder of the source
        """
        check_expression_length(self._source, self._limits)

        node = self._parse_call()
        if node is None:
            raise self._failure_error()

        return node, self._scanner.remainder

    # ============================================================
    # Failure Tracking
    # ============================================================

    def _reject(self, position: int, message: str) -> None:
        """Records a rejection, keeping the one furthest into the input."""
        if self._failure is None or position > self._failure[0]:
            self._failure = (position, message)

    def _failure_error(self) -> ParseError:
        if self._failure is None:
            return ParseError("Expected function call", 0, self._source)
        position, message = self._failure
        return ParseError(message, position, self._source)

    def _count_node(self, position: int) -> None:
        self._node_count += 1
        check_ast_node_count(self._node_count, self._limits, position, self._source)

    # ============================================================
    # Rules
    # ============================================================

    def _parse_call(self) -> Optional[CallNode]:
        """Parses: ws* identifier '(' arguments"""
        scanner = self._scanner
        start = scanner.position

        scanner.skip_whitespace()
        name_token = lex_identifier(scanner)
        if name_token is None:
            self._reject(scanner.position, "Expected function name")
            scanner.position = start
            return None

        if not scanner.match("("):
            self._reject(scanner.position, "Expected '(' after function name")
            scanner.position = start
            return None

        self._depth += 1
        try:
            check_ast_depth(
                self._depth, self._limits, name_token.position, self._source
            )
            self._count_node(name_token.position)
            params = self._parse_arguments()
        finally:
            self._depth -= 1

        if params is None:
            scanner.position = start
            return None

        check_function_arg_count(
            len(params), self._limits, name_token.position, self._source
        )
        return CallNode(
            position=name_token.position,
            name=name_token.value,
            params=tuple(params),
        )

    def _parse_arguments(self) -> Optional[List[Parameter]]:
        """Parses the argument list and closing paren (opening paren consumed)."""
        scanner = self._scanner
        params: List[Parameter] = []

        scanner.skip_whitespace()
        if scanner.match(")"):
            return params

        while True:
            param = self._parse_parameter()
            if param is None:
                return None
            params.append(param)

            scanner.skip_whitespace()
            if scanner.match(","):
                continue
            if scanner.match(")"):
                return params

            self._reject(scanner.position, "Expected ',' or ')' after argument")
            return None

    def _parse_parameter(self) -> Optional[Parameter]:
        """Parses one parameter: number, then string, then nested call."""
        scanner = self._scanner
        start = scanner.position
        scanner.skip_whitespace()

        number_token = lex_number(scanner)
        if number_token is not None:
            self._count_node(number_token.position)
            return LiteralNode(
                position=number_token.position,
                value=self._number_value(number_token),
            )

        string_token = lex_string(scanner, self._limits)
        if string_token is not None:
            self._count_node(string_token.position)
            return LiteralNode(
                position=string_token.position,
                value=TextValue(string_token.value),
            )
        if scanner.peek() == STRING_QUOTE:
            self._reject(scanner.position, "Unterminated string")

        call = self._parse_call()
        if call is not None:
            return call

        self._reject(scanner.position, "Expected number, string or function call")
        scanner.position = start
        return None

    # ============================================================
    # Literal Conversion
    # ============================================================

    def _number_value(self, token: Token) -> Value:
        """Converts a lexed number token to an Integer or Float value."""
        digits = token.value.lstrip("0") or "0"
        if token.type == TokenType.INTEGER and len(digits) > 19:
            raise ParseError(
                "Integer literal out of 64-bit range", token.position, self._source
            )

        try:
            if token.type == TokenType.FLOAT:
                number = float(token.value)
            else:
                integer = int(digits)
        except ValueError as e:
            raise InternalParserError(
                f"Lexed number {token.value!r} could not be converted: {e}",
                token.position,
                self._source,
            ) from e

        if token.type == TokenType.FLOAT:
            if not math.isfinite(number):
                raise ParseError("Invalid number", token.position, self._source)
            return FloatValue(number)

        if integer > INT64_MAX:
            raise ParseError(
                "Integer literal out of 64-bit range", token.position, self._source
            )
        return IntegerValue(integer)


def parse(
    source: str, limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS
) -> CallNode:
    """
    Parses an expression string into a call node.

    Args:
        source: The expression string to parse
        limits: Optional expression limits

    Returns:
        The root call node

    Raises:
        ParseError: If the source is not a well-formed call expression
        LimitExceededError: If the expression exceeds the limits
    """
    parser = Parser(source, limits)
    return parser.parse()
