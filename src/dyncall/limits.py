"""
Resource limits for expression parsing.

These limits protect against resource exhaustion and overly
complex expressions.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import LimitExceededError


@dataclass(frozen=True)
class ExpressionLimits:
    """Expression limits configuration."""

    # Maximum expression string length in characters
    max_expression_length: int = 4096

    # Maximum call nesting depth
    max_ast_depth: int = 64

    # Maximum number of AST nodes (calls and literals)
    max_ast_nodes: int = 1024

    # Maximum string literal length
    max_string_length: int = 1024

    # Maximum arguments in a single call
    max_function_args: int = 64


# Default expression limits.
#
# The depth limit stays well below the interpreter recursion limit.
DEFAULT_EXPRESSION_LIMITS = ExpressionLimits()


def check_expression_length(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> None:
    """Validates that expression length is within limits."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if len(expression) > limits.max_expression_length:
        raise LimitExceededError(
            "max_expression_length",
            limits.max_expression_length,
            len(expression),
            0,
            expression,
        )


def check_ast_depth(
    depth: int,
    limits: Optional[ExpressionLimits] = None,
    position: Optional[int] = None,
    expression: Optional[str] = None,
) -> None:
    """Validates call nesting depth during parsing."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if depth > limits.max_ast_depth:
        raise LimitExceededError(
            "max_ast_depth", limits.max_ast_depth, depth, position, expression
        )


def check_ast_node_count(
    count: int,
    limits: Optional[ExpressionLimits] = None,
    position: Optional[int] = None,
    expression: Optional[str] = None,
) -> None:
    """Validates AST node count during parsing."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if count > limits.max_ast_nodes:
        raise LimitExceededError(
            "max_ast_nodes", limits.max_ast_nodes, count, position, expression
        )


def check_string_length(
    length: int,
    limits: Optional[ExpressionLimits] = None,
    position: Optional[int] = None,
    expression: Optional[str] = None,
) -> None:
    """Validates string literal length during lexing."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if length > limits.max_string_length:
        raise LimitExceededError(
            "max_string_length", limits.max_string_length, length, position, expression
        )


def check_function_arg_count(
    count: int,
    limits: Optional[ExpressionLimits] = None,
    position: Optional[int] = None,
    expression: Optional[str] = None,
) -> None:
    """Validates function argument count."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if count > limits.max_function_args:
        raise LimitExceededError(
            "max_function_args", limits.max_function_args, count, position, expression
        )
