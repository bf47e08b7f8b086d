"""
Abstract Syntax Tree (AST) node types for call expressions.

The AST is produced by the parser and consumed by the dispatcher.
A call node holds an ordered sequence of parameters, each either a
literal value or a nested call node.
"""

from abc import ABC
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Union

from .values import FloatValue, IntegerValue, TextValue, Value

# ============================================================
# AST Node Types
# ============================================================


@dataclass(frozen=True)
class AstNodeBase(ABC):
    """Base class for all AST nodes."""

    position: int
    """Position in source expression (for error reporting)."""


@dataclass(frozen=True)
class LiteralNode(AstNodeBase):
    """Literal parameter node."""

    value: Value

    @property
    def type(self) -> Literal["Literal"]:
        return "Literal"


@dataclass(frozen=True)
class CallNode(AstNodeBase):
    """Function call node."""

    name: str
    params: Sequence["Parameter"]

    @property
    def type(self) -> Literal["Call"]:
        return "Call"


# Union type for a single argument slot
Parameter = Union[LiteralNode, CallNode]

AstNode = Parameter


# ============================================================
# Literal Extraction
# ============================================================


def extract_literal(param: Parameter) -> Optional[Value]:
    """Returns the wrapped value if the parameter is a literal, else None."""
    if isinstance(param, LiteralNode):
        return param.value
    return None


def literal_values(node: CallNode) -> List[Value]:
    """
    Returns the literal parameters of a call in source order.

    Nested call parameters are skipped, not evaluated.
    """
    values: List[Value] = []
    for param in node.params:
        value = extract_literal(param)
        if value is not None:
            values.append(value)
    return values


# ============================================================
# AST Utilities
# ============================================================


def count_ast_nodes(node: AstNode) -> int:
    """Counts the total number of nodes in an AST."""
    if node.type == "Literal":
        return 1

    count = 1
    for param in node.params:
        count += count_ast_nodes(param)
    return count


def calculate_ast_depth(node: AstNode) -> int:
    """Calculates the maximum depth of an AST."""
    if node.type == "Literal":
        return 1

    max_param_depth = 0
    for param in node.params:
        max_param_depth = max(max_param_depth, calculate_ast_depth(param))
    return 1 + max_param_depth


def ast_to_string(node: AstNode, indent: int = 0) -> str:
    """Returns a human-readable representation of an AST node for debugging."""
    prefix = "  " * indent

    if isinstance(node, LiteralNode):
        value = node.value
        if isinstance(value, TextValue):
            return f"{prefix}Text: '{value.value}'"
        if isinstance(value, FloatValue):
            return f"{prefix}Float: {value.value!r}"
        if isinstance(value, IntegerValue):
            return f"{prefix}Integer: {value.value}"
        return f"{prefix}Unknown: {value}"

    if isinstance(node, CallNode):
        if not node.params:
            return f"{prefix}Call: {node.name}"
        params_str = "\n".join(ast_to_string(p, indent + 1) for p in node.params)
        return f"{prefix}Call: {node.name}\n{params_str}"

    return f"{prefix}Unknown: {node}"
