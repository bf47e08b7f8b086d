"""
Function-call expression engine.

Parses expressions such as ``sum(1, add(2, 3), 'id=123')`` into a call
tree and dispatches it to native functions registered by name.
"""

# Core types and utilities
from .ast import (
    AstNode,
    AstNodeBase,
    CallNode,
    LiteralNode,
    Parameter,
    ast_to_string,
    calculate_ast_depth,
    count_ast_nodes,
    extract_literal,
    literal_values,
)

# Builtins
from .builtins import (
    BUILTIN_FUNCTIONS,
    create_default_registry,
)
from .config import DispatcherConfig

# Dispatcher
from .dispatcher import (
    Dispatcher,
    EvaluationResult,
    evaluate,
)
from .errors import (
    BuiltinError,
    EvaluationError,
    ExpressionError,
    InternalParserError,
    LimitExceededError,
    ParseError,
    TypeMismatchError,
    UnknownFunctionError,
    ValueConversionError,
    ValueRangeError,
)

# Lexer
from .lexer import (
    Scanner,
    Token,
    TokenType,
)
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
)

# Parser
from .parser import (
    Parser,
    parse,
)

# Registry
from .registry import (
    FunctionRegistry,
    NativeFunction,
)

# Values
from .values import (
    FloatValue,
    IntegerValue,
    TextValue,
    Value,
    ValueBase,
    as_float,
    as_int,
    as_str,
    combine,
    get_type_name,
    to_value,
)

__all__ = [
    # AST types
    "AstNode",
    "AstNodeBase",
    "CallNode",
    "LiteralNode",
    "Parameter",
    "extract_literal",
    "literal_values",
    "count_ast_nodes",
    "calculate_ast_depth",
    "ast_to_string",
    # Values
    "Value",
    "ValueBase",
    "IntegerValue",
    "FloatValue",
    "TextValue",
    "combine",
    "to_value",
    "as_int",
    "as_float",
    "as_str",
    "get_type_name",
    # Errors
    "ExpressionError",
    "ParseError",
    "InternalParserError",
    "LimitExceededError",
    "EvaluationError",
    "UnknownFunctionError",
    "TypeMismatchError",
    "ValueConversionError",
    "ValueRangeError",
    "BuiltinError",
    # Limits
    "ExpressionLimits",
    "DEFAULT_EXPRESSION_LIMITS",
    # Lexer
    "Scanner",
    "Token",
    "TokenType",
    # Parser
    "Parser",
    "parse",
    # Registry
    "FunctionRegistry",
    "NativeFunction",
    # Dispatcher
    "DispatcherConfig",
    "Dispatcher",
    "EvaluationResult",
    "evaluate",
    # Builtins
    "BUILTIN_FUNCTIONS",
    "create_default_registry",
]
