"""
Error types for parsing and dispatching call expressions.

All errors extend ExpressionError for consistent handling.
"""

from typing import Optional


class ExpressionError(Exception):
    """
    Base error class for all expression-related errors.
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.expression = expression

    @property
    def remainder(self) -> Optional[str]:
        """The unconsumed input at the point of failure."""
        if self.expression is None or self.position is None:
            return None
        return self.expression[self.position :]

    def format_with_context(self) -> str:
        """
        Returns a formatted error message with position context.
        """
        if self.expression is None or self.position is None:
            return self.message

        pointer = " " * self.position + "^"
        return f"{self.message}\n  {self.expression}\n  {pointer}"


class ParseError(ExpressionError):
    """
    Error thrown when the source text does not match the call grammar.
    """

    pass


class InternalParserError(ExpressionError):
    """
    Error thrown when lexed numeric text cannot be converted.

    The lexer only accepts text that Python can convert, so this signals a
    defect in the parser rather than bad input.
    """

    pass


class LimitExceededError(ExpressionError):
    """
    Error thrown when expression limits are exceeded.
    """

    def __init__(
        self,
        limit_name: str,
        limit: int,
        actual: int,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        message = f"Limit exceeded: {limit_name} (limit: {limit}, actual: {actual})"
        super().__init__(message, position, expression)
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual


class EvaluationError(ExpressionError):
    """
    Error thrown while dispatching a parsed call (runtime error).
    """

    pass


class UnknownFunctionError(EvaluationError):
    """
    Error thrown when a function name is not present in the registry.
    """

    def __init__(
        self,
        function_name: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(f"Unknown function: {function_name}", position, expression)
        self.function_name = function_name


class TypeMismatchError(EvaluationError):
    """
    Error thrown when two values of different kinds are combined.
    """

    def __init__(
        self,
        expected: str,
        actual: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        message = f"Type mismatch: expected {expected}, got {actual}"
        super().__init__(message, position, expression)
        self.expected = expected
        self.actual = actual


class ValueConversionError(EvaluationError):
    """
    Error thrown when a value is read as a kind it does not hold.
    """

    def __init__(
        self,
        expected: str,
        actual: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        message = f"Cannot convert {actual} to {expected}"
        super().__init__(message, position, expression)
        self.expected = expected
        self.actual = actual


class ValueRangeError(EvaluationError):
    """
    Error thrown when an integer leaves the signed 64-bit range.
    """

    pass


class BuiltinError(EvaluationError):
    """
    Error thrown when a built-in function encounters an error.
    """

    def __init__(
        self,
        function_name: str,
        message: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        full_message = f"{function_name}: {message}"
        super().__init__(full_message, position, expression)
        self.function_name = function_name
