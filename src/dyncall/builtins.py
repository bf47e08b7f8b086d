"""
Built-in native functions.

All built-in functions are pure and deterministic. Argument count and
kind violations raise BuiltinError; mixing kinds where one kind is
required is never coerced.
"""

from typing import Dict, Optional, Sequence

from .errors import BuiltinError, TypeMismatchError
from .registry import FunctionRegistry, NativeFunction
from .values import (
    FloatValue,
    IntegerValue,
    TextValue,
    Value,
    check_int64,
    combine,
    get_type_name,
)


def _assert_min_arg_count(
    args: Sequence[Value], minimum: int, function_name: str
) -> None:
    """Asserts a minimum argument count."""
    if len(args) < minimum:
        raise BuiltinError(
            function_name, f"expected at least {minimum} argument(s), got {len(args)}"
        )


def _assert_arg_count(args: Sequence[Value], expected: int, function_name: str) -> None:
    """Asserts argument count."""
    if len(args) != expected:
        raise BuiltinError(
            function_name, f"expected {expected} argument(s), got {len(args)}"
        )


def _assert_numeric_same_kind(args: Sequence[Value], function_name: str) -> None:
    """Asserts that all arguments are numbers of the first argument's kind."""
    first = args[0]
    if not isinstance(first, IntegerValue | FloatValue):
        raise BuiltinError(
            function_name, f"expected numbers, got {get_type_name(first)}"
        )
    for arg in args[1:]:
        if arg.type != first.type:
            raise TypeMismatchError(first.type, get_type_name(arg))


# ============================================================
# Arithmetic
# ============================================================


def _sum(args: Sequence[Value]) -> Optional[Value]:
    """sum(...) -> Integer - Sums the Integer arguments, ignoring other kinds."""
    total = sum(arg.value for arg in args if isinstance(arg, IntegerValue))
    return IntegerValue(check_int64(total))


def _add(args: Sequence[Value]) -> Optional[Value]:
    """
    add(a, b, ...) -> Value

    Combines the arguments left to right: numbers are added, texts are
    concatenated. All arguments must be of the same kind.
    """
    _assert_min_arg_count(args, 1, "add")
    result = args[0]
    for arg in args[1:]:
        result = combine(result, arg)
    return result


def _multiplication(args: Sequence[Value]) -> Optional[Value]:
    """multiplication(a, b, ...) -> Integer | Float - Multiplies numbers of one kind."""
    _assert_min_arg_count(args, 1, "multiplication")
    _assert_numeric_same_kind(args, "multiplication")

    if isinstance(args[0], IntegerValue):
        product = 1
        for arg in args:
            product *= arg.value
        return IntegerValue(check_int64(product))

    float_product = 1.0
    for arg in args:
        float_product *= arg.value
    return FloatValue(float_product)


def _division(args: Sequence[Value]) -> Optional[Value]:
    """
    division(a, b) -> Integer | Float

    Divides a by b. Integer division truncates toward zero.
    Returns no result when b is zero.
    """
    _assert_arg_count(args, 2, "division")
    _assert_numeric_same_kind(args, "division")
    a, b = args

    if b.value == 0:
        return None

    if isinstance(a, IntegerValue):
        quotient = abs(a.value) // abs(b.value)
        if (a.value < 0) != (b.value < 0):
            quotient = -quotient
        return IntegerValue(check_int64(quotient))

    return FloatValue(a.value / b.value)


# ============================================================
# Text
# ============================================================


def _concat(args: Sequence[Value]) -> Optional[Value]:
    """concat(...) -> Text - Concatenates Text arguments."""
    for arg in args:
        if not isinstance(arg, TextValue):
            raise BuiltinError("concat", f"expected Text, got {get_type_name(arg)}")
    return TextValue("".join(arg.value for arg in args))


def _len(args: Sequence[Value]) -> Optional[Value]:
    """len(s: Text) -> Integer - Returns the length of a Text."""
    _assert_arg_count(args, 1, "len")
    s = args[0]
    if not isinstance(s, TextValue):
        raise BuiltinError("len", f"expected Text, got {get_type_name(s)}")
    return IntegerValue(len(s.value))


# ============================================================
# Registry
# ============================================================

# All built-in functions by name.
BUILTIN_FUNCTIONS: Dict[str, NativeFunction] = {
    # Arithmetic
    "sum": _sum,
    "add": _add,
    "multiplication": _multiplication,
    "division": _division,
    # Text
    "concat": _concat,
    "len": _len,
}


def create_default_registry() -> FunctionRegistry:
    """Creates a new registry pre-loaded with the built-in functions."""
    return FunctionRegistry(BUILTIN_FUNCTIONS)
