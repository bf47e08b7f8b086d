"""
Runtime values passed to and returned from native functions.

A value is one of three immutable kinds:

- IntegerValue: signed 64-bit integer
- FloatValue: 64-bit float
- TextValue: string

Values of the same kind can be combined (numeric addition or string
concatenation). Combining different kinds is an error; there is no
implicit coercion.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any, Literal, Union

from .errors import TypeMismatchError, ValueConversionError, ValueRangeError

ValueKind = Literal["Integer", "Float", "Text"]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def check_int64(value: int) -> int:
    """Raises ValueRangeError if value does not fit in a signed 64-bit integer."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueRangeError(f"Integer {value} is outside the signed 64-bit range")
    return value


@dataclass(frozen=True)
class ValueBase(ABC):
    """Base class for all values."""

    def __add__(self, other: Any) -> "Value":
        if not isinstance(other, ValueBase):
            return NotImplemented
        return combine(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True)
class IntegerValue(ValueBase):
    """Integer value."""

    value: int

    def __post_init__(self) -> None:
        check_int64(self.value)

    @property
    def type(self) -> Literal["Integer"]:
        return "Integer"


@dataclass(frozen=True)
class FloatValue(ValueBase):
    """Float value."""

    value: float

    @property
    def type(self) -> Literal["Float"]:
        return "Float"


@dataclass(frozen=True)
class TextValue(ValueBase):
    """Text value."""

    value: str

    @property
    def type(self) -> Literal["Text"]:
        return "Text"


# Union type for all values
Value = Union[IntegerValue, FloatValue, TextValue]


def get_type_name(value: Any) -> str:
    """Gets the kind name of a value for error messages."""
    if isinstance(value, ValueBase):
        return value.type  # type: ignore[attr-defined]
    if value is None:
        return "None"
    return type(value).__name__


def combine(a: Value, b: Value) -> Value:
    """
    Combines two values of the same kind.

    Integers and floats are added, texts are concatenated.

    Raises:
        TypeMismatchError: If the values are of different kinds
        ValueRangeError: If an integer sum overflows 64 bits
    """
    if a.type != b.type:
        raise TypeMismatchError(a.type, b.type)

    if isinstance(a, IntegerValue) and isinstance(b, IntegerValue):
        return IntegerValue(check_int64(a.value + b.value))
    if isinstance(a, FloatValue) and isinstance(b, FloatValue):
        return FloatValue(a.value + b.value)
    if isinstance(a, TextValue) and isinstance(b, TextValue):
        return TextValue(a.value + b.value)

    raise TypeMismatchError(get_type_name(a), get_type_name(b))


def to_value(obj: Any) -> Value:
    """
    Wraps a native Python int, float or str as a value.

    Values are returned unchanged. Booleans and other types are rejected.
    """
    if isinstance(obj, ValueBase):
        return obj  # type: ignore[return-value]
    if isinstance(obj, bool):
        raise ValueConversionError("Value", "bool")
    if isinstance(obj, int):
        return IntegerValue(obj)
    if isinstance(obj, float):
        return FloatValue(obj)
    if isinstance(obj, str):
        return TextValue(obj)
    raise ValueConversionError("Value", type(obj).__name__)


def as_int(value: Value) -> int:
    """Returns the payload of an Integer value."""
    if not isinstance(value, IntegerValue):
        raise ValueConversionError("Integer", get_type_name(value))
    return value.value


def as_float(value: Value) -> float:
    """Returns the payload of a Float value."""
    if not isinstance(value, FloatValue):
        raise ValueConversionError("Float", get_type_name(value))
    return value.value


def as_str(value: Value) -> str:
    """Returns the payload of a Text value."""
    if not isinstance(value, TextValue):
        raise ValueConversionError("Text", get_type_name(value))
    return value.value
