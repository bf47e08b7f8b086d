"""
Tests for the value model.
"""

import pytest

from dyncall import (
    FloatValue,
    IntegerValue,
    TextValue,
    TypeMismatchError,
    ValueConversionError,
    ValueRangeError,
    as_float,
    as_int,
    as_str,
    combine,
    get_type_name,
    to_value,
)


class TestCombine:
    """Tests for same-kind combination."""

    def test_adds_integers(self):
        assert combine(IntegerValue(2), IntegerValue(40)) == IntegerValue(42)

    def test_adds_floats(self):
        result = combine(FloatValue(1.25), FloatValue(0.5))
        assert isinstance(result, FloatValue)
        assert result.value == pytest.approx(1.75)

    def test_concatenates_text(self):
        assert combine(TextValue("foo"), TextValue("bar")) == TextValue("foobar")

    def test_plus_operator_combines(self):
        assert IntegerValue(1) + IntegerValue(2) == IntegerValue(3)

    def test_rejects_integer_and_text(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            combine(IntegerValue(1), TextValue("1"))
        assert exc_info.value.expected == "Integer"
        assert exc_info.value.actual == "Text"

    def test_rejects_integer_and_float(self):
        with pytest.raises(TypeMismatchError):
            combine(IntegerValue(1), FloatValue(1.0))

    def test_plus_operator_rejects_mixed_kinds(self):
        with pytest.raises(TypeMismatchError):
            TextValue("a") + FloatValue(1.0)

    def test_integer_overflow_raises(self):
        with pytest.raises(ValueRangeError):
            combine(IntegerValue(2**63 - 1), IntegerValue(1))


class TestValueIdentity:
    """Tests for value equality across kinds."""

    def test_integer_and_float_are_not_equal(self):
        assert IntegerValue(1) != FloatValue(1.0)

    def test_values_are_hashable(self):
        assert len({IntegerValue(1), IntegerValue(1), TextValue("1")}) == 2

    def test_integer_out_of_range_rejected(self):
        with pytest.raises(ValueRangeError):
            IntegerValue(2**63)

    def test_type_tags(self):
        assert IntegerValue(1).type == "Integer"
        assert FloatValue(1.0).type == "Float"
        assert TextValue("").type == "Text"


class TestConversion:
    """Tests for extracting native payloads."""

    def test_as_int(self):
        assert as_int(IntegerValue(7)) == 7

    def test_as_float(self):
        assert as_float(FloatValue(1.5)) == 1.5

    def test_as_str(self):
        assert as_str(TextValue("x")) == "x"

    def test_as_int_on_text_raises(self):
        with pytest.raises(ValueConversionError) as exc_info:
            as_int(TextValue("7"))
        assert exc_info.value.expected == "Integer"
        assert exc_info.value.actual == "Text"

    def test_as_float_does_not_accept_integer(self):
        with pytest.raises(ValueConversionError):
            as_float(IntegerValue(1))

    def test_to_value_wraps_natives(self):
        assert to_value(3) == IntegerValue(3)
        assert to_value(3.5) == FloatValue(3.5)
        assert to_value("s") == TextValue("s")

    def test_to_value_returns_values_unchanged(self):
        value = TextValue("s")
        assert to_value(value) is value

    def test_to_value_rejects_bool(self):
        with pytest.raises(ValueConversionError):
            to_value(True)

    def test_to_value_rejects_other_types(self):
        with pytest.raises(ValueConversionError):
            to_value([1, 2])

    def test_get_type_name(self):
        assert get_type_name(FloatValue(0.0)) == "Float"
        assert get_type_name(None) == "None"
        assert get_type_name(5) == "int"
