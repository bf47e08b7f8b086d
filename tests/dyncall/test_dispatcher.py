"""
Tests for dispatching parsed calls to native functions.
"""

# pyright: reportArgumentType=false

import pytest

from dyncall import (
    Dispatcher,
    DispatcherConfig,
    EvaluationError,
    FloatValue,
    FunctionRegistry,
    IntegerValue,
    LimitExceededError,
    ParseError,
    TextValue,
    TypeMismatchError,
    UnknownFunctionError,
    as_int,
    create_default_registry,
    evaluate,
    parse,
)


def _collect(args):
    """Returns the number of arguments received."""
    return IntegerValue(len(args))


def make_dispatcher(**config) -> Dispatcher:
    registry = create_default_registry()
    registry.register("count", _collect)
    registry.register("void", lambda args: None)
    return Dispatcher(registry, config or None)


class TestDispatch:
    """Tests for dispatching call nodes."""

    def test_dispatches_sum(self):
        dispatcher = make_dispatcher()
        result = dispatcher.dispatch(parse("sum(6,74444,14564156416)"))
        assert as_int(result) == 14564230866

    def test_run_parses_and_dispatches(self):
        assert make_dispatcher().run("add('a', 'b')") == TextValue("ab")

    def test_unknown_function_returns_none(self):
        assert make_dispatcher().run("missing(1)") is None

    def test_strict_unknown_function_raises(self):
        dispatcher = make_dispatcher(strict_unknown_functions=True)
        with pytest.raises(UnknownFunctionError) as exc_info:
            dispatcher.run("  missing(1)")
        assert exc_info.value.position == 2
        assert exc_info.value.expression == "  missing(1)"

    def test_void_function_returns_none(self):
        assert make_dispatcher().run("void()") is None

    def test_parse_errors_propagate(self):
        with pytest.raises(ParseError):
            make_dispatcher().run("sum(1,2")

    def test_limits_come_from_config(self):
        dispatcher = make_dispatcher(expression_limits={"max_ast_depth": 1})
        assert dispatcher.run("count(1)") == IntegerValue(1)
        with pytest.raises(LimitExceededError):
            dispatcher.run("count(count())")

    def test_limits_accept_camel_case_names(self):
        dispatcher = make_dispatcher(expressionLimits={"maxAstDepth": 1})
        with pytest.raises(LimitExceededError):
            dispatcher.run("count(count())")

    def test_rejects_unsupported_return_type(self):
        registry = FunctionRegistry({"raw": lambda args: 5})
        with pytest.raises(EvaluationError):
            Dispatcher(registry).run("raw()")

    def test_native_errors_get_call_position(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            make_dispatcher().run("count(add(1, 'x'))")
        assert exc_info.value.position == 6
        assert exc_info.value.expression == "count(add(1, 'x'))"


class TestNestedEvaluation:
    """Tests for nested call arguments."""

    def test_nested_calls_evaluated_bottom_up(self):
        result = make_dispatcher().run("add(1, multiplication(2, 3))")
        assert result == IntegerValue(7)

    def test_nested_results_keep_source_order(self):
        seen = []
        registry = FunctionRegistry(
            {
                "record": lambda args: seen.append(args) or IntegerValue(0),
                "two": lambda args: IntegerValue(2),
            }
        )
        Dispatcher(registry).run("record(1, two(), 3)")
        assert seen == [(IntegerValue(1), IntegerValue(2), IntegerValue(3))]

    def test_nested_call_without_result_is_error(self):
        with pytest.raises(EvaluationError) as exc_info:
            make_dispatcher().run("count(1, missing())")
        assert "missing" in exc_info.value.message

    def test_literal_only_mode_drops_nested_calls(self):
        dispatcher = make_dispatcher(evaluate_nested=False)
        assert dispatcher.run("count(1, missing(), 'x')") == IntegerValue(2)

    def test_literal_only_mode_accepts_camel_case_config(self):
        dispatcher = make_dispatcher(evaluateNested=False)
        assert dispatcher.config.evaluate_nested is False

    def test_config_model_is_accepted(self):
        config = DispatcherConfig(evaluate_nested=False)
        dispatcher = Dispatcher(create_default_registry(), config)
        assert dispatcher.config is config


class TestEvaluate:
    """Tests for the non-raising evaluate boundary."""

    def test_success(self):
        result = evaluate("add(1.5, 2.)", make_dispatcher())
        assert result.success
        assert result.value == FloatValue(3.5)
        assert result.error is None

    def test_type_mismatch_is_recoverable(self):
        result = evaluate("add(1, 'a')", make_dispatcher())
        assert not result.success
        assert result.value is None
        assert "Type mismatch" in result.error

    def test_parse_error_is_recoverable(self):
        result = evaluate("sum(1,2", make_dispatcher())
        assert not result.success
        assert result.error

    def test_native_exception_is_recoverable(self):
        def boom(args):
            raise RuntimeError("boom")

        result = evaluate("boom()", Dispatcher(FunctionRegistry({"boom": boom})))
        assert not result.success
        assert result.error == "boom"

    def test_unknown_function_is_success_without_value(self):
        result = evaluate("missing()", make_dispatcher())
        assert result.success
        assert result.value is None
