"""
Call dispatcher.

Resolves a parsed call tree against a function registry and invokes the
matching native functions.

Argument resolution:
- With nested evaluation (the default), nested calls are dispatched
  bottom-up and their results replace them in the argument list. A
  nested call that produces no result is an error.
- Without nested evaluation, only the literal arguments are passed and
  nested calls are skipped.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from .ast import CallNode, LiteralNode, literal_values
from .config import DispatcherConfig, normalize_config
from .errors import EvaluationError
from .parser import parse
from .registry import FunctionRegistry
from .values import Value, ValueBase, get_type_name

logger = logging.getLogger("dyncall.dispatcher")


@dataclass
class EvaluationResult:
    """Result of evaluating an expression."""

    value: Optional[Value]
    """The returned value, or None for no result."""

    success: bool
    """Whether evaluation succeeded."""

    error: Optional[str] = None
    """Error message if evaluation failed."""


class Dispatcher:
    """Dispatches call nodes to the native functions of a registry."""

    def __init__(
        self,
        registry: FunctionRegistry,
        config: DispatcherConfig | dict[str, Any] | None = None,
    ):
        self._registry = registry
        self._config = normalize_config(config)
        self._limits = self._config.resolve_limits()

    @property
    def registry(self) -> FunctionRegistry:
        return self._registry

    @property
    def config(self) -> DispatcherConfig:
        return self._config

    def run(self, source: str) -> Optional[Value]:
        """Parses an expression and dispatches it."""
        node = parse(source, self._limits)
        try:
            return self.dispatch(node)
        except EvaluationError as e:
            if e.expression is None:
                e.expression = source
            raise

    def dispatch(self, node: CallNode) -> Optional[Value]:
        """
        Invokes the function named by `node` with its resolved arguments.

        Returns:
            The function result, or None for no result (and, unless
            strict_unknown_functions is set, for an unknown function)

        Raises:
            EvaluationError: If a nested call has no result or a function
                returns something other than a value
            UnknownFunctionError: In strict mode, for an unknown function
        """
        args = self._resolve_arguments(node)

        try:
            if self._config.strict_unknown_functions:
                result = self._registry.invoke(node.name, args)
            else:
                result = self._registry.call(node.name, args)
        except EvaluationError as e:
            # Errors raised by native functions carry no position
            if e.position is None:
                e.position = node.position
            raise

        if result is not None and not isinstance(result, ValueBase):
            raise EvaluationError(
                f"Function {node.name} returned unsupported type "
                f"{get_type_name(result)}",
                node.position,
            )

        return result

    def _resolve_arguments(self, node: CallNode) -> List[Value]:
        if not self._config.evaluate_nested:
            return literal_values(node)

        args: List[Value] = []
        for param in node.params:
            if isinstance(param, LiteralNode):
                args.append(param.value)
                continue

            value = self.dispatch(param)
            if value is None:
                raise EvaluationError(
                    f"Nested call {param.name} produced no result", param.position
                )
            args.append(value)

        return args


def evaluate(source: str, dispatcher: Dispatcher) -> EvaluationResult:
    """
    Parses and dispatches an expression without raising.

    Args:
        source: The expression string
        dispatcher: The dispatcher to run it with

    Returns:
        The evaluation result with value and success status
    """
    try:
        value = dispatcher.run(source)
        return EvaluationResult(value=value, success=True)
    except Exception as error:
        logger.debug(
            "expression_evaluation_failed",
            extra={"expression": source, "error": str(error)},
        )
        return EvaluationResult(value=None, success=False, error=str(error))
