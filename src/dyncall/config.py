"""
Configuration for the call dispatcher.
"""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    conint,
    field_validator,
)

from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# Accepted spellings of each limit field: snake_case and camelCase
_LIMIT_FIELD_NAMES: dict[str, str] = {}
for _field in fields(ExpressionLimits):
    _LIMIT_FIELD_NAMES[_field.name] = _field.name
    _LIMIT_FIELD_NAMES[_camel_case(_field.name)] = _field.name

# Every limit is a positive integer
_LIMIT_VALUES_ADAPTER = TypeAdapter(dict[str, conint(strict=True, gt=0)])


def parse_expression_limits(data: dict[str, Any]) -> ExpressionLimits:
    """
    Builds ExpressionLimits from a dict of overrides.

    Keys may be snake_case (max_ast_depth) or camelCase (maxAstDepth).
    Unset fields keep their default values.

    Raises:
        ValueError: For unknown keys or values that are not valid limits
    """
    unknown = sorted(key for key in data if key not in _LIMIT_FIELD_NAMES)
    if unknown:
        raise ValueError(f"Unknown expression limits: {unknown}")

    merged = asdict(DEFAULT_EXPRESSION_LIMITS)
    for key, value in data.items():
        merged[_LIMIT_FIELD_NAMES[key]] = value

    try:
        validated = _LIMIT_VALUES_ADAPTER.validate_python(merged)
    except ValidationError as e:
        raise ValueError(f"Invalid expression limits: {e}") from e

    return ExpressionLimits(**validated)


class DispatcherConfig(BaseModel):
    """Configuration for creating a Dispatcher."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    # Dispatch nested calls first and pass their results as arguments.
    # When False, only literal arguments reach the native function.
    evaluate_nested: bool = Field(default=True, alias="evaluateNested")

    # Raise UnknownFunctionError instead of returning None for unknown names
    strict_unknown_functions: bool = Field(
        default=False, alias="strictUnknownFunctions"
    )

    # Expression limits used when parsing source text; a dict of
    # overrides is converted when the config is built
    expression_limits: ExpressionLimits | None = Field(
        default=None, alias="expressionLimits"
    )

    @field_validator("expression_limits", mode="before")
    @classmethod
    def _validate_expression_limits(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return parse_expression_limits(value)
        return value

    def resolve_limits(self) -> ExpressionLimits:
        """Returns the configured limits, or the defaults when unset."""
        return self.expression_limits or DEFAULT_EXPRESSION_LIMITS


def normalize_config(
    config: DispatcherConfig | dict[str, Any] | None,
) -> DispatcherConfig:
    """Accepts a config model, a plain dict (snake_case or camelCase), or None."""
    if config is None:
        return DispatcherConfig()
    if isinstance(config, DispatcherConfig):
        return config
    return DispatcherConfig.model_validate(config)
