"""
Registry of native functions callable by name.

A single lock guards the table and is held for the full duration of
every invocation, so calls through one registry never run concurrently.
Native functions should be fast and non-blocking.
"""

import logging
import threading
from typing import Callable, Dict, Mapping, Optional, Sequence, TypeVar

from .errors import UnknownFunctionError
from .lexer import is_identifier_part
from .values import Value

logger = logging.getLogger("dyncall.registry")

# Signature of a native function. Returning None signals failure or void.
NativeFunction = Callable[[Sequence[Value]], Optional[Value]]

F = TypeVar("F", bound=NativeFunction)


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("Function name must be a non-empty string")
    if not all(is_identifier_part(ch) for ch in name):
        raise ValueError(f"Invalid function name: {name!r}")


class FunctionRegistry:
    """Thread-safe mapping from function name to native function."""

    def __init__(self, functions: Optional[Mapping[str, NativeFunction]] = None):
        self._functions: Dict[str, NativeFunction] = {}
        self._lock = threading.RLock()

        for name, function in (functions or {}).items():
            self.register(name, function)

    def register(self, name: str, function: NativeFunction) -> None:
        """
        Registers a native function, replacing any function of the same name.

        Raises:
            ValueError: If the name is not a valid identifier
            TypeError: If the function is not callable
        """
        _validate_name(name)
        if not callable(function):
            raise TypeError(f"Function {name!r} is not callable")

        with self._lock:
            replaced = name in self._functions
            self._functions[name] = function

        logger.debug(
            "function_registered",
            extra={"function_name": name, "replaced": replaced},
        )

    def function(self, name: Optional[str] = None) -> Callable[[F], F]:
        """
        Decorator that registers a function under `name` or its own name.

        Example:
            @registry.function()
            def double(args):
                ...
        """

        def decorator(fn: F) -> F:
            self.register(name or fn.__name__, fn)
            return fn

        return decorator

    def call(self, name: str, args: Sequence[Value]) -> Optional[Value]:
        """
        Calls a function by name.

        Returns None both for an unknown name and for a function that
        returns nothing. Use `invoke` or `name in registry` to tell the
        two apart.
        """
        with self._lock:
            function = self._functions.get(name)
            if function is None:
                logger.debug("function_not_found", extra={"function_name": name})
                return None
            return function(tuple(args))

    def invoke(self, name: str, args: Sequence[Value]) -> Optional[Value]:
        """
        Calls a function by name.

        Raises:
            UnknownFunctionError: If no function is registered under `name`
        """
        with self._lock:
            function = self._functions.get(name)
            if function is None:
                raise UnknownFunctionError(name)
            return function(tuple(args))

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._functions
