"""@dispatch_on_type decorator for adapter lookup.

A dispatcher wraps a fallback function and routes calls to implementations
registered per type of the first argument, following the MRO.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['TypeDispatcher', 'dispatch_on_type']

F = TypeVar('F', bound=Callable[..., Any])


class TypeDispatcher(wrapt.ObjectProxy, Generic[F]):
    """A function that dispatches on the type of its first argument.

    The wrapped function keeps its name and docstring and is called as the
    fallback when no registered type matches.

    Attributes:
        _self_name: The name of the wrapped function.
        _self_fallback: The fallback implementation.
        _self_registry: Dictionary mapping types to their implementations.

    Example:
        ```python
        @dispatch_on_type
        def describe(value) -> str:
            raise NoAdapterError(type(value))

        @describe.register(list)
        def describe_list(value: list) -> str:
            return f'list of {len(value)}'

        describe([1, 2])
        # 'list of 2'
        ```
    """

    def __init__(self, fallback: F) -> None:
        super().__init__(fallback)
        self._self_name = fallback.__name__
        self._self_fallback = fallback
        self._self_registry: dict[type, Callable[..., Any]] = {}

    def register(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for `type_` and its subclasses.

        Args:
            type_: The type to register the implementation for.

        Returns:
            A decorator that registers the implementation.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_registry[type_] = fn
            return fn

        return decorator

    def registered_types(self) -> tuple[type, ...]:
        """Return the types with a registered implementation."""
        return tuple(self._self_registry)

    def _find(self, value: Any) -> Callable[..., Any] | None:
        """Find the implementation for the most specific matching type."""
        for base in type(value).__mro__:
            if base in self._self_registry:
                return self._self_registry[base]
        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the implementation registered for the first argument."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        fn = self._find(args[0])
        if fn is not None:
            return fn(*args, **kwargs)
        return self._self_fallback(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<dispatcher {self._self_name} with {len(self._self_registry)} types>'


def dispatch_on_type(fn: F) -> TypeDispatcher[F]:
    """Decorator to create a type dispatcher from a fallback function.

    Args:
        fn: The fallback implementation, called for unregistered types.

    Returns:
        A TypeDispatcher that routes calls by first-argument type.
    """
    return TypeDispatcher(fn)
