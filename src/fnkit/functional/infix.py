"""Infix operators for two-argument functions.

Python has no user-defined operators; ``|name|`` emulates them by overloading
``|`` on both sides::

    to_upper_words = str.split |then| partial(map, str.upper)
    value = config.get("name") |otherwise| "default"
"""

from typing import Any, Callable

__all__ = ["Infix"]


class Infix:
    """Wrap ``function(left, right)`` so it can be written ``left |op| right``."""

    __slots__ = ("function",)

    def __init__(self, function: Callable[[Any, Any], Any]):
        if not callable(function):
            raise TypeError("Infix operators must wrap a callable.")
        self.function = function

    def __ror__(self, left: Any) -> "_LeftBound":
        return _LeftBound(self.function, left)

    def __call__(self, left: Any, right: Any) -> Any:
        return self.function(left, right)

    def __repr__(self) -> str:
        return f"Infix({getattr(self.function, '__name__', self.function)!s})"


class _LeftBound:
    """``left |op`` waiting for its right operand."""

    __slots__ = ("function", "left")

    def __init__(self, function: Callable[[Any, Any], Any], left: Any):
        self.function = function
        self.left = left

    def __or__(self, right: Any) -> Any:
        return self.function(self.left, right)
