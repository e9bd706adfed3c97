"""Falsy values and fallbacks.

A value is *falsy* when it is ``False`` or when there is no value at all:
``None`` or an empty container. Unlike Python's truthiness, ``0`` and ``""``
are values and therefore not falsy.
"""

from collections.abc import Sized
from typing import Any, Callable, TypeVar

from fnkit.functional.infix import Infix

__all__ = ["is_false", "or_else", "or_else_call", "otherwise"]

T = TypeVar("T")
U = TypeVar("U")


def is_false(x: Any) -> bool:
    """Test whether ``x`` is falsy.

    Args:
        x: The object to be tested.

    Returns:
        ``True`` if ``x`` is ``False``, ``None`` or a zero-length container
        (strings and bytes are single values, never containers).
    """
    if x is False or x is None:
        return True
    if isinstance(x, (str, bytes)):
        return False
    return isinstance(x, Sized) and len(x) == 0


def or_else(value: T, alternative: U) -> T | U:
    """Return ``value``, or ``alternative`` if ``value`` is falsy."""
    return alternative if is_false(value) else value


def or_else_call(value: T, alternative: Callable[[], U]) -> T | U:
    """Like :func:`or_else`, but only computes the alternative when needed."""
    return alternative() if is_false(value) else value


otherwise = Infix(or_else)
