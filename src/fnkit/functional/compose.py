"""Function composition.

``compose(g, f)(...)`` is ``g(f(...))``. The same function is available as
the infix operators ``g |dot| f`` and, with the operands in reading order,
``f |then| g``. ``value |pipe| f`` applies ``f`` to ``value``, so a chain of
calls reads left to right: ``path |pipe| open_file |pipe| parse``.
"""

from typing import Callable

from fnkit.functional.infix import Infix
from fnkit.logger.logger import logger

__all__ = ["compose", "dot", "then", "pipe"]


def compose(g: Callable, f: Callable) -> Callable:
    """Compose functions ``g`` and ``f``.

    Args:
        g: A function taking as its argument the return value of ``f``.
        f: A function with arbitrary arguments.

    Returns:
        A function taking the same arguments as ``f`` and returning what
        ``g`` returns.

    Raises:
        TypeError: If ``g`` or ``f`` is not callable.
    """
    for name, function in (("g", g), ("f", f)):
        if not callable(function):
            raise TypeError(
                f"compose: '{name}' must be callable, got {type(function).__name__}"
            )
    logger.debug("Composing %r after %r", g, f)

    def composed(*args, **kwargs):
        return g(f(*args, **kwargs))

    composed.__name__ = (
        f"{getattr(g, '__name__', 'g')}_of_{getattr(f, '__name__', 'f')}"
    )
    composed.__qualname__ = composed.__name__
    composed.__wrapped__ = f
    return composed


dot = Infix(compose)
then = Infix(lambda f, g: compose(g, f))
pipe = Infix(lambda value, f: f(value))
