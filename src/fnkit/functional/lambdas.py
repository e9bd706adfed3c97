"""Concise lambda syntax.

``fn("x -> x + 1")`` is a one-parameter function, ``fn("x ~ y -> x * y")``
takes two (or more, separated by ``~``) parameters. Bodies are Python
expressions::

    >>> fn("x -> x ** 2")(4)
    16
    >>> list(map(fn("a ~ b -> a - b"), [5, 6], [1, 2]))
    [4, 4]
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from fnkit.functional.closure import closure

__all__ = ["fn", "parse_lambda"]

ARROW = "->"
SEPARATOR = "~"


def parse_lambda(source: str) -> Tuple[List[str], str]:
    """Split lambda source into its parameter names and its body.

    Raises:
        ValueError: If there is no arrow, no parameter or no body.
    """
    params, arrow, body = source.partition(ARROW)
    if not arrow:
        raise ValueError(f"Lambda {source!r} has no '{ARROW}'.")
    names = [name.strip() for name in params.split(SEPARATOR)]
    if not all(names):
        raise ValueError(f"Lambda {source!r} has an empty parameter name.")
    if len(set(names)) != len(names):
        raise ValueError(f"Lambda {source!r} repeats a parameter name.")
    body = body.strip()
    if not body:
        raise ValueError(f"Lambda {source!r} has no body.")
    return names, body


def fn(
    source: str,
    env: Optional[Dict[str, Any]] = None,
    bindings: Optional[Mapping[str, Any]] = None,
) -> Callable:
    """Create an anonymous function from ``"x ~ y -> expression"`` source.

    Args:
        source: Parameter names separated by ``~``, an arrow and the body.
        env: Namespace the body looks names up in (e.g. ``globals()``).
        bindings: Additional names for the body, kept out of ``env``.
    """
    names, body = parse_lambda(source)
    return closure(names, body, env=env, name="lambda_", bindings=bindings)
