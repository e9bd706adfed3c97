"""Construction of functions from source fragments at runtime.

:func:`closure` turns a parameter list and an expression body into a real
Python function whose globals are a namespace chosen by the caller. It is the
building block for :func:`fnkit.functional.partial.partial` (which defines the
bound function inside the original function's module namespace) and for the
lambda sugar in :mod:`fnkit.functional.lambdas`.

Example:
    >>> add1 = closure({"a": EMPTY}, "a + 1")
    >>> add1(2)
    3
    >>> scale = closure({"x": EMPTY, "by": "2"}, "x * by")
    >>> scale(5), scale(5, by=3)
    (10, 15)
"""

import inspect
import keyword
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from fnkit.logger.logger import logger

__all__ = ["closure", "EMPTY"]

# Marks a parameter without a default value
EMPTY = inspect.Parameter.empty

Formals = Union[Mapping[str, Any], Iterable[str]]


def _check_identifier(name: str, what: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"Invalid {what} name: '{name}'.")


def _check_expression(source: str, what: str) -> None:
    try:
        compile(source, f"<{what}>", "eval")
    except SyntaxError as e:
        raise ValueError(f"Invalid {what} expression {source!r}: {e.msg}") from e


def _render_formals(formals: Formals) -> str:
    """Render a formal parameter list as the text of a ``def`` header."""
    if isinstance(formals, Mapping):
        items = list(formals.items())
    else:
        items = [(name, EMPTY) for name in formals]

    rendered = []
    for name, default in items:
        if name == "*":
            rendered.append("*")
            continue
        stars = len(name) - len(name.lstrip("*"))
        if stars > 2:
            raise ValueError(f"Invalid parameter name: '{name}'.")
        _check_identifier(name[stars:], "parameter")
        if default is EMPTY:
            rendered.append(name)
        elif stars:
            raise ValueError(f"Variadic parameter '{name}' cannot have a default.")
        else:
            default = str(default)
            _check_expression(default, "default")
            rendered.append(f"{name}={default}")
    return ", ".join(rendered)


def closure(
    formals: Formals,
    body: str,
    env: Optional[Dict[str, Any]] = None,
    name: str = "anonymous",
    bindings: Optional[Mapping[str, Any]] = None,
) -> Callable:
    """Create a function for the given formals and body inside ``env``.

    Args:
        formals: Parameter names mapped to the source of their default value,
            or to :data:`EMPTY` for parameters without default. A plain
            iterable of names declares parameters without defaults. Names
            prefixed with ``*`` or ``**`` declare variadic parameters; a bare
            ``"*"`` starts the keyword-only parameters.
        body: Source of a single expression, the function's return value.
        env: Namespace used as the function's globals. Defaults are evaluated
            in it once, when the function is created; the body is evaluated in
            it on every call. A fresh namespace is used when omitted.
        name: Name of the created function.
        bindings: Extra names visible to the body and the defaults as closure
            variables, without being added to ``env``.

    Returns:
        A function whose ``__globals__`` is ``env``.

    Raises:
        ValueError: If a name, a default or the body is not valid Python.
    """
    env = {} if env is None else env
    bindings = dict(bindings or {})

    _check_identifier(name, "function")
    for binding in bindings:
        _check_identifier(binding, "binding")
    _check_expression(body, "body")
    params = _render_formals(formals)

    # The outer factory turns `bindings` into closure cells of the function.
    source = (
        f"def __create_fn__({', '.join(bindings)}):\n"
        f"    def {name}({params}):\n"
        f"        return ({body})\n"
        f"    return {name}\n"
    )
    logger.debug("Creating closure '%s(%s)'", name, params)

    local_ns: Dict[str, Any] = {}
    try:
        exec(source, env, local_ns)
    except SyntaxError as e:
        raise ValueError(f"Invalid formals for '{name}': {e.msg}") from e
    return local_ns["__create_fn__"](**bindings)
