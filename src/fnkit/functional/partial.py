"""Partial function application.

:func:`partial` fixes some arguments of a function and returns a new function
of the remaining ones. Unlike :func:`functools.partial` it

- returns the original function when nothing is fixed,
- binds unnamed values starting at the *second* parameter, leaving the first
  one free (``partial(operator.sub, 1)(10) == 9``),
- exposes an accurate signature with the bound parameters removed, and
- does not pass parameters nobody supplied, so the wrapped function sees them
  as missing.

Example:
    >>> def scale(x, by, offset=0):
    ...     return x * by + offset
    >>> double = partial(scale, 2)
    >>> double(21)
    42
    >>> inspect.signature(double)
    <Signature (x, offset)>
    >>> partial(scale, by=3, offset=1)(2)
    7
"""

import functools
import inspect
import operator
import pydoc
from typing import Any, Callable, Dict, List, Tuple, Union

from fnkit.core.enums import FunctionKind
from fnkit.core.errors import (
    MixedArgumentsError,
    UnknownParameterError,
    UnusedArgumentError,
)
from fnkit.functional.closure import closure
from fnkit.logger.logger import logger

__all__ = ["partial", "is_primitive", "resolve_function"]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_NAMED = (
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def resolve_function(f: Union[Callable, str]) -> Callable:
    """Return ``f`` itself, or the function named by ``f``.

    Names are dotted import paths (``"os.path.join"``); bare names are looked
    up in :mod:`builtins` and then in :mod:`operator` (``"sub"``).

    Raises:
        ValueError: If no callable object has that name.
        TypeError: If ``f`` is neither callable nor a string.
    """
    if callable(f):
        return f
    if isinstance(f, str):
        found = pydoc.locate(f)
        if found is None and "." not in f:
            found = getattr(operator, f, None)
        if found is None or not callable(found):
            raise ValueError(f"Cannot find a function named '{f}'.")
        return found
    raise TypeError(f"'{type(f).__name__}' object is not callable")


def is_primitive(f: Union[Callable, str]) -> bool:
    """Whether ``f`` has no Python-level parameter list (builtins, C functions)."""
    return FunctionKind.of(resolve_function(f)) is FunctionKind.PRIMITIVE


def _describe(f: Callable) -> str:
    return getattr(f, "__qualname__", None) or getattr(f, "__name__", None) or repr(f)


def _closure_name(f: Callable) -> str:
    name = getattr(f, "__name__", "")
    return name if name.isidentifier() else "partial"


def _finish(g: Callable, f: Callable, signature: inspect.Signature, args, kwargs):
    functools.update_wrapper(g, f, updated=())
    g.__signature__ = signature
    g.func = f
    g.args = tuple(args)
    g.keywords = dict(kwargs)
    return g


def partial(f: Union[Callable, str], *args: Any, **kwargs: Any) -> Callable:
    """Apply a function partially over some arguments.

    Args:
        f: The function, or its name (see :func:`resolve_function`).
        *args: Values fixed by position, starting at the second parameter.
        **kwargs: Values fixed by parameter name (full names only).

    Returns:
        ``f`` itself when nothing is fixed. Otherwise a function with the
        fixed arguments bound, taking the remaining parameters. For primitive
        functions the result takes ``(*args, **kwargs)`` and appends the fixed
        arguments after the ones it is called with.

    Raises:
        MixedArgumentsError: Named and unnamed values were given for an
            ordinary function. Primitives accept the mix.
        UnknownParameterError: A name matches no parameter of ``f`` and ``f``
            has no ``**kwargs`` parameter.

    Note:
        Binding every parameter by position leaves the first one exposed. Called
        without arguments, the result passes all fixed values in order
        (``f(v1, v2, v3)``); calling it with an argument fails with
        :class:`~fnkit.core.errors.UnusedArgumentError`.
    """
    f = resolve_function(f)
    if not args and not kwargs:
        return f

    if FunctionKind.of(f) is FunctionKind.PRIMITIVE:
        return _bind_primitive(f, args, kwargs)
    return _bind_ordinary(f, args, kwargs)


def _bind_primitive(f: Callable, args: Tuple, kwargs: Dict[str, Any]) -> Callable:
    logger.debug(
        "Binding %d positional and %d named arguments to primitive '%s'",
        len(args),
        len(kwargs),
        _describe(f),
    )

    def forward(call_args, call_kwargs):
        return f(*call_args, *args, **call_kwargs, **kwargs)

    g = closure(
        ["*args", "**kwargs"],
        "__forward__(args, kwargs)",
        name=_closure_name(f),
        bindings={"__forward__": forward},
    )
    signature = inspect.Signature(
        [
            inspect.Parameter("args", inspect.Parameter.VAR_POSITIONAL),
            inspect.Parameter("kwargs", inspect.Parameter.VAR_KEYWORD),
        ]
    )
    return _finish(g, f, signature, args, kwargs)


def _bind_ordinary(f: Callable, args: Tuple, kwargs: Dict[str, Any]) -> Callable:
    name = _describe(f)
    if args and kwargs:
        raise MixedArgumentsError(name)

    signature = inspect.signature(f)
    params = list(signature.parameters.values())
    has_var_args = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params)
    has_var_kwargs = any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params)

    bound: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    overflow: Tuple = ()

    if kwargs:
        named = {p.name for p in params if p.kind in _NAMED}
        unknown = [key for key in kwargs if key not in named and not has_var_kwargs]
        if unknown:
            raise UnknownParameterError(name, unknown)
        for key, value in kwargs.items():
            if key in named:
                bound[key] = value
            else:
                extra[key] = value
    else:
        # The first parameter stays free
        values = list(args)
        for param in params[1:]:
            if not values or param.kind not in _POSITIONAL:
                break
            bound[param.name] = values.pop(0)
        overflow = tuple(values)

    exposed = signature.replace(
        parameters=[
            p.replace(default=inspect.Parameter.empty)
            for p in params
            if p.name not in bound
        ]
    )
    logger.debug(
        "Bound %s to '%s' (overflow: %d, catch-all: %s); remaining %s",
        sorted(bound),
        name,
        len(overflow),
        sorted(extra),
        exposed,
    )

    # With overflow, every fixed value is forwarded positionally, in order,
    # after the caller's values
    consumed = frozenset(bound)
    trailing: Tuple = ()
    if overflow:
        bound = {}
        trailing = tuple(args)

    def forward(call_args: Tuple, call_kwargs: Dict[str, Any]):
        slots: Dict[str, Any] = dict(bound)
        var_kwargs: Dict[str, Any] = dict(extra)
        unused_named: Dict[str, Any] = {}

        for key, value in call_kwargs.items():
            param = signature.parameters.get(key)
            if param is not None and param.kind in _NAMED:
                target = slots
            elif has_var_kwargs:
                target = var_kwargs
            else:
                unused_named[key] = value
                continue
            if key in target or key in consumed:
                raise TypeError(f"{name}() got multiple values for argument '{key}'")
            target[key] = value

        pending: List[Any] = list(call_args) + list(trailing)
        for param in params:
            if not pending:
                break
            if param.kind in _POSITIONAL and param.name not in slots:
                slots[param.name] = pending.pop(0)

        if (pending and not has_var_args) or unused_named:
            raise UnusedArgumentError(
                name, [] if has_var_args else pending, unused_named
            )
        return _call(f, name, params, slots, pending, var_kwargs)

    g = closure(
        ["*args", "**kwargs"],
        "__forward__(args, kwargs)",
        env=_globals_of(f),
        name=_closure_name(f),
        bindings={"__forward__": forward},
    )
    return _finish(g, f, exposed, args, kwargs)


def _globals_of(f: Callable) -> Dict[str, Any]:
    function = getattr(f, "__func__", f)
    return getattr(function, "__globals__", {})


def _call(
    f: Callable,
    name: str,
    params: List[inspect.Parameter],
    slots: Dict[str, Any],
    var_args: List[Any],
    var_kwargs: Dict[str, Any],
):
    """Call ``f`` with the matched arguments, omitting unfilled parameters."""
    call_args: List[Any] = []
    call_kwargs: Dict[str, Any] = {}
    gap = None

    for param in params:
        if param.kind not in _POSITIONAL:
            continue
        if param.name not in slots:
            gap = gap or param.name
        elif gap is None:
            call_args.append(slots[param.name])
        elif param.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD:
            call_kwargs[param.name] = slots[param.name]
        else:
            raise TypeError(
                f"{name}() cannot receive positional-only argument "
                f"'{param.name}' while '{gap}' is missing"
            )

    if var_args:
        if gap is not None:
            raise TypeError(
                f"{name}() cannot receive extra positional arguments "
                f"while '{gap}' is missing"
            )
        call_args.extend(var_args)

    for param in params:
        if param.kind is inspect.Parameter.KEYWORD_ONLY and param.name in slots:
            call_kwargs[param.name] = slots[param.name]
    call_kwargs.update(var_kwargs)

    return f(*call_args, **call_kwargs)
