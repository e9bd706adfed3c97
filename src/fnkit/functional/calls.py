"""Call records, default matching and argument substitution.

A :class:`Call` is an explicit record of a function call: the function and
the arguments it is (or will be) called with. Arguments may be
:class:`Quote` objects, Python expressions kept as source until they are
evaluated against a namespace.

:func:`match_call_defaults` completes a call record with the defaults of every
parameter the call did not supply, which is handy for forwarding a call to a
different function while keeping the defaults of the original one::

    def join_csv(*items, sep=",", end="\\n"):
        ...

    call = match_call_defaults(Call.of(join_csv, "a", "test"))
    # join_csv('a', 'test', sep=',', end='\\n')
    call.with_function(print)()
    # a,test

:func:`substitute_call` additionally evaluates all quoted arguments, so the
result no longer depends on the namespace it was built in::

    match_call_defaults(Call.of(f, Quote("1 + 2")))   # f(x=1 + 2)
    substitute_call(Call.of(f, Quote("1 + 2")))       # f(x=3)
"""

import inspect
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fnkit.logger.logger import logger

__all__ = ["Quote", "Call", "match_call_defaults", "substitute_call"]


class Quote(BaseModel):
    """An unevaluated Python expression."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Source of a single Python expression.")

    def __init__(self, source: str, **data: Any):
        super().__init__(source=source, **data)

    @field_validator("source")
    @classmethod
    def check_expression(cls, value: str) -> str:
        try:
            compile(value, "<quote>", "eval")
        except SyntaxError as e:
            raise ValueError(f"Not an expression: {value!r} ({e.msg})") from e
        return value

    def evaluate(self, env: Optional[Mapping[str, Any]] = None) -> Any:
        """Evaluate the expression with ``env`` as its namespace."""
        namespace = {} if env is None else env
        if not isinstance(namespace, dict):
            namespace = dict(namespace)
        return eval(compile(self.source, "<quote>", "eval"), namespace)

    def __str__(self) -> str:
        return self.source


class Call(BaseModel):
    """A function together with the arguments to call it with.

    Attributes:
        function: The callee, or a :class:`Quote` naming it.
        args: Positional arguments.
        kwargs: Named arguments.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    function: Union[Quote, Callable[..., Any]]
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def of(cls, function: Union[Quote, Callable], *args: Any, **kwargs: Any) -> "Call":
        """Record the call ``function(*args, **kwargs)``."""
        return cls(function=function, args=args, kwargs=kwargs)

    def with_function(self, function: Union[Quote, Callable]) -> "Call":
        """The same arguments, passed to a different function."""
        return self.model_copy(update={"function": function})

    @property
    def is_quoted(self) -> bool:
        """Whether the function or any argument is still unevaluated."""
        values = [self.function, *self.args, *self.kwargs.values()]
        return any(isinstance(value, Quote) for value in values)

    def __call__(self) -> Any:
        if self.is_quoted:
            raise TypeError(
                f"Cannot invoke {self}: it has quoted parts, use substitute_call first."
            )
        return self.function(*self.args, **self.kwargs)

    def __str__(self) -> str:
        if isinstance(self.function, Quote):
            name = f"({self.function})"
        else:
            name = getattr(self.function, "__qualname__", None) or repr(self.function)
        rendered = [_render(value) for value in self.args]
        rendered += [f"{key}={_render(value)}" for key, value in self.kwargs.items()]
        return f"{name}({', '.join(rendered)})"


def _render(value: Any) -> str:
    return str(value) if isinstance(value, Quote) else repr(value)


def _evaluate(value: Any, env: Mapping[str, Any]) -> Any:
    return value.evaluate(env) if isinstance(value, Quote) else value


def match_call_defaults(
    call: Call, signature: Optional[inspect.Signature] = None
) -> Call:
    """Fill in the defaults of all parameters ``call`` does not supply.

    Args:
        call: The call to complete.
        signature: Parameters of the callee. Taken from ``call.function``
            when omitted, which must then not be quoted.

    Returns:
        An equivalent call naming every parameter it supplies, including
        the defaulted ones. ``*args``/``**kwargs`` parameters are never
        filled, and argument values (quoted or not) are left as they are.
        Parameters without a default that the call did not supply stay
        absent.

    Raises:
        TypeError: If the arguments do not fit the signature.
    """
    if signature is None:
        if isinstance(call.function, Quote):
            raise TypeError(
                f"Cannot inspect quoted function '{call.function}'; pass its signature."
            )
        signature = inspect.signature(call.function)

    bound = signature.bind_partial(*call.args, **call.kwargs).arguments
    params = list(signature.parameters.values())
    var_args = next(
        (
            bound.get(p.name, ())
            for p in params
            if p.kind is inspect.Parameter.VAR_POSITIONAL
        ),
        (),
    )

    args: List[Any] = []
    kwargs: Dict[str, Any] = {}
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            args.extend(bound.get(param.name, ()))
            continue
        if param.kind is inspect.Parameter.VAR_KEYWORD:
            kwargs.update(bound.get(param.name, {}))
            continue

        if param.name in bound:
            value = bound[param.name]
        elif param.default is not inspect.Parameter.empty:
            value = param.default
        else:
            continue

        # Parameters ahead of a non-empty *args must stay positional
        if param.kind is inspect.Parameter.POSITIONAL_ONLY or (
            param.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD and var_args
        ):
            args.append(value)
        else:
            kwargs[param.name] = value

    matched = call.model_copy(update={"args": tuple(args), "kwargs": kwargs})
    logger.debug("Matched %s as %s", call, matched)
    return matched


def substitute_call(
    call: Call,
    env: Optional[Mapping[str, Any]] = None,
    defaults: bool = True,
) -> Call:
    """Evaluate the function and every quoted argument of ``call``.

    Args:
        call: The call to substitute.
        env: Namespace the quoted parts are evaluated in.
        defaults: Apply :func:`match_call_defaults` first.

    Returns:
        A call without quoted parts, independent of ``env``.
    """
    env = {} if env is None else env
    call = call.with_function(_evaluate(call.function, env))
    if defaults:
        call = match_call_defaults(call)
    return call.model_copy(
        update={
            "args": tuple(_evaluate(value, env) for value in call.args),
            "kwargs": {key: _evaluate(value, env) for key, value in call.kwargs.items()},
        }
    )
