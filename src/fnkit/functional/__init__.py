"""Functional primitives for fnkit.

Partial application, composition, lambda sugar, falsy fallbacks and call
records. Everything here is stateless and side-effect free.
"""

from fnkit.functional.closure import closure, EMPTY
from fnkit.functional.partial import partial, is_primitive, resolve_function
from fnkit.functional.compose import compose, dot, then, pipe
from fnkit.functional.truthiness import is_false, or_else, or_else_call, otherwise
from fnkit.functional.lambdas import fn
from fnkit.functional.calls import Quote, Call, match_call_defaults, substitute_call
from fnkit.functional.infix import Infix

__all__ = [
    "closure",
    "EMPTY",
    "partial",
    "is_primitive",
    "resolve_function",
    "compose",
    "dot",
    "then",
    "pipe",
    "is_false",
    "or_else",
    "or_else_call",
    "otherwise",
    "fn",
    "Quote",
    "Call",
    "match_call_defaults",
    "substitute_call",
    "Infix",
]
