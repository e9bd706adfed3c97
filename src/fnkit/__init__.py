"""fnkit: partial application, composition and other functional tools."""

from fnkit.core.config import Settings, settings
from fnkit.core.enums import FunctionKind
from fnkit.core.errors import (
    PartialError,
    MixedArgumentsError,
    UnknownParameterError,
    UnusedArgumentError,
)
from fnkit.core.missing import MISSING, is_missing
from fnkit.functional import (
    closure,
    EMPTY,
    partial,
    is_primitive,
    resolve_function,
    compose,
    dot,
    then,
    pipe,
    is_false,
    or_else,
    or_else_call,
    otherwise,
    fn,
    Quote,
    Call,
    match_call_defaults,
    substitute_call,
    Infix,
)
from fnkit.functional.shortcuts import define_shortcuts
from fnkit.logger.logger import set_level

set_level(settings.log_level)

__version__ = "0.3.0"

__all__ = [
    "Settings",
    "settings",
    "FunctionKind",
    "PartialError",
    "MixedArgumentsError",
    "UnknownParameterError",
    "UnusedArgumentError",
    "MISSING",
    "is_missing",
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
    "define_shortcuts",
]

# Defines `p` unless disabled through FNKIT_DISABLE_SHORTCUTS
__all__ += list(define_shortcuts(globals(), settings))
