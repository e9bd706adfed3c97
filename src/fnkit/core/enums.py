"""Enumerations describing callables."""

import inspect
from enum import Enum
from typing import Callable


class FunctionKind(Enum):
    """How a callable's parameters can be seen from Python."""

    PRIMITIVE = "primitive"
    ORDINARY = "ordinary"

    @classmethod
    def of(cls, f: Callable) -> "FunctionKind":
        """Classify ``f``.

        Python functions and bound methods are ordinary. Everything else
        (builtins, C-implemented functions, classes, callable instances) is
        primitive and only gets generic argument forwarding.
        """
        if inspect.isfunction(f):
            return cls.ORDINARY
        if inspect.ismethod(f) and inspect.isfunction(f.__func__):
            return cls.ORDINARY
        return cls.PRIMITIVE
