"""Sentinel for parameters no caller supplied."""

from typing import Any

__all__ = ["MISSING", "is_missing"]


class _Missing:
    """Type of :data:`MISSING`; there is only ever one instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def is_missing(value: Any) -> bool:
    """Whether ``value`` is the :data:`MISSING` sentinel.

    Use ``MISSING`` as a parameter default to observe whether a caller, or a
    partially applied binding, supplied the parameter::

        def f(x=MISSING, y=MISSING):
            return is_missing(x)
    """
    return value is MISSING
