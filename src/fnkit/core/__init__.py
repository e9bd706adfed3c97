"""Configuration, enumerations and errors shared across fnkit."""

from fnkit.core.config import Settings, settings
from fnkit.core.enums import FunctionKind
from fnkit.core.missing import MISSING, is_missing
from fnkit.core.errors import (
    PartialError,
    MixedArgumentsError,
    UnknownParameterError,
    UnusedArgumentError,
)

__all__ = [
    "Settings",
    "settings",
    "FunctionKind",
    "MISSING",
    "is_missing",
    "PartialError",
    "MixedArgumentsError",
    "UnknownParameterError",
    "UnusedArgumentError",
]
