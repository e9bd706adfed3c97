"""Exceptions raised while binding or calling partially applied functions."""

__all__ = [
    "PartialError",
    "MixedArgumentsError",
    "UnknownParameterError",
    "UnusedArgumentError",
]


class PartialError(TypeError):
    """Base class for argument binding errors."""


class MixedArgumentsError(PartialError):
    """Named and unnamed fixed arguments were given for an ordinary function."""

    def __init__(self, function_name: str):
        super().__init__(
            f"invalid arguments: 'partial' does not support mixing named and "
            f"unnamed arguments except for primitive functions (got both for "
            f"'{function_name}')"
        )
        self.function_name = function_name


class UnknownParameterError(PartialError):
    """A named fixed argument does not match any parameter."""

    def __init__(self, function_name: str, names):
        names = sorted(names)
        listed = ", ".join(repr(name) for name in names)
        super().__init__(f"'{function_name}' has no parameter named {listed}")
        self.function_name = function_name
        self.names = names


class UnusedArgumentError(PartialError):
    """An argument of a call to a bound function has nowhere to go."""

    def __init__(self, function_name: str, values=(), named=None):
        values = list(values)
        named = dict(named or {})
        listed = [repr(value) for value in values]
        listed += [f"{name} = {value!r}" for name, value in named.items()]
        noun = "argument" if len(listed) == 1 else "arguments"
        super().__init__(
            f"unused {noun} ({', '.join(listed)}) in call to '{function_name}'"
        )
        self.function_name = function_name
        self.values = values
        self.named = named
