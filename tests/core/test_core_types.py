import copy
import pickle

from fnkit.core.enums import FunctionKind
from fnkit.core.errors import (
    PartialError,
    MixedArgumentsError,
    UnknownParameterError,
    UnusedArgumentError,
)
from fnkit.core.missing import MISSING, is_missing, _Missing


class Adder:
    def __call__(self, a, b):
        return a + b

    def add(self, a, b):
        return a + b


def test_function_kind():
    assert FunctionKind.of(len) is FunctionKind.PRIMITIVE
    assert FunctionKind.of(int) is FunctionKind.PRIMITIVE
    assert FunctionKind.of(Adder()) is FunctionKind.PRIMITIVE
    assert FunctionKind.of(lambda: 0) is FunctionKind.ORDINARY
    assert FunctionKind.of(Adder().add) is FunctionKind.ORDINARY


def test_missing_is_a_singleton():
    assert _Missing() is MISSING
    assert copy.deepcopy(MISSING) is MISSING
    assert pickle.loads(pickle.dumps(MISSING)) is MISSING
    assert repr(MISSING) == "MISSING"
    assert is_missing(MISSING)
    assert not is_missing(None)


def test_errors_are_type_errors():
    for error in (MixedArgumentsError, UnknownParameterError, UnusedArgumentError):
        assert issubclass(error, PartialError)
        assert issubclass(error, TypeError)


def test_error_messages():
    assert str(UnusedArgumentError("f", [3])) == "unused argument (3) in call to 'f'"
    assert str(UnusedArgumentError("f", [1, 2])) == "unused arguments (1, 2) in call to 'f'"
    assert (
        str(UnusedArgumentError("f", [], {"sep": ","}))
        == "unused argument (sep = ',') in call to 'f'"
    )
    assert str(UnknownParameterError("f", ["b", "a"])) == "'f' has no parameter named 'a', 'b'"
    assert "invalid arguments" in str(MixedArgumentsError("f"))
