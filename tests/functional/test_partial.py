import functools
import inspect
import operator
import os

import pytest

from fnkit.core.errors import (
    MixedArgumentsError,
    UnknownParameterError,
    UnusedArgumentError,
)
from fnkit.core.missing import MISSING, is_missing
from fnkit.functional.partial import partial, is_primitive, resolve_function


def rnorm(n, mean=0, sd=1):
    return (n, mean, sd)


def signature_of(f):
    return str(inspect.signature(f))


@pytest.fixture
def missing_x():
    def f(x=MISSING, y=MISSING):
        return is_missing(x)

    return f


@pytest.fixture
def add_or_increment():
    def g(a=MISSING, b=MISSING):
        if is_missing(a):
            return b + 1
        if is_missing(b):
            return a + 1
        return a + b

    return g


def test_no_fixed_arguments_returns_original():
    assert partial(rnorm) is rnorm
    assert signature_of(partial(rnorm)) == "(n, mean=0, sd=1)"


def test_positional_arguments_start_at_second_parameter():
    assert signature_of(partial(rnorm, 5)) == "(n, sd)"
    assert signature_of(partial(rnorm, 1, 2)) == "(n)"
    assert partial(rnorm, 5)(3) == (3, 5, 1)
    assert partial(rnorm, 1, 2)(3) == rnorm(3, 1, 2)


def test_all_positional_fixed_leaves_first_parameter():
    bound = partial(rnorm, 1, 2, 3)

    assert signature_of(bound) == "(n)"
    assert bound() == (1, 2, 3)
    with pytest.raises(UnusedArgumentError, match=r"unused argument \(3\)"):
        bound(1)


def test_overflowing_values_keep_their_order():
    def head_and_rest(x, y, *rest):
        return x, y, rest

    bound = partial(head_and_rest, 1, 2, 3)

    assert signature_of(bound) == "(x, *rest)"
    assert bound() == (1, 2, (3,))
    assert bound(0) == (0, 1, (2, 3))
    with pytest.raises(TypeError, match="multiple values"):
        bound(y=5)


def test_all_named_fixed_takes_no_arguments():
    bound = partial(rnorm, n=1, mean=1, sd=2)

    assert signature_of(bound) == "()"
    assert bound() == (1, 1, 2)
    with pytest.raises(UnusedArgumentError, match=r"unused argument \(5\)"):
        bound(5)


def test_named_arguments():
    assert signature_of(partial(rnorm, mean=5)) == "(n, sd)"
    assert signature_of(partial(rnorm, sd=2)) == "(n, mean)"
    assert partial(rnorm, mean=5)(1) == (1, 5, 1)
    assert partial(rnorm, mean=5)(1, 3) == (1, 5, 3)
    assert partial(rnorm, mean=5)(1, sd=3) == (1, 5, 3)
    assert partial(rnorm, mean=2)(n=4) == rnorm(n=4, mean=2)


def test_named_first_parameter():
    assert partial(rnorm, n=10)(2) == (10, 2, 1)
    assert partial(rnorm, n=10)(sd=4) == (10, 0, 4)


def test_mixing_named_and_unnamed_is_rejected():
    with pytest.raises(MixedArgumentsError, match="named and unnamed"):
        partial(rnorm, 2, mean=1)
    with pytest.raises(TypeError):
        partial(rnorm, 2, sd=1)


def test_unknown_parameter_name_is_rejected():
    with pytest.raises(UnknownParameterError, match="sigma"):
        partial(rnorm, sigma=1)


def test_primitive_with_positional_arguments():
    assert is_primitive(operator.sub)
    assert partial(operator.sub, 1)(10) == 9
    assert partial("sub", 1)(10) == 9
    assert signature_of(partial(operator.sub, 1)) == "(*args, **kwargs)"


def test_primitive_with_named_arguments():
    assert partial(sum, start=10)([1, 2]) == 13
    assert partial(round, ndigits=1)(1.234) == 1.2


def test_primitive_with_mixed_arguments():
    assert partial(max, 2, key=abs)(-1) == 2
    assert partial(max, 2, key=abs)(-5) == -5


def test_primitive_duplicate_name_fails_at_call_time():
    bound = partial(round, ndigits=1)
    with pytest.raises(TypeError):
        bound(1.23, ndigits=2)


def test_missing_arguments_are_recognized(missing_x):
    f = missing_x

    assert partial(f)() is True
    assert partial(f, True)(1) is False
    assert partial(f, x=True)() is False
    assert partial(f, x=True)(1) is False
    assert partial(f, y=False)() is True
    assert partial(f, y=False)(True) is False


def test_positional_binding_leaves_first_parameter_missing(missing_x):
    # The fixed value binds `y`, so `x` is still unset
    assert partial(missing_x, True)() is True


def test_missing_arguments_select_branch(add_or_increment):
    g = add_or_increment

    assert partial(g, b=2)(5) == 7
    assert partial(g, a=2)(5) == 7
    assert partial(g, 2)(5) == 7
    assert partial(g)(2, 5) == 7
    assert partial(g, b=2)() == 3


def test_catch_all_keyword_arguments_can_be_fixed():
    def parse(text, **options):
        return text.split(options.get("sep"))

    assert signature_of(partial(parse, sep=":")) == "(text, **options)"
    assert partial(parse, sep=":")("1:2") == ["1", "2"]
    assert partial(parse, text="1/2")(sep="/") == ["1", "2"]
    assert partial(parse, text="1 2")() == ["1", "2"]
    assert partial(parse, text="1 2")(sep=",") == ["1 2"]


def test_variadic_before_named_parameter():
    def total(*values, skip_none=False):
        if skip_none:
            values = [value for value in values if value is not None]
        return sum(values)

    assert partial(total, skip_none=True)(1, 2, None) == 3
    assert partial(total, 1, 2)() == 3
    assert partial(total, 1, 2, None)(skip_none=True) == 3
    with pytest.raises(TypeError):
        partial(total, 1, 2, None)()


def test_downstream_errors_surface_at_call_time():
    bound = partial(rnorm, mean=1)

    with pytest.raises(UnusedArgumentError):
        bound(1, 2, 3)
    with pytest.raises(TypeError, match="multiple values"):
        bound(1, mean=2)


def test_partial_is_defined_in_function_globals():
    bound = partial(rnorm, 1)
    assert bound.__globals__ is rnorm.__globals__


def test_partial_metadata():
    bound = partial(rnorm, 1)

    assert bound.__name__ == "rnorm"
    assert bound.__wrapped__ is rnorm
    assert bound.func is rnorm
    assert bound.args == (1,)
    assert bound.keywords == {}


def test_nested_partials():
    bound = partial(partial(rnorm, sd=2), mean=1)

    assert signature_of(bound) == "(n)"
    assert bound(5) == (5, 1, 2)


def test_bound_methods():
    class Scaler:
        def __init__(self, factor):
            self.factor = factor

        def apply(self, x, offset=0):
            return x * self.factor + offset

    assert partial(Scaler(2).apply, 1)(3) == 7


def test_single_dispatch_uses_runtime_type():
    @functools.singledispatch
    def describe(value, digits=3):
        return f"object:{value}"

    @describe.register
    def _(value: float, digits=3):
        return f"{value:.{digits}f}"

    show = partial(describe, digits=1)

    assert show(1.234) == "1.2"
    assert show("x") == "object:x"
    assert partial(describe.dispatch(object), digits=1)(1.234) == "object:1.234"


def test_resolve_function():
    assert resolve_function(rnorm) is rnorm
    assert resolve_function("max") is max
    assert resolve_function("os.path.join") is os.path.join
    assert resolve_function("sub") is operator.sub
    with pytest.raises(ValueError):
        resolve_function("no_such_function_anywhere")
    with pytest.raises(TypeError):
        resolve_function(42)


def test_is_primitive():
    assert not is_primitive(rnorm)
    assert is_primitive(len)
    assert is_primitive(int)
    assert is_primitive("max")
