"""curry 테스트"""
import asyncio

import pytest

from zeta_fp import Curried, UnsupportedArityError, curry, flip


def add(a, b):
    return a + b


def add3(a, b, c):
    return a + b + c


def tag3(a, b, c):
    return f"{a}-{b}-{c}"


# ============================================================
# arity 0 / 1
# ============================================================

def test_nullary_and_unary_returned_unchanged():
    def zero():
        return "no args"

    def one(a):
        return a

    assert curry(zero) is zero
    assert curry(one) is one


# ============================================================
# arity 2
# ============================================================

def test_binary_full_application():
    assert curry(add)(5, 3) == 8


def test_binary_partial_application():
    add_five = curry(add)(5)
    assert isinstance(add_five, Curried)
    assert add_five(3) == 8
    assert add_five(20) == 25


def test_binary_ignores_extra_arguments():
    curried = curry(add)
    assert curried(5, 3, 999) == 8
    assert curried(5)(3, 999) == 8


def test_binary_extra_arguments_never_reach_target():
    seen = []

    def record(a, b):
        seen.append((a, b))
        return a

    curry(record)(1, 2, 3, 4)
    curry(record)(1)(2, 3)
    assert seen == [(1, 2), (1, 2)]


def test_binary_falsy_values_are_arguments():
    pair = curry(lambda a, b: [a, b])
    assert pair(0, "") == [0, ""]
    assert pair(None, None) == [None, None]
    assert pair(False, 0) == [False, 0]
    assert pair(None)(None) == [None, None]
    assert curry(add)(5)(0) == 5


def test_binary_works_with_strings():
    curried = curry(add)
    assert curried("hello", " world") == "hello world"
    assert curried("hello")(" world") == "hello world"


def test_binary_side_effects_once_per_call():
    calls = 0

    def counted(a, b):
        nonlocal calls
        calls += 1
        return a + b

    curried = curry(counted)
    curried(1, 2)
    assert calls == 1
    partial = curried(3)
    assert calls == 1
    partial(4)
    assert calls == 2


# ============================================================
# arity 3
# ============================================================

def test_ternary_all_call_shapes():
    curried = curry(add3)
    assert curried(1, 2, 3) == 6
    assert curried(1, 2)(3) == 6
    assert curried(1)(2, 3) == 6
    assert curried(1)(2)(3) == 6


def test_ternary_argument_order_preserved():
    curried = curry(tag3)
    assert curried(1, 2, 3) == "1-2-3"
    assert curried(1)(2, 3) == "1-2-3"
    assert curried(1, 2)(3) == "1-2-3"
    assert curried(1)(2)(3) == "1-2-3"
    assert curried(3, 2, 1) == "3-2-1"


def test_ternary_ignores_extra_arguments_at_every_level():
    curried = curry(add3)
    assert curried(1, 2, 3, 999) == 6
    assert curried(1, 2)(3, 999) == 6
    assert curried(1)(2, 3, 999) == 6
    assert curried(1)(2)(3, 999) == 6


def test_ternary_falsy_values():
    triple = curry(lambda a, b, c: [a, b, c])
    assert triple(None, None, None) == [None, None, None]
    assert triple(None)(None, None) == [None, None, None]
    assert triple(None, None)(None) == [None, None, None]
    assert triple(None)(None)(None) == [None, None, None]
    assert curry(add3)(0)(0)(0) == 0
    assert curry(add3)(5, 0)(0) == 5


def test_two_arguments_including_none_is_not_a_one_argument_call():
    curried = curry(lambda a, b: (a, b))
    assert curried(1, None) == (1, None)
    assert isinstance(curried(1), Curried)


def test_partial_applications_are_independent():
    curried = curry(add3)
    p1 = curried(1)
    p2 = curried(1)
    assert p1 is not p2
    assert p1 != p2

    add_one_five = curried(1, 5)
    add_ten = curried(10)
    assert p1(2, 3) == 6
    assert add_one_five(3) == 9
    assert add_ten(20, 30) == 60
    assert p1(2, 3) == 6


def test_nested_partial_applications_are_independent():
    add_one = curry(add3)(1)
    add_one_two = add_one(2)
    add_one_three = add_one(3)
    assert add_one_two(10) == 13
    assert add_one_three(10) == 14
    assert add_one_two(5) == 8
    assert add_one.bound == (1,)


def test_ternary_side_effects():
    calls = 0

    def counted(a, b, c):
        nonlocal calls
        calls += 1
        return a + b + c

    curried = curry(counted)
    curried(1, 2, 3)
    curried(1, 2)(3)
    curried(1)(2, 3)
    curried(1)(2)(3)
    assert calls == 4


# ============================================================
# 에러
# ============================================================

def test_unsupported_arity_four():
    with pytest.raises(UnsupportedArityError, match="Unsupported arity: 4") as exc:
        curry(lambda a, b, c, d: a)
    assert exc.value.arity == 4


def test_unsupported_arity_five():
    with pytest.raises(UnsupportedArityError, match="Unsupported arity: 5"):
        curry(lambda a, b, c, d, e: a)


def test_unsupported_explicit_arity():
    with pytest.raises(UnsupportedArityError):
        curry(add, arity=7)
    with pytest.raises(UnsupportedArityError):
        curry(add, arity=-1)


def test_unsupported_arity_is_value_error():
    with pytest.raises(ValueError):
        curry(lambda a, b, c, d: a)


def test_target_errors_propagate_unchanged():
    boom = ZeroDivisionError("Cannot be zero")

    def divide(a, b):
        if a == 0:
            raise boom
        return b / a

    curried = curry(divide)
    with pytest.raises(ZeroDivisionError) as exc:
        curried(0, 10)
    assert exc.value is boom
    with pytest.raises(ZeroDivisionError):
        curried(0)(10)
    assert curried(2, 10) == 5
    assert curried(2)(10) == 5


def test_call_without_arguments_raises_type_error():
    with pytest.raises(TypeError):
        curry(add)()
    with pytest.raises(TypeError):
        curry(add3)(1)()


def test_keyword_arguments_rejected():
    with pytest.raises(TypeError):
        curry(add)(a=1, b=2)


# ============================================================
# 특수 동작
# ============================================================

def test_explicit_arity_overrides_inspection():
    def variadic(*args):
        return sum(args)

    curried = curry(variadic, arity=2)
    assert curried(1)(2) == 3
    assert curried(1, 2, 3) == 3


def test_builtin_with_explicit_arity():
    curried = curry(divmod, arity=2)
    assert curried(7)(2) == (3, 1)


def test_function_returning_function():
    curried = curry(lambda a, b: lambda x: a + b + x)
    assert curried(1, 2)(3) == 6
    assert curried(1)(2)(3) == 6


def test_async_target_returned_unawaited():
    async def add_async(a, b, c):
        return a + b + c

    curried = curry(add_async)
    pending = curried(1)(2)(3)
    assert asyncio.iscoroutine(pending)
    assert asyncio.run(pending) == 6
    assert asyncio.run(curried(1, 2, 3)) == 6
    assert asyncio.run(curried(1, 2)(3)) == 6
    assert asyncio.run(curried(1)(2, 3)) == 6


def test_default_parameters_not_counted():
    def scale(x, y, factor=10):
        return (x + y) * factor

    curried = curry(scale)
    assert curried(1)(2) == 30


def test_curry_flip():
    prefix = curry(flip(lambda text, suffix: text + suffix))
    add_bang = prefix("!")
    assert [add_bang(w) for w in ["Hello", "World"]] == ["Hello!", "World!"]


def test_wrapped_and_repr():
    curried = curry(add3)
    assert curried.__wrapped__ is add3
    assert repr(curried) == "curry(add3)"
    assert repr(curried(1, "x")) == "curry(add3)(1, 'x')"


def test_partial_signature_reports_remaining_positions():
    from zeta_fp import arity

    curried = curry(add3)
    assert arity(curried) == 3
    assert arity(curried(1)) == 2
    assert arity(curried(1, 2)) == 1


def test_recurrying_a_partial_application():
    recurried = curry(curry(add3)(1))
    assert recurried(2)(3) == 6
    assert curry(curry(add3)(1, 2))(3) == 6
