import pytest

from choicekit.choice import introspect, match
from choicekit.record import introspect_record
from choicekit.std import (
    Propagate,
    def_either,
    def_maybe,
    def_pair,
    def_res,
    is_err,
    is_just,
    is_left,
    is_nothing,
    is_ok,
    is_right,
    propagating,
    try_ok,
)


def test_maybe_just():
    Maybe = def_maybe("int")
    maybe = Maybe.Just(123)
    assert is_just(maybe)
    assert not is_nothing(maybe)
    assert maybe.value == 123


def test_maybe_nothing():
    Maybe = def_maybe("Msg")
    maybe = Maybe.Nothing()
    assert not is_just(maybe)
    assert is_nothing(maybe)
    assert maybe.value is None


def test_maybe_match_formats_like_example():
    Maybe = def_maybe("int")
    arms = {"Just": lambda v: f"Just({v})", "Nothing": lambda: "Nothing"}
    assert match(Maybe.Just(123), arms) == "Just(123)"
    assert match(Maybe.Nothing(), arms) == "Nothing"


def test_maybe_introspection():
    assert (
        introspect(def_maybe("int"))
        == "((VARIANT_KIND_SINGLE)(Just)(int)) ((VARIANT_KIND_EMPTY)(Nothing))"
    )


def test_generic_types_are_cached():
    assert def_maybe("int") is def_maybe("int")
    assert def_res("int", "str") is def_res("int", "str")
    assert def_maybe("int") is not def_maybe("double")


def test_generic_type_name():
    assert def_maybe("int").__name__ == "Maybe_int"


def test_pointer_type_name_is_usable():
    Maybe = def_maybe("const char *")
    assert Maybe.__name__.isidentifier()
    assert is_just(Maybe.Just("x"))


def test_invalid_type_name():
    with pytest.raises(ValueError):
        def_maybe("")


def test_either():
    Either = def_either("int", "str")
    left = Either.Left(1)
    right = Either.Right("a")
    assert is_left(left) and not is_right(left)
    assert is_right(right) and not is_left(right)


def test_res():
    Res = def_res("int", "str")
    assert is_ok(Res.Ok(5)) and not is_err(Res.Ok(5))
    assert is_err(Res.Err("bad")) and not is_ok(Res.Err("bad"))


def test_predicate_on_wrong_type():
    Res = def_res("int", "str")
    with pytest.raises(ValueError):
        is_just(Res.Ok(1))
    with pytest.raises(TypeError):
        is_ok(42)


def test_pair():
    Pair = def_pair("Msg", "double")
    pair = Pair("Hello", 89267.2529909)
    assert pair.fst == "Hello"
    assert pair.snd == 89267.2529909
    assert introspect_record(Pair) == "((fst)(Msg)) ((snd)(double))"


def test_try_ok_returns_value():
    Res = def_res("int", "str")
    assert try_ok(Res.Ok(7)) == 7


def test_try_ok_raises_propagate():
    Res = def_res("int", "str")
    with pytest.raises(Propagate) as info:
        try_ok(Res.Err("boom"))
    assert info.value.error == "boom"


def test_try_ok_on_non_result():
    with pytest.raises(ValueError):
        try_ok(def_maybe("int").Just(1))


def test_propagating_passes_error_up():
    Inner = def_res("int", "str")
    Outer = def_res("double", "str")

    @propagating(Outer)
    def halve(res):
        value = try_ok(res)
        return Outer.Ok(value / 2)

    assert halve(Inner.Ok(8)) == Outer.Ok(4.0)
    result = halve(Inner.Err("no input"))
    assert result == Outer.Err("no input")
    assert is_err(result)


def test_propagating_keeps_function_name():
    Res = def_res("int", "str")

    @propagating(Res)
    def compute():
        return Res.Ok(1)

    assert compute.__name__ == "compute"
    assert compute() == Res.Ok(1)


def test_propagating_rejects_non_result_types():
    with pytest.raises(TypeError):
        propagating(int)
    with pytest.raises(ValueError):
        propagating(def_maybe("int"))