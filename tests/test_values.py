import pytest

from glisp.errors import GlispLookupError, GlispTypeError
from glisp.types import (
    Bool,
    DataType,
    Dict,
    FALSE,
    Float,
    Int,
    Keyword,
    List,
    NativeFunction,
    NativeObject,
    Nothing,
    String,
    Symbol,
    TRUE,
    truthy,
)
from glisp.types.datatype import INT_TYPE, LIST_TYPE, NATIVE_OBJECT_TYPE


@pytest.mark.parametrize(
    "value,rendered",
    [
        (Int(42), "42"),
        (Int(-3), "-3"),
        (Float(2.5), "2.5"),
        (Float(3.0), "3.0"),
        (TRUE, "true"),
        (FALSE, "false"),
        (String('a"b\n'), '"a\\"b\\n"'),
        (Keyword("key"), ":key"),
        (Keyword(":key"), ":key"),
        (Symbol("foo"), "foo"),
        (Nothing, "Nothing"),
        (List([Int(1), Int(2)], evaluated=True), "[1 2]"),
        (List([Symbol("f"), Int(1)]), "(f 1)"),
        (Dict([(Keyword("a"), Int(1))]), "{:a 1}"),
        (INT_TYPE, "Int"),
    ]
)
def test_rendering(value, rendered):
    assert str(value) == rendered


@pytest.mark.parametrize(
    "a,b,equal",
    [
        (Int(1), Int(1), True),
        (Int(1), Float(1.0), True),
        (Int(1), Int(2), False),
        (String("a"), String("a"), True),
        (String("a"), Keyword("a"), False),
        (Symbol("a"), Symbol("a"), True),
        (Symbol("a"), String("a"), False),
        (TRUE, Bool(True), True),
        (TRUE, FALSE, False),
        (Nothing, Nothing, True),
        (Nothing, FALSE, False),
        (List([Int(1), String("x")]), List([Int(1), String("x")]), True),
        (List([Int(1)]), List([Int(1), Int(2)]), False),
        (DataType("Int"), INT_TYPE, True),
    ]
)
def test_equality(a, b, equal):
    assert a.equals(b) is equal
    assert (a == b) is equal


def test_list_equality_ignores_evaluated_flag():
    assert List([Int(1)], evaluated=True) == List([Int(1)])


def test_dict_equality_is_left_coverage():
    small = Dict([(Keyword("a"), Int(1))])
    large = Dict([(Keyword("a"), Int(1)), (Keyword("b"), Int(2))])
    assert small.equals(large)
    assert not large.equals(small)


def test_native_function_cannot_be_compared():
    native = NativeFunction(lambda ctx, args: Nothing, "noop")
    with pytest.raises(GlispTypeError):
        native.equals(native)


def test_mutable_values_are_not_dict_keys():
    d = Dict()
    with pytest.raises(GlispTypeError):
        d.put(List([Int(1)]), Int(1))
    with pytest.raises(GlispTypeError):
        d.put(Dict(), Int(1))


def test_dict_get_missing_key():
    with pytest.raises(GlispLookupError):
        Dict().get(Keyword("missing"))


def test_truthiness():
    assert not truthy(FALSE)
    assert not truthy(Nothing)
    assert truthy(TRUE)
    assert truthy(Int(0))
    assert truthy(String(""))
    assert truthy(List())


def test_types():
    assert Int(1).get_type() == INT_TYPE
    assert List().get_type() == LIST_TYPE
    assert Nothing.get_type().name == "NothingType"
    assert NativeObject(object()).get_type() == NATIVE_OBJECT_TYPE
    assert NativeObject(object(), DataType("EventBus")).get_type() == DataType("EventBus")


def test_list_positions():
    items = List([Int(1), Int(2), Int(3)], evaluated=True)
    assert items.get(0) == Int(1)
    assert items.get(-1) == Int(3)
    assert items.front() == Int(1)
    assert items.back() == Int(3)
    with pytest.raises(GlispLookupError):
        items.get(3)
    with pytest.raises(GlispLookupError):
        List().front()


def test_list_derived_lists_leave_source_untouched():
    items = List([Int(1), Int(2), Int(3)], evaluated=True)
    tail = items.slice_from(1)
    tail.set(0, Int(99))
    assert items.get(1) == Int(2)
    assert items.concat(List([Int(4)])) == List([Int(1), Int(2), Int(3), Int(4)])
    assert len(items) == 3
    assert items.map(lambda v: Int(v.value * 2)) == List([Int(2), Int(4), Int(6)])
    assert items.filter(lambda v: v.value > 1) == List([Int(2), Int(3)])


def test_list_rejects_host_values():
    with pytest.raises(GlispTypeError):
        List([1, 2])
