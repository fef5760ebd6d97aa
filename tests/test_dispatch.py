import pytest

from glisp.errors import GlispArityError, GlispDispatchError, GlispRedefinitionError
from glisp.evaluation.evaluator import evaluate_string
from glisp.reader.parser import parse
from glisp.types import Context, Function, Int, List, Nothing, String
from glisp.types.parameters import ArgumentPattern, ArgumentSink, create_parameters
from glisp.types.datatype import INT_TYPE


# -------------------------------
# Parameter declarations
# -------------------------------
def test_create_parameters_kinds(ctx):
    params = create_parameters(parse('[x Int (Float f) 0 "on" :k true &rest more]'), ctx)
    assert [type(p) for p in params] == [ArgumentPattern] * 7 + [ArgumentSink]
    named, typed, typed_named, zero, on, key, flag, sink = params
    assert named.name == "x" and named.expected_type is None
    assert typed.expected_type == INT_TYPE and typed.name is None
    assert typed_named.name == "f" and typed_named.expected_type.name == "Float"
    assert zero.expected_value == Int(0)
    assert on.expected_value == String("on")
    assert key.expected_value is not None
    assert flag.expected_value is not None
    assert sink.name == "more"


def test_shapes_ignore_binder_names(ctx):
    assert create_parameters(parse("[r]"), ctx) == create_parameters(parse("[x]"), ctx)
    assert create_parameters(parse("[(Int a)]"), ctx) == create_parameters(parse("[Int]"), ctx)
    assert create_parameters(parse("[Int]"), ctx) != create_parameters(parse("[x]"), ctx)


@pytest.mark.parametrize(
    "params",
    [
        "[&rest]",
        "[&rest a b]",
        "[&rest 1]",
        "[(a b c)]",
        "[(notatype x)]",
        "[[1 2]]",
        "x",
    ]
)
def test_malformed_parameter_lists(ctx, params):
    with pytest.raises(GlispArityError):
        create_parameters(parse(params), ctx)


def test_select_dispatch_without_patterns():
    fn = Function("f", [])
    assert fn.select_dispatch(List([Int(1)], evaluated=True)) is None


# -------------------------------
# defn / dispatch through evaluation
# -------------------------------
def test_redefinition_replaces_same_shape(run):
    run("(defn area [r] (* 3 (* r r)))")
    assert run("(area 2)") == Int(12)
    run("(defn area [x] (* x x))")
    assert run("(area 2)") == Int(4)
    assert len(run("area").dispatchers) == 1


def test_value_pattern_declared_first_wins(run):
    run('(defn f [0] "zero")')
    run('(defn f [Int] "int")')
    assert run("(f 0)") == String("zero")
    assert run("(f 5)") == String("int")


def test_generic_pattern_declared_first_wins(run):
    run('(defn f [Int] "int")')
    run('(defn f [0] "zero")')
    assert run("(f 0)") == String("int")


def test_keyword_dispatch(run):
    run("(defn area [:square s] (* s s))")
    run("(defn area [:rect w h] (* w h))")
    assert run("(area :square 3)") == Int(9)
    assert run("(area :rect 2 5)") == Int(10)
    with pytest.raises(GlispDispatchError):
        run("(area :circle 1)")


def test_typed_dispatch_with_names(run):
    run('(defn describe [(Int n)] (str "int " n))')
    run('(defn describe [(String s)] (str "string " s))')
    assert run("(describe 4)") == String("int 4")
    assert run('(describe "x")') == String("string x")
    with pytest.raises(GlispDispatchError):
        run("(describe 1.5)")


def test_constant_patterns(run):
    run('(defn show [true] "yes")')
    run('(defn show [false] "no")')
    run('(defn show [Nothing] "none")')
    assert run("(show true)") == String("yes")
    assert run("(show false)") == String("no")
    assert run("(show Nothing)") == String("none")


@pytest.mark.parametrize(
    "call,expected",
    [
        ("(count)", "[]"),
        ("(count 1)", "[1]"),
        ("(count 1 2 3)", "[1 2 3]"),
    ]
)
def test_sink_binds_remaining_arguments(run, call, expected):
    run("(defn count [&rest xs] xs)")
    assert str(run(call)) == expected


def test_sink_after_fixed_parameters(run):
    run("(defn tail [x &rest xs] (len xs))")
    assert run("(tail 1)") == Int(0)
    assert run("(tail 1 2 3)") == Int(2)
    with pytest.raises(GlispDispatchError):
        run("(tail)")


def test_arity_mismatch_without_sink(run):
    run("(defn two [a b] (+ a b))")
    with pytest.raises(GlispDispatchError):
        run("(two 1)")
    with pytest.raises(GlispDispatchError):
        run("(two 1 2 3)")


def test_defn_on_native_is_rejected(run):
    with pytest.raises(GlispRedefinitionError):
        run("(defn + [a b] a)")


def test_defn_extends_a_copy_of_an_outer_function(ctx, run):
    run("(defn f [Int] :int)")
    child = Context(parent=ctx, name="child")
    evaluate_string("(defn f [String] :string)", child)
    assert len(ctx.lookup(parse("f")).dispatchers) == 1
    assert len(child.lookup(parse("f")).dispatchers) == 2
    assert str(evaluate_string('(f "a")', child)) == ":string"
    with pytest.raises(GlispDispatchError):
        run('(f "a")')


def test_body_with_several_forms(run):
    run("(defn f [x] (def y x) (+ y 1))")
    assert run("(f 1)") == Int(2)


def test_empty_body_returns_nothing(run):
    run("(defn f [])")
    assert run("(f)") is Nothing
