import pytest

from glisp.errors import (
    GlispArityError,
    GlispDispatchError,
    GlispError,
    GlispLookupError,
    GlispParseError,
    GlispRuntimeError,
    GlispTypeError,
)
from glisp.evaluation.evaluator import evaluate, evaluate_string
from glisp.reader.parser import parse
from glisp.types import (
    Context,
    Dict,
    Float,
    Function,
    Int,
    Keyword,
    List,
    NativeFunction,
    NativeObject,
    Nothing,
    String,
    Symbol,
    FALSE,
    TRUE,
)
from glisp.types.datatype import INT_TYPE


# -----------------------------------------------------
# Self-evaluation and lookup
# -----------------------------------------------------
@pytest.mark.parametrize(
    "value",
    [
        Int(1),
        Float(3.14),
        String("hello"),
        Keyword("k"),
        TRUE,
        Nothing,
        INT_TYPE,
        Dict([(Keyword("a"), Int(1))]),
        List([Symbol("undefined-head")], evaluated=True),
        NativeObject(object()),
    ]
)
def test_self_evaluating_values(ctx, value):
    assert evaluate(value, ctx) is value


def test_symbol_lookup(ctx):
    ctx.define(Symbol("x"), Int(42))
    assert evaluate(Symbol("x"), ctx) == Int(42)


def test_call_built_from_values(ctx):
    expr = List([Symbol("+"), Int(2), Int(3)])
    assert evaluate(expr, ctx) == Int(5)


def test_callable_value_as_head(ctx):
    native = NativeFunction(lambda c, args: Int(len(args)), "count")
    assert evaluate(List([native, Int(1), Int(2)]), ctx) == Int(2)


def test_empty_string_evaluates_to_nothing(ctx):
    assert evaluate_string("", ctx) is Nothing


def test_caller_list_is_not_mutated(ctx):
    expr = parse("(+ 1 2 3)")
    before = str(expr)
    evaluate(expr, ctx)
    evaluate(expr, ctx)
    assert str(expr) == before


# -----------------------------------------------------
# Special forms
# -----------------------------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", Int(1)),
        ("(if false 1 2)", Int(2)),
        ("(if Nothing 1 2)", Int(2)),
        ("(if 0 1 2)", Int(1)),
        ('(if "" 1 2)', Int(1)),
        ("(if false 1)", Nothing),
        ("(do 1 2 3)", Int(3)),
        ("(do)", Nothing),
        ("(quote (a b))", List([Symbol("a"), Symbol("b")])),
        ("(and 1 2)", Int(2)),
        ("(and 1 false 2)", FALSE),
        ("(or false 3)", Int(3)),
        ("(or false Nothing)", Nothing),
        ("(let [x 1 y 2] (+ x y))", Int(3)),
        ("(let [x 1 y (+ x 1)] y)", Int(2)),
        ("(def z 7)", Int(7)),
    ]
)
def test_special_forms(run, source, expected):
    assert run(source) == expected


def test_if_only_evaluates_taken_branch(run):
    assert run("(if true 1 (undefined-thing))") == Int(1)
    assert run("(if false (undefined-thing) 2)") == Int(2)


def test_and_or_short_circuit(run):
    assert str(run("(and false (undefined-thing))")) == "false"
    assert run("(or 1 (undefined-thing))") == Int(1)


def test_let_bindings_do_not_leak(ctx, run):
    assert run("(let [x 1 y 2] (+ x y))") == Int(3)
    assert not ctx.is_defined(Symbol("x"))
    with pytest.raises(GlispLookupError):
        run("y")


@pytest.mark.parametrize("source", ["(let)", "(let [x])", "(let x 1)", "(let [1 2] 1)"])
def test_malformed_let(run, source):
    with pytest.raises((GlispArityError, GlispTypeError)):
        run(source)


def test_quote_keeps_code_as_data(run):
    run("(def code (quote (+ 1 2)))")
    code = run("code")
    assert isinstance(code, List)
    assert str(code) == "(+ 1 2)"
    assert run("(first code)") == Symbol("+")


def test_fn_closure_uses_definition_context(run):
    run("(def make-adder (fn [n] (fn [x] (+ x n))))")
    run("(def add5 (make-adder 5))")
    run("(def n 100)")
    assert run("(add5 1)") == Int(6)


def test_function_sees_later_globals(run):
    run("(defn get-g [] g)")
    run("(def g 3)")
    assert run("(get-g)") == Int(3)


def test_recursion(run):
    run("(defn fact [0] 1)")
    run("(defn fact [n] (* n (fact (- n 1))))")
    assert run("(fact 10)") == Int(3628800)


def test_defn_returns_function(run):
    fn = run("(defn sq [x] (* x x))")
    assert isinstance(fn, Function)
    assert str(fn) == "Function<sq>"
    assert run("(sq 4)") == Int(16)


# -----------------------------------------------------
# Errors
# -----------------------------------------------------
@pytest.mark.parametrize(
    "source,error",
    [
        ("undefined", GlispLookupError),
        ("()", GlispLookupError),
        ("(1 2)", GlispLookupError),
        ("((fn [a] a) 1)", GlispLookupError),
        ('(def s "x") (s 1)', GlispLookupError),
        ("(defn f [Int] 1) (f :k)", GlispDispatchError),
        ("(+ 1 :k)", GlispTypeError),
        ("(+ 1)", GlispArityError),
        ("(def)", GlispArityError),
        ("(def 1 2)", GlispTypeError),
        ("(if)", GlispArityError),
        ("(quote)", GlispArityError),
        ("12abc", GlispParseError),
    ]
)
def test_error_kinds(run, source, error):
    with pytest.raises(error):
        run(source)


def test_errors_are_recoverable(run):
    for source in ["undefined", "(defn f [Int] 1) (f :k)", "1,2x"]:
        with pytest.raises(GlispError):
            run(source)
    assert run("(+ 2 3)") == Int(5)


def test_host_exception_is_converted(ctx):
    def broken(context, args):
        raise KeyError("boom")

    def failing(context, args):
        raise RuntimeError("bad host")

    ctx.define(Symbol("broken"), NativeFunction(broken, "broken"))
    ctx.define(Symbol("failing"), NativeFunction(failing, "failing"))
    with pytest.raises(GlispLookupError) as info:
        evaluate_string("(broken)", ctx)
    assert isinstance(info.value.__cause__, KeyError)
    with pytest.raises(GlispRuntimeError):
        evaluate_string("(failing)", ctx)


def test_runaway_recursion_is_a_runtime_error(run):
    run("(defn loop [n] (loop n))")
    with pytest.raises(GlispRuntimeError):
        run("(loop 1)")
    assert run("(+ 1 1)") == Int(2)


def test_evaluation_in_child_context(ctx):
    child = Context(parent=ctx, name="script")
    evaluate_string("(def local 1)", child)
    assert child.is_defined(Symbol("local"))
    assert not ctx.is_defined(Symbol("local"))
