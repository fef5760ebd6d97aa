import pytest

from glisp.interpreter import Interpreter, new_context


@pytest.fixture
def ctx():
    """A fresh root context with the builtins registered."""
    return new_context()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(ctx):
    """Evaluate source text in the shared `ctx` fixture."""
    from glisp.evaluation.evaluator import evaluate_string

    def _run(code):
        return evaluate_string(code, ctx)

    return _run
