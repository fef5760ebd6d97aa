"""Registry of special forms for the glisp evaluator.

Special forms are NativeFunctionB values: they receive their arguments
unevaluated and decide themselves what to evaluate. `register` binds them
into a context, normally the root one.
"""

from glisp.types.context import Context
from glisp.types.native import NativeFunctionB
from glisp.types.symbol import Symbol
from glisp.evaluation.special_forms.if_form import if_form
from glisp.evaluation.special_forms.do_form import do_form
from glisp.evaluation.special_forms.quote_form import quote_form
from glisp.evaluation.special_forms.logic_forms import and_form, or_form
from glisp.evaluation.special_forms.let_form import let_form
from glisp.evaluation.special_forms.fn_form import fn_form
from glisp.evaluation.special_forms.define_form import def_form, defn_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("do"): do_form,
    Symbol("quote"): quote_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
    Symbol("def"): def_form,
    Symbol("defn"): defn_form,
}


def register(context: Context) -> None:
    context.update({name: NativeFunctionB(form, name.id) for name, form in SPECIAL_FORMS.items()})
