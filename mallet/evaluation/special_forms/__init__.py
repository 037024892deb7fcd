"""Registry of special forms for the Mallet evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Each handler receives the unevaluated argument forms, the current environment
and the evaluator, and returns a value or a TailCall. The evaluator consults
this table before macro expansion and ordinary function application.
"""

from mallet.types.symbol import Symbol
from mallet.evaluation.special_forms.define_form import define_form, defmacro_form
from mallet.evaluation.special_forms.let_form import let_form
from mallet.evaluation.special_forms.progn_form import do_form
from mallet.evaluation.special_forms.if_form import if_form
from mallet.evaluation.special_forms.lambda_form import lambda_form
from mallet.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, quasiquoteexpand_form
from mallet.evaluation.special_forms.macroexpand_forms import macroexpand_form
from mallet.evaluation.special_forms.try_catch_form import try_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("defmacro!"): defmacro_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fn*"): lambda_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("quasiquoteexpand"): quasiquoteexpand_form,
    Symbol("macroexpand"): macroexpand_form,
    Symbol("try*"): try_form,
}
