"""Macro expansion.

A macro is a closure whose `is_macro` flag is set by `defmacro!`. A list whose
head symbol resolves to a macro is a macro call: the macro receives the
unevaluated argument forms, and the form it returns replaces the call.
"""

from __future__ import annotations

import logging
from typing import Optional

from mallet import EvaluatorFn, SExpression
from mallet.errors import MalletUnboundSymbol
from mallet.evaluation.apply import call_function
from mallet.types.containers import List
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.function import Function
from mallet.types.symbol import Symbol

logger = logging.getLogger(__name__)


def macro_for(form: SExpression, env: Environment) -> Optional[Function]:
    """Return the macro `form` calls, or None when it is not a macro call."""
    if not (isinstance(form, List) and form and isinstance(form[0], Symbol)):
        return None
    try:
        value = env.get(form[0])
    except MalletUnboundSymbol:
        return None
    if isinstance(value, Function) and value.is_macro:
        return value
    return None


def expand_1(
    macro: Function, form: List, evaluate_fn: EvaluatorFn
) -> SExpression:
    """Run the macro transformer once on the raw argument forms."""
    logger.debug("expanding macro call %s", form[0])
    return call_function(macro, list(form[1:]), evaluate_fn)


def macroexpand(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand head-position macro calls until the form is no longer one."""
    while (macro := macro_for(form, env)) is not None:
        form = expand_1(macro, form, evaluate_fn)
        if isinstance(form, Error):
            return form
    return form
