"""Registry of special forms for the lis evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.
Every handler takes (tail, env, options, evaluate_fn).
"""

from lis.types.symbol import Symbol
from lis.evaluation.special_forms.if_form import if_form
from lis.evaluation.special_forms.define_form import define_form
from lis.evaluation.special_forms.set_form import set_form
from lis.evaluation.special_forms.define_func_form import define_func_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("define-func"): define_func_form,
}
