"""Registry of special forms for the Lumen evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before evaluating the head of a list, so these
names act as keywords and cannot be shadowed by bindings.
"""

from lumen.types.symbol import Symbol
from lumen.evaluation.special_forms.if_form import if_form
from lumen.evaluation.special_forms.define_form import define_form
from lumen.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
}
