"""Special forms for the mal evaluator.

`SpecialForm` is the closed set of forms that receive their arguments
unevaluated. The evaluator asks `SpecialForm.for_symbol` whether a list head
names one and dispatches through `SPECIAL_FORMS` before ordinary application.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from mal.types.symbol import Symbol
from mal.evaluation.special_forms.define_form import define_form
from mal.evaluation.special_forms.let_form import let_form
from mal.evaluation.special_forms.do_form import do_form
from mal.evaluation.special_forms.if_form import if_form
from mal.evaluation.special_forms.fn_form import fn_form


class SpecialForm(Enum):
    DEF = "def!"
    LET = "let*"
    DO = "do"
    IF = "if"
    FN = "fn*"

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.value)

    @classmethod
    def for_symbol(cls, sym: Symbol) -> Optional[SpecialForm]:
        return _BY_SYMBOL.get(sym)

    @classmethod
    def names(cls) -> list[str]:
        return [form.value for form in cls]


_BY_SYMBOL: dict[Symbol, SpecialForm] = {form.symbol: form for form in SpecialForm}

SPECIAL_FORMS: dict[SpecialForm, Callable] = {
    SpecialForm.DEF: define_form,
    SpecialForm.LET: let_form,
    SpecialForm.DO: do_form,
    SpecialForm.IF: if_form,
    SpecialForm.FN: fn_form,
}
