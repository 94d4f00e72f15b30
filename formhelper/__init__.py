from formhelper.builder import FormBuilder
from formhelper.exc import FormHelperException, InvalidArgument
from formhelper.helper import form_for
from formhelper.values import Params, Values

__all__ = [
    "FormBuilder",
    "FormHelperException",
    "InvalidArgument",
    "Params",
    "Values",
    "form_for",
]
