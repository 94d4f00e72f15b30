"""Derive input names, DOM ids and value paths from a nesting context.

Given the context ``["delivery", "address"]`` and the field ``street``:

    wire name   delivery[address][street]
    dom id      delivery-address-street
    value path  delivery.address.street

The wire name is what a params parser decodes back into nested data, the
value path is what gets looked up in `Values` and `Params`.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from formhelper.exc import InvalidArgument
from formhelper.util import dasherize
from formhelper.values import PathSource

INPUT_ID_TOKEN = re.compile(r"\[(?P<token>[\w\-]*)\]")
INPUT_VALUE_TOKEN = re.compile(r"\[(?P<token>\w*)\]")

INPUT_ID_REPLACEMENT = r"-\g<token>"
INPUT_VALUE_REPLACEMENT = r".\g<token>"


def wire_name(context: Sequence[str], field: Any) -> str:
    if not context:
        raise InvalidArgument("Name context needs at least one segment", context)
    head, *nested = context
    return str(head) + "".join(f"[{segment}]" for segment in (*nested, field))


def dom_id(context: Sequence[str], field: Any) -> str:
    name = INPUT_ID_TOKEN.sub(INPUT_ID_REPLACEMENT, wire_name(context, field))
    return dasherize(name)


def value_path(context: Sequence[str], field: Any) -> str:
    return INPUT_VALUE_TOKEN.sub(INPUT_VALUE_REPLACEMENT, wire_name(context, field))


def resolve_value(path: str, values: PathSource, params: PathSource) -> Any:
    """Look up the value of a field, explicit values first, submitted params
    second. Returns None if neither has it."""
    value = values.get(path)
    if value is None:
        value = params.get(path)
    return value
