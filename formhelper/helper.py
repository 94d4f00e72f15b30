"""Entry point for rendering a form in a view or template."""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from formhelper.builder import Block, FormBuilder
from formhelper.core import settings
from formhelper.html import HtmlBuilder, merge_attributes
from formhelper.util import dasherize


def form_for(
    name: str,
    url: str,
    block: Block | None = None,
    values: Any = None,
    params: Any = None,
    html: HtmlBuilder | None = None,
    **attributes: Any,
) -> Markup:
    """Render a form posting to `url`.

    The form gets ``id="<name>-form"`` and ``method="POST"`` unless given
    otherwise. Methods browsers can't submit (PATCH, PUT, DELETE, ...) are
    sent as POST with a hidden field carrying the original method.

    Example:
        >>> out = form_for(
        ...     "book",
        ...     "/books/23",
        ...     lambda f: f.text_field("title"),
        ...     method="patch",
        ...     values={"book": {"title": "Dune"}},
        ... )

        renders, wrapped here:

        <form action="/books/23" id="book-form" method="POST">
        <input type="hidden" name="_method" value="PATCH">
        <input type="text" name="book[title]" id="book-title" value="Dune">
        </form>
    """
    defaults = {
        "action": url,
        "id": f"{dasherize(name)}-form",
        "method": settings.default_method,
    }

    def body(builder: FormBuilder) -> None:
        if builder.verb is not None:
            override = {
                "type": "hidden",
                "name": settings.method_param,
                "value": builder.verb,
            }
            builder.emit(builder.html.tag("input", override))
        if block is not None:
            block(builder)

    builder = FormBuilder(
        name,
        params=params,
        values=values,
        attributes=merge_attributes(defaults, attributes),
        block=body,
        html=html,
    )
    return builder.render()
