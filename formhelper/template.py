"""Jinja2 templating with the form helpers available as globals."""

from __future__ import annotations

from typing import Any

from jinja2 import BaseLoader, Environment

from formhelper.helper import form_for


def make_environment() -> Environment:
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.globals["form_for"] = form_for
    return env


def render_template(template: str, data: dict[str, Any]) -> str:
    """Render a Jinja2 template string with data.

    Form markup is not escaped a second time, everything else in `data` is.

    Example:
        >>> render_template(
        ...     '{{ form_for("book", "/books", body) }}', {"body": body}
        ... )
        '<form action="/books" id="book-form" method="POST">...</form>'
    """
    return make_environment().from_string(template).render(**data)
