"""Minimal HTML builder used by the form builder to emit markup.

Escaping is delegated to `markupsafe`, so everything returned here is a
`Markup` string that Jinja2 templates with autoescape will not escape a
second time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from markupsafe import Markup, escape

Attributes = dict[str, Any]
Children = str | Markup | Iterable[Any] | Callable[[], Any] | None

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def attribute_name(key: str) -> str:
    """Strip the trailing underscore used to pass Python keywords as
    attributes (`class_`, `for_`)."""
    if len(key) > 1 and key.endswith("_"):
        return key[:-1]
    return key


def merge_attributes(
    defaults: Mapping[str, Any], attributes: Mapping[str, Any] | None = None
) -> Attributes:
    """Merge caller supplied attributes on top of computed defaults.

    Keys are normalized with `attribute_name` first, so `for_` replaces a
    default `for`. An overridden key keeps the position of the default.
    """
    merged: Attributes = {attribute_name(k): v for k, v in defaults.items()}
    for key, value in (attributes or {}).items():
        merged[attribute_name(key)] = value
    return merged


def render_attributes(attributes: Mapping[str, Any]) -> Markup:
    parts = []
    for key, value in attributes.items():
        name = attribute_name(key)
        if value is False:
            continue
        if value is True:
            value = name
        elif value is None:
            value = ""
        elif isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value)
        parts.append(Markup(' {}="{}"').format(Markup(escape(name)), value))
    return Markup("").join(parts)


def render_children(children: Children) -> Markup:
    if children is None:
        return Markup("")
    if callable(children):
        return render_children(children())
    if isinstance(children, str) or not isinstance(children, Iterable):
        return escape(children)
    return Markup("").join(render_children(child) for child in children)


class HtmlBuilder:
    """Emit escaped HTML elements from a tag name, attributes and children."""

    void_elements = VOID_ELEMENTS

    def escape(self, value: Any) -> Markup:
        return escape(value)

    def tag(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        children: Children = None,
    ) -> Markup:
        """Render a single element.

        Void elements (`input`, `br`, ...) are rendered without a closing tag
        and ignore `children`.

        Example:
            >>> HtmlBuilder().tag("button", {"type": "submit"}, "Create")
            Markup('<button type="submit">Create</button>')
        """
        opening = Markup("<{}{}>").format(
            Markup(escape(name)), render_attributes(attributes or {})
        )
        if name in self.void_elements:
            return opening
        return opening + render_children(children) + Markup("</{}>").format(name)
