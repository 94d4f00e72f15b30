"""Form builder bound to a nested naming scheme.

Example:
    >>> def body(f):
    ...     f.text_field("customer_name")
    ...     with f.fields_for("address"):
    ...         f.text_field("street")
    ...     f.submit("Create")
    >>> attributes = {"action": "/deliveries"}
    >>> form = FormBuilder("delivery", attributes=attributes, block=body)
    >>> str(form)
    '<form action="/deliveries" method="POST">'
    '<input type="text" name="delivery[customer_name]" '
    'id="delivery-customer-name" value="">'
    '<input type="text" name="delivery[address][street]" '
    'id="delivery-address-street" value="">'
    '<button type="submit">Create</button></form>'
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from anystore.logging import get_logger
from banal import ensure_list
from markupsafe import Markup
from normality import stringify
from structlog.stdlib import BoundLogger

from formhelper import path
from formhelper.core import settings
from formhelper.exc import InvalidArgument
from formhelper.html import Attributes, HtmlBuilder, merge_attributes
from formhelper.util import titleize
from formhelper.values import Params, Values, ValuesSource, ensure_source

log: BoundLogger = get_logger(__name__)

BROWSER_OVERRIDE_METHOD = "POST"
CHECKED = "checked"
SELECTED = "selected"

Block = Callable[["FormBuilder"], Any]


def field_value(value: Any) -> Any:
    """Booleans are sent as "true" / "false" so they don't render as flag
    attributes."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class FormBuilder:
    """Renders one ``<form>`` and the fields inside it.

    A builder with form attributes is a top-level one: it resolves method
    override and wraps its output in a ``<form>`` tag. A builder without
    attributes renders its fields only, for embedding in another form.
    """

    def __init__(
        self,
        name: str,
        params: Any = None,
        values: Any = None,
        attributes: Mapping[str, Any] | None = None,
        block: Block | None = None,
        html: HtmlBuilder | None = None,
    ):
        form_name = stringify(name)
        if form_name is None:
            log.debug("Rejecting form without name", name=name)
            raise InvalidArgument("Form name must not be empty", name)
        self._context: list[str] = [form_name]
        self.params = ensure_source(params, Params)
        self.values: ValuesSource = ensure_source(values, Values, ValuesSource)
        self.attributes: Attributes = merge_attributes(attributes or {})
        self.block = block
        self.html = html or HtmlBuilder()
        self.verb: str | None = None
        self._output: list[Markup] | None = None

    @property
    def name(self) -> str:
        return self._context[0]

    @property
    def context(self) -> tuple[str, ...]:
        """The current nesting, top-level form name first."""
        return tuple(self._context)

    @property
    def toplevel(self) -> bool:
        return bool(self.attributes)

    @property
    def is_update(self) -> bool:
        """True if the form was given values, e.g. to edit a record."""
        return self.values.is_populated()

    def render(self) -> Markup:
        """Run the block and return the resulting markup."""
        if self.toplevel:
            attributes = self._method_override()
            return self.html.tag("form", attributes, self._capture())
        return Markup("").join(self._capture())

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())

    @contextmanager
    def fields_for(self, name: str) -> Iterator[FormBuilder]:
        """Prefix the names of all fields created in the block with `name`.

        Nesting is unbounded. The previous context is restored on exit, also
        if the block raises.

        Example:
            >>> with f.fields_for("address"):
            ...     f.text_field("street")
            Markup('<input type="text" name="delivery[address][street]" ...>')
        """
        depth = len(self._context)
        self._context.append(str(name))
        try:
            yield self
        finally:
            del self._context[depth:]

    def emit(self, markup: Markup) -> Markup:
        """Append already rendered markup to the form output."""
        if self._output is not None:
            self._output.append(markup)
        return markup

    def label(self, content: Any, **attributes: Any) -> Markup:
        """Label tag.

        ``label("extended_title")`` targets the field and uses
        "Extended Title" as text. ``label("Title", for_="extended_title")``
        targets the same field with a literal text.
        """
        target = attributes.pop("for_", None)
        for_attribute = attributes.pop("for", None)
        if target is None:
            target = for_attribute
        if target is None:
            target, content = content, titleize(content)
        attributes = merge_attributes({"for": self._input_id(target)}, attributes)
        return self.emit(self.html.tag("label", attributes, content))

    def field(self, kind: str, name: str, **attributes: Any) -> Markup:
        """Input of the given `type`, pre-filled with the resolved value."""
        attributes = self._attributes(kind, name, attributes)
        return self.emit(self.html.tag("input", attributes))

    def color_field(self, name: str, **attributes: Any) -> Markup:
        return self.field("color", name, **attributes)

    def date_field(self, name: str, **attributes: Any) -> Markup:
        return self.field("date", name, **attributes)

    def datetime_field(self, name: str, **attributes: Any) -> Markup:
        return self.field("datetime", name, **attributes)

    def datetime_local_field(self, name: str, **attributes: Any) -> Markup:
        return self.field("datetime-local", name, **attributes)

    def email_field(self, name: str, **attributes: Any) -> Markup:
        return self.field("email", name, **attributes)

    def hidden_field(self, name: str, **attributes: Any) -> Markup:
        return self.field("hidden", name, **attributes)

    def text_field(self, name: str, **attributes: Any) -> Markup:
        return self.field("text", name, **attributes)

    input_text = text_field

    def file_field(self, name: str, **attributes: Any) -> Markup:
        """File input, never pre-filled.

        `accept` can be a list of MIME types. The form needs
        ``enctype="multipart/form-data"`` for the upload to be sent.
        """
        if "accept" in attributes:
            accept = ensure_list(attributes["accept"])
            attributes["accept"] = settings.accept_separator.join(accept)
        defaults = {
            "type": "file",
            "name": self._input_name(name),
            "id": self._input_id(name),
        }
        attributes = merge_attributes(defaults, attributes)
        return self.emit(self.html.tag("input", attributes))

    def radio_button(self, name: str, value: Any, **attributes: Any) -> Markup:
        """Radio input, checked if the resolved value equals `value`."""
        defaults: Attributes = {
            "type": "radio",
            "name": self._input_name(name),
            "value": field_value(value),
        }
        if self._value(name) == value:
            defaults["checked"] = CHECKED
        attributes = merge_attributes(defaults, attributes)
        return self.emit(self.html.tag("input", attributes))

    def select(
        self, name: str, choices: Mapping[Any, Any], **attributes: Any
    ) -> Markup:
        """Select with one option per entry of `choices` (value -> content).

        The option matching the resolved value is selected. Attributes
        passed as `options` go to every ``<option>`` instead of the
        ``<select>``.
        """
        option_attributes = attributes.pop("options", None) or {}
        attributes = merge_attributes(
            {"name": self._input_name(name), "id": self._input_id(name)}, attributes
        )
        current = self._value(name)
        options = []
        for value, content in choices.items():
            defaults: Attributes = {"value": field_value(value)}
            if current == value:
                defaults["selected"] = SELECTED
            option = merge_attributes(defaults, option_attributes)
            options.append(self.html.tag("option", option, content))
        return self.emit(self.html.tag("select", attributes, options))

    def submit(self, content: Any, **attributes: Any) -> Markup:
        attributes = merge_attributes({"type": "submit"}, attributes)
        return self.emit(self.html.tag("button", attributes, content))

    def _capture(self) -> list[Markup]:
        previous, self._output = self._output, []
        try:
            if self.block is not None:
                self.block(self)
            return self._output
        finally:
            self._output = previous

    def _method_override(self) -> Attributes:
        """Browsers submit forms with GET or POST only. Any other verb is
        sent as POST and kept in `verb` for the caller to pass along."""
        attributes = dict(self.attributes)
        verb = str(attributes.get("method") or settings.default_method).upper()
        browser_methods = [m.upper() for m in settings.browser_methods]
        if verb in browser_methods:
            attributes["method"] = verb
            self.verb = None
        else:
            attributes["method"] = BROWSER_OVERRIDE_METHOD
            self.verb = verb
            log.debug("Method override", form=self.name, verb=verb)
        return attributes

    def _attributes(self, kind: str, name: str, attributes: Mapping[str, Any]):
        defaults = {
            "type": kind,
            "name": self._input_name(name),
            "id": self._input_id(name),
            "value": field_value(self._value(name)),
        }
        return merge_attributes(defaults, attributes)

    def _input_name(self, name: Any) -> str:
        return path.wire_name(self._context, name)

    def _input_id(self, name: Any) -> str:
        return path.dom_id(self._context, name)

    def _value(self, name: Any) -> Any:
        value_path = path.value_path(self._context, name)
        return path.resolve_value(value_path, self.values, self.params)
