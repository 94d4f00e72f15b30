import re
from typing import Any

from normality import stringify

_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_RE = re.compile(r"([a-z\d])([A-Z])")
_SEPARATOR_RE = re.compile(r"[\s\-]+")
_DASH_RE = re.compile(r"[\W_]+")


def underscore(value: Any) -> str:
    """Turn a CamelCase, dashed or spaced string into snake_case.

    Example:
        >>> underscore("ExtendedTitle")
        'extended_title'
        >>> underscore("first-name")
        'first_name'
    """
    text = stringify(value) or ""
    text = _ACRONYM_RE.sub(r"\1_\2", text)
    text = _CAMEL_RE.sub(r"\1_\2", text)
    text = _SEPARATOR_RE.sub("_", text)
    return text.lower()


def dasherize(value: Any) -> str:
    """Lowercase a string and collapse every run of characters that are not
    letters or digits (Unicode included) into a single dash.

    Example:
        >>> dasherize("delivery-customer_name")
        'delivery-customer-name'
        >>> dasherize("BookForm")
        'book-form'
        >>> dasherize("título")
        'título'
    """
    return _DASH_RE.sub("-", underscore(value)).strip("-")


def titleize(value: Any) -> str:
    """Humanize a field key into capitalized words.

    Example:
        >>> titleize("extended_title")
        'Extended Title'
    """
    words = underscore(value).split("_")
    return " ".join(word.capitalize() for word in words if word)
