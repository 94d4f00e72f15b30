"""Containers used to pre-fill form fields.

`Values` holds data the caller passes explicitly (e.g. an entity being
edited), `Params` holds the params submitted with the request. Both resolve
dotted paths like ``delivery.address.city`` through nested data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

from banal import ensure_dict
from pydantic import BaseModel

from formhelper.exc import InvalidArgument

GET_SEPARATOR = "."


@runtime_checkable
class PathSource(Protocol):
    """Anything that can look up a dotted path."""

    def get(self, path: str) -> Any: ...


@runtime_checkable
class ValuesSource(PathSource, Protocol):
    """A path source that also tells whether it holds any data."""

    def is_populated(self) -> bool: ...


@singledispatch
def read_key(container: Any, key: str) -> Any:
    """Read one path segment from a container.

    Supported shapes are mappings, pydantic models, dataclass instances and
    named tuples. Anything else has no readable keys and yields None.
    """
    if is_dataclass(container) and not isinstance(container, type):
        if key in {f.name for f in fields(container)}:
            return getattr(container, key)
    return None


@read_key.register(Mapping)
def _read_mapping(container: Mapping, key: str) -> Any:
    return container.get(key)


@read_key.register(BaseModel)
def _read_model(container: BaseModel, key: str) -> Any:
    if key in type(container).model_fields:
        return getattr(container, key)
    extra = container.model_extra or {}
    return extra.get(key)


@read_key.register(tuple)
def _read_tuple(container: tuple, key: str) -> Any:
    if key in getattr(type(container), "_fields", ()):
        return getattr(container, key)
    return None


def lookup(container: Any, path: str) -> Any:
    """Walk a dotted path through nested data.

    A missing segment at any depth short-circuits to None.

    Example:
        >>> lookup({"book": {"title": "Dune"}}, "book.title")
        'Dune'
        >>> lookup({"book": None}, "book.title") is None
        True
    """
    result = container
    for key in str(path).split(GET_SEPARATOR):
        if result is None:
            break
        result = read_key(result, key)
    return result


class DataSource:
    """Dotted path lookup over a dict of top-level keys."""

    def __init__(self, data: Mapping[str, Any] | None = None, **kwargs: Any):
        self.data: dict[str, Any] = {**ensure_dict(data), **kwargs}

    def get(self, path: str) -> Any:
        return lookup(self.data, path)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.data)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.data!r})>"


class Values(DataSource):
    """Explicit values to fill a form with. They take precedence over
    params."""

    def is_populated(self) -> bool:
        """True if there is at least one top-level key, which usually means
        the form edits an existing record."""
        return len(self.data) > 0


class Params(DataSource):
    """Params submitted with the current request."""


def ensure_source(
    source: Any,
    factory: type[DataSource],
    protocol: type[PathSource] = PathSource,
) -> Any:
    """Wrap plain data into a `DataSource`, pass through anything that
    already implements `protocol`."""
    if source is None or isinstance(source, Mapping):
        return factory(source)
    if isinstance(source, protocol):
        return source
    raise InvalidArgument(f"Can't look up form values in: {source!r}", source)
