import pytest

from formhelper.builder import FormBuilder
from formhelper.values import Params, Values


@pytest.fixture(scope="function")
def values():
    return Values({"book": {"title": "Dune", "category": "Fiction"}})


@pytest.fixture(scope="function")
def params():
    return Params({"book": {"category": "Non-Fiction", "store": "it"}})


@pytest.fixture(scope="function")
def builder(params):
    """Fresh builder for each test function so the name context can't
    leak between tests."""
    return FormBuilder("book", params=params, values=Values())


@pytest.fixture(scope="function")
def make_form():
    """Factory for top-level builders posting to /books."""

    def _make_form(name, block, **kwargs):
        kwargs.setdefault("attributes", {"action": "/books"})
        return FormBuilder(name, block=block, **kwargs)

    return _make_form
