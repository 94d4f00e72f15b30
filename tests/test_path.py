import pytest

from formhelper.exc import InvalidArgument
from formhelper.path import dom_id, resolve_value, value_path, wire_name
from formhelper.values import Params, Values


class TestWireName:
    def test_toplevel(self):
        assert wire_name(["book"], "title") == "book[title]"

    def test_nested(self):
        context = ["delivery", "address"]
        assert wire_name(context, "street") == "delivery[address][street]"
        context = ["delivery", "address", "location"]
        assert wire_name(context, "city") == "delivery[address][location][city]"

    def test_empty_context(self):
        with pytest.raises(InvalidArgument):
            wire_name([], "title")


class TestDomId:
    def test_flattens_brackets(self):
        assert dom_id(["delivery", "address"], "street") == "delivery-address-street"

    def test_dasherizes(self):
        assert dom_id(["delivery"], "customer_name") == "delivery-customer-name"
        assert dom_id(["book"], "extended-title") == "book-extended-title"

    def test_unicode_letters_kept(self):
        assert dom_id(["book"], "título") == "book-título"

    def test_collisions_are_not_disambiguated(self):
        assert dom_id(["book"], "first_name") == dom_id(["book"], "first-name")


class TestValuePath:
    def test_dotted(self):
        assert value_path(["book"], "title") == "book.title"
        path = value_path(["delivery", "address", "location"], "city")
        assert path == "delivery.address.location.city"


class TestResolveValue:
    def test_values_win_over_params(self):
        values = Values({"category": "Fiction"})
        params = Params({"category": "Nonfiction"})
        assert resolve_value("category", values, params) == "Fiction"

    def test_params_fallback(self):
        values = Values({"book": {"title": "Dune"}})
        params = Params({"book": {"category": "Nonfiction"}})
        assert resolve_value("book.category", values, params) == "Nonfiction"

    def test_falsy_values_win(self):
        values = Values({"book": {"pages": 0}})
        params = Params({"book": {"pages": 300}})
        assert resolve_value("book.pages", values, params) == 0

    def test_miss(self):
        assert resolve_value("book.title.x", Values(), Params()) is None

    def test_idempotent(self):
        values = Values({"book": {"title": "Dune"}})
        params = Params()
        first = resolve_value(value_path(["book"], "title"), values, params)
        second = resolve_value(value_path(["book"], "title"), values, params)
        assert first == second == "Dune"
        assert values.to_dict() == {"book": {"title": "Dune"}}
