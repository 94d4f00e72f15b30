from markupsafe import Markup

from formhelper.html import HtmlBuilder, attribute_name, merge_attributes


class TestAttributes:
    def test_attribute_name(self):
        assert attribute_name("class_") == "class"
        assert attribute_name("for_") == "for"
        assert attribute_name("id") == "id"
        assert attribute_name("_") == "_"

    def test_merge_caller_wins(self):
        merged = merge_attributes({"type": "text", "id": "a"}, {"id": "b"})
        assert merged == {"type": "text", "id": "b"}
        assert list(merged) == ["type", "id"]

    def test_merge_normalizes_keys(self):
        merged = merge_attributes({"for": "a"}, {"for_": "b", "class_": "x"})
        assert merged == {"for": "b", "class": "x"}

    def test_merge_without_attributes(self):
        assert merge_attributes({"a": 1}) == {"a": 1}


class TestHtmlBuilder:
    html = HtmlBuilder()

    def test_void_element(self):
        out = self.html.tag("input", {"type": "text", "value": None})
        assert out == '<input type="text" value="">'
        assert isinstance(out, Markup)

    def test_content(self):
        out = self.html.tag("button", {"type": "submit"}, "Create")
        assert out == '<button type="submit">Create</button>'

    def test_escaping(self):
        out = self.html.tag("label", {"title": 'a "b" & c'}, "<b>x</b>")
        assert out == (
            '<label title="a &#34;b&#34; &amp; c">&lt;b&gt;x&lt;/b&gt;</label>'
        )

    def test_markup_children_not_escaped(self):
        child = Markup("<option>x</option>")
        out = self.html.tag("select", {}, [child, "<y>"])
        assert out == "<select><option>x</option>&lt;y&gt;</select>"

    def test_callable_children(self):
        out = self.html.tag("p", None, lambda: "hi")
        assert out == "<p>hi</p>"

    def test_boolean_and_list_attributes(self):
        out = self.html.tag(
            "input", {"required": True, "disabled": False, "class_": ["a", "b"]}
        )
        assert out == '<input required="required" class="a b">'

    def test_escape(self):
        assert self.html.escape("<&>") == "&lt;&amp;&gt;"
