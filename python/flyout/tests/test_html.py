"""Test HTML escaping and attribute helpers."""

import json

from markupsafe import Markup

from flyout.html import escape_html, is_trusted, js_literal, render_attr, render_style, safe


class TestEscaping:
    def test_escape_special_characters(self):
        assert escape_html("<a href='x'>&\"</a>") == "&lt;a href=&#39;x&#39;&gt;&amp;&#34;&lt;/a&gt;"

    def test_none_is_empty(self):
        assert escape_html(None) == ""

    def test_numbers(self):
        assert escape_html(2) == "2"

    def test_safe_not_escaped(self):
        assert escape_html(safe("<b>bold</b>")) == "<b>bold</b>"

    def test_safe_none(self):
        assert safe(None) == Markup("")

    def test_is_trusted(self):
        assert is_trusted(Markup("<b></b>"))
        assert not is_trusted("<b></b>")


class TestAttributes:
    def test_render_attr(self):
        assert render_attr("tabindex", 0) == ' tabindex="0"'
        assert render_attr("id", 'a"b') == ' id="a&#34;b"'

    def test_render_attr_none(self):
        assert render_attr("style", None) == ""

    def test_render_attr_trusted_value(self):
        assert render_attr("title", Markup("&amp;")) == ' title="&amp;"'

    def test_render_style(self):
        assert render_style({"width": "12em", "color": None}) == "width:12em"
        assert render_style("width: 12em") == "width: 12em"
        assert render_style(None) == ""


class TestJsLiteral:
    def test_string(self):
        assert js_literal("#sort") == '"#sort"'

    def test_values(self):
        assert js_literal(True) == "true"
        assert js_literal(False) == "false"
        assert js_literal(400) == "400"

    def test_script_breakout_escaped(self):
        literal = js_literal("</script><b>&")
        assert "<" not in literal
        assert ">" not in literal
        assert "&" not in literal
        assert json.loads(literal) == "</script><b>&"
