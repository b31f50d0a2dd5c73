"""Tests for the tinycss2-backed CSS parser."""

import pytest

from uncss.css import CssParseError, parse_css
from uncss.model import ConditionalGroup, NamedAtRule, OpaqueRule, StyleRule


# ---------------------------------------------------------------------------
# Style rules
# ---------------------------------------------------------------------------


class TestStyleRules:
    def test_single_rule(self):
        rules = parse_css(".box { color: red; }")
        assert rules == [StyleRule(selectors=(".box",), declarations="color: red;")]

    def test_selector_list_split(self):
        rules = parse_css("h1,  h2 ,h3 { margin: 0 }")
        assert rules[0].selectors == ("h1", "h2", "h3")

    def test_commas_inside_functions_not_split(self):
        rules = parse_css(":is(a, b) > span, .c { margin: 0 }")
        assert rules[0].selectors == (":is(a, b) > span", ".c")

    def test_source_order(self):
        rules = parse_css(".a {} .b {} .c {}")
        assert [r.selectors[0] for r in rules] == [".a", ".b", ".c"]

    def test_comments_dropped(self):
        rules = parse_css("/* header */ .a { color: red; } /* footer */")
        assert len(rules) == 1

    def test_empty_stylesheet(self):
        assert parse_css("") == []
        assert parse_css("  \n ") == []


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_media_group(self):
        rules = parse_css("@media (max-width: 600px) { .a { color: red; } .b {} }")
        group = rules[0]
        assert isinstance(group, ConditionalGroup)
        assert group.keyword == "media"
        assert group.condition == "(max-width: 600px)"
        assert [r.selectors for r in group.rules] == [(".a",), (".b",)]

    def test_supports_group(self):
        rules = parse_css("@supports (display: grid) { .a { display: grid; } }")
        assert isinstance(rules[0], ConditionalGroup)

    def test_keyframes(self):
        rules = parse_css("@keyframes spin { from { opacity: 0 } to { opacity: 1 } }")
        rule = rules[0]
        assert isinstance(rule, NamedAtRule)
        assert rule.name == "spin"
        assert rule.kind == "keyframes"
        assert rule.header == "@keyframes spin"

    def test_vendor_keyframes(self):
        rule = parse_css("@-webkit-keyframes pulse { to { opacity: 0 } }")[0]
        assert rule.keyword == "-webkit-keyframes"
        assert rule.kind == "keyframes"

    def test_quoted_keyframes_name(self):
        assert parse_css('@keyframes "slide in" { to { opacity: 0 } }')[0].name == "slide in"

    def test_font_face_named_by_family(self):
        rule = parse_css('@font-face { font-family: "Open Sans"; src: url(a.woff2); }')[0]
        assert isinstance(rule, NamedAtRule)
        assert rule.name == "Open Sans"
        assert rule.header == "@font-face"

    def test_font_face_unquoted_family(self):
        rule = parse_css("@font-face { font-family: Fira Code; }")[0]
        assert rule.name == "Fira Code"

    def test_font_face_without_family(self):
        assert parse_css("@font-face { src: url(a.woff2); }")[0].name is None

    def test_counter_style(self):
        rule = parse_css("@counter-style thumbs { system: cyclic; symbols: x; }")[0]
        assert rule.kind == "counter-style"
        assert rule.name == "thumbs"

    def test_charset_is_opaque(self):
        assert parse_css('@charset "utf-8";') == [OpaqueRule(text='@charset "utf-8";')]

    def test_import_is_opaque(self):
        rule = parse_css('@import url("base.css") screen;')[0]
        assert isinstance(rule, OpaqueRule)
        assert rule.text.startswith("@import")

    def test_page_is_opaque(self):
        rule = parse_css("@page { margin: 1cm }")[0]
        assert rule == OpaqueRule(text="@page { margin: 1cm }")

    def test_layer_statement_is_opaque(self):
        assert isinstance(parse_css("@layer base, theme;")[0], OpaqueRule)

    def test_layer_block_is_group(self):
        assert isinstance(parse_css("@layer base { .a { b: c } }")[0], ConditionalGroup)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_missing_block(self):
        with pytest.raises(CssParseError):
            parse_css(".a")

    def test_empty_selector(self):
        with pytest.raises(CssParseError) as info:
            parse_css(".a, { color: red }")
        assert info.value.line == 1

    def test_error_in_nested_group(self):
        with pytest.raises(CssParseError):
            parse_css("@media print { .a }")


# ---------------------------------------------------------------------------
# Selector text
# ---------------------------------------------------------------------------


class TestSelectorText:
    def test_single_quotes_kept(self):
        rules = parse_css("a[target='_blank'] { color: red; }")
        assert rules[0].selectors == ("a[target='_blank']",)

    def test_escapes_kept(self):
        rules = parse_css(".x\\e9 t, a[target='_blank'] { color: red; }")
        assert rules[0].selectors == (".x\\e9 t", "a[target='_blank']")

    def test_multiline_selector_list(self):
        rules = parse_css(".menu a:hover,\n.menu a.disabled\n{\n  color: red;\n}")
        assert rules[0].selectors == (".menu a:hover", ".menu a.disabled")

    def test_no_space_before_block(self):
        assert parse_css("a{b:c}")[0].selectors == ("a",)

    def test_string_containing_brace(self):
        rules = parse_css('a[title="{"], b { c: d }')
        assert rules[0].selectors == ('a[title="{"]', "b")

    def test_edge_comments_dropped(self):
        rules = parse_css("/* a */ .a /* b */, /* c */ .b /* d */ { e: f }")
        assert rules[0].selectors == (".a", ".b")

    def test_nested_rule_text_kept(self):
        css = "@media print {\r\n  a[href^='http'] { color: red }\r\n}"
        assert parse_css(css)[0].rules[0].selectors == ("a[href^='http']",)
