"""End-to-end tests: pages and stylesheets in, pruned CSS out."""
from __future__ import annotations

import re
from pathlib import Path

import httpx
import pytest

from uncss import Uncss, UncssConfig, uncss
from uncss.errors import StylesheetLoadError
from uncss.model import Severity

SITE = Path(__file__).resolve().parent.parent / "fixtures" / "site"
INDEX = str(SITE / "index.html")
ABOUT = str(SITE / "pages" / "about.html")


# ---------------------------------------------------------------------------
# Fixture site
# ---------------------------------------------------------------------------


class TestFixtureSite:
    @pytest.fixture()
    def css(self) -> str:
        return uncss([INDEX, ABOUT])

    @pytest.mark.parametrize(
        "fragment",
        [
            '@charset "utf-8";',
            ".menu a {",
            ".menu a:hover {",
            ".box {",
            ".spinner {",
            "@keyframes spin {",
            '"Open Sans"',
            "  .menu {",
            "#about .lead {",
        ],
    )
    def test_used_rules_kept(self, css: str, fragment: str) -> None:
        assert fragment in css

    @pytest.mark.parametrize(
        "fragment",
        [
            ".menu a.disabled",
            ".unused",
            "@keyframes fade",
            "Unused Serif",
            ".sidebar",
            "#about .footnote",
        ],
    )
    def test_unused_rules_removed(self, css: str, fragment: str) -> None:
        assert fragment not in css

    def test_stylesheet_order(self, css: str) -> None:
        assert css.index(".menu a {") < css.index("#about .lead")

    def test_shared_stylesheet_read_once(self, css: str) -> None:
        assert css.count("@keyframes spin") == 1

    def test_single_page_drops_other_page_rules(self) -> None:
        css = uncss(INDEX)
        assert ".menu a {" in css
        assert "#about" not in css

    def test_analyze_reports_removed(self) -> None:
        result = Uncss().analyze([INDEX])
        assert result is not None
        assert result.removed_selectors == [
            ".menu a.disabled",
            ".unused",
            ".sidebar",
            "@keyframes fade",
            "@font-face",
        ]
        assert result.diagnostics == []


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestConfig:
    def test_ignore(self) -> None:
        config = UncssConfig(ignore=(".unused", re.compile(r"footnote")))
        css = uncss([INDEX, ABOUT], config)
        assert ".unused {" in css
        assert "#about .footnote {" in css

    def test_explicit_stylesheets(self) -> None:
        config = UncssConfig(stylesheets=(str(SITE / "css" / "about.css"),))
        css = uncss(ABOUT, config)
        assert "#about .lead" in css
        assert ".menu" not in css

    def test_raw_appended(self) -> None:
        config = UncssConfig(raw="h1 { margin: 0 } h2 { margin: 0 }")
        css = uncss(ABOUT, config)
        assert "h1 {" in css
        assert "h2" not in css

    def test_raw_only(self) -> None:
        config = UncssConfig(raw=".x { a: 1 } .y { b: 2 }")
        css = uncss('<p class="x"></p>', config)
        assert css == ".x {\n  a: 1;\n}\n"

    def test_csspath(self, tmp_path: Path) -> None:
        (tmp_path / "assets").mkdir()
        (tmp_path / "assets" / "a.css").write_text(".a { a: 1 } .b { b: 2 }", encoding="utf-8")
        page = tmp_path / "index.html"
        page.write_text('<link rel="stylesheet" href="a.css"><p class="a"></p>', encoding="utf-8")
        css = uncss(str(page), UncssConfig(csspath="assets"))
        assert css == ".a {\n  a: 1;\n}\n"

    def test_extra_urls_merged(self) -> None:
        config = UncssConfig(urls=(ABOUT,))
        css = uncss(INDEX, config)
        assert "#about .lead" in css

    def test_no_css_at_all(self) -> None:
        assert uncss("<p></p>") == ""
        assert Uncss().analyze("<p></p>") is None

    def test_missing_stylesheet(self, tmp_path: Path) -> None:
        page = tmp_path / "index.html"
        page.write_text('<link rel="stylesheet" href="gone.css">', encoding="utf-8")
        with pytest.raises(StylesheetLoadError):
            uncss(str(page))

    def test_fail_open_diagnostics(self) -> None:
        config = UncssConfig(raw="p:future-state { a: 1 } @font-face { src: url(x) }")
        result = Uncss(config).analyze("<p></p>")
        assert result is not None
        assert [d.severity for d in result.diagnostics] == [Severity.WARNING, Severity.INFO]


# ---------------------------------------------------------------------------
# Remote pages
# ---------------------------------------------------------------------------


class TestRemote:
    def test_url_page_and_stylesheets(self) -> None:
        responses = {
            "https://example.com/blog/post.html": (
                '<link rel="stylesheet" href="/site.css">'
                '<link rel="stylesheet" href="local.css">'
                '<article class="post"></article>'
            ),
            "https://example.com/site.css": ".post { a: 1 } .page { b: 2 }",
            "https://example.com/blog/local.css": "article { c: 3 } aside { d: 4 }",
        }
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            requested.append(url)
            if url not in responses:
                return httpx.Response(404)
            return httpx.Response(200, text=responses[url])

        client = httpx.Client(transport=httpx.MockTransport(handler))
        css = Uncss(client=client).process("https://example.com/blog/post.html")
        assert css == ".post {\n  a: 1;\n}\n\narticle {\n  c: 3;\n}\n"
        assert requested == list(responses)
