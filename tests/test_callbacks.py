"""Tests for content dependent tag rewriting."""

from __future__ import annotations

from html2plain.config import ConversionConfig, LinkStyle
from html2plain.links import LinkCollector
from html2plain.rewrite.callbacks import CALLBACK_RULES, rewrite_callbacks


def _links(style: LinkStyle = LinkStyle.INLINE) -> LinkCollector:
    return LinkCollector(ConversionConfig(link_style=style, base_url="http://e.com"))


def test_rule_order() -> None:
    assert [rule.name for rule in CALLBACK_RULES] == ["link", "heading", "bold", "strong", "th"]


def test_link_rendered() -> None:
    assert rewrite_callbacks('<a href="/x">link</a>', _links()) == "link [http://e.com/x]"
    assert rewrite_callbacks("<A HREF='/x' title='t'>l</A>", _links()) == "l [http://e.com/x]"


def test_spaces_removed_from_href() -> None:
    assert rewrite_callbacks('<a href="/a b">x</a>', _links()) == "x [http://e.com/ab]"


def test_link_override_marker() -> None:
    html = '<a href="/x" class="_html2text_link_none">x</a> <a href="/y">y</a>'
    assert rewrite_callbacks(html, _links()) == "x y [http://e.com/y]"


def test_anchor_without_href_untouched() -> None:
    assert rewrite_callbacks('<a name="top">x</a>', _links()) == '<a name="top">x</a>'


def test_heading() -> None:
    assert rewrite_callbacks("<h2 id='a'>Title</h2>", _links()) == "\n\nTITLE\n\n"


def test_bold_and_strong() -> None:
    assert rewrite_callbacks("<b>bold</b> and <strong>strong</strong>", _links()) == (
        "BOLD and STRONG"
    )


def test_table_header() -> None:
    assert rewrite_callbacks("<th>Name</th>", _links()) == "\t\tNAME\n"


def test_link_inside_bold_upper_cased() -> None:
    html = '<b><a href="/x">go</a></b>'
    assert rewrite_callbacks(html, _links(LinkStyle.TABLE)) == "GO [1]"


def test_nested_markup_kept_inside_heading() -> None:
    assert rewrite_callbacks("<h1>a <i>b</i></h1>", _links()) == "\n\nA <i>B</i>\n\n"
