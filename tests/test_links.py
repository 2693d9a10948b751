"""Tests for link rendering and the link table."""

from __future__ import annotations

import pytest

from html2plain.config import ConversionConfig, LinkStyle
from html2plain.links import LinkCollector, LinkTable
from html2plain.links.collector import is_ignored_target, resolve_url


def _collector(style: LinkStyle, base_url: str = "http://e.com") -> LinkCollector:
    return LinkCollector(ConversionConfig(link_style=style, base_url=base_url))


def test_inline() -> None:
    assert _collector(LinkStyle.INLINE).register("/x", "link") == "link [http://e.com/x]"


def test_nextline() -> None:
    assert _collector(LinkStyle.NEXTLINE).register("/x", "link") == "link\n[http://e.com/x]"


def test_none_discards_target() -> None:
    assert _collector(LinkStyle.NONE).register("/x", "link") == "link"


def test_table_numbering_is_stable() -> None:
    links = _collector(LinkStyle.TABLE)
    assert links.register("/x", "a") == "a [1]"
    assert links.register("http://other.org/", "b") == "b [2]"
    assert links.register("/x", "c") == "c [1]"
    assert links.table.urls == ["http://e.com/x", "http://other.org/"]


def test_table_dedup_is_exact() -> None:
    links = _collector(LinkStyle.TABLE)
    links.register("http://e.com/x", "a")
    assert links.register("http://e.com/x/", "b") == "b [2]"


@pytest.mark.parametrize("target", ["javascript:void(0)", "MAILTO:me@e.com", "#top"])
def test_ignored_targets(target: str) -> None:
    assert is_ignored_target(target)
    links = _collector(LinkStyle.TABLE)
    assert links.register(target, "text") == "text"
    assert len(links.table) == 0


@pytest.mark.parametrize(
    "target, expected",
    [
        ("https://a.org/b", "https://a.org/b"),
        ("ftp://a.org", "ftp://a.org"),
        ("/abs/path", "http://e.com/abs/path"),
        ("rel/path.html", "http://e.com/rel/path.html"),
    ],
)
def test_resolve_url(target: str, expected: str) -> None:
    assert resolve_url(target, "http://e.com") == expected


def test_resolve_without_base() -> None:
    assert resolve_url("page.html", "") == "/page.html"


def test_override_takes_precedence() -> None:
    links = _collector(LinkStyle.INLINE)
    assert links.register("/x", "a", "table") == "a [1]"
    assert links.register("/x", "a", "none") == "a"
    assert links.register("/x", "a", "bogus") == "a [http://e.com/x]"


def test_override_beats_none_default() -> None:
    links = _collector(LinkStyle.NONE)
    assert links.register("/x", "a", "inline") == "a [http://e.com/x]"


def test_link_table_render() -> None:
    table = LinkTable()
    assert table.render() == ""
    table.register("http://a")
    table.register("http://b")
    assert table.render() == "Links:\n------\n[1] http://a\n[2] http://b"
