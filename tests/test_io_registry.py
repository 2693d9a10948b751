"""Tests for the extension-based I/O registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from html2plain.io import get_extension, read_file, register_reader, write_file
from html2plain.utils.errors import UnsupportedFormatError


def test_unknown_extension_raises(tmp_path: Path) -> None:
    path = tmp_path / "file.unknown"
    with pytest.raises(UnsupportedFormatError):
        read_file(path)
    with pytest.raises(UnsupportedFormatError):
        write_file(path, "text")


def test_html_read_as_is(tmp_path: Path) -> None:
    path = tmp_path / "page.HTM"
    path.write_bytes(b"\xef\xbb\xbf<p>a</p>\r\n<p>b</p>")
    assert read_file(path) == "<p>a</p>\r\n<p>b</p>"


def test_txt_written_with_final_newline(tmp_path: Path) -> None:
    path = tmp_path / "out" / "result.txt"
    write_file(path, "hello", newline="")
    assert path.read_bytes() == b"hello\n"


def test_get_extension() -> None:
    assert get_extension("a/b.XHTML") == ".xhtml"
    assert get_extension("noext") == ""


def test_register_reader(tmp_path: Path) -> None:
    register_reader(".md", lambda p, **_: "custom")
    path = tmp_path / "x.md"
    path.write_text("ignored")
    assert read_file(path) == "custom"
