"""Smoke tests for package import and version."""

import html2plain


def test_import_package() -> None:
    assert isinstance(html2plain.__version__, str)
    assert callable(html2plain.convert)
