"""HTML source reader.

This module exposes :func:`read_html` which loads markup files without
performing any content normalization.  Conversion handles carriage returns and
raw line breaks itself, so the text is returned exactly as stored on disk.
UTF-8 byte-order marks (BOM) are consumed by using the ``"utf-8-sig"`` codec
by default.

``FileNotFoundError`` and other I/O errors propagate to the caller.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_html(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read an HTML document as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_html"]
