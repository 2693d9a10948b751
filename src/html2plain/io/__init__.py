"""File access for HTML sources and plain-text results.

Sources are dispatched on their extension: markup files (``.html``, ``.htm``,
``.xhtml``) and ``.txt`` files holding HTML are read verbatim.  Results are
written to ``.txt`` files only.  Further handlers can be added at runtime with
:func:`register_reader` and :func:`register_writer`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from ..utils.logging import get_logger
from .readers.html_reader import read_html
from .writers.txt_writer import write_text

SOURCE_EXTENSIONS = (".html", ".htm", ".xhtml", ".txt")
RESULT_EXTENSIONS = (".txt",)

ReaderFunc = Callable[..., str]
WriterFunc = Callable[..., None]

_READERS: dict[str, ReaderFunc] = {}
_WRITERS: dict[str, WriterFunc] = {}

logger = get_logger(__name__)


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased extension of ``path`` with its dot, or ``""``."""

    return Path(path).suffix.lower()


def register_reader(ext: str, func: ReaderFunc) -> None:
    """Use ``func(path, **kwargs)`` to load sources ending with ``ext``."""

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: WriterFunc) -> None:
    """Use ``func(path, text, **kwargs)`` to store results ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def _lookup(table: dict[str, Any], path: str | os.PathLike[str], role: str) -> Any:
    ext = get_extension(path)
    try:
        return table[ext]
    except KeyError:
        known = ", ".join(sorted(table)) or "none"
        raise UnsupportedFormatError(
            f"Unsupported {role} extension: '{ext}' (known: {known})"
        ) from None


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Return the HTML held in ``path``.

    Raises :class:`UnsupportedFormatError` when no reader handles the extension.
    """

    reader = _lookup(_READERS, path, "source")
    html = reader(path, **kwargs)
    logger.debug("read %d chars from %s", len(html), path)
    return html


def write_file(path: str | os.PathLike[str], text: str, **kwargs: Any) -> None:
    """Store converted ``text`` at ``path``.

    Raises :class:`UnsupportedFormatError` when no writer handles the extension.
    """

    writer = _lookup(_WRITERS, path, "result")
    writer(path, text, **kwargs)
    logger.debug("wrote %d chars to %s", len(text), path)


for _ext in SOURCE_EXTENSIONS:
    register_reader(_ext, read_html)
for _ext in RESULT_EXTENSIONS:
    register_writer(_ext, write_text)

__all__ = [
    "SOURCE_EXTENSIONS",
    "RESULT_EXTENSIONS",
    "ReaderFunc",
    "WriterFunc",
    "register_reader",
    "register_writer",
    "get_extension",
    "read_file",
    "write_file",
]
