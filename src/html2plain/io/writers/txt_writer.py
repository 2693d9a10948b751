"""Plain-text writer.

The :func:`write_text` helper persists the converted text to disk.  Directories
required to store the file are created automatically.  By default UTF-8
encoding without a BOM is used and a single trailing newline is appended so the
file ends like any other text file.
"""

from __future__ import annotations

import os
from pathlib import Path

PathLikeStr = os.PathLike[str]


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = None,
) -> None:
    """Write ``text`` to ``path``.

    Parameters
    ----------
    path:
        Destination file path.
    text:
        The converted text.
    encoding:
        Output encoding.  Defaults to UTF-8 without a byte-order mark.
    newline:
        ``newline`` parameter forwarded to :func:`open`.  The default of
        ``None`` writes the platform line separator.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)
        if text and not text.endswith("\n"):
            f.write("\n")


__all__ = ["write_text"]
