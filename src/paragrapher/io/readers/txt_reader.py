"""Plain-text reader for prose input.

Text is returned exactly as stored.  The segmenter collapses whitespace later,
so line endings are not translated here.  A UTF-8 byte-order mark, common in
files saved by desktop editors, is dropped by the default ``utf-8-sig`` codec.
"""

from __future__ import annotations

import os


def read_text(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Return the contents of ``path``.

    ``FileNotFoundError``, ``UnicodeDecodeError`` and other ``OSError``
    subclasses propagate to the caller.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_text"]
