"""Plain-text writer for formatted output.

The formatter emits ``\\n`` separators between paragraphs.  They are written
as-is by default (``newline=""``).  Pass ``newline="\\r\\n"`` for files meant
for Windows tools.  Missing parent directories are created.
"""

from __future__ import annotations

import os
from pathlib import Path


def write_text(
    path: str | os.PathLike[str],
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` without altering it."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["write_text"]
