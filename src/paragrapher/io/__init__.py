"""File access for the command line front end.

Prose is read from and written to plain-text files only.  Handlers are looked
up by file extension (case-insensitive) so additional formats can be plugged in
with :func:`register_reader` / :func:`register_writer`.  ``.txt``, ``.text``
and ``.md`` files share the plain-text handlers; Markdown is treated as prose
and not parsed.

No content transformation happens here.  Whitespace cleanup belongs to the
sentence segmenter.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .readers.txt_reader import read_text
from .writers.txt_writer import write_text

PathLike = str | os.PathLike[str]

_READERS: dict[str, Callable[..., str]] = {}
_WRITERS: dict[str, Callable[..., None]] = {}

PLAIN_TEXT_EXTENSIONS: tuple[str, ...] = (".txt", ".text", ".md")


def register_reader(ext: str, func: Callable[..., str]) -> None:
    """Register ``func`` as the reader for files ending with ``ext``."""

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: Callable[..., None]) -> None:
    """Register ``func`` as the writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: PathLike) -> str:
    """Return the lower-cased suffix of ``path`` or ``""`` when it has none."""

    return Path(path).suffix.lower()


def read_file(path: PathLike, **kwargs: Any) -> str:
    """Read ``path`` with the reader registered for its extension.

    Keyword arguments (``encoding``, ``errors``) are forwarded to the reader.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Cannot read '{path}': unsupported extension '{ext}'")
    return reader(path, **kwargs)


def write_file(path: PathLike, text: str, **kwargs: Any) -> None:
    """Write ``text`` to ``path`` with the writer registered for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Cannot write '{path}': unsupported extension '{ext}'")
    writer(path, text, **kwargs)


for _ext in PLAIN_TEXT_EXTENSIONS:
    register_reader(_ext, read_text)
    register_writer(_ext, write_text)

__all__ = [
    "PLAIN_TEXT_EXTENSIONS",
    "register_reader",
    "register_writer",
    "get_extension",
    "read_file",
    "write_file",
]
