"""Render grouped paragraphs as a single string."""

from __future__ import annotations

from typing import Sequence


def paragraph_separator(line_breaks: int) -> str:
    """Return one newline plus ``line_breaks`` extra newlines.

    ``0`` gives ``"\\n"`` and ``1`` a blank line.  Negative values behave like
    ``0``.
    """

    return "\n" + "\n" * line_breaks


def render_paragraphs(paragraphs: Sequence[Sequence[str]], line_breaks: int) -> str:
    """Join sentences with spaces and paragraphs with the separator.

    No separator follows the last paragraph.
    """

    separator = paragraph_separator(line_breaks)
    return separator.join(" ".join(paragraph) for paragraph in paragraphs)


__all__ = ["paragraph_separator", "render_paragraphs"]
