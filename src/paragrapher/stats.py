"""Text statistics for before/after comparisons.

Words are whitespace-delimited tokens, sentences follow
:func:`~paragrapher.preprocess.segmenter.parse_sentences` and paragraphs are
runs of non-blank lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .preprocess.segmenter import count_words, parse_sentences

_BLANK_LINE_RE = re.compile(r"\n\s*\n")


@dataclass(slots=True, frozen=True)
class TextStats:
    characters: int
    words: int
    sentences: int
    paragraphs: int

    def describe(self) -> str:
        return (
            f"{self.characters} chars, {self.words} words, "
            f"{self.sentences} sentences, {self.paragraphs} paragraphs"
        )


def count_paragraphs(text: str) -> int:
    """Return the number of blocks separated by blank lines."""

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return sum(1 for block in _BLANK_LINE_RE.split(normalized) if block.strip())


def compute_stats(text: str) -> TextStats:
    """Return :class:`TextStats` for ``text``."""

    return TextStats(
        characters=len(text),
        words=count_words(text),
        sentences=len(parse_sentences(text)),
        paragraphs=count_paragraphs(text),
    )


__all__ = ["TextStats", "count_paragraphs", "compute_stats"]
