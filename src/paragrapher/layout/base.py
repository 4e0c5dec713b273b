"""Core layout model shared by the grouping stages.

The configuration records are plain frozen dataclasses.  The layout code
performs no range validation: ``min_sentences > max_sentences`` and similar
inverted ranges are accepted and simply clamp every target to a single value.
Validating user input is left to :mod:`paragrapher.config`.
"""

from __future__ import annotations

from dataclasses import dataclass

Paragraph = list[str]


@dataclass(slots=True, frozen=True)
class ParagraphConfig:
    """Sentence/word ranges for a paragraph and the blank lines between them.

    ``line_breaks`` counts the newlines added on top of the single newline
    that always separates paragraphs.
    """

    min_sentences: int = 2
    max_sentences: int = 4
    min_words: int = 80
    max_words: int = 120
    line_breaks: int = 1


@dataclass(slots=True, frozen=True)
class NoiseConfig:
    """Maximum deviation applied to the sentence and word targets."""

    sentence_variation: int = 4
    word_variation: int = 10


@dataclass(slots=True, frozen=True)
class TargetSize:
    """Soft sentence/word goal for one paragraph."""

    sentences: int
    words: int


__all__ = ["Paragraph", "ParagraphConfig", "NoiseConfig", "TargetSize"]
