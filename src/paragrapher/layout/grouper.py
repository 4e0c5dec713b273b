"""Greedy grouping of sentences into paragraphs.

Sentences are consumed in order into a buffer.  Before a sentence is added the
buffer is closed when it already holds ``min_sentences`` sentences and either

* it has reached the paragraph's sentence target, or
* the sentence would push the word count past the paragraph's word target.

Targets come from :func:`~paragrapher.layout.noise.next_target` and are soft:
the ``min_sentences`` floor always wins, so a paragraph may overshoot its word
target.  Each paragraph draws its target from a fresh position, which advances
only when a paragraph is closed.

Every sentence ends up in exactly one paragraph and the original order is kept.
"""

from __future__ import annotations

from typing import Iterable, List

from ..preprocess.segmenter import Sentence
from ..utils.logging import get_logger
from .base import NoiseConfig, Paragraph, ParagraphConfig
from .noise import base_targets, next_target

log = get_logger(__name__)


def group_into_paragraphs(
    sentences: Iterable[Sentence],
    config: ParagraphConfig,
    noise: NoiseConfig,
) -> List[Paragraph]:
    """Group ``sentences`` into paragraphs of sentence texts."""

    base_sentences, base_words = base_targets(config)
    position = 0
    target = next_target(base_sentences, base_words, position, config, noise)

    paragraphs: List[Paragraph] = []
    current: Paragraph = []
    word_count = 0

    for sentence in sentences:
        full = len(current) >= target.sentences
        too_long = word_count + sentence.word_count > target.words
        if len(current) >= config.min_sentences and (full or too_long):
            paragraphs.append(current)
            current = []
            word_count = 0
            position += 1
            target = next_target(base_sentences, base_words, position, config, noise)

        current.append(sentence.text)
        word_count += sentence.word_count

    if current:
        paragraphs.append(current)

    log.debug("grouped sentences into %d paragraphs", len(paragraphs))
    return paragraphs


__all__ = ["group_into_paragraphs"]
