"""Deterministic noise and per-paragraph target sizes.

Paragraph sizes are perturbed with :func:`simple_noise`, a hash-like function
of a numeric position only.  No random number generator or clock is involved,
so formatting the same text with the same configuration always reproduces the
same breaks.
"""

from __future__ import annotations

import math

from .base import NoiseConfig, ParagraphConfig, TargetSize

# Offset between the sentence and word samples taken for one position.
WORD_NOISE_OFFSET = 100


def simple_noise(x: float) -> float:
    """Return a pseudo-random value in ``[-1, 1)`` derived from ``x``."""

    n = math.sin(x * 12.9898) * 43758.5453
    return (n - math.floor(n)) * 2 - 1


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""

    return math.floor(value + 0.5)


def clamp(value: int, low: int, high: int) -> int:
    """Clamp ``value`` into ``[low, high]``; ``low`` wins if the range is inverted."""

    return max(low, min(high, value))


def base_targets(config: ParagraphConfig) -> tuple[float, float]:
    """Return the midpoints of the sentence and word ranges."""

    return (
        (config.min_sentences + config.max_sentences) / 2,
        (config.min_words + config.max_words) / 2,
    )


def next_target(
    base_sentences: float,
    base_words: float,
    position: int,
    config: ParagraphConfig,
    noise: NoiseConfig,
) -> TargetSize:
    """Return the clamped target for the paragraph at ``position``.

    Two independent samples are drawn for ``position`` and
    ``position + WORD_NOISE_OFFSET``, scaled by the configured variations and
    added to the base values.
    """

    sentence_noise = simple_noise(position) * noise.sentence_variation
    word_noise = simple_noise(position + WORD_NOISE_OFFSET) * noise.word_variation

    sentences = round_half_up(base_sentences + sentence_noise)
    words = round_half_up(base_words + word_noise)
    return TargetSize(
        sentences=clamp(sentences, config.min_sentences, config.max_sentences),
        words=clamp(words, config.min_words, config.max_words),
    )


__all__ = [
    "WORD_NOISE_OFFSET",
    "simple_noise",
    "round_half_up",
    "clamp",
    "base_targets",
    "next_target",
]
