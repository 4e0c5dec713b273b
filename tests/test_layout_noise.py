"""Tests for the deterministic noise function and target sizes."""

from __future__ import annotations

import pytest

from paragrapher.layout.base import NoiseConfig, ParagraphConfig, TargetSize
from paragrapher.layout.noise import (
    base_targets,
    clamp,
    next_target,
    round_half_up,
    simple_noise,
)

QUIET = NoiseConfig(sentence_variation=0, word_variation=0)


def test_noise_range() -> None:
    values = [simple_noise(x) for x in range(500)]
    assert all(-1.0 <= v < 1.0 for v in values)
    # not a constant
    assert len({round(v, 6) for v in values}) > 400


def test_noise_is_deterministic() -> None:
    assert [simple_noise(x) for x in range(20)] == [simple_noise(x) for x in range(20)]


def test_noise_at_origin() -> None:
    assert simple_noise(0) == -1.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2.5, 3), (3.49, 3), (-0.5, 0), (-1.5, -1), (99.5, 100)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_clamp_inverted_range_prefers_low() -> None:
    assert clamp(3, 5, 1) == 5
    assert clamp(0, 2, 4) == 2
    assert clamp(9, 2, 4) == 4


def test_base_targets_are_midpoints() -> None:
    assert base_targets(ParagraphConfig()) == (3.0, 100.0)
    assert base_targets(ParagraphConfig(min_sentences=1, max_sentences=2)) == (1.5, 100.0)


def test_target_without_noise_uses_midpoints() -> None:
    cfg = ParagraphConfig()
    assert next_target(3.0, 100.0, 7, cfg, QUIET) == TargetSize(sentences=3, words=100)
    cfg = ParagraphConfig(min_sentences=2, max_sentences=3)
    assert next_target(2.5, 100.0, 0, cfg, QUIET).sentences == 3


def test_target_is_clamped() -> None:
    cfg = ParagraphConfig()
    loud = NoiseConfig(sentence_variation=50, word_variation=500)
    for position in range(50):
        target = next_target(3.0, 100.0, position, cfg, loud)
        assert cfg.min_sentences <= target.sentences <= cfg.max_sentences
        assert cfg.min_words <= target.words <= cfg.max_words


def test_first_target_with_default_noise() -> None:
    # simple_noise(0) == -1 pulls the first sentence target down to the floor
    cfg = ParagraphConfig()
    target = next_target(3.0, 100.0, 0, cfg, NoiseConfig())
    assert target.sentences == 2
    assert 90 <= target.words <= 110


def test_sentence_and_word_noise_are_decorrelated() -> None:
    cfg = ParagraphConfig(min_sentences=0, max_sentences=1000, min_words=0, max_words=1000)
    noise = NoiseConfig(sentence_variation=100, word_variation=100)
    pairs = [next_target(500.0, 500.0, p, cfg, noise) for p in range(30)]
    assert any(t.sentences != t.words for t in pairs)
