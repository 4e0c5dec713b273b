from __future__ import annotations

from paragrapher import FormatOptions, format_text_into_paragraphs
from paragrapher.stats import TextStats, compute_stats, count_paragraphs


def test_compute_stats() -> None:
    stats = compute_stats("One. Two.\n\nThree.")
    assert stats == TextStats(characters=17, words=3, sentences=3, paragraphs=2)


def test_empty_text() -> None:
    assert compute_stats("") == TextStats(characters=0, words=0, sentences=0, paragraphs=0)


def test_paragraph_count_ignores_blank_runs_and_crlf() -> None:
    assert count_paragraphs("a\r\n\r\n\r\nb\n \nc\n") == 3
    assert count_paragraphs("hard\nwrapped\nlines") == 1


def test_paragraphs_match_formatter_output() -> None:
    opts = FormatOptions(min_sentences=1, max_sentences=1, sentence_variation=0, word_variation=0)
    out = format_text_into_paragraphs("A one. B two. C three.", opts)
    assert compute_stats(out).paragraphs == 3


def test_describe() -> None:
    assert TextStats(5, 1, 1, 1).describe() == "5 chars, 1 words, 1 sentences, 1 paragraphs"
