"""Top-level paragraph formatting.

:func:`format_text_into_paragraphs` is the single entry point used by the CLI
and by library callers.  It wires the stages together::

    parse_sentences -> group_into_paragraphs -> render_paragraphs

Options are merged field by field over the built-in defaults.  Any option left
as ``None`` falls back to its default independently of the others:

================== =======
field              default
================== =======
min_sentences      2
max_sentences      4
min_words          80
max_words          120
line_breaks        1
sentence_variation 4
word_variation     10
================== =======

The function is pure.  No option is validated.  Callers accepting user input
should go through :mod:`paragrapher.config`, which rejects inverted ranges and
negative counts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Optional, Union

from .layout.base import NoiseConfig, ParagraphConfig
from .layout.grouper import group_into_paragraphs
from .layout.render import render_paragraphs
from .preprocess.segmenter import parse_sentences
from .utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_PARAGRAPH_CONFIG = ParagraphConfig()
DEFAULT_NOISE_CONFIG = NoiseConfig()


@dataclass(slots=True, frozen=True)
class FormatOptions:
    """Optional overrides for :func:`format_text_into_paragraphs`."""

    min_sentences: Optional[int] = None
    max_sentences: Optional[int] = None
    min_words: Optional[int] = None
    max_words: Optional[int] = None
    line_breaks: Optional[int] = None
    sentence_variation: Optional[int] = None
    word_variation: Optional[int] = None


OptionsLike = Union[FormatOptions, Mapping[str, Optional[int]], None]


def get_default_config() -> ParagraphConfig:
    """Return a copy of the default :class:`ParagraphConfig`."""

    return replace(DEFAULT_PARAGRAPH_CONFIG)


def get_default_noise_config() -> NoiseConfig:
    """Return a copy of the default :class:`NoiseConfig`."""

    return replace(DEFAULT_NOISE_CONFIG)


def _coerce_options(options: OptionsLike) -> FormatOptions:
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    # unknown keys raise TypeError like any bad keyword argument
    return FormatOptions(**dict(options))


def resolve_options(options: OptionsLike = None) -> tuple[ParagraphConfig, NoiseConfig]:
    """Merge ``options`` over the defaults, one field at a time."""

    opts = _coerce_options(options)

    def pick(name: str, default: int) -> int:
        value = getattr(opts, name)
        return default if value is None else value

    config = ParagraphConfig(
        min_sentences=pick("min_sentences", DEFAULT_PARAGRAPH_CONFIG.min_sentences),
        max_sentences=pick("max_sentences", DEFAULT_PARAGRAPH_CONFIG.max_sentences),
        min_words=pick("min_words", DEFAULT_PARAGRAPH_CONFIG.min_words),
        max_words=pick("max_words", DEFAULT_PARAGRAPH_CONFIG.max_words),
        line_breaks=pick("line_breaks", DEFAULT_PARAGRAPH_CONFIG.line_breaks),
    )
    noise = NoiseConfig(
        sentence_variation=pick("sentence_variation", DEFAULT_NOISE_CONFIG.sentence_variation),
        word_variation=pick("word_variation", DEFAULT_NOISE_CONFIG.word_variation),
    )
    return config, noise


def format_text_into_paragraphs(text: str, options: OptionsLike = None) -> str:
    """Return ``text`` regrouped into paragraphs.

    When no sentence can be extracted (empty or whitespace-only input) the
    input is returned unchanged.
    """

    config, noise = resolve_options(options)
    sentences = parse_sentences(text)
    if not sentences:
        return text

    paragraphs = group_into_paragraphs(sentences, config, noise)
    log.debug(
        "formatted %d sentences into %d paragraphs (line_breaks=%d)",
        len(sentences),
        len(paragraphs),
        config.line_breaks,
    )
    return render_paragraphs(paragraphs, config.line_breaks)


__all__ = [
    "DEFAULT_PARAGRAPH_CONFIG",
    "DEFAULT_NOISE_CONFIG",
    "FormatOptions",
    "OptionsLike",
    "get_default_config",
    "get_default_noise_config",
    "resolve_options",
    "format_text_into_paragraphs",
]
