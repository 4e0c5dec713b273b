"""paragrapher: regroup prose into naturally varied paragraphs.

Text is segmented into sentences with an abbreviation-aware heuristic and then
grouped greedily into paragraphs whose sentence and word targets carry
deterministic noise, so the same input and configuration always give the same
breaks.  The command line interface lives in :mod:`paragrapher.cli`.
"""

from .formatter import (
    FormatOptions,
    format_text_into_paragraphs,
    get_default_config,
    get_default_noise_config,
    resolve_options,
)
from .layout.base import NoiseConfig, ParagraphConfig
from .preprocess.segmenter import Sentence, parse_sentences

__version__ = "0.1.0"

__all__ = [
    "FormatOptions",
    "NoiseConfig",
    "ParagraphConfig",
    "Sentence",
    "format_text_into_paragraphs",
    "get_default_config",
    "get_default_noise_config",
    "parse_sentences",
    "resolve_options",
    "__version__",
]
