"""Text preprocessing: whitespace cleanup and sentence segmentation."""

from .segmenter import ABBREVIATIONS, Sentence, parse_sentences

__all__ = ["ABBREVIATIONS", "Sentence", "parse_sentences"]
