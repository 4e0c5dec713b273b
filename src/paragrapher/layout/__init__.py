"""Paragraph layout: target sizes, greedy grouping and rendering."""

from .base import NoiseConfig, Paragraph, ParagraphConfig, TargetSize
from .grouper import group_into_paragraphs
from .noise import base_targets, next_target, simple_noise
from .render import render_paragraphs

__all__ = [
    "NoiseConfig",
    "Paragraph",
    "ParagraphConfig",
    "TargetSize",
    "base_targets",
    "group_into_paragraphs",
    "next_target",
    "render_paragraphs",
    "simple_noise",
]
