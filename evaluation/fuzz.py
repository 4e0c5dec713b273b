"""Deterministic text fuzzing utilities.

The helpers in this module introduce layout-only perturbations into the prose
fixtures.  They never add, drop or reorder words, so the sentence sequence a
fuzzed variant segments into differs from the original at most where an
abbreviation changed case.

Examples of applied mutations:

* runs of extra spaces between words
* tabs and non-breaking spaces in place of regular spaces
* hard line wraps inside long lines
* runs of blank lines between existing lines
* case swaps of listed abbreviations (``Dr.`` -> ``DR.``)
* optional mixing of line ending styles

All edits are driven by a :class:`random.Random` seeded via
:func:`rng_from_seed`.  Given the same seed and options the output is fully
deterministic.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Iterable, Literal

from paragrapher.preprocess.segmenter import ABBREVIATIONS

_SPACE_VARIANTS = ["\t", "\u00a0", "\u202f"]


@dataclass(slots=True, frozen=True)
class FuzzOptions:
    """Configuration for :func:`mutate_text`.

    Attributes mirror the probabilities for each mutation.  ``max_variants``
    controls how many mutated versions :func:`variants` yields.
    """

    max_variants: int = 50
    extra_spaces_prob: float = 0.2
    replace_space_prob: float = 0.1
    insert_linebreak_prob: float = 0.3
    blank_lines_prob: float = 0.2
    abbreviation_case_prob: float = 0.5
    eol_style: Literal["mixed", "lf", "crlf"] = "mixed"


def rng_from_seed(seed: int) -> random.Random:
    """Return a deterministic :class:`~random.Random` seeded with ``seed``."""

    return random.Random(seed)


def _extra_spaces(text: str, rng: random.Random, prob: float) -> str:
    out: list[str] = []
    for ch in text:
        out.append(ch)
        if ch == " " and rng.random() < prob:
            out.append(" " * rng.randint(1, 3))
    return "".join(out)


def _replace_spaces(text: str, rng: random.Random, prob: float) -> str:
    out: list[str] = []
    for ch in text:
        if ch == " " and rng.random() < prob:
            out.append(rng.choice(_SPACE_VARIANTS))
        else:
            out.append(ch)
    return "".join(out)


def _insert_linebreaks(text: str, rng: random.Random, prob: float) -> str:
    out_lines: list[str] = []
    for line in text.splitlines(keepends=True):
        if len(line) > 40 and rng.random() < prob:
            spaces = [m.start() for m in re.finditer(" ", line[:-1])]
            if spaces:
                idx = rng.choice(spaces)
                line = line[:idx] + "\n" + line[idx + 1 :]
        out_lines.append(line)
    return "".join(out_lines)


def _blank_lines(text: str, rng: random.Random, prob: float) -> str:
    def repl(match: re.Match[str]) -> str:
        if rng.random() >= prob:
            return match.group(0)
        return "\n" * rng.randint(2, 4)

    return re.sub(r"\n", repl, text)


_ABBREV_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(a) for a in ABBREVIATIONS) + r")\.",
)


def vary_abbreviation_case(text: str, rng: random.Random, prob: float) -> str:
    """Randomly upper- or lower-case listed abbreviations."""

    def repl(match: re.Match[str]) -> str:
        token = match.group(0)
        if rng.random() >= prob:
            return token
        return token.upper() if rng.random() < 0.5 else token.lower()

    return _ABBREV_RE.sub(repl, text)


def random_eol_mix(text: str, rng: random.Random, style: Literal["mixed", "lf", "crlf"]) -> str:
    """Apply the requested line-ending style to ``text``."""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if style == "lf":
        return text
    if style == "crlf":
        return text.replace("\n", "\r\n")
    parts = text.split("\n")
    out: list[str] = []
    for i, part in enumerate(parts):
        out.append(part)
        if i < len(parts) - 1:
            out.append("\r\n" if rng.random() < 0.5 else "\n")
    return "".join(out)


def mutate_text(text: str, *, seed: int, opts: FuzzOptions) -> str:
    """Return a fuzzed variant of ``text`` using ``seed`` and ``opts``."""

    rng = rng_from_seed(seed)
    mutated = text
    mutated = vary_abbreviation_case(mutated, rng, opts.abbreviation_case_prob)
    mutated = _insert_linebreaks(mutated, rng, opts.insert_linebreak_prob)
    mutated = _extra_spaces(mutated, rng, opts.extra_spaces_prob)
    mutated = _replace_spaces(mutated, rng, opts.replace_space_prob)
    mutated = _blank_lines(mutated, rng, opts.blank_lines_prob)
    mutated = random_eol_mix(mutated, rng, opts.eol_style)
    return mutated


def variants(text: str, *, base_seed: int, opts: FuzzOptions) -> Iterable[str]:
    """Yield deterministic fuzzed variants of ``text``."""

    for i in range(opts.max_variants):
        yield mutate_text(text, seed=base_seed + i, opts=opts)


__all__ = [
    "FuzzOptions",
    "rng_from_seed",
    "mutate_text",
    "variants",
    "vary_abbreviation_case",
    "random_eol_mix",
]
