"""Abbreviation-aware sentence segmentation.

:func:`parse_sentences` performs the heuristic splitting used by the paragraph
formatter.  It works purely with regular expressions and the fixed
:data:`ABBREVIATIONS` list:

1. every whitespace run is collapsed to a single space and the ends trimmed;
2. the text is cut after each ``.``, ``!`` or ``?`` that is followed by
   whitespace, keeping the punctuation on the left-hand piece;
3. a piece ending in a listed abbreviation (``Dr.``, ``p.m.`` ...) is glued
   onto the following piece instead of closing a sentence.

Known limitations
-----------------
The heuristic is deliberately approximate.  Abbreviations missing from the list
cause spurious breaks, and a listed abbreviation that genuinely ends a sentence
(``"... and so on, etc. Next"``) is merged with the following sentence.
Decimal numbers and ellipses are only handled insofar as the split rule
requires whitespace after the punctuation.  Whitespace and word boundaries
follow Python's Unicode ``\\s``/``\\b``: U+FEFF is not treated as whitespace
while control separators such as ``\\x1c`` are.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from ..utils.logging import get_logger

log = get_logger(__name__)

# Matched case-insensitively, without the trailing period.
# fmt: off
ABBREVIATIONS: tuple[str, ...] = (
    # titles and degrees
    "Dr", "Prof", "Mr", "Mrs", "Ms", "Rev", "Sr", "Jr",
    "Ph.D", "M.D", "B.A", "M.A", "B.S", "M.S",
    # countries and agencies
    "U.S", "U.S.A", "U.K", "U.N", "N.A.T.O", "F.B.I", "C.I.A", "N.S.A", "D.O.D", "D.O.J",
    # companies and latin shorthands
    "Inc", "Corp", "Ltd", "Co", "LLC", "LLP", "etc", "vs", "i.e", "e.g",
    "a.m", "p.m",
    # street types
    "St", "Ave", "Blvd", "Rd", "Ct", "Ln", "Pl", "Sq", "Pkwy", "Hwy",
    # months and weekdays
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun",
    # references
    "No", "Nos", "Vol", "pp", "p", "ch", "sec", "fig", "ref", "eq", "ex",
)
# fmt: on

_WHITESPACE_RE = re.compile(r"\s+")
_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
_ABBREV_END_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(abbr) for abbr in ABBREVIATIONS) + r")\.\s*$",
    re.IGNORECASE,
)


@dataclass(slots=True, frozen=True)
class Sentence:
    """A sentence and its whitespace-delimited word count."""

    text: str
    word_count: int


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and strip both ends."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def count_words(text: str) -> int:
    """Return the number of whitespace-delimited tokens in ``text``."""

    return len(text.split())


def ends_with_abbreviation(piece: str) -> bool:
    """Return ``True`` if ``piece`` ends with a known abbreviation.

    The abbreviation must start on a word boundary, so ``"Stop."`` is not
    mistaken for ``"p."``.
    """

    return _ABBREV_END_RE.search(piece) is not None


def split_candidates(text: str) -> List[str]:
    """Return the raw pieces between sentence-ending punctuation marks.

    ``text`` is normalized first; no abbreviation handling happens here.
    """

    normalized = normalize_whitespace(text)
    if not normalized:
        return []
    return _BOUNDARY_RE.split(normalized)


def parse_sentences(text: str) -> List[Sentence]:
    """Split ``text`` into :class:`Sentence` objects.

    Empty or whitespace-only input yields an empty list and text without
    terminal punctuation yields a single sentence.  An abbreviation at the very
    end of the text has nothing to merge with and is kept as-is.
    """

    pieces = split_candidates(text)
    sentences: List[Sentence] = []
    carry = ""
    for idx, raw in enumerate(pieces):
        piece = f"{carry} {raw.strip()}".strip() if carry else raw.strip()
        carry = ""
        if not piece:
            continue
        if ends_with_abbreviation(piece) and idx < len(pieces) - 1:
            carry = piece
            continue
        sentences.append(Sentence(piece, count_words(piece)))

    log.debug("segmented %d pieces into %d sentences", len(pieces), len(sentences))
    return sentences


__all__ = [
    "ABBREVIATIONS",
    "Sentence",
    "normalize_whitespace",
    "count_words",
    "ends_with_abbreviation",
    "split_candidates",
    "parse_sentences",
]
