"""Token types produced by the syllable tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

TokenKind = Literal["syllable", "digits", "ellipsis", "reduplication", "foreign"]

# Vowel nucleus classes, named after the Lao vowel they stand for:
# ue = ɯ, oe = ɤ, aw = ɔ, uea = ɯa, iu = i + w.
VowelNucleus = Literal[
    "a",
    "i",
    "ue",
    "u",
    "e",
    "ae",
    "o",
    "aw",
    "ua",
    "ia",
    "uea",
    "oe",
    "ai",
    "ao",
    "am",
    "iu",
]


@dataclass(frozen=True)
class RegularSyllable:
    """A parsed Lao syllable.

    `text` is the syllable reassembled in reading order; `source` is the
    span of the word the tokenizer consumed for it, which equals `text`
    unless the reassembled syllable could not be found verbatim.
    """

    kind: ClassVar[TokenKind] = "syllable"

    text: str
    source: str
    initial: str
    pre_vowel: str | None = None
    nucleus: VowelNucleus | None = None
    tone: str | None = None
    final: str | None = None


@dataclass(frozen=True)
class DigitRun:
    """Maximal run of Lao digits."""

    kind: ClassVar[TokenKind] = "digits"

    text: str
    source: str


@dataclass(frozen=True)
class EllipsisMark:
    """The Lao ellipsis sign ຯ."""

    kind: ClassVar[TokenKind] = "ellipsis"

    text: str
    source: str


@dataclass(frozen=True)
class ForeignRun:
    """Characters passed through untouched."""

    kind: ClassVar[TokenKind] = "foreign"

    text: str
    source: str


@dataclass(frozen=True)
class ReduplicatedSyllable:
    """Repetition of the preceding token triggered by ໆ."""

    kind: ClassVar[TokenKind] = "reduplication"

    text: str
    source: str
    referent: Token


Token = RegularSyllable | DigitRun | EllipsisMark | ForeignRun | ReduplicatedSyllable
