"""Lao syllable parsing and word tokenization."""

from laoroman.syllables.base import (
    DigitRun,
    EllipsisMark,
    ForeignRun,
    ReduplicatedSyllable,
    RegularSyllable,
    Token,
    TokenKind,
    VowelNucleus,
)
from laoroman.syllables.parser import parse_one
from laoroman.syllables.tokenizer import tokenize

__all__ = [
    "DigitRun",
    "EllipsisMark",
    "ForeignRun",
    "ReduplicatedSyllable",
    "RegularSyllable",
    "Token",
    "TokenKind",
    "VowelNucleus",
    "parse_one",
    "tokenize",
]
