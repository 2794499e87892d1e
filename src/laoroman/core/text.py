"""Word and text level romanization."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cached_property

from laoroman.models import JoinMode, SyllablePair
from laoroman.rules import map_tokens
from laoroman.syllables import Token, tokenize

_HYPHEN_RUN_RE = re.compile(r"-{2,}")
_JOIN_SEPARATORS: dict[JoinMode, str] = {"document": "", "space": " "}


def join_romanized(parts: Iterable[str], *, hyphen: bool) -> str:
    """Join syllable romanizations into a word.

    A leading ອ romanizes to "-", which is dropped at the start of a word.
    Runs of "-" are collapsed before that, so a hyphenated word never
    starts with one. Empty renderings (a silent ຫ) add no separator.
    """
    joined = ("-" if hyphen else "").join(part for part in parts if part)
    if hyphen:
        joined = _HYPHEN_RUN_RE.sub("-", joined)
    return joined.removeprefix("-")


class Word:
    """One whitespace-delimited unit of Lao text."""

    def __init__(self, word_str: str, *, hyphen: bool = False) -> None:
        self._word_str = word_str
        self.hyphen = hyphen

    def __repr__(self) -> str:
        return f"Word({self._word_str!r}, hyphen={self.hyphen!r})"

    @property
    def word_str(self) -> str:
        return self._word_str

    @cached_property
    def syllables(self) -> tuple[Token, ...]:
        return tuple(tokenize(self._word_str))

    def all_syllables(self) -> tuple[Token, ...]:
        return self.syllables

    def romanize(self, hyphen: bool | None = None) -> str:
        """Romanize the word; `hyphen` overrides the word's own flag."""
        use_hyphen = self.hyphen if hyphen is None else hyphen
        return join_romanized(map_tokens(self.syllables), hyphen=use_hyphen)


class Text:
    """Lao text split into words on whitespace."""

    def __init__(self, text: str, *, join_mode: JoinMode = "space") -> None:
        if join_mode not in _JOIN_SEPARATORS:
            raise ValueError(
                f"join_mode must be one of {sorted(_JOIN_SEPARATORS)}, got {join_mode!r}"
            )
        self.text = text
        self.join_mode = join_mode
        self.words = tuple(Word(word_str) for word_str in text.split())

    def all_words(self) -> tuple[Word, ...]:
        return self.words

    def romanize(self, hyphen: bool = False) -> str:
        """Romanize all words, joined according to `join_mode`."""
        separator = _JOIN_SEPARATORS[self.join_mode]
        return separator.join(word.romanize(hyphen=hyphen) for word in self.words)

    def syllable_array(self) -> list[SyllablePair]:
        """Every syllable of every word with its romanization, in order."""
        pairs: list[SyllablePair] = []
        for word in self.words:
            tokens = word.all_syllables()
            for token, romanized in zip(tokens, map_tokens(tokens)):
                pairs.append(
                    SyllablePair(original=token.text, romanized=romanized.removeprefix("-"))
                )
        return pairs


def romanize(text: str, hyphen: bool = False, join_mode: JoinMode = "space") -> str:
    """Romanize `text` using BGN/PCGN."""
    return Text(text, join_mode=join_mode).romanize(hyphen=hyphen)


def syllable_array(text: str) -> list[SyllablePair]:
    return Text(text).syllable_array()
