"""Segmentation of one Lao word into syllable tokens."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from laoroman.script.chars import ELLIPSIS_MARK, REDUPLICATION_MARK, is_lao, is_lao_digit
from laoroman.syllables.base import (
    DigitRun,
    EllipsisMark,
    ForeignRun,
    ReduplicatedSyllable,
    Token,
)
from laoroman.syllables.parser import parse_one

logger = logging.getLogger(__name__)


def tokenize(word: str) -> list[Token]:
    """Split `word` into syllables, digit runs, punctuation and foreign runs.

    Every iteration consumes at least one character, and the `source`
    spans of the returned tokens concatenate back to `word`. The only
    exception is a ໆ with nothing before it, which is dropped.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(word):
        char = word[pos]

        if not is_lao(char):
            end = _scan(word, pos, lambda c: not is_lao(c))
            chunk = word[pos:end]
            tokens.append(ForeignRun(text=chunk, source=chunk))
            pos = end
            continue

        if is_lao_digit(char):
            end = _scan(word, pos, is_lao_digit)
            chunk = word[pos:end]
            tokens.append(DigitRun(text=chunk, source=chunk))
            pos = end
            continue

        if char == REDUPLICATION_MARK:
            pos += 1
            if not tokens:
                logger.debug("Dropping reduplication mark at start of %r", word)
                continue
            previous = tokens[-1]
            tokens.append(ReduplicatedSyllable(text=previous.text, source=char, referent=previous))
            continue

        if char == ELLIPSIS_MARK:
            tokens.append(EllipsisMark(text=char, source=char))
            pos += 1
            continue

        syllable = parse_one(word[pos:])
        if syllable is None:
            logger.debug("Unrecognized character %r at offset %d of %r", char, pos, word)
            tokens.append(ForeignRun(text=char, source=char))
            pos += 1
        elif word.startswith(syllable.text, pos):
            tokens.append(syllable)
            pos += len(syllable.text)
        else:
            logger.debug("Syllable %r not found verbatim in %r", syllable.text, word)
            tokens.append(replace(syllable, source=char))
            pos += 1

    return tokens


def _scan(word: str, start: int, accept: Callable[[str], bool]) -> int:
    end = start
    while end < len(word) and accept(word[end]):
        end += 1
    return end
