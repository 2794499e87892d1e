"""Token to Latin mapping."""

from __future__ import annotations

from collections.abc import Sequence

from laoroman.rules.tables import (
    CLUSTER_SECONDS,
    DIGITS,
    FINALS,
    INITIALS,
    NUCLEI,
    PUNCTUATION,
    SILENT_HO_BEFORE,
    SILENT_HO_NASALS,
)
from laoroman.script.chars import FINAL_MODIFIER, HO
from laoroman.syllables.base import (
    DigitRun,
    EllipsisMark,
    ReduplicatedSyllable,
    RegularSyllable,
    Token,
)

_DIGIT_TRANSLATION = str.maketrans(dict(DIGITS))


def map_tokens(tokens: Sequence[Token]) -> list[str]:
    """Romanize the tokens of one word, in order.

    A ຫ standing alone before a syllable starting with ນ or ມ spells out
    ໜ / ໝ and renders as "".
    """
    parts: list[str] = []
    for index, token in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if _is_silent_ho(token, following):
            parts.append("")
        else:
            parts.append(map_token(token))
    return parts


def map_token(token: Token) -> str:
    """Return the Latin rendering of a single token."""
    if isinstance(token, RegularSyllable):
        return map_syllable(token)
    if isinstance(token, DigitRun):
        return token.text.translate(_DIGIT_TRANSLATION)
    if isinstance(token, EllipsisMark):
        return PUNCTUATION[token.text]
    if isinstance(token, ReduplicatedSyllable):
        return map_token(token.referent)
    if token.text == FINAL_MODIFIER:
        # A stray cancellation mark silences nothing.
        return ""
    return token.text


def map_syllable(syllable: RegularSyllable) -> str:
    """Romanize a parsed syllable. Tone marks are not rendered."""
    initial = map_initial(syllable.initial)
    vowel = NUCLEI[syllable.nucleus] if syllable.nucleus is not None else ""
    final = ""
    if syllable.final is not None:
        final = FINALS[syllable.final.removesuffix(FINAL_MODIFIER)]
    return initial + vowel + final


def map_initial(cluster: str) -> str:
    """Romanize a syllable-initial consonant or consonant cluster."""
    first, second = cluster[0], cluster[1:]
    if not second:
        return INITIALS[first]
    if first == HO and second in SILENT_HO_BEFORE:
        return INITIALS[second]
    return INITIALS[first] + CLUSTER_SECONDS[second]


def _is_silent_ho(token: Token, following: Token | None) -> bool:
    return (
        isinstance(token, RegularSyllable)
        and token.initial == HO
        and token.pre_vowel is None
        and token.nucleus is None
        and token.tone is None
        and isinstance(following, RegularSyllable)
        and following.initial[0] in SILENT_HO_NASALS
    )
