"""Lao script character classes."""

from laoroman.script.chars import (
    ELLIPSIS_MARK,
    REDUPLICATION_MARK,
    is_consonant,
    is_final_consonant,
    is_front_vowel,
    is_lao,
    is_lao_digit,
    is_tone_mark,
    is_vowel_or_tone,
)

__all__ = [
    "ELLIPSIS_MARK",
    "REDUPLICATION_MARK",
    "is_consonant",
    "is_final_consonant",
    "is_front_vowel",
    "is_lao",
    "is_lao_digit",
    "is_tone_mark",
    "is_vowel_or_tone",
]
