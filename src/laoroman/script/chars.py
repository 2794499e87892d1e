"""Lao character classes used by the syllable parser and tokenizer."""

from __future__ import annotations

# U+0E81..U+0EDD: everything the tokenizer treats as Lao script.
LAO_FIRST = "ກ"
LAO_LAST = "ໝ"

FRONT_VOWELS = frozenset("ເແໂໃໄ")
CONSONANTS = frozenset("ກຂຄງຈສຊຍຽດຕຖທນບປຜຝພຟມຢຣລຼວຫອຮໜໝ")
CLUSTER_SECONDS = frozenset("ວຣລຼ")

HO = "ຫ"
# ຫ + ຍ is read as one initial; ຫ + ນ/ມ stay two syllables.
HO_DIGRAPH_SECONDS = frozenset("ຍ")

TONE_MARKS = frozenset("່້໊໋")
VOWEL_TONE_RUN = frozenset("ະັາິີຶືຸູົອໍວຽຍຳ") | TONE_MARKS

FINAL_CONSONANTS = frozenset("ກງຍຽດນບມຣວ")
FINAL_MODIFIER = "໌"
AMBIGUOUS_FINALS = frozenset("ຽວອຍ")
# Characters that can never follow a final consonant of the same syllable.
FINAL_BLOCKERS = frozenset("ະັາິີຶືຸູົໍຳ") | TONE_MARKS

LAO_DIGITS = "໐໑໒໓໔໕໖໗໘໙"
REDUPLICATION_MARK = "ໆ"
ELLIPSIS_MARK = "ຯ"


def is_lao(char: str) -> bool:
    """Return True for a character inside the Lao block handled here."""
    return LAO_FIRST <= char <= LAO_LAST


def is_lao_digit(char: str) -> bool:
    return char != "" and char in LAO_DIGITS


def is_front_vowel(char: str) -> bool:
    return char in FRONT_VOWELS


def is_consonant(char: str) -> bool:
    return char in CONSONANTS


def is_tone_mark(char: str) -> bool:
    return char in TONE_MARKS


def is_vowel_or_tone(char: str) -> bool:
    return char in VOWEL_TONE_RUN


def is_final_consonant(char: str) -> bool:
    return char in FINAL_CONSONANTS
