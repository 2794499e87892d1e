"""Recognition of a single Lao syllable at the start of a string.

A Lao syllable is read as::

    [fronting vowel] consonant [cluster] [vowel signs] [tone] [final]

Vowels may be written before, above, below or after the consonant they
follow in speech, so the vowel pattern is matched over the fronting vowel
plus the vowel/tone run that follows the consonant, and the syllable text
is then reassembled in reading order.
"""

from __future__ import annotations

from laoroman.script.chars import (
    AMBIGUOUS_FINALS,
    CLUSTER_SECONDS,
    FINAL_BLOCKERS,
    FINAL_CONSONANTS,
    FINAL_MODIFIER,
    HO,
    HO_DIGRAPH_SECONDS,
    is_consonant,
    is_front_vowel,
    is_tone_mark,
    is_vowel_or_tone,
)
from laoroman.syllables.base import RegularSyllable, VowelNucleus

_AM_SHAPES: dict[str, VowelNucleus] = {"ໍາ": "am", "ຳ": "am"}

_COMPOUND_SHAPES: tuple[dict[str, VowelNucleus], ...] = (
    {"ເັຍະ": "ia", "ເຶອະ": "uea", "ເັຽະ": "ia"},
    {
        "ເາະ": "aw",
        "ົວະ": "ua",
        "ເັຽ": "ia",
        "ເັຍ": "ia",
        "ເືອ": "uea",
        "ເຶອ": "uea",
        "ເິະ": "oe",
        "ເົາ": "ao",
    },
)

_PAIR_SHAPES: dict[str, VowelNucleus] = {
    "ເະ": "e",
    "ເັ": "e",
    "ແະ": "ae",
    "ແັ": "ae",
    "ໂະ": "o",
    "ັອ": "aw",
    "ັວ": "ua",
    "ົວ": "ua",
    "ັຽ": "ia",
    "ັຍ": "ia",
    "ເິ": "oe",
    "ເຍ": "ia",
    "ເຽ": "ia",
    "ເີ": "oe",
    "ເື": "oe",
    "ີວ": "iu",
    "ິວ": "iu",
}

_SINGLE_SHAPES: dict[str, VowelNucleus] = {
    "ະ": "a",
    "ັ": "a",
    "າ": "a",
    "ິ": "i",
    "ີ": "i",
    "ຶ": "ue",
    "ື": "ue",
    "ຸ": "u",
    "ູ": "u",
    "ເ": "e",
    "ແ": "ae",
    "ົ": "o",
    "ໂ": "o",
    "ໍ": "aw",
    "ອ": "aw",
    "ວ": "ua",
    "ຽ": "ia",
    "ຍ": "ia",
    "ໄ": "ai",
    "ໃ": "ai",
}

_COMPOUND_MEDIALS = frozenset("ົັືິຶ")
_COMPOUND_TRAILERS = frozenset({"ຍະ", "ອະ", "ຽະ", "າະ", "ວະ"})
_COMPOUND_TAILS = frozenset("ຽຍອະາ")
_PAIR_LEADS = frozenset("ເແໂ")
_PAIR_MEDIALS = frozenset("ັົິີື")
_PAIR_TAILS = frozenset("ະອວຽຍ")
_SINGLE_MEDIALS = frozenset("ັິີຶືຸູົໍ")


def parse_one(remaining: str) -> RegularSyllable | None:
    """Recognize one syllable at the start of `remaining`.

    Returns None when `remaining` does not start with a consonant,
    optionally preceded by a fronting vowel.
    """
    pos = 0
    pre_vowel = None
    if remaining and is_front_vowel(remaining[0]):
        pre_vowel = remaining[0]
        pos = 1
    if pos >= len(remaining) or not is_consonant(remaining[pos]):
        return None

    initial = remaining[pos]
    pos += 1
    following = remaining[pos : pos + 1]
    if following and (
        following in CLUSTER_SECONDS or (initial == HO and following in HO_DIGRAPH_SECONDS)
    ):
        initial += following
        pos += 1

    run_end = pos
    while run_end < len(remaining) and is_vowel_or_tone(remaining[run_end]):
        run_end += 1
    vowels, tone = _split_tone((pre_vowel or "") + remaining[pos:run_end])
    tone_text = tone or ""

    shape, nucleus = _match(vowels, _AM_SHAPES)
    if shape is not None:
        text = initial
        if shape.startswith("ໍ"):
            text += "ໍ"
            shape = shape[1:]
        return RegularSyllable(
            text=text + tone_text + shape,
            source=text + tone_text + shape,
            initial=initial,
            nucleus=nucleus,
            tone=tone,
        )

    text = None
    for shapes in _COMPOUND_SHAPES:
        shape, nucleus = _match(vowels, shapes)
        if shape is not None:
            text = _assemble_compound(shape, initial, tone_text)
            break
    if text is None:
        shape, nucleus = _match(vowels, _PAIR_SHAPES)
        if shape is not None:
            text = _assemble_pair(shape, initial, tone_text)
    if text is None:
        shape, nucleus = _match(vowels, _SINGLE_SHAPES)
        if shape is not None:
            text = _assemble_single(shape, initial, tone_text)
    if text is None:
        text = initial + tone_text
        if remaining.startswith(text + FINAL_MODIFIER):
            text += FINAL_MODIFIER
        return RegularSyllable(text=text, source=text, initial=initial, tone=tone)

    final = None
    if remaining.startswith(text):
        final = _final_consonant(remaining, len(text))
        if final is not None:
            text += final

    return RegularSyllable(
        text=text,
        source=text,
        initial=initial,
        pre_vowel=pre_vowel,
        nucleus=nucleus,
        tone=tone,
        final=final,
    )


def _split_tone(vowels: str) -> tuple[str, str | None]:
    for index, char in enumerate(vowels):
        if is_tone_mark(char):
            return vowels[:index] + vowels[index + 1 :], char
    return vowels, None


def _match(
    vowels: str, shapes: dict[str, VowelNucleus]
) -> tuple[str, VowelNucleus] | tuple[None, None]:
    for shape, nucleus in shapes.items():
        if vowels.startswith(shape):
            return shape, nucleus
    return None, None


def _assemble_compound(shape: str, initial: str, tone: str) -> str:
    lead = "ເ" if shape.startswith("ເ") else ""
    body = shape[len(lead) :]
    medial = body[0] if body[0] in _COMPOUND_MEDIALS else ""
    if shape[-2:] in _COMPOUND_TRAILERS:
        trailing = shape[-2:]
    elif shape[-1] in _COMPOUND_TAILS:
        trailing = shape[-1]
    else:
        trailing = ""
    return lead + initial + medial + tone + trailing


def _assemble_pair(shape: str, initial: str, tone: str) -> str:
    lead = shape[0] if shape[0] in _PAIR_LEADS else ""
    # ໂ never carries a medial sign, so only ເ and ແ are skipped here.
    body = shape[1:] if shape[0] in "ເແ" else shape
    medial = body[0] if body and body[0] in _PAIR_MEDIALS else ""
    trailing = shape[-1] if shape[-1] in _PAIR_TAILS else ""
    return lead + initial + medial + tone + trailing


def _assemble_single(shape: str, initial: str, tone: str) -> str:
    if is_front_vowel(shape):
        return shape + initial + tone
    if shape in _SINGLE_MEDIALS:
        return initial + shape + tone
    return initial + tone + shape


def _final_consonant(remaining: str, start: int) -> str | None:
    """Return the final consonant following a syllable head, if any.

    ຽ, ວ, ອ and ຍ are ambiguous: after a candidate final they may open the
    next syllable's vowel, in which case the candidate is still a final
    only if a vowel or tone follows them.
    """
    candidate = remaining[start : start + 1]
    if not candidate or candidate not in FINAL_CONSONANTS:
        return None
    if remaining[start + 1 : start + 2] == FINAL_MODIFIER:
        # ໌ stays with its consonant: both are the final or neither is.
        if _closes_syllable(remaining, start + 2):
            return candidate + FINAL_MODIFIER
        return None
    if _closes_syllable(remaining, start + 1):
        return candidate
    return None


def _closes_syllable(remaining: str, after: int) -> bool:
    following = remaining[after : after + 1]
    if not following:
        return True
    if following in FINAL_BLOCKERS:
        return False
    if following not in AMBIGUOUS_FINALS:
        return True
    continued = remaining[after + 1 : after + 2]
    return bool(continued) and is_vowel_or_tone(continued)
