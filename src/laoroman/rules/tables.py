"""BGN/PCGN 1966 rule tables for Lao.

All tables are read-only views built once at import time.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from laoroman.syllables.base import VowelNucleus

STANDARD_ID = "bgn-pcgn-1966"

INITIALS: Mapping[str, str] = MappingProxyType(
    {
        "ກ": "k",
        "ຂ": "kh",
        "ຄ": "kh",
        "ງ": "ng",
        "ຈ": "ch",
        "ສ": "s",
        "ຊ": "x",
        "ຍ": "gn",
        "ຽ": "gn",
        "ດ": "d",
        "ຕ": "t",
        "ຖ": "th",
        "ທ": "th",
        "ນ": "n",
        "ບ": "b",
        "ປ": "p",
        "ຜ": "ph",
        "ຝ": "f",
        "ພ": "ph",
        "ຟ": "f",
        "ມ": "m",
        "ຢ": "y",
        "ຣ": "r",
        "ລ": "l",
        "ຼ": "l",
        "ວ": "v",
        "ຫ": "h",
        # Stripped at the start of a word, a hyphen inside it.
        "ອ": "-",
        "ຮ": "h",
        "ໜ": "n",
        "ໝ": "m",
    }
)

# Second member of a true consonant cluster.
CLUSTER_SECONDS: Mapping[str, str] = MappingProxyType(
    {
        "ວ": "o",
        "ຣ": "r",
        "ລ": "l",
        "ຼ": "l",
    }
)

# ຫ is not romanized as the first member of a cluster with these letters.
SILENT_HO_BEFORE = frozenset("ຍຣລຼວ")
# A bare ຫ before a syllable starting with one of these spells out ໜ / ໝ.
SILENT_HO_NASALS = frozenset("ນມ")

FINALS: Mapping[str, str] = MappingProxyType(
    {
        "ກ": "k",
        "ງ": "ng",
        "ຍ": "y",
        "ຽ": "y",
        "ດ": "t",
        "ນ": "n",
        "ບ": "p",
        "ມ": "m",
        "ຣ": "r",
        "ວ": "o",
    }
)

NUCLEI: Mapping[VowelNucleus, str] = MappingProxyType(
    {
        "a": "a",
        "i": "i",
        "ue": "u",
        "u": "ou",
        "e": "é",
        "ae": "è",
        "o": "ô",
        "aw": "o",
        "ua": "oua",
        "ia": "ia",
        "uea": "ua",
        "oe": "eu",
        "ai": "ai",
        "ao": "ao",
        "am": "am",
        "iu": "iou",
    }
)

DIGITS: Mapping[str, str] = MappingProxyType(
    {lao: arabic for lao, arabic in zip("໐໑໒໓໔໕໖໗໘໙", "0123456789", strict=True)}
)

PUNCTUATION: Mapping[str, str] = MappingProxyType({"ຯ": "..."})
