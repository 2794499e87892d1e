"""BGN/PCGN romanization of Lao text."""

from laoroman.core import Text, Word, romanize, syllable_array
from laoroman.rules import map_token
from laoroman.syllables import parse_one, tokenize

__version__ = "0.1.0"

__all__ = [
    "Text",
    "Word",
    "__version__",
    "map_token",
    "parse_one",
    "romanize",
    "syllable_array",
    "tokenize",
]
