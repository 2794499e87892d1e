"""Word/text assembly and the request pipeline."""

from laoroman.core.pipeline import run_romanization
from laoroman.core.text import Text, Word, join_romanized, romanize, syllable_array

__all__ = ["Text", "Word", "join_romanized", "romanize", "run_romanization", "syllable_array"]
