"""BGN/PCGN rule tables and the token mapper."""

from laoroman.rules.mapper import map_initial, map_syllable, map_token, map_tokens
from laoroman.rules.tables import STANDARD_ID

__all__ = ["STANDARD_ID", "map_initial", "map_syllable", "map_token", "map_tokens"]
