"""Request-level romanization pipeline shared by the CLI and the API."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from laoroman.core.text import Text
from laoroman.models import (
    JoinMode,
    RomanizeMetadata,
    RomanizeRequest,
    RomanizeResponse,
)
from laoroman.rules import STANDARD_ID

logger = logging.getLogger(__name__)


def run_romanization(
    request: RomanizeRequest,
    *,
    default_join_mode: JoinMode = "space",
) -> RomanizeResponse:
    """Romanize the request text and describe how it was done."""
    join_mode = request.join_mode or default_join_mode
    text = Text(request.text, join_mode=join_mode)
    if not text.words:
        raise ValueError("text must contain at least one word")

    romanized = text.romanize(hyphen=request.hyphen)
    syllables = text.syllable_array()
    logger.debug(
        "Romanized %d words / %d syllables (hyphen=%s, join_mode=%s)",
        len(text.words),
        len(syllables),
        request.hyphen,
        join_mode,
    )

    metadata = RomanizeMetadata(
        standard=STANDARD_ID,
        hyphen=request.hyphen,
        join_mode=join_mode,
        word_count=len(text.words),
        syllable_count=len(syllables),
        generated_at=datetime.now(UTC),
    )
    return RomanizeResponse(
        metadata=metadata,
        romanized=romanized,
        syllables=syllables if request.include_syllables else [],
    )
