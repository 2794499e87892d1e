"""Shared data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

JoinMode = Literal["document", "space"]


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class RomanizeRequest(BaseModel):
    """Romanization request payload used by both CLI and API."""

    text: str = Field(min_length=1)
    hyphen: bool = False
    join_mode: JoinMode | None = None
    include_syllables: bool = True


class SyllablePair(BaseModel):
    """One syllable of the input next to its romanization."""

    original: str
    romanized: str


class RomanizeMetadata(BaseModel):
    """Metadata describing how a romanization was produced."""

    standard: Literal["bgn-pcgn-1966"]
    hyphen: bool
    join_mode: JoinMode
    word_count: int = Field(ge=0)
    syllable_count: int = Field(ge=0)
    generated_at: datetime


class RomanizeResponse(BaseModel):
    """Canonical romanization output schema."""

    metadata: RomanizeMetadata
    romanized: str
    syllables: list[SyllablePair]
