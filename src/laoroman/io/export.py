"""Romanization output serializers."""

from __future__ import annotations

from pathlib import Path

from laoroman.models import RomanizeResponse


def to_json(response: RomanizeResponse) -> str:
    """Serialize a romanization response to formatted JSON."""
    return response.model_dump_json(indent=2)


def write_json(response: RomanizeResponse, output_path: str | Path) -> None:
    """Write romanization response JSON to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(response) + "\n", encoding="utf-8")


def read_text_input(input_path: str | Path) -> str:
    """Read UTF-8 input text from disk."""
    return Path(input_path).read_text(encoding="utf-8")
