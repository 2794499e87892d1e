"""I/O utilities."""

from laoroman.io.export import read_text_input, to_json, write_json

__all__ = ["read_text_input", "to_json", "write_json"]
