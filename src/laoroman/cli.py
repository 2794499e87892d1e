"""CLI entrypoint for laoroman."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from laoroman.config import load_config
from laoroman.core import run_romanization
from laoroman.io import read_text_input, to_json, write_json
from laoroman.models import RomanizeRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="laoroman",
        description="BGN/PCGN romanization of Lao text.",
    )
    subparsers = parser.add_subparsers(dest="command")

    romanize = subparsers.add_parser("romanize", help="Romanize Lao text")
    _add_text_arguments(romanize)
    romanize.add_argument(
        "--hyphen",
        action="store_true",
        help="Separate syllables with hyphens",
    )
    romanize.add_argument(
        "--join-mode",
        choices=["document", "space"],
        default=None,
        help="Join words directly (document) or with spaces (default: from config)",
    )
    romanize.add_argument(
        "--json",
        action="store_true",
        help="Print the full JSON response instead of the romanized string",
    )
    romanize.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )

    syllables = subparsers.add_parser("syllables", help="List syllables with their romanization")
    _add_text_arguments(syllables)

    serve = subparsers.add_parser("serve", help="Run the laoroman HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def _add_text_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("text", nargs="?", default=None, help="Lao text to romanize")
    subparser.add_argument(
        "-i",
        "--input",
        default=None,
        help="Read the text from a UTF-8 file instead",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command in {"romanize", "syllables"}:
        text = _resolve_text(args)
        if text is None:
            print("error: text is required", file=sys.stderr)
            return 2

        request = RomanizeRequest(
            text=text,
            hyphen=getattr(args, "hyphen", False),
            join_mode=getattr(args, "join_mode", None),
        )
        try:
            response = run_romanization(request, default_join_mode=config.join_mode)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        if args.command == "syllables":
            for pair in response.syllables:
                print(f"{pair.original}\t{pair.romanized}")
            return 0
        if args.output:
            write_json(response, args.output)
            print(f"Wrote romanization JSON to {args.output}")
            return 0
        print(to_json(response) if args.json else response.romanized)
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`laoroman serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        logger.info("Serving laoroman API on %s:%d", host, port)
        uvicorn.run(
            "laoroman.api:app",
            host=host,
            port=port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _resolve_text(args: argparse.Namespace) -> str | None:
    if args.input:
        return read_text_input(args.input)
    if args.text:
        return args.text
    return None


if __name__ == "__main__":
    raise SystemExit(main())
