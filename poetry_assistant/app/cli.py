"""Command-line entrypoint for Poetry Assistant lookups."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from poetry_assistant.config import load_settings
from poetry_assistant.core.errors import PoetryAssistantError
from poetry_assistant.utils.logging_config import configure_logging

from .data.wordlist import WordListLoader
from .services.assistant_service import PoetryAssistantService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poetry-assistant",
        description="Find rhymes, syllable counts and alliterations for a word",
    )
    parser.add_argument("word", help="Query word")
    parser.add_argument("--wordlist", help="Path to a newline-separated word list")
    parser.add_argument("--suffix-length", type=int, help="Suffix length used for rhyme keys")
    parser.add_argument("--table-size", type=int, help="Capacity of each index table")
    parser.add_argument("--json", action="store_true", help="Emit the result as JSON")
    parser.add_argument("--stats", action="store_true", help="Also print index statistics")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings, level=args.log_level, default_level=logging.WARNING)

    overrides = {}
    if args.suffix_length is not None:
        overrides["suffix_length"] = args.suffix_length
    if args.table_size is not None:
        overrides["table_size"] = args.table_size
    if args.wordlist:
        overrides["wordlist_path"] = args.wordlist
    if overrides:
        settings = replace(settings, **overrides)

    service = PoetryAssistantService(
        settings=settings,
        loader=WordListLoader(settings.wordlist_path),
    )
    try:
        result = service.lookup(args.word)
    except (PoetryAssistantError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = result.as_dict()
        if args.stats:
            payload["stats"] = service.stats()
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Rhymes:        {', '.join(result.rhymes) or '-'}")
    print(f"Syllables:     {result.syllables}")
    print(f"Alliterations: {', '.join(result.alliterations) or '-'}")
    if args.stats:
        for key, value in service.stats().items():
            print(f"{key:<28} {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
