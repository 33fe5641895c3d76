# schemaorg_ld/main.py
"""
Command line entrypoint: `python -m schemaorg_ld.main page.html -t Product`

Reads an HTML page (or raw JSON with --json) from a file or stdin and prints
the schema.org objects found in it as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterator, List, Optional

from . import config
from .errors import JsonLdError
from .parsers import find_ldjson_blocks
from .resolve import resolve_objects_from_html, resolve_objects_from_json_text, to_list


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="schemaorg-ld",
        description="Extract schema.org JSON-LD objects from an HTML page or JSON document.",
    )
    ap.add_argument("path", nargs="?", default="-", help="Input file ('-' for stdin).")
    ap.add_argument("--json", action="store_true", help="Input is raw JSON, not HTML.")
    ap.add_argument("-t", "--type", dest="types", action="append", default=[], metavar="NAME",
                    help="Only objects of this schema.org type (repeatable).")
    ap.add_argument("--blocks", action="store_true",
                    help="Print the parsed ld+json script blocks instead of objects.")
    ap.add_argument("--first", action="store_true", help="Print only the first object found.")
    ap.add_argument("--indent", type=int, default=2, help="JSON output indentation.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr.")
    return ap


def _select(args: argparse.Namespace, text: str) -> Iterator[Any]:
    if args.blocks:
        return find_ldjson_blocks(text)
    if args.json:
        return resolve_objects_from_json_text(text, *args.types)
    return resolve_objects_from_html(text, *args.types)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)
    if args.blocks and args.json:
        ap.error("--blocks only applies to HTML input")
    _setup_logging(args.verbose)

    try:
        text = _read_input(args.path)
        items = _select(args, text)
    except (OSError, UnicodeDecodeError, JsonLdError) as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return 2

    if args.first:
        out: Any = next(items, None)
    else:
        out = to_list(items)

    json.dump(out, sys.stdout, ensure_ascii=False, indent=args.indent)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
