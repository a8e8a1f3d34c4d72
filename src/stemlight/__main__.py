"""Command line: wrap keyword matches in text read from a file or stdin."""

from __future__ import annotations

import argparse
import logging
import sys

from . import create_matcher
from ._transforms import Transforms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stemlight",
        description="Highlight keyword phrases by stem.",
    )
    parser.add_argument(
        "file", nargs="?", type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin, help="Input text file (default: stdin)",
    )
    parser.add_argument(
        "-k", "--keyword", action="append", dest="keywords", default=[],
        help="Keyword phrase to match. Repeat for several.",
    )
    parser.add_argument(
        "--keywords-file", type=argparse.FileType("r", encoding="utf-8"),
        help="File with one keyword phrase per line",
    )
    parser.add_argument("--locale", default="en", help="Locale (default: en)")
    parser.add_argument("--start", default="[", help="Opening marker")
    parser.add_argument("--end", default="]", help="Closing marker")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    keywords = list(args.keywords)
    if args.keywords_file is not None:
        with args.keywords_file as f:
            keywords.extend(line.strip() for line in f if line.strip())

    matcher = create_matcher(
        keywords, args.locale, Transforms(args.start, args.end),
    )
    text = args.file.read()
    if args.file is not sys.stdin:
        args.file.close()
    sys.stdout.write(matcher.wrap(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())
