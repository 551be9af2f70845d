"""CLI: python -m ldn <file.ldn> [--check] [--json]

Formats an LDN file and prints the result to stdout.

Exit codes:
    0  success (or already formatted, with --check)
    1  --check and the file is not formatted
    2  the file could not be read or parsed
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ldn import __version__, format, parse
from ldn.errors import ParseError
from ldn.formatter import INDENT_WIDTH
from ldn.serialization import to_json
from ldn.utils.logger import get_logger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ldn",
        description="Format Lithium Data Notation documents.",
    )
    parser.add_argument("path", help="file to format ('-' reads stdin)")
    parser.add_argument(
        "--check",
        action="store_true",
        help="exit with status 1 if the file is not already formatted",
    )
    parser.add_argument("--json", action="store_true", help="print the parsed tree as JSON")
    parser.add_argument(
        "--indent",
        type=int,
        default=INDENT_WIDTH,
        help=f"spaces per nesting level (default: {INDENT_WIDTH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_source(path: str) -> tuple[bytes, str]:
    if path == "-":
        return sys.stdin.buffer.read(), "<stdin>"
    return Path(path).read_bytes(), path


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source, name = _read_source(args.path)
    except OSError as e:
        print(f"ldn: cannot read {args.path}: {e}", file=sys.stderr)
        return 2

    try:
        document = parse(source, source_file=name)
    except ParseError as e:
        print(e, file=sys.stderr)
        return 2

    if args.json:
        print(to_json(document, indent=2))
        return 0

    formatted = format(document, indent=args.indent)

    if args.check:
        if formatted.encode("utf-8") != source:
            logger.info("%s is not formatted", name)
            print(f"would reformat {name}", file=sys.stderr)
            return 1
        return 0

    sys.stdout.write(formatted)
    return 0


if __name__ == "__main__":
    sys.exit(main())
