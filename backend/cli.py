"""
Command line entry point - write a side-by-side HTML diff of two files

    sbs-diff old.txt new.txt output.html
"""

from __future__ import annotations

import sys
from argparse import ArgumentParser

from models.diff import LinePairing
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.document_assembler import write_document
from services.errors import ResourceExhausted, UsageError

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2
EXIT_RESOURCE = 3
EXIT_DECODE_ERROR = 4


class _Parser(ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser(prog: str = "sbs-diff") -> ArgumentParser:
    parser = _Parser(
        prog=prog,
        usage="%(prog)s old.txt new.txt output.html [--pairing {positional,lcs}]",
        description="Compare two text files line by line and highlight changed characters.",
    )
    parser.add_argument("old", help="Original file")
    parser.add_argument("new", help="Changed file")
    parser.add_argument("output", help="HTML file to write")
    parser.add_argument(
        "--pairing",
        choices=[p.value for p in LinePairing],
        default=None,
        help="Line pairing strategy (default: from config, normally positional)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Usage: {parser.prog} old.txt new.txt output.html", file=sys.stderr)
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return EXIT_USAGE

    generator = DiffGenerator.from_config(ConfigManager.get_instance())

    # Report the first path that fails, in argument order
    lines = []
    for path in (args.old, args.new):
        try:
            lines.append(generator.read_lines(path))
        except OSError:
            print(f"Cannot open file: {path}", file=sys.stderr)
            return EXIT_IO_ERROR
        except UnicodeDecodeError as e:
            print(f"Cannot decode file: {path} ({e})", file=sys.stderr)
            return EXIT_DECODE_ERROR

    try:
        result = generator.compare_lines(lines[0], lines[1], args.old, args.new, pairing=args.pairing)
    except ResourceExhausted as e:
        print(f"Resource exhausted: {e}", file=sys.stderr)
        return EXIT_RESOURCE

    try:
        write_document(result, args.output)
    except OSError:
        print(f"Cannot open file: {args.output}", file=sys.stderr)
        return EXIT_IO_ERROR

    print(f"Diff saved to {args.output}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
