from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import Optional

from .debug import format_basic_error, format_syntax_error
from .errors import BasicError
from .runtime import parse_source, run_program


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pybasic", description="Run line-numbered BASIC programs")
    parser.add_argument("script", nargs="?", help="Path to BASIC program (.bas)")
    parser.add_argument("-e", "--execute", dest="inline", help="Execute BASIC program text")
    parser.add_argument(
        "--max-steps",
        type=_positive_int,
        help="Abort after executing this many lines",
    )
    parser.add_argument(
        "--significant-length",
        type=_positive_int,
        help="Only the first N characters of a variable name identify it",
    )
    parser.add_argument("--show-env", action="store_true", help="Print variables to stderr after the run")
    parser.add_argument("--trace", action="store_true", help="Log line and statement execution")
    parser.add_argument("--newline", action="store_true", help="Terminate program output with a newline")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.inline and args.script:
        parser.error("cannot use script path and --execute together")
    if args.inline:
        source = args.inline.replace("\\n", "\n")
        source_name = "<inline>"
    elif args.script:
        source_name = args.script
        try:
            source = pathlib.Path(args.script).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"cannot read {args.script}: {exc}", file=sys.stderr)
            return 1
    else:
        parser.error("missing script or --execute")

    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    try:
        program = parse_source(source)
    except SyntaxError as exc:
        print(format_syntax_error(exc, source_name, source), file=sys.stderr)
        return 1

    try:
        interpreter = run_program(
            program,
            source_name=source_name,
            max_steps=args.max_steps,
            significant_length=args.significant_length,
        )
    except BasicError as exc:
        sys.stdout.flush()
        print(format_basic_error(exc, source), file=sys.stderr)
        return 1
    finally:
        if args.newline:
            sys.stdout.write("\n")
    if args.show_env:
        print(interpreter.env.format(), file=sys.stderr)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
