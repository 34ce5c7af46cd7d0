"""CLI entry point for the IndicLang interpreter.

Usage:
    python -m backend.indiclang [-v] [--show-code] <program_file>

Options:
  -v            Log interpreter debug records to stderr
  --show-code   Print the executable text before the program output

The program's output goes to stdout. If the run reports an error it is
written to stderr and the exit status is 1.
"""

import argparse
import logging
import sys
from pathlib import Path

from .interpreter import Interpreter
from .pipeline import translate_and_execute


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m backend.indiclang", description="IndicLang interpreter")
    parser.add_argument("-v", action="store_true", help="log debug records to stderr")
    parser.add_argument("--show-code", action="store_true", help="print the executable text first")
    parser.add_argument("--max-loop", type=int, default=Interpreter().max_loop, help="while-loop iteration cap")
    parser.add_argument("program", help="program file to execute")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.v:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    program_file = Path(args.program)
    if not program_file.is_file():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        return 2
    source = program_file.read_text(encoding="utf-8")

    result = translate_and_execute(source, interpreter=Interpreter(max_loop=args.max_loop))
    if args.show_code:
        print(result["code"])
        print("---")
    if result["output"]:
        print(result["output"])
    if result["error"]:
        print(f"Runtime error: {result['error']}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
