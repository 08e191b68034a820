#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Command-line interface for truth-table generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Optional, TextIO, Tuple

from parser import parse_line
from parser.exceptions import FormulaSyntaxError, ParseError
from logic import EvaluationError, print_truth_table
from utils.logger import configure_logging, get_logger


class InputError(Exception):
    """Raised when the formula line cannot be obtained."""


def read_formula_file(filepath: Path) -> str:
    """Read the first line of a formula file.

    Args:
        filepath: Path to the formula file

    Returns:
        First line of the file without its terminator

    Raises:
        InputError: If the file is missing or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.readline().rstrip("\r\n")
    except FileNotFoundError:
        raise InputError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise InputError(f"Error reading formula file: {e}")


def read_formula_line(stream: TextIO) -> str:
    """Read one formula line from a text stream."""
    return stream.readline().rstrip("\r\n")


def resolve_formula(args: argparse.Namespace, stdin: TextIO) -> Tuple[str, str]:
    """Pick the formula source from the parsed arguments.

    Returns:
        (formula line, human-readable source description)
    """
    if args.formula is not None:
        return args.formula, "command line"
    if args.file is not None:
        return read_formula_file(args.file), str(args.file)
    return read_formula_line(stdin), "standard input"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Print the truth table of a propositional formula",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo 'a&b' | python run_truth_table.py
  python run_truth_table.py -e 'a^b'
  python run_truth_table.py -f formula.txt --show-tree -v

Notation:
  Connectives: ! (not), & (and), | (or), ^ (xor), > (implies), = (iff)
  The line is reversed before parsing, so each connective takes everything
  typed to its right as one operand.
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-e", "--formula", help="Formula text (default: read one line from stdin)"
    )
    source.add_argument(
        "-f", "--file", type=Path, help="Read the formula from the first line of a file"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--show-tree",
        action="store_true",
        help="Log the parsed tree and its atoms before the table",
    )

    return parser


def main(
    argv: Optional[list] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Main entry point for truth-table generation.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    configure_logging(verbose=args.verbose or args.show_tree, debug=args.debug)
    logger = get_logger()

    line = ""
    try:
        line, source = resolve_formula(args, stdin)
        logger.formula_loaded(line, source)

        result = parse_line(line)
        if args.show_tree:
            logger.tree_parsed(str(result), sorted(result.atoms))

        rows = print_truth_table(result, stdout)
        logger.table_complete(rows)
        return 0

    except InputError as e:
        logger.error(f"Error: {e}")
        return 1

    except FormulaSyntaxError as e:
        logger.error(
            f"Error: Position {e.position} ({e.reason}; column {e.column_in(line)} of input)"
        )
        return 2

    except ParseError as e:
        logger.error(f"Error: {e}")
        return 2

    except EvaluationError as e:
        logger.error(f"Error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
