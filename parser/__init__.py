# parser/__init__.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing.

Converts formula text into an immutable formula tree together with the set of
atoms it references. The grammar is defined over the *reversed* input line:
the command-line driver reverses what the user typed before parsing, and
``parse_line`` bundles that step for callers holding a raw line.

Core Functions:
    parse: Parse text that is already in parser order
    parse_line: Reverse a raw input line, then parse it
    reverse_formula: The reversal step on its own

Notation:
    - Atoms: maximal runs of anything except ``( ) & ! | ^ > =`` and space
    - ``!`` negation of the following scope
    - ``&`` and, ``|`` or, ``^`` xor, ``>`` implies, ``=`` iff
    - Parenthetical grouping, spaces ignored

Example:
    >>> from parser import parse
    >>> result = parse("a & b | c")
    >>> str(result.root)
    '(a & (b | c))'
    >>> sorted(result.atoms)
    ['a', 'b', 'c']
"""

from .ast_nodes import ParseResult
from .exceptions import ParseError, FormulaSyntaxError
from .grammar import _FormulaParser
from utils.logger import get_logger


def parse(source: str) -> ParseResult:
    """Parse formula text into a tree and its atom set.

    Uses a fresh parser instance for each invocation. The text is taken as-is;
    see ``parse_line`` for input that still needs reversing.

    Args:
        source: Formula text in parser order

    Returns:
        ParseResult whose root is None when the text holds no formula

    Raises:
        FormulaSyntaxError: Formula structure is malformed
        ParseError: Parsing failed for any other reason (e.g. nesting too deep)
    """
    logger = get_logger()

    try:
        return _FormulaParser(source).parse()

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except RecursionError as exc:
        logger.debug("Formula nesting exceeded the recursion limit")
        raise ParseError("Formula is nested too deeply to parse") from exc

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def reverse_formula(line: str) -> str:
    """Strip the line terminator and reverse the remaining characters."""
    return line.rstrip("\r\n")[::-1]


def parse_line(line: str) -> ParseResult:
    """Parse one line of user input.

    Args:
        line: Formula exactly as typed, optionally with its line terminator

    Returns:
        ParseResult for the reversed line

    Raises:
        FormulaSyntaxError: Formula structure is malformed; its position
            refers to the reversed text
    """
    text = reverse_formula(line)
    get_logger().debug(f"Reversed input line to {text!r}")
    return parse(text)


__all__ = [
    "parse",
    "parse_line",
    "reverse_formula",
    "ParseResult",
    "ParseError",
    "FormulaSyntaxError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing components"
