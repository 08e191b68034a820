# parser/exceptions.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Custom exceptions for formula scanning and parsing

"""Domain-specific exceptions for propositional formula parsing.

This module defines exceptions that can be raised while scanning and parsing
formula text. Evaluation-time failures live in ``logic.exceptions``.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Base class for every failure raised by the parsing pipeline, including
    unexpected internal failures that get wrapped on the way out.
    """

    pass


class FormulaSyntaxError(ParseError):
    """Malformed structure detected at a specific position.

    Positions are 1-based offsets into the text handed to the parser (the
    reversed input line). Errors detected at end of input report
    ``len(text) + 1``.

    Attributes:
        position: 1-based offset where the violation was detected
        reason: Short description of the violation
    """

    def __init__(self, position: int, reason: Optional[str] = None):
        self.position = position
        self.reason = reason
        message = f"Syntax error at position {position}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def column_in(self, line: str) -> int:
        """Map the position back onto the line as the user typed it.

        The parser works on the reversed line, so offset ``p`` corresponds to
        column ``len(line) - p + 1`` of the original. End of the reversed text
        is the start of the typed line and maps to column 0.

        Args:
            line: The unreversed input line

        Returns:
            1-based column in ``line``
        """
        return max(len(line) - self.position + 1, 0)
