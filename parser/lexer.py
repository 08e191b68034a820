# parser/lexer.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Lexical scanner for propositional formula strings using SLY

"""Lexical scanner for propositional formula strings.

Breaks formula text into tokens for the recursive-descent parser. The scanner
is consumed lazily, one token at a time, so scanning stays interleaved with
tree construction.

Supported Tokens:
- Connectives: !, &, |, ^, >, =
- Grouping: (, )
- Atoms: any maximal run of characters that is not a connective,
  a parenthesis or a space
- Spaces: ignored between tokens (other whitespace belongs to atoms)
"""

from sly import Lexer


class FormulaLexer(Lexer):
    """SLY-based scanner for propositional formulas.

    Every input character matches either a single-character token, the space
    skip, or the catch-all atom pattern, so scanning itself never fails.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip between tokens
    """

    tokens = {
        "ATOM",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    # Only the space character separates tokens
    ignore = " "

    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    XOR = r"\^"
    IMPLIES = r">"
    IFF = r"="
    LPAREN = r"\("
    RPAREN = r"\)"

    ATOM = r"[^()&!|^>= ]+"
