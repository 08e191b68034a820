# parser/grammar.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Single-pass recursive-descent parser for propositional formulas

"""Recursive-descent parser for propositional formulas.

The grammar is defined over the text exactly as handed to the parser (the
caller reverses the user's line first). Parsing is a single pass with one
token of lookahead and no backtracking. Each scope accumulates at most one
partial tree:

- ``(`` opens a nested scope; legal only while the scope is still empty
- ``)`` closes the current scope and is left for the caller to consume
- ``!`` negates everything the following scope produces, then ends the scope
- ``& | ^ > =`` take the partial tree as left operand and everything the
  following scope produces as right operand, then end the scope
- an atom becomes the partial tree; legal only while the scope is empty

Because every connective ends its scope, chains associate to the right and
no precedence table is involved.
"""

from typing import Dict, Optional, Type

from sly.lex import Token

from . import ast_nodes as ast
from .exceptions import FormulaSyntaxError
from .lexer import FormulaLexer
from utils.logger import get_logger


_CONNECTIVES: Dict[str, Type[ast.BinaryExpr]] = {
    "AND": ast.And,
    "OR": ast.Or,
    "XOR": ast.Xor,
    "IMPLIES": ast.Implies,
    "IFF": ast.Iff,
}


class _FormulaParser:
    """Recursive-descent parser driving a lazy ``FormulaLexer`` token stream.

    A fresh instance is used per parse; the cursor is the single lookahead
    token pulled from the scanner.

    Attributes:
        text: The text being parsed
    """

    def __init__(self, text: str):
        self.text = text
        self._tokens = FormulaLexer().tokenize(text)
        self._lookahead: Optional[Token] = next(self._tokens, None)

    def parse(self) -> ast.ParseResult:
        """Parse the whole text into a ``ParseResult``.

        Returns:
            Parsed tree and atom set; the root is None for blank input

        Raises:
            FormulaSyntaxError: If the text is malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing formula text: {self.text!r}")

        result = self._parse_scope()

        # The top-level scope only stops early on a ')' nobody opened
        if self._lookahead is not None:
            raise self._error("unmatched ')'")

        logger.debug(
            f"Parsed {type(result.root).__name__} over atoms {sorted(result.atoms)}"
        )
        return result

    def _advance(self) -> Token:
        token = self._lookahead
        self._lookahead = next(self._tokens, None)
        return token

    def _position(self) -> int:
        """1-based position of the lookahead token, or one past the end."""
        if self._lookahead is None:
            return len(self.text) + 1
        return self._lookahead.index + 1

    def _error(self, reason: str) -> FormulaSyntaxError:
        return FormulaSyntaxError(self._position(), reason)

    def _parse_operand(self, operator: str) -> ast.ParseResult:
        """Parse the scope following a connective and require it to be non-empty."""
        operand = self._parse_scope()
        if operand.is_empty:
            raise self._error(f"'{operator}' is missing its operand")
        return operand

    def _parse_scope(self) -> ast.ParseResult:
        tree = ast.ParseResult.empty()

        while self._lookahead is not None:
            token = self._lookahead

            if token.type == "LPAREN":
                if not tree.is_empty:
                    raise self._error("'(' follows a complete operand")
                self._advance()
                inner = self._parse_scope()
                if self._lookahead is None:
                    raise self._error("unmatched '('")
                if inner.is_empty:
                    raise self._error("empty parentheses")
                self._advance()
                tree = inner

            elif token.type == "RPAREN":
                return tree

            elif token.type == "NOT":
                if not tree.is_empty:
                    raise self._error("'!' follows a complete operand")
                self._advance()
                operand = self._parse_operand(token.value)
                return ast.ParseResult(ast.Not(operand.root), operand.atoms)

            elif token.type in _CONNECTIVES:
                if tree.is_empty:
                    raise self._error(f"'{token.value}' has no left operand")
                self._advance()
                right = self._parse_operand(token.value)
                node = _CONNECTIVES[token.type](tree.root, right.root)
                return ast.ParseResult(node, tree.atoms | right.atoms)

            else:
                if not tree.is_empty:
                    raise self._error(f"atom '{token.value}' follows a complete operand")
                self._advance()
                tree = ast.ParseResult(ast.Atom(token.value), frozenset([token.value]))

        return tree
