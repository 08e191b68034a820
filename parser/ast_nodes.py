# parser/ast_nodes.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas, together with the ``ParseResult``
that pairs a tree root with the set of atoms it references.

Node Types:
    Atom: Named propositional variable
    Not: Negation
    And, Or, Xor, Implies, Iff: Binary connectives

All nodes support the visitor design pattern for traversal and evaluation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Optional, Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type.
    """

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_xor(self, n: Xor): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all formula tree nodes.

    Provides the foundation for immutable expression trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch and
    ``__str__`` for a fully parenthesised rendering in parser notation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Expr):
    """Propositional variable referenced by name.

    Attributes:
        name: The identifier string for this atom
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Rendered as ``(!x)``: negation closes its scope in parser notation, so the
    surrounding parentheses keep it from swallowing a following connective.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"(!{self.operand})"


@dataclass(frozen=True, slots=True)
class BinaryExpr(Expr):
    """Shared shape of the two-operand connectives.

    Attributes:
        left: Operand parsed before the connective
        right: Operand parsed after the connective
    """

    left: Expr
    right: Expr

    symbol = ""

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True, slots=True)
class And(BinaryExpr):
    """Conjunction: true when both operands are true."""

    symbol = "&"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryExpr):
    """Disjunction: true when at least one operand is true."""

    symbol = "|"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryExpr):
    """Exclusive or: true when the operands differ."""

    symbol = "^"

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryExpr):
    """Material implication from ``left`` to ``right``."""

    symbol = ">"

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Iff(BinaryExpr):
    """Biconditional: true when the operands agree."""

    symbol = "="

    def accept(self, v: Visitor):
        return v.visit_iff(self)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Tree root paired with the atoms it references.

    The atom set is maintained by union while subtrees are combined, so it is
    always exactly the set of ``Atom`` names reachable from ``root`` without
    walking the tree.

    Attributes:
        root: Root node, or None for an empty parse
        atoms: Distinct atom names appearing under ``root``
    """

    root: Optional[Expr]
    atoms: FrozenSet[str] = frozenset()

    @classmethod
    def empty(cls) -> ParseResult:
        return cls(None, frozenset())

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def __str__(self) -> str:
        return "" if self.root is None else str(self.root)
