# logic/evaluator.py

"""
Evaluates a formula tree under a truth assignment.

The tree is read-only during evaluation and the assignment is supplied per
call, so a single tree can be evaluated for any number of rows. Nodes are
visited in post-order from an explicit work stack, so evaluation depth is not
bounded by the interpreter's recursion limit.
"""

from typing import Iterator, List, Mapping, Optional, Tuple, Union

from parser import ast_nodes as ast
from parser.ast_nodes import ParseResult
from utils.logger import get_logger

from .exceptions import EmptyFormulaError, UnboundVariableError


def _children(node: ast.Expr) -> Tuple[ast.Expr, ...]:
    if isinstance(node, ast.Not):
        return (node.operand,)
    if isinstance(node, ast.BinaryExpr):
        return (node.left, node.right)
    return ()


def _postorder(root: ast.Expr) -> Iterator[ast.Expr]:
    """Yield every node after its children, left subtree first."""
    stack: List[Tuple[ast.Expr, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        children = _children(node)
        if expanded or not children:
            yield node
            continue
        stack.append((node, True))
        for child in reversed(children):
            stack.append((child, False))


class Evaluator(ast.Visitor):
    """
    Visitor computing truth values under a fixed assignment.

    Each visit consumes its operands' values from a value stack and pushes its
    own, so nodes must be fed in post-order (see ``run``). Both operands of a
    binary node are always computed, so an unbound atom is reported whichever
    branch holds it.
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment
        self._values: List[bool] = []

    def run(self, root: ast.Expr) -> bool:
        self._values.clear()
        for node in _postorder(root):
            self._values.append(node.accept(self))
        return self._values.pop()

    def visit_atom(self, n: ast.Atom) -> bool:
        try:
            return bool(self._assignment[n.name])
        except KeyError:
            raise UnboundVariableError(n.name) from None

    def visit_not(self, n: ast.Not) -> bool:
        return not self._values.pop()

    def visit_and(self, n: ast.And) -> bool:
        left, right = self._operands()
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left, right = self._operands()
        return left or right

    def visit_xor(self, n: ast.Xor) -> bool:
        left, right = self._operands()
        return left != right

    def visit_implies(self, n: ast.Implies) -> bool:
        left, right = self._operands()
        return not left or right

    def visit_iff(self, n: ast.Iff) -> bool:
        left, right = self._operands()
        return left == right

    def _operands(self) -> Tuple[bool, bool]:
        right = self._values.pop()
        left = self._values.pop()
        return left, right


def evaluate(
    formula: Union[ParseResult, ast.Expr, None], assignment: Mapping[str, bool]
) -> bool:
    """
    Evaluate a parsed formula (or a bare tree) under an assignment.

    Raises:
        EmptyFormulaError: the formula has no root node.
        UnboundVariableError: an atom in the tree is missing from the assignment.
    """
    root: Optional[ast.Expr]
    if isinstance(formula, ParseResult):
        root = formula.root
    else:
        root = formula

    if root is None:
        get_logger().debug("Refusing to evaluate an empty formula")
        raise EmptyFormulaError()

    result = Evaluator(assignment).run(root)
    get_logger().debug(f"Evaluated {type(root).__name__} under {dict(assignment)} -> {result}")
    return result


def missing_atoms(formula: ParseResult, assignment: Mapping[str, bool]) -> List[str]:
    """Atoms of the formula that the assignment does not bind, in sorted order."""
    return sorted(name for name in formula.atoms if name not in assignment)
