# logic/truth_table.py

"""
Truth-table enumeration over the atoms of a parsed formula.

Atoms are ordered by ``sorted()``. Row ``i`` of ``2**n`` gives the ``j``-th
atom the value of bit ``j`` of ``i``, so the first atom alternates fastest.
"""

import sys
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Tuple

from parser.ast_nodes import ParseResult
from utils.logger import get_logger

from .evaluator import evaluate


@dataclass(frozen=True)
class TruthTableRow:
    """
    One evaluated row of a truth table.

    Attributes:
        index: Row number; its bits encode the assignment.
        assignment: (atom, value) pairs in table order.
        result: Value of the formula under this assignment.
    """
    index: int
    assignment: Tuple[Tuple[str, bool], ...]
    result: bool

    def as_dict(self) -> Dict[str, bool]:
        return dict(self.assignment)


def ordered_atoms(atoms: Iterable[str]) -> List[str]:
    return sorted(atoms)


def iter_assignments(atoms: Iterable[str]) -> Iterator[Dict[str, bool]]:
    """Yield all ``2**n`` assignments to ``atoms`` in row order."""
    names = ordered_atoms(atoms)
    for i in range(2 ** len(names)):
        yield {name: (i >> j) & 1 == 1 for j, name in enumerate(names)}


def iter_rows(formula: ParseResult) -> Iterator[TruthTableRow]:
    """
    Evaluate the formula once per assignment.

    Evaluator errors propagate. A formula with no root has no atoms, so its
    single row raises EmptyFormulaError.
    """
    names = ordered_atoms(formula.atoms)
    for index, assignment in enumerate(iter_assignments(names)):
        result = evaluate(formula, assignment)
        yield TruthTableRow(
            index=index,
            assignment=tuple((name, assignment[name]) for name in names),
            result=result,
        )


def _bit(value: bool) -> str:
    return "1" if value else "0"


def format_row(row: TruthTableRow) -> str:
    """Render a row as ``name : 0|1`` lines followed by ``Result: 0|1``."""
    lines = [f"{name} : {_bit(value)}" for name, value in row.assignment]
    lines.append(f"Result: {_bit(row.result)}")
    return "\n".join(lines)


def print_truth_table(formula: ParseResult, stream: Optional[TextIO] = None) -> int:
    """
    Write every row of the formula's truth table.

    Returns:
        Number of rows written.
    """
    out = stream if stream is not None else sys.stdout
    logger = get_logger()
    logger.debug(f"Enumerating {2 ** len(formula.atoms)} row(s)")

    count = 0
    for row in iter_rows(formula):
        print(format_row(row), file=out)
        count += 1
    return count
