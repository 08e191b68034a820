# logic/__init__.py

"""Formula evaluation interface.

This package provides:
  • evaluate: truth value of a parsed formula under an assignment
  • Evaluator: the visitor doing the work
  • iter_rows / print_truth_table: truth-table enumeration
  • EvaluationError, EmptyFormulaError, UnboundVariableError
"""

from .evaluator import Evaluator, evaluate, missing_atoms
from .exceptions import EmptyFormulaError, EvaluationError, UnboundVariableError
from .truth_table import (
    TruthTableRow,
    format_row,
    iter_assignments,
    iter_rows,
    ordered_atoms,
    print_truth_table,
)

__all__ = [
    "Evaluator",
    "evaluate",
    "missing_atoms",
    "EvaluationError",
    "EmptyFormulaError",
    "UnboundVariableError",
    "TruthTableRow",
    "format_row",
    "iter_assignments",
    "iter_rows",
    "ordered_atoms",
    "print_truth_table",
]
