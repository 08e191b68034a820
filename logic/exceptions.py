# logic/exceptions.py

"""
Errors raised while evaluating a parsed formula under an assignment.
"""


class EvaluationError(RuntimeError):
    """Base class for evaluation failures."""


class EmptyFormulaError(EvaluationError):
    """Raised when evaluation is attempted on a parse with no root node."""

    def __init__(self):
        super().__init__("Evaluation of an empty formula")


class UnboundVariableError(EvaluationError):
    """
    Raised when the assignment has no value for an atom in the tree.

    Attributes:
        name: The atom that could not be resolved.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No value provided for atom '{name}'")
