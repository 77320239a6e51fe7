"""Structured errors raised by the solver.

Errors carry a ``kind`` and the values that caused them; the readable text is
produced by :func:`format_error` when the error is shown to a user.
"""

from typing import Dict

# kind -> (code, message template)
MESSAGES: Dict[str, tuple] = {
    "invalid_mode": (1, "invalid value for the 'mode' parameter: {mode!r} (expected 'max' or 'min')."),
    "empty_objective": (2, "the coefficient vector of the objective function must contain at least one entry."),
    "empty_constraints": (3, "the constraint matrix must contain at least one row."),
    "column_mismatch": (4, "the constraint matrix has {columns} columns, but should have {expected}, "
                           "because the coefficient vector of the objective function has {variables} entries."),
    "zero_objective_coefficient": (5, "coefficient {index} of the objective function is zero."),
    "negative_rhs": (6, "all right-hand side values must be non-negative (row {row} has {value})."),
    "malformed_constraints": (7, "the constraint matrix must be a rectangular matrix of numbers."),
    "rhs_length_mismatch": (8, "'A' has {rows} rows but 'b' has {rhs} values."),
    "malformed_objective": (9, "the coefficient vector of the objective function must be a flat list of numbers."),
    "negative_objective_coefficient": (10, "coefficient {index} of the objective function is {value}; "
                                          "minimization needs non-negative coefficients."),
}


class SimplexError(Exception):
    def __init__(self, kind: str, **context):
        super().__init__(kind)
        self.kind = kind
        self.context = context
        self.code = MESSAGES.get(kind, (0, ""))[0]

    def __str__(self):
        return format_error(self)


class InvalidProblem(SimplexError, ValueError):
    """The problem violates an input requirement; no tableau was built."""


def format_error(err: SimplexError) -> str:
    _, template = MESSAGES.get(err.kind, (0, err.kind))
    try:
        text = template.format(**err.context)
    except KeyError:
        text = template
    return f"SimplexSolver: {text}"
