"""
Problem description and input validation.

Input contract:
- c: objective coefficients (length n, none of them zero; non-negative
  when minimizing)
- constraints: m x (n+1) matrix; the first n columns are coefficients, the
  last column is the right-hand side (non-negative)
- mode: MAXIMIZE ("max") reads each row as `a·x <= rhs`,
        MINIMIZE ("min") reads each row as `a·x >= rhs`
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from tableau_simplex.errors import InvalidProblem

MAXIMIZE = "max"
MINIMIZE = "min"
MODES = (MAXIMIZE, MINIMIZE)


@dataclass
class LP:
    c: Sequence[float]
    constraints: Sequence[Sequence[float]]
    mode: str = MAXIMIZE

    @property
    def maximize(self) -> bool:
        return self.mode == MAXIMIZE

    @property
    def sense(self) -> str:
        return "<=" if self.maximize else ">="

    def split(self) -> Tuple[np.ndarray, np.ndarray]:
        """Coefficient matrix and right-hand side as float arrays."""
        mat = np.asarray(self.constraints, dtype=float)
        return mat[:, :-1], mat[:, -1]


def validate(mode: str, objective, constraints) -> Tuple[np.ndarray, np.ndarray]:
    """Check a problem and return (c, constraints) as float arrays.

    Checks run in a fixed order and the first failure raises InvalidProblem.
    """
    if mode not in MODES:
        raise InvalidProblem("invalid_mode", mode=mode)

    try:
        c = np.asarray(objective, dtype=float).reshape(-1)
    except (TypeError, ValueError) as e:
        raise InvalidProblem("malformed_objective") from e
    if c.size < 1:
        raise InvalidProblem("empty_objective")

    try:
        mat = np.asarray(constraints, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidProblem("malformed_constraints") from e
    if mat.ndim == 1:
        mat = mat.reshape(1, -1) if mat.size else mat.reshape(0, 0)
    if mat.ndim != 2:
        raise InvalidProblem("malformed_constraints")
    if mat.shape[0] == 0:
        raise InvalidProblem("empty_constraints")

    if mat.shape[1] != c.size + 1:
        raise InvalidProblem("column_mismatch", columns=mat.shape[1], expected=c.size + 1, variables=c.size)

    for i, coeff in enumerate(c):
        if coeff == 0:
            raise InvalidProblem("zero_objective_coefficient", index=i)

    for i, rhs in enumerate(mat[:, -1]):
        if rhs < 0:
            raise InvalidProblem("negative_rhs", row=i, value=float(rhs))

    # minimization runs on the dual, where c is the right-hand side
    if mode == MINIMIZE:
        for i, coeff in enumerate(c):
            if coeff < 0:
                raise InvalidProblem("negative_objective_coefficient", index=i, value=float(coeff))

    return c, mat


def lp_from_config(cfg: dict, maximize: Optional[bool] = None) -> LP:
    """Build an LP from the JSON problem format.

    {"c": [...], "A": [[...], ...], "b": [...], "maximize": true}

    `maximize` overrides the "maximize" key; the key defaults to True.
    """
    A: List[List[float]] = cfg["A"]
    b: List[float] = cfg["b"]
    if len(A) != len(b):
        raise InvalidProblem("rhs_length_mismatch", rows=len(A), rhs=len(b))
    if maximize is None:
        maximize = bool(cfg.get("maximize", True))
    constraints = [list(row) + [rhs] for row, rhs in zip(A, b)]
    return LP(c=list(cfg["c"]), constraints=constraints, mode=MAXIMIZE if maximize else MINIMIZE)
