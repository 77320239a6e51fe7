"""
Tableau Simplex solver.
- Maximize: `c·x` subject to `A·x <= b`, `x >= 0`.
- Minimize: `c·x` subject to `A·x >= b`, `x >= 0`, solved through its dual.
- Right-hand sides must be non-negative; no Big-M / two-phase start.
- Outcomes: optimal, unbounded (no solution), or iteration limit reached.

Example:

    solver = SimplexSolver(MAXIMIZE, [1, 2], [[2, 3, 34], [1, 5, 45], [1, 0, 15]])
    if solver.has_solution():
        print(solver.get_optimum(), solver.get_solution())
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from tableau_simplex.formulation import formulation_for
from tableau_simplex.problem import LP, validate
from tableau_simplex.tableau import DEFAULT_MAX_ITERATIONS, OPTIMAL, Tableau

logger = logging.getLogger(__name__)


@dataclass
class SimplexResult:
    status: str  # optimal | unbounded | iteration_limit
    optimal_value: Optional[float]
    solution: Optional[List[float]]  # values for the original n variables
    iterations: int
    mode: str


class SimplexSolver:
    """Solves one problem, in the constructor; not reusable."""

    def __init__(self, mode: str, objective, constraints,
                 max_iterations: int = DEFAULT_MAX_ITERATIONS, verbose: bool = False):
        self.found_solution = False
        self.optimum = 0.0
        self.solution = np.zeros(0)
        self.status: Optional[str] = None
        self.iterations = 0
        self.tableau: Optional[Tableau] = None
        self.mode = mode

        c, constraints = validate(mode, objective, constraints)
        self.number_of_variables = c.size

        formulation = formulation_for(mode, c, constraints)
        self.tableau = formulation.build()
        logger.debug("Built %s tableau of shape %s", type(formulation).__name__, self.tableau.T.shape)

        self.status, self.iterations = self.tableau.solve(max_iterations=max_iterations, verbose=verbose)
        if self.status != OPTIMAL:
            return

        self.solution = formulation.extract(self.tableau)
        self.optimum = self.tableau.objective_value
        self.found_solution = True

    def has_solution(self) -> bool:
        return self.found_solution

    def get_optimum(self) -> float:
        """Maximum or minimum of the objective; 0.0 without a solution."""
        return self.optimum

    def get_solution(self) -> np.ndarray:
        """Variable values of the optimum; empty without a solution."""
        return self.solution.copy()

    def result(self) -> SimplexResult:
        if not self.found_solution:
            return SimplexResult(status=self.status, optimal_value=None, solution=None,
                                 iterations=self.iterations, mode=self.mode)
        return SimplexResult(status=self.status, optimal_value=self.optimum, solution=self.solution.tolist(),
                             iterations=self.iterations, mode=self.mode)


def solve(lp: LP, max_iterations: int = DEFAULT_MAX_ITERATIONS, verbose: bool = False) -> SimplexResult:
    solver = SimplexSolver(lp.mode, lp.c, lp.constraints, max_iterations=max_iterations, verbose=verbose)
    return solver.result()
