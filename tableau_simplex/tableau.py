import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from tableau_simplex.fmt import fmt_out

logger = logging.getLogger(__name__)

OPTIMAL = "optimal"
UNBOUNDED = "unbounded"
ITERATION_LIMIT = "iteration_limit"

DEFAULT_MAX_ITERATIONS = 10_000


class Tableau:
    def __init__(self, mat, entering_columns: int, var_names: Optional[List[str]] = None):
        # Layout: row 0 is the objective row, rows 1..m are constraints,
        # the last column holds the right-hand side (row 0: objective value).
        self.T = np.array(mat, dtype=float)
        self.m = self.T.shape[0] - 1
        self.cols = self.T.shape[1]
        self.rhs_col = self.cols - 1
        # only the leading `entering_columns` columns may enter the basis
        self.entering_columns = entering_columns
        self.var_names = var_names[:] if var_names else [f"v{j+1}" for j in range(self.rhs_col)]
        self.iter = 0

    @property
    def objective_value(self) -> float:
        return float(self.T[0, self.rhs_col])

    def choose_entering(self) -> Optional[int]:
        obj_row = self.T[0, :self.entering_columns]
        col = int(np.argmin(obj_row))
        if obj_row[col] >= 0:
            return None
        return col

    def find_pivot_min(self, col: int) -> Optional[int]:
        """Row with the smallest non-negative ratio rhs/entry in column `col`.

        Rows with a zero entry or a negative ratio are skipped. When the best
        ratio so far and the candidate are both exactly zero, the candidate
        wins only with a strictly smaller right-hand side (0/negative is
        preferred over 0/positive). Returns None when no row qualifies.
        """
        min_row = None
        min_ratio = 0.0
        min_constant = 0.0
        for i in range(1, self.m + 1):
            entry = float(self.T[i, col])
            if entry == 0:
                continue
            constant = float(self.T[i, self.rhs_col])
            ratio = constant / entry
            if ratio < 0:
                continue

            if min_row is None:
                min_row, min_ratio, min_constant = i, ratio, constant
            elif ratio == 0 and ratio == min_ratio:
                if constant < min_constant:
                    min_row, min_ratio, min_constant = i, ratio, constant
            elif ratio < min_ratio:
                min_row, min_ratio, min_constant = i, ratio, constant
        return min_row

    def pivot(self, row: int, col: int):
        self.T[row, :] /= self.T[row, col]
        self.T[row, col] = 1.0  # precision
        for i in range(self.m + 1):
            if i == row:
                continue
            self.T[i, :] -= self.T[i, col] * self.T[row, :]
            self.T[i, col] = 0.0  # precision

    def pivot_row(self, col: int) -> Optional[int]:
        """Row index of the single exact 1 in column `col` (row 0 ignored).

        Returns None unless every other entry of rows 1..m is exactly 0.
        """
        one_row = None
        for i in range(1, self.m + 1):
            value = self.T[i, col]
            if value == 1:
                if one_row is not None:
                    return None
                one_row = i
            elif value != 0:
                return None
        return one_row

    def basic_variables(self) -> Dict[int, int]:
        """Map row -> column of the unit column basic in that row."""
        basis = {}
        for j in range(self.rhs_col):
            row = self.pivot_row(j)
            if row is not None and row not in basis:
                basis[row] = j
        return basis

    def print_tableau(self, header: str = "", enter_j: Optional[int] = None, leave_i: Optional[int] = None):
        title = header or f"Iteration {self.iter}"
        print(f"\n{title}")
        headers = ["Z"] + self.var_names + ["RHS", "BV", "Ratio"]
        basis = self.basic_variables()

        cells = [[fmt_out(v) for v in row] for row in self.T]
        colw = max(6, max(len(s) for s in headers + [c for row in cells for c in row]) + 2)

        print(" ".join(f"{h:>{colw}}" for h in headers))
        print("-" * (len(headers) * (colw + 1)))

        z_cells = ["Z"] + cells[0][:-1] + [cells[0][-1], "Z", ""]
        print(" ".join(f"{c:>{colw}}" for c in z_cells))

        for i in range(1, self.m + 1):
            row_cells = [""]
            for j in range(self.rhs_col):
                val_str = cells[i][j]
                if i == leave_i and j == enter_j:
                    val_str = f"({val_str})"
                row_cells.append(val_str)
            bv_name = self.var_names[basis[i]] if i in basis else "?"
            ratio_cell = ""
            if enter_j is not None:
                aij = self.T[i, enter_j]
                if aij != 0 and self.T[i, self.rhs_col] / aij >= 0:
                    ratio_cell = fmt_out(self.T[i, self.rhs_col] / aij)
            row_cells.extend([cells[i][-1], bv_name, ratio_cell])
            print(" ".join(f"{c:>{colw}}" for c in row_cells))

    def solve(self, max_iterations: int = DEFAULT_MAX_ITERATIONS, verbose: bool = False) -> Tuple[str, int]:
        if verbose:
            print("\nInitial tableau")
            self.print_tableau(header=f"Iteration {self.iter}")
        while True:
            enter_j = self.choose_entering()
            if enter_j is None:
                if verbose:
                    self.print_tableau(header=f"Final tableau (Iteration {self.iter})")
                logger.debug("Optimal after %d iterations, objective %s", self.iter, self.objective_value)
                return (OPTIMAL, self.iter)
            leave_i = self.find_pivot_min(enter_j)
            if leave_i is None:
                if verbose:
                    self.print_tableau(header="Final tableau (unbounded)", enter_j=enter_j)
                logger.info("Unbounded: no pivot row for entering column %s", self.var_names[enter_j])
                return (UNBOUNDED, self.iter)
            if self.iter >= max_iterations:
                logger.warning("Iteration limit of %d reached without reaching an optimum", max_iterations)
                return (ITERATION_LIMIT, self.iter)
            self.iter += 1
            if verbose:
                self.print_tableau(header=f"Iteration {self.iter}", enter_j=enter_j, leave_i=leave_i)
            logger.debug("Iteration %d: entering %s, leaving row %d, pivot %s",
                         self.iter, self.var_names[enter_j], leave_i, self.T[leave_i, enter_j])
            self.pivot(leave_i, enter_j)
