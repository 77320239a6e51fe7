"""
Tableau formulations.

Both optimization directions are solved by maximizing: a formulation builds
the canonical maximize-tableau for its mode and decodes the final tableau
back into values for the original variables.
"""

import numpy as np

from tableau_simplex.problem import MAXIMIZE, MINIMIZE
from tableau_simplex.tableau import Tableau


class Formulation:
    mode: str = ""

    def __init__(self, c: np.ndarray, constraints: np.ndarray):
        self.c = c
        self.A = constraints[:, :-1]
        self.b = constraints[:, -1]
        self.n = c.size
        self.m = constraints.shape[0]

    def build(self) -> Tableau:
        raise NotImplementedError

    def extract(self, tableau: Tableau) -> np.ndarray:
        raise NotImplementedError


class PrimalFormulation(Formulation):
    """max c·x s.t. A·x <= b.

    Row 0: [-c, 0...0, 0]; rows 1..m: [A, I_m, b].
    """
    mode = MAXIMIZE

    def build(self) -> Tableau:
        n, m = self.n, self.m
        T = np.zeros((m + 1, n + m + 1))
        T[0, :n] = -self.c
        T[1:, :n] = self.A
        T[1:, n:n + m] = np.eye(m)
        T[1:, -1] = self.b
        names = [f"x{j+1}" for j in range(n)] + [f"s{i+1}" for i in range(m)]
        return Tableau(T, entering_columns=n, var_names=names)

    def extract(self, tableau: Tableau) -> np.ndarray:
        # Basic variables sit in a unit column with a zero reduced cost; the
        # rest are zero. A row holds at most one basic variable.
        x = np.zeros(self.n)
        claimed = set()
        for j in range(self.n):
            row = tableau.pivot_row(j)
            if row is None or row in claimed or tableau.T[0, j] != 0:
                continue
            claimed.add(row)
            x[j] = tableau.T[row, tableau.rhs_col]
        return x


class DualFormulation(Formulation):
    """min c·x s.t. A·x >= b, solved as its dual max b·y s.t. Aᵀ·y <= c.

    Row 0: [-b, 0...0, 0]; rows 1..n: [Aᵀ, I_n, c].
    """
    mode = MINIMIZE

    def build(self) -> Tableau:
        n, m = self.n, self.m
        T = np.zeros((n + 1, n + m + 1))
        T[0, :m] = -self.b
        T[1:, :m] = self.A.T
        T[1:, m:m + n] = np.eye(n)
        T[1:, -1] = self.c
        names = [f"y{i+1}" for i in range(m)] + [f"s{j+1}" for j in range(n)]
        return Tableau(T, entering_columns=m, var_names=names)

    def extract(self, tableau: Tableau) -> np.ndarray:
        # the primal values are the reduced costs of the dual's slack columns
        return tableau.T[0, self.m:self.m + self.n].copy()


FORMULATIONS = {
    MAXIMIZE: PrimalFormulation,
    MINIMIZE: DualFormulation,
}


def formulation_for(mode: str, c: np.ndarray, constraints: np.ndarray) -> Formulation:
    return FORMULATIONS[mode](c, constraints)
