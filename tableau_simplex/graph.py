"""Plot constraints and the iso-objective line for problems with 2 variables."""

from itertools import combinations
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from tableau_simplex.fmt import fmt_out
from tableau_simplex.problem import LP
from tableau_simplex.solver import SimplexResult

TOL = 1e-9


def _feasible_fn(A, b, sense):
    def feasible(p):
        x, y = p
        if x < -TOL or y < -TOL:
            return False
        for row, bi in zip(A, b):
            lhs = row[0]*x + row[1]*y
            if sense == "<=" and lhs > bi + TOL:
                return False
            if sense == ">=" and lhs < bi - TOL:
                return False
        return True
    return feasible


def bfs_points(lp: LP) -> List[Tuple[float, float]]:
    """Basic feasible solutions: feasible intersections of constraint lines and axes."""
    A, b = lp.split()
    feasible = _feasible_fn(A, b, lp.sense)
    lines = [(row[0], row[1], bi) for row, bi in zip(A, b)]
    lines.append((1.0, 0.0, 0.0))  # x = 0
    lines.append((0.0, 1.0, 0.0))  # y = 0
    cand = []
    for (a1, a2, bi), (c1, c2, bj) in combinations(lines, 2):
        det = a1*c2 - a2*c1
        if abs(det) < 1e-12:
            continue
        x = (bi*c2 - a2*bj) / det
        y = (a1*bj - bi*c1) / det
        if feasible((x, y)):
            cand.append((x, y))
    uniq = []
    for (x, y) in cand:
        if not any(abs(x-x2) < 1e-7 and abs(y-y2) < 1e-7 for (x2, y2) in uniq):
            uniq.append((x, y))
    return uniq


def plot_2d(lp: LP, res: Optional[SimplexResult] = None):
    """Figure with the constraints, feasible region, BFS points and the optimum.

    Returns None unless the problem has exactly 2 variables and a non-empty
    set of basic feasible solutions.
    """
    if len(lp.c) != 2:
        return None

    A, b = lp.split()
    sense = lp.sense
    bfs = bfs_points(lp)
    if not bfs:
        return None

    xs = [p[0] for p in bfs]
    ys = [p[1] for p in bfs]
    # a minimization region is open towards +inf; leave room beyond the vertices
    grow = 1.2 if lp.maximize else 1.5
    xmin, xmax = 0.0, max(xs)*grow + 1.0
    ymin, ymax = 0.0, max(ys)*grow + 1.0

    grid_x = np.linspace(xmin, xmax, 400)

    fig, ax = plt.subplots(figsize=(6, 6))

    color_cycle = plt.rcParams.get('axes.prop_cycle', None)
    colors = color_cycle.by_key()['color'] if color_cycle else [f'C{i}' for i in range(10)]
    for i, (row, bi) in enumerate(zip(A, b)):
        a1, a2 = row
        c = colors[i % len(colors)]
        label = f"Constraint {i+1}: {fmt_out(a1)}x1 + {fmt_out(a2)}x2 {sense} {fmt_out(bi)}"
        if abs(a2) < 1e-12:
            x0 = bi/a1 if abs(a1) > 1e-12 else 0
            ax.axvline(x0, color=c, alpha=0.7, label=label)
        else:
            ax.plot(grid_x, (bi - a1*grid_x)/a2, color=c, alpha=0.7, label=label)

    # Shade feasible region
    X, Y = np.meshgrid(np.linspace(xmin, xmax, 200), np.linspace(ymin, ymax, 200))
    mask = np.ones_like(X, dtype=bool)
    for row, bi in zip(A, b):
        lhs = row[0]*X + row[1]*Y
        if sense == "<=":
            mask &= lhs <= bi + TOL
        else:
            mask &= lhs >= bi - TOL
    ax.contourf(X, Y, mask.astype(float), levels=[0.5, 1.5], colors=['#e8f7ff'], alpha=0.5)

    if res is not None and res.solution is not None:
        xopt, yopt = res.solution[0], res.solution[1]
        zopt = res.optimal_value
        c1, c2 = float(lp.c[0]), float(lp.c[1])
        # objective coefficients are never zero
        ax.plot(grid_x, (zopt - c1*grid_x)/c2, 'r--', label='iso-objective (through optimum)')
        ax.plot([xopt], [yopt], 'ro', label=f"optimal ({fmt_out(xopt)}, {fmt_out(yopt)})")
        ax.annotate(f"Z* = {fmt_out(zopt)}", (xopt, yopt), textcoords="offset points", xytext=(8, 8))

    ax.scatter(xs, ys, s=25, color='#444444', alpha=0.9, label='BFS')

    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.set_xlabel('x1')
    ax.set_ylabel('x2')
    ax.set_title('Constraints, Feasible Region, Iso-objective')
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig
