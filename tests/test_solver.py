import numpy as np
import pytest

from tableau_simplex.errors import InvalidProblem
from tableau_simplex.problem import LP, MAXIMIZE, MINIMIZE, lp_from_config
from tableau_simplex.solver import SimplexSolver, solve
from tableau_simplex.tableau import ITERATION_LIMIT, OPTIMAL, UNBOUNDED

TOL = 1e-9

MAX_CASES = [
    # (objective, constraints, optimum, solution)
    ([1, 2], [[2, 3, 34], [1, 5, 45], [1, 0, 15]], 21, [5, 8]),
    ([3, 5], [[1, 0, 4], [0, 2, 12], [3, 2, 18]], 36, [2, 6]),
    ([1, 10], [[1, 1, 1]], 10, [0, 1]),
    ([8, 13, 16], [[2, 1, 1, 3], [1, 2, 5, 4]], 27, [2 / 3, 5 / 3, 0]),
]

MIN_CASES = [
    ([3, 4], [[2, 1, 8], [1, 2, 13], [1, 5, 16]], 27, [1, 6]),
    ([34, 45, 15], [[2, 1, 1, 1], [3, 5, 0, 2]], 21, [3 / 7, 1 / 7, 0]),
]


def assert_feasible(mode, constraints, x):
    mat = np.asarray(constraints, dtype=float)
    A, b = mat[:, :-1], mat[:, -1]
    assert np.all(x >= -TOL)
    if mode == MAXIMIZE:
        assert np.all(A @ x <= b + 1e-7)
    else:
        assert np.all(A @ x >= b - 1e-7)


@pytest.mark.parametrize("c, constraints, optimum, solution", MAX_CASES)
def test_maximize(c, constraints, optimum, solution):
    solver = SimplexSolver(MAXIMIZE, c, constraints)
    assert solver.has_solution()
    assert solver.get_optimum() == pytest.approx(optimum)
    assert solver.get_solution() == pytest.approx(solution)
    assert_feasible(MAXIMIZE, constraints, solver.get_solution())
    assert np.dot(c, solver.get_solution()) == pytest.approx(optimum)


@pytest.mark.parametrize("c, constraints, optimum, solution", MIN_CASES)
def test_minimize(c, constraints, optimum, solution):
    solver = SimplexSolver(MINIMIZE, c, constraints)
    assert solver.has_solution()
    assert solver.get_optimum() == pytest.approx(optimum)
    assert solver.get_solution() == pytest.approx(solution, abs=1e-9)
    assert_feasible(MINIMIZE, constraints, solver.get_solution())
    assert np.dot(c, solver.get_solution()) == pytest.approx(optimum)


def dual_of(c, constraints):
    mat = np.asarray(constraints, dtype=float)
    A, b = mat[:, :-1], mat[:, -1]
    return b.tolist(), np.column_stack([A.T, c]).tolist()


@pytest.mark.parametrize("c, constraints", [
    ([1, 2], [[2, 3, 34], [1, 5, 45], [1, 0, 15]]),
    ([3, 5], [[1, 0, 4], [0, 2, 12], [3, 2, 18]]),
    ([8, 13, 16], [[2, 1, 1, 3], [1, 2, 5, 4]]),
])
def test_primal_and_dual_optima_agree(c, constraints):
    primal = SimplexSolver(MAXIMIZE, c, constraints)
    dual = SimplexSolver(MINIMIZE, *dual_of(c, constraints))
    assert primal.has_solution() and dual.has_solution()
    assert dual.get_optimum() == pytest.approx(primal.get_optimum())


def test_unbounded_maximize(load_sample):
    lp = lp_from_config(load_sample("unbounded.json"))
    solver = SimplexSolver(lp.mode, lp.c, lp.constraints)
    assert not solver.has_solution()
    assert solver.status == UNBOUNDED
    assert solver.get_optimum() == 0.0
    assert solver.get_solution().size == 0


def test_unbounded_in_an_untouched_direction():
    # y never appears in a constraint
    solver = SimplexSolver(MAXIMIZE, [1, 1], [[1, 0, 5]])
    assert not solver.has_solution()


def test_infeasible_minimize_has_no_solution():
    # -x >= 1 has no non-negative solution; its dual is unbounded
    solver = SimplexSolver(MINIMIZE, [1], [[-1, 1]])
    assert not solver.has_solution()


def test_degenerate_problem_is_deterministic():
    c = [1, 1]
    constraints = [[1, 0, 0], [1, 1, 0], [0, 1, 2]]
    results = set()
    for _ in range(5):
        solver = SimplexSolver(MAXIMIZE, c, constraints)
        results.add((solver.status, solver.iterations, tuple(solver.get_solution())))
    assert len(results) == 1
    status, _, solution = results.pop()
    assert status == OPTIMAL
    assert solution == pytest.approx((0, 0))


@pytest.mark.parametrize("c, constraints", [
    ([0, 1], [[1, 1, 4]]),
    ([1, 1], [[1, 1, -1]]),
    ([1, 1], [[1, 1]]),
    ([1, 1, 1], [[1, 1, 1]]),
])
def test_invalid_problem_is_rejected(c, constraints):
    with pytest.raises(InvalidProblem):
        SimplexSolver(MAXIMIZE, c, constraints)


def test_has_solution_is_safe_after_failed_construction():
    solver = SimplexSolver.__new__(SimplexSolver)
    with pytest.raises(InvalidProblem):
        solver.__init__(MAXIMIZE, [0, 1], [[1, 1, 1]])
    assert not solver.has_solution()
    assert solver.tableau is None


def test_iteration_limit():
    solver = SimplexSolver(MAXIMIZE, [1, 2], [[2, 3, 34], [1, 5, 45], [1, 0, 15]], max_iterations=1)
    assert not solver.has_solution()
    assert solver.status == ITERATION_LIMIT
    assert solver.iterations == 1


def test_get_solution_returns_copy():
    solver = SimplexSolver(MAXIMIZE, [3, 5], [[1, 0, 4], [0, 2, 12], [3, 2, 18]])
    solver.get_solution()[0] = 100
    assert solver.get_solution()[0] == pytest.approx(2)


def test_solve_returns_result(load_sample):
    res = solve(lp_from_config(load_sample("min_sample.json")))
    assert res.status == OPTIMAL
    assert res.mode == MINIMIZE
    assert res.optimal_value == pytest.approx(27)
    assert res.solution == pytest.approx([1, 6])
    assert res.iterations == 3


def test_solve_result_without_solution():
    res = solve(LP(c=[1, 1], constraints=[[1, -1, 1]]))
    assert res.status == UNBOUNDED
    assert res.optimal_value is None
    assert res.solution is None


def test_minimize_rejects_negative_objective_coefficient():
    # min -x + y s.t. y >= 1 is unbounded below; it must not report an optimum
    with pytest.raises(InvalidProblem) as exc:
        SimplexSolver(MINIMIZE, [-1, 1], [[0, 1, 1]])
    assert exc.value.kind == "negative_objective_coefficient"
