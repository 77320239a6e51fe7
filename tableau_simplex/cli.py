import argparse
import json
import logging
import sys

from tableau_simplex.errors import InvalidProblem, format_error
from tableau_simplex.fmt import fmt_out
from tableau_simplex.logger_config import setup_logger
from tableau_simplex.problem import LP, MAXIMIZE, MINIMIZE, lp_from_config
from tableau_simplex.solver import SimplexResult, solve
from tableau_simplex.tableau import DEFAULT_MAX_ITERATIONS, ITERATION_LIMIT, OPTIMAL, UNBOUNDED

logger = logging.getLogger(__name__)

# The built-in samples: maximize x + 2y, minimize 3x + 4y.
SAMPLES = [
    LP(c=[1, 2], constraints=[[2, 3, 34], [1, 5, 45], [1, 0, 15]], mode=MAXIMIZE),
    LP(c=[3, 4], constraints=[[2, 1, 8], [1, 2, 13], [1, 5, 16]], mode=MINIMIZE),
]


def print_result(res: SimplexResult):
    print("\n=== Result ===")
    print("Status:", res.status)
    if res.status == OPTIMAL:
        label = "maximum" if res.mode == MAXIMIZE else "minimum"
        print(f"The {label} is:", fmt_out(res.optimal_value))
        print("The solution is:", [fmt_out(v) for v in res.solution])
    elif res.status == UNBOUNDED:
        print("The linear problem has no solution.")
    elif res.status == ITERATION_LIMIT:
        print("Stopped at the iteration limit before reaching an optimum.")
    print("Iterations:", res.iterations)
    print("Mode:", res.mode)


def main(argv=None):
    p = argparse.ArgumentParser(description="Tableau Simplex for <= (max) / >= (min) problems (shows iterations)")
    p.add_argument("json", nargs="?", default=None,
                   help="Path to JSON file describing the LP; omit to run the built-in samples")
    p.add_argument("--sense", choices=["max", "min"], default=None, help="Objective sense (default: use JSON or max)")
    p.add_argument("--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS,
                   help="Stop after this many pivots")
    p.add_argument("--no-verbose", action="store_true", help="Hide iteration printouts")
    p.add_argument("--graph", action="store_true", help="Plot constraints and iso-objective (2 variables only)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)

    setup_logger(getattr(logging, args.log_level))

    if args.json is None:
        problems = SAMPLES
    else:
        with open(args.json, "r") as f:
            cfg = json.load(f)
        # CLI sense (if provided) overrides JSON
        maximize = None if args.sense is None else (args.sense == "max")
        try:
            problems = [lp_from_config(cfg, maximize=maximize)]
        except InvalidProblem as e:
            print(format_error(e), file=sys.stderr)
            return 2

    for lp in problems:
        logger.info("Solving %s problem with %d variables", lp.mode, len(lp.c))
        try:
            res = solve(lp, max_iterations=args.max_iterations, verbose=not args.no_verbose)
        except InvalidProblem as e:
            print(format_error(e), file=sys.stderr)
            return 2
        print_result(res)
        if args.graph:
            from tableau_simplex.graph import plot_2d
            import matplotlib.pyplot as plt

            if plot_2d(lp, res) is None:
                print("Graph only supports 2 variables with a non-empty feasible region.")
            else:
                plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
