import io
import json
from contextlib import redirect_stdout

import streamlit as st

from tableau_simplex.errors import InvalidProblem, format_error
from tableau_simplex.fmt import fmt_out
from tableau_simplex.graph import plot_2d
from tableau_simplex.problem import lp_from_config
from tableau_simplex.solver import solve
from tableau_simplex.tableau import DEFAULT_MAX_ITERATIONS

st.set_page_config(page_title="Simplex Visualizer", layout="wide")
st.title("Simplex (Tableau) — Solve & Visualize")

# Sidebar options
with st.sidebar:
    st.header("Options")
    is_min = st.checkbox("Minimize (default: Maximize)", value=False)
    st.caption("Maximize reads rows as A·x <= b, minimize as A·x >= b.")
    max_iterations = st.number_input("Iteration limit", min_value=1, value=DEFAULT_MAX_ITERATIONS, step=100)
    show_graph = st.checkbox("Show graph (2 variables only)", value=True)

# Default JSON template
default_json = {
    "c": [1, 2],
    "A": [[2, 3], [1, 5], [1, 0]],
    "b": [34, 45, 15],
    "maximize": True
}

st.subheader("Model JSON")
json_text = st.text_area("Edit LP JSON here", json.dumps(default_json, indent=2), height=260)

col_run, col_reset = st.columns([1, 1])
run = col_run.button("Solve")
if col_reset.button("Reset to template"):
    st.rerun()

if run:
    try:
        cfg = json.loads(json_text)
    except json.JSONDecodeError as e:
        st.error(f"Invalid JSON: {e}")
        st.stop()

    try:
        # UI toggle overrides the JSON "maximize" key when set
        lp = lp_from_config(cfg, maximize=False if is_min else None)
        buf = io.StringIO()
        with redirect_stdout(buf):
            res = solve(lp, max_iterations=int(max_iterations), verbose=True)
    except InvalidProblem as e:
        st.error(format_error(e))
        st.stop()
    except KeyError as e:
        st.error(f"Missing LP field: {e}")
        st.stop()

    # Single-column layout: Iterations -> Result -> Graph
    st.subheader("Iterations / Tableaux")
    st.code(buf.getvalue())
    st.subheader("Result")
    st.json({
        "status": res.status,
        "optimal_value": fmt_out(res.optimal_value) if res.optimal_value is not None else None,
        "solution": [fmt_out(v) for v in (res.solution or [])],
        "iterations": res.iterations,
        "mode": res.mode,
    })
    if res.solution is None:
        st.info("The linear problem has no solution.")

    st.subheader("Graph")
    if show_graph and len(lp.c) == 2:
        fig = plot_2d(lp, res)
        if fig is not None:
            st.pyplot(fig)
        else:
            st.info("No feasible region to plot or numerical issue.")
    else:
        st.info("Graph available only for 2 variables.")
