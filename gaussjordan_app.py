"""Streamlit application for the Gauss-Jordan linear system solver."""
from __future__ import annotations

import streamlit as st

from gaussjordan import LinearSystem, LinearSystemError, MatrixInputError, SolverConfiguration, parse_matrix
from gaussjordan.examples import EXAMPLES, load_example
from gaussjordan.reporter import (
    HAS_XLSXWRITER,
    SolutionReporter,
    format_matrix,
    matrix_to_frame,
    solution_to_frame,
)


def _matrix_to_text(matrix) -> str:
    return "\n".join(",".join(f"{value:g}" for value in row) for row in matrix)


st.set_page_config(page_title="Gauss-Jordan Solver", layout="wide")

if "matrix_text" not in st.session_state:
    st.session_state["matrix_text"] = _matrix_to_text(load_example("three-variable"))

with st.sidebar:
    st.header("Input")
    example = st.selectbox("Load example", ["(none)"] + list(EXAMPLES))
    if example != "(none)" and st.button("Load", key="load_example"):
        st.session_state["matrix_text"] = _matrix_to_text(load_example(example))
        st.session_state.pop("solution", None)

    uploaded_file = st.file_uploader("Load matrix file", type=["txt", "csv"], key="matrix_upload")
    if uploaded_file is not None and st.session_state.get("uploaded_name") != uploaded_file.name:
        st.session_state["uploaded_name"] = uploaded_file.name
        st.session_state["matrix_text"] = uploaded_file.getvalue().decode("utf-8")

    st.header("Solver options")
    tolerance = st.number_input(
        "RREF tolerance",
        min_value=0.0,
        value=0.0,
        format="%.1e",
        help="0 compares diagonal and off-diagonal entries exactly",
    )
    on_singular = st.selectbox(
        "Singular column",
        ["raise", "propagate"],
        help="'propagate' divides by the zero pivot and reports inf/NaN",
    )
    precision = st.slider("Displayed digits", 2, 15, 6)

st.title("Gauss-Jordan Elimination")

matrix_text = st.text_area(
    "Augmented matrix (one comma-separated row per line)",
    key="matrix_text",
    height=180,
)
show_steps = st.checkbox("Record intermediate steps", value=False)

if st.button("Solve", type="primary"):
    steps = []
    try:
        config = SolverConfiguration(tolerance=tolerance, on_singular=on_singular, precision=precision)
        system = LinearSystem(matrix=parse_matrix(matrix_text), label="Web input")
        solution = system.solve(
            config,
            trace=(lambda description, snapshot: steps.append((description, snapshot))) if show_steps else None,
        )
        st.session_state["solution"] = solution
        st.session_state["steps"] = steps
    except (MatrixInputError, LinearSystemError, ValueError) as exc:
        st.session_state.pop("solution", None)
        st.error(f"Solve failed: {exc}")

if "solution" in st.session_state:
    solution = st.session_state["solution"]

    col_in, col_out = st.columns(2)
    with col_in:
        st.subheader("Input")
        st.dataframe(matrix_to_frame(solution.original), use_container_width=True)
    with col_out:
        st.subheader("Reduced")
        st.dataframe(matrix_to_frame(solution.reduced), use_container_width=True)

    st.subheader("Solution")
    if not solution.is_finite:
        st.warning("The system has no unique solution; values contain inf/NaN.")
    elif not solution.canonical:
        st.info("The reduced matrix is not exactly canonical; consider a small tolerance.")
    st.dataframe(solution_to_frame(solution), use_container_width=True, hide_index=True)

    for description, snapshot in st.session_state.get("steps", []):
        with st.expander(description):
            st.code(format_matrix(snapshot, precision))

    if HAS_XLSXWRITER:
        reporter = SolutionReporter()
        reporter.add_solution(solution)
        st.download_button(
            "Download Excel report",
            data=reporter.generate(),
            file_name="solution.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
else:
    st.info("Enter or load a matrix and press **Solve**.")
