import json
import math

import pytest

from gaussjordan import (
    EmptyMatrixError,
    LinearSystem,
    LinearSystemError,
    MatrixShapeError,
    SingularMatrixError,
    SolverConfiguration,
    SystemSolution,
    solve_file,
)
from gaussjordan.examples import dependent_rows_example, load_example, three_variable_example


def test_linear_system_solve_returns_solution_and_residuals():
    solution = LinearSystem(matrix=three_variable_example(), label="classic").solve()

    assert solution.solutions == pytest.approx([2.0, 3.0, -1.0])
    assert solution.max_residual < 1e-12
    assert solution.is_finite
    assert solution.size == 3
    assert solution.label == "classic"
    assert solution.original == three_variable_example()


def test_linear_system_copies_its_input():
    matrix = [[2, 4]]
    system = LinearSystem(matrix=matrix)
    matrix[0][0] = 100

    assert system.matrix == [[2.0, 4.0]]
    assert system.solve().reduced == [[1.0, 2.0]]


def test_pre_reduced_system_is_canonical():
    system = LinearSystem(matrix=load_example("pre-reduced"))

    assert system.is_row_canonical()
    solution = system.solve()
    assert solution.canonical
    assert solution.solutions == [5.0, 7.0]


def test_from_coefficients():
    system = LinearSystem.from_coefficients([[1, 1], [1, -1]], [3, 1])

    assert system.solve().solutions == [2.0, 1.0]


def test_shape_errors_are_reported_before_reduction():
    with pytest.raises(EmptyMatrixError):
        LinearSystem(matrix=[]).solve()
    with pytest.raises(MatrixShapeError):
        LinearSystem(matrix=[[1, 2], [3, 4]]).solve()


def test_singular_policy_comes_from_configuration():
    system = LinearSystem(matrix=dependent_rows_example())

    with pytest.raises(SingularMatrixError):
        system.solve()

    solution = system.solve(SolverConfiguration(on_singular="propagate"))
    assert not solution.is_finite
    assert all(math.isnan(value) for value in solution.solutions)
    assert not solution.canonical


def test_configuration_label_is_used_when_system_unnamed():
    solution = LinearSystem(matrix=[[2, 4]]).solve(SolverConfiguration(label="tiny"))

    assert solution.label == "tiny"


def test_solution_serialization_round_trip():
    solution = LinearSystem(matrix=load_example("pre-reduced"), label="P").solve()

    data = solution.to_dict()
    assert data["summary"]["size"] == 2
    assert data["summary"]["max_residual"] == 0.0
    json.dumps(data)

    restored = SystemSolution.from_dict(data)
    assert restored == solution


def test_solution_tables():
    solution = LinearSystem(matrix=[[2, 4]]).solve()

    assert solution.solutions_as_dicts() == [{"Variable": "var1", "Value": 2.0}]
    assert solution.residuals_as_dicts() == [{"Equation": 1, "Residual": 0.0}]


def test_solve_file(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text("2,1,-1,8\n-3,-1,2,-11\n-2,1,2,-3\n", encoding="utf-8")

    solution = solve_file(path)

    assert solution.label == "system.txt"
    assert solution.solutions == pytest.approx([2.0, 3.0, -1.0])


def test_rounding_residue_is_reported_as_not_canonical():
    system = LinearSystem(matrix=load_example("rounding-drift"))

    exact = system.solve()
    assert not exact.canonical
    assert exact.solutions == pytest.approx([1.0, 1.0])

    assert system.solve(SolverConfiguration(tolerance=1e-9)).canonical


def test_overflowed_elimination_raises_by_default():
    system = LinearSystem(matrix=[[1.0, 1.0, 2.0], [5e-324, 1.0, 1.0]])

    with pytest.raises(LinearSystemError, match="inf or NaN"):
        system.solve()

    solution = system.solve(SolverConfiguration(on_singular="propagate"))
    assert not solution.is_finite
