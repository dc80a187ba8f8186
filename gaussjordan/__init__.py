"""Core interfaces for the Gauss-Jordan linear system solver."""

from .linalg import (
    LinearSystemError,
    SingularMatrixError,
    augment,
    extract_solutions,
    is_row_canonical,
    residuals,
    row_reduce,
)
from .loader import (
    EmptyMatrixError,
    MatrixFormatError,
    MatrixInputError,
    MatrixShapeError,
    load_matrix,
    parse_matrix,
    validate_shape,
)
from .config import SolverConfiguration
from .model import LinearSystem, SystemSolution, solve_file
from .examples import load_example, three_variable_example

__all__ = [
    "LinearSystemError",
    "SingularMatrixError",
    "augment",
    "extract_solutions",
    "is_row_canonical",
    "residuals",
    "row_reduce",
    "EmptyMatrixError",
    "MatrixFormatError",
    "MatrixInputError",
    "MatrixShapeError",
    "load_matrix",
    "parse_matrix",
    "validate_shape",
    "SolverConfiguration",
    "LinearSystem",
    "SystemSolution",
    "solve_file",
    "load_example",
    "three_variable_example",
]
