"""Gauss-Jordan elimination on augmented N x (N+1) matrices."""
from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

Matrix = List[List[float]]
TraceCallback = Callable[[str, Matrix], None]

SINGULAR_POLICIES = ("raise", "propagate")


class LinearSystemError(RuntimeError):
    """Raised when the linear system cannot be solved."""


class SingularMatrixError(LinearSystemError):
    """Raised when a column has no non-zero pivot to eliminate with."""

    def __init__(self, column: int):
        super().__init__(f"Singular matrix: no non-zero pivot in column {column + 1}")
        self.column = column


def copy_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    return [[float(value) for value in row] for row in matrix]


def has_augmented_shape(matrix: Sequence[Sequence[float]]) -> bool:
    """Return True when every row holds one more entry than there are rows."""

    width = len(matrix) + 1
    return all(len(row) == width for row in matrix)


def is_row_canonical(matrix: Sequence[Sequence[float]], tolerance: float = 0.0) -> bool:
    """Return True if ``matrix`` is in reduced row echelon form.

    The coefficient block (every column but the last) must be the identity.
    Matrices that are not N x (N+1) are reported as not canonical rather than
    raising.  With the default ``tolerance`` of zero the comparison is exact,
    so values that are mathematically 1 or 0 but carry rounding error fail
    the test.
    """

    if not has_augmented_shape(matrix):
        return False

    n = len(matrix)
    for i in range(n):
        for j in range(n):
            value = matrix[i][j]
            target = 1.0 if i == j else 0.0
            if tolerance > 0.0:
                if abs(value - target) > tolerance:
                    return False
            elif value != target:
                return False
    return True


def _reciprocal(value: float) -> float:
    # IEEE-754 division: 1/0 is an infinity carrying the sign of the zero.
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _scale_row(row: List[float], factor: float) -> None:
    for col in range(len(row)):
        row[col] *= factor


def _notify(trace: Optional[TraceCallback], description: str, matrix: Matrix) -> None:
    if trace is not None:
        trace(description, [list(row) for row in matrix])


def row_reduce(
    matrix: Sequence[Sequence[float]],
    *,
    tolerance: float = 0.0,
    on_singular: str = "raise",
    trace: Optional[TraceCallback] = None,
) -> Matrix:
    """Reduce an augmented matrix to row canonical form.

    ``matrix`` is not mutated; elimination runs on a float copy which is
    returned.  Columns are processed left to right only while the working
    matrix is not yet canonical according to :func:`is_row_canonical`.

    ``on_singular`` selects what happens when a column has no non-zero pivot:
    ``"raise"`` raises :class:`SingularMatrixError`, ``"propagate"`` divides
    by the zero pivot anyway so that infinities and NaNs flow into the result.

    There is no magnitude threshold on pivots or elimination factors.  A
    subnormal entry can make ``-1 / entry`` overflow to an infinity, in which
    case NaNs reach the result even under ``"raise"``;
    :meth:`~gaussjordan.model.LinearSystem.solve` rejects such results.
    """

    if on_singular not in SINGULAR_POLICIES:
        raise ValueError(f"Unknown singular policy: {on_singular!r}")
    if not has_augmented_shape(matrix):
        raise ValueError("Matrix must be N x (N+1)")

    work = copy_matrix(matrix)
    n = len(work)

    for a in range(n):
        if is_row_canonical(work, tolerance):
            break

        if work[a][a] == 0:
            for i in range(a + 1, n):
                if work[i][a] != 0:
                    work[a], work[i] = work[i], work[a]
                    _notify(trace, f"Swap rows {a + 1} and {i + 1}", work)
                    break

        pivot = work[a][a]
        if pivot == 0 and on_singular == "raise":
            raise SingularMatrixError(a)
        _scale_row(work[a], _reciprocal(pivot))
        _notify(trace, f"Normalize row {a + 1}", work)

        pivot_row = work[a]
        for i in range(n):
            if i == a or work[i][a] == 0:
                continue
            factor = -1.0 / work[i][a]
            work[i] = [value * factor + pivot_value for value, pivot_value in zip(work[i], pivot_row)]
        _notify(trace, f"Eliminate column {a + 1}", work)

    # Elimination can leave diagonal entries other than 1 (e.g. -1 after the
    # negative-reciprocal scaling), so normalise once more row by row.
    for i in range(n):
        if is_row_canonical(work, tolerance):
            break
        diagonal = work[i][i]
        # Finite input reaches this only if rounding cancels a diagonal entry
        # during the sweep above.
        if diagonal == 0 and on_singular == "raise":
            raise SingularMatrixError(i)
        _scale_row(work[i], _reciprocal(diagonal))
        _notify(trace, f"Rescale row {i + 1}", work)

    return work


def extract_solutions(
    matrix: Sequence[Sequence[float]],
    *,
    require_canonical: bool = False,
    tolerance: float = 0.0,
) -> List[float]:
    """Return the last column of a reduced matrix.

    The matrix is expected to be in row canonical form already.  That is only
    checked when ``require_canonical`` is set; otherwise the last column is
    returned whatever the state of the coefficient block.
    """

    if require_canonical and not is_row_canonical(matrix, tolerance):
        raise LinearSystemError("Matrix is not in reduced row echelon form")
    return [float(row[-1]) for row in matrix]


def augment(coefficients: Sequence[Sequence[float]], rhs: Sequence[float]) -> Matrix:
    n = len(coefficients)
    if any(len(row) != n for row in coefficients):
        raise ValueError("Matrix must be square")
    if len(rhs) != n:
        raise ValueError("Right-hand side dimension mismatch")
    return [[float(value) for value in row] + [float(value)] for row, value in zip(coefficients, rhs)]


def residuals(matrix: Sequence[Sequence[float]], solutions: Sequence[float]) -> List[float]:
    """Return ``A x - b`` for each equation of the augmented matrix ``[A | b]``."""

    if len(solutions) != len(matrix):
        raise ValueError("Solution vector dimension mismatch")
    return [
        math.fsum(coefficient * value for coefficient, value in zip(row[:-1], solutions)) - row[-1]
        for row in matrix
    ]


__all__ = [
    "LinearSystemError",
    "Matrix",
    "SINGULAR_POLICIES",
    "SingularMatrixError",
    "TraceCallback",
    "augment",
    "copy_matrix",
    "extract_solutions",
    "has_augmented_shape",
    "is_row_canonical",
    "residuals",
    "row_reduce",
]
