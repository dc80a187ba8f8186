"""Linear system model and solution container."""
from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from .config import SolverConfiguration
from .linalg import (
    LinearSystemError,
    Matrix,
    TraceCallback,
    augment,
    copy_matrix,
    extract_solutions,
    is_row_canonical,
    residuals,
    row_reduce,
)
from .loader import load_matrix, validate_shape


@dataclass
class SystemSolution:
    original: Matrix
    reduced: Matrix
    solutions: List[float]
    residuals: List[float]
    canonical: bool
    label: str = ""

    @property
    def size(self) -> int:
        return len(self.original)

    @property
    def is_finite(self) -> bool:
        """Return True when no solution value is infinite or NaN."""
        return all(math.isfinite(value) for value in self.solutions)

    @property
    def max_residual(self) -> float:
        if not self.residuals:
            return 0.0
        return max(abs(value) for value in self.residuals)

    def solutions_as_dicts(self) -> List[Dict[str, Any]]:
        return [
            {"Variable": f"var{index + 1}", "Value": value}
            for index, value in enumerate(self.solutions)
        ]

    def residuals_as_dicts(self) -> List[Dict[str, Any]]:
        return [
            {"Equation": index + 1, "Residual": value}
            for index, value in enumerate(self.residuals)
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary describing the solve."""

        return {
            "label": self.label,
            "original": [list(row) for row in self.original],
            "reduced": [list(row) for row in self.reduced],
            "solutions": list(self.solutions),
            "residuals": list(self.residuals),
            "canonical": self.canonical,
            "summary": {
                "size": self.size,
                "max_residual": self.max_residual,
                "finite": self.is_finite,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SystemSolution":
        return cls(
            original=copy_matrix(data.get("original", [])),
            reduced=copy_matrix(data.get("reduced", [])),
            solutions=[float(value) for value in data.get("solutions", [])],
            residuals=[float(value) for value in data.get("residuals", [])],
            canonical=bool(data.get("canonical", False)),
            label=str(data.get("label", "")),
        )


@dataclass
class LinearSystem:
    """An N x N system of equations held as its augmented N x (N+1) matrix."""

    matrix: Matrix
    label: str = ""

    def __post_init__(self) -> None:
        self.matrix = copy_matrix(self.matrix)

    @classmethod
    def from_coefficients(
        cls, coefficients: Sequence[Sequence[float]], rhs: Sequence[float], label: str = ""
    ) -> "LinearSystem":
        return cls(matrix=augment(coefficients, rhs), label=label)

    @property
    def size(self) -> int:
        return len(self.matrix)

    def is_row_canonical(self, tolerance: float = 0.0) -> bool:
        return is_row_canonical(self.matrix, tolerance)

    def solve(
        self,
        config: Optional[SolverConfiguration] = None,
        trace: Optional[TraceCallback] = None,
    ) -> SystemSolution:
        """Reduce the system and read the solution vector off the last column.

        Shape problems raise :class:`~gaussjordan.loader.MatrixInputError`
        subclasses; a column without a pivot raises
        :class:`~gaussjordan.linalg.SingularMatrixError` unless the
        configuration asks for IEEE propagation.  Under the default policy a
        result containing infinities or NaNs (an elimination factor that
        overflowed) raises :class:`~gaussjordan.linalg.LinearSystemError`.
        """

        config = config or SolverConfiguration()
        validate_shape(self.matrix)

        reduced = row_reduce(
            self.matrix,
            tolerance=config.tolerance,
            on_singular=config.on_singular,
            trace=trace,
        )
        solutions = extract_solutions(
            reduced,
            require_canonical=config.require_canonical,
            tolerance=config.tolerance,
        )
        finite = all(math.isfinite(value) for value in solutions)
        if config.on_singular == "raise" and not finite:
            raise LinearSystemError("Elimination overflowed: the solution contains inf or NaN")
        return SystemSolution(
            original=copy_matrix(self.matrix),
            reduced=reduced,
            solutions=solutions,
            residuals=residuals(self.matrix, solutions),
            canonical=is_row_canonical(reduced, config.tolerance),
            label=self.label or config.label,
        )


def solve_file(
    path: Union[str, Path],
    config: Optional[SolverConfiguration] = None,
    trace: Optional[TraceCallback] = None,
) -> SystemSolution:
    """Load a comma-delimited matrix file and solve it."""

    system = LinearSystem(matrix=load_matrix(path), label=Path(path).name)
    return system.solve(config, trace=trace)


__all__ = ["LinearSystem", "SystemSolution", "solve_file"]
