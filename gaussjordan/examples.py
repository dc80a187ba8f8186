"""Reference linear systems."""
from __future__ import annotations

from typing import Callable, Dict, List

from .linalg import Matrix


def three_variable_example() -> Matrix:
    """Return the classic 3 x 3 system with solution x=2, y=3, z=-1."""

    return [
        [2.0, 1.0, -1.0, 8.0],
        [-3.0, -1.0, 2.0, -11.0],
        [-2.0, 1.0, 2.0, -3.0],
    ]


def single_equation_example() -> Matrix:
    """Return 2x = 4."""

    return [[2.0, 4.0]]


def pre_reduced_example() -> Matrix:
    """Return a 2 x 3 matrix already in row canonical form (x=5, y=7)."""

    return [
        [1.0, 0.0, 5.0],
        [0.0, 1.0, 7.0],
    ]


def zero_leading_pivot_example() -> Matrix:
    """Return a system whose first pivot is zero, forcing a row swap (x=1, y=2, z=3)."""

    return [
        [0.0, 2.0, 1.0, 7.0],
        [1.0, 1.0, 1.0, 6.0],
        [2.0, 1.0, -1.0, 1.0],
    ]


def four_variable_example() -> Matrix:
    """Return a 4 x 4 system with solution (1, -2, 3, 0.5)."""

    return [
        [4.0, -1.0, 0.0, 2.0, 7.0],
        [1.0, 5.0, -2.0, 0.0, -15.0],
        [0.0, 2.0, 6.0, -1.0, 13.5],
        [3.0, 0.0, 1.0, 8.0, 10.0],
    ]


def rounding_drift_example() -> Matrix:
    """Return a 2 x 2 system (x=1, y=1) that reduces with a rounding residue.

    Eliminating with the factor -1/49 leaves 49 * (1/49) != 1 in floating
    point, so the reduced coefficient block is only approximately the identity.
    """

    return [
        [1.0, 0.0, 1.0],
        [49.0, 1.0, 50.0],
    ]


def dependent_rows_example() -> Matrix:
    """Return a singular system whose second equation is twice the first."""

    return [
        [1.0, 2.0, 3.0],
        [2.0, 4.0, 6.0],
    ]


EXAMPLES: Dict[str, Callable[[], Matrix]] = {
    "three-variable": three_variable_example,
    "single-equation": single_equation_example,
    "pre-reduced": pre_reduced_example,
    "zero-pivot": zero_leading_pivot_example,
    "four-variable": four_variable_example,
    "dependent-rows": dependent_rows_example,
    "rounding-drift": rounding_drift_example,
}


def example_names() -> List[str]:
    return list(EXAMPLES)


def load_example(name: str) -> Matrix:
    """Return a fresh copy of the named reference system."""

    try:
        factory = EXAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown example {name!r}; choose from {', '.join(EXAMPLES)}") from None
    return factory()


__all__ = [
    "EXAMPLES",
    "dependent_rows_example",
    "example_names",
    "four_variable_example",
    "load_example",
    "pre_reduced_example",
    "rounding_drift_example",
    "single_equation_example",
    "three_variable_example",
    "zero_leading_pivot_example",
]
