"""
Matrix Loader.

Reads augmented matrices from comma-delimited text.  Each line of the file is
one row of the matrix and each value within a row is separated by a comma:

    2,1,-1,8
    -3,-1,2,-11
    -2,1,2,-3

Integral and decimal values are both accepted.  Blank lines are ignored.
"""

from pathlib import Path
from typing import IO, Iterable, List, Union

from .linalg import Matrix

_Source = Union[str, Path, IO[str]]


class MatrixInputError(ValueError):
    """Raised when input cannot be turned into an N x (N+1) matrix."""


class EmptyMatrixError(MatrixInputError):
    """Raised when the input holds no rows of numbers."""


class MatrixShapeError(MatrixInputError):
    """Raised when the rows do not form an N x (N+1) matrix."""


class MatrixFormatError(MatrixInputError):
    """
    Raised when a value cannot be parsed as a number.

    Attributes:
        line: 1-based line number of the offending row
        value: The raw text that failed to parse
    """

    def __init__(self, line: int, value: str):
        super().__init__(f"Line {line}: cannot parse {value!r} as a number")
        self.line = line
        self.value = value


def parse_row(text: str, line: int = 1) -> List[float]:
    """Parse one comma-separated row of numbers."""
    row: List[float] = []
    for item in text.split(","):
        token = item.strip()
        try:
            row.append(float(token))
        except ValueError:
            raise MatrixFormatError(line, token) from None
    return row


def parse_matrix(lines: Union[str, Iterable[str]]) -> Matrix:
    """
    Parse comma-delimited rows into a matrix.

    Args:
        lines: Either the full text or an iterable of lines

    Returns:
        List of rows, one per non-blank line
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    matrix: Matrix = []
    for number, text in enumerate(lines, start=1):
        if not text.strip():
            continue
        matrix.append(parse_row(text, number))
    return matrix


def load_matrix(source: _Source) -> Matrix:
    """
    Load a matrix from a file path or a file-like object.

    Raises:
        OSError: If the file cannot be opened
        MatrixFormatError: If a value is not numeric
    """
    if hasattr(source, "read"):
        return parse_matrix(source.read())  # type: ignore[union-attr]

    path = Path(source)
    with path.open("r", encoding="utf-8") as handle:
        return parse_matrix(handle)


def validate_shape(matrix: Matrix) -> None:
    """
    Check that ``matrix`` is a non-empty N x (N+1) matrix.

    Raises:
        EmptyMatrixError: If there are zero rows
        MatrixShapeError: If rows differ in length or are not N+1 long
    """
    if not matrix:
        raise EmptyMatrixError("There were zero rows of numbers in the input")

    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise MatrixShapeError(
            f"Rows have inconsistent lengths ({', '.join(str(w) for w in sorted(widths))})"
        )

    width = widths.pop()
    if width != len(matrix) + 1:
        raise MatrixShapeError(
            f"The provided matrix is {len(matrix)} x {width}, "
            f"not an N x (N+1) matrix"
        )


__all__ = [
    "EmptyMatrixError",
    "MatrixFormatError",
    "MatrixInputError",
    "MatrixShapeError",
    "load_matrix",
    "parse_matrix",
    "parse_row",
    "validate_shape",
]
