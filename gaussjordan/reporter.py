"""
Report Generation for Solved Systems.

Provides:
- Plain-text matrix and solution formatting for the console
- Markdown summaries
- Excel workbooks (Summary, Input, Reduced, Solution sheets)
"""

import io
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

try:
    import xlsxwriter
    HAS_XLSXWRITER = True
except ImportError:
    HAS_XLSXWRITER = False

from .model import SystemSolution


def format_value(value: float, precision: int = 6) -> str:
    """Format a number with ``precision`` significant digits."""
    return f"{value:.{precision}g}"


def format_matrix(
    matrix: Sequence[Sequence[float]],
    precision: int = 6,
    indent: str = "  ",
) -> str:
    """
    Render a matrix as right-aligned text rows.

    The last column is set apart with a bar so the augmented right-hand side
    is easy to spot.
    """
    if not matrix:
        return ""

    cells = [[format_value(value, precision) for value in row] for row in matrix]
    width = max(len(cell) for row in cells for cell in row)

    lines = []
    for row in cells:
        padded = [cell.rjust(width) for cell in row]
        if len(padded) > 1:
            text = " ".join(padded[:-1]) + " | " + padded[-1]
        else:
            text = padded[0]
        lines.append(indent + text)
    return "\n".join(lines)


def format_solutions(solutions: Sequence[float], precision: int = 6, indent: str = "  ") -> str:
    """Render the solution vector as ``varK = value`` lines."""
    return "\n".join(
        f"{indent}var{index + 1} = {format_value(value, precision)}"
        for index, value in enumerate(solutions)
    )


def matrix_to_frame(matrix: Sequence[Sequence[float]]) -> pd.DataFrame:
    """Return a DataFrame with one column per variable plus ``rhs``."""
    if not matrix:
        return pd.DataFrame()
    width = len(matrix[0])
    columns = [f"var{index + 1}" for index in range(width - 1)] + ["rhs"]
    frame = pd.DataFrame([list(row) for row in matrix], columns=columns)
    frame.index = [f"eq{index + 1}" for index in range(len(matrix))]
    return frame


def solution_to_frame(solution: SystemSolution) -> pd.DataFrame:
    """Return solutions and residuals side by side."""
    frame = pd.DataFrame(solution.solutions_as_dicts())
    if solution.residuals:
        frame["Residual"] = [entry["Residual"] for entry in solution.residuals_as_dicts()]
    return frame


class SolutionReporter:
    """
    Generates Excel reports for solved systems.

    Usage:
        reporter = SolutionReporter()
        reporter.add_solution(solution)
        reporter.save("reports/solution.xlsx")
    """

    def __init__(self, output_path: Optional[str] = None):
        """
        Initialize the reporter.

        Args:
            output_path: Path to save the Excel file (optional, can set later)
        """
        if not HAS_XLSXWRITER:
            raise ImportError("xlsxwriter is required for Excel reports. Install with: pip install xlsxwriter")

        self.output_path = Path(output_path) if output_path else None
        self.solutions: List[SystemSolution] = []

    def add_solution(self, solution: SystemSolution):
        self.solutions.append(solution)

    def generate(self, output_path: Optional[str] = None) -> bytes:
        """
        Generate the Excel workbook.

        Args:
            output_path: Optional path to save file (overrides constructor path)

        Returns:
            Excel file as bytes
        """
        if output_path:
            self.output_path = Path(output_path)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
            workbook = writer.book
            formats = self._create_formats(workbook)
            self._write_summary_sheet(workbook, formats)

            for index, solution in enumerate(self.solutions, start=1):
                suffix = f" {index}" if len(self.solutions) > 1 else ""
                matrix_to_frame(solution.original).to_excel(writer, sheet_name=f"Input{suffix}")
                matrix_to_frame(solution.reduced).to_excel(writer, sheet_name=f"Reduced{suffix}")
                solution_to_frame(solution).to_excel(
                    writer, sheet_name=f"Solution{suffix}", index=False
                )
                for name in ("Input", "Reduced", "Solution"):
                    writer.sheets[f"{name}{suffix}"].set_column(0, solution.size + 1, 14, formats["num"])

        output.seek(0)

        if self.output_path:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, "wb") as f:
                f.write(output.getvalue())

        return output.getvalue()

    def save(self, output_path: str):
        self.generate(output_path)

    def _create_formats(self, workbook) -> Dict[str, Any]:
        """Create all cell formats for the workbook."""
        return {
            "header_main": workbook.add_format({
                'bold': True, 'font_size': 14, 'bg_color': '#1F4E79',
                'font_color': 'white', 'border': 1, 'align': 'center', 'valign': 'vcenter'
            }),
            "header": workbook.add_format({
                'bold': True, 'bg_color': '#D9E1F2', 'border': 1,
                'align': 'center', 'valign': 'vcenter', 'text_wrap': True
            }),
            "pass": workbook.add_format({
                'bg_color': '#C6EFCE', 'font_color': '#006100', 'border': 1, 'align': 'center'
            }),
            "fail": workbook.add_format({
                'bg_color': '#FFC7CE', 'font_color': '#9C0006', 'border': 1, 'align': 'center'
            }),
            "num": workbook.add_format({'num_format': '0.000000'}),
            "sci": workbook.add_format({'num_format': '0.00E+00', 'border': 1}),
            "text": workbook.add_format({'border': 1, 'align': 'left'}),
        }

    def _write_summary_sheet(self, workbook, formats: Dict):
        """Write the summary sheet with one line per solved system."""
        ws = workbook.add_worksheet("Summary")

        ws.merge_range(0, 0, 0, 4, "Gauss-Jordan Solution Report", formats["header_main"])
        ws.write(1, 0, f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
        ws.write(2, 0, f"Total Systems: {len(self.solutions)}")

        headers = ["System", "Size", "Canonical", "Finite", "Max |Residual|"]
        row = 4
        for col, header in enumerate(headers):
            ws.write(row, col, header, formats["header"])

        for index, solution in enumerate(self.solutions, start=1):
            row += 1
            ws.write(row, 0, solution.label or f"System {index}", formats["text"])
            ws.write(row, 1, f"{solution.size} x {solution.size + 1}", formats["text"])
            ws.write(row, 2, "YES" if solution.canonical else "NO",
                     formats["pass"] if solution.canonical else formats["fail"])
            ws.write(row, 3, "YES" if solution.is_finite else "NO",
                     formats["pass"] if solution.is_finite else formats["fail"])
            if solution.is_finite:
                ws.write_number(row, 4, solution.max_residual, formats["sci"])
            else:
                ws.write(row, 4, "n/a", formats["text"])

        ws.set_column(0, 0, 24)
        ws.set_column(1, 4, 16)


def generate_markdown_summary(solution: SystemSolution, precision: int = 6) -> str:
    """
    Generate a Markdown summary of a solved system.

    Args:
        solution: The solved system
        precision: Significant digits for numbers

    Returns:
        Markdown formatted string
    """
    title = solution.label or "Linear System"
    lines = [
        f"# {title}",
        "",
        f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        f"**Size:** {solution.size} x {solution.size + 1}",
        f"**Row canonical:** {'yes' if solution.canonical else 'no'}",
        "",
        "## Solution",
        "",
        "| Variable | Value | Residual |",
        "|----------|-------|----------|",
    ]

    for index, value in enumerate(solution.solutions):
        residual = solution.residuals[index] if index < len(solution.residuals) else float("nan")
        lines.append(
            f"| var{index + 1} | {format_value(value, precision)} | {format_value(residual, 3)} |"
        )

    return "\n".join(lines)


__all__ = [
    "HAS_XLSXWRITER",
    "SolutionReporter",
    "format_matrix",
    "format_solutions",
    "format_value",
    "generate_markdown_summary",
    "matrix_to_frame",
    "solution_to_frame",
]
