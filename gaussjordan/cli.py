"""
Command-Line Interface for the Gauss-Jordan solver.

Usage:
    python solve_system.py [FILE] [OPTIONS]

Options:
    --example NAME      Solve a built-in reference system instead of a file
    --list-examples     List the built-in reference systems
    --config PATH       Load solver options from a JSON file
    --tolerance TOL     Tolerance for the row canonical form test (default: exact)
    --on-singular MODE  "raise" (default) or "propagate" (IEEE inf/NaN); aliases accepted
    --precision DIGITS  Significant digits in printed values
    --steps             Print every intermediate matrix
    --excel PATH        Write an Excel report
    --markdown          Print a Markdown summary
    --verbose           Print detailed progress
"""

import argparse
import sys
from typing import List, Optional

from .config import SolverConfiguration, normalize_singular_policy
from .examples import EXAMPLES, load_example
from .linalg import LinearSystemError, Matrix
from .loader import MatrixInputError, load_matrix
from .model import LinearSystem, SystemSolution
from .reporter import (
    SolutionReporter,
    format_matrix,
    format_solutions,
    generate_markdown_summary,
)

PROMPT = (
    "Enter the file name containing the N x (N+1) matrix representing an N x N system\n"
    "of equations (please include the .txt extension): "
)


def prompt_for_filename() -> str:
    """Ask the user for the matrix file, as the interactive solver always has."""
    try:
        filename = input(PROMPT).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        raise MatrixInputError("No file name given") from None
    if not filename:
        raise MatrixInputError("No file name given")
    return filename


def build_configuration(args: argparse.Namespace) -> SolverConfiguration:
    """Combine an optional JSON configuration with command-line overrides."""
    if args.config:
        config = SolverConfiguration.from_json(args.config)
    else:
        config = SolverConfiguration()

    overrides = config.to_dict()
    if args.tolerance is not None:
        overrides["tolerance"] = args.tolerance
    if args.on_singular is not None:
        overrides["on_singular"] = normalize_singular_policy(args.on_singular)
    if args.precision is not None:
        overrides["precision"] = args.precision
    return SolverConfiguration.from_dict(overrides)


def list_examples():
    """List available reference systems."""
    print("\nAvailable examples:")
    print("-" * 60)
    for name, factory in EXAMPLES.items():
        summary = (factory.__doc__ or "").strip().splitlines()[0]
        print(f"  {name:<18} {summary}")
    print()


def run_solver(
    matrix: Matrix,
    config: SolverConfiguration,
    label: str = "",
    show_steps: bool = False,
    excel_path: Optional[str] = None,
    markdown: bool = False,
    verbose: bool = False,
) -> SystemSolution:
    """
    Solve a loaded matrix and print the results.

    Args:
        matrix: Augmented N x (N+1) matrix
        config: Solver options
        label: Name shown in reports
        show_steps: Print each intermediate matrix
        excel_path: Optional path for an Excel report
        markdown: Print a Markdown summary after the result
        verbose: Print progress messages

    Returns:
        The solved system
    """
    precision = config.precision

    print("\n" + format_matrix(matrix, precision))

    trace = None
    if show_steps:
        def trace(description: str, snapshot: Matrix) -> None:
            print(f"\n  {description}:")
            print(format_matrix(snapshot, precision, indent="    "))

    system = LinearSystem(matrix=matrix, label=label)
    if verbose:
        print(f"\nReducing {system.size} x {system.size + 1} matrix "
              f"(tolerance={config.tolerance:g}, on_singular={config.on_singular})")

    solution = system.solve(config, trace=trace)

    if verbose:
        print("\nReduced matrix:")
        print(format_matrix(solution.reduced, precision))
        if not solution.canonical:
            print("  Warning: reduced matrix is not exactly in row canonical form")

    print("\nRESULT:")
    print(format_solutions(solution.solutions, precision))

    if verbose and solution.is_finite:
        print(f"\nMax |residual|: {solution.max_residual:.3g}")

    if markdown:
        print("\n" + generate_markdown_summary(solution, precision))

    if excel_path:
        reporter = SolutionReporter(excel_path)
        reporter.add_solution(solution)
        reporter.save(excel_path)
        print(f"\nReport saved to: {excel_path}")

    return solution


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve an N x N linear system by Gauss-Jordan elimination",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python solve_system.py system.txt                    # Solve a matrix file
  python solve_system.py                               # Prompt for the file name
  python solve_system.py --example three-variable      # Solve a built-in system
  python solve_system.py system.txt --steps            # Show every row operation
  python solve_system.py system.txt --excel out.xlsx   # Write an Excel report
        """
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="Text file with one comma-separated row per line"
    )
    parser.add_argument(
        "--example", "-e",
        choices=sorted(EXAMPLES),
        help="Solve a built-in reference system"
    )
    parser.add_argument(
        "--list-examples",
        action="store_true",
        help="List the built-in reference systems"
    )
    parser.add_argument(
        "--config", "-c",
        help="JSON file with solver options"
    )
    parser.add_argument(
        "--tolerance", "-t",
        type=float,
        help="Tolerance for the row canonical form test (default: exact comparison)"
    )
    parser.add_argument(
        "--on-singular",
        metavar="MODE",
        help="Behaviour when a column has no pivot: raise (default) or propagate; "
             "aliases such as error, nan and ieee are accepted"
    )
    parser.add_argument(
        "--precision", "-p",
        type=int,
        help="Significant digits in printed values (default: 6)"
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print every intermediate matrix"
    )
    parser.add_argument(
        "--excel", "-o",
        metavar="PATH",
        help="Write an Excel report to PATH"
    )
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Also output a Markdown summary to the console"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print detailed progress"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_examples:
        list_examples()
        return 0

    try:
        config = build_configuration(args)

        if args.example:
            matrix = load_example(args.example)
            label = args.example
        else:
            filename = args.file or prompt_for_filename()
            if args.verbose:
                print(f"Loading {filename}")
            matrix = load_matrix(filename)
            label = filename

        run_solver(
            matrix,
            config,
            label=config.label or label,
            show_steps=args.steps,
            excel_path=args.excel,
            markdown=args.markdown,
            verbose=args.verbose,
        )
    except (MatrixInputError, LinearSystemError, OSError, ValueError) as exc:
        print(f"\nERROR: {exc}\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
