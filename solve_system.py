#!/usr/bin/env python
"""
Gauss-Jordan Solver Entry Point.

Solve an N x N system of linear equations stored as an N x (N+1) matrix in a
comma-delimited text file.

Usage:
    python solve_system.py system.txt                  # Solve a matrix file
    python solve_system.py                             # Prompt for the file name
    python solve_system.py --example three-variable    # Solve a built-in system
    python solve_system.py --list-examples             # List built-in systems

For more options:
    python solve_system.py --help
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gaussjordan.cli import main

if __name__ == "__main__":
    sys.exit(main())
