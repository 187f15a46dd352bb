#!/usr/bin/env python3
"""
Print generated boards row by row.

Usage:
    python generate_sample_boards.py [seed] [0|1]

If no seed is provided a fresh one is drawn; the flag defaults to 1
(token adjacency rule enforced).
"""

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent))

from py_catan.core.adjacency import ADJACENCY_GRAPH, ROW_SIZES
from py_catan.core.board_generator import generate_board_from_seed
from py_catan.core.board_statistics import summarize_board
from py_catan.core.seed_codec import generate_seed_string, is_valid_seed


def format_board(board):
    """Render cells as indented text rows, e.g. ``field:8``."""
    rows = [[] for _ in ROW_SIZES]
    for index, cell in enumerate(board.cells):
        token = cell.token if cell.token is not None else "-"
        rows[ADJACENCY_GRAPH.row_of(index)].append(f"{cell.resource.value[:4]}:{token:>2}")

    lines = []
    widest = max(ROW_SIZES)
    for labels in rows:
        indent = " " * (widest - len(labels)) * 5
        lines.append(indent + "  ".join(f"{label:<8}" for label in labels))
    return "\n".join(lines)


def main():
    seed = sys.argv[1] if len(sys.argv) > 1 else generate_seed_string()
    enforce = (sys.argv[2] != "0") if len(sys.argv) > 2 else True

    if not is_valid_seed(seed):
        print(f"Invalid seed {seed!r}: expected 6 characters from a-z0-9")
        sys.exit(1)

    board = generate_board_from_seed(seed, enforce_constraint=enforce)
    stats = summarize_board(board)

    print(f"\nBoard {board.state} (numeric seed {board.numeric_seed})")
    print(f"  Attempts: {board.attempts}{' (fallback)' if board.fallback else ''}")
    print()
    print(format_board(board))
    print()
    print("  Pips per resource:")
    for resource, pips in stats.resource_pips.items():
        print(f"    {resource.value:<9} {pips}")
    print(f"  Constraint violations: {len(stats.violations)}")


if __name__ == "__main__":
    main()
