"""
Fixed adjacency graph of the 19-cell board.

Cells are numbered row-major over rows of 3, 4, 5, 4 and 3 hexes:

        0   1   2
      3   4   5   6
    7   8   9  10  11
     12  13  14  15
       16  17  18

The neighbor table is a constant shared with the JavaScript generator and
must not be re-derived from hex geometry; boards produced for a seed depend
on it exactly as written.
"""

from typing import Tuple

import numpy as np

ROW_SIZES: Tuple[int, ...] = (3, 4, 5, 4, 3)
CELL_COUNT = sum(ROW_SIZES)

ADJACENCY: Tuple[Tuple[int, ...], ...] = (
    (1, 3, 4),  # 0
    (0, 2, 4, 5),  # 1
    (1, 5, 6),  # 2
    (0, 4, 7, 8),  # 3
    (0, 1, 3, 5, 8, 9),  # 4
    (1, 2, 4, 6, 9, 10),  # 5
    (2, 5, 10, 11),  # 6
    (3, 8, 12),  # 7
    (3, 4, 7, 9, 12, 13),  # 8
    (4, 5, 8, 10, 13, 14),  # 9
    (5, 6, 9, 11, 14, 15),  # 10
    (6, 10, 15, 16),  # 11
    (7, 8, 13, 17),  # 12
    (8, 9, 12, 14, 17, 18),  # 13
    (9, 10, 13, 15, 18),  # 14
    (10, 11, 14, 16, 18),  # 15
    (11, 15),  # 16
    (12, 13, 18),  # 17
    (13, 14, 15, 17),  # 18
)


class AdjacencyGraph:
    """Read-only view over a neighbor table."""

    def __init__(self, table: Tuple[Tuple[int, ...], ...] = ADJACENCY,
                 row_sizes: Tuple[int, ...] = ROW_SIZES):
        self._table = tuple(tuple(neighbors) for neighbors in table)
        self.row_sizes = tuple(row_sizes)
        self.size = len(self._table)

    def __len__(self) -> int:
        return self.size

    def neighbors(self, index: int) -> Tuple[int, ...]:
        """Return the neighbor indices of a cell."""
        return self._table[index]

    def row_of(self, index: int) -> int:
        """Return the board row (0-4) a cell sits in."""
        if not 0 <= index < self.size:
            raise IndexError(f"Cell index out of range: {index}")
        start = 0
        for row, row_size in enumerate(self.row_sizes):
            if index < start + row_size:
                return row
            start += row_size
        raise IndexError(f"Cell index out of range: {index}")

    def to_matrix(self) -> np.ndarray:
        """Symmetric boolean adjacency matrix of shape (size, size)."""
        matrix = np.zeros((self.size, self.size), dtype=bool)
        for p, neighbors in enumerate(self._table):
            matrix[p, list(neighbors)] = True
        return matrix | matrix.T


ADJACENCY_GRAPH = AdjacencyGraph()
