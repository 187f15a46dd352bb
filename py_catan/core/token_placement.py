"""
Backtracking placement of number tokens under the adjacency rule.

The search is a plain depth-first walk over the positions in the order
given. Each position tries the remaining tokens in their current (already
shuffled) order, so the outcome is fully determined by the shuffles that
produced the inputs. Depth is bounded by the number of positions (18).
"""

from typing import Callable, List, Optional, Sequence, Tuple

from .adjacency import ADJACENCY_GRAPH, AdjacencyGraph
from .constraints import violates

Rule = Callable[[Optional[int], Optional[int]], bool]


class TokenPlacer:
    """
    Solver holding the working buffer of a placement.

    The buffer is reset by every ``solve`` call and only ever read through
    the tuple it returns.
    """

    def __init__(self, graph: AdjacencyGraph = ADJACENCY_GRAPH, rule: Rule = violates):
        self.graph = graph
        self.rule = rule
        self._tokens: List[Optional[int]] = [None] * len(graph)
        self.placements_tried = 0

    def _is_admissible(self, position: int, token: int) -> bool:
        for neighbor in self.graph.neighbors(position):
            placed = self._tokens[neighbor]
            if placed is not None and self.rule(token, placed):
                return False
        return True

    def _place(self, positions: Sequence[int], tokens: Sequence[int]) -> bool:
        if not positions:
            return True

        position = positions[0]
        remaining_positions = positions[1:]

        for i, token in enumerate(tokens):
            if not self._is_admissible(position, token):
                continue
            self.placements_tried += 1
            self._tokens[position] = token
            remaining_tokens = list(tokens[:i]) + list(tokens[i + 1:])
            if self._place(remaining_positions, remaining_tokens):
                return True
            self._tokens[position] = None

        return False

    def solve(self, positions: Sequence[int], tokens: Sequence[int]) -> Optional[Tuple[Optional[int], ...]]:
        """
        Assign every token to a position without breaking the rule.

        Args:
            positions: Cell indices to fill, in search order
            tokens: Tokens to distribute, in preference order

        Returns:
            Tokens per cell (None for cells not in ``positions``), or None
            if no assignment exists
        """
        if len(positions) != len(tokens):
            raise ValueError(
                f"Cannot place {len(tokens)} tokens on {len(positions)} positions"
            )
        self._tokens = [None] * len(self.graph)
        self.placements_tried = 0
        if not self._place(list(positions), list(tokens)):
            return None
        return tuple(self._tokens)


def place_tokens(
    positions: Sequence[int],
    tokens: Sequence[int],
    graph: AdjacencyGraph = ADJACENCY_GRAPH,
    rule: Rule = violates,
) -> Optional[Tuple[Optional[int], ...]]:
    """Run a fresh TokenPlacer; see :meth:`TokenPlacer.solve`."""
    return TokenPlacer(graph, rule).solve(positions, tokens)
