"""
Production statistics for a generated board.

Pips are the number of two-dice combinations that roll a token (6 and 8
have five, 2 and 12 have one), the same dots printed under each token.
"""

from typing import Dict, List, Tuple

import numpy as np
from pydantic import BaseModel, Field

from .adjacency import ADJACENCY_GRAPH, AdjacencyGraph
from .board import Board, Resource
from .constraints import RED_TOKENS, find_violations


class BoardStatistics(BaseModel):
    """Summary of how a board produces resources."""

    pips: List[int] = Field(description="Pips per cell, in board order")
    resource_pips: Dict[Resource, int] = Field(description="Total pips per resource")
    total_pips: int
    red_token_cells: List[int] = Field(description="Cells holding a 6 or an 8")
    desert_index: int
    violations: List[Tuple[int, int]] = Field(description="Adjacent pairs breaking the token rule")


def summarize_board(board: Board, graph: AdjacencyGraph = ADJACENCY_GRAPH) -> BoardStatistics:
    """Compute pip totals and rule violations for a board."""
    tokens = np.array([0 if token is None else token for token in board.tokens])
    pips = np.where(tokens > 0, 6 - np.abs(7 - tokens), 0)

    resource_names = [resource.value for resource in board.resources]
    resource_pips = {
        resource: int(pips[np.array(resource_names) == resource.value].sum())
        for resource in Resource
    }
    red_cells = np.flatnonzero(np.isin(tokens, sorted(RED_TOKENS)))

    return BoardStatistics(
        pips=[int(p) for p in pips],
        resource_pips=resource_pips,
        total_pips=int(pips.sum()),
        red_token_cells=[int(i) for i in red_cells],
        desert_index=board.desert_index,
        violations=find_violations(board.tokens, graph),
    )
