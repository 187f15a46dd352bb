"""
Token adjacency rule.

Two token groups may not touch: the red tokens 6 and 8, and the rare
tokens 2 and 12. Pairs inside a group are forbidden too, so 6-6 and 12-12
are violations as well as 6-8 and 2-12.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .adjacency import ADJACENCY_GRAPH, AdjacencyGraph

RED_TOKENS = frozenset({6, 8})
EXTREME_TOKENS = frozenset({2, 12})
EXCLUSIVE_GROUPS = (RED_TOKENS, EXTREME_TOKENS)


def violates(a: Optional[int], b: Optional[int]) -> bool:
    """Return True if tokens ``a`` and ``b`` may not sit on adjacent cells."""
    if a is None or b is None:
        return False
    return any(a in group and b in group for group in EXCLUSIVE_GROUPS)


def find_violations(
    tokens: Sequence[Optional[int]], graph: AdjacencyGraph = ADJACENCY_GRAPH
) -> List[Tuple[int, int]]:
    """
    List adjacent cell pairs whose tokens break the rule.

    Args:
        tokens: One token (or None) per cell, in board order
        graph: Adjacency graph the tokens are laid out on

    Returns:
        Sorted ``(p, q)`` pairs with ``p < q``
    """
    if len(tokens) != len(graph):
        raise ValueError(f"Expected {len(graph)} tokens, got {len(tokens)}")

    values = np.array([0 if token is None else token for token in tokens])
    conflicts = np.zeros((len(graph), len(graph)), dtype=bool)
    for group in EXCLUSIVE_GROUPS:
        members = np.isin(values, sorted(group))
        conflicts |= np.outer(members, members)

    conflicts &= graph.to_matrix()
    pairs = np.argwhere(np.triu(conflicts, k=1))
    return [(int(p), int(q)) for p, q in pairs]
