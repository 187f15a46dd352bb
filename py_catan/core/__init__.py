"""
Core board generation functionality.
"""

from .mulberry32_prng import Mulberry32PRNG
from .seed_codec import BoardState, InvalidFormat, format_state, generate_seed_string, parse_state, seed_string_to_number
from .adjacency import ADJACENCY, ADJACENCY_GRAPH, AdjacencyGraph
from .constraints import find_violations, violates
from .board import Board, Cell, Resource, validate_standard_counts

__all__ = ['Mulberry32PRNG', 'BoardState', 'InvalidFormat', 'format_state', 'generate_seed_string',
           'parse_state', 'seed_string_to_number', 'ADJACENCY', 'ADJACENCY_GRAPH', 'AdjacencyGraph',
           'find_violations', 'violates', 'Board', 'Cell', 'Resource', 'validate_standard_counts']
