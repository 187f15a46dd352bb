"""
py-catan: seeded 19-cell resource board generator.
"""

from .core import Board, Cell, InvalidFormat, Resource, format_state, generate_seed_string, parse_state
from .core.board_generator import GenerationConfig, generate_board, generate_board_from_seed

__version__ = "0.1.0"

__all__ = ['Board', 'Cell', 'InvalidFormat', 'Resource', 'format_state', 'generate_seed_string',
           'parse_state', 'GenerationConfig', 'generate_board', 'generate_board_from_seed']
