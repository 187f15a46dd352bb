"""Tests for board statistics."""

from py_catan.core.board import Resource
from py_catan.core.board_generator import generate_board_from_seed
from py_catan.core.board_statistics import summarize_board


class TestSummarizeBoard:
    """Test pip and violation summaries."""

    def test_golden_constrained(self):
        stats = summarize_board(generate_board_from_seed("a1b2c3", enforce_constraint=True))

        assert stats.total_pips == 58
        assert stats.resource_pips == {
            Resource.FOREST: 8,
            Resource.PASTURE: 17,
            Resource.FIELD: 13,
            Resource.HILL: 8,
            Resource.MOUNTAIN: 12,
            Resource.DESERT: 0,
        }
        assert stats.desert_index == 18
        assert stats.red_token_cells == [1, 9, 12, 15]
        assert stats.violations == []

    def test_golden_unconstrained(self):
        stats = summarize_board(generate_board_from_seed("a1b2c3", enforce_constraint=False))
        assert stats.violations == [(9, 14)]
        assert stats.red_token_cells == [1, 9, 12, 14]

    def test_pips_per_cell(self):
        board = generate_board_from_seed("zzzzzz")
        stats = summarize_board(board)
        assert stats.pips == [cell.pips for cell in board.cells]
        assert stats.pips[stats.desert_index] == 0
        assert sum(stats.resource_pips.values()) == stats.total_pips == 58
