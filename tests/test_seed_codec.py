"""Tests for seed strings and board state strings."""

import pytest
from pydantic import ValidationError

from py_catan.core.seed_codec import (
    SEED_ALPHABET,
    BoardState,
    InvalidFormat,
    format_state,
    generate_seed_string,
    is_valid_seed,
    parse_state,
    seed_string_to_number,
)


class TestSeedStringToNumber:
    """Test the rolling seed hash."""

    @pytest.mark.parametrize("seed,expected", [
        ("a1b2c3", -1469716432),
        ("abcdef", -1424385949),
        ("zzzzzz", -685785664),
        ("000000", 1420005888),
    ])
    def test_reference_values(self, seed, expected):
        """Test values produced by the JavaScript hash."""
        assert seed_string_to_number(seed) == expected

    def test_empty_string(self):
        assert seed_string_to_number("") == 0

    def test_short_strings(self):
        """Test the hash * 31 + code recurrence on small inputs."""
        assert seed_string_to_number("a") == 97
        assert seed_string_to_number("ab") == 97 * 31 + 98

    def test_result_is_signed_32_bit(self):
        """Test that long inputs stay within the signed 32-bit range."""
        value = seed_string_to_number("x" * 500)
        assert -2**31 <= value < 2**31

    def test_non_ascii_uses_utf16_code_units(self):
        """Test that astral characters hash as two surrogate code units."""
        # U+1F332 is the surrogate pair D83C DF32
        expected = ((0xD83C * 31 + 0xDF32) + 2**31) % 2**32 - 2**31
        assert seed_string_to_number("\U0001F332") == expected

    def test_lone_surrogate(self):
        """Test that unpaired surrogates hash as their own code unit."""
        assert seed_string_to_number("\ud800") == 0xD800
        assert seed_string_to_number("a\udfff") == 97 * 31 + 0xDFFF


class TestGenerateSeedString:
    """Test fresh seed generation."""

    def test_shape(self):
        for _ in range(50):
            seed = generate_seed_string()
            assert len(seed) == 6
            assert all(char in SEED_ALPHABET for char in seed)
            assert is_valid_seed(seed)

    def test_seeds_vary(self):
        seeds = {generate_seed_string() for _ in range(50)}
        assert len(seeds) > 1


class TestStateStrings:
    """Test parsing and formatting of state strings."""

    def test_parse_constrained(self):
        state = parse_state("a1b2c3-1")
        assert state == BoardState(seed="a1b2c3", enforce_constraint=True)

    def test_parse_unconstrained(self):
        state = parse_state("zz0099-0")
        assert state.seed == "zz0099"
        assert state.enforce_constraint is False

    @pytest.mark.parametrize("raw", [
        "AB12C-1",      # uppercase
        "abcde-1",      # 5 character seed
        "abcdef-2",     # invalid flag
        "abcdef1",      # missing separator
        "abcdef_1",     # wrong separator
        "abcdefg-1",    # 7 character seed
        "abcdef-1\n",   # trailing newline
        "abcdef-",      # missing flag
        "",
    ])
    def test_parse_rejects_malformed(self, raw):
        with pytest.raises(InvalidFormat):
            parse_state(raw)

    def test_parse_rejects_non_string(self):
        with pytest.raises(InvalidFormat):
            parse_state(None)

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            parse_state("nope")

    def test_format(self):
        assert format_state("a1b2c3", True) == "a1b2c3-1"
        assert format_state("a1b2c3", False) == "a1b2c3-0"

    def test_format_rejects_bad_seed(self):
        with pytest.raises(InvalidFormat):
            format_state("ABCDEF", True)

    @pytest.mark.parametrize("seed", ["a1b2c3", "000000", "zzzzzz", "q9w8e7"])
    @pytest.mark.parametrize("flag", [True, False])
    def test_round_trip(self, seed, flag):
        state = parse_state(format_state(seed, flag))
        assert (state.seed, state.enforce_constraint) == (seed, flag)

    def test_round_trip_fresh_seeds(self):
        for _ in range(20):
            seed = generate_seed_string()
            assert parse_state(format_state(seed, True)).seed == seed

    def test_board_state_is_frozen(self):
        state = parse_state("a1b2c3-1")
        with pytest.raises(ValidationError):
            state.seed = "other1"
