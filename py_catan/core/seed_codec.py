"""
Seed strings and the shareable board state string.

A board is identified by a 6 character seed over ``[a-z0-9]`` plus the
constraint flag, serialized as ``"<seed>-<flag>"`` (for example
``"a1b2c3-1"``). The seed string is hashed into the 32-bit integer that
seeds the PRNG.
"""

from __future__ import annotations

import re
import secrets
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

SEED_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
SEED_LENGTH = 6
STATE_SEPARATOR = "-"

SEED_PATTERN = re.compile(r"[a-z0-9]{6}")
STATE_PATTERN = re.compile(r"([a-z0-9]{6})-([01])")


class InvalidFormat(ValueError):
    """Raised when a seed or state string does not follow the grammar."""


class BoardState(BaseModel):
    """Parsed form of a state string."""

    model_config = ConfigDict(frozen=True)

    seed: str = Field(description="6 character seed string")
    enforce_constraint: bool = Field(description="Whether token adjacency rules apply")


def _utf16_code_units(text: str) -> Iterator[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def seed_string_to_number(seed: str) -> int:
    """
    Hash a seed string into a signed 32-bit integer.

    Rolling ``hash * 31 + code`` over UTF-16 code units, wrapped to signed
    32-bit after every step so results agree with ``charCodeAt`` based
    implementations.
    """
    value = 0
    for code in _utf16_code_units(seed):
        value = (value * 31 + code) & 0xFFFFFFFF
        if value >= 0x80000000:
            value -= 0x100000000
    return value


def generate_seed_string() -> str:
    """Draw a fresh seed string from the OS entropy source. Not reproducible."""
    return "".join(secrets.choice(SEED_ALPHABET) for _ in range(SEED_LENGTH))


def is_valid_seed(seed: str) -> bool:
    return isinstance(seed, str) and SEED_PATTERN.fullmatch(seed) is not None


def parse_state(raw: str) -> BoardState:
    """
    Parse a ``"<seed>-<flag>"`` state string.

    Args:
        raw: State string, e.g. ``"a1b2c3-1"``

    Returns:
        BoardState with the seed and the constraint flag

    Raises:
        InvalidFormat: If ``raw`` does not match ``^[a-z0-9]{6}-[01]$``
    """
    match = STATE_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise InvalidFormat(f"Invalid board state string: {raw!r}")
    return BoardState(seed=match.group(1), enforce_constraint=match.group(2) == "1")


def format_state(seed: str, enforce_constraint: bool) -> str:
    """Build the canonical state string accepted by :func:`parse_state`."""
    if not is_valid_seed(seed):
        raise InvalidFormat(f"Invalid seed string: {seed!r}")
    flag = "1" if enforce_constraint else "0"
    return f"{seed}{STATE_SEPARATOR}{flag}"
