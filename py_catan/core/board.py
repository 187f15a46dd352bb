"""
Board data model.

A board is an immutable sequence of 19 cells laid out on the fixed
adjacency graph. Cells carry a resource and, except for the desert, a
number token.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .adjacency import CELL_COUNT
from .seed_codec import format_state, is_valid_seed


class Resource(str, Enum):
    """Resource kinds a cell can produce."""

    FOREST = "forest"
    PASTURE = "pasture"
    FIELD = "field"
    HILL = "hill"
    MOUNTAIN = "mountain"
    DESERT = "desert"


RESOURCE_COUNTS: Dict[Resource, int] = {
    Resource.FOREST: 4,
    Resource.PASTURE: 4,
    Resource.FIELD: 4,
    Resource.HILL: 3,
    Resource.MOUNTAIN: 3,
    Resource.DESERT: 1,
}

# Shuffle input; the board produced for a seed depends on this order.
RESOURCE_POOL: Tuple[Resource, ...] = tuple(
    resource for resource, count in RESOURCE_COUNTS.items() for _ in range(count)
)

NUMBER_TOKENS: Tuple[int, ...] = (2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12)
VALID_TOKENS = frozenset(NUMBER_TOKENS)


def token_pips(token: Optional[int]) -> int:
    """Number of dice combinations (out of 36) that roll ``token``."""
    if token is None:
        return 0
    return 6 - abs(7 - token)


class Cell(BaseModel):
    """One board position."""

    model_config = ConfigDict(frozen=True)

    resource: Resource = Field(description="Resource produced by the cell")
    token: Optional[int] = Field(default=None, description="Number token, None for the desert")

    @field_validator("token")
    @classmethod
    def _check_token(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value not in VALID_TOKENS:
            raise ValueError(f"Invalid number token: {value}")
        return value

    @model_validator(mode="after")
    def _check_desert(self) -> "Cell":
        if self.resource is Resource.DESERT and self.token is not None:
            raise ValueError("Desert cells cannot carry a number token")
        return self

    @property
    def pips(self) -> int:
        return token_pips(self.token)


class Board(BaseModel):
    """A generated board and the inputs that reproduce it."""

    model_config = ConfigDict(frozen=True)

    cells: Tuple[Cell, ...] = Field(description="Cells in row-major order")
    numeric_seed: Optional[int] = Field(default=None, description="32-bit PRNG seed")
    seed: Optional[str] = Field(default=None, description="Seed string the board came from")
    enforce_constraint: bool = Field(default=False, description="Whether the token rule was requested")
    attempts: int = Field(default=1, ge=1, description="Shuffle rounds consumed, fallback included")
    fallback: bool = Field(default=False, description="Constraint budget exhausted, tokens unconstrained")

    @field_validator("cells")
    @classmethod
    def _check_cell_count(cls, value: Tuple[Cell, ...]) -> Tuple[Cell, ...]:
        if len(value) != CELL_COUNT:
            raise ValueError(f"A board has {CELL_COUNT} cells, got {len(value)}")
        return value

    @property
    def resources(self) -> Tuple[Resource, ...]:
        return tuple(cell.resource for cell in self.cells)

    @property
    def tokens(self) -> Tuple[Optional[int], ...]:
        return tuple(cell.token for cell in self.cells)

    @property
    def desert_index(self) -> int:
        return self.resources.index(Resource.DESERT)

    @property
    def constrained(self) -> bool:
        """True when the token rule is guaranteed to hold on this board."""
        return self.enforce_constraint and not self.fallback

    @property
    def state(self) -> Optional[str]:
        """Shareable state string, if the board came from a valid seed string."""
        if self.seed is None or not is_valid_seed(self.seed):
            return None
        return format_state(self.seed, self.enforce_constraint)


def validate_standard_counts(board: Board) -> bool:
    """Check the resource and token distribution of a board."""
    numbers: List[int] = []
    for cell in board.cells:
        if cell.resource is Resource.DESERT:
            if cell.token is not None:
                return False
        elif cell.token is None:
            return False
        else:
            numbers.append(cell.token)

    if Counter(board.resources) != Counter(RESOURCE_COUNTS):
        return False

    return sorted(numbers) == sorted(NUMBER_TOKENS)
