"""
Board generation.

Shuffles the resource and token pools with a seeded PRNG and lays the
tokens out, optionally under the adjacency rule. Every step draws from the
same PRNG, in a fixed order, so a seed always maps to the same board:

1. shuffle the 19 resources (18 draws)
2. shuffle the 18 tokens (17 draws)
3. place the tokens on the non-desert cells in board order, either directly
   or through the backtracking search
4. if the search fails, repeat from 1 with the continuing stream, up to
   ``max_attempts`` rounds
5. if every round fails, run one more unconstrained round on the same stream
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import structlog

from .adjacency import ADJACENCY_GRAPH, AdjacencyGraph
from .board import NUMBER_TOKENS, RESOURCE_POOL, Board, Cell, Resource
from .constraints import violates
from .mulberry32_prng import Mulberry32PRNG
from .token_placement import Rule, TokenPlacer
from ..utils.random import create_prng, shuffle

logger = structlog.get_logger()

MAX_ATTEMPTS = 1000


@dataclass(frozen=True)
class GenerationConfig:
    """Configuration for board generation."""

    enforce_constraint: bool = True
    max_attempts: int = MAX_ATTEMPTS

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")


class BoardGenerator:
    """
    Generates boards from a caller-owned PRNG.

    The PRNG keeps advancing across calls; construct a new one from the
    seed to replay a board.
    """

    def __init__(
        self,
        config: GenerationConfig,
        prng: Mulberry32PRNG,
        rule: Rule = violates,
        graph: AdjacencyGraph = ADJACENCY_GRAPH,
    ):
        """
        Initialize the board generator.

        Args:
            config: Generation configuration
            prng: Random source, consumed in place
            rule: Pairwise token rule applied when constraints are enforced
            graph: Adjacency graph the rule is checked on
        """
        self.config = config
        self.prng = prng
        self.rule = rule
        self.graph = graph

    def _shuffle_pools(self) -> Tuple[List[Resource], List[int]]:
        resources = shuffle(RESOURCE_POOL, self.prng)
        tokens = shuffle(NUMBER_TOKENS, self.prng)
        return resources, tokens

    @staticmethod
    def _non_desert_positions(resources: Sequence[Resource]) -> List[int]:
        desert_index = list(resources).index(Resource.DESERT)
        return [i for i in range(len(resources)) if i != desert_index]

    def _unconstrained_round(self) -> Tuple[List[Resource], Tuple[Optional[int], ...]]:
        resources, tokens = self._shuffle_pools()
        placed: List[Optional[int]] = [None] * len(resources)
        for position, token in zip(self._non_desert_positions(resources), tokens):
            placed[position] = token
        return resources, tuple(placed)

    def _constrained_round(self) -> Tuple[List[Resource], Optional[Tuple[Optional[int], ...]]]:
        resources, tokens = self._shuffle_pools()
        placer = TokenPlacer(self.graph, self.rule)
        placed = placer.solve(self._non_desert_positions(resources), tokens)
        return resources, placed

    def _build_board(
        self,
        resources: Sequence[Resource],
        tokens: Sequence[Optional[int]],
        attempts: int,
        fallback: bool = False,
        seed: Optional[str] = None,
        numeric_seed: Optional[int] = None,
    ) -> Board:
        cells = tuple(
            Cell(resource=resource, token=token) for resource, token in zip(resources, tokens)
        )
        return Board(
            cells=cells,
            numeric_seed=numeric_seed,
            seed=seed,
            enforce_constraint=self.config.enforce_constraint,
            attempts=attempts,
            fallback=fallback,
        )

    def generate(self, seed: Optional[str] = None) -> Board:
        """
        Generate a board.

        Never fails: when the constrained search does not succeed within
        ``max_attempts`` rounds, a warning is logged and an unconstrained
        board flagged with ``fallback=True`` is returned.

        Args:
            seed: Seed string recorded on the board, if it came from one

        Returns:
            Immutable Board; ``numeric_seed`` is set only when the PRNG had
            not been drawn from yet
        """
        numeric_seed = self.prng.seed if self.prng.call_count == 0 else None

        if not self.config.enforce_constraint:
            resources, tokens = self._unconstrained_round()
            return self._build_board(resources, tokens, attempts=1, seed=seed,
                                     numeric_seed=numeric_seed)

        for attempt in range(1, self.config.max_attempts + 1):
            resources, placed = self._constrained_round()
            if placed is not None:
                logger.info("Board generated", numeric_seed=self.prng.seed, attempts=attempt)
                return self._build_board(resources, placed, attempts=attempt, seed=seed,
                                         numeric_seed=numeric_seed)
            logger.debug("Token placement failed", numeric_seed=self.prng.seed, attempt=attempt)

        logger.warning(
            "Could not satisfy token constraints, returning unconstrained board",
            numeric_seed=self.prng.seed,
            attempts=self.config.max_attempts,
        )
        resources, tokens = self._unconstrained_round()
        return self._build_board(
            resources,
            tokens,
            attempts=self.config.max_attempts + 1,
            fallback=True,
            seed=seed,
            numeric_seed=numeric_seed,
        )


def generate_board(config: GenerationConfig, prng: Mulberry32PRNG) -> Board:
    """Generate a board, advancing ``prng``."""
    return BoardGenerator(config, prng).generate()


def generate_board_from_seed(
    seed: Union[str, int],
    enforce_constraint: bool = True,
    max_attempts: int = MAX_ATTEMPTS,
) -> Board:
    """
    Generate the board identified by a seed.

    Args:
        seed: Seed string (e.g. ``"a1b2c3"``) or 32-bit numeric seed
        enforce_constraint: Keep 6/8 and 2/12 tokens off adjacent cells
        max_attempts: Constrained rounds before falling back

    Returns:
        Immutable Board
    """
    config = GenerationConfig(enforce_constraint=enforce_constraint, max_attempts=max_attempts)
    generator = BoardGenerator(config, create_prng(seed))
    return generator.generate(seed=seed if isinstance(seed, str) else None)
