"""FastAPI main application."""

import logging
from typing import List, Optional

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..config import settings
from ..core.board import Board, Resource
from ..core.board_generator import generate_board_from_seed
from ..core.board_statistics import BoardStatistics, summarize_board
from ..core.seed_codec import (
    BoardState,
    InvalidFormat,
    format_state,
    generate_seed_string,
    parse_state,
)

# Configure logging
logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Catan Board Generator API",
    description="Seeded 19-cell board generation with shareable state strings",
    version="0.1.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class BoardRequest(BaseModel):
    """Request to generate a board."""

    seed: Optional[str] = Field(
        None, pattern=r"^[a-z0-9]{6}$", description="Seed string; a fresh one is drawn when omitted"
    )
    enforce_constraint: Optional[bool] = Field(
        None, description="Keep 6/8 and 2/12 apart (defaults to the server setting)"
    )


class SeedResponse(BaseModel):
    """A freshly drawn seed."""

    seed: str
    state: str


class CellResponse(BaseModel):
    """One cell of a generated board."""

    index: int
    resource: Resource
    token: Optional[int]
    pips: int


class BoardResponse(BaseModel):
    """A generated board."""

    seed: str
    state: str
    numeric_seed: int
    enforce_constraint: bool
    constrained: bool
    fallback: bool
    attempts: int
    cells: List[CellResponse]


class BoardStatisticsResponse(BaseModel):
    """Production statistics of a board."""

    state: str
    statistics: BoardStatistics


def _board_response(board: Board) -> BoardResponse:
    return BoardResponse(
        seed=board.seed,
        state=board.state,
        numeric_seed=board.numeric_seed,
        enforce_constraint=board.enforce_constraint,
        constrained=board.constrained,
        fallback=board.fallback,
        attempts=board.attempts,
        cells=[
            CellResponse(index=i, resource=cell.resource, token=cell.token, pips=cell.pips)
            for i, cell in enumerate(board.cells)
        ],
    )


def _generate(state: BoardState) -> Board:
    return generate_board_from_seed(
        state.seed,
        enforce_constraint=state.enforce_constraint,
        max_attempts=settings.max_generation_attempts,
    )


def _fresh_state(enforce_constraint: Optional[bool] = None) -> BoardState:
    if enforce_constraint is None:
        enforce_constraint = settings.default_enforce_constraint
    return BoardState(seed=generate_seed_string(), enforce_constraint=enforce_constraint)


# Event handlers
@app.on_event("startup")
async def startup_event():
    """Log startup."""
    logger.info("Starting Catan Board Generator API")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    logger.info("Shutting down Catan Board Generator API")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Catan Board Generator API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/seeds/new", response_model=SeedResponse)
def new_seed():
    """Draw a fresh seed with the default constraint flag."""
    state = _fresh_state()
    return SeedResponse(seed=state.seed, state=format_state(state.seed, state.enforce_constraint))


@app.get("/boards", response_model=BoardResponse)
def get_board(state: Optional[str] = None):
    """
    Hydrate a board from a state string such as ``a1b2c3-1``.

    A missing or malformed state is replaced by a fresh seed; the response
    carries the state actually used so clients can store it.
    """
    if state is None:
        parsed = _fresh_state()
    else:
        try:
            parsed = parse_state(state)
        except InvalidFormat:
            logger.info("Ignoring invalid board state, drawing a fresh seed", state=state)
            parsed = _fresh_state()

    return _board_response(_generate(parsed))


@app.post("/boards/generate", response_model=BoardResponse)
def generate(request: BoardRequest):
    """Generate a board for a seed, or for a fresh seed when none is given."""
    logger.info("Board generation requested", request=request.model_dump())

    if request.seed is None:
        parsed = _fresh_state(request.enforce_constraint)
    else:
        enforce = request.enforce_constraint
        if enforce is None:
            enforce = settings.default_enforce_constraint
        parsed = BoardState(seed=request.seed, enforce_constraint=enforce)

    return _board_response(_generate(parsed))


@app.get("/boards/{state}/statistics", response_model=BoardStatisticsResponse)
def get_board_statistics(state: str):
    """Pip totals and token rule violations for a board."""
    try:
        parsed = parse_state(state)
    except InvalidFormat as e:
        raise HTTPException(status_code=400, detail=str(e))

    board = _generate(parsed)
    return BoardStatisticsResponse(state=board.state, statistics=summarize_board(board))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
