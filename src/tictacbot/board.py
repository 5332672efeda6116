"""Board representation, validation and pure queries for 3x3 Tic-Tac-Toe."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, NamedTuple, Optional, Protocol, Sequence, Tuple
import random

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

Marker = str  # "X" or "O"
Cell = Optional[Marker]  # None for an empty cell
Board = List[List[Cell]]

BOARD_SIZE = 3
MARKERS: Tuple[Marker, Marker] = ("X", "O")


class Position(NamedTuple):
    row: int
    col: int


# Rows, columns, then the two diagonals. Order decides which line is
# reported first by check_winner.
WINNING_LINES: Tuple[Tuple[Position, Position, Position], ...] = (
    (Position(0, 0), Position(0, 1), Position(0, 2)),
    (Position(1, 0), Position(1, 1), Position(1, 2)),
    (Position(2, 0), Position(2, 1), Position(2, 2)),
    (Position(0, 0), Position(1, 0), Position(2, 0)),
    (Position(0, 1), Position(1, 1), Position(2, 1)),
    (Position(0, 2), Position(1, 2), Position(2, 2)),
    (Position(0, 0), Position(1, 1), Position(2, 2)),
    (Position(0, 2), Position(1, 1), Position(2, 0)),
)


# ---------- Errors ----------


class TicTacToeError(Exception):
    """Base class for every error raised by tictacbot."""


class InvalidBoardError(TicTacToeError, ValueError):
    """The board is not a 3x3 grid of "X", "O" or None."""


class InvalidMarkerError(TicTacToeError, ValueError):
    """The player marker is not "X" or "O"."""


class BoardFullError(TicTacToeError, RuntimeError):
    """A move was requested on a board without empty cells."""


class GameOverError(TicTacToeError, RuntimeError):
    """A move was requested on a board that already has a winner."""


# ---------- Validation ----------


class BoardState(BaseModel):
    """Shape and content check for a caller supplied board."""

    # No coercion: selectors mutate the caller's own rows in place.
    model_config = ConfigDict(strict=True)

    cells: List[List[Optional[Marker]]]

    @field_validator("cells")
    @classmethod
    def ensure_three_by_three(cls, value: List[List[Cell]]) -> List[List[Cell]]:
        if len(value) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} rows, got {len(value)}")
        for index, row in enumerate(value):
            if len(row) != BOARD_SIZE:
                raise ValueError(
                    f"Row {index} must have {BOARD_SIZE} cells, got {len(row)}"
                )
            for cell in row:
                if cell is not None and cell not in MARKERS:
                    raise ValueError(
                        f"Unsupported cell value {cell!r} in row {index}. "
                        f"Use one of {', '.join(MARKERS)} or None."
                    )
        return value


def validate_board(board: Board) -> Board:
    """Raise ``InvalidBoardError`` unless ``board`` is a well formed 3x3 grid.

    The board itself is returned untouched so callers keep working on their
    own object.
    """

    try:
        BoardState(cells=board)
    except ValidationError as exc:
        raise InvalidBoardError(f"Invalid board: {exc}") from exc
    return board


def validate_marker(marker: Marker) -> Marker:
    if marker not in MARKERS:
        raise InvalidMarkerError(
            f"Unsupported player marker {marker!r}. Use one of {', '.join(MARKERS)}."
        )
    return marker


def opponent_of(marker: Marker) -> Marker:
    validate_marker(marker)
    return "O" if marker == "X" else "X"


def new_board() -> Board:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


# ---------- Queries ----------


def is_board_full(board: Board) -> bool:
    return all(cell is not None for row in board for cell in row)


def check_winner(board: Board) -> Optional[Marker]:
    """Return the marker owning a complete line, or None if there is none."""
    for a, b, c in WINNING_LINES:
        v = board[a.row][a.col]
        if v is not None and v == board[b.row][b.col] == board[c.row][c.col]:
            return v
    return None


def empty_cells(board: Board) -> List[Position]:
    """All empty positions in row-major order."""
    return [
        Position(row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if board[row][col] is None
    ]


class RandomSource(Protocol):
    def choice(self, seq: Sequence[Position]) -> Position: ...


_default_rng = random.Random()


def get_random_move(board: Board, rng: Optional[RandomSource] = None) -> Position:
    """Pick one empty cell uniformly at random.

    ``rng`` defaults to a module level ``random.Random``; pass a seeded
    instance for reproducible choices.
    """

    moves = empty_cells(board)
    if not moves:
        raise BoardFullError("No valid moves available")
    return (rng or _default_rng).choice(moves)


@contextmanager
def simulated_move(board: Board, position: Position, marker: Marker) -> Iterator[Board]:
    """Temporarily place ``marker`` at ``position``.

    The previous cell value is restored when the block exits, including on
    early return or exceptions.
    """

    row, col = position
    previous = board[row][col]
    board[row][col] = marker
    try:
        yield board
    finally:
        board[row][col] = previous
