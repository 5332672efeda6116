"""tictacbot package exposing board helpers and the move selection strategies."""

from .ai import (
    Difficulty,
    TicTacToeBot,
    get_medium_move,
    get_minimax_move,
    get_move,
)
from .board import (
    BoardFullError,
    GameOverError,
    InvalidBoardError,
    InvalidMarkerError,
    Position,
    TicTacToeError,
    check_winner,
    get_random_move,
    is_board_full,
    new_board,
)

__all__ = [
    "BoardFullError",
    "Difficulty",
    "GameOverError",
    "InvalidBoardError",
    "InvalidMarkerError",
    "Position",
    "TicTacToeBot",
    "TicTacToeError",
    "check_winner",
    "get_medium_move",
    "get_minimax_move",
    "get_move",
    "get_random_move",
    "is_board_full",
    "new_board",
]
