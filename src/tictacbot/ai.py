"""Move selection strategies: random, win-or-block heuristic, full minimax."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union
import logging
import math
import random

from .board import (
    Board,
    BoardFullError,
    GameOverError,
    Marker,
    Position,
    RandomSource,
    check_winner,
    empty_cells,
    get_random_move,
    is_board_full,
    opponent_of,
    simulated_move,
    validate_board,
    validate_marker,
)

logger = logging.getLogger(__name__)

WIN_SCORE = 10


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# ---- medium ----


def find_winning_move(board: Board, player: Marker) -> Optional[Position]:
    """First empty cell (row-major) where ``player`` completes a line."""
    for move in empty_cells(board):
        with simulated_move(board, move, player):
            if check_winner(board) == player:
                return move
    return None


def get_medium_move(
    board: Board, player: Marker, rng: Optional[RandomSource] = None
) -> Position:
    """Win if possible, otherwise block the opponent, otherwise play randomly."""

    validate_board(board)
    opponent = opponent_of(player)

    move = find_winning_move(board, player)
    if move is not None:
        logger.debug("%s takes winning move %s", player, move)
        return move

    move = find_winning_move(board, opponent)
    if move is not None:
        logger.debug("%s blocks %s at %s", player, opponent, move)
        return move

    move = get_random_move(board, rng)
    logger.debug("%s has no tactical move, playing %s", player, move)
    return move


# ---- hard ----


def minimax_score(
    board: Board, player: Marker, opponent: Marker, depth: int, maximizing: bool
) -> int:
    """Score ``board`` from ``player``'s point of view by exhaustive search.

    ``depth`` is the number of plies below the root. Wins score
    ``10 - depth`` and losses ``depth - 10`` so quicker wins and slower
    losses are preferred; draws score 0.
    """

    winner = check_winner(board)
    if winner == player:
        return WIN_SCORE - depth
    if winner == opponent:
        return depth - WIN_SCORE
    if is_board_full(board):
        return 0

    if maximizing:
        value = -math.inf
        for move in empty_cells(board):
            with simulated_move(board, move, player):
                score = minimax_score(board, player, opponent, depth + 1, False)
                value = max(value, score)
    else:
        value = math.inf
        for move in empty_cells(board):
            with simulated_move(board, move, opponent):
                score = minimax_score(board, player, opponent, depth + 1, True)
                value = min(value, score)
    return int(value)


def evaluate_moves(board: Board, player: Marker) -> Dict[Position, int]:
    """Root score of every empty cell for ``player``, in row-major order."""
    opponent = opponent_of(player)
    scores: Dict[Position, int] = {}
    for move in empty_cells(board):
        with simulated_move(board, move, player):
            scores[move] = minimax_score(board, player, opponent, 0, False)
    return scores


def get_minimax_move(board: Board, player: Marker) -> Position:
    """Optimal move for ``player``; ties go to the first cell in row-major order."""

    validate_board(board)
    validate_marker(player)

    best_move: Optional[Position] = None
    best_score = -math.inf
    for move, score in evaluate_moves(board, player).items():
        if score > best_score:
            best_score, best_move = score, move

    if best_move is None:
        raise BoardFullError("No valid moves available")
    logger.debug("%s minimax move %s (score %s)", player, best_move, best_score)
    return best_move


# ---- dispatch ----


def get_move(
    board: Board,
    player: Marker,
    difficulty: Union[Difficulty, str] = Difficulty.HARD,
    rng: Optional[RandomSource] = None,
) -> Position:
    """Select a move for ``player`` with the strategy named by ``difficulty``."""

    difficulty = Difficulty(difficulty)
    validate_board(board)
    validate_marker(player)

    if difficulty is Difficulty.EASY:
        move = get_random_move(board, rng)
        logger.debug("%s random move %s", player, move)
        return move
    if difficulty is Difficulty.MEDIUM:
        return get_medium_move(board, player, rng)
    return get_minimax_move(board, player)


@dataclass
class TicTacToeBot:
    """Computer player bound to one marker and one difficulty.

    Usage:
      - TicTacToeBot(player="O", difficulty="medium", rng=random.Random(7))
      - choose(board) -> Position
    """

    player: Marker
    difficulty: Difficulty = Difficulty.HARD
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        validate_marker(self.player)
        self.difficulty = Difficulty(self.difficulty)

    def choose(self, board: Board) -> Position:
        validate_board(board)
        winner = check_winner(board)
        if winner is not None:
            raise GameOverError(f"Game already won by {winner}")
        return get_move(board, self.player, self.difficulty, self.rng)
