"""Entry point for running a self-play game via ``python -m tictacbot``."""

from __future__ import annotations

from typing import List, Optional, Tuple
import logging
import os
import random

from pydantic import BaseModel, Field

from .ai import Difficulty, TicTacToeBot
from .board import Board, Marker, Position, check_winner, is_board_full, new_board

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class SelfPlaySettings(BaseModel):
    """Settings for one self-play game, read from ``TICTACBOT_*`` variables."""

    x_difficulty: Difficulty = Difficulty.HARD
    o_difficulty: Difficulty = Difficulty.HARD
    seed: Optional[int] = None
    log_level: str = Field(
        default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )

    @classmethod
    def from_env(cls) -> "SelfPlaySettings":
        values = {
            "x_difficulty": os.environ.get("TICTACBOT_X_DIFFICULTY", "hard").lower(),
            "o_difficulty": os.environ.get("TICTACBOT_O_DIFFICULTY", "hard").lower(),
            "seed": os.environ.get("TICTACBOT_SEED") or None,
            "log_level": os.environ.get("TICTACBOT_LOG_LEVEL", "INFO").upper(),
        }
        return cls(**values)


def play_game(
    x_bot: TicTacToeBot, o_bot: TicTacToeBot, board: Optional[Board] = None
) -> Tuple[Optional[Marker], List[Tuple[Marker, Position]]]:
    """Alternate the two bots until the game ends.

    Returns the winner (None for a draw) and the moves played, in order.
    """

    if board is None:
        board = new_board()
    bots = {"X": x_bot, "O": o_bot}
    placed = sum(cell is not None for row in board for cell in row)
    current: Marker = "X" if placed % 2 == 0 else "O"
    moves: List[Tuple[Marker, Position]] = []

    while check_winner(board) is None and not is_board_full(board):
        row, col = bots[current].choose(board)
        board[row][col] = current
        moves.append((current, Position(row, col)))
        logger.info("%s plays (%d, %d)", current, row, col)
        current = "O" if current == "X" else "X"

    return check_winner(board), moves


def main() -> None:
    """Play one game between two bots configured from the environment."""

    settings = SelfPlaySettings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    rng = random.Random(settings.seed)
    x_bot = TicTacToeBot(player="X", difficulty=settings.x_difficulty, rng=rng)
    o_bot = TicTacToeBot(player="O", difficulty=settings.o_difficulty, rng=rng)
    logger.info(
        "Self-play: X=%s vs O=%s (seed=%s)",
        settings.x_difficulty.value,
        settings.o_difficulty.value,
        settings.seed,
    )

    winner, moves = play_game(x_bot, o_bot)
    if winner is None:
        logger.info("Draw after %d moves", len(moves))
    else:
        logger.info("%s wins after %d moves", winner, len(moves))


if __name__ == "__main__":
    main()
