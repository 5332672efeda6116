"""Tests for the self-play entry point."""

import random

import pytest
from pydantic import ValidationError

from tictacbot.__main__ import SelfPlaySettings, main, play_game
from tictacbot.ai import Difficulty, TicTacToeBot
from tictacbot.board import check_winner


def parse(rows):
    return [[None if ch == "." else ch for ch in row] for row in rows]


def test_settings_defaults(monkeypatch):
    for name in (
        "TICTACBOT_X_DIFFICULTY",
        "TICTACBOT_O_DIFFICULTY",
        "TICTACBOT_SEED",
        "TICTACBOT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = SelfPlaySettings.from_env()
    assert settings.x_difficulty is Difficulty.HARD
    assert settings.o_difficulty is Difficulty.HARD
    assert settings.seed is None
    assert settings.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TICTACBOT_X_DIFFICULTY", "easy")
    monkeypatch.setenv("TICTACBOT_O_DIFFICULTY", "medium")
    monkeypatch.setenv("TICTACBOT_SEED", "42")
    monkeypatch.setenv("TICTACBOT_LOG_LEVEL", "debug")
    settings = SelfPlaySettings.from_env()
    assert settings.x_difficulty is Difficulty.EASY
    assert settings.o_difficulty is Difficulty.MEDIUM
    assert settings.seed == 42
    assert settings.log_level == "DEBUG"


def test_settings_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("TICTACBOT_X_DIFFICULTY", "HARD")
    monkeypatch.setenv("TICTACBOT_O_DIFFICULTY", "Medium")
    monkeypatch.setenv("TICTACBOT_LOG_LEVEL", "critical")
    settings = SelfPlaySettings.from_env()
    assert settings.x_difficulty is Difficulty.HARD
    assert settings.o_difficulty is Difficulty.MEDIUM
    assert settings.log_level == "CRITICAL"


def test_settings_reject_unknown_difficulty(monkeypatch):
    monkeypatch.setenv("TICTACBOT_X_DIFFICULTY", "nightmare")
    with pytest.raises(ValidationError):
        SelfPlaySettings.from_env()


def test_play_game_records_legal_alternating_moves():
    rng = random.Random(5)
    x_bot = TicTacToeBot(player="X", difficulty="easy", rng=rng)
    o_bot = TicTacToeBot(player="O", difficulty="easy", rng=rng)
    winner, moves = play_game(x_bot, o_bot)

    assert 5 <= len(moves) <= 9
    assert [player for player, _ in moves] == ["X", "O"] * (len(moves) // 2) + (
        ["X"] if len(moves) % 2 else []
    )
    assert len({position for _, position in moves}) == len(moves)
    assert winner in (None, "X", "O")


def test_play_game_continues_from_given_board():
    board = parse(["XO.", "X..", "O.."])
    x_bot = TicTacToeBot(player="X", difficulty="hard")
    o_bot = TicTacToeBot(player="O", difficulty="hard")
    winner, moves = play_game(x_bot, o_bot, board)

    assert moves[0][0] == "X"
    assert winner == check_winner(board)


def test_main_plays_a_game(monkeypatch, caplog):
    monkeypatch.setenv("TICTACBOT_X_DIFFICULTY", "medium")
    monkeypatch.setenv("TICTACBOT_O_DIFFICULTY", "easy")
    monkeypatch.setenv("TICTACBOT_SEED", "9")
    monkeypatch.delenv("TICTACBOT_LOG_LEVEL", raising=False)
    caplog.set_level("INFO", logger="tictacbot")
    main()
    assert any("Self-play" in record.getMessage() for record in caplog.records)
