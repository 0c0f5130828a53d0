"""Tests for the console driver."""

import logging

import pytest
from colorama import Fore, Style

import main
from logic import GameEngine, GameStatus, Move, Player


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_render_empty_board():
    presenter = main.ConsolePresenter(GameEngine())
    assert presenter.render_board() == " - | - | - \n - | - | - \n - | - | - "


def test_render_highlights_winning_cells():
    engine = GameEngine()
    main.play_moves(engine, main.ConsolePresenter(engine), main.WIN_GAME[:8])
    rendered = main.ConsolePresenter(engine).render_board()
    assert rendered.count(Fore.GREEN) == 3
    assert f"{Fore.GREEN} B " in rendered


def test_render_result_uses_status_color():
    engine = GameEngine()
    engine.play(Player.PLAYER1, Move(0, 0))
    text = main.ConsolePresenter(engine).render_result(engine.last_result)
    assert text.startswith(Fore.CYAN)
    assert "PlayerA(0,0) made CAN_PLAY move." in text


def test_render_result_shows_engine_message():
    engine = GameEngine()
    engine.play(Player.PLAYER1, Move(2, 1))
    result = engine.last_result
    presenter = main.ConsolePresenter(engine)
    assert presenter.render_result(result) == f"{Fore.CYAN}{result.message}{Style.RESET_ALL}"

    engine.play(Player.PLAYER1, Move(0, 0))
    text = presenter.render_result(engine.last_result)
    assert text.startswith(Fore.RED)
    assert "PlayerA(0,0) made INVALID move." in text


def test_demo_output(capsys):
    engine = main.run_demo()
    out = capsys.readouterr().out
    assert "PlayerB(1,1) made WIN move." in out
    assert "Game over, cannot make this move." in out
    assert "PlayerA(2,2) made FINISHED move." in out
    assert out.count("Restarting the game.") == 2
    assert engine.status == GameStatus.CAN_PLAY


def test_parse_move():
    assert main.parse_move("1 2") == Move(1, 2)
    assert main.parse_move("0,1") == Move(0, 1)
    assert main.parse_move("x y") is None
    assert main.parse_move("1") is None


def test_interactive_game(capsys):
    typed = iter(["0 0", "1 0", "0 1", "oops", "1 1", "0 2"])
    engine = main.run_interactive(input_func=lambda prompt: next(typed))
    out = capsys.readouterr().out
    assert engine.winner == Player.PLAYER1
    assert "Please enter two numbers" in out
    assert "PlayerA wins!" in out


def test_interactive_quit():
    typed = iter(["1 1", "q"])
    engine = main.run_interactive(input_func=lambda prompt: next(typed))
    assert not engine.is_game_over
    assert len(engine.moves) == 1


def test_main_runs_demo(capsys, restore_logging):
    assert main.main([]) == 0
    assert "Restarting the game." in capsys.readouterr().out


def test_main_log_format(capsys, restore_logging):
    assert main.main(["--log-level", "INFO", "--log-format", "detailed"]) == 0
    out = capsys.readouterr().out
    assert "logic.game_engine - INFO - " in out
    assert "game_engine.py:" in out


def test_main_rejects_unknown_log_format(capsys):
    with pytest.raises(SystemExit):
        main.main(["--log-format", "json"])
