"""Tests for the terminal front end."""

import pytest

from tictactoe import cli, logic


def feed(monkeypatch, answers):
    """Replace input() with a scripted sequence of answers."""
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


def test_print_board_shows_marks(capsys):
    engine = logic.GameEngine()
    engine.apply_move(0, 0)
    engine.apply_move(1, 1)
    cli.print_board(engine)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["A", "B", "C"]
    assert lines[1].split() == ["1", "X", ".", "."]
    assert lines[2].split() == ["2", ".", "O", "."]


def test_play_game_reports_win(monkeypatch, capsys):
    feed(monkeypatch, ["a1", "b2", "b1", "a2", "c1"])
    result = cli.play_game(logic.GameEngine())
    assert result == logic.MoveResult(logic.Outcome.WIN, logic.X)
    assert "Player X wins!" in capsys.readouterr().out


def test_play_game_reprompts_on_illegal_and_bad_input(monkeypatch, capsys):
    engine = logic.GameEngine()
    feed(monkeypatch, ["a1", "a1", "nonsense", "9 9",
                       "c1", "b1", "a2", "c2", "b2", "a3", "b3", "c3"])
    result = cli.play_game(engine)
    out = capsys.readouterr().out
    assert "Illegal move! Square already taken." in out
    assert "Could not read that square." in out
    assert "Invalid coordinate (9, 9)" in out
    assert result.outcome is logic.Outcome.TIE
    assert "The game is a tie!" in out
    assert engine.move_count == 9


def test_session_survives_unparseable_digits(monkeypatch, capsys):
    feed(monkeypatch, ["--1 0", "b²", "q"])
    cli.main()
    out = capsys.readouterr().out
    assert out.count("Could not read that square.") == 2
    assert "Goodbye." in out


def test_quit_raises_keyboard_interrupt(monkeypatch):
    feed(monkeypatch, ["q"])
    with pytest.raises(KeyboardInterrupt):
        cli.prompt_move(logic.X)


def test_ask_play_again(monkeypatch, capsys):
    feed(monkeypatch, ["maybe", "Y"])
    assert cli.ask_play_again() is True
    assert "Please answer" in capsys.readouterr().out
    feed(monkeypatch, ["n"])
    assert cli.ask_play_again() is False


def test_game_loop_resets_between_games(monkeypatch):
    engine = logic.GameEngine()
    win = ["a1", "b2", "b1", "a2", "c1"]
    feed(monkeypatch, win + ["y"] + win + ["n"])
    cli.game_loop(engine)
    # second game finished too and was not reset afterwards
    assert engine.state is logic.GameState.WON
    assert engine.move_count == 5


def test_main_handles_quit(monkeypatch, capsys):
    feed(monkeypatch, ["quit"])
    cli.main()
    assert "Goodbye." in capsys.readouterr().out
