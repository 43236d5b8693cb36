"""
Tests for tabletop.cli

Tests argument parsing, move parsing and the terminal play loop.
"""

import pytest

from tabletop.cli import main, parse_args, parse_move, play, status_line
from tabletop.games.connect_four import ConnectFour
from tabletop.games.dots_and_boxes import DotsAndBoxes
from tabletop.games.gomoku import Gomoku
from tabletop.games.tic_tac_toe import TicTacToe


def scripted(lines):
    """Input function returning `lines` in order, then EOF."""
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.game == "connect_four"
        assert args.size == 15
        assert args.grid == 4
        assert args.log_level == "WARNING"

    def test_options(self):
        args = parse_args(["-g", "gomoku", "--size", "9", "--log-level", "DEBUG"])
        assert args.game == "gomoku"
        assert args.size == 9

    def test_unknown_game_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--game", "chess"])


class TestParseMove:

    def test_column(self):
        assert parse_move(ConnectFour(), "3") == 3

    def test_row_col(self):
        assert parse_move(Gomoku(), "7, 8") == (7, 8)

    def test_edge(self):
        assert parse_move(DotsAndBoxes(), "H,0,1") == ((0, 1), "h")

    @pytest.mark.parametrize("game, raw", [
        (TicTacToe(), ""),
        (TicTacToe(), "a"),
        (Gomoku(), "1,2,3"),
        (DotsAndBoxes(), "0,1"),
    ])
    def test_bad_input_raises(self, game, raw):
        with pytest.raises(ValueError):
            parse_move(game, raw)


class TestPlay:

    def test_plays_until_win(self):
        game = TicTacToe()
        output = []
        play(game, read=scripted(["0", "3", "1", "4", "2"]), write=output.append)

        assert game.winner == 1
        assert output[-1] == "X wins!"

    def test_rejected_move_reported(self):
        game = ConnectFour()
        output = []
        play(game, read=scripted(["9", "quit", "0"]), write=output.append)

        assert "Move not allowed." in output
        assert game.move_count == 0

    def test_invalid_input_reported(self):
        output = []
        play(TicTacToe(), read=scripted(["foo"]), write=output.append)
        assert any(line.startswith("Invalid input") for line in output)

    def test_reset_command(self):
        game = Gomoku(size=5)
        play(game, read=scripted(["2,2", "reset"]), write=lambda s: None)
        assert game.move_count == 0

    def test_status_line(self):
        game = ConnectFour()
        assert status_line(game).startswith("Red to move")


class TestMain:

    def test_runs_session(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", scripted(["h,0,1", "q"]))
        main(["--game", "dots_and_boxes", "--grid", "2"])

        out = capsys.readouterr().out
        assert "Scores" in out
        assert "Player 2 to move" in out

    @pytest.mark.parametrize("argv", [
        ["--game", "gomoku", "--size", "3"],
        ["--game", "dots_and_boxes", "--grid", "0"],
        ["--grid", "-2"],
    ])
    def test_invalid_option_value_exits(self, argv, capsys):
        """Out-of-range sizes are reported as usage errors, not tracebacks."""
        with pytest.raises(SystemExit) as exc:
            main(argv)

        assert exc.value.code == 2
        assert "must be at least" in capsys.readouterr().err
