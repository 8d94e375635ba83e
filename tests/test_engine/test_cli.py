"""Tests for CLI helpers."""

import json
import sys

from eights_engine.cards import Card, Suit
from eights_engine.cli import format_state, main, parse_command, run_simulation
from eights_engine.executor import execute_move
from eights_engine.moves import ChooseSuit, Draw, Pass, Play
from eights_engine.state import create_initial_state


class TestParseCommand:
    def test_draw_and_pass(self, make_state):
        state = make_state([("5H", "9C")], ["9H"])
        assert parse_command(state, "d") == Draw()
        assert parse_command(state, "pass") == Pass()

    def test_positions_in_order(self, make_state):
        state = make_state([("5H", "9C", "6H")], ["9H"])
        assert parse_command(state, "1 3") == Play(cards=(Card.parse("5H"), Card.parse("6H")))
        assert parse_command(state, "3,1") == Play(cards=(Card.parse("6H"), Card.parse("5H")))

    def test_bad_input(self, make_state):
        state = make_state([("5H", "9C")], ["9H"])
        assert parse_command(state, "") is None
        assert parse_command(state, "7") is None
        assert parse_command(state, "x") is None

    def test_suit_letters_after_ace(self, make_state):
        state = make_state([("AH", "9C")], ["9H"])
        state = execute_move(state, Play(cards=(Card.parse("AH"),)))
        assert parse_command(state, "d") == ChooseSuit(suit=Suit.DIAMONDS)
        assert parse_command(state, "spades") == ChooseSuit(suit=Suit.SPADES)
        assert parse_command(state, "z") is None


class TestFormatState:
    def test_hides_other_hands(self):
        state = create_initial_state(seed=1)
        text = format_state(state, viewer=0)
        assert "Bot West: [7 cards]" in text
        assert "You: 1:" in text

    def test_shows_winner(self, make_state):
        state = make_state([("8S",)], ["8H"])
        state = execute_move(state, Play(cards=(Card.parse("8S"),)))
        assert "GAME OVER - Winner: You" in format_state(state)


class TestSimulateCommand:
    def test_zero_games(self, capsys):
        run_simulation(num_games=0, seed=1)
        out = capsys.readouterr().out
        assert "Results (0 games):" in out
        assert "(0.0%)" in out

    def test_save_logs_writes_to_configured_dir(self, monkeypatch, tmp_path, capsys):
        log_dir = tmp_path / "game-logs"
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("EIGHTS_LOG_DIR", str(log_dir))
        monkeypatch.setenv("EIGHTS_LOG_LEVEL", "WARNING")
        monkeypatch.setattr(
            sys, "argv",
            ["eights", "simulate", "--games", "2", "--seed", "3", "--max-turns", "200", "--save-logs"],
        )

        main()

        files = sorted(log_dir.glob("*/game_*.json"))
        assert len(files) == 2
        assert {json.loads(f.read_text())["seed"] for f in files} == {3, 4}
        assert "Results (2 games):" in capsys.readouterr().out

    def test_no_logs_without_flag(self, monkeypatch, tmp_path, capsys):
        log_dir = tmp_path / "game-logs"
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("EIGHTS_LOG_DIR", str(log_dir))
        monkeypatch.setattr(sys, "argv", ["eights", "simulate", "--games", "1", "--max-turns", "50"])

        main()

        assert not log_dir.exists()
