"""Tests for the command-line entry point."""

import pytest

from ny_gothor import cli
from ny_gothor.sim.telemetry import RunTelemetry


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.setenv("NY_GOTHOR_SAVE_DIR", str(tmp_path / "saves"))
    monkeypatch.delenv("NY_GOTHOR_TEXT_SPEED", raising=False)


class TestArguments:
    def test_defaults(self):
        args = cli.parse_arguments([])
        assert args.seed is None
        assert args.autoplay is None
        assert args.log_level == "WARNING"

    def test_autoplay_defaults_to_random(self):
        assert cli.parse_arguments(["--autoplay"]).autoplay == "random"

    def test_flags_override_config(self, tmp_path):
        args = cli.parse_arguments(
            ["--rooms", "12", "--text-speed", "0", "--save-dir", str(tmp_path)]
        )
        config = cli.build_config(args)
        assert config.room_count == 12
        assert config.text_speed_ms == 0
        assert config.save_dir == tmp_path

    def test_env_applies_without_flags(self, tmp_path):
        config = cli.build_config(cli.parse_arguments([]))
        assert config.save_dir == tmp_path / "saves"


class TestAutoplay:
    @pytest.mark.parametrize("agent", ["random", "heuristic"])
    def test_prints_summary(self, agent, capsys):
        assert cli.main(["--autoplay", agent, "--seed", "4"]) == 0
        out = capsys.readouterr().out
        assert "Seed:              4" in out
        assert "Result:" in out

    def test_invalid_room_count(self, capsys):
        assert cli.main(["--autoplay", "--rooms", "2"]) == 2
        assert "room_count" in capsys.readouterr().out


class TestSummary:
    def test_format(self):
        telemetry = RunTelemetry(seed=1, final_result="quit", rooms_visited=[0, 3, 0])
        summary = cli.format_summary(telemetry)
        assert "Room visits:       3" in summary
        assert "Distinct rooms:    2" in summary
        assert "Items collected:   -" in summary


class TestInteractive:
    def test_help_then_quit(self, monkeypatch, capsys):
        answers = iter(["3", "4"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        assert cli.main(["--text-speed", "0"]) == 0
        out = capsys.readouterr().out
        assert "Input -1 to return to the last room." in out

    def test_load_with_no_saves(self, monkeypatch, capsys):
        answers = iter(["2", "4"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        cli.main(["--text-speed", "0"])
        assert "No saved games found." in capsys.readouterr().out

    def test_end_of_input_exits_cleanly(self, monkeypatch):
        def _eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert cli.main(["--text-speed", "0"]) == 0

    def test_new_game_then_quit(self, monkeypatch, capsys):
        answers = iter(["1", "QUIT", "4"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        assert cli.main(["--text-speed", "0", "--seed", "1"]) == 0
        assert "You awake, vision blurry." in capsys.readouterr().out
