"""Tests for input-format rules and command parsing."""

import pytest

from ny_gothor.sim.play_agents.commands import (
    PathAction,
    PathCommand,
    is_choice_int,
    parse_choice_int,
    parse_path_command,
    parse_yes_no,
)


class TestChoiceInt:
    @pytest.mark.parametrize("text, expected", [("0", 0), ("7", 7), ("12", 12), ("100", 100)])
    def test_accepted(self, text, expected):
        assert is_choice_int(text)
        assert parse_choice_int(text) == expected

    @pytest.mark.parametrize("text", ["", "01", "00", "-3", "+3", "abc", "1a", " 1", "1.0", None])
    def test_rejected(self, text):
        assert not is_choice_int(text)
        assert parse_choice_int(text) is None


class TestPathCommand:
    def test_room_number(self):
        assert parse_path_command("4") == PathCommand.move(4)

    def test_return(self):
        assert parse_path_command("-1") == PathCommand(PathAction.RETURN)

    @pytest.mark.parametrize("text, action", [
        ("SAVE", PathAction.SAVE),
        ("save", PathAction.SAVE),
        ("Items", PathAction.ITEMS),
        ("quit", PathAction.QUIT),
    ])
    def test_keywords(self, text, action):
        assert parse_path_command(text).action is action

    def test_surrounding_whitespace_ignored(self):
        assert parse_path_command(" 3 \n") == PathCommand.move(3)

    @pytest.mark.parametrize("text", ["", "-2", "05", "north", None])
    def test_unparseable(self, text):
        assert parse_path_command(text) is None

    def test_move_target_is_not_checked_here(self):
        assert parse_path_command("99") == PathCommand.move(99)


class TestYesNo:
    @pytest.mark.parametrize("text, expected", [
        ("y", True), ("Y", True), ("n", False), (" N ", False),
        ("yes", None), ("", None), (None, None),
    ])
    def test_answers(self, text, expected):
        assert parse_yes_no(text) is expected
