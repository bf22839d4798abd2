"""Tests for narrators and scene templates."""

import io

import pytest
from jinja2 import UndefinedError

from ny_gothor.narration.renderer import RULE, ConsoleNarrator, NullNarrator

from builders import make_item, make_monster


class TestNullNarrator:
    def test_records_lines(self):
        narrator = NullNarrator()
        narrator.say("one")
        narrator.say("two")
        assert narrator.lines == ["one", "two"]
        assert narrator.transcript == "one\ntwo"

    def test_rule(self):
        narrator = NullNarrator()
        narrator.rule()
        assert narrator.lines == [RULE]
        assert len(RULE) == 70

    def test_scene_skips_blank_lines(self):
        narrator = NullNarrator()
        narrator.scene("inventory.txt.j2", items=[make_item()])
        assert narrator.lines == ["You currently have:", " - Hatchet -- Damage: 30"]

    def test_missing_context_is_an_error(self):
        with pytest.raises(UndefinedError):
            NullNarrator().render("encounter.txt.j2", final=False)


class TestScenes:
    def test_encounter_wording(self):
        narrator = NullNarrator()
        narrator.scene("encounter.txt.j2", monster=make_monster(sanity_impact=12), final=False)
        assert narrator.lines == [
            "You notice something shifting within the room.",
            "At the sight of Ky-Tagar you feel your mind falter.",
            "Sanity decreased by 12.",
        ]

    def test_final_encounter_skips_shifting_line(self):
        narrator = NullNarrator()
        narrator.scene("encounter.txt.j2", monster=make_monster(), final=True)
        assert "You notice something shifting within the room." not in narrator.lines

    def test_combat_round_without_counterattack(self):
        from ny_gothor.sim.mechanics.combat import AttackOutcome

        narrator = NullNarrator()
        narrator.scene(
            "combat_round.txt.j2",
            player_attack=AttackOutcome(roll=50, hit=True, damage=30, target_dead=True),
            weapon=make_item(),
            monster_attack=None,
        )
        assert narrator.lines == ["Your Hatchet strikes for 30 damage."]

    def test_paths(self):
        narrator = NullNarrator()
        narrator.scene("paths.txt.j2", paths=[(3, "A crawlway"), (7, "A chasm")])
        assert narrator.lines == [
            "Which path do you take?",
            "3: A crawlway",
            "7: A chasm",
            "-1: Return to last room",
        ]

    def test_death_by_insanity(self):
        narrator = NullNarrator()
        narrator.scene("death.txt.j2", cause="insanity")
        assert narrator.lines[-1] == "You are dead."
        assert len(narrator.lines) == 2

    @pytest.mark.parametrize("template", ["help.txt.j2", "main_menu.txt.j2"])
    def test_static_scenes_render(self, template):
        assert NullNarrator().render(template).strip()


class TestConsoleNarrator:
    def test_instant_output(self):
        stream = io.StringIO()
        narrator = ConsoleNarrator(stream=stream, text_speed_ms=0)
        narrator.say("Hello")
        assert stream.getvalue() == "Hello\n"

    def test_paced_output_sleeps_per_character(self):
        stream = io.StringIO()
        delays = []
        narrator = ConsoleNarrator(stream=stream, text_speed_ms=10, sleep=delays.append)
        narrator.say("abc")
        assert stream.getvalue() == "abc\n"
        assert delays == [0.01, 0.01, 0.01]

    def test_unpaced_line_does_not_sleep(self):
        stream = io.StringIO()
        delays = []
        narrator = ConsoleNarrator(stream=stream, text_speed_ms=10, sleep=delays.append)
        narrator.rule()
        assert delays == []
        assert stream.getvalue() == RULE + "\n"
