"""Tests for Room and GameState."""

import pytest
from pydantic import ValidationError

from ny_gothor.sim.core.entities import Player
from ny_gothor.sim.core.game_state import ALTAR_ROOM, END_ROOM, START_ROOM, GameState, Room

from builders import make_item, make_monster, make_state


class TestRoom:
    def test_special_room_indices(self):
        assert (START_ROOM, ALTAR_ROOM, END_ROOM) == (0, 1, 2)

    def test_sinks(self):
        assert Room(index=1).is_sink
        assert Room(index=2).is_sink
        assert not Room(index=0).is_sink
        assert not Room(index=5).is_sink

    def test_leads_to(self):
        room = Room(index=0, neighbor_indices=[3, 4])
        assert room.leads_to(3)
        assert not room.leads_to(5)

    def test_take_item_empties_room(self):
        knife = make_item("knife", "Knife", 22)
        room = Room(index=3, item=knife)
        assert room.take_item() is knife
        assert room.item is None
        assert room.take_item() is None

    def test_has_live_monster(self):
        room = Room(index=3, monster=make_monster(), monster_present=True)
        assert room.has_live_monster

    def test_dead_monster_is_not_live(self):
        monster = make_monster(health=10)
        monster.take_damage(10)
        room = Room(index=3, monster=monster, monster_present=True)
        assert not room.has_live_monster

    def test_clear_monster(self):
        room = Room(index=3, monster=make_monster(), monster_present=True)
        room.clear_monster()
        assert room.monster is None
        assert not room.monster_present
        assert not room.has_live_monster


class TestGameState:
    def test_current_room_follows_player(self):
        state = make_state()
        assert state.current_room.index == 0
        state.player.current_room_index = 3
        assert state.current_room is state.room(3)

    def test_room_count(self):
        assert make_state(room_count=6).room_count == 6

    def test_item_locations(self):
        state = make_state()
        state.room(3).item = make_item("knife", "Knife", 22)
        assert state.item_locations("knife") == ["room:3"]
        assert state.item_locations("hatchet") == ["inventory"]
        assert state.item_locations("sword") == []

    def test_json_round_trip_is_field_equal(self):
        state = make_state()
        state.room(3).item = make_item("knife", "Knife", 22)
        state.room(4).monster = make_monster()
        state.room(4).monster_present = True
        state.player.visited_rooms = [0, 3]
        state.player.sanity = 42

        restored = GameState.model_validate_json(state.model_dump_json())
        assert restored == state


class TestGraphValidation:
    def _rooms(self, links):
        return [Room(index=i, neighbor_indices=links.get(i, [])) for i in range(3)]

    def test_valid_graph_accepted(self):
        state = GameState(player=Player(), rooms=self._rooms({0: [1, 2]}))
        assert state.room_count == 3

    def test_current_room_out_of_range(self):
        with pytest.raises(ValidationError):
            GameState(player=Player(current_room_index=7), rooms=self._rooms({}))

    def test_no_rooms_rejected(self):
        with pytest.raises(ValidationError):
            GameState(player=Player())

    def test_misplaced_room_index(self):
        rooms = [Room(index=0), Room(index=2), Room(index=1)]
        with pytest.raises(ValidationError):
            GameState(player=Player(), rooms=rooms)

    def test_link_out_of_range(self):
        with pytest.raises(ValidationError):
            GameState(player=Player(), rooms=self._rooms({0: [5]}))

    def test_self_link(self):
        with pytest.raises(ValidationError):
            GameState(player=Player(), rooms=self._rooms({0: [0]}))

    def test_history_out_of_range(self):
        player = Player(visited_rooms=[0, 4])
        with pytest.raises(ValidationError):
            GameState(player=player, rooms=self._rooms({}))
