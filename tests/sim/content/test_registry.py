"""Tests for the content registry and the bundled catalog."""

import json

import pytest
from pydantic import ValidationError

from ny_gothor.ir.monsters import MonsterDefinition, StatRange
from ny_gothor.sim.content.registry import ContentRegistry, build_monster
from ny_gothor.sim.core.rng import GameRNG


class TestBundledCatalog:
    def test_items(self, registry):
        damages = {d.id: d.damage for d in registry.items.values()}
        assert damages == {
            "hatchet": 30,
            "knife": 22,
            "club": 50,
            "spear": 36,
            "sword": 60,
            "dynamite": 1000,
        }

    def test_hatchet_is_the_only_starter(self, registry):
        starters = registry.starter_items()
        assert [i.item_id for i in starters] == ["hatchet"]

    def test_catalog_excludes_starters(self, registry):
        catalog = registry.build_item_catalog()
        assert "hatchet" not in {i.item_id for i in catalog}
        assert len(catalog) == 5
        assert not any(i.placed_in_world for i in catalog)

    def test_catalogs_are_independent(self, registry):
        first = registry.build_item_catalog()
        first[0].placed_in_world = True
        second = registry.build_item_catalog()
        assert not second[0].placed_in_world

    def test_monsters(self, registry):
        stats = {d.id: (d.health, d.damage, d.final) for d in registry.monsters.values()}
        assert stats == {
            "ky_tagar": (100, 20, False),
            "azakoth": (200, 10, False),
            "agaroth": (20, 40, False),
            "ny_gothor": (1000, 70, True),
        }

    def test_narrative_pools_loaded(self, registry):
        narrative = registry.get_narrative()
        assert narrative.room_descriptions
        assert narrative.path_descriptions
        assert narrative.start_room_text


class TestMonsterRolls:
    def test_bestiary_excludes_final(self, registry):
        bestiary = registry.roll_bestiary(GameRNG(1))
        ids = {m.monster_id for m in bestiary}
        assert ids == {"ky_tagar", "azakoth", "agaroth"}

    def test_rolled_stats_within_ranges(self, registry):
        for seed in range(50):
            for monster in registry.roll_bestiary(GameRNG(seed)):
                assert 0 <= monster.sanity_impact < 20
                assert 0 <= monster.attack_chance < 80
                assert 0 <= monster.dodge_chance < 15
                assert monster.health == monster.max_health

    def test_final_monster(self, registry):
        monster = registry.build_final_monster(GameRNG(3))
        assert monster.monster_id == "ny_gothor"
        assert monster.health == 1000
        assert monster.damage_per_hit == 70

    def test_no_final_monster_raises(self):
        reg = ContentRegistry()
        with pytest.raises(ValueError):
            reg.build_final_monster(GameRNG(0))

    def test_build_monster_is_seeded(self):
        defn = MonsterDefinition(id="m", name="M", health=10, damage=1)
        a = build_monster(defn, GameRNG(11))
        b = build_monster(defn, GameRNG(11))
        assert a == b


class TestLoading:
    def test_narrative_missing_raises(self):
        with pytest.raises(ValueError):
            ContentRegistry().get_narrative()

    def test_load_custom_items(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps([{"id": "rock", "name": "Rock", "damage": 5}]))
        reg = ContentRegistry()
        reg.load_items(path)
        assert reg.get_item("rock").damage == 5
        assert reg.get_item("stone") is None

    def test_lookup_monster_by_id(self, registry):
        assert registry.get_monster("azakoth").health == 200
        assert registry.get_monster("ny_gothor").final
        assert registry.get_monster("shoggoth") is None

    def test_invalid_stat_range_rejected(self):
        with pytest.raises(ValidationError):
            StatRange(low=10, high=10)
