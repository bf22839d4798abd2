"""Attack resolution -- one swing from either side of an encounter.

Both sides roll a percentile in ``[0, 100)``.  A player attack is dodged
when the roll is *strictly below* the monster's dodge chance; a monster
attack lands when the roll is strictly below its attack chance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ny_gothor.sim.core.entities import Item, Monster, Player
    from ny_gothor.sim.core.rng import GameRNG


@dataclass(frozen=True)
class AttackOutcome:
    """Result of a single attack."""

    roll: int
    hit: bool
    damage: int
    """Health actually removed from the target (0 on a miss)."""

    target_dead: bool


def resolve_player_attack(monster: Monster, item: Item, rng: GameRNG) -> AttackOutcome:
    """The player swings *item* at *monster*."""
    roll = rng.roll_percent()
    if roll < monster.dodge_chance:
        return AttackOutcome(roll=roll, hit=False, damage=0, target_dead=monster.is_dead)

    lost = monster.take_damage(item.damage)
    return AttackOutcome(roll=roll, hit=True, damage=lost, target_dead=monster.is_dead)


def resolve_monster_attack(player: Player, monster: Monster, rng: GameRNG) -> AttackOutcome:
    """*monster* lashes out at the player."""
    roll = rng.roll_percent()
    if roll >= monster.attack_chance:
        return AttackOutcome(roll=roll, hit=False, damage=0, target_dead=player.is_dead)

    lost = player.take_damage(monster.damage_per_hit)
    return AttackOutcome(roll=roll, hit=True, damage=lost, target_dead=player.is_dead)
