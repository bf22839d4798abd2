"""Aggregate cave-generation statistics over many seeds.

Reports how often the generator falls back to start-room edges, how many
rooms are actually reachable from the start, whether the altar and end
rooms can be reached, and how items and monsters are distributed.

Usage:
    python scripts/cave_stats.py [--seeds N] [--rooms N]
"""

from __future__ import annotations

import argparse
import time
from collections import deque

import numpy as np

from ny_gothor.config import GameConfig
from ny_gothor.sim.core.game_state import ALTAR_ROOM, END_ROOM, START_ROOM
from ny_gothor.sim.core.rng import GameRNG
from ny_gothor.sim.content.registry import ContentRegistry
from ny_gothor.sim.dungeon.run_manager import RunManager
from ny_gothor.sim.play_agents.random_agent import RandomAgent


def reachable_from_start(rooms) -> set[int]:
    seen = {START_ROOM}
    queue = deque([START_ROOM])
    while queue:
        for target in rooms[queue.popleft()].neighbor_indices:
            if target not in seen:
                seen.add(target)
                queue.append(target)
    return seen


def collect(n_seeds: int, room_count: int) -> dict[str, np.ndarray]:
    registry = ContentRegistry()
    registry.load_defaults()
    config = GameConfig(room_count=room_count)

    stats: dict[str, list] = {
        "fallback_edges": [],
        "reachable": [],
        "altar_reachable": [],
        "end_reachable": [],
        "items_placed": [],
        "monsters_placed": [],
        "out_degree": [],
    }
    for seed in range(n_seeds):
        rng = GameRNG(seed)
        state = RunManager(registry, RandomAgent(rng.fork("agent")), rng, config=config).new_game()
        rooms = state.rooms
        reach = reachable_from_start(rooms)

        stats["fallback_edges"].append(sum(1 for r in rooms if r.loops_to_start))
        stats["reachable"].append(len(reach))
        stats["altar_reachable"].append(ALTAR_ROOM in reach)
        stats["end_reachable"].append(END_ROOM in reach)
        stats["items_placed"].append(sum(1 for r in rooms if r.item is not None))
        stats["monsters_placed"].append(sum(1 for r in rooms if r.monster_present))
        stats["out_degree"].extend(len(r.neighbor_indices) for r in rooms if not r.is_sink)

    return {key: np.asarray(values) for key, values in stats.items()}


def report(stats: dict[str, np.ndarray], room_count: int) -> None:
    print(f"  Fallback edges per cave: {np.mean(stats['fallback_edges']):.2f} "
          f"(max {np.max(stats['fallback_edges'])})")
    print(f"  Reachable rooms:         {np.mean(stats['reachable']):.2f} / {room_count} "
          f"(median {np.median(stats['reachable']):.0f})")
    print(f"  Altar reachable:         {np.mean(stats['altar_reachable']) * 100:.1f}%")
    print(f"  End reachable:           {np.mean(stats['end_reachable']) * 100:.1f}%")
    both = np.logical_and(stats["altar_reachable"], stats["end_reachable"])
    print(f"  Both reachable:          {np.mean(both) * 100:.1f}%")
    print(f"  Items placed:            {np.mean(stats['items_placed']):.2f}")
    print(f"  Monsters placed:         {np.mean(stats['monsters_placed']):.2f}")

    degrees, counts = np.unique(stats["out_degree"], return_counts=True)
    spread = ", ".join(f"{d}: {c}" for d, c in zip(degrees, counts))
    print(f"  Out-degree histogram:    {spread}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Cave generation statistics")
    parser.add_argument("--seeds", type=int, default=1000, help="Number of seeds")
    parser.add_argument("--rooms", type=int, default=10, help="Rooms per cave")
    args = parser.parse_args()

    print(f"Generating {args.seeds} caves of {args.rooms} rooms...")
    t0 = time.time()
    stats = collect(args.seeds, args.rooms)
    elapsed = time.time() - t0
    print(f"  Time: {elapsed:.1f}s ({elapsed / args.seeds * 1000:.1f}ms/cave)")
    report(stats, args.rooms)


if __name__ == "__main__":
    main()
