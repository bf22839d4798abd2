"""Command-line entry point.

Usage:
    ny-gothor [--seed N] [--rooms N] [--save-dir DIR] [--text-speed MS]
    ny-gothor --autoplay [random|heuristic] [--seed N]
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import replace
from pathlib import Path

from ny_gothor.config import GameConfig
from ny_gothor.narration.renderer import ConsoleNarrator, Narrator, NullNarrator
from ny_gothor.sim.content.registry import ContentRegistry
from ny_gothor.sim.core.rng import GameRNG
from ny_gothor.sim.dungeon.run_manager import RunManager
from ny_gothor.sim.persistence import SaveError, SaveStore
from ny_gothor.sim.play_agents.console_agent import ConsoleAgent
from ny_gothor.sim.play_agents.heuristic_agent import HeuristicAgent
from ny_gothor.sim.play_agents.random_agent import RandomAgent
from ny_gothor.sim.telemetry import FLED, WIN, RunTelemetry

logger = logging.getLogger(__name__)

_AUTOPLAY_AGENTS = {
    "random": RandomAgent,
    "heuristic": HeuristicAgent,
}

_MENU_NEW, _MENU_LOAD, _MENU_HELP, _MENU_QUIT = 1, 2, 3, 4


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ny-gothor",
        description="Ny'Gothor - a text adventure in a procedurally generated cave.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Master seed (default: random)")
    parser.add_argument("--rooms", type=int, default=None, help="Number of rooms (default: 10)")
    parser.add_argument("--save-dir", type=Path, default=None, help="Directory for save files")
    parser.add_argument(
        "--text-speed",
        type=int,
        default=None,
        help="Milliseconds per character of prose; 0 prints instantly",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--autoplay",
        nargs="?",
        const="random",
        default=None,
        choices=sorted(_AUTOPLAY_AGENTS),
        help="Let an agent play one game and print a summary",
    )
    parser.add_argument(
        "--max-visits",
        type=int,
        default=1000,
        help="Room-visit cap for --autoplay (default: 1000)",
    )
    parser.add_argument(
        "--show-prose",
        action="store_true",
        help="Print the narration during --autoplay",
    )
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_config(args: argparse.Namespace) -> GameConfig:
    """Environment overrides first, then command-line flags."""
    config = GameConfig.from_env()
    if args.rooms is not None:
        config = replace(config, room_count=args.rooms)
    if args.save_dir is not None:
        config = replace(config, save_dir=args.save_dir.expanduser())
    if args.text_speed is not None:
        config = replace(config, text_speed_ms=max(0, args.text_speed))
    return config


def format_summary(telemetry: RunTelemetry) -> str:
    encounters = telemetry.encounters
    won = sum(1 for e in encounters if e.result == WIN)
    fled = sum(1 for e in encounters if e.result == FLED)
    lines = [
        f"Seed:              {telemetry.seed}",
        f"Result:            {telemetry.final_result}",
        f"Room visits:       {len(telemetry.rooms_visited)}",
        f"Distinct rooms:    {len(set(telemetry.rooms_visited))}",
        f"Encounters:        {len(encounters)} ({won} won, {fled} fled)",
        f"Items collected:   {', '.join(telemetry.items_collected) or '-'}",
        f"Incantation:       {'spoken' if telemetry.incantation_spoken else 'not spoken'}",
        f"Final health:      {telemetry.final_health}",
        f"Final sanity:      {telemetry.final_sanity}",
    ]
    return "\n".join(lines)


def _new_seed(args: argparse.Namespace) -> int:
    if args.seed is not None:
        return args.seed
    return random.randrange(2**32)


# =============================================================================
# Autoplay
# =============================================================================

def autoplay(
    args: argparse.Namespace,
    config: GameConfig,
    registry: ContentRegistry,
) -> RunTelemetry:
    rng = GameRNG(_new_seed(args))
    agent = _AUTOPLAY_AGENTS[args.autoplay](rng.fork("agent"))
    narrator: Narrator = (
        ConsoleNarrator(text_speed_ms=0) if args.show_prose else NullNarrator()
    )
    manager = RunManager(
        registry, agent, rng,
        config=config,
        narrator=narrator,
        max_room_visits=args.max_visits,
    )
    return manager.run()


# =============================================================================
# Interactive
# =============================================================================

def _load_game(
    agent: ConsoleAgent,
    narrator: Narrator,
    store: SaveStore,
    registry: ContentRegistry,
    config: GameConfig,
    args: argparse.Namespace,
) -> None:
    saves = store.list_saves()
    if not saves:
        narrator.say("No saved games found.")
        return

    narrator.say("Saved games:")
    for i, name in enumerate(saves, start=1):
        narrator.say(f"{i}. {name}", paced=False)
    name = saves[agent.choose_menu_option(len(saves)) - 1]

    try:
        state = store.load(name)
    except SaveError as e:
        logger.warning("Load failed: %s", e)
        narrator.say(f"Could not load the game: {e}")
        return

    seed = state.seed if state.seed is not None else _new_seed(args)
    manager = RunManager(
        registry, agent, GameRNG(seed),
        config=config, narrator=narrator, save_store=store,
    )
    manager.play(state)


def interactive(
    args: argparse.Namespace,
    config: GameConfig,
    registry: ContentRegistry,
) -> None:
    narrator = ConsoleNarrator(text_speed_ms=config.text_speed_ms)
    agent = ConsoleAgent(narrator)
    store = SaveStore(config.save_dir)

    while True:
        narrator.rule()
        narrator.scene("main_menu.txt.j2")
        choice = agent.choose_menu_option(_MENU_QUIT)

        if choice == _MENU_NEW:
            manager = RunManager(
                registry, agent, GameRNG(_new_seed(args)),
                config=config, narrator=narrator, save_store=store,
            )
            manager.run()
        elif choice == _MENU_LOAD:
            _load_game(agent, narrator, store, registry, config, args)
        elif choice == _MENU_HELP:
            narrator.scene("help.txt.j2")
        else:
            return


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"error: {e}")
        return 2

    registry = ContentRegistry()
    registry.load_defaults()

    if args.autoplay:
        print(format_summary(autoplay(args, config, registry)))
        return 0

    try:
        interactive(args, config, registry)
    except (EOFError, KeyboardInterrupt):
        print()
    return 0
