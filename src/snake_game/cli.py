"""Headless CLI for running scripted games."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from snake_game.config import GameConfig

logger = logging.getLogger(__name__)


def _add_config_arg(parser: argparse.ArgumentParser, default) -> None:
    # Accepted before or after the subcommand.
    parser.add_argument(
        "--config", type=str, default=default,
        help="Path to a JSON config file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-game",
        description="Run the snake game without a display.",
    )
    _add_config_arg(parser, default=None)
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a scripted key sequence and print the board.",
    )
    sim_p.add_argument("--ticks", type=int, default=20)
    sim_p.add_argument(
        "--keys", type=str, default="",
        help="Comma-separated key names applied one per tick, "
        "e.g. ArrowUp,ArrowUp,ArrowLeft. Empty entries skip a tick.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    _add_config_arg(sim_p, default=argparse.SUPPRESS)

    # --- show-config ---
    show_p = sub.add_parser(
        "show-config", help="Print the effective config as JSON.",
    )
    _add_config_arg(show_p, default=argparse.SUPPRESS)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    seed = getattr(args, "seed", None)
    if seed is not None:
        d = config.to_dict()
        d["seed"] = seed
        config = GameConfig.from_dict(d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    from snake_game.controls import InputMapper
    from snake_game.engine import GameEngine
    from snake_game.render import render_text, reset_label

    engine = GameEngine(_load_config(args))
    mapper = InputMapper(engine)
    keys = args.keys.split(",") if args.keys else []

    state = engine.get_state()
    for i in range(args.ticks):
        if i < len(keys) and keys[i]:
            mapper.press(keys[i].strip())
        state = engine.tick()
        if state["game_over"]:
            break

    logger.info("Simulation ended at tick %d.", state["tick"])
    print(render_text(state))  # noqa: T201
    print(f"[{reset_label(state)}]")  # noqa: T201
    return 0


def _run_show_config(args: argparse.Namespace) -> int:
    print(json.dumps(_load_config(args).to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-game`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "show-config": _run_show_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
