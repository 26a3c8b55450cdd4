"""Headless command line tools for snake-core."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import numpy as np

from snake_core.config import GameConfig
from snake_core.controls import InputFrame
from snake_core.engine import GameState
from snake_core.snake import Direction

logger = logging.getLogger(__name__)

_FRAME_DT = 1.0 / 60.0


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-core",
        description="Headless snake simulation, replay, and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play seeded runs with a random input policy.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (overrides other flags).",
    )
    sim_p.add_argument("--runs", type=_positive_int, default=3)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument(
        "--max-frames", type=_positive_int, default=10_000,
        help="Frame cap per run.",
    )
    sim_p.add_argument(
        "--turn-chance", type=float, default=0.1,
        help="Per-frame probability of requesting a random direction.",
    )

    # --- replay ---
    replay_p = sub.add_parser(
        "replay", help="Replay a JSON move log and print the final state.",
    )
    replay_p.add_argument("log", help="Path to the move log.")
    replay_p.add_argument("--config", type=str, default=None)

    # --- init-config ---
    init_p = sub.add_parser("init-config", help="Write the default config.")
    init_p.add_argument("output", help="Destination JSON path.")

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for name in ("seed", "width", "height"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    if overrides:
        config = replace(config, **overrides)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    config = _load_config(args)
    state = GameState(config)
    policy_rng = np.random.default_rng(config.seed)
    directions = list(Direction)

    for run in range(1, args.runs + 1):
        state.handle_input(InputFrame(restart_requested=True))
        frames = 0
        while state.running and frames < args.max_frames:
            direction = None
            if policy_rng.random() < args.turn_chance:
                direction = directions[int(policy_rng.integers(len(directions)))]
            state.handle_input(InputFrame(direction=direction))
            state.update(_FRAME_DT)
            frames += 1

        outcome = state.reason.value if state.reason else "frame limit"
        print(  # noqa: T201
            f"Run {run}: {outcome} after {state.tick} ticks | "
            f"Apples {state.score.apples_eaten} | "
            f"Record {state.score.apples_record}"
        )
    return 0


def _run_replay(args: argparse.Namespace) -> int:
    raw = json.loads(Path(args.log).read_text())
    config = GameConfig.load(args.config) if args.config else GameConfig()
    if "seed" in raw:
        config = replace(config, seed=raw["seed"])

    state = GameState(config)
    state.start()
    for i, move in enumerate(raw.get("moves", [])):
        if not state.running:
            logger.info("Run ended before move %d; ignoring the rest.", i)
            break
        if move is not None:
            state.request_direction(Direction[move.upper()])
        state.step()

    print(json.dumps(state.snapshot().model_dump(mode="json"), indent=2))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-core`` CLI."""
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
        "replay": _run_replay,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
