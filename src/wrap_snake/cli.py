"""Command-line launcher for Wrap Snake."""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from wrap_snake.config import GameConfig
from wrap_snake.snake import Direction
from wrap_snake.state import GameSnapshot

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrap-snake",
        description="Wrap Snake game server and headless simulator.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Serve the game over HTTP/WebSocket.")
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    serve_p.add_argument("--cols", type=int, default=None)
    serve_p.add_argument("--rows", type=int, default=None)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play one game headlessly with a greedy bot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--cols", type=int, default=None)
    sim_p.add_argument("--rows", type=int, default=None)
    sim_p.add_argument("--ticks", type=int, default=500)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--show", action="store_true", help="Print every frame.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for name in ("cols", "rows", "seed"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _wrapped_distance(a: int, b: int, size: int) -> int:
    d = abs(a - b)
    return min(d, size - d)


def choose_direction(
    snapshot: GameSnapshot, current: Direction, rng: np.random.Generator,
) -> Direction:
    """Pick a safe move that gets closer to the food, if there is one."""
    occupied = set(snapshot.snake)
    hx, hy = snapshot.head
    fx, fy = snapshot.food
    scored: list[tuple[int, float, Direction]] = []
    for direction in Direction:
        if direction.is_reverse_of(current):
            continue
        nx = (hx + direction.dx) % snapshot.cols
        ny = (hy + direction.dy) % snapshot.rows
        if (nx, ny) in occupied:
            continue
        dist = (
            _wrapped_distance(nx, fx, snapshot.cols)
            + _wrapped_distance(ny, fy, snapshot.rows)
        )
        scored.append((dist, float(rng.random()), direction))
    if not scored:
        return current
    return min(scored, key=lambda item: (item[0], item[1]))[2]


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from wrap_snake.server.app import create_app

    config = _load_config(args)
    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def _run_simulate(args: argparse.Namespace) -> int:
    from wrap_snake.engine import GameEngine
    from wrap_snake.render import TextRenderer
    from wrap_snake.scheduler import ManualScheduler

    config = _load_config(args)
    scheduler = ManualScheduler()
    renderer = TextRenderer(stream=sys.stdout if args.show else None)
    engine = GameEngine(config, scheduler=scheduler, renderer=renderer)
    policy_rng = np.random.default_rng(config.seed)

    engine.start()
    ticks = 0
    while ticks < args.ticks and engine.running:
        engine.set_direction(
            choose_direction(engine.snapshot(), engine.direction, policy_rng),
        )
        ticks += scheduler.fire()

    engine.pause()
    snap = engine.snapshot()
    print(  # noqa: T201
        f"ticks={ticks} score={snap.score} speed={snap.speed} "
        f"length={len(snap.snake)} status={snap.status.value}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``wrap-snake`` CLI."""
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
        "serve": _run_serve,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
