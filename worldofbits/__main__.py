"""Entry point: ``python -m worldofbits``.

Supports two modes:
  - ``python -m worldofbits``          → Launch the FastAPI server for a map client
  - ``python -m worldofbits play``     → Play in the terminal
"""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from worldofbits.core.enums import EvictionPolicy

if TYPE_CHECKING:
    from worldofbits.config import GameConfig

logger = logging.getLogger(__name__)


def _add_game_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--spawn-probability", type=float, default=0.1)
    parser.add_argument("--neighborhood", type=int, default=3)
    parser.add_argument("--win-threshold", type=int, default=64)
    parser.add_argument(
        "--eviction-policy", type=str, default=EvictionPolicy.PERSISTENT.value,
        choices=[p.value for p in EvictionPolicy],
    )
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="World of Bits: map-hosted token crafting")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    _add_game_args(srv)

    # --- Terminal mode ---
    play = sub.add_parser("play", help="Play in the terminal")
    _add_game_args(play)

    return parser


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    from worldofbits.config import GameConfig

    return GameConfig(
        world_seed=args.seed,
        spawn_probability=args.spawn_probability,
        neighborhood_size=args.neighborhood,
        win_threshold=args.win_threshold,
        eviction_policy=EvictionPolicy(args.eviction_policy),
        log_level=args.log_level,
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from worldofbits.api.app import create_app

    app = create_app(_config_from_args(args))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_play(args: argparse.Namespace) -> None:
    import sys

    from worldofbits.engine.game import GameEngine
    from worldofbits.terminal import run_terminal
    from worldofbits.utils.logging import setup_logging

    config = _config_from_args(args)
    setup_logging(config.log_level, stream=sys.stderr)
    run_terminal(GameEngine(config), sys.stdin, sys.stdout)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    if args.command == "serve":
        _run_server(args)
    elif args.command == "play":
        _run_play(args)


if __name__ == "__main__":
    main()
