"""Entry point: ``python -m kutulu_bot``.

Supports two modes:
  - ``python -m kutulu_bot``          → Play against the referee on stdin/stdout
  - ``python -m kutulu_bot serve``    → Launch the FastAPI bot server
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kutulu Evasion Bot")
    sub = parser.add_subparsers(dest="command")

    # --- Referee mode (default) ---
    play = sub.add_parser("play", help="Play one game over stdin/stdout (default)")
    play.add_argument("--max-turns", type=int, default=None)
    play.add_argument("--quiet", action="store_true", help="Skip the per-turn map/entity dump")
    play.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Server mode ---
    srv = sub.add_parser("serve", help="Start the FastAPI bot server")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_play(args: argparse.Namespace) -> int:
    from kutulu_bot.config import BotConfig
    from kutulu_bot.engine.turn_driver import TurnDriver
    from kutulu_bot.errors import BotError
    from kutulu_bot.utils.logging import setup_logging

    config = BotConfig(
        log_level=args.log_level,
        diagnostics=not args.quiet,
        max_turns=args.max_turns,
    )
    setup_logging(config.log_level)

    driver = TurnDriver(sys.stdin, sys.stdout, config)
    try:
        driver.run()
    except BotError as exc:
        logger.error("Fatal on turn %d: %s", driver.turn, exc)
        return 1
    return 0


def _run_server(args: argparse.Namespace) -> int:
    import uvicorn

    from kutulu_bot.api.app import create_app
    from kutulu_bot.config import BotConfig

    config = BotConfig(log_level=args.log_level, host=args.host, port=args.port)
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        return _run_server(args)
    if args.command is None:
        args = parser.parse_args(["play"])
    return _run_play(args)


if __name__ == "__main__":
    sys.exit(main())
