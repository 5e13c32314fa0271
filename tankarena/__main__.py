"""Entry point: ``python -m tankarena``.

Supports two modes:
  - ``python -m tankarena run``    → Build one match and report it (default)
  - ``python -m tankarena serve``  → Build one match and serve the inspection API
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_STALLED = 2


def _add_match_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--assets", type=str, default="assets", help="Asset root containing maps/")
    parser.add_argument("--map", type=str, default=None, help="Map filename under maps/ (random if omitted)")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--render", action="store_true", help="Build the full (rendered) world")
    parser.add_argument("--reject-single-spawn", action="store_true")
    parser.add_argument("--max-frames", type=int, default=600)
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tank arena map loader and match initializer")
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Build one match and print a summary (default)")
    _add_match_options(run)
    run.add_argument("--dump", type=str, default=None, help="Write the materialized world as JSON")

    srv = sub.add_parser("serve", help="Serve the match inspection API")
    _add_match_options(srv)
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)

    return parser


def _config_from_args(args: argparse.Namespace):
    from tankarena.config import ArenaConfig

    return ArenaConfig(
        world_seed=args.seed,
        asset_root=args.assets,
        selected_map=args.map,
        reject_single_spawn=args.reject_single_spawn,
        render_mode=args.render,
        max_frames=args.max_frames,
        log_level=args.log_level,
        dump_file=getattr(args, "dump", None),
    )


def _run_match(args: argparse.Namespace) -> int:
    from tankarena.core.errors import ArenaError
    from tankarena.engine.plugin import build_app
    from tankarena.engine.snapshot import MatchSnapshot
    from tankarena.utils.logging import setup_logging
    from tankarena.utils.world_dump import WorldDumpWriter

    setup_logging(args.log_level)
    try:
        config = _config_from_args(args)
        app = build_app(config)
        settled = app.run(config.max_frames)
    except ArenaError as exc:
        logger.warning("%s", exc)
        return EXIT_FATAL

    snapshot = MatchSnapshot.from_app(app)
    for tank in snapshot.tanks:
        logger.info("Player %d at %s", tank.player, tank.position)
    if config.dump_file:
        WorldDumpWriter(config.dump_file, config.world_seed).write(snapshot)
    return EXIT_OK if settled else EXIT_STALLED


def _run_server(args: argparse.Namespace) -> int:
    import uvicorn

    from tankarena.api.app import create_app
    from tankarena.core.errors import ArenaError
    from tankarena.utils.logging import setup_logging

    try:
        config = _config_from_args(args)
    except ArenaError as exc:
        setup_logging(args.log_level)
        logger.warning("%s", exc)
        return EXIT_FATAL
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        args = parser.parse_args(["run"])
    if args.command == "serve":
        return _run_server(args)
    return _run_match(args)


if __name__ == "__main__":
    raise SystemExit(main())
