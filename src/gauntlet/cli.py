from __future__ import annotations

import argparse
import json
import logging
import secrets
import sys
from typing import Optional, Union

from . import __version__
from .batch import read_names, run_batch, write_batch
from .config import load_config
from .core.random import RandomSource
from .core.seed import resolve_seed
from .dungeon.generation import generate_dungeons
from .errors import GauntletError
from .game import simulate

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _parse_seed(raw: Optional[str]) -> Union[int, str, None]:
    if raw is None:
        return None
    s = raw.strip()
    # Plain decimal first so "010" is 10; then 0x/0o/0b prefixes.
    for base in (10, 0):
        try:
            return int(s, base)
        except ValueError:
            continue
    return s


def prompt_name() -> str:
    print("Please enter your name:")
    return input("> ").strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gauntlet",
        description="Seed-driven roguelike gauntlet simulator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    parser.add_argument("--config", default=None, help="Path to a YAML tuning file")
    sub = parser.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Simulate a single run")
    run_p.add_argument("name", nargs="?", default=None, help="Player name (prompted if omitted)")
    run_p.add_argument("--seed", default=None, help="Integer or string seed; defaults to the player name")
    run_p.add_argument("--json", action="store_true", help="Print the run report as JSON")

    batch_p = sub.add_parser("batch", help="Simulate one run per name in a file and print CSV")
    batch_p.add_argument("path", help="File with one player name per line")
    batch_p.add_argument("-o", "--output", default=None, help="Write CSV here instead of stdout")
    batch_p.add_argument("--header", action="store_true", help="Emit a CSV header row")

    names_p = sub.add_parser("names", help="Print generated dungeon names")
    names_p.add_argument("--count", type=int, default=14, help="Number of names to generate")
    names_p.add_argument("--seed", default=None, help="Seed for the name draws; random if omitted")
    return parser


def _cmd_run(args: argparse.Namespace, config) -> int:
    if args.name is not None:
        name = args.name
    else:
        try:
            name = prompt_name()
        except EOFError:
            logger.error("No player name given and stdin is closed")
            return 1
    report = simulate(name, _parse_seed(args.seed), config)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2, sort_keys=True))
        return 0
    print(f"{report.name} (seed {report.seed})")
    for dungeon in report.dungeons:
        print(f"  {dungeon}")
    print(f"Result: {report.result} after {report.total_stages} stages")
    print(report.greeting)
    return 0


def _cmd_batch(args: argparse.Namespace, config) -> int:
    if args.output is None:
        run_batch(args.path, sys.stdout, config, header=args.header)
        return 0
    names = read_names(args.path)
    try:
        with open(args.output, "w", encoding="utf-8", newline="") as out:
            write_batch(names, out, config, header=args.header)
    except OSError as exc:
        logger.error("Unable to write %s: %s", args.output, exc)
        return 1
    return 0


def _cmd_names(args: argparse.Namespace) -> int:
    seed = resolve_seed(_parse_seed(args.seed)) if args.seed is not None else secrets.randbits(64)
    rng = RandomSource(seed)
    for dungeon in generate_dungeons(args.count, rng):
        print(dungeon.display_name())
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_config(args.config)
        if args.command == "run":
            return _cmd_run(args, config)
        if args.command == "batch":
            return _cmd_batch(args, config)
        return _cmd_names(args)
    except GauntletError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
