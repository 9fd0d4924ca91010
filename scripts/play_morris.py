#!/usr/bin/env python3
"""Interactive hot-seat CLI for a game of Nine Men's Morris."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from morris.rules_schema import DEFAULT_RULES, load_rules
from morris.service import GameService

QUIT_COMMANDS = {"quit", "exit"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Nine Men's Morris on one terminal.")
    parser.add_argument("--rules", type=Path, default=None, help="JSON file with a rule set.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    return parser.parse_args(argv)


def play(service: GameService, lines: Iterable[str], out: TextIO) -> Optional[str]:
    """Feed input lines to the service until the game ends; return the winner symbol."""
    print(service.handle("board"), file=out)
    for line in lines:
        if not line.strip():
            continue
        if line.strip().lower() in QUIT_COMMANDS:
            break
        print(service.handle(line), file=out)
        view = service.view()
        if view.is_finished:
            return view.winner
    return None


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    rules = load_rules(args.rules) if args.rules else DEFAULT_RULES
    service = GameService(rules)
    print("Type 'help' for the action notation.")
    play(service, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
