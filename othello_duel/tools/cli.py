from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from dataclasses import replace
from typing import List, Optional

from othello_duel.config import LOG_LEVELS, SEAT_KINDS, ConfigError, Settings, load_settings
from othello_duel.game.machine import OthelloGame
from othello_duel.game.players import make_chooser
from othello_duel.logging_setup import log_event, setup_logging
from othello_duel.ui.console import ConsoleDisplay, ask_play_again, ask_swap_seats


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="othello-duel", description="Play Othello in the terminal")
    p.add_argument("--config", type=pathlib.Path, default=None, help="Path to a TOML config file")
    p.add_argument("--black", choices=SEAT_KINDS, default=None, help="Who plays black (first seat)")
    p.add_argument("--white", choices=SEAT_KINDS, default=None, help="Who plays white (second seat)")
    p.add_argument("--seed", type=int, default=None, help="Random seed for CPU seats")
    swap = p.add_mutually_exclusive_group()
    swap.add_argument("--swap", dest="swap", action="store_const", const=True, default=None,
                      help="Swap black and white without asking")
    swap.add_argument("--no-swap", dest="swap", action="store_const", const=False,
                      help="Keep the configured seats without asking")
    p.add_argument("--once", action="store_true", help="Play a single match and exit")
    p.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, default=None)
    return p


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    seats = replace(
        settings.seats,
        black=args.black or settings.seats.black,
        white=args.white or settings.seats.white,
    )
    log_settings = replace(settings.logging, level=args.log_level or settings.logging.level)
    seed = args.seed if args.seed is not None else settings.cpu_seed
    return replace(settings, seats=seats, logging=log_settings, cpu_seed=seed)


def run_session(settings: Settings, swap: Optional[bool], once: bool) -> int:
    log = logging.getLogger(__name__)
    seed = settings.cpu_seed
    # Seat choosers live for the whole session so seeded CPU play stays reproducible.
    black = make_chooser(settings.seats.black, seed)
    white = make_chooser(settings.seats.white, None if seed is None else seed + 1)
    display = ConsoleDisplay(settings.display)

    matches = 0
    while True:
        game = OthelloGame(black, white, display)
        do_swap = swap
        if do_swap is None:
            do_swap = ask_swap_seats(settings.seats.black, settings.seats.white, settings.display)
        if do_swap:
            game.swap_seats()
        game.play()
        matches += 1
        if once or not ask_play_again():
            break
    log.info("Session finished after %d match(es)", matches)
    log_event("session", "finished", matches=matches)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = apply_overrides(load_settings(args.config), args)
    except ConfigError as exc:
        print(f"othello-duel: {exc}", file=sys.stderr)
        return 2

    setup_logging(
        level=settings.logging.level,
        log_path=pathlib.Path(settings.logging.file),
        overwrite=settings.logging.overwrite,
    )
    logging.getLogger(__name__).info(
        "Starting session: black=%s white=%s seed=%s",
        settings.seats.black, settings.seats.white, settings.cpu_seed,
    )
    try:
        return run_session(settings, args.swap, args.once)
    except (EOFError, KeyboardInterrupt):
        print()
        logging.getLogger(__name__).info("Session ended by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
