from __future__ import annotations

import argparse
import sys
from time import perf_counter
from typing import List, Optional

from othello_duel.engine.board import start_board
from othello_duel.engine.perft import perft, play_moves


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="othello-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--moves", type=str, default=None, help="move sequence like f5d6c3, '--' for a pass")
    args = p.parse_args(argv)

    b = start_board()
    if args.moves:
        try:
            tokens = [args.moves[i : i + 2] for i in range(0, len(args.moves), 2)]
            b = play_moves(b, tokens)
        except ValueError as exc:
            print(f"othello-perft: {exc}", file=sys.stderr)
            return 2
    t0 = perf_counter()
    n = perft(b, args.depth)
    dt = perf_counter() - t0
    print(f"perft(d={args.depth})={n} in {dt:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
