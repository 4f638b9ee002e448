from __future__ import annotations

from typing import Iterable, Optional

from .bitboard import iter_moves
from .board import BoardState, pass_turn, start_board
from .movegen import apply_move, legal_moves_mask, play_square
from .notation import PASS_NOTATION, notation_to_square


def perft(board: BoardState, depth: int) -> int:
    """Count leaf nodes of the move tree. A forced pass counts as one move."""
    if depth == 0:
        return 1
    mask = legal_moves_mask(board)
    if mask == 0:
        passed = pass_turn(board)
        if legal_moves_mask(passed) == 0:
            # game over before the horizon
            return 1
        return perft(passed, depth - 1)
    total = 0
    for sq in iter_moves(mask):
        total += perft(apply_move(board, sq), depth - 1)
    return total


def play_moves(board: Optional[BoardState], moves: Iterable[str]) -> BoardState:
    """Replay notation moves ('f5', '--', ...) from `board` or the start position."""
    b = start_board() if board is None else board
    for mv in moves:
        if mv == PASS_NOTATION:
            if legal_moves_mask(b):
                raise ValueError(f"pass not allowed at turn {b.turn_count + 1}")
            b = pass_turn(b)
            continue
        b = play_square(b, notation_to_square(mv))
    return b
