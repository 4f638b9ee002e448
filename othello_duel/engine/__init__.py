"""Bitboard Othello engine: board state, move generation and captures."""

from .board import BoardState, Draw, GameResult, Player, Winner, is_full, judge, pass_turn, start_board
from .movegen import IllegalMoveError, apply_move, flip_mask, legal_moves_mask, play_square

__all__ = [
    "BoardState",
    "Draw",
    "GameResult",
    "IllegalMoveError",
    "Player",
    "Winner",
    "apply_move",
    "flip_mask",
    "is_full",
    "judge",
    "legal_moves_mask",
    "pass_turn",
    "play_square",
    "start_board",
]
