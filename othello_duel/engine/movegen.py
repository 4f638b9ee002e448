from __future__ import annotations

from .bitboard import DIRECTION_TABLE, flood_fill, shift
from .board import BoardState, with_sides


class IllegalMoveError(ValueError):
    pass


def legal_moves_mask(state: BoardState) -> int:
    """Bitmask of squares the side to move may play; 0 means it must pass."""
    own, opp = state.mover, state.opponent
    moves = 0
    for n, edge in DIRECTION_TABLE:
        through = opp & edge
        up = flood_fill(own, through, n, True)
        down = flood_fill(own, through, n, False)
        moves |= shift(up, n, True) | shift(down, n, False)
    return moves & state.empty


def flip_mask(state: BoardState, square: int) -> int:
    """Opponent discs captured by the side to move playing `square`.

    For each direction the run flooding outward from the move is intersected
    with the run flooding back from the mover's own discs; only runs closed
    by an own disc survive.
    """
    own, opp = state.mover, state.opponent
    flips = 0
    for n, edge in DIRECTION_TABLE:
        through = opp & edge
        flips |= flood_fill(square, through, n, True) & flood_fill(own, through, n, False)
        flips |= flood_fill(square, through, n, False) & flood_fill(own, through, n, True)
    return flips


def apply_move(state: BoardState, square: int) -> BoardState:
    # `square` must come from legal_moves_mask(state); not re-checked here.
    flips = flip_mask(state, square)
    return with_sides(state, state.mover ^ square ^ flips, state.opponent ^ flips)


def play_square(state: BoardState, square: int) -> BoardState:
    """Validating variant of apply_move for moves that arrive from outside."""
    if square == 0 or square & (square - 1) or not (square & legal_moves_mask(state)):
        from .notation import describe_square

        raise IllegalMoveError(f"illegal move {describe_square(square)} at turn {state.turn_count + 1}")
    return apply_move(state, square)
