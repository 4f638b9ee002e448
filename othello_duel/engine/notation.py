"""
Coordinate notation for Othello squares.

Squares are written as a file letter and a rank digit, 'A1' to 'H8', with A1
in the top-left corner as the board is printed. Internally A1 is bit 63 and
H8 is bit 0; the square index used here is rank-major, A1=0 .. H8=63.
"""

from typing import List, Optional, Sequence

from .bitboard import bit_index

FILES = "ABCDEFGH"

# Special string for pass turns (no available moves)
PASS_NOTATION = '--'


def index_to_square(index: int) -> int:
    """Convert a rank-major square index (0-63) to its single-bit mask."""
    if index < 0 or index > 63:
        raise ValueError(f"Invalid square index: {index}")
    return 1 << (63 - index)


def square_to_index(square: int) -> int:
    if square <= 0 or square & (square - 1) or square.bit_length() > 64:
        raise ValueError(f"Not a single square: {square:#x}")
    return 63 - bit_index(square)


def square_to_notation(square: int) -> str:
    """Convert a single-bit square mask to notation (e.g. 'D3')."""
    rank, file = divmod(square_to_index(square), 8)
    return f"{FILES[file]}{rank + 1}"


def notation_to_square(notation: str) -> int:
    """Convert notation (e.g. 'd3', case-insensitive) to a single-bit square mask."""
    if notation == PASS_NOTATION:
        raise ValueError(f"Cannot convert pass notation '{PASS_NOTATION}' to a square")
    if len(notation) != 2:
        raise ValueError(f"Invalid notation format: {notation}")

    file = FILES.find(notation[0].upper())
    rank_char = notation[1]
    if file < 0 or not rank_char.isdigit() or not 1 <= int(rank_char) <= 8:
        raise ValueError(f"Invalid notation: {notation}")
    return index_to_square((int(rank_char) - 1) * 8 + file)


def describe_square(square: int) -> str:
    """Human-readable label that never raises; used in error messages."""
    try:
        return square_to_notation(square)
    except ValueError:
        return f"{square:#x}"


def moves_to_string(history: Sequence[Optional[int]]) -> str:
    """Join a game history into one string. `None` entries are passes."""
    return ''.join(PASS_NOTATION if sq is None else square_to_notation(sq) for sq in history)


def string_to_moves(moves_str: str) -> List[Optional[int]]:
    """Inverse of moves_to_string. Raises ValueError on malformed input."""
    if len(moves_str) % 2:
        raise ValueError(f"Incomplete notation: {moves_str}")
    moves: List[Optional[int]] = []
    for i in range(0, len(moves_str), 2):
        token = moves_str[i:i + 2]
        moves.append(None if token == PASS_NOTATION else notation_to_square(token))
    return moves
