from __future__ import annotations

from typing import Iterator, List, Tuple

# Board is 8x8 held in one 64-bit int per side. Bit 63 is A1 and bit 0 is H8,
# so the board reads like the integer printed in binary, top-left first.

FULL = 0xFFFFFFFFFFFFFFFF

# Edge masks: squares a run may pass *through* along an axis without wrapping.
LR_EDGE_MASK = 0x7E7E7E7E7E7E7E7E    # drop files A and H
TB_EDGE_MASK = 0x00FFFFFFFFFFFF00    # drop ranks 1 and 8
DIAG_EDGE_MASK = 0x007E7E7E7E7E7E00  # drop the whole border

# (shift, edge_mask) per axis: horizontal, vertical, then the two diagonals.
DIRECTION_TABLE: Tuple[Tuple[int, int], ...] = (
    (1, LR_EDGE_MASK),
    (8, TB_EDGE_MASK),
    (7, DIAG_EDGE_MASK),
    (9, DIAG_EDGE_MASK),
)

# Interior squares between two opposite edges of an 8-square line.
FLOOD_STEPS = 6

# Multiplicative perfect hash: isolated bit * magic, top 6 bits index the table.
_INDEX_MAGIC = 0x03F566ED27179461
_INDEX_TABLE = (
    0, 1, 59, 2, 60, 40, 54, 3, 61, 32, 49, 41, 55, 19, 35, 4,
    62, 52, 30, 33, 50, 12, 14, 42, 56, 16, 27, 20, 36, 23, 44, 5,
    63, 58, 39, 53, 31, 48, 18, 34, 51, 29, 11, 13, 15, 26, 22, 43,
    57, 38, 47, 17, 28, 10, 25, 21, 37, 46, 9, 24, 45, 8, 7, 6,
)


def popcount(x: int) -> int:
    return x.bit_count()


def shift(bb: int, n: int, toward_high: bool) -> int:
    if toward_high:
        return (bb << n) & FULL
    return bb >> n


def flood_fill(seed: int, through: int, n: int, toward_high: bool) -> int:
    """Collect the run of `through` squares reachable from `seed` along one direction.

    `through` must already be restricted by the axis edge mask. The fill is
    unrolled to exactly FLOOD_STEPS shifts, which covers the longest interior
    run on an 8-wide board.
    """
    run = through & shift(seed, n, toward_high)
    run |= through & shift(run, n, toward_high)
    run |= through & shift(run, n, toward_high)
    run |= through & shift(run, n, toward_high)
    run |= through & shift(run, n, toward_high)
    run |= through & shift(run, n, toward_high)
    return run


def bit_index(bit: int) -> int:
    """Return the position of a single set bit in O(1)."""
    return _INDEX_TABLE[((bit * _INDEX_MAGIC) & FULL) >> 58]


def iter_moves(mask: int) -> Iterator[int]:
    """Yield each set bit of `mask` as its own single-bit mask, lowest first."""
    rest = mask & FULL
    while rest:
        low = rest & -rest
        yield 1 << bit_index(low)
        rest ^= low


def split_moves(mask: int) -> List[int]:
    return list(iter_moves(mask))
