from __future__ import annotations

import random

import pytest

from othello_duel.engine.bitboard import FULL, popcount, split_moves
from othello_duel.engine.board import BoardState, Player, pass_turn, start_board
from othello_duel.engine.movegen import IllegalMoveError, apply_move, flip_mask, legal_moves_mask, play_square
from othello_duel.engine.notation import index_to_square, notation_to_square as sq, square_to_notation

DIRS8 = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def ref_flips(state: BoardState, idx: int) -> int:
    """Square-by-square reference: walk each of the eight rays from `idx`."""
    own, opp = state.mover, state.opponent
    r, f = divmod(idx, 8)
    flips = 0
    for dr, df in DIRS8:
        run = 0
        rr, ff = r + dr, f + df
        while 0 <= rr < 8 and 0 <= ff < 8 and opp & index_to_square(rr * 8 + ff):
            run |= index_to_square(rr * 8 + ff)
            rr, ff = rr + dr, ff + df
        if run and 0 <= rr < 8 and 0 <= ff < 8 and own & index_to_square(rr * 8 + ff):
            flips |= run
    return flips


def ref_legal(state: BoardState) -> int:
    mask = 0
    for idx in range(64):
        s = index_to_square(idx)
        if not state.occupied & s and ref_flips(state, idx):
            mask |= s
    return mask


def random_states(seed: int, games: int):
    rng = random.Random(seed)
    for _ in range(games):
        b = start_board()
        passes = 0
        while passes < 2:
            yield b
            moves = split_moves(legal_moves_mask(b))
            if not moves:
                b = pass_turn(b)
                passes += 1
                continue
            passes = 0
            b = apply_move(b, rng.choice(moves))


def test_opening_moves():
    b = start_board()
    moves = split_moves(legal_moves_mask(b))
    assert len(moves) == 4
    assert {square_to_notation(m) for m in moves} == {"D3", "C4", "F5", "E6"}


@pytest.mark.parametrize("move", ["d3", "c4", "f5", "e6"])
def test_each_opening_move_places_one_and_flips_one(move):
    b = start_board()
    b2 = apply_move(b, sq(move))
    assert b2.turn_count == 1
    assert b2.player is Player.WHITE
    assert popcount(b2.black) == 4
    assert popcount(b2.white) == 1
    assert popcount(b2.occupied) == 5


def test_d3_flips_d4():
    b2 = apply_move(start_board(), sq("d3"))
    assert flip_mask(start_board(), sq("d3")) == sq("d4")
    assert b2.black == sq("d3") | sq("d4") | sq("d5") | sq("e4")
    assert b2.white == sq("e5")


def test_movegen_matches_reference_on_random_games():
    for b in random_states(0xC0FFEE, 12):
        assert legal_moves_mask(b) == ref_legal(b)
        for m in split_moves(legal_moves_mask(b)):
            idx = 63 - (m.bit_length() - 1)
            assert flip_mask(b, m) == ref_flips(b, idx)


def test_invariants_over_random_games():
    for b in random_states(2025, 20):
        assert b.black & b.white == 0
        assert popcount(b.black) + popcount(b.white) <= 64
        mask = legal_moves_mask(b)
        assert mask & b.occupied == 0
        if mask == 0:
            p = pass_turn(b)
            assert (p.black, p.white, p.turn_count) == (b.black, b.white, b.turn_count + 1)
            continue
        for m in split_moves(mask):
            b2 = apply_move(b, m)
            assert popcount(b2.occupied) == popcount(b.occupied) + 1
            assert b2.turn_count == b.turn_count + 1
            assert b2.black & b2.white == 0
            # flipped discs change owner, nothing else moves
            assert b2.mover | b2.opponent == b.occupied | m


def test_capture_multiple_directions():
    # Black on A1, C3 and H2; White on B1, B2, C2, D2..G2; Black to play C1
    black = sq("a1") | sq("c3") | sq("h2")
    white = sq("b1") | sq("b2") | sq("c2") | sq("d2") | sq("e2") | sq("f2") | sq("g2")
    b = BoardState(black, white, 0)
    flips = flip_mask(b, sq("c1"))
    # west: B1 bracketed by A1; south: C2 bracketed by C3; south-east: D2 then E3 empty, no capture
    assert flips == sq("b1") | sq("c2")


def test_no_wraparound_captures():
    # White run on rank 1 ending at H1 must not connect to A2 on the next rank
    black = sq("a2")
    white = sq("f1") | sq("g1") | sq("h1")
    b = BoardState(black, white, 0)
    assert legal_moves_mask(b) & sq("e1") == 0
    assert legal_moves_mask(b) == 0


def test_filling_last_square():
    empty = sq("a1")
    black = sq("h1")
    white = FULL ^ empty ^ black
    b = BoardState(black, white, 0)
    assert legal_moves_mask(b) == empty
    b2 = apply_move(b, empty)
    assert b2.occupied == FULL
    assert b2.black == sum(sq(f"{f}1") for f in "abcdefgh")


def test_play_square_rejects_illegal_moves():
    b = start_board()
    with pytest.raises(IllegalMoveError):
        play_square(b, sq("a1"))
    with pytest.raises(IllegalMoveError):
        play_square(b, sq("d3") | sq("c4"))
    with pytest.raises(ValueError):
        play_square(b, 0)
    assert play_square(b, sq("f5")) == apply_move(b, sq("f5"))
