import pytest

from othello_duel.engine.bitboard import FULL, popcount
from othello_duel.engine.board import (
    START_BLACK,
    START_WHITE,
    BoardState,
    Draw,
    Player,
    Winner,
    is_full,
    judge,
    pass_turn,
    start_board,
)
from othello_duel.engine.notation import notation_to_square as sq


def test_start_board():
    b = start_board()
    assert b.turn_count == 0
    assert b.player is Player.BLACK
    assert b.black == START_BLACK == sq("e4") | sq("d5")
    assert b.white == START_WHITE == sq("d4") | sq("e5")
    assert popcount(b.black) == popcount(b.white) == 2


def test_player_from_parity():
    assert Player.for_turn(0) is Player.BLACK
    assert Player.for_turn(1) is Player.WHITE
    assert Player.for_turn(58) is Player.BLACK
    assert Player.BLACK.opponent is Player.WHITE
    assert Player.WHITE.opponent is Player.BLACK
    assert Player.WHITE.label == "White"


def test_mover_and_opponent_follow_turn():
    b = start_board()
    assert (b.mover, b.opponent) == (b.black, b.white)
    p = pass_turn(b)
    assert (p.mover, p.opponent) == (b.white, b.black)


@pytest.mark.parametrize(
    "black, white, turn",
    [
        (1, 1, 0),
        (1 << 64, 0, 0),
        (-1, 0, 0),
        (0, 0, -1),
    ],
)
def test_board_state_rejects_invalid_values(black, white, turn):
    with pytest.raises(ValueError):
        BoardState(black, white, turn)


def test_board_state_is_immutable():
    b = start_board()
    with pytest.raises(AttributeError):
        b.black = 0  # type: ignore[misc]


def test_pass_changes_only_turn():
    b = BoardState(sq("a1"), sq("h8"), 7)
    p = pass_turn(b)
    assert (p.black, p.white) == (b.black, b.white)
    assert p.turn_count == 8
    assert p.player is Player.BLACK


def test_is_full():
    assert not is_full(start_board())
    assert is_full(BoardState(FULL, 0, 60))
    assert is_full(BoardState(0xFFFFFFFF00000000, 0x00000000FFFFFFFF, 60))
    assert not is_full(BoardState(0xFFFFFFFF00000000, 0x00000000FFFFFFFE, 59))


def test_judge_counts_discs():
    assert judge(start_board()) == Draw()
    assert judge(BoardState(sq("a1") | sq("b1"), sq("h8"), 3)) == Winner(Player.BLACK)
    assert judge(BoardState(sq("a1"), sq("h8") | sq("g8"), 3)) == Winner(Player.WHITE)
    assert judge(BoardState(0, 0, 0)) == Draw()


def test_full_board_with_equal_counts_is_draw():
    b = BoardState(0xFFFFFFFF00000000, 0x00000000FFFFFFFF, 60)
    assert is_full(b)
    assert judge(b) == Draw()


def test_judge_agrees_with_recount():
    b = BoardState(0x0F0F0F0F00000000, 0x00000000F0F0F0FF, 10)
    result = judge(b)
    black, white = bin(b.black).count("1"), bin(b.white).count("1")
    assert black == 16 and white == 20
    assert result == Winner(Player.WHITE)
    assert b.disc_count(Player.BLACK) == black
    assert b.disc_count(Player.WHITE) == white
