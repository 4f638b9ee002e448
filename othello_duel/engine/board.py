from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .bitboard import FULL, popcount

# Standard opening: Black on E4/D5, White on D4/E5.
START_BLACK = 0x0000000810000000
START_WHITE = 0x0000001008000000


class Player(IntEnum):
    """Seat tag. Black is the first seat and moves on even turns."""

    BLACK = 0
    WHITE = 1

    @classmethod
    def for_turn(cls, turn_count: int) -> "Player":
        return cls(turn_count % 2)

    @property
    def opponent(self) -> "Player":
        return Player(1 - self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class BoardState:
    black: int
    white: int
    turn_count: int = 0

    def __post_init__(self) -> None:
        if self.black & ~FULL or self.white & ~FULL or self.black < 0 or self.white < 0:
            raise ValueError("masks must be unsigned 64-bit values")
        if self.black & self.white:
            raise ValueError(f"squares held by both sides: {self.black & self.white:#018x}")
        if self.turn_count < 0:
            raise ValueError("turn_count must be non-negative")

    @property
    def player(self) -> Player:
        return Player.for_turn(self.turn_count)

    @property
    def mover(self) -> int:
        return self.black if self.player is Player.BLACK else self.white

    @property
    def opponent(self) -> int:
        return self.white if self.player is Player.BLACK else self.black

    @property
    def occupied(self) -> int:
        return self.black | self.white

    @property
    def empty(self) -> int:
        return ~self.occupied & FULL

    def disc_count(self, player: Player) -> int:
        return popcount(self.black if player is Player.BLACK else self.white)


@dataclass(frozen=True)
class Winner:
    player: Player


@dataclass(frozen=True)
class Draw:
    pass


GameResult = Union[Winner, Draw]


def start_board() -> BoardState:
    return BoardState(START_BLACK, START_WHITE, 0)


def with_sides(state: BoardState, mover: int, opponent: int) -> BoardState:
    """Rebuild a state from mover/opponent masks and advance the turn."""
    if state.player is Player.BLACK:
        return BoardState(mover, opponent, state.turn_count + 1)
    return BoardState(opponent, mover, state.turn_count + 1)


def pass_turn(state: BoardState) -> BoardState:
    return BoardState(state.black, state.white, state.turn_count + 1)


def is_full(state: BoardState) -> bool:
    return state.occupied == FULL


def judge(state: BoardState) -> GameResult:
    """Decide the game by disc count. Valid on any position, full or not."""
    black = popcount(state.black)
    white = popcount(state.white)
    if black > white:
        return Winner(Player.BLACK)
    if white > black:
        return Winner(Player.WHITE)
    return Draw()
