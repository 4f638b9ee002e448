"""Plain-text console: board display, move list, and the between-match prompts."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..config import DisplaySettings
from ..engine.board import BoardState, GameResult, Player, Winner
from ..engine.notation import square_to_notation
from .render import DEFAULT_GLYPHS, glyph_for, render_board

SEAT_LABELS = {"human": "You", "cpu": "CPU"}


def side_label(player: Player, glyphs: DisplaySettings = DEFAULT_GLYPHS) -> str:
    return f"{player.label}[{glyph_for(player, glyphs)}]"


class ConsoleDisplay:
    def __init__(self, glyphs: DisplaySettings = DEFAULT_GLYPHS, write: Callable[[str], None] = print) -> None:
        self.glyphs = glyphs
        self.write = write

    def show_board(self, board: BoardState) -> None:
        self.write(render_board(board, self.glyphs))

    def show_moves(self, board: BoardState, moves: List[int]) -> None:
        self.write(f"Turn {board.turn_count + 1} - {side_label(board.player, self.glyphs)} to move")
        self.write("Moves")
        for i, sq in enumerate(moves, start=1):
            self.write(f"{i}: {square_to_notation(sq)}")

    def show_pass(self, board: BoardState) -> None:
        self.write(f"{side_label(board.player, self.glyphs)} has no legal move and passes")

    def show_result(self, board: BoardState, result: GameResult) -> None:
        self.write(render_board(board, self.glyphs))
        black = board.disc_count(Player.BLACK)
        white = board.disc_count(Player.WHITE)
        self.write(
            f"{side_label(Player.BLACK, self.glyphs)} {black} - {white} {side_label(Player.WHITE, self.glyphs)}"
        )
        if isinstance(result, Winner):
            self.write(f"{side_label(result.player, self.glyphs)} wins.")
        else:
            self.write("The game is a draw.")


def _ask_one_or_two(question: str, read: Optional[Callable[[str], str]] = None,
                    write: Optional[Callable[[str], None]] = None) -> bool:
    """True for answer 1, False for answer 2; anything else asks again."""
    read = read or input
    write = write or print
    while True:
        answer = read(f"{question} ").strip()
        if answer in ("1", "2"):
            return answer == "1"
        write("Please enter 1 or 2")


def ask_swap_seats(black_kind: str, white_kind: str, glyphs: DisplaySettings = DEFAULT_GLYPHS,
                   read: Optional[Callable[[str], str]] = None, write: Optional[Callable[[str], None]] = None) -> bool:
    write = write or print
    write(
        f"Current seats: {side_label(Player.BLACK, glyphs)}: {SEAT_LABELS[black_kind]}, "
        f"{side_label(Player.WHITE, glyphs)}: {SEAT_LABELS[white_kind]}"
    )
    return _ask_one_or_two("Swap black and white? 1: swap, 2: keep", read, write)


def ask_play_again(read: Optional[Callable[[str], str]] = None, write: Optional[Callable[[str], None]] = None) -> bool:
    return _ask_one_or_two("Play again? 1: continue, 2: quit", read, write)
