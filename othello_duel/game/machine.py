from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Protocol

from ..engine.bitboard import split_moves
from ..engine.board import BoardState, GameResult, Player, Winner, is_full, judge, pass_turn, start_board
from ..engine.movegen import apply_move, legal_moves_mask
from ..engine.notation import moves_to_string, square_to_notation
from ..logging_setup import log_event
from .players import MoveChooser

log = logging.getLogger(__name__)


class MatchState(Enum):
    BEFORE_MATCH = "before_match"
    IN_MATCH = "in_match"
    MATCH_FINISHED = "match_finished"


class Display(Protocol):
    def show_board(self, board: BoardState) -> None: ...

    def show_moves(self, board: BoardState, moves: List[int]) -> None: ...

    def show_pass(self, board: BoardState) -> None: ...

    def show_result(self, board: BoardState, result: GameResult) -> None: ...


class OthelloGame:
    """Turn loop for one match between two seats.

    Each turn asks the active seat's chooser for a 1-based index into the
    decoded move list. A turn without legal moves is a pass; two passes in a
    row, or a full board, finish the match.
    """

    def __init__(
        self,
        black: MoveChooser,
        white: MoveChooser,
        display: Optional[Display] = None,
        board: Optional[BoardState] = None,
    ) -> None:
        self.seats: Dict[Player, MoveChooser] = {Player.BLACK: black, Player.WHITE: white}
        self.display = display
        self.board = board if board is not None else start_board()
        self.state = MatchState.BEFORE_MATCH
        self.history: List[Optional[int]] = []
        self._passed = False

    def swap_seats(self) -> None:
        if self.state is not MatchState.BEFORE_MATCH:
            raise RuntimeError("seats can only be swapped before the match")
        self.seats = {Player.BLACK: self.seats[Player.WHITE], Player.WHITE: self.seats[Player.BLACK]}
        log.info("Seats swapped: black=%s white=%s", self.seats[Player.BLACK].kind, self.seats[Player.WHITE].kind)

    @property
    def finished(self) -> bool:
        return self.state is MatchState.MATCH_FINISHED

    def start(self) -> None:
        """Open the match; turns are then played with `step`."""
        if self.state is not MatchState.BEFORE_MATCH:
            raise RuntimeError(f"match cannot start from state {self.state.value}")
        self.state = MatchState.IN_MATCH
        log_event(
            "game",
            "match_started",
            black=self.seats[Player.BLACK].kind,
            white=self.seats[Player.WHITE].kind,
            turn=self.board.turn_count,
        )

    def play(self) -> GameResult:
        self.start()
        while not self.finished:
            self.step()
        return self.result()

    def step(self) -> None:
        """Play one turn: a move from the active seat, or a pass."""
        if self.state is not MatchState.IN_MATCH:
            raise RuntimeError(f"no turn to play in state {self.state.value}")
        if self.display is not None:
            self.display.show_board(self.board)

        moves = split_moves(legal_moves_mask(self.board))
        if moves:
            if self.display is not None:
                self.display.show_moves(self.board, moves)
            player = self.board.player
            index = self.seats[player].choose(len(moves))
            if not 1 <= index <= len(moves):
                raise ValueError(f"chooser for {player.label} returned {index}, expected 1..{len(moves)}")
            square = moves[index - 1]
            log.debug("turn %d: %s plays %s", self.board.turn_count + 1, player.label, square_to_notation(square))
            self.board = apply_move(self.board, square)
            self.history.append(square)
            self._passed = False
            if is_full(self.board):
                self._finish("board_full")
            return

        if self.display is not None:
            self.display.show_pass(self.board)
        log.debug("turn %d: %s passes", self.board.turn_count + 1, self.board.player.label)
        self.board = pass_turn(self.board)
        self.history.append(None)
        if self._passed:
            self._finish("double_pass")
            return
        self._passed = True

    def result(self) -> GameResult:
        return judge(self.board)

    def _finish(self, reason: str) -> None:
        self.state = MatchState.MATCH_FINISHED
        result = self.result()
        log_event(
            "game",
            "match_finished",
            reason=reason,
            turns=self.board.turn_count,
            black=self.board.disc_count(Player.BLACK),
            white=self.board.disc_count(Player.WHITE),
            winner=result.player.label if isinstance(result, Winner) else None,
            record=moves_to_string(self.history),
        )
        if self.display is not None:
            self.display.show_result(self.board, result)
