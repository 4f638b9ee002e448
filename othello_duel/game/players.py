"""Seat choosers: who picks the move index for a seat."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional, Protocol

log = logging.getLogger(__name__)


class MoveChooser(Protocol):
    kind: str

    def choose(self, count: int) -> int:
        """Return a 1-based index into a move list of `count` entries."""
        ...


class InteractiveChooser:
    """Reads a move number from the keyboard until it gets a valid one."""

    kind = "human"

    def __init__(self, read: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None) -> None:
        self.read = read or input
        self.write = write or print

    def choose(self, count: int) -> int:
        while True:
            # EOFError from `read` propagates; the CLI ends the session on it.
            text = self.read("Enter the number of your move: ").strip()
            try:
                n = int(text)
            except ValueError:
                log.debug("rejected non-numeric move input %r", text)
                self.write(f"Please enter a number from 1 to {count}")
                continue
            if 1 <= n <= count:
                return n
            log.debug("rejected out-of-range move input %d (1..%d)", n, count)
            self.write(f"Please enter a number from 1 to {count}")


class RandomChooser:
    """Uniform random choice among the offered moves."""

    kind = "cpu"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def choose(self, count: int) -> int:
        return self.rng.randint(1, count)


def make_chooser(kind: str, seed: Optional[int] = None,
                 read: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None) -> MoveChooser:
    if kind == "human":
        return InteractiveChooser(read=read, write=write)
    if kind == "cpu":
        return RandomChooser(seed)
    raise ValueError(f"unknown seat kind: {kind}")
