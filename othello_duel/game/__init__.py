from .machine import Display, MatchState, OthelloGame
from .players import InteractiveChooser, MoveChooser, RandomChooser, make_chooser

__all__ = [
    "Display",
    "InteractiveChooser",
    "MatchState",
    "MoveChooser",
    "OthelloGame",
    "RandomChooser",
    "make_chooser",
]
