"""Two-seat Othello with a bitboard engine and a plain-text console."""

__version__ = "0.1.0"
