"""Plain-text user interface for othello-duel."""
