from __future__ import annotations

from ..config import DisplaySettings
from ..engine.board import BoardState, Player
from ..engine.notation import FILES, index_to_square

DEFAULT_GLYPHS = DisplaySettings()


def glyph_for(player: Player, glyphs: DisplaySettings = DEFAULT_GLYPHS) -> str:
    return glyphs.black if player is Player.BLACK else glyphs.white


def render_board(board: BoardState, glyphs: DisplaySettings = DEFAULT_GLYPHS) -> str:
    """8x8 text grid, files A-H across the top and ranks 1-8 down the side."""
    lines = [f"  {FILES}"]
    for rank in range(8):
        row = []
        for file in range(8):
            sq = index_to_square(rank * 8 + file)
            if board.black & sq:
                row.append(glyphs.black)
            elif board.white & sq:
                row.append(glyphs.white)
            else:
                row.append(glyphs.empty)
        lines.append(f"{rank + 1} {''.join(row)}")
    return "\n".join(lines)
