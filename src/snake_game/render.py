"""Plain-text rendering of game snapshots."""

from __future__ import annotations

from snake_game.grid import CellType

_GLYPHS: dict[int, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "#",
    CellType.FOOD: "*",
}


def reset_label(state: dict) -> str:
    """Caption for the reset button."""
    return "Play Again" if state["game_over"] else "Reset Game"


def render_text(state: dict) -> str:
    """Draw the board, score, and game-over line from a snapshot."""
    lines = [
        "".join(_GLYPHS[cell] for cell in row)
        for row in state["grid"]["cells"]
    ]
    lines.append(f"Score: {state['score']}")
    if state["game_over"]:
        lines.append("You Win!" if state["collision"] == "grid_full" else "Game Over!")
    return "\n".join(lines)
