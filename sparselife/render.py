"""Text rendering of a LifeState viewport.

Stands in for the window renderer: shows a fixed rectangle of the infinite
grid, one character per cell.
"""

from typing import Tuple

from .core.life_state import LifeState

ALIVE_CHAR = '█'
DEAD_CHAR = '░'


def render_text(state: LifeState, width: int, height: int,
                origin: Tuple[int, int] = (0, 0)) -> str:
    """Render a width x height window of the grid.

    Args:
        state: State to draw
        width: Window width in cells
        height: Window height in cells
        origin: (x, y) of the top-left cell

    Returns:
        Newline-joined rows, row index increasing with y
    """
    if width < 1 or height < 1:
        raise ValueError(f"Render window must be positive, got {width}x{height}")

    min_x, min_y = origin
    array = state.to_array((min_x, min_y, min_x + width - 1, min_y + height - 1))

    lines = []
    for row in array:
        lines.append(''.join(ALIVE_CHAR if alive else DEAD_CHAR for alive in row))

    return '\n'.join(lines)
