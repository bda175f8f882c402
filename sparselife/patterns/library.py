"""Classic Conway patterns as boolean arrays."""

import numpy as np
from typing import Callable, Dict

from ..core.cell import Cell
from ..core.life_state import LifeState


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def create_blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells)."""
    return np.array([[True, True, True]], dtype=bool)


def create_glider_pattern() -> np.ndarray:
    """Create classic glider, travelling toward +x/+y."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


PATTERNS: Dict[str, Callable[[], np.ndarray]] = {
    "block": create_block_pattern,
    "blinker": create_blinker_pattern,
    "glider": create_glider_pattern,
}


def place_pattern(state: LifeState, pattern: np.ndarray, x: int, y: int) -> None:
    """Mark every alive pattern cell alive in an existing state.

    Args:
        state: State to seed (modified in-place)
        pattern: 2D boolean array, row index is y
        x: X coordinate for the pattern's top-left corner
        y: Y coordinate for the pattern's top-left corner
    """
    pattern = np.asarray(pattern, dtype=bool)
    pattern_height, pattern_width = pattern.shape

    for py in range(pattern_height):
        for px in range(pattern_width):
            if pattern[py, px]:
                state.set(Cell(x + px, y + py), True)
