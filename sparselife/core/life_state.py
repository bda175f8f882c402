"""Sparse Game of Life state on an unbounded grid.

A LifeState records alive flags in a dictionary keyed by Cell. Dead cells are
implicit: anything missing from the mapping is dead. The grid has no bounds,
so a generation is computed only over cells that can possibly change, namely
the alive cells and their neighbors.
"""

import numpy as np
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .cell import Cell
from .conway_rules import update_cell, count_live_neighbors

logger = logging.getLogger(__name__)

Region = Tuple[int, int, int, int]


class LifeState:
    """Mapping from Cell to alive flag for one generation.

    Cells recorded as False are kept in the mapping. The transition writes
    an explicit False for every neighbor it evaluates, so size() counts
    entries rather than live cells.
    """

    def __init__(self, cells: Optional[Iterable[Cell]] = None):
        """Initialize state, optionally marking the given cells alive.

        Args:
            cells: Cells to mark alive
        """
        self._cells: Dict[Cell, bool] = {}

        if cells is not None:
            for cell in cells:
                self._cells[cell] = True

    @classmethod
    def from_pattern(cls, pattern: np.ndarray, x: int = 0, y: int = 0) -> 'LifeState':
        """Create state from a 2D pattern array.

        Args:
            pattern: 2D array, truthy entries are alive (row index is y)
            x: X coordinate of the pattern's top-left corner
            y: Y coordinate of the pattern's top-left corner

        Returns:
            LifeState: New state containing the pattern
        """
        pattern = np.asarray(pattern, dtype=bool)
        if pattern.ndim != 2:
            raise ValueError(f"Pattern must be 2D, got {pattern.ndim} dimensions")

        rows, cols = np.nonzero(pattern)
        return cls(Cell(x + int(col), y + int(row)) for row, col in zip(rows, cols))

    @classmethod
    def random(cls, width: int, height: int, seed: Optional[int] = None) -> 'LifeState':
        """Seed a random state inside a width x height viewport.

        Draws width*height//8 cells uniformly in [0, width) x [0, height).
        Duplicate draws coalesce, so the number of alive cells is at most
        width*height//8.

        Args:
            width: Viewport width in cells
            height: Viewport height in cells
            seed: Random seed; None draws fresh entropy for every call

        Returns:
            LifeState: Randomly populated state

        Raises:
            ValueError: If width or height is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Viewport {name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"Viewport {name} must be positive, got {value}")

        draws = width * height // 8
        rng = np.random.default_rng(seed)
        xs = rng.integers(0, width, size=draws)
        ys = rng.integers(0, height, size=draws)

        state = cls(Cell(int(x), int(y)) for x, y in zip(xs, ys))
        logger.debug(f"Seeded {width}x{height} viewport: {draws} draws, {state.size()} alive cells")
        return state

    def size(self) -> int:
        """Number of recorded entries, dead entries included."""
        return len(self._cells)

    def is_alive(self, cell: Cell) -> bool:
        """Get recorded state of a cell.

        Args:
            cell: Cell to look up

        Returns:
            True if the cell is recorded alive, False otherwise (unknown cells are dead)
        """
        return self._cells.get(cell, False)

    def set(self, cell: Cell, alive: bool) -> None:
        """Record the state of a cell, inserting an entry if needed.

        Args:
            cell: Cell to update
            alive: True to set alive, False to record it dead
        """
        self._cells[cell] = bool(alive)

    def next_generation(self) -> 'LifeState':
        """Compute the next generation.

        Every alive cell and each of its neighbors is evaluated exactly once;
        the result mapping doubles as the visited set. The receiver is not
        modified.

        Returns:
            LifeState: New state one generation later
        """
        next_cells: Dict[Cell, bool] = {}

        for cell, alive in self._cells.items():
            if not alive:
                continue

            for candidate in (cell,) + cell.neighbors():
                if candidate in next_cells:
                    continue  # already calculated

                live_neighbors = count_live_neighbors(self, candidate)
                next_cells[candidate] = update_cell(self.is_alive(candidate), live_neighbors)

        next_state = LifeState()
        next_state._cells = next_cells

        logger.debug(f"Evaluated {len(next_cells)} candidate cells, {next_state.live_count()} alive")
        return next_state

    def alive_cells(self) -> List[Cell]:
        """List cells whose recorded state is alive."""
        return [cell for cell, alive in self._cells.items() if alive]

    def live_count(self) -> int:
        """Count cells recorded alive."""
        return sum(1 for alive in self._cells.values() if alive)

    def is_empty(self) -> bool:
        """Check if no cell is alive."""
        return not any(self._cells.values())

    def bounds(self) -> Optional[Region]:
        """Get bounding box of alive cells (min_x, min_y, max_x, max_y).

        Returns:
            Inclusive bounds, or None when no cell is alive
        """
        alive = self.alive_cells()
        if not alive:
            return None

        xs = [cell.x for cell in alive]
        ys = [cell.y for cell in alive]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_array(self, region: Optional[Region] = None) -> np.ndarray:
        """Get alive flags of a rectangular region as a boolean array.

        Args:
            region: Inclusive (min_x, min_y, max_x, max_y); defaults to bounds()

        Returns:
            2D boolean array indexed [y - min_y, x - min_x]
        """
        if region is None:
            region = self.bounds()
            if region is None:
                return np.zeros((0, 0), dtype=bool)

        min_x, min_y, max_x, max_y = region
        width = max(0, max_x - min_x + 1)
        height = max(0, max_y - min_y + 1)
        array = np.zeros((height, width), dtype=bool)

        for cell in self.alive_cells():
            if min_x <= cell.x <= max_x and min_y <= cell.y <= max_y:
                array[cell.y - min_y, cell.x - min_x] = True

        return array

    def recorded_cells(self) -> List[Cell]:
        """List every recorded cell, dead entries included."""
        return list(self._cells)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, Cell) and self.is_alive(cell)

    def __eq__(self, other: object) -> bool:
        """Two states are equal when they have the same alive cells."""
        if not isinstance(other, LifeState):
            return NotImplemented
        return set(self.alive_cells()) == set(other.alive_cells())

    __hash__ = None  # mutable through set()

    def __str__(self) -> str:
        """Bracketed list of alive cells, e.g. "[(0, 0), (1, 0), ]"."""
        parts = ["["]
        for cell in self.alive_cells():
            parts.append(f"({cell.x}, {cell.y}), ")
        parts.append("]")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"LifeState(entries={self.size()}, alive={self.live_count()})"


def new_life_state(width: int, height: int, seed: Optional[int] = None) -> LifeState:
    """Factory function for a randomly seeded state."""
    return LifeState.random(width, height, seed=seed)
