"""Cell coordinates on the unbounded integer lattice.

A Cell is a plain value: two cells are the same cell when both coordinates
match, so cells can be used directly as dictionary keys by the sparse
LifeState.
"""

from dataclasses import dataclass
from typing import Tuple


# Moore neighborhood offsets, dx outer / dy inner, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if dx != 0 or dy != 0
)


@dataclass(frozen=True)
class Cell:
    """Immutable (x, y) position on the infinite grid.

    Attributes:
        x: Column coordinate (any integer, negative allowed)
        y: Row coordinate (any integer, negative allowed)
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> 'Cell':
        """Return the cell displaced by (dx, dy)."""
        return Cell(self.x + dx, self.y + dy)

    def neighbors(self) -> Tuple['Cell', ...]:
        """Return the eight Moore neighbors in NEIGHBOR_OFFSETS order."""
        return tuple(Cell(self.x + dx, self.y + dy) for dx, dy in NEIGHBOR_OFFSETS)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def neighbors(cell: Cell) -> Tuple[Cell, ...]:
    """Enumerate the eight neighbors of a cell.

    Args:
        cell: Center cell

    Returns:
        Tuple of 8 cells, never including the center itself
    """
    return cell.neighbors()
