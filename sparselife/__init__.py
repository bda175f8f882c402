"""Sparse Conway's Game of Life on an unbounded integer lattice."""

from .core.cell import Cell
from .core.life_state import LifeState, new_life_state

__all__ = ["Cell", "LifeState", "new_life_state"]
