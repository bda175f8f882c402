"""Core cellular automaton engine: cells, rules and sparse state."""

from .cell import Cell, NEIGHBOR_OFFSETS, neighbors
from .conway_rules import BIRTH_SET, SURVIVAL_SET, update_cell, count_live_neighbors
from .life_state import LifeState, new_life_state

__all__ = [
    "Cell",
    "NEIGHBOR_OFFSETS",
    "neighbors",
    "BIRTH_SET",
    "SURVIVAL_SET",
    "update_cell",
    "count_live_neighbors",
    "LifeState",
    "new_life_state",
]
