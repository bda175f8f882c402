"""
Conway's Game of Life Rules

The birth/survival rule and Moore neighborhood counting used by the sparse
LifeState transition. Classic B3/S23 only.
"""

from typing import Dict, Set, Tuple, TYPE_CHECKING

from .cell import Cell

if TYPE_CHECKING:
    from .life_state import LifeState


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        # Survival rule
        return live_neighbors in SURVIVAL_SET
    else:
        # Birth rule
        return live_neighbors in BIRTH_SET


def count_live_neighbors(state: 'LifeState', cell: Cell) -> int:
    """Count live neighbors of a cell in the given state.

    Args:
        state: State to read alive flags from
        cell: Center cell

    Returns:
        Number of live neighbors (0-8)
    """
    count = 0
    for neighbor in cell.neighbors():
        if state.is_alive(neighbor):
            count += 1
    return count


def get_rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the rule outcome for every (current_state, neighbor_count) pair.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    rules = {}

    for current_state in [False, True]:
        for neighbors in range(9):
            rules[(current_state, neighbors)] = update_cell(current_state, neighbors)

    return rules
