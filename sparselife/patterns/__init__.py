"""Canonical Game of Life patterns and evolution classification.

Patterns are boolean numpy arrays with row index = y. Use place_pattern()
or LifeState.from_pattern() to put them on the grid.
"""

from .library import (
    PATTERNS,
    create_blinker_pattern,
    create_block_pattern,
    create_glider_pattern,
    place_pattern,
)
from .detector import EvolutionKind, EvolutionReport, classify_evolution

__all__ = [
    "PATTERNS",
    "create_blinker_pattern",
    "create_block_pattern",
    "create_glider_pattern",
    "place_pattern",
    "EvolutionKind",
    "EvolutionReport",
    "classify_evolution",
]
