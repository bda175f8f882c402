"""Classification of how a configuration evolves.

Runs a state forward and watches for the alive-cell set repeating. A repeat
after one generation is a still life, a later repeat is an oscillator. Only
exact repeats are recognized, so a moving pattern such as a glider is
reported as unsettled.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional
import logging

from ..core.cell import Cell
from ..core.life_state import LifeState

logger = logging.getLogger(__name__)


class EvolutionKind(Enum):
    """Long-run behavior observed for a configuration."""
    EXTINCT = "extinct"
    STILL_LIFE = "still_life"
    OSCILLATOR = "oscillator"
    UNSETTLED = "unsettled"


@dataclass
class EvolutionReport:
    """Result of classify_evolution()."""
    kind: EvolutionKind
    period: Optional[int]   # Cycle length, None unless still life / oscillator
    generations: int        # Generations simulated before the verdict
    final_state: LifeState


def classify_evolution(state: LifeState, max_generations: int = 100) -> EvolutionReport:
    """Run a state forward until it dies out or repeats.

    Args:
        state: Starting configuration (not modified)
        max_generations: Generation budget before giving up

    Returns:
        EvolutionReport describing the outcome

    Raises:
        ValueError: If max_generations is negative
    """
    if max_generations < 0:
        raise ValueError(f"max_generations must be non-negative, got {max_generations}")

    seen: Dict[FrozenSet[Cell], int] = {}
    current = state

    for generation in range(max_generations + 1):
        if current.is_empty():
            logger.debug(f"Extinct after {generation} generations")
            return EvolutionReport(EvolutionKind.EXTINCT, None, generation, current)

        key = frozenset(current.alive_cells())
        if key in seen:
            period = generation - seen[key]
            kind = EvolutionKind.STILL_LIFE if period == 1 else EvolutionKind.OSCILLATOR
            logger.debug(f"{kind.value} with period {period} detected at generation {generation}")
            return EvolutionReport(kind, period, generation, current)
        seen[key] = generation

        if generation < max_generations:
            current = current.next_generation()

    return EvolutionReport(EvolutionKind.UNSETTLED, None, max_generations, current)
