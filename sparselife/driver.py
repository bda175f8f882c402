"""Fixed-interval simulation driver.

The driver owns the current LifeState. It advances the state once every
`interval` seconds, independently of how often it is polled, and otherwise
leaves the state untouched so the renderer can redraw it.
"""

import time
from typing import Callable, Optional
import logging

from .core.life_state import LifeState

logger = logging.getLogger(__name__)


class LifeRunner:
    """Holds the current generation and advances it on a timer.

    Attributes:
        state: Current LifeState
        generation: Generation number, 1 for the initial state
        interval: Seconds between advances
    """

    def __init__(self, state: LifeState, interval: float = 1.0,
                 clock: Callable[[], float] = time.monotonic):
        """Initialize driver.

        Args:
            state: Initial state
            interval: Seconds between generations
            clock: Monotonic time source

        Raises:
            ValueError: If interval is negative
        """
        if interval < 0:
            raise ValueError(f"Interval cannot be negative, got {interval}")

        self.state = state
        self.generation = 1
        self.interval = interval
        self._clock = clock
        self._next_tick = clock() + interval

        logger.info(f"Iter #{self.generation}: {self.state.size()} live cells")

    def advance(self) -> LifeState:
        """Replace the current state with its next generation.

        Returns:
            The new current state
        """
        self.state = self.state.next_generation()
        self.generation += 1
        # size() counts recorded entries, dead neighbors included
        logger.info(f"Iter #{self.generation}: {self.state.size()} live cells")
        return self.state

    def poll(self) -> bool:
        """Advance once if the interval has elapsed.

        Returns:
            True if a new generation was computed
        """
        now = self._clock()
        if now < self._next_tick:
            return False

        self.advance()
        self._next_tick = now + self.interval
        return True

    def run(self, max_generations: int,
            render: Optional[Callable[[LifeState], None]] = None,
            sleep: Callable[[float], None] = time.sleep,
            poll_interval: float = 0.01) -> LifeState:
        """Render and poll until max_generations advances have happened.

        Args:
            max_generations: Number of advances before returning
            render: Called with the current state on every pass
            sleep: Pause between passes
            poll_interval: Seconds to sleep between passes

        Returns:
            Final state
        """
        if max_generations < 0:
            raise ValueError(f"max_generations must be non-negative, got {max_generations}")

        advanced = 0
        while advanced < max_generations:
            if render is not None:
                render(self.state)

            if self.poll():
                advanced += 1
            else:
                sleep(poll_interval)

        if render is not None:
            render(self.state)

        return self.state
