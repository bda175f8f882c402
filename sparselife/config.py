"""Simulation configuration.

Defaults match a 1024x768 window drawn with 5-pixel cells, advanced once per
second. Each value can be overridden through the environment:

    LIFE_WIDTH, LIFE_HEIGHT   window size in pixels
    LIFE_CELL_SIZE            pixels per cell
    LIFE_INTERVAL             seconds between generations
    LIFE_SEED                 integer seed for the random start (unset = random)
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_CELL_SIZE = 5
DEFAULT_INTERVAL = 1.0


@dataclass
class SimulationConfig:
    """Window and timing parameters for a simulation run."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE
    interval: float = DEFAULT_INTERVAL
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}")
        if self.cell_size < 1:
            raise ValueError(f"Cell size must be positive, got {self.cell_size}")
        if self.cell_size > min(self.width, self.height):
            raise ValueError(f"Cell size {self.cell_size} does not fit a {self.width}x{self.height} window")
        if self.interval < 0:
            raise ValueError(f"Interval cannot be negative, got {self.interval}")

    @property
    def viewport(self) -> Tuple[int, int]:
        """Viewport size in cells (columns, rows)."""
        return self.width // self.cell_size, self.height // self.cell_size


def _read_env(name: str, parse: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return parse(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def load_config() -> SimulationConfig:
    """Create simulation configuration from environment variables."""
    config = SimulationConfig(
        width=_read_env("LIFE_WIDTH", int, DEFAULT_WIDTH),
        height=_read_env("LIFE_HEIGHT", int, DEFAULT_HEIGHT),
        cell_size=_read_env("LIFE_CELL_SIZE", int, DEFAULT_CELL_SIZE),
        interval=_read_env("LIFE_INTERVAL", float, DEFAULT_INTERVAL),
        seed=_read_env("LIFE_SEED", int, None),
    )
    logger.debug(f"Loaded {config}")
    return config
