"""
Conway Baseline Validation

Classic Game of Life behaviors on the sparse unbounded grid: birth and
survival, still lifes, oscillators, gliders, and the locality of each
transition.
"""

import pytest
import numpy as np
from sparselife.core.cell import Cell
from sparselife.core.life_state import LifeState
from sparselife.patterns.library import (
    create_block_pattern, create_blinker_pattern, create_glider_pattern
)


def alive_set(state):
    return set(state.alive_cells())


class TestRuleCorrectness:
    """Hand-built neighborhoods around a single target cell."""

    def test_birth_with_three_neighbors(self):
        """Dead cell with exactly 3 alive neighbors is born."""
        state = LifeState([Cell(-1, -1), Cell(0, -1), Cell(1, -1)])
        assert not state.is_alive(Cell(0, 0))
        assert state.next_generation().is_alive(Cell(0, 0))

    def test_alive_with_three_neighbors_survives(self):
        state = LifeState([Cell(0, 0), Cell(-1, -1), Cell(0, -1), Cell(1, -1)])
        assert state.next_generation().is_alive(Cell(0, 0))

    def test_two_neighbors_keep_alive_cell_alive(self):
        """With 2 neighbors an alive cell stays alive."""
        state = LifeState([Cell(0, 0), Cell(-1, 0), Cell(1, 0)])
        assert state.next_generation().is_alive(Cell(0, 0))

    def test_two_neighbors_keep_dead_cell_dead(self):
        """With 2 neighbors a dead cell stays dead."""
        state = LifeState([Cell(-1, 0), Cell(1, 0)])
        assert not state.next_generation().is_alive(Cell(0, 0))

    @pytest.mark.parametrize("count", [0, 1, 4, 5, 8])
    def test_other_counts_kill(self, count):
        """0, 1 or 4+ neighbors leave the center dead."""
        center = Cell(3, 3)
        state = LifeState(center.neighbors()[:count])
        state.set(center, True)
        assert not state.next_generation().is_alive(center)


class TestStillLife:
    """Configurations unchanged by the rule."""

    def test_block_stable_still_life(self):
        """2x2 block reproduces itself for many generations."""
        state = LifeState.from_pattern(create_block_pattern(), 2, 2)
        initial = alive_set(state)
        assert initial == {Cell(2, 2), Cell(3, 2), Cell(2, 3), Cell(3, 3)}

        for generation in range(10):
            state = state.next_generation()
            assert alive_set(state) == initial, f"Block unstable at generation {generation}"

    def test_beehive_stable(self):
        beehive = np.array([
            [False, True, True, False],
            [True, False, False, True],
            [False, True, True, False]
        ])
        state = LifeState.from_pattern(beehive, -10, -10)
        assert alive_set(state.next_generation()) == alive_set(state)


class TestOscillator:
    """Period-2 blinker."""

    def test_blinker_exact_coordinates(self):
        """Horizontal line at y=0 turns vertical around (1, 0) and back."""
        horizontal = {Cell(0, 0), Cell(1, 0), Cell(2, 0)}
        vertical = {Cell(1, -1), Cell(1, 0), Cell(1, 1)}

        state = LifeState(horizontal)
        state = state.next_generation()
        assert alive_set(state) == vertical

        state = state.next_generation()
        assert alive_set(state) == horizontal

    def test_blinker_oscillates_period_2(self):
        """Blinker keeps 3 cells and returns every 2 generations."""
        state = LifeState.from_pattern(create_blinker_pattern(), 3, 4)
        initial = alive_set(state)

        for generation in range(1, 9):
            state = state.next_generation()
            assert state.live_count() == 3
            if generation % 2 == 0:
                assert alive_set(state) == initial
            else:
                assert alive_set(state) != initial


class TestGlider:
    """Glider travels diagonally on the unbounded grid."""

    def test_glider_translates_every_4_generations(self):
        """After 4 generations the glider reappears shifted by (1, 1)."""
        state = LifeState.from_pattern(create_glider_pattern())
        initial = alive_set(state)

        for _ in range(4):
            state = state.next_generation()
            assert state.live_count() == 5

        assert alive_set(state) == {cell.offset(1, 1) for cell in initial}

    def test_glider_crosses_into_negative_quadrant(self):
        """No boundary stops a glider heading toward negative coordinates."""
        # rotated 180 degrees, so it moves toward -x/-y
        pattern = np.rot90(create_glider_pattern(), 2)
        state = LifeState.from_pattern(pattern, 0, 0)
        initial = alive_set(state)

        for _ in range(40):
            state = state.next_generation()

        assert alive_set(state) == {cell.offset(-10, -10) for cell in initial}
        min_x, min_y, _, _ = state.bounds()
        assert min_x < 0 and min_y < 0


class TestLocality:
    """Transitions only touch alive cells and their neighbors."""

    def test_isolated_cell_dies(self):
        """A lone cell dies and leaves 9 dead entries behind."""
        cell = Cell(5, -5)
        next_state = LifeState([cell]).next_generation()

        assert next_state.alive_cells() == []
        assert next_state.size() == 9
        assert set(next_state.recorded_cells()) == {cell} | set(cell.neighbors())
        assert not any(next_state.is_alive(c) for c in next_state.recorded_cells())

    def test_dead_region_reverts_to_absence(self):
        """Two generations after extinction nothing is recorded."""
        state = LifeState([Cell(0, 0)]).next_generation()
        assert state.size() == 9
        assert state.next_generation().size() == 0

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_no_out_of_scope_writes(self, seed):
        """Every recorded cell is an alive cell or one of its neighbors."""
        state = LifeState.random(30, 20, seed=seed)
        allowed = set()
        for cell in state.alive_cells():
            allowed.add(cell)
            allowed.update(cell.neighbors())

        next_state = state.next_generation()
        assert set(next_state.recorded_cells()) == allowed
