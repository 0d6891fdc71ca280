"""Tests for the Grid class."""

import numpy as np
import pytest

from lifegrid.core.grid import CellState, Grid, InvalidDimensions, OutOfBounds


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert len(grid.cells) == 200
        assert grid.population == 0

    def test_new_grid_is_all_dead(self):
        """Test every cell of a new grid is dead."""
        width, height = 10, 20
        grid = Grid(width, height)
        for y in range(height):
            for x in range(width):
                assert grid.get_state(x, y) == CellState.DEAD

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (0, 0), (-1, 3), (3, -2)])
    def test_invalid_dimensions(self, width, height):
        """Test non-positive dimensions are rejected."""
        with pytest.raises(InvalidDimensions):
            Grid(width, height)

    def test_invalid_dimensions_is_value_error(self):
        """Test InvalidDimensions can be caught as ValueError."""
        with pytest.raises(ValueError):
            Grid(0, 1)

    def test_get_set_state(self):
        """Test basic cell get/set operations."""
        grid = Grid(1, 1)
        grid.set_state(CellState.ALIVE, 0, 0)
        assert grid.get_state(0, 0) == CellState.ALIVE

        grid.set_state(CellState.DEAD, 0, 0)
        assert grid.get_state(0, 0) == CellState.DEAD

    def test_set_state_round_trip_every_cell(self):
        """Test that a written state reads back at every coordinate."""
        grid = Grid(4, 3)
        for y in range(3):
            for x in range(4):
                for state in (CellState.ALIVE, CellState.DEAD):
                    grid.set_state(state, x, y)
                    assert grid.get_state(x, y) == state

    def test_set_state_touches_one_cell(self):
        """Test a write mutates exactly one element of the buffer."""
        grid = Grid(5, 4)
        grid.set_state(CellState.ALIVE, 3, 2)
        assert grid.population == 1
        assert grid.cells[3 + 2 * 5] == 1
        assert list(grid.live_cells()) == [(3, 2)]

    def test_get_state_is_idempotent(self):
        """Test repeated reads of an unmodified cell agree."""
        grid = Grid(3, 3)
        grid.set_state(CellState.ALIVE, 1, 2)
        assert grid.get_state(1, 2) == grid.get_state(1, 2)
        assert grid.get_state(0, 0) == grid.get_state(0, 0)

    def test_get_state_returns_cell_state(self):
        """Test reads return CellState members."""
        grid = Grid(2, 2)
        grid.set_state(CellState.ALIVE, 1, 1)
        assert grid.get_state(1, 1) is CellState.ALIVE
        assert grid.get_state(0, 0) is CellState.DEAD

    def test_set_state_rejects_unknown_state(self):
        """Test only the two cell states can be written."""
        grid = Grid(2, 2)
        with pytest.raises(ValueError):
            grid.set_state(2, 0, 0)

    @pytest.mark.parametrize("x,y", [(3, 0), (0, 3), (3, 3), (10, 1), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, x, y):
        """Test coordinates outside the grid are rejected by both accessors."""
        grid = Grid(3, 3)

        with pytest.raises(OutOfBounds):
            grid.get_state(x, y)

        with pytest.raises(OutOfBounds):
            grid.set_state(CellState.ALIVE, x, y)

        assert grid.population == 0

    def test_out_of_bounds_details(self):
        """Test OutOfBounds carries the offending coordinate."""
        grid = Grid(4, 2)
        with pytest.raises(IndexError) as exc_info:
            grid.get_state(4, 1)

        error = exc_info.value
        assert isinstance(error, OutOfBounds)
        assert (error.x, error.y) == (4, 1)
        assert (error.width, error.height) == (4, 2)

    def test_x_y_to_idx(self):
        """Test coordinate to index mapping is row-major."""
        grid = Grid(10, 20)
        assert grid._x_y_to_idx(0, 0) == 0
        assert grid._x_y_to_idx(1, 0) == 1
        assert grid._x_y_to_idx(2, 0) == 2
        assert grid._x_y_to_idx(9, 0) == 9
        assert grid._x_y_to_idx(0, 1) == 10
        assert grid._x_y_to_idx(0, 2) == 20
        assert grid._x_y_to_idx(2, 2) == 22

    def test_x_y_to_idx_is_bijection(self):
        """Test every coordinate maps to a distinct index covering the buffer."""
        grid = Grid(7, 5)
        indices = [grid._x_y_to_idx(x, y) for y in range(5) for x in range(7)]
        assert sorted(indices) == list(range(35))

    def test_x_y_to_idx_bounds_checked(self):
        """Test the index mapping rejects out-of-bounds coordinates."""
        grid = Grid(10, 20)
        with pytest.raises(OutOfBounds):
            grid._x_y_to_idx(10, 0)
        with pytest.raises(OutOfBounds):
            grid._x_y_to_idx(0, 20)

    def test_as_array(self):
        """Test the 2D view is indexed (row, column)."""
        grid = Grid(4, 3)
        grid.set_state(CellState.ALIVE, 3, 1)
        array = grid.as_array()
        assert array.shape == (3, 4)
        assert array[1, 3] == 1
        assert array.sum() == 1

    def test_replace_cells(self):
        """Test swapping in a whole new buffer."""
        grid = Grid(3, 2)
        grid.replace_cells(np.array([[1, 0, 0], [0, 0, 1]], dtype=np.int8))
        assert grid.get_state(0, 0) == CellState.ALIVE
        assert grid.get_state(2, 1) == CellState.ALIVE
        assert grid.population == 2
        assert grid.cells.shape == (6,)

    def test_replace_cells_size_mismatch(self):
        """Test buffers of the wrong size are rejected."""
        grid = Grid(3, 3)
        with pytest.raises(ValueError):
            grid.replace_cells(np.zeros(8, dtype=np.int8))

    def test_replace_cells_rejects_transposed_shape(self):
        """Test a (width, height) buffer is not reinterpreted as rows."""
        grid = Grid(3, 2)
        transposed = np.zeros((3, 2), dtype=np.int8)
        transposed[2, 0] = 1

        with pytest.raises(ValueError):
            grid.replace_cells(transposed)
        assert grid.population == 0

    @pytest.mark.parametrize("value", [2, -1, 7])
    def test_replace_cells_rejects_unknown_states(self, value):
        """Test buffers holding anything but DEAD and ALIVE are rejected."""
        grid = Grid(3, 3)
        grid.set_state(CellState.ALIVE, 0, 0)

        with pytest.raises(ValueError):
            grid.replace_cells(np.full(9, value, dtype=np.int8))

        assert grid.population == 1
        assert grid.get_state(0, 0) == CellState.ALIVE

    def test_replace_cells_accepts_bools(self):
        """Test a boolean mask is stored as cell states."""
        grid = Grid(2, 2)
        grid.replace_cells(np.array([[True, False], [False, True]]))
        assert set(grid.live_cells()) == {(0, 0), (1, 1)}
        assert grid.cells.dtype == np.int8

    def test_replace_cells_copies_buffer(self):
        """Test later writes to the source buffer do not reach the grid."""
        grid = Grid(3, 3)
        source = np.zeros(9, dtype=np.int8)
        grid.replace_cells(source)

        source[4] = 1

        assert grid.get_state(1, 1) == CellState.DEAD
        assert grid.cells is not source

    @pytest.mark.parametrize("x,y", [(1.5, 0), (0, 1.0), ("1", 0)])
    def test_non_integer_coordinates(self, x, y):
        """Test non-integer coordinates are rejected before indexing."""
        grid = Grid(3, 3)

        with pytest.raises(TypeError):
            grid.get_state(x, y)

        with pytest.raises(TypeError):
            grid.set_state(CellState.ALIVE, x, y)

        assert grid.population == 0

    def test_numpy_integer_coordinates(self):
        """Test numpy integers are valid coordinates."""
        grid = Grid(3, 3)
        grid.set_state(CellState.ALIVE, np.int64(2), np.int8(1))
        assert grid.get_state(np.int32(2), np.int16(1)) == CellState.ALIVE

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5)
        grid.set_state(CellState.ALIVE, 1, 1)
        grid.set_state(CellState.ALIVE, 2, 2)
        grid.set_state(CellState.ALIVE, 3, 3)
        assert grid.population == 3

        grid.clear()
        assert grid.population == 0
        assert grid.get_state(2, 2) == CellState.DEAD

    def test_randomize(self):
        """Test random population."""
        grid = Grid(10, 10)

        grid.randomize(0.0)
        assert grid.population == 0

        grid.randomize(1.0)
        assert grid.population == 100

        grid.randomize(0.5, np.random.default_rng(0))
        assert 30 <= grid.population <= 70

    def test_randomize_reproducible(self):
        """Test seeded generators give identical grids."""
        first = Grid(16, 16)
        second = Grid(16, 16)
        first.randomize(0.5, np.random.default_rng(42))
        second.randomize(0.5, np.random.default_rng(42))
        assert first == second

    def test_copy_is_independent(self):
        """Test copies do not share a buffer."""
        grid = Grid(3, 3)
        grid.set_state(CellState.ALIVE, 1, 1)

        clone = grid.copy()
        assert clone == grid

        clone.set_state(CellState.DEAD, 1, 1)
        assert grid.get_state(1, 1) == CellState.ALIVE
        assert clone != grid

    def test_equality(self):
        """Test grid equality."""
        assert Grid(3, 3) == Grid(3, 3)
        assert Grid(3, 3) != Grid(3, 4)
        assert Grid(3, 3) != "grid"

    def test_str(self):
        """Test string rendering."""
        grid = Grid(3, 2)
        grid.set_state(CellState.ALIVE, 1, 0)
        grid.set_state(CellState.ALIVE, 2, 1)
        assert str(grid) == ".*.\n..*"
