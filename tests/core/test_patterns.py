"""Tests for patterns and the pattern library."""

import pytest

from lifegrid.core.errors import InvalidArgumentError
from lifegrid.core.grid import Cell, Grid
from lifegrid.core.patterns import Pattern, PatternLibrary
from lifegrid.core.world import World


class TestPattern:
    """Test cases for the Pattern class."""

    def test_bounding_box_and_size(self):
        """Size spans the outermost living cells."""
        pattern = Pattern("test", [(2, 1), (4, 3), (3, 2)])
        assert pattern.get_bounding_box() == (2, 1, 4, 3)
        assert pattern.get_size() == (3, 3)

    def test_empty_pattern(self):
        """Empty patterns have no size."""
        pattern = Pattern("empty", [])
        assert pattern.get_size() == (0, 0)
        assert pattern.to_grid().shape == (0, 0)

    def test_normalize(self):
        """Normalizing moves the pattern to the origin."""
        pattern = Pattern("test", [(5, 5), (6, 7)], "desc")
        normalized = pattern.normalize()
        assert normalized.cells == [(0, 0), (1, 2)]
        assert normalized.description == "desc"

    def test_to_grid(self):
        """to_grid builds the bounding-box grid."""
        grid = Pattern("test", [(3, 3), (4, 4)]).to_grid()
        assert grid.shape == (2, 2)
        assert list(grid.iter_alive()) == [(0, 0), (1, 1)]

    def test_apply_to_grid_keeps_existing_cells(self):
        """Applying a pattern never kills cells already alive."""
        grid = Grid(6, 6)
        grid.set_cell(0, 0, Cell.ALIVE)
        grid.set_cell(3, 3, Cell.ALIVE)

        Pattern("diag", [(0, 0), (1, 1)]).apply_to_grid(grid, 2, 2)
        assert list(grid.iter_alive()) == [(0, 0), (2, 2), (3, 3)]

    def test_apply_to_grid_must_fit(self):
        """Patterns that overflow the grid are rejected."""
        grid = Grid(3, 3)
        with pytest.raises(InvalidArgumentError):
            Pattern("line", [(0, 0), (1, 0), (2, 0)]).apply_to_grid(grid, 1, 0)
        assert grid.alive_cells == 0

    def test_from_grid(self):
        """Living cells of a grid become pattern cells."""
        grid = Grid.from_rows([[0, 1], [1, 0]])
        pattern = Pattern.from_grid(grid, "pair")
        assert pattern.cells == [(1, 0), (0, 1)]
        assert pattern.to_grid() == grid


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """The classic presets are available."""
        library = PatternLibrary()
        names = library.list_patterns()
        for name in ["Glider", "R-pentomino", "Lightweight Spaceship", "Blinker", "Block"]:
            assert name in names

    def test_glider(self):
        """The glider is a 3x3 bounding-box grid of 5 cells."""
        grid = PatternLibrary().get_pattern("Glider").to_grid()
        assert grid == Grid.from_rows([[0, 1, 0], [0, 0, 1], [1, 1, 1]])

    def test_r_pentomino(self):
        """Test the r-pentomino shape."""
        grid = PatternLibrary().get_pattern("R-pentomino").to_grid()
        assert grid == Grid.from_rows([[0, 1, 1], [1, 1, 0], [0, 1, 0]])

    def test_lightweight_spaceship(self):
        """The LWSS is 5x4 and keeps its shape every 4 generations."""
        pattern = PatternLibrary().get_pattern("Lightweight Spaceship")
        grid = pattern.to_grid()
        assert grid.shape == (5, 4)
        assert grid.alive_cells == 9

        board = Grid(12, 8)
        pattern.apply_to_grid(board, 4, 2)
        world = World(board)
        world.advance(4)
        assert world.alive_cells == 9
        assert world.get_state().crop(2, 2, 7, 6) == grid

    def test_case_insensitive_lookup(self):
        """Pattern names match regardless of case."""
        library = PatternLibrary()
        assert library.get_pattern("glider") is library.get_pattern("Glider")
        assert library.get_pattern("no such pattern") is None

    def test_add_pattern_and_categories(self):
        """Custom patterns show up in their own category."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Mine", [(0, 0)]))
        categories = library.get_patterns_by_category()
        assert categories["Custom"] == ["Mine"]
        assert "Glider" in categories["Spaceships"]
