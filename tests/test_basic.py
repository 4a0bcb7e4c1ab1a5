"""Basic tests for the lifegrid package."""

from lifegrid import Cell, Grid, PatternLibrary, World


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get_cell(0, 0) is Cell.DEAD

    grid.set_cell(5, 5, Cell.ALIVE)
    assert grid.get_cell(5, 5) is Cell.ALIVE


def test_world_creation():
    """Test basic world creation."""
    grid = Grid(5, 5)
    grid.set_cell(2, 2, Cell.ALIVE)
    world = World(grid)
    assert world.alive_cells == 1


def test_pattern_library():
    """Test pattern library has some patterns."""
    patterns = PatternLibrary().list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5)
    grid.set_cell(2, 1, Cell.ALIVE)
    grid.set_cell(2, 2, Cell.ALIVE)
    grid.set_cell(2, 3, Cell.ALIVE)
    world = World(grid)

    world.step()
    state = world.get_state()
    assert state.alive_cells == 3
    assert state.get_cell(1, 2) is Cell.ALIVE
    assert state.get_cell(2, 2) is Cell.ALIVE
    assert state.get_cell(3, 2) is Cell.ALIVE

    world.step()
    assert world.get_state() == grid
