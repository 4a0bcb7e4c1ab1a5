"""Conway's Game of Life simulation engine."""

import logging
from typing import Optional, Union

import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidArgumentError, OutOfBoundsError
from .grid import Cell, Grid

LOG = logging.getLogger(__name__)


class World:
    """Double-buffered Game of Life world.

    Implements the classic rules:
    - Live cell with 2-3 neighbours survives
    - Dead cell with exactly 3 neighbours becomes alive
    - All other cells die or stay dead

    The world owns two grids of equal size. Each step reads only the current
    grid, writes only the next grid, then the two swap roles without copying.
    """

    def __init__(self, width: Union[int, Grid] = 0, height: Optional[int] = None) -> None:
        """Initialize the world.

        Args:
            width: Number of columns, or a Grid to use as the initial state
            height: Number of rows (defaults to ``width``); ignored when
                ``width`` is a Grid
        """
        if isinstance(width, Grid):
            self._current = width.copy()
            self._next = width.copy()
        else:
            self._current = Grid(width, height)
            self._next = Grid(width, height)
        self._generation = 0

        # Convolution kernel for vectorised neighbour counting (reused every step)
        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        return self._current.width

    @property
    def height(self) -> int:
        return self._current.height

    @property
    def total_cells(self) -> int:
        return self._current.total_cells

    @property
    def alive_cells(self) -> int:
        return self._current.alive_cells

    @property
    def dead_cells(self) -> int:
        return self._current.dead_cells

    @property
    def generation(self) -> int:
        """Number of steps taken since construction."""
        return self._generation

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def get_total_cells(self) -> int:
        return self.total_cells

    def get_alive_cells(self) -> int:
        return self.alive_cells

    def get_dead_cells(self) -> int:
        return self.dead_cells

    def get_state(self) -> Grid:
        """Get a read-only view of the current grid.

        The view shares the buffer of the current grid at the time of the
        call. After a step that buffer becomes the next grid, so call again
        to see the new state.
        """
        return self._current.read_only_view()

    def resize(self, width: int, height: Optional[int] = None) -> None:
        """Resize the world, keeping the current state where it overlaps.

        Args:
            width: New number of columns
            height: New number of rows (defaults to ``width``)
        """
        if height is None:
            height = width
        self._current.resize(width, height)
        # The next buffer is fully overwritten by the following step
        self._next = Grid(width, height)

    def count_neighbours(self, x: int, y: int, toroidal: bool) -> int:
        """Count living neighbours of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            toroidal: Wrap each axis around instead of treating everything
                outside the grid as dead

        Returns:
            Number of living neighbours (0-8)

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
        """
        width, height = self.width, self.height
        if not (0 <= x < width and 0 <= y < height):
            raise OutOfBoundsError(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} world")

        cells = self._current.cells
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy

                if toroidal:
                    count += cells[ny % height, nx % width]
                elif 0 <= nx < width and 0 <= ny < height:
                    count += cells[ny, nx]

        return int(count)

    def count_all_neighbours(self, toroidal: bool) -> np.ndarray:
        """Count neighbours for all cells using a PyTorch convolution.

        Returns:
            (height, width) array with the neighbour count of each cell
        """
        height, width = self.height, self.width
        if width == 0 or height == 0:
            return np.zeros((height, width), dtype=np.int8)

        source = torch.from_numpy(self._current.cells.astype(np.float32)).reshape(1, 1, height, width)

        if toroidal:
            # Circular padding wraps each axis independently
            padded = F.pad(source, (1, 1, 1, 1), mode="circular")
            neighbours = F.conv2d(padded, self._kernel)
        else:
            # Zero padding: everything outside the grid is dead
            neighbours = F.conv2d(source, self._kernel, padding=1)

        return neighbours[0, 0].numpy().astype(np.int8)

    def step(self, toroidal: bool = False) -> None:
        """Advance the simulation by one generation."""
        counts = self.count_all_neighbours(toroidal)
        alive = self._current.cells == Cell.ALIVE

        # Birth on exactly 3, survival on 2 or 3
        self._next.cells[...] = (counts == 3) | (alive & (counts == 2))

        self._current, self._next = self._next, self._current
        self._generation += 1

    def advance(self, steps: int, toroidal: bool = False) -> None:
        """Apply ``steps`` generations in sequence.

        Raises:
            InvalidArgumentError: If ``steps`` is negative
        """
        if steps < 0:
            raise InvalidArgumentError(f"Cannot advance a negative number of steps ({steps})")

        LOG.debug("Advancing %dx%d world by %d steps (toroidal: %s)", self.width, self.height, steps, toroidal)
        for _ in range(steps):
            self.step(toroidal)

    def __repr__(self) -> str:
        return f"World(width={self.width}, height={self.height}, generation={self._generation})"
