"""Grid data structure for cellular automata."""

import logging
from enum import IntEnum
from numbers import Integral
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidArgumentError, OutOfBoundsError, ReadOnlyGridError

LOG = logging.getLogger(__name__)


class Cell(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1

    @property
    def symbol(self) -> str:
        """Character used for this state in text output."""
        return "#" if self is Cell.ALIVE else " "

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        """Map a text character back to a cell state.

        Raises:
            ValueError: If the character is neither '#' nor ' '
        """
        if symbol == "#":
            return cls.ALIVE
        if symbol == " ":
            return cls.DEAD
        raise ValueError(f"Invalid cell character {symbol!r}")


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise InvalidArgumentError(f"Grid dimensions must be non-negative, got {width}x{height}")


def _to_cell(value) -> Cell:
    try:
        return Cell(value)
    except ValueError:
        raise InvalidArgumentError(f"Invalid cell value {value!r}") from None


class Grid:
    """A dense 2D grid of cells.

    Cells live in a numpy array of shape (height, width), so the flattened
    buffer is row-major with index ``y * width + x``. Every operation that
    produces a new grid allocates its own buffer; grids never share storage
    except for the read-only views handed out by ``World.get_state()``.
    """

    def __init__(self, width: int = 0, height: Optional[int] = None) -> None:
        """Initialize a new grid with all cells dead.

        Args:
            width: Number of columns
            height: Number of rows (defaults to ``width`` for a square grid)

        Raises:
            InvalidArgumentError: If either dimension is negative
        """
        if height is None:
            height = width
        _check_dimensions(width, height)
        self._cells = np.zeros((height, width), dtype=np.int8)
        self._read_only = False

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> "Grid":
        """Build a grid from a list of rows.

        Args:
            rows: Equal-length rows of truthy values or ``Cell`` members,
                top row first

        Returns:
            New Grid with one column per row entry

        Raises:
            InvalidArgumentError: If the rows are ragged
        """
        rows = [list(row) for row in rows]
        if not rows:
            return cls(0, 0)
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidArgumentError("All rows must have the same length")

        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                grid[x, y] = Cell.ALIVE if value else Cell.DEAD
        return grid

    @classmethod
    def _wrap(cls, cells: np.ndarray, read_only: bool = False) -> "Grid":
        grid = cls.__new__(cls)
        grid._cells = cells
        grid._read_only = read_only
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Get the underlying (height, width) cell array."""
        return self._cells

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def total_cells(self) -> int:
        return self._cells.size

    @property
    def alive_cells(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def dead_cells(self) -> int:
        return self.total_cells - self.alive_cells

    @property
    def read_only(self) -> bool:
        """Whether writes through this grid are rejected."""
        return self._read_only

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

    def _locate(self, x: int, y: int) -> Tuple[int, int]:
        """Bounds-check a coordinate and return its array index.

        Every cell read and write goes through here.
        """
        if not (isinstance(x, Integral) and isinstance(y, Integral)):
            raise OutOfBoundsError(f"Coordinates ({x!r}, {y!r}) must be integers")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")
        return (y, x)

    def _require_writable(self) -> None:
        if self._read_only:
            raise ReadOnlyGridError("Grid is a read-only view")

    def __getitem__(self, coords: Tuple[int, int]) -> Cell:
        x, y = coords
        return Cell(int(self._cells[self._locate(x, y)]))

    def __setitem__(self, coords: Tuple[int, int], value) -> None:
        x, y = coords
        index = self._locate(x, y)
        cell = _to_cell(value)
        self._require_writable()
        self._cells[index] = cell

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the state of a cell.

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
        """
        return self[x, y]

    def set_cell(self, x: int, y: int, value) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            value: A ``Cell`` or a bool (True for alive)

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
            InvalidArgumentError: If the value is not a valid cell state
        """
        self[x, y] = value

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._require_writable()
        self._cells.fill(Cell.DEAD)

    def copy(self) -> "Grid":
        """Return an independent writable copy of this grid."""
        return Grid._wrap(self._cells.copy())

    def resize(self, width: int, height: Optional[int] = None) -> None:
        """Resize the grid in place.

        Cells inside the overlap of the old and new dimensions keep their
        coordinates; every other cell is dead.

        Args:
            width: New number of columns
            height: New number of rows (defaults to ``width``)
        """
        if height is None:
            height = width
        _check_dimensions(width, height)
        self._require_writable()

        resized = np.zeros((height, width), dtype=np.int8)
        keep_h = min(self.height, height)
        keep_w = min(self.width, width)
        resized[:keep_h, :keep_w] = self._cells[:keep_h, :keep_w]
        LOG.debug("Resizing grid %dx%d -> %dx%d", self.width, self.height, width, height)
        self._cells = resized

    def crop(self, x0: int, y0: int, x1: int, y1: int) -> "Grid":
        """Return a new grid holding the window [x0, x1) x [y0, y1).

        Raises:
            InvalidArgumentError: If the window leaves the grid or is inverted
        """
        if min(x0, y0, x1, y1) < 0 or x0 > self.width or x1 > self.width or y0 > self.height or y1 > self.height:
            raise InvalidArgumentError(
                f"Crop window ({x0}, {y0}, {x1}, {y1}) outside {self.width}x{self.height} grid"
            )
        if x0 > x1 or y0 > y1:
            raise InvalidArgumentError(f"Crop window ({x0}, {y0}, {x1}, {y1}) has negative size")

        return Grid._wrap(self._cells[y0:y1, x0:x1].copy())

    def merge(self, other: "Grid", x0: int, y0: int, alive_only: bool = False) -> None:
        """Overlay another grid onto this one with its top-left at (x0, y0).

        Args:
            other: Grid to copy from
            x0: Column of the overlay's top-left corner
            y0: Row of the overlay's top-left corner
            alive_only: Only bring living cells across, so no cell of this
                grid is killed by the merge

        Raises:
            InvalidArgumentError: If ``other`` does not fit at that offset
        """
        if x0 < 0 or y0 < 0 or x0 + other.width > self.width or y0 + other.height > self.height:
            raise InvalidArgumentError(
                f"{other.width}x{other.height} grid does not fit at ({x0}, {y0}) "
                f"in {self.width}x{self.height} grid"
            )
        self._require_writable()

        window = self._cells[y0:y0 + other.height, x0:x0 + other.width]
        if alive_only:
            np.bitwise_or(window, other.cells, out=window)
        else:
            window[...] = other.cells

    def rotate(self, rotation: int) -> "Grid":
        """Return a new grid rotated clockwise by ``rotation`` quarter turns.

        Any integer is accepted; it is reduced modulo 4 first, so -1 and 3
        give the same result.
        """
        quarter_turns = rotation % 4
        return Grid._wrap(np.rot90(self._cells, k=-quarter_turns).copy())

    def read_only_view(self) -> "Grid":
        """Return a grid sharing this grid's buffer that rejects writes."""
        view = self._cells.view()
        view.flags.writeable = False
        return Grid._wrap(view, read_only=True)

    def iter_alive(self) -> Iterable[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells in row-major order."""
        ys, xs = np.nonzero(self._cells)
        for x, y in zip(xs, ys):
            yield (int(x), int(y))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        ys, xs = np.nonzero(self._cells)
        if len(xs) == 0:
            return None
        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def render(self) -> str:
        """Render the grid inside a +/-/| border for display."""
        border = "+" + "-" * self.width + "+"
        lines = [border]
        for row in self._cells:
            lines.append("|" + "".join("#" if value else " " for value in row) + "|")
        lines.append(border)
        return "\n".join(lines) + "\n"

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same cells."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, alive={self.alive_cells})"
