"""Plain-text file format for grids.

The first line holds ``"<width> <height>"``. It is followed by ``height`` lines
of exactly ``width`` characters, ``'#'`` for alive and ``' '`` for dead. The
newline after the last row is optional.
"""

import logging
from pathlib import Path
from typing import Union

from .errors import FormatError, TruncatedInputError
from .grid import Cell, Grid

LOG = logging.getLogger(__name__)


def dumps(grid: Grid) -> str:
    """Serialize a grid to text."""
    lines = [f"{grid.width} {grid.height}"]
    for row in grid.cells:
        lines.append("".join(Cell(int(value)).symbol for value in row))
    return "\n".join(lines) + "\n"


def _parse_header(header: str):
    parts = header.split(" ")
    if len(parts) != 2:
        raise FormatError(f"Expected '<width> <height>' header, got {header!r}")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        raise FormatError(f"Cannot parse grid dimensions from {header!r}") from None
    if width < 0 or height < 0:
        raise FormatError(f"Negative grid dimensions in header: {width}x{height}")
    return width, height


def loads(text: Union[str, bytes]) -> Grid:
    """Parse a grid from text.

    Args:
        text: Grid text, or its ASCII bytes

    Raises:
        FormatError: If the header, a row length, a cell character or any
            content after the last row is invalid
        TruncatedInputError: If fewer rows are present than the header declares
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as error:
            raise FormatError(f"Non-ASCII byte at offset {error.start}") from None

    header, newline, body = text.partition("\n")
    if not newline and text:
        # A bare header is only complete for grids without rows
        width, height = _parse_header(header)
        if height > 0 and width > 0:
            raise TruncatedInputError(f"Missing rows for {width}x{height} grid")
        return Grid(width, height)

    width, height = _parse_header(header)
    # Rows plus the newlines between them must be present before allocating
    if height > 0 and len(body) < height * width + height - 1:
        raise TruncatedInputError(f"Text too short for a {width}x{height} grid")
    grid = Grid(width, height)

    pos = 0
    for y in range(height):
        row = body[pos:pos + width]
        if len(row) < width:
            raise TruncatedInputError(f"Row {y} is shorter than {width} cells or missing")
        for x, symbol in enumerate(row):
            try:
                grid[x, y] = Cell.from_symbol(symbol)
            except ValueError as error:
                raise FormatError(f"Row {y}, column {x}: {error}") from None
        pos += width

        terminator = body[pos:pos + 1]
        if terminator == "\n":
            pos += 1
        elif terminator:
            raise FormatError(f"Row {y} is longer than {width} cells")
        elif y != height - 1:
            raise TruncatedInputError(f"Expected {height} rows, got {y + 1}")

    if body[pos:]:
        raise FormatError(f"Unexpected content after row {height - 1}")

    return grid


def save_text(path: Union[str, Path], grid: Grid) -> None:
    """Write a grid to a text file.

    Raises:
        OSError: If the file cannot be written
    """
    Path(path).write_text(dumps(grid), encoding="ascii")
    LOG.debug("Saved %dx%d grid to %s", grid.width, grid.height, path)


def load_text(path: Union[str, Path]) -> Grid:
    """Read a grid from a text file.

    Raises:
        OSError: If the file cannot be read
        FormatError: If the contents are not a valid text grid
    """
    grid = loads(Path(path).read_bytes())
    LOG.debug("Loaded %dx%d grid from %s", grid.width, grid.height, path)
    return grid
