"""Packed-bit binary file format for grids.

Layout, little-endian regardless of host byte order::

    int32   width
    int32   height
    uint32  chunk[ceil(width * height / 32)]

Cell ``index = y * width + x`` is stored in bit ``index % 32`` (least
significant first) of chunk ``index // 32``. A set bit means alive. Bits past
``width * height`` in the last chunk are padding, written as zero and ignored
on read.
"""

import logging
import struct
from pathlib import Path
from typing import Union

import numpy as np

from .errors import FormatError, TruncatedInputError
from .grid import Grid

LOG = logging.getLogger(__name__)

HEADER = struct.Struct("<ii")
CHUNK_BITS = 32
CHUNK_BYTES = CHUNK_BITS // 8

# Largest cell count a decoded header may declare
MAX_CELLS = np.iinfo(np.int32).max


def chunk_count(width: int, height: int) -> int:
    """Number of 32-bit chunks needed for a width x height grid."""
    return -(-(width * height) // CHUNK_BITS)


def encoded_size(width: int, height: int) -> int:
    """Total number of bytes an encoded width x height grid occupies."""
    return HEADER.size + CHUNK_BYTES * chunk_count(width, height)


def encode(grid: Grid) -> bytes:
    """Encode a grid into the packed binary layout.

    Args:
        grid: Grid to encode

    Returns:
        Header followed by the bit-packed cells
    """
    bits = np.zeros(chunk_count(grid.width, grid.height) * CHUNK_BITS, dtype=np.uint8)
    bits[:grid.total_cells] = grid.cells.reshape(-1)

    # Little bit order within little-endian bytes equals LSB-first uint32 chunks
    payload = np.packbits(bits, bitorder="little")
    return HEADER.pack(grid.width, grid.height) + payload.tobytes()


def decode(data: bytes) -> Grid:
    """Decode a grid from the packed binary layout.

    Args:
        data: Encoded bytes; anything after the last chunk is ignored

    Returns:
        New Grid

    Raises:
        TruncatedInputError: If fewer bytes are present than the header implies
        FormatError: If the header declares impossible dimensions
    """
    if len(data) < HEADER.size:
        raise TruncatedInputError(f"Expected a {HEADER.size} byte header, got {len(data)} bytes")

    width, height = HEADER.unpack_from(data)
    if width < 0 or height < 0:
        raise FormatError(f"Negative grid dimensions in header: {width}x{height}")
    if width * height > MAX_CELLS:
        raise FormatError(f"Grid of {width}x{height} cells is too large")

    expected = encoded_size(width, height)
    if len(data) < expected:
        raise TruncatedInputError(f"Expected {expected} bytes for a {width}x{height} grid, got {len(data)}")

    grid = Grid(width, height)
    if grid.total_cells == 0:
        return grid

    payload = np.frombuffer(data, dtype=np.uint8, count=expected - HEADER.size, offset=HEADER.size)
    bits = np.unpackbits(payload, bitorder="little", count=grid.total_cells)
    grid.cells[...] = bits.reshape(height, width)
    return grid


def save_binary(path: Union[str, Path], grid: Grid) -> None:
    """Write a grid to a binary file.

    Raises:
        OSError: If the file cannot be written
    """
    data = encode(grid)
    Path(path).write_bytes(data)
    LOG.debug("Saved %dx%d grid to %s (%d bytes)", grid.width, grid.height, path, len(data))


def load_binary(path: Union[str, Path]) -> Grid:
    """Read a grid from a binary file.

    Raises:
        OSError: If the file cannot be read
        FormatError: If the contents are not a valid encoded grid
    """
    grid = decode(Path(path).read_bytes())
    LOG.debug("Loaded %dx%d grid from %s", grid.width, grid.height, path)
    return grid
