"""Core cellular automata logic."""

from .errors import (
    FormatError,
    InvalidArgumentError,
    LifeGridError,
    OutOfBoundsError,
    ReadOnlyGridError,
    TruncatedInputError,
)
from .grid import Cell, Grid
from .world import World
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Cell",
    "Grid",
    "World",
    "Pattern",
    "PatternLibrary",
    "LifeGridError",
    "OutOfBoundsError",
    "InvalidArgumentError",
    "FormatError",
    "TruncatedInputError",
    "ReadOnlyGridError",
]
