"""Conway's Game of Life over bounded or toroidal grids, with text and binary grid files."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid
from .core.world import World
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "World", "Pattern", "PatternLibrary"]
