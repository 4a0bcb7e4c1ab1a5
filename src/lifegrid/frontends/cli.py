"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import List, Optional, Tuple

from ..core import binary_format, text_format
from ..core.config import SimulationConfig, configure_logging, resolve_format
from ..core.errors import LifeGridError
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.world import World

LOG = logging.getLogger(__name__)


def load_grid(path: str, file_format: str = "auto") -> Grid:
    """Load a grid from a text or binary file."""
    if resolve_format(path, file_format) == "binary":
        return binary_format.load_binary(path)
    return text_format.load_text(path)


def save_grid(path: str, grid: Grid, file_format: str = "auto") -> None:
    """Save a grid to a text or binary file."""
    if resolve_format(path, file_format) == "binary":
        binary_format.save_binary(path, grid)
    else:
        text_format.save_text(path, grid)


class CLILife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_initial_grid(self, config: SimulationConfig) -> Grid:
        """Create the starting grid from a file, a pattern or an empty grid.

        Raises:
            LifeGridError: If the pattern is unknown, does not fit or the
                file is malformed
            OSError: If the file cannot be read
        """
        if config.load_path:
            grid = load_grid(config.load_path, config.file_format)
        else:
            grid = Grid(config.width, config.height)
            if config.pattern:
                pattern = self.pattern_library.get_pattern(config.pattern)
                if pattern is None:
                    available = ", ".join(self.pattern_library.list_patterns())
                    raise LifeGridError(f"Pattern '{config.pattern}' not found. Available patterns: {available}")

                # Centre the pattern unless an offset was given
                pattern_width, pattern_height = pattern.get_size()
                x = config.pattern_x if config.pattern_x is not None else max(0, (grid.width - pattern_width) // 2)
                y = config.pattern_y if config.pattern_y is not None else max(0, (grid.height - pattern_height) // 2)
                LOG.debug("Placing pattern '%s' at (%d, %d)", pattern.name, x, y)
                pattern.apply_to_grid(grid, x, y)

        if config.rotation:
            grid = grid.rotate(config.rotation)
        return grid

    def run_simulation(self, config: SimulationConfig, show_grid: bool = False) -> Tuple[World, dict]:
        """Run a simulation described by ``config``.

        Args:
            config: Simulation configuration
            show_grid: Print the initial and final grids

        Returns:
            Tuple of (world, statistics)
        """
        grid = self.build_initial_grid(config)
        world = World(grid)
        initial_population = world.alive_cells

        if show_grid:
            print("Initial grid:")
            print(grid.render(), end="")

        start_time = time.time()
        world.advance(config.steps, config.toroidal)
        duration = time.time() - start_time

        if show_grid:
            print(f"\nFinal grid (generation {world.generation}):")
            print(world.get_state().render(), end="")

        if config.save_path:
            save_grid(config.save_path, world.get_state(), config.file_format)

        stats = {
            "generation": world.generation,
            "grid_size": (world.width, world.height),
            "initial_population": initial_population,
            "population": world.alive_cells,
            "duration_seconds": duration,
        }
        return world, stats

    def list_patterns(self) -> None:
        """Print available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                width, height = pattern.get_size()
                print(f"  {name}: {width}x{height}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run Conway's Game of Life and convert grids between file formats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a glider for 8 generations on a 10x10 toroidal grid
  lifegrid -W 10 -H 10 --pattern Glider --steps 8 --toroidal --show-grid

  # Advance a saved grid and store the result in the binary format
  lifegrid --load start.gol --steps 100 --save end.bgol

  # Convert a text grid to binary, rotated a quarter turn
  lifegrid --load start.gol --rotate 1 --save rotated.bgol
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=20, help="Grid width (default: 20)")
    parser.add_argument("-H", "--height", type=int, default=20, help="Grid height (default: 20)")

    parser.add_argument(
        "-t",
        "--toroidal",
        action="store_true",
        help="Enable toroidal (wraparound) edges",
    )

    parser.add_argument(
        "-s",
        "--steps",
        type=int,
        default=0,
        help="Number of generations to simulate (default: 0)",
    )

    parser.add_argument("--pattern", type=str, help="Start from a built-in pattern")
    parser.add_argument("--pattern-x", type=int, help="X offset for pattern placement (default: centred)")
    parser.add_argument("--pattern-y", type=int, help="Y offset for pattern placement (default: centred)")

    parser.add_argument("--load", type=str, help="Start from a grid file")
    parser.add_argument("--save", type=str, help="Write the final grid to this file")

    parser.add_argument(
        "--format",
        choices=["auto", "text", "binary"],
        default="auto",
        help="File format for --load/--save; 'auto' uses binary for .bgol/.bin files (default: auto)",
    )

    parser.add_argument(
        "--rotate",
        type=int,
        default=0,
        help="Rotate the starting grid by this many clockwise quarter turns",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states",
    )

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a SimulationConfig from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        steps=args.steps,
        toroidal=args.toroidal,
        pattern=args.pattern,
        pattern_x=args.pattern_x,
        pattern_y=args.pattern_y,
        rotation=args.rotate,
        load_path=args.load,
        save_path=args.save,
        file_format=args.format,
    )


def print_results(stats: dict) -> None:
    """Print a summary of a finished simulation."""
    width, height = stats["grid_size"]
    print(f"Simulation completed after {stats['generation']} generations")
    print(f"Grid size: {width}x{height}")
    print(f"Population: {stats['initial_population']} -> {stats['population']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    cli = CLILife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    config = config_from_args(args)
    errors = config.validate()
    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return 1

    try:
        _, stats = cli.run_simulation(config, show_grid=args.show_grid)
    except (LifeGridError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_results(stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
