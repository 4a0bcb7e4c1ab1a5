#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Grid, World, PatternLibrary
from lifegrid.core import binary_format


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    grid = Grid(12, 12)

    # Load a pattern
    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    glider.apply_to_grid(grid, offset_x=4, offset_y=4)

    world = World(grid)
    print("Initial state:")
    print(world.get_state())
    print(f"Population: {world.alive_cells}")
    print()

    # A glider returns to its shape every 4 generations, shifted one cell diagonally
    for _ in range(3):
        world.advance(4, toroidal=True)
        print(f"Generation {world.generation}:")
        print(world.get_state())

    data = binary_format.encode(world.get_state())
    print(f"Encoded final state in {len(data)} bytes")
    assert binary_format.decode(data) == world.get_state()


if __name__ == "__main__":
    main()
