#!/usr/bin/env python3
"""
Example usage of the cubelife package.
"""

from cubelife import PatternLibrary, Simulation
from cubelife.core.grid import Grid


def main():
    """Demonstrate programmatic usage of the cubelife package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    grid = Grid.create(20, 20, glider.initializer(offset_x=8, offset_y=8))
    simulation = Simulation(grid)

    print("Initial state:")
    print(simulation.grid)
    print(f"Population: {simulation.population}")
    print()

    # One second of simulated time at the default 0.1 tick
    for _ in range(10):
        simulation.advance(0.1)
        print(f"Generation {simulation.generation}:")
        print(simulation.grid)
        print(f"Population: {simulation.population}")
        print()

    stats = simulation.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
