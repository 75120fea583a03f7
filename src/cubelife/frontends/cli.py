"""Command-line interface for running headless Game of Life simulations."""

import argparse
import sys
import time
from dataclasses import replace
from typing import Optional, Tuple

from ..config import SimulationConfig
from ..core.engine import METHODS
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.simulation import Simulation


class CLILifeRunner:
    """Runs a simulation to completion and reports on it."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        config: SimulationConfig,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a simulation until it dies out, settles or hits the generation limit.

        Args:
            config: Simulation configuration
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (final_generation, finish_reason, statistics) where the
            reason is one of 'extinction', 'stable', 'max_generations'
        """
        if config.pattern and self.pattern_library.get_pattern(config.pattern) is None:
            print(f"Warning: Pattern '{config.pattern}' not found, using random population")
            config = replace(config, pattern=None)

        if verbose:
            print(f"Initializing {config.width}x{config.height} grid ({config.method} step)")
            if config.pattern:
                print(f"Loading pattern '{config.pattern}'")
            else:
                print(f"Generating random population (rate: {config.initial_alive_probability:.2%})")

        simulation = Simulation.from_config(config, self.pattern_library)
        initial_population = simulation.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nInitial grid:")
            print(self._format_grid(simulation.grid))

        if verbose:
            print(f"\nRunning simulation (max {config.max_generations} generations)...")

        start_time = time.time()
        reason = "max_generations"
        while simulation.generation < config.max_generations:
            previous = simulation.grid
            current = simulation.step()

            if current.population == 0:
                reason = "extinction"
                break
            if current == previous:
                reason = "stable"
                break
        duration = time.time() - start_time

        final_generation = simulation.generation
        stats = simulation.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_grid and reason != "extinction":
            print(f"\nFinal grid (generation {final_generation}):")
            print(self._format_grid(simulation.grid))

        return final_generation, reason, stats

    def _format_grid(self, grid: Grid, max_size: int = 50) -> str:
        """Format grid for display, truncating if too large."""
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return str(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a bounded grid from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 160x160 simulation with half the cells alive
  cubelife

  # Run a glider on a 20x20 grid and show the grid
  cubelife -W 20 -H 20 --pattern Glider --show-grid

  # Reproducible random start, 200 generations at most
  cubelife --seed 42 --max-generations 200 --verbose

  # List available patterns
  cubelife --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=160, help="Grid width (default: 160)")

    parser.add_argument("-H", "--height", type=int, default=160, help="Grid height (default: 160)")

    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        default=0.5,
        help="Initial chance of each cell being alive 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "--alive-on-tie",
        action="store_true",
        help="Count a random draw exactly on the threshold as alive",
    )

    parser.add_argument("--seed", type=int, help="Random seed for a reproducible start")

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of random population",
    )

    parser.add_argument("--pattern-x", type=int, help="X offset for pattern placement (default: centered)")

    parser.add_argument("--pattern-y", type=int, help="Y offset for pattern placement (default: centered)")

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=1000,
        help="Maximum generations to simulate (default: 1000)",
    )

    parser.add_argument(
        "--method",
        type=str,
        default="convolution",
        choices=list(METHODS),
        help="Neighbor counting strategy (default: convolution)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states (small grids only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a SimulationConfig from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        initial_alive_probability=args.probability,
        alive_on_tie=args.alive_on_tie,
        method=args.method,
        pattern=args.pattern,
        pattern_x=args.pattern_x,
        pattern_y=args.pattern_y,
        seed=args.seed,
        max_generations=args.max_generations,
    )


def validate_config(config: SimulationConfig) -> bool:
    """Print every configuration problem.

    Returns:
        True if the configuration is valid
    """
    errors = config.validate()

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display."""
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "stable":
        return f"Stable - grid stopped changing at generation {stats.get('generation', 0)}"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) [{bbox_size[0]}x{bbox_size[1]}]")
    else:
        print(
            "Population: {} -> {}, Duration: {:.3f}s, Speed: {:.0f} gen/s".format(
                stats["initial_population"],
                stats["population"],
                stats.get("duration_seconds", 0),
                stats.get("generations_per_second", 0),
            )
        )


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLILifeRunner()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    config = config_from_args(args)
    if not validate_config(config):
        return 1

    if config.pattern and cli.pattern_library.get_pattern(config.pattern) is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{config.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        final_generation, reason, stats = cli.run_simulation(
            config, verbose=args.verbose, show_grid=args.show_grid
        )
        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
