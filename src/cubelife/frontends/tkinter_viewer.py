"""Tkinter viewer showing the grid as a field of cubes seen from above."""

import argparse
import sys
import tkinter as tk
from typing import Dict, Optional, Tuple
from collections import deque

from ..config import SimulationConfig
from ..core.engine import METHODS
from ..core.patterns import PatternLibrary
from ..core.simulation import Simulation
from .cli import validate_config
from .visibility import CellVisibility


CUBE_COLOR = "#FFFFFF"
BACKGROUND = "#1E1E1E"


class TkinterLifeViewer:
    """One canvas item per cell, shown while the cell is alive."""

    def __init__(self, master: tk.Tk, config: Optional[SimulationConfig] = None, cell_size: int = 4) -> None:
        """Initialize the viewer.

        Args:
            master: Root Tkinter window
            config: Simulation configuration (defaults to SimulationConfig())
            cell_size: Pixel size of one grid position
        """
        self.master = master
        self.master.title("cubelife")
        self.master.configure(bg=BACKGROUND)

        self.config = config or SimulationConfig()
        self.cell_size = cell_size
        # Cubes fill 90% of their slot, leaving a visible gap between neighbours
        self.cube_inset = max(1, round(cell_size * 0.05))
        self.canvas_width = self.config.width * cell_size
        self.canvas_height = self.config.height * cell_size

        self.running = False
        self.frame_interval = 16
        self.last_frame: Optional[int] = None
        self.frame_times: deque = deque(maxlen=30)

        self.cell_objects: Dict[Tuple[int, int], int] = {}
        self.simulation: Optional[Simulation] = None
        self.visibility = CellVisibility(self.config.width, self.config.height, on_change=self.set_cube_visible)

        self.setup_ui()
        self.reset()
        self.update_loop()

    def setup_ui(self) -> None:
        """Set up the user interface."""
        control_frame = tk.Frame(self.master, bg=BACKGROUND)
        control_frame.pack(pady=5)

        self.start_btn = tk.Button(
            control_frame, text="Start", command=self.toggle_running, bg="#4CAF50", fg="white", width=8
        )
        self.start_btn.pack(side=tk.LEFT, padx=2)

        tk.Button(
            control_frame, text="Step", command=self.single_step, bg="#2196F3", fg="white", width=8
        ).pack(side=tk.LEFT, padx=2)

        tk.Button(control_frame, text="Reset", command=self.reset, bg="#FF9800", fg="white", width=8).pack(
            side=tk.LEFT, padx=2
        )

        self.canvas = tk.Canvas(
            self.master,
            width=self.canvas_width,
            height=self.canvas_height,
            bg="black",
            highlightthickness=0,
        )
        self.canvas.pack(padx=5)

        self.stats_label = tk.Label(self.master, text="", bg=BACKGROUND, fg="white", font=("Arial", 9), anchor="w")
        self.stats_label.pack(fill=tk.X, padx=5, pady=5)

    def _create_cubes(self) -> None:
        self.canvas.delete("all")
        self.cell_objects.clear()

        size = self.cell_size
        inset = self.cube_inset
        for x in range(self.config.width):
            for y in range(self.config.height):
                x1 = x * size + inset
                y1 = y * size + inset
                self.cell_objects[(x, y)] = self.canvas.create_rectangle(
                    x1, y1, x1 + size - 2 * inset, y1 + size - 2 * inset,
                    fill=CUBE_COLOR, outline="", state=tk.HIDDEN,
                )

    def set_cube_visible(self, x: int, y: int, visible: bool) -> None:
        """Show or hide the cube at (x, y)."""
        self.canvas.itemconfigure(self.cell_objects[(x, y)], state=tk.NORMAL if visible else tk.HIDDEN)

    def reset(self) -> None:
        """Start over from a freshly initialized grid."""
        self.running = False
        self.start_btn.config(text="Start", bg="#4CAF50")

        self.simulation = Simulation.from_config(self.config)
        self.simulation.subscribe(self._on_generation)

        self._create_cubes()
        self.visibility.reset()
        self.visibility.sync(self.simulation.grid)
        self.update_statistics()

    def _on_generation(self, generation: int, grid) -> None:
        self.visibility.sync(grid)

    def toggle_running(self) -> None:
        """Toggle simulation running state."""
        self.running = not self.running
        if self.running:
            self.start_btn.config(text="Pause", bg="#f44336")
        else:
            self.start_btn.config(text="Start", bg="#4CAF50")
        self.last_frame = None

    def single_step(self) -> None:
        """Advance exactly one generation."""
        self.simulation.step()
        self.update_statistics()

    def update_statistics(self) -> None:
        """Update the statistics display."""
        stats = self.simulation.get_statistics()

        if len(self.frame_times) > 1 and self.frame_times[-1] > self.frame_times[0]:
            fps = 1000 * (len(self.frame_times) - 1) / (self.frame_times[-1] - self.frame_times[0])
        else:
            fps = 0.0

        self.stats_label.config(
            text=(
                f"Generation: {stats['generation']}   "
                f"Population: {stats['population']} ({stats['population_density'] * 100:.1f}%)   "
                f"Running: {'Yes' if self.running else 'No'}   "
                f"FPS: {fps:.1f}"
            )
        )

    def update_loop(self) -> None:
        """Main frame loop; generations advance on the simulation tick, not per frame."""
        current_time = int(self.master.tk.call("clock", "milliseconds"))
        self.frame_times.append(current_time)

        if self.running:
            if self.last_frame is not None:
                self.simulation.advance((current_time - self.last_frame) / 1000.0)
            self.last_frame = current_time

        self.update_statistics()
        self.master.after(self.frame_interval, self.update_loop)


def create_parser() -> argparse.ArgumentParser:
    """Create the viewer's argument parser."""
    parser = argparse.ArgumentParser(description="View Conway's Game of Life as a field of cubes")
    parser.add_argument("-W", "--width", type=int, default=160, help="Grid width (default: 160)")
    parser.add_argument("-H", "--height", type=int, default=160, help="Grid height (default: 160)")
    parser.add_argument("-p", "--probability", type=float, default=0.5, help="Initial alive probability")
    parser.add_argument(
        "--alive-on-tie",
        action="store_true",
        help="Count a random draw exactly on the threshold as alive",
    )
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible start")
    parser.add_argument("--pattern", type=str, help="Start from a named pattern instead of random cells")
    parser.add_argument("--tick", type=float, default=0.1, help="Seconds between generations (default: 0.1)")
    parser.add_argument(
        "--method",
        type=str,
        default="convolution",
        choices=list(METHODS),
        help="Neighbor counting strategy (default: convolution)",
    )
    parser.add_argument("--cell-size", type=int, default=4, help="Pixels per cell (default: 4)")
    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the Tkinter viewer.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = create_parser().parse_args(argv)

    config = SimulationConfig(
        width=args.width,
        height=args.height,
        initial_alive_probability=args.probability,
        alive_on_tie=args.alive_on_tie,
        seed=args.seed,
        pattern=args.pattern,
        tick=args.tick,
        method=args.method,
    )
    if not validate_config(config):
        return 1

    library = PatternLibrary()
    if config.pattern and library.get_pattern(config.pattern) is None:
        print(f"Error: Pattern '{config.pattern}' not found")
        print(f"Available patterns: {', '.join(library.list_patterns())}")
        return 1

    root = tk.Tk()
    root.resizable(False, False)

    app = TkinterLifeViewer(root, config, cell_size=args.cell_size)
    app.toggle_running()

    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
