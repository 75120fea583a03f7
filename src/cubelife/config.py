"""Simulation configuration."""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .core.engine import METHODS


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    width: int = 160
    height: int = 160
    initial_alive_probability: float = 0.5
    alive_on_tie: bool = False
    tick: float = 0.1
    method: str = "convolution"
    pattern: Optional[str] = None
    pattern_x: Optional[int] = None
    pattern_y: Optional[int] = None
    seed: Optional[int] = None
    max_generations: int = 1000

    def validate(self) -> List[str]:
        """Check the configuration.

        Returns:
            Human-readable problems, empty when the configuration is valid
        """
        errors = []

        if self.width <= 0:
            errors.append("Width must be positive")

        if self.height <= 0:
            errors.append("Height must be positive")

        if not 0.0 <= self.initial_alive_probability <= 1.0:
            errors.append("Initial alive probability must be between 0.0 and 1.0")

        if not math.isfinite(self.tick) or self.tick <= 0:
            errors.append("Tick must be positive")

        if self.method not in METHODS:
            errors.append(f"Method must be one of: {', '.join(METHODS)}")

        if self.pattern_x is not None and self.pattern_x < 0:
            errors.append("Pattern X offset must be non-negative")

        if self.pattern_y is not None and self.pattern_y < 0:
            errors.append("Pattern Y offset must be non-negative")

        if self.max_generations <= 0:
            errors.append("Max generations must be positive")

        return errors

    def check(self) -> "SimulationConfig":
        """Raise ValueError listing every problem, or return self."""
        errors = self.validate()
        if errors:
            raise ValueError("Invalid configuration: " + "; ".join(errors))
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
