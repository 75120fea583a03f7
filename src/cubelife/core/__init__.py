"""Core cellular automaton logic."""

from .grid import Grid, GridError, InvalidDimension, OutOfBounds
from .engine import StepEngine, step
from .initializers import random_initializer, constant_initializer, cells_initializer
from .patterns import Pattern, PatternLibrary
from .simulation import Simulation

__all__ = [
    "Grid",
    "GridError",
    "InvalidDimension",
    "OutOfBounds",
    "StepEngine",
    "step",
    "random_initializer",
    "constant_initializer",
    "cells_initializer",
    "Pattern",
    "PatternLibrary",
    "Simulation",
]
