"""Frontends for cubelife.

The Tk viewer lives in :mod:`cubelife.frontends.tkinter_viewer` and is not
imported here so the command-line runner works without a display.
"""

from .cli import CLILifeRunner
from .visibility import CellVisibility

__all__ = ["CLILifeRunner", "CellVisibility"]
