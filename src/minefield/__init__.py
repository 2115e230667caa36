"""
Minesweeper mine field module.

Provides the mine field engine, cell state, screen geometry and a
Gymnasium environment for headless play.
"""
from .cell import Cell, CellVisual
from .field import (
    FieldConfig,
    InvalidConfiguration,
    MineField,
    SMALL,
    MEDIUM,
    LARGE,
)
from .geometry import FieldGeometry, atlas_region
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellVisual",
    "FieldConfig",
    "InvalidConfiguration",
    "MineField",
    "SMALL",
    "MEDIUM",
    "LARGE",
    "FieldGeometry",
    "atlas_region",
    "MinesweeperEnv",
]
