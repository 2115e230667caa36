"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Cell, FieldConfig, MineField


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def default_field() -> MineField:
    """Create a default 10x10 field with 5 mines."""
    return MineField(seed=1234)


@pytest.fixture
def small_field() -> MineField:
    """Create a 5x5 field with 1 mine."""
    return MineField(FieldConfig(5, 5, 1), seed=7)


@pytest.fixture
def corner_mine_field() -> MineField:
    """5x5 field with its only mine planted in the bottom-right corner."""
    mine_field = MineField(FieldConfig(5, 5, 1))
    mine_field.plant([(4, 4)])
    return mine_field


@pytest.fixture
def wall_field() -> MineField:
    """
    5x5 field with a vertical wall of mines in column 3.

    Columns 0-1 have no neighboring mines, column 2 borders the wall
    and column 4 is cut off behind it.
    """
    mine_field = MineField(FieldConfig(5, 5, 5))
    mine_field.plant([(3, y) for y in range(5)])
    return mine_field


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(10, 10, 5)


@pytest.fixture
def tiny_config() -> FieldConfig:
    """Smallest field with a single mine."""
    return FieldConfig(5, 5, 1)
