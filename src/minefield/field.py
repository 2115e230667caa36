"""
Mine field module.

Implements the mine field engine: configuration bounds, lazy mine
generation with a safe first click, flood-fill reveal, flagging,
and win/loss detection.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .cell import Cell, CellVisual

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
SeedLike = Union[None, int, np.random.Generator]


# ============================================================================
# Constants
# ============================================================================

MIN_WIDTH = 5
DEFAULT_WIDTH = 10
MAX_WIDTH = 20
MIN_HEIGHT = 5
DEFAULT_HEIGHT = 10
MAX_HEIGHT = 20
MIN_MINES = 1
DEFAULT_MINES = 5
MAX_MINES = 20


class InvalidConfiguration(ValueError):
    """Raised when field dimensions or a mine layout cannot be used."""


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True)
class FieldConfig:
    """
    Configuration for a mine field.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    mine_count: int = DEFAULT_MINES

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are within the supported ranges."""
        if not MIN_WIDTH <= self.width <= MAX_WIDTH:
            raise InvalidConfiguration(
                f"Width must be between {MIN_WIDTH} and {MAX_WIDTH}, "
                f"got {self.width}"
            )
        if not MIN_HEIGHT <= self.height <= MAX_HEIGHT:
            raise InvalidConfiguration(
                f"Height must be between {MIN_HEIGHT} and {MAX_HEIGHT}, "
                f"got {self.height}"
            )
        if not MIN_MINES <= self.mine_count <= MAX_MINES:
            raise InvalidConfiguration(
                f"Mine count must be between {MIN_MINES} and {MAX_MINES}, "
                f"got {self.mine_count}"
            )
        if self.mine_count >= self.width * self.height:
            raise InvalidConfiguration(
                f"Too many mines for a {self.width}x{self.height} field"
            )

    @classmethod
    def clamped(cls, width: int, height: int, mine_count: int) -> "FieldConfig":
        """Build a configuration after clamping each value into range."""
        return cls(
            _clamp(width, MIN_WIDTH, MAX_WIDTH),
            _clamp(height, MIN_HEIGHT, MAX_HEIGHT),
            _clamp(mine_count, MIN_MINES, MAX_MINES),
        )

    @property
    def cell_count(self) -> int:
        """Total number of cells in the grid."""
        return self.width * self.height


# Preset sizes
SMALL = FieldConfig(5, 5, 3)
MEDIUM = FieldConfig(10, 10, 5)
LARGE = FieldConfig(20, 20, 20)


# ============================================================================
# Mine Field Class
# ============================================================================

@dataclass
class MineField:
    """
    Minesweeper mine field.

    Owns the grid of cells. Mines are placed on the first reveal after
    each ``prepare`` so the first clicked cell is always safe.
    """

    config: FieldConfig = field(default_factory=FieldConfig)
    seed: SeedLike = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _rng: np.random.Generator = field(init=False, repr=False)
    _generated: bool = False
    _lost: bool = False

    def __post_init__(self) -> None:
        """Set up the random source and build the first grid."""
        self._rng = np.random.default_rng(self.seed)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of default cells and clear the game flags."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._generated = False
        self._lost = False

    def prepare(
        self,
        width: int,
        height: int,
        mine_count: int,
        seed: SeedLike = None,
    ) -> None:
        """
        Rebuild the field for a new game.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Number of mines to place on the first reveal.
            seed: Optional seed or numpy Generator for mine placement.
                When omitted the field keeps its current random source.

        Raises:
            InvalidConfiguration: If the values are out of range. The
                current grid is left untouched.
        """
        self.config = FieldConfig(width, height, mine_count)
        if seed is not None:
            self.seed = seed
            self._rng = np.random.default_rng(seed)
        self._init_grid()
        logger.debug(
            "Prepared %dx%d field with %d mines", width, height, mine_count
        )

    def reset(self) -> None:
        """Rebuild the field with the current configuration."""
        self.prepare(
            self.config.width, self.config.height, self.config.mine_count
        )

    def _generate(self, entry: Position) -> None:
        """
        Place mines at random, keeping the entry cell free.

        Samples without replacement from every non-entry cell, so
        placement always finishes in a single pass.

        Args:
            entry: (x, y) of the first revealed cell.
        """
        entry_x, entry_y = entry
        width = self.config.width
        candidates = np.delete(
            np.arange(self.config.cell_count), entry_y * width + entry_x
        )
        chosen = self._rng.choice(
            candidates, size=self.config.mine_count, replace=False
        )
        for index in chosen:
            y, x = divmod(int(index), width)
            self._grid[y][x].is_mine = True
        self._generated = True
        logger.debug(
            "Generated %d mines avoiding (%d, %d)",
            self.config.mine_count, entry_x, entry_y,
        )

    def plant(self, positions: Iterable[Position]) -> None:
        """
        Install a fixed mine layout instead of generating one.

        Args:
            positions: (x, y) coordinates of every mine.

        Raises:
            InvalidConfiguration: If the field was already generated, a
                position is out of bounds or repeated, or the number of
                positions differs from the configured mine count.
        """
        if self._generated:
            raise InvalidConfiguration("Mines have already been placed")
        mines = list(positions)
        if len(set(mines)) != len(mines):
            raise InvalidConfiguration("Duplicate mine positions")
        if len(mines) != self.config.mine_count:
            raise InvalidConfiguration(
                f"Expected {self.config.mine_count} mines, got {len(mines)}"
            )
        for x, y in mines:
            if not self._is_valid_position(x, y):
                raise InvalidConfiguration(
                    f"Mine position ({x}, {y}) is outside the field"
                )
        for x, y in mines:
            self._grid[y][x].is_mine = True
        self._generated = True

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of (x, y) tuples for valid neighbors.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within field bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _count_neighboring_mines(self, x: int, y: int) -> int:
        """Count mines around a specific cell."""
        return sum(
            1 for nx, ny in self._get_neighbors(x, y)
            if self._grid[ny][nx].is_mine
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at the given position.

        The first reveal after ``prepare`` places the mines, avoiding
        this cell. Revealing a cell with no neighboring mines uncovers
        its neighbors as well, spreading until numbered cells.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            True if the cell holds a mine, False otherwise (including
            out-of-range, revealed and flagged cells, which are left
            alone).
        """
        if not self._is_valid_position(x, y):
            return False

        if not self._generated:
            self._generate((x, y))

        cell = self._grid[y][x]
        if cell.is_revealed or cell.is_flagged:
            return False

        if cell.is_mine:
            self._lost = True
            return True

        self._flood_reveal(x, y)
        return False

    def _flood_reveal(self, x: int, y: int) -> None:
        """Reveal a safe cell and spread through empty neighbors."""
        pending = deque([(x, y)])
        while pending:
            cx, cy = pending.popleft()
            cell = self._grid[cy][cx]
            if not cell.reveal():
                continue

            cell.neighboring_mines = self._count_neighboring_mines(cx, cy)
            if cell.neighboring_mines != 0:
                continue

            for nx, ny in self._get_neighbors(cx, cy):
                neighbor = self._grid[ny][nx]
                if not neighbor.is_revealed and not neighbor.is_flagged:
                    pending.append((nx, ny))

    def flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag on a hidden cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if the flag was toggled, False for revealed or
            out-of-range cells.
        """
        if not self._is_valid_position(x, y):
            return False
        return self._grid[y][x].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def mine_count(self) -> int:
        """Number of mines placed on generation."""
        return self.config.mine_count

    @property
    def generated(self) -> bool:
        """Check if mines have been placed."""
        return self._generated

    @property
    def lost(self) -> bool:
        """Check if a mine has been revealed since the last prepare."""
        return self._lost

    @property
    def won(self) -> bool:
        """Check if every non-mine cell has been revealed."""
        if not self._generated:
            return False
        return all(
            cell.is_revealed
            for cell in self.cells()
            if not cell.is_mine
        )

    @property
    def flags_placed(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self.cells() if cell.is_flagged)

    @property
    def mines_remaining(self) -> int:
        """Mine count minus placed flags; negative when over-flagged."""
        return self.config.mine_count - self.flags_placed

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._grid:
            yield from row

    def hidden_cells(self) -> List[Position]:
        """
        Get positions that can still be revealed.

        Returns:
            List of (x, y) positions that are neither revealed nor
            flagged.
        """
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if not self._grid[y][x].is_revealed
            and not self._grid[y][x].is_flagged
        ]

    def visual_state(self, x: int, y: int) -> CellVisual:
        """
        Get what a renderer should draw at a position.

        Raises:
            IndexError: If the position is outside the field.
        """
        if not self._is_valid_position(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the field")
        return self._grid[y][x].visual_state(self._lost)

    def get_observation(self) -> np.ndarray:
        """
        Get the visual state of every cell as a numpy array.

        Returns:
            2D int8 array of shape (height, width) holding
            ``CellVisual`` values.
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._grid[y][x].visual_state(self._lost)
        return obs

    def render_ascii(self) -> str:
        """Render the field as text, one row per line."""
        rows = []
        for row in self._grid:
            rows.append(
                " ".join(cell.visual_state(self._lost).symbol for cell in row)
            )
        return "\n".join(rows)
