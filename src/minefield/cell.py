"""
Cell module for the mine field.

Represents individual cells on the grid with their flags
(mine/revealed/flagged/questioned) and the visual state a
renderer draws for them.
"""
from enum import IntEnum
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellVisual(IntEnum):
    """
    Visual states of a cell.

    Values are the icon indices in the 8x2 texture atlas: revealed
    counts occupy 0-8, markers and mines the second row.
    """

    EMPTY = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    HIDDEN = 12
    FLAGGED = 13
    QUESTIONED = 14
    MINE = 15

    @classmethod
    def for_count(cls, count: int) -> "CellVisual":
        """Get the revealed visual for a neighboring mine count."""
        if not 0 <= count <= 8:
            raise ValueError(f"Neighbor count out of range: {count}")
        return cls(count)

    @property
    def is_count(self) -> bool:
        """Check if this is a revealed count (0-8)."""
        return self.value <= 8

    @property
    def symbol(self) -> str:
        """Single character used by the terminal renderer."""
        if self.is_count:
            return "." if self.value == 0 else str(self.value)
        return _SYMBOLS[self]


_SYMBOLS = {
    CellVisual.HIDDEN: "#",
    CellVisual.FLAGGED: "F",
    CellVisual.QUESTIONED: "?",
    CellVisual.MINE: "*",
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the mine field grid.

    Attributes:
        neighboring_mines: Count of mines in the 8 surrounding cells,
            filled in when the cell is revealed.
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the player has uncovered this cell.
        is_flagged: Whether the player has flagged this cell.
        is_questioned: Secondary marker for hidden cells.
    """

    neighboring_mines: int = 0
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    is_questioned: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was uncovered, False if already revealed
            or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        self.is_questioned = False
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still covered."""
        return not self.is_revealed

    def visual_state(self, lost: bool = False) -> CellVisual:
        """
        Derive what a renderer should draw for this cell.

        Args:
            lost: Whether the game has been lost; every mine is shown.

        Returns:
            The cell's visual state.
        """
        if lost and self.is_mine:
            return CellVisual.MINE
        if not self.is_revealed:
            if self.is_flagged:
                return CellVisual.FLAGGED
            if self.is_questioned:
                return CellVisual.QUESTIONED
            return CellVisual.HIDDEN
        if self.is_mine:
            return CellVisual.MINE
        return CellVisual.for_count(self.neighboring_mines)
