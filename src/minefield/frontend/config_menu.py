"""
Configuration menu shown before each game.

Lets the player pick width, height and mine count with four
directional inputs and an accept action.
"""
from typing import List

from ..field import (
    DEFAULT_HEIGHT,
    DEFAULT_MINES,
    DEFAULT_WIDTH,
    MAX_HEIGHT,
    MAX_MINES,
    MAX_WIDTH,
    MIN_HEIGHT,
    MIN_MINES,
    MIN_WIDTH,
    FieldConfig,
)


# ============================================================================
# Constants
# ============================================================================

TITLE = "Minesweeper"

# (label, attribute, minimum, maximum)
OPTIONS = (
    ("Width", "width", MIN_WIDTH, MAX_WIDTH),
    ("Height", "height", MIN_HEIGHT, MAX_HEIGHT),
    ("Mine count", "mine_count", MIN_MINES, MAX_MINES),
)

HELP_LINES = (
    "Use Up and Down to select options",
    "Use Left and Right to change values",
    "Press Enter to start",
    "Press Escape to quit",
)


# ============================================================================
# Config Menu
# ============================================================================

class ConfigMenu:
    """
    Selector for the next game's field configuration.

    Values are stepped one at a time and never leave their ranges, so
    ``accept`` always yields a usable configuration.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        mine_count: int = DEFAULT_MINES,
    ) -> None:
        start = FieldConfig.clamped(width, height, mine_count)
        self.width = start.width
        self.height = start.height
        self.mine_count = start.mine_count
        self.selection = 0

    def up(self) -> None:
        """Move the selection up, wrapping to the last option."""
        self.selection = (self.selection - 1) % len(OPTIONS)

    def down(self) -> None:
        """Move the selection down, wrapping to the first option."""
        self.selection = (self.selection + 1) % len(OPTIONS)

    def less(self) -> None:
        """Decrease the selected value, stopping at its minimum."""
        _, attr, low, _ = OPTIONS[self.selection]
        value = getattr(self, attr)
        if value > low:
            setattr(self, attr, value - 1)

    def more(self) -> None:
        """Increase the selected value, stopping at its maximum."""
        _, attr, _, high = OPTIONS[self.selection]
        value = getattr(self, attr)
        if value < high:
            setattr(self, attr, value + 1)

    def accept(self) -> FieldConfig:
        """Get the chosen configuration."""
        return FieldConfig(self.width, self.height, self.mine_count)

    def lines(self) -> List[str]:
        """Render the menu as text lines with a marker on the selection."""
        lines = [TITLE, ""]
        for index, (label, attr, _, _) in enumerate(OPTIONS):
            marker = ">" if index == self.selection else " "
            lines.append(f"{marker} {label}: {getattr(self, attr)}")
        lines.append("")
        lines.extend(HELP_LINES)
        return lines
