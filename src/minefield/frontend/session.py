"""
Game session for the presentation layer.

Drives the loop between the configuration menu and the mine field:
config -> playing -> lost/won -> config. Pointer clicks are mapped
through the field geometry; the terminal front end sends text
commands instead.
"""
import logging
from enum import Enum, auto
from typing import Optional, Tuple

from ..field import FieldConfig, MineField, SeedLike
from ..geometry import FieldGeometry, Point

from .config_menu import ConfigMenu

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Mode(Enum):
    """What the session is currently showing."""

    CONFIG = auto()
    PLAYING = auto()
    LOST = auto()
    WON = auto()


class Button(Enum):
    """Pointer buttons; left reveals, the others flag."""

    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


KEY_ALIASES = {
    "w": "up",
    "up": "up",
    "s": "down",
    "down": "down",
    "a": "left",
    "left": "left",
    "d": "right",
    "right": "right",
    "": "enter",
    "enter": "enter",
    "q": "escape",
    "quit": "escape",
    "escape": "escape",
}

COMMAND_HELP = "Commands: r X Y (reveal), f X Y (flag), q (quit)"


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Presentation-layer state machine around a ``MineField``.

    Attributes:
        menu: Configuration menu used between games.
        field: The mine field being played.
        geometry: On-screen placement of the field.
        mode: Current presentation mode.
        running: False once the player has asked to quit.
    """

    def __init__(
        self,
        menu: Optional[ConfigMenu] = None,
        seed: SeedLike = None,
        origin: Point = (0.0, 0.0),
        extents: Point = (1.0, 1.0),
    ) -> None:
        self.menu = menu or ConfigMenu()
        self.field = MineField(self.menu.accept(), seed=seed)
        self._origin = origin
        self._extents = extents
        self.geometry = FieldGeometry.for_field(self.field, origin, extents)
        self.mode = Mode.CONFIG
        self.running = True

    # ========================================================================
    # Mode Transitions
    # ========================================================================

    def start(self, config: Optional[FieldConfig] = None) -> None:
        """
        Prepare a fresh field and begin playing.

        Args:
            config: Configuration to play; defaults to the menu's.
        """
        config = config or self.menu.accept()
        self.field.prepare(config.width, config.height, config.mine_count)
        self.geometry = FieldGeometry.for_field(
            self.field, self._origin, self._extents
        )
        self.mode = Mode.PLAYING
        logger.debug(
            "Started %dx%d game with %d mines",
            config.width, config.height, config.mine_count,
        )

    def _check_outcome(self) -> None:
        """Switch to the loss or win screen when the game is over."""
        if self.field.lost:
            self.mode = Mode.LOST
            logger.info("Lost: a mine was revealed")
        elif self.field.won:
            self.mode = Mode.WON
            logger.info("Won: every safe cell revealed")

    # ========================================================================
    # Input
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """Reveal a cell while playing; returns True on a mine."""
        if self.mode != Mode.PLAYING:
            return False
        hit = self.field.reveal(x, y)
        self._check_outcome()
        return hit

    def flag(self, x: int, y: int) -> bool:
        """Toggle a flag while playing."""
        if self.mode != Mode.PLAYING:
            return False
        return self.field.flag(x, y)

    def click(
        self, px: float, py: float, button: Button = Button.LEFT
    ) -> Optional[Tuple[int, int]]:
        """
        Handle a pointer click in drawing space.

        Args:
            px: Horizontal pointer coordinate.
            py: Vertical pointer coordinate.
            button: Which button was pressed.

        Returns:
            The (x, y) cell acted on, or None if the click was ignored.
        """
        if self.mode != Mode.PLAYING:
            return None
        position = self.geometry.point_to_cell(px, py)
        if position is None:
            return None
        if button == Button.LEFT:
            self.reveal(*position)
        else:
            self.flag(*position)
        return position

    def key(self, name: str) -> None:
        """
        Handle a named key press.

        Args:
            name: One of up, down, left, right, enter, escape.
        """
        if name == "escape":
            self.running = False
            return

        if self.mode == Mode.CONFIG:
            if name == "up":
                self.menu.up()
            elif name == "down":
                self.menu.down()
            elif name == "left":
                self.menu.less()
            elif name == "right":
                self.menu.more()
            elif name == "enter":
                self.start()
        elif self.mode in (Mode.LOST, Mode.WON) and name == "enter":
            self.mode = Mode.CONFIG

    def command(self, text: str) -> str:
        """
        Handle one line of terminal input.

        Args:
            text: Raw input line.

        Returns:
            A message for the player; empty when there is nothing to say.
        """
        words = text.strip().lower().split()

        if self.mode == Mode.PLAYING and words and words[0] in ("r", "f"):
            return self._cell_command(words)

        name = KEY_ALIASES.get(" ".join(words))
        if name is None:
            return f"Unknown command: {text.strip()}. {COMMAND_HELP}"
        self.key(name)
        return ""

    def _cell_command(self, words) -> str:
        """Run a reveal or flag command like ``r 3 4``."""
        if len(words) != 3:
            return COMMAND_HELP
        try:
            x, y = int(words[1]), int(words[2])
        except ValueError:
            return f"Coordinates must be integers. {COMMAND_HELP}"
        if self.field.get_cell(x, y) is None:
            return (
                f"({x}, {y}) is outside the "
                f"{self.field.width}x{self.field.height} field"
            )
        if words[0] == "r":
            self.reveal(x, y)
        else:
            self.flag(x, y)
        return ""

    # ========================================================================
    # Output
    # ========================================================================

    def frame(self) -> str:
        """Render the current screen as text."""
        if self.mode == Mode.CONFIG:
            return "\n".join(self.menu.lines())

        lines = [f"Mines left: {self.field.mines_remaining}", ""]
        lines.append(self.field.render_ascii())
        if self.mode == Mode.LOST:
            lines.extend(["", "You hit a mine! Press Enter to continue."])
        elif self.mode == Mode.WON:
            lines.extend(["", "You cleared the field! Press Enter to continue."])
        else:
            lines.extend(["", COMMAND_HELP])
        return "\n".join(lines)
