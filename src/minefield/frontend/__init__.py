"""
Presentation layer for Minesweeper.

Provides the configuration menu, the session state machine that
feeds player input into the mine field, and a scripted player.
"""
from .config_menu import ConfigMenu
from .session import Button, GameSession, Mode
from .autoplay import AutoPlayer

__all__ = [
    "ConfigMenu",
    "Button",
    "GameSession",
    "Mode",
    "AutoPlayer",
]
