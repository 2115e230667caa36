"""
Scripted player for a game session.

Feeds terminal commands into a ``GameSession`` so a whole
config -> playing -> lost/won loop can run unattended.
"""
from typing import Iterator, Optional

import numpy as np

from .session import GameSession, Mode


class AutoPlayer:
    """
    Plays a session by revealing random hidden cells.

    Attributes:
        session: Session receiving the commands.
        wins: Games finished on the win screen.
        losses: Games finished on the loss screen.
    """

    def __init__(self, session: GameSession, seed: Optional[int] = None) -> None:
        self.session = session
        self.rng = np.random.default_rng(seed)
        self.wins = 0
        self.losses = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    def next_command(self) -> str:
        """Pick the input line for the current screen."""
        if self.session.mode == Mode.PLAYING:
            hidden = self.session.field.hidden_cells()
            x, y = hidden[int(self.rng.integers(len(hidden)))]
            return f"r {x} {y}"
        # Enter starts a game from the menu and leaves the result screen
        return ""

    def step(self) -> str:
        """Send one command and return it."""
        command = self.next_command()
        self.session.command(command)
        if command:
            if self.session.mode == Mode.WON:
                self.wins += 1
            elif self.session.mode == Mode.LOST:
                self.losses += 1
        return command

    def play(self, games: int) -> Iterator[str]:
        """
        Play a number of games.

        Args:
            games: How many games to finish.

        Yields:
            The session frame before the first command and after each
            one. The last frame is the final game's result screen.
        """
        yield self.session.frame()
        while self.games_played < games and self.session.running:
            self.step()
            yield self.session.frame()
