"""
Gymnasium environment wrapper for the mine field.

Provides a standard RL interface so agents can play headless games.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import CellVisual
from .field import FieldConfig, MineField


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array of ``CellVisual`` values, shape (height, width).

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i % width, i // width);
        the upper half flags cell i - width * height.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
        - 0 for toggling a flag
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Field configuration (default: 10x10 with 5 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or FieldConfig()
        self.field = MineField(self.config)
        self.render_mode = render_mode

        self._n_cells = self.config.cell_count

        self.observation_space = spaces.Box(
            low=0,
            high=int(CellVisual.MINE),
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # Reveal actions followed by flag actions
        self.action_space = spaces.Discrete(2 * self._n_cells)

        self._steps = 0
        self._total_safe_cells = self._n_cells - self.config.mine_count

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        # Share the env's seeded generator with the field
        self.field.prepare(
            self.config.width,
            self.config.height,
            self.config.mine_count,
            seed=self.np_random,
        )
        self._steps = 0

        return self.field.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal index (y * width + x), or that index plus
                width * height to toggle a flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, x, y = self._decode_action(int(action))
        self._steps += 1

        if is_flag:
            reward = 0.0 if self.field.flag(x, y) else -0.1
        else:
            reward = self._reveal_reward(x, y)

        observation = self.field.get_observation()
        terminated = self.field.lost or self.field.won

        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, x, y)."""
        is_flag = action >= self._n_cells
        y, x = divmod(action % self._n_cells, self.config.width)
        return is_flag, x, y

    def _reveal_reward(self, x: int, y: int) -> float:
        """
        Reveal a cell and score the result.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Reward value.
        """
        cell = self.field.get_cell(x, y)

        # Invalid action (already revealed or flagged)
        if cell is None or cell.is_revealed or cell.is_flagged:
            return -0.1

        if self.field.reveal(x, y):
            return -10.0
        if self.field.won:
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(1 for cell in self.field.cells() if cell.is_revealed)
        if self.field.lost:
            game_state = "LOST"
        elif self.field.won:
            game_state = "WON"
        else:
            game_state = "PLAYING"

        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self._total_safe_cells,
            "game_state": game_state,
            "mines_remaining": self.field.mines_remaining,
            "valid_actions": len(self.field.hidden_cells()),
        }

    def render(self) -> Optional[str]:
        """Render the current field state."""
        if self.render_mode == "ansi":
            return self.field.render_ascii()
        if self.render_mode == "human":
            print(self.field.render_ascii())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Hidden, unflagged cells may be revealed; any unrevealed cell
        may have its flag toggled.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self.field.get_cell(x, y)
                index = y * self.config.width + x
                if cell.is_revealed:
                    continue
                if not cell.is_flagged:
                    mask[index] = True
                mask[self._n_cells + index] = True
        return mask
