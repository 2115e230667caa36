"""
Random agent for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals hidden cells uniformly at random.

    Never flags. This provides a baseline for comparing other players.
    """

    def __init__(
        self,
        field_width: int = 10,
        field_height: int = 10,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            field_width: Number of columns in the field.
            field_height: Number of rows in the field.
            seed: Random seed for reproducibility.
        """
        super().__init__(field_width, field_height)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random reveal action.

        Args:
            observation: 2D array of cell visuals.
            valid_actions: Optional mask of valid actions; only the
                reveal half is considered.

        Returns:
            Random action index from valid reveal actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions[:self.total_cells])[0]

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be invalid)
            return 0

        return int(self.rng.choice(valid_indices))
