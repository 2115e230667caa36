"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..cell import CellVisual


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    an action based on the current observation.
    """

    def __init__(self, field_width: int, field_height: int) -> None:
        """
        Initialize the agent.

        Args:
            field_width: Number of columns in the field.
            field_height: Number of rows in the field.
        """
        self.field_width = field_width
        self.field_height = field_height
        self.total_cells = field_width * field_height

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of ``CellVisual`` values.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index; below ``total_cells`` reveals, above flags.
        """
        pass

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        y, x = divmod(action % self.total_cells, self.field_width)
        return x, y

    def position_to_action(self, x: int, y: int, flag: bool = False) -> int:
        """Convert (x, y) position to flat action index."""
        action = y * self.field_width + x
        if flag:
            action += self.total_cells
        return action

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get reveal-action mask from observation.

        Args:
            observation: 2D array of ``CellVisual`` values.

        Returns:
            Boolean mask over reveal actions where True = hidden cell.
        """
        return observation.flatten() == CellVisual.HIDDEN

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
