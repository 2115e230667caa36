"""
Minesweeper agents module.

Provides headless players for the Gymnasium environment:
- RandomAgent: Baseline random selection
- Evaluator: Multi-game evaluation harness
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
