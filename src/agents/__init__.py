"""
Minesweeper agents module.

Provides agents that drive the gymnasium environment:
- RandomAgent: Baseline random selection among applicable actions
- Evaluator: Win-rate evaluation over many games
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
