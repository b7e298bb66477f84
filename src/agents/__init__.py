"""
Automated players for the Minesweeper board.

- RandomAgent: Baseline random selection among hidden cells
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
