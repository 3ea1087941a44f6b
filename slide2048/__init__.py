"""
slide2048: the 2048 board-merge engine.

The engine exposes two operations, ``initialize`` and ``move``; ``Game`` holds a board and
feeds it keyboard or swipe input.
"""

from slide2048.core import Direction, initialize, move
from slide2048.envs import Game

__all__ = ["Direction", "Game", "initialize", "move"]

__version__ = "1.0.0"
