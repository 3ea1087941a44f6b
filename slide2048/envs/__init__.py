"""
Game state holder for the 2048 engine.

This module provides the `Game` class, which owns the current board and applies moves decoded from player input.
"""

from .game import Game

__all__ = ["Game"]
