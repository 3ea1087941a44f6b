"""
Configuration objects and constants shared by the engine and the game state holder.
"""

from .config import BOARD_SIZE, INITIAL_TILES, TILE_SPAWN_PROBS, GameConfiguration

__all__ = ["BOARD_SIZE", "INITIAL_TILES", "TILE_SPAWN_PROBS", "GameConfiguration"]
