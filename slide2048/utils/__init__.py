"""
Helpers around the engine that are not part of the game rules.
"""

from .display import format_board

__all__ = ["format_board"]
