"""
The 2048 engine: line reduction, board transform and random tile spawning.

The engine is made of pure functions: boards go in, new boards come out, and nothing is
mutated in place.
"""

from .board import Direction, is_done, legal_directions, move, slide, validate_board
from .line import merge_tiles, reduce_line
from .spawn import empty_cells, initialize, spawn_tile

__all__ = [
    "Direction",
    "move",
    "slide",
    "legal_directions",
    "is_done",
    "validate_board",
    "reduce_line",
    "merge_tiles",
    "empty_cells",
    "spawn_tile",
    "initialize",
]
