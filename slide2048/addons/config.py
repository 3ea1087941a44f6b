"""
Configuration for the 2048 game engine and its state holder.
"""

from dataclasses import dataclass, field

# ##>: The board is always a 4x4 grid.
BOARD_SIZE = 4

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Number of tiles placed on a fresh board.
INITIAL_TILES = 2


@dataclass
class GameConfiguration:
    """
    Configuration for a ``Game``.

    Attributes
    ----------
    seed : int | None
        Seed of the random generator used for tile spawning. None draws fresh entropy.
    initial_tiles : int
        Number of tiles spawned on reset.
    key_bindings : dict[str, str]
        Extra key names mapped to direction values, merged over the default bindings.
    """

    seed: int | None = None
    initial_tiles: int = INITIAL_TILES
    key_bindings: dict[str, str] = field(default_factory=dict)
