"""
Random tile placement: spawning after a move and seeding a fresh board.
"""

import logging

from numpy import argwhere, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from slide2048.addons.config import BOARD_SIZE, INITIAL_TILES, TILE_SPAWN_PROBS

_logger = logging.getLogger(__name__)

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    List the coordinates of empty cells, in row-major order.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        ``(row, col)`` of every cell whose value is 0.
    """
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board == 0)]


def spawn_tile(board: ndarray, generator: Generator | None = None) -> ndarray:
    """
    Place a new tile (2 or 4) on a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. It is not modified.
    generator : Generator, optional
        Random generator used for the cell and the value. Defaults to a module-level generator.

    Returns
    -------
    ndarray
        A copy of the board with one more tile, or the input board itself when it has no empty cell.

    Notes
    -----
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - A full board is not an error: it is returned unchanged.
    """
    rng = generator if generator is not None else _GENERATOR

    cells = empty_cells(board)
    if not cells:
        return board

    row, col = cells[rng.integers(len(cells))]
    value = int(rng.choice(_TILE_VALUES, p=_TILE_PROBS))

    new_board = board.copy()
    new_board[row, col] = value
    _logger.debug('Spawned %d at (%d, %d)', value, row, col)
    return new_board


def initialize(generator: Generator | None = None, number_tile: int = INITIAL_TILES) -> ndarray:
    """
    Create a fresh board seeded with random tiles.

    Parameters
    ----------
    generator : Generator, optional
        Random generator used for spawning.
    number_tile : int, optional
        Number of tiles to spawn (default is 2).

    Returns
    -------
    ndarray
        A 4x4 board with ``number_tile`` tiles.
    """
    board = zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)
    for _ in range(number_tile):
        board = spawn_tile(board, generator=generator)
    return board
