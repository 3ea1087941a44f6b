"""
Board transform for the 2048 game: applying a move in one of four directions.
"""

import logging
from enum import Enum

from numpy import all as np_all
from numpy import any as np_any
from numpy import array, array_equal, int64, integer, issubdtype, ndarray, number
from numpy.random import Generator

from slide2048.addons.config import BOARD_SIZE
from slide2048.core.line import reduce_line
from slide2048.core.spawn import spawn_tile

_logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """
    Direction of a move, i.e. the edge the tiles are pushed to.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def is_vertical(self) -> bool:
        """Whether the move works on columns rather than rows."""
        return self in (Direction.UP, Direction.DOWN)

    @property
    def is_reversed(self) -> bool:
        """Whether tiles move toward the end of the line (bottom or right)."""
        return self in (Direction.DOWN, Direction.RIGHT)


def slide(board: ndarray, direction: Direction | str) -> tuple[ndarray, bool]:
    """
    Slide and merge every line of the board toward one edge, without spawning a tile.

    Parameters
    ----------
    board : ndarray
        The game board. It is not modified.
    direction : Direction | str
        The direction of the move, or its value.

    Returns
    -------
    new_board : ndarray
        The board after the move. This is the input board itself when nothing moved.
    changed : bool
        Whether any cell differs from the input.

    Notes
    -----
    - Up and down work on columns read top to bottom, left and right on rows read left to right.
    - For down and right the line is reversed before the reduction and the result reversed back.
    """
    direction = Direction(direction)
    new_board = board.copy()
    changed = False

    for index in range(board.shape[0]):
        line = board[:, index] if direction.is_vertical else board[index, :]

        # ##: Orient the line so that its front is the target edge.
        if direction.is_reversed:
            reduced = reduce_line(line[::-1])[::-1]
        else:
            reduced = reduce_line(line)

        if array_equal(line, reduced):
            continue

        changed = True
        if direction.is_vertical:
            new_board[:, index] = reduced
        else:
            new_board[index, :] = reduced

    if not changed:
        return board, False
    return new_board, True


def move(board: ndarray, direction: Direction | str, generator: Generator | None = None) -> tuple[ndarray, bool]:
    """
    Apply a move to the board and spawn a new tile if anything moved.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. It is not modified.
    direction : Direction | str
        The direction of the move, or its value.
    generator : Generator, optional
        Random generator used for the spawned tile.

    Returns
    -------
    new_board : ndarray
        The new board, including the spawned tile. The input board itself when nothing moved.
    changed : bool
        Whether the move changed the board.

    Notes
    -----
    - A move that changes nothing does not consume randomness and does not spawn a tile.
    """
    direction = Direction(direction)
    new_board, changed = slide(board, direction)
    if not changed:
        _logger.debug('Move %s left the board unchanged', direction.value)
        return board, False

    return spawn_tile(new_board, generator=generator), True


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        The legal directions, in ``Direction`` order.
    """
    return [direction for direction in Direction if slide(board, direction)[1]]


def is_done(board: ndarray) -> bool:
    """
    Check whether no move is possible any more.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the board is full and no two adjacent cells are equal.
    """
    return bool(
        np_all(board != 0) and not np_any(board[:-1] == board[1:]) and not np_any(board[:, :-1] == board[:, 1:])
    )


def validate_board(board) -> ndarray:
    """
    Convert a board-like value to a board array and check that it is well formed.

    Parameters
    ----------
    board : array_like
        A 4x4 grid of cell values, e.g. nested lists.

    Returns
    -------
    ndarray
        The board as a new ``int64`` array.

    Raises
    ------
    ValueError
        If the shape is not 4x4, a value is not an integer, a value is negative, or a tile is not a power
        of two of at least 2.
    """
    values = array(board)
    if not issubdtype(values.dtype, integer):
        if not issubdtype(values.dtype, number) or not np_all(values == values.astype(int64)):
            raise ValueError(f'board values must be integers, got dtype {values.dtype}')

    board = values.astype(int64)
    if board.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {board.shape}')
    if np_any(board < 0):
        raise ValueError(f'board values must be non-negative, got {board.min()}')

    tiles = board[board != 0]
    invalid = tiles[(tiles < 2) | ((tiles & (tiles - 1)) != 0)]
    if invalid.size:
        raise ValueError(f'tile values must be powers of two, got {int(invalid[0])}')
    return board
