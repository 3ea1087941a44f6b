"""2048 game state holder driven by player input."""

import logging

from numpy import ndarray
from numpy.random import default_rng

from slide2048.addons.config import GameConfiguration
from slide2048.controls import KEY_BINDINGS, direction_from_key, direction_from_swipe
from slide2048.core.board import Direction, is_done, move, validate_board
from slide2048.core.spawn import initialize
from slide2048.utils.display import format_board

_logger = logging.getLogger(__name__)


class Game:
    """
    2048 game.

    This class owns the current board and replaces it with the engine's result after each move.
    Keyboard and swipe input are decoded into a ``Direction`` before reaching the engine.
    """

    # ##: Current game state.
    _board: ndarray | None = None

    def __init__(self, config: GameConfiguration | None = None):
        """
        Initialize the game with two random tiles.

        Parameters
        ----------
        config : GameConfiguration, optional
            Seed, number of initial tiles and extra key bindings (default configuration if None).
        """
        self.config = config if config is not None else GameConfiguration()
        self._generator = default_rng(self.config.seed)
        self._bindings = {
            **KEY_BINDINGS,
            **{key: Direction(value) for key, value in self.config.key_bindings.items()},
        }

        self.reset()

    @property
    def board(self) -> ndarray:
        """The current board."""
        return self._board

    @property
    def is_finished(self) -> bool:
        """
        Check if no move is possible any more.

        Returns
        -------
        bool
            True if the board is full and no adjacent tiles can merge.
        """
        return is_done(self._board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board seeded with random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator before spawning.

        Returns
        -------
        ndarray
            The new board.
        """
        if seed is not None:
            self._generator = default_rng(seed)

        self._board = initialize(generator=self._generator, number_tile=self.config.initial_tiles)
        _logger.info('New game started with %d tiles', self.config.initial_tiles)
        return self._board

    def load(self, board) -> ndarray:
        """
        Replace the current board with an explicit one.

        Parameters
        ----------
        board : array_like
            A 4x4 grid of cell values.

        Returns
        -------
        ndarray
            The validated board now held by the game.

        Raises
        ------
        ValueError
            If the board is not a valid 4x4 board.
        """
        self._board = validate_board(board)
        return self._board

    def step(self, direction: Direction | str) -> tuple[ndarray, bool]:
        """
        Apply a move to the current board.

        Parameters
        ----------
        direction : Direction | str
            The direction of the move, or its value (``'left'``, ``'up'``, ``'right'``, ``'down'``).

        Returns
        -------
        tuple[ndarray, bool]
            The board after the move and whether it changed.

        Raises
        ------
        ValueError
            If ``direction`` is not a known direction value.
        """
        direction = Direction(direction)
        self._board, changed = move(self._board, direction, generator=self._generator)
        _logger.debug('Step %s: changed=%s', direction.value, changed)
        return self._board, changed

    def handle_key(self, key: str) -> tuple[ndarray, bool] | None:
        """
        Apply the move bound to a key.

        Returns None and leaves the board alone when the key is not bound.
        """
        direction = direction_from_key(key, self._bindings)
        if direction is None:
            return None
        return self.step(direction)

    def handle_swipe(self, delta_x: float, delta_y: float) -> tuple[ndarray, bool] | None:
        """
        Apply the move of a swipe gesture.

        Returns None and leaves the board alone when the gesture did not move.
        """
        direction = direction_from_swipe(delta_x, delta_y)
        if direction is None:
            return None
        return self.step(direction)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(format_board(self._board))
