# -*- coding: utf-8 -*-
"""
Play 2048 Game in the terminal.
"""
import argparse
import logging

from slide2048.addons import GameConfiguration
from slide2048.envs import Game


def reset(game: Game):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    game: Game
        The game to reset
    """
    game.reset()
    game.render()


def read_key() -> str:
    """
    Read one line of keyboard input.

    Returns
    -------
    str
        The stripped line, or "q" once stdin is closed.
    """
    try:
        return input().strip()
    except EOFError:
        return "q"


def key_handler(game: Game, key: str) -> bool:
    """
    Handle one line of keyboard input.

    Parameters
    ----------
    game: Game
        The game to drive

    key: str
        Key typed by the player

    Returns
    -------
    bool
        False when the player quits, True otherwise.
    """
    if key == "q":
        return False

    if key == "r":
        reset(game)
        return True

    result = game.handle_key(key)
    if result is None:
        print(f"unbound key {key!r}")
        return True

    _, changed = result
    game.render()
    if not changed:
        print("nothing moved")
    if game.is_finished:
        print("no move left!")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play 2048 in the terminal (w/a/s/d, r to reset, q to quit).")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile spawner.")
    parser.add_argument("--verbose", action="store_true", help="Log every move.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    game = Game(GameConfiguration(seed=args.seed))
    game.render()

    while key_handler(game, read_key()):
        pass
