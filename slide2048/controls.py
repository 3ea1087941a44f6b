"""
Decoding of player input into move directions.

Keyboard and touch input both end up as a ``Direction``; the engine never sees raw events.
"""

from slide2048.core.board import Direction

# ##: Default key bindings (browser key names, plain names and WASD).
KEY_BINDINGS: dict[str, Direction] = {
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}


def direction_from_key(key: str, bindings: dict[str, Direction] | None = None) -> Direction | None:
    """
    Map a key name to a direction.

    Parameters
    ----------
    key : str
        Name of the pressed key.
    bindings : dict[str, Direction], optional
        Key bindings to use instead of ``KEY_BINDINGS``.

    Returns
    -------
    Direction | None
        The bound direction, or None for a key that is not bound.
    """
    bindings = KEY_BINDINGS if bindings is None else bindings
    return bindings.get(key)


def direction_from_swipe(delta_x: float, delta_y: float) -> Direction | None:
    """
    Map a swipe gesture to a direction.

    Parameters
    ----------
    delta_x : float
        Horizontal displacement, positive to the right.
    delta_y : float
        Vertical displacement, positive downward (screen coordinates).

    Returns
    -------
    Direction | None
        The direction of the dominant axis, or None when the gesture did not move.

    Notes
    -----
    The swipe is horizontal when ``|delta_x| > |delta_y|``, vertical otherwise.
    """
    if delta_x == 0 and delta_y == 0:
        return None

    if abs(delta_x) > abs(delta_y):
        return Direction.RIGHT if delta_x > 0 else Direction.LEFT
    return Direction.DOWN if delta_y > 0 else Direction.UP
