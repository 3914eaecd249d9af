"""
Keyboard controls: mapping of key names to move directions.
"""

from play2048.core.gameboard import Direction

# ##>: Matplotlib and terminal key names, browser key names, WASD and vi keys.
KEY_BINDINGS: dict[str, Direction] = {
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'arrowleft': Direction.LEFT,
    'arrowup': Direction.UP,
    'arrowright': Direction.RIGHT,
    'arrowdown': Direction.DOWN,
    'a': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
    'h': Direction.LEFT,
    'k': Direction.UP,
    'l': Direction.RIGHT,
    'j': Direction.DOWN,
}


def key_to_direction(key: str | None) -> Direction | None:
    """
    Translate a key name into a move direction.

    Parameters
    ----------
    key : str or None
        Name of the pressed key, e.g. ``'left'``, ``'ArrowUp'`` or ``'w'``.

    Returns
    -------
    Direction or None
        The matching direction, or None if the key is not bound to a move.
    """
    if not key:
        return None
    return KEY_BINDINGS.get(key.strip().lower())
