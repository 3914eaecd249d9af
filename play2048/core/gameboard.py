"""
Core functionality for the 2048 game: sliding and merging lines, and the four directional moves.
"""

from collections.abc import Callable, Sequence
from enum import Enum

from numpy import asarray, int64, integer, ndarray, zeros, zeros_like

from play2048.core.geometry import flip_horizontal, rotate_clockwise, rotate_counter_clockwise


class Direction(str, Enum):
    """
    Direction of a move.

    The integer index of each member matches the action numbering used by agents
    (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def action(self) -> int:
        """Integer action index of the direction."""
        return _DIRECTION_ORDER.index(self)

    @classmethod
    def from_value(cls, value: 'Direction | str | int') -> 'Direction':
        """
        Convert a direction, its name, or its integer action index to a ``Direction``.

        Parameters
        ----------
        value : Direction, str or int
            Value to convert. Strings are case-insensitive.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the value does not name one of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise ValueError(f'Unknown direction: {value!r}') from None
        if isinstance(value, (int, integer)) and not isinstance(value, bool) and 0 <= value < len(_DIRECTION_ORDER):
            return _DIRECTION_ORDER[int(value)]
        raise ValueError(f'Unknown direction: {value!r}')


_DIRECTION_ORDER = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


def empty_board(size: int) -> ndarray:
    """
    Create an empty square board.

    Parameters
    ----------
    size : int
        Side length of the board.

    Returns
    -------
    ndarray
        A ``(size, size)`` array of zeros.

    Raises
    ------
    ValueError
        If ``size`` is smaller than 1.
    """
    if size < 1:
        raise ValueError(f'size must be >= 1, got {size}')
    return zeros((size, size), dtype=int64)


def reduce_line(line: Sequence[int] | ndarray) -> tuple[ndarray, int]:
    """
    Slide a line towards its start and merge adjacent equal values.

    Parameters
    ----------
    line : sequence of int or ndarray
        One row of the game board.

    Returns
    -------
    new_line : ndarray
        The line after sliding and merging, padded with zeros to the original length.
    score : int
        Sum of the values created by merges.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - The scan runs once from the start: the earliest equal pair merges and each value
      merges at most once, so ``[2, 2, 2, 0]`` becomes ``[4, 2, 0, 0]``.

    Examples
    --------
    >>> reduce_line([2, 2, 4, 4])
    (array([4, 8, 0, 0]), 12)

    >>> reduce_line([2, 2, 2, 2])
    (array([4, 4, 0, 0]), 8)
    """
    line = asarray(line, dtype=int64) if not isinstance(line, ndarray) else line
    result = zeros_like(line)

    # ##: Handle lines with nothing to merge.
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        result[: len(non_zero)] = non_zero
        return result, 0

    # ##: Iterate over the compacted line and merge values.
    merged = []
    score = 0
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            value = int(non_zero[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(int(non_zero[i]))
            i += 1

    result[: len(merged)] = merged
    return result, score


def slide_and_merge(board: ndarray) -> tuple[ndarray, int]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    updated_board : ndarray
        The updated game board after sliding and merging.
    score : int
        The total score obtained from all merges.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        result[i], row_score = reduce_line(row)
        score += row_score

    return result, score


def move_left(board: ndarray) -> tuple[ndarray, int]:
    """Slide every row towards the left edge."""
    return slide_and_merge(board)


def move_right(board: ndarray) -> tuple[ndarray, int]:
    """Slide every row towards the right edge."""
    updated, score = slide_and_merge(flip_horizontal(board))
    return flip_horizontal(updated), score


def move_up(board: ndarray) -> tuple[ndarray, int]:
    """Slide every column towards the top edge."""
    updated, score = slide_and_merge(rotate_counter_clockwise(board))
    return rotate_clockwise(updated), score


def move_down(board: ndarray) -> tuple[ndarray, int]:
    """Slide every column towards the bottom edge."""
    updated, score = slide_and_merge(rotate_clockwise(board))
    return rotate_counter_clockwise(updated), score


# ##>: One reduction shared by every direction.
MOVES: dict[Direction, Callable[[ndarray], tuple[ndarray, int]]] = {
    Direction.LEFT: move_left,
    Direction.UP: move_up,
    Direction.RIGHT: move_right,
    Direction.DOWN: move_down,
}


def move(board: ndarray, direction: Direction | str | int) -> tuple[ndarray, int]:
    """
    Apply a move to the board without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    direction : Direction, str or int
        The direction of the move.

    Returns
    -------
    new_board : ndarray
        The board after sliding and merging.
    score : int
        Sum of the values created by merges.
    """
    return MOVES[Direction.from_value(direction)](board)
