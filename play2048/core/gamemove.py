"""
Board state queries for the 2048 game: empty cells, equality, win and end-of-game checks.
"""

from numpy import any as np_any
from numpy import argwhere, array_equal, ndarray

from play2048.core.gameboard import Direction, move

# ##>: Tile value that wins the game.
WINNING_TILE = 2048


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    List the empty cells of the board.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        Coordinates ``(row, col)`` of every cell equal to zero, in row-major order.
    """
    return [(int(row), int(col)) for row, col in argwhere(board == 0)]


def boards_equal(first: ndarray, second: ndarray) -> bool:
    """
    Check whether two boards have the same shape and the same values.

    Used to detect a move that changes nothing.
    """
    return bool(array_equal(first, second))


def has_reached_target(board: ndarray, target: int = WINNING_TILE) -> bool:
    """
    Check whether some cell holds the target value.

    Parameters
    ----------
    board : ndarray
        The game board.
    target : int, optional
        The tile value to look for (default is 2048).

    Returns
    -------
    bool
        True if any cell equals ``target``.
    """
    return bool(np_any(board == target))


def has_any_legal_move(board: ndarray) -> bool:
    """
    Check whether at least one move can still change the board.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if an empty cell exists or two adjacent cells share a value.

    Notes
    -----
    The adjacency scan only runs on a full board.
    """
    if not board.all():
        return True

    # ##>: Compare vertical then horizontal neighbour pairs.
    return bool(np_any(board[:-1] == board[1:]) or np_any(board[:, :-1] == board[:, 1:]))


def is_terminal(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if the game is over: no empty cell and no adjacent pair of equal values.
    """
    return not has_any_legal_move(board)


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions whose move changes the board.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[Direction]
        Legal directions, in action order (left, up, right, down).
    """
    return [direction for direction in Direction if not boards_equal(board, move(board, direction)[0])]


def max_tile(board: ndarray) -> int:
    """Highest tile value on the board (0 for an empty board)."""
    return int(board.max()) if board.size else 0
