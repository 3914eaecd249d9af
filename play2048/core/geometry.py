"""
Geometry helpers for square game boards: quarter turns and horizontal flips.
"""

from numpy import fliplr, ndarray, rot90


def rotate_clockwise(grid: ndarray) -> ndarray:
    """
    Rotate a square grid by 90 degrees clockwise.

    The cell at ``(r, c)`` moves to ``(c, N - 1 - r)``.

    Parameters
    ----------
    grid : ndarray
        A square 2D array of any dtype.

    Returns
    -------
    ndarray
        A new array holding the rotated grid.

    Examples
    --------
    >>> rotate_clockwise(array([[1, 2], [3, 4]]))
    array([[3, 1],
           [4, 2]])
    """
    return rot90(grid, k=-1).copy()


def rotate_counter_clockwise(grid: ndarray) -> ndarray:
    """
    Rotate a square grid by 90 degrees counter-clockwise.

    The cell at ``(r, c)`` moves to ``(N - 1 - c, r)``. This is the exact inverse of
    :func:`rotate_clockwise`.

    Parameters
    ----------
    grid : ndarray
        A square 2D array of any dtype.

    Returns
    -------
    ndarray
        A new array holding the rotated grid.
    """
    return rot90(grid, k=1).copy()


def flip_horizontal(grid: ndarray) -> ndarray:
    """Reverse every row of the grid, returning a new array."""
    return fliplr(grid).copy()
