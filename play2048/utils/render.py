"""
Text rendering of a game board.
"""

from numpy import ndarray


def render_board(board: ndarray, empty: str = '.') -> str:
    """
    Render the board as an aligned text grid.

    Parameters
    ----------
    board : ndarray
        The game board.
    empty : str, optional
        Symbol printed for empty cells (default is ``'.'``).

    Returns
    -------
    str
        One line per row, cells right-aligned to the width of the largest tile.
    """
    cells = [[str(int(value)) if value else empty for value in row] for row in board.tolist()]
    width = max((len(cell) for row in cells for cell in row), default=1)
    return '\n'.join(' '.join(cell.rjust(width) for cell in row) for row in cells)
