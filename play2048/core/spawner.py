"""
Random placement of new tiles on the game board.
"""

import logging

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from play2048.core.gameboard import empty_board
from play2048.core.gamemove import empty_cells

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator, used when no generator is injected.
_GENERATOR = default_rng(PCG64DXSM())

_logger = logging.getLogger(__name__)


def spawn_tile(board: ndarray, rng: Generator | None = None) -> tuple[ndarray, tuple[int, int] | None]:
    """
    Place a new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    rng : Generator, optional
        Source of randomness. Any object with ``integers(n)`` and ``random()`` methods works,
        which lets tests replay a fixed sequence of draws.

    Returns
    -------
    new_board : ndarray
        A copy of the board with exactly one more tile, or an unchanged copy if the board is full.
    cell : tuple[int, int] or None
        Coordinates of the new tile, or None when no cell was empty.

    Notes
    -----
    - The cell is drawn uniformly among the empty cells, then the value: 2 with
      probability 0.9 and 4 with probability 0.1.
    """
    rng = rng if rng is not None else _GENERATOR
    new_board = board.copy()

    available = empty_cells(board)
    if not available:
        return new_board, None

    cell = available[int(rng.integers(len(available)))]
    value = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    new_board[cell] = value

    _logger.debug('Spawned %d at %s', value, cell)
    return new_board, cell


def seed_board(
    size: int, rng: Generator | None = None, number_tile: int = 2
) -> tuple[ndarray, list[tuple[int, int]]]:
    """
    Create an empty board and add the starting tiles.

    Parameters
    ----------
    size : int
        Side length of the board.
    rng : Generator, optional
        Source of randomness, see :func:`spawn_tile`.
    number_tile : int, optional
        Number of tiles to add (default is 2). Stops early once the board is full.

    Returns
    -------
    board : ndarray
        The new game board.
    cells : list[tuple[int, int]]
        Coordinates of the added tiles.
    """
    board = empty_board(size)
    cells = []
    for _ in range(number_tile):
        board, cell = spawn_tile(board, rng=rng)
        if cell is None:
            break
        cells.append(cell)
    return board, cells
