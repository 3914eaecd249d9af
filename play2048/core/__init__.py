"""
Board engine of the 2048 game.

It includes grid rotations, the line reducer and the four directional moves, board state
queries, and random tile placement. Every function returns a new board and leaves its
input untouched.
"""

from .gameboard import (
    MOVES,
    Direction,
    empty_board,
    move,
    move_down,
    move_left,
    move_right,
    move_up,
    reduce_line,
    slide_and_merge,
)
from .gamemove import (
    WINNING_TILE,
    boards_equal,
    empty_cells,
    has_any_legal_move,
    has_reached_target,
    is_terminal,
    legal_directions,
    max_tile,
)
from .geometry import flip_horizontal, rotate_clockwise, rotate_counter_clockwise
from .spawner import TILE_SPAWN_PROBS, seed_board, spawn_tile

__all__ = [
    'Direction',
    'MOVES',
    'TILE_SPAWN_PROBS',
    'WINNING_TILE',
    'boards_equal',
    'empty_board',
    'empty_cells',
    'flip_horizontal',
    'has_any_legal_move',
    'has_reached_target',
    'is_terminal',
    'legal_directions',
    'max_tile',
    'move',
    'move_down',
    'move_left',
    'move_right',
    'move_up',
    'reduce_line',
    'rotate_clockwise',
    'rotate_counter_clockwise',
    'seed_board',
    'slide_and_merge',
    'spawn_tile',
]
