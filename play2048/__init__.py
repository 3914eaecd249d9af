"""
2048 puzzle game: board engine, game session and high score persistence.
"""

from .config import GameConfig
from .core import Direction, move, reduce_line, spawn_tile
from .envs import GameSession, GameStatus, SessionSnapshot

__version__ = '1.0.0'

__all__ = ['Direction', 'GameConfig', 'GameSession', 'GameStatus', 'SessionSnapshot', 'move', 'reduce_line', 'spawn_tile']
