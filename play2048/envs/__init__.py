"""
Game session of the 2048 game.

This module provides the `GameSession` class, which owns the state of one game and applies moves to it.
"""

from .session import GameSession, GameStatus, SessionSnapshot

__all__ = ['GameSession', 'GameStatus', 'SessionSnapshot']
