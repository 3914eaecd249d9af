"""
High score persistence backends.
"""

from .highscore import DEFAULT_KEY, HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore, parse_score

__all__ = ['DEFAULT_KEY', 'HighScoreStore', 'JsonHighScoreStore', 'MemoryHighScoreStore', 'parse_score']
