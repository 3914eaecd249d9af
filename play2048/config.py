"""
Configuration of a 2048 game session.
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """
    Game configuration.

    Board size is only read when a session is (re)initialised.
    """

    # ##>: Board parameters.
    size: int = 4  # Side length of the square board
    target: int = 2048  # Tile value that wins the game

    # ##>: Range offered by the settings control.
    min_size: int = 3
    max_size: int = 8

    # ##>: High score persistence.
    store_path: str | None = None  # JSON file; None keeps the high score in memory
    store_key: str = 'highScore2048'

    def validate(self) -> 'GameConfig':
        """
        Check that the configuration describes a playable game.

        Returns
        -------
        GameConfig
            The configuration itself.

        Raises
        ------
        ValueError
            If the board is smaller than 2x2 or the target is not a power of two.
        """
        if self.size < 2:
            raise ValueError(f'Board size must be >= 2, got {self.size}')
        if self.target < 2 or self.target & (self.target - 1):
            raise ValueError(f'Target must be a power of two, got {self.target}')
        return self

    def clamp_size(self, requested: int) -> int:
        """
        Resolve a board size requested from the settings control.

        Parameters
        ----------
        requested : int
            The requested side length.

        Returns
        -------
        int
            ``requested`` when it lies in ``[min_size, max_size]``, the current size otherwise.
        """
        if self.min_size <= requested <= self.max_size:
            return requested
        return self.size
