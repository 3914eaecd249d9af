"""
2048 game session: sequences moves, tile spawns and end-of-game checks into single game steps.
"""

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum

from numpy import ndarray
from numpy.random import Generator

from play2048.config import GameConfig
from play2048.core.gameboard import Direction, move
from play2048.core.gamemove import boards_equal, has_reached_target, is_terminal
from play2048.core.spawner import seed_board, spawn_tile
from play2048.storage.highscore import HighScoreStore, MemoryHighScoreStore
from play2048.utils.render import render_board

_logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """
    Status of a game session.

    WON is a sub-state of PLAYING: moves are still accepted. OVER is the only terminal status.
    """

    PLAYING = 'playing'
    WON = 'won'
    OVER = 'over'


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Read-only view of a session after a call.

    Attributes
    ----------
    board : ndarray
        Copy of the board, flagged as non-writeable.
    score : int
        Cumulative score of the current game.
    high_score : int
        Best score known to the session.
    won : bool
        Whether the target tile has been reached during this game.
    over : bool
        Whether no legal move remains.
    status : GameStatus
        Status of the session.
    moves : int
        Number of accepted moves in the current game.
    last_spawn : tuple[int, int] or None
        Cell of the most recently spawned tile.
    """

    board: ndarray
    score: int
    high_score: int
    won: bool
    over: bool
    status: GameStatus
    moves: int
    last_spawn: tuple[int, int] | None = None


class GameSession:
    """
    2048 game session.

    The session owns the board, the cumulative score, the win flag and the end-of-game flag.
    They only change through :meth:`reset` and :meth:`apply_move`, which run one at a time.

    Parameters
    ----------
    config : GameConfig, optional
        Game configuration (default is a 4x4 board with a 2048 target). The session keeps its own copy.
    store : HighScoreStore, optional
        Where the high score is read from and written to (default keeps it in memory).
    rng : Generator, optional
        Source of randomness for tile spawns. Inject a seeded generator for reproducible games.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: HighScoreStore | None = None,
        rng: Generator | None = None,
    ):
        self.config = replace(config if config is not None else GameConfig()).validate()
        self._store = store if store is not None else MemoryHighScoreStore()
        self._rng = rng
        self._lock = threading.Lock()

        self._board: ndarray | None = None
        self._score = 0
        self._won = False
        self._over = False
        self._moves = 0
        self._last_spawn: tuple[int, int] | None = None

        # ##: High score is read once, then kept across resets.
        self._high_score = self._load_high_score()
        self.reset()

    def _load_high_score(self) -> int:
        """Read the stored high score, treating any failure as no stored score."""
        try:
            return max(int(self._store.load()), 0)
        except Exception:
            _logger.warning('High score store unavailable, starting from 0', exc_info=True)
            return 0

    def _save_high_score(self) -> None:
        """Write the high score, never letting a storage failure interrupt the game."""
        try:
            self._store.save(self._high_score)
        except Exception:
            _logger.warning('Failed to persist high score %d', self._high_score, exc_info=True)

    @property
    def size(self) -> int:
        """Side length of the current board."""
        return self.config.size

    @property
    def board(self) -> ndarray:
        """Read-only copy of the current board."""
        board = self._board.copy()
        board.flags.writeable = False
        return board

    @property
    def score(self) -> int:
        """Cumulative score of the current game."""
        return self._score

    @property
    def high_score(self) -> int:
        """Best score known to the session."""
        return self._high_score

    @property
    def won(self) -> bool:
        """Whether the target tile has been reached."""
        return self._won

    @property
    def over(self) -> bool:
        """Whether the game is finished (no more moves possible)."""
        return self._over

    @property
    def moves(self) -> int:
        """Number of accepted moves in the current game."""
        return self._moves

    @property
    def status(self) -> GameStatus:
        """Status of the session."""
        if self._over:
            return GameStatus.OVER
        if self._won:
            return GameStatus.WON
        return GameStatus.PLAYING

    @property
    def snapshot(self) -> SessionSnapshot:
        """Immutable view of the session."""
        return SessionSnapshot(
            board=self.board,
            score=self._score,
            high_score=self._high_score,
            won=self._won,
            over=self._over,
            status=self.status,
            moves=self._moves,
            last_spawn=self._last_spawn,
        )

    def reset(self, size: int | None = None) -> SessionSnapshot:
        """
        Start a new game with two random tiles.

        Parameters
        ----------
        size : int, optional
            New side length of the board. Keeps the current size when omitted.

        Returns
        -------
        SessionSnapshot
            The state of the new game.

        Raises
        ------
        ValueError
            If ``size`` is smaller than 2.
        """
        with self._lock:
            if size is not None:
                if size < 2:
                    raise ValueError(f'Board size must be >= 2, got {size}')
                self.config.size = size

            self._board, cells = seed_board(self.config.size, rng=self._rng)
            self._score = 0
            self._won = False
            self._over = False
            self._moves = 0
            self._last_spawn = cells[-1] if cells else None

            _logger.info('New %dx%d game, tiles at %s', self.config.size, self.config.size, cells)
            return self.snapshot

    def apply_move(self, direction: Direction | str | int) -> SessionSnapshot:
        """
        Apply a move to the game.

        Parameters
        ----------
        direction : Direction, str or int
            The direction of the move.

        Returns
        -------
        SessionSnapshot
            The state after the move. Unchanged if the game is over or the move does not
            change the board.

        Raises
        ------
        ValueError
            If ``direction`` does not name a direction.

        Notes
        -----
        - A move that changes nothing neither spawns a tile nor changes the score.
        - Reaching the target marks the game as won; play continues until no move is left.
        """
        direction = Direction.from_value(direction)

        with self._lock:
            if self._over:
                _logger.debug('Game over, ignoring %s', direction.value)
                return self.snapshot

            # ##: Applied action and get score.
            candidate, score = move(self._board, direction)
            if boards_equal(self._board, candidate):
                _logger.debug('Move %s changes nothing, ignored', direction.value)
                return self.snapshot

            # ##: Commit the move, then fill randomly one cell.
            self._score += score
            self._moves += 1
            self._board, self._last_spawn = spawn_tile(candidate, rng=self._rng)

            if self._score > self._high_score:
                self._high_score = self._score
                self._save_high_score()

            if not self._won and has_reached_target(self._board, self.config.target):
                self._won = True
                _logger.info('Reached %d after %d moves', self.config.target, self._moves)

            if is_terminal(self._board):
                self._over = True
                _logger.info('Game over: score %d after %d moves', self._score, self._moves)

            return self.snapshot

    def render(self) -> str:
        """
        Render the game as text.

        Returns
        -------
        str
            Score lines followed by the board.
        """
        header = f'Score: {self._score}  Best: {self._high_score}'
        if self._over:
            header += '  [game over]'
        elif self._won:
            header += '  [won]'
        return f'{header}\n{render_board(self._board)}'
