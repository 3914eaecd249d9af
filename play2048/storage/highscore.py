"""
Persistence of the high score.

The game only stores a single integer under a fixed key. Storage problems never reach the
game logic: they are logged and the high score falls back to 0 (on read) or stays unchanged
on disk (on write).
"""

import json
import logging
from pathlib import Path
from typing import Protocol

# ##>: Key under which the high score is stored.
DEFAULT_KEY = 'highScore2048'

_logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    """Get and set a named integer."""

    def load(self) -> int:
        ...

    def save(self, value: int) -> None:
        ...


def parse_score(raw: object) -> int:
    """
    Convert a stored value to a high score.

    Parameters
    ----------
    raw : object
        Value read from storage.

    Returns
    -------
    int
        The score, or 0 if the value is missing, not an integer, or negative.
    """
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if raw >= 0 else 0
    if isinstance(raw, str):
        try:
            value = int(raw.strip(), 10)
        except ValueError:
            return 0
        return value if value >= 0 else 0
    return 0


class MemoryHighScoreStore:
    """High score kept in memory for the lifetime of the process."""

    def __init__(self, value: int = 0):
        self._value = parse_score(value)

    def load(self) -> int:
        return self._value

    def save(self, value: int) -> None:
        self._value = int(value)


class JsonHighScoreStore:
    """
    High score stored in a JSON file.

    The file holds a JSON object; the score lives under a fixed key so that other
    entries written by the same application are preserved.

    Parameters
    ----------
    path : str or Path
        Location of the JSON file.
    key : str, optional
        Key of the score inside the object (default is ``'highScore2048'``).
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_KEY):
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        """Read the stored object, returning an empty one on any failure."""
        try:
            content = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return {}
        except OSError as error:
            _logger.warning('Failed to read high score from %s: %s', self.path, error)
            return {}
        except UnicodeDecodeError as error:
            _logger.warning('Corrupted high score file %s: %s', self.path, error)
            return {}

        try:
            data = json.loads(content)
        except ValueError as error:
            _logger.warning('Corrupted high score file %s: %s', self.path, error)
            return {}

        if not isinstance(data, dict):
            _logger.warning('Unexpected content in high score file %s', self.path)
            return {}
        return data

    def load(self) -> int:
        """
        Read the stored high score.

        Returns
        -------
        int
            The stored score, or 0 when nothing valid is stored.
        """
        data = self._read()
        if self.key not in data:
            return 0

        score = parse_score(data[self.key])
        if score == 0 and data[self.key] not in (0, '0'):
            _logger.warning('Ignoring invalid high score %r in %s', data[self.key], self.path)
        return score

    def save(self, value: int) -> None:
        """
        Write the high score, keeping other entries of the file.

        Parameters
        ----------
        value : int
            The new high score.
        """
        data = self._read()
        data[self.key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding='utf-8')
        except OSError as error:
            _logger.warning('Failed to save high score to %s: %s', self.path, error)
