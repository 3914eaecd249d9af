"""
Play 2048 by hand, in the terminal or in a Matplotlib window.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from numpy.random import default_rng

from play2048.config import GameConfig
from play2048.envs import GameSession
from play2048.storage import JsonHighScoreStore, MemoryHighScoreStore
from play2048.utils.controls import key_to_direction

_logger = logging.getLogger(__name__)

HELP = 'Moves: left, up, right, down (or wasd, hjkl). r: new game, n <size>: new board size, q: quit.'

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def redraw(window: Any, session: GameSession) -> None:
    """
    Redraw the game board.

    Parameters
    ----------
    window : WindowBoard
        Class to draw the game board
    session : GameSession
        The game session
    """
    snapshot = session.snapshot
    caption = f'Score: {snapshot.score}   Best: {snapshot.high_score}'
    if snapshot.over:
        caption += '   Game over! (backspace: new game)'
    elif snapshot.won:
        caption += '   You win! Keep going.'
    window.show_image(snapshot.board, caption=caption)


def key_handler(session: GameSession, window: Any, event: Any) -> None:
    """
    Handle the keyboard of the window.

    Parameters
    ----------
    session : GameSession
        The game session
    window : WindowBoard
        Class to draw the game board
    event : Any
        Key event to handle
    """
    if event.key == 'escape':
        window.close()
        return

    if event.key == 'backspace':
        session.reset()
        redraw(window, session)
        return

    direction = key_to_direction(event.key)
    if direction is not None:
        session.apply_move(direction)
        redraw(window, session)


def run_window(session: GameSession) -> None:
    """Open the game window and block until it is closed."""
    from play2048.utils.windows import WindowBoard

    window = WindowBoard(title='2048 Game', size=session.size)
    window.register_key_handler(lambda event: key_handler(session, window, event))
    redraw(window, session)

    # ##: Blocking event loop.
    window.show(block=True)


def run_text(session: GameSession, stdin: TextIO, stdout: TextIO) -> int:
    """
    Play in the terminal, one command per line.

    Parameters
    ----------
    session : GameSession
        The game session.
    stdin : TextIO
        Where commands are read from.
    stdout : TextIO
        Where the board is printed.

    Returns
    -------
    int
        The final score.
    """
    print(HELP, file=stdout)
    print(session.render(), file=stdout)

    for line in stdin:
        command = line.strip().lower()
        if not command:
            continue
        if command in ('q', 'quit', 'exit'):
            break
        if command in ('r', 'reset'):
            session.reset()
        elif command.startswith('n '):
            try:
                requested = int(command[2:])
            except ValueError:
                print(f'Invalid size: {command[2:]!r}', file=stdout)
                continue
            session.reset(size=session.config.clamp_size(requested))
        else:
            direction = key_to_direction(command)
            if direction is None:
                print(HELP, file=stdout)
                continue
            before = session.moves
            session.apply_move(direction)
            if session.moves == before and not session.over:
                print(f'Nothing moves {direction.value}.', file=stdout)

        print(session.render(), file=stdout)

    return session.score


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog='play2048', description='Play the 2048 puzzle game.')
    parser.add_argument('--size', type=int, default=4, help='Side length of the board (default: 4).')
    parser.add_argument('--seed', type=int, default=None, help='Seed of the tile spawner.')
    parser.add_argument('--store', default=None, help='JSON file holding the high score.')
    parser.add_argument('--window', action='store_true', help='Play in a Matplotlib window.')
    parser.add_argument(
        '--log-level',
        default='WARNING',
        type=str.upper,
        choices=LOG_LEVELS,
        help='Logging level (default: WARNING).',
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the game from the command line.

    Returns
    -------
    int
        Exit status.
    """
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    config = GameConfig(size=args.size, store_path=args.store)
    try:
        config.validate()
    except ValueError as error:
        print(f'play2048: {error}', file=sys.stderr)
        return 2

    store = JsonHighScoreStore(config.store_path, key=config.store_key) if config.store_path else MemoryHighScoreStore()
    session = GameSession(config=config, store=store, rng=default_rng(args.seed))

    if args.window:
        run_window(session)
    else:
        run_text(session, sys.stdin, sys.stdout)

    _logger.info('Final score %d, best %d', session.score, session.high_score)
    return 0
