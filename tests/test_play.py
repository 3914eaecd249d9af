"""
Tests for the terminal front end.
"""

import io
import json
from pathlib import Path
from tempfile import TemporaryDirectory
from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import patch

from numpy.random import default_rng

from play2048.envs import GameSession
from play2048.play import key_handler, main as play_main, parse_args, run_text


class FakeWindow:
    def __init__(self):
        self.images = []
        self.closed = False

    def show_image(self, board, caption=''):
        self.images.append((board, caption))

    def close(self):
        self.closed = True


class TestRunText(TestCase):
    def test_commands(self):
        session = GameSession(rng=default_rng(0))
        stdout = io.StringIO()
        score = run_text(session, io.StringIO('left\nup\nfoo\n\nq\nright\n'), stdout)

        output = stdout.getvalue()
        self.assertEqual(score, session.score)
        self.assertIn('Score:', output)
        self.assertIn('Moves:', output)
        # ##>: Commands after quit are not applied.
        self.assertLessEqual(session.moves, 2)

    def test_resize(self):
        session = GameSession(rng=default_rng(0))
        run_text(session, io.StringIO('n 6\nn 12\nn x\n'), io.StringIO())
        self.assertEqual(session.size, 6)

    def test_reset(self):
        session = GameSession(rng=default_rng(0))
        run_text(session, io.StringIO('left\nright\nr\n'), io.StringIO())
        self.assertEqual(session.moves, 0)
        self.assertEqual(session.score, 0)


class TestKeyHandler(TestCase):
    def setUp(self):
        self.session = GameSession(rng=default_rng(0))
        self.window = FakeWindow()

    def test_move_redraws(self):
        key_handler(self.session, self.window, SimpleNamespace(key='left'))
        key_handler(self.session, self.window, SimpleNamespace(key='right'))
        self.assertEqual(len(self.window.images), 2)
        self.assertTrue(self.window.images[-1][1].startswith('Score:'))

    def test_escape_closes(self):
        key_handler(self.session, self.window, SimpleNamespace(key='escape'))
        self.assertTrue(self.window.closed)

    def test_unbound_key(self):
        key_handler(self.session, self.window, SimpleNamespace(key='x'))
        self.assertEqual(self.window.images, [])


class TestMain(TestCase):
    def test_invalid_size(self):
        with patch('sys.stderr', new_callable=io.StringIO):
            self.assertEqual(play_main(['--size', '1']), 2)

    def test_log_level(self):
        """Levels are case-insensitive and unknown ones are rejected by the parser."""
        self.assertEqual(parse_args(['--log-level', 'debug']).log_level, 'DEBUG')
        with patch('sys.stderr', new_callable=io.StringIO), self.assertRaises(SystemExit) as context:
            parse_args(['--log-level', 'BOGUS'])
        self.assertEqual(context.exception.code, 2)

    def test_text_game_with_store(self):
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / 'best.json'
            commands = io.StringIO('left\nup\nright\ndown\n' * 10 + 'q\n')
            with patch('sys.stdin', commands), patch('sys.stdout', new_callable=io.StringIO):
                self.assertEqual(play_main(['--seed', '1', '--store', str(path)]), 0)

            self.assertGreater(json.loads(path.read_text())['highScore2048'], 0)


if __name__ == '__main__':
    main()
