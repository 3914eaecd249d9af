from unittest import TestCase, main

from numpy import array

from play2048.config import GameConfig
from play2048.core.gameboard import Direction
from play2048.utils.controls import key_to_direction
from play2048.utils.render import render_board


class TestControls(TestCase):
    def test_arrow_keys(self):
        """Matplotlib and browser arrow key names map to directions."""
        self.assertIs(key_to_direction('left'), Direction.LEFT)
        self.assertIs(key_to_direction('ArrowUp'), Direction.UP)
        self.assertIs(key_to_direction('ArrowRight'), Direction.RIGHT)
        self.assertIs(key_to_direction('down'), Direction.DOWN)

    def test_letter_keys(self):
        self.assertEqual([key_to_direction(k) for k in 'awds'], list(Direction))
        self.assertEqual([key_to_direction(k) for k in 'hklj'], list(Direction))

    def test_unbound_keys(self):
        for key in ('escape', 'x', '', None):
            self.assertIsNone(key_to_direction(key))


class TestRender(TestCase):
    def test_render_board(self):
        text = render_board(array([[2, 0], [1024, 4]]))
        self.assertEqual(text, '   2    .\n1024    4')

    def test_empty_symbol(self):
        self.assertEqual(render_board(array([[0, 0], [0, 0]]), empty='-'), '- -\n- -')


class TestGameConfig(TestCase):
    def test_defaults(self):
        config = GameConfig().validate()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.target, 2048)

    def test_validate(self):
        with self.assertRaises(ValueError):
            GameConfig(size=1).validate()
        with self.assertRaises(ValueError):
            GameConfig(target=1000).validate()
        self.assertEqual(GameConfig(size=2).validate().size, 2)

    def test_clamp_size(self):
        """Sizes outside the offered range keep the current size."""
        config = GameConfig(size=5)
        self.assertEqual(config.clamp_size(3), 3)
        self.assertEqual(config.clamp_size(8), 8)
        self.assertEqual(config.clamp_size(2), 5)
        self.assertEqual(config.clamp_size(9), 5)


if __name__ == '__main__':
    main()
