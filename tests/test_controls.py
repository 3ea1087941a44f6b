"""
Tests for decoding keyboard and swipe input into directions.
"""

from unittest import TestCase, main

from slide2048.controls import KEY_BINDINGS, direction_from_key, direction_from_swipe
from slide2048.core.board import Direction


class TestKeyboard(TestCase):
    def test_arrow_keys(self):
        """Browser arrow key names map to their direction."""
        self.assertIs(direction_from_key('ArrowUp'), Direction.UP)
        self.assertIs(direction_from_key('ArrowDown'), Direction.DOWN)
        self.assertIs(direction_from_key('ArrowLeft'), Direction.LEFT)
        self.assertIs(direction_from_key('ArrowRight'), Direction.RIGHT)

    def test_wasd(self):
        self.assertEqual(
            [direction_from_key(key) for key in 'wasd'],
            [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT],
        )

    def test_unbound_key(self):
        """Keys without a binding decode to None."""
        self.assertIsNone(direction_from_key('x'))
        self.assertIsNone(direction_from_key('Enter'))

    def test_custom_bindings(self):
        """Custom bindings replace the defaults."""
        bindings = {'k': Direction.UP}
        self.assertIs(direction_from_key('k', bindings), Direction.UP)
        self.assertIsNone(direction_from_key('w', bindings))
        self.assertNotIn('k', KEY_BINDINGS)


class TestSwipe(TestCase):
    def test_horizontal(self):
        """A mostly horizontal swipe moves left or right."""
        self.assertIs(direction_from_swipe(30, 5), Direction.RIGHT)
        self.assertIs(direction_from_swipe(-30, 5), Direction.LEFT)

    def test_vertical(self):
        """A mostly vertical swipe moves up or down, with y growing downward."""
        self.assertIs(direction_from_swipe(5, 30), Direction.DOWN)
        self.assertIs(direction_from_swipe(5, -30), Direction.UP)

    def test_diagonal_is_vertical(self):
        """Equal deltas count as vertical."""
        self.assertIs(direction_from_swipe(10, 10), Direction.DOWN)
        self.assertIs(direction_from_swipe(-10, -10), Direction.UP)

    def test_no_movement(self):
        self.assertIsNone(direction_from_swipe(0, 0))


if __name__ == '__main__':
    main()
