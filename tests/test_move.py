from unittest import TestCase, main

from numpy import array

from slide2048.core.board import Direction, legal_directions


class TestLegalDirections(TestCase):
    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_directions(board), [Direction.UP, Direction.RIGHT, Direction.DOWN])

    def test_no_legal_direction(self):
        """
        Test that a stuck board has no legal direction.
        """
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_directions(board), [])

    def test_merge_only(self):
        """
        Test that a full board with a mergeable pair allows moves along that pair.
        """
        board = array([[2, 2, 4, 8], [4, 8, 16, 32], [8, 16, 32, 64], [16, 32, 64, 128]])
        self.assertEqual(legal_directions(board), [Direction.LEFT, Direction.RIGHT])


class TestDirection(TestCase):
    def test_values(self):
        """
        Test that directions are built from their string values.
        """
        self.assertIs(Direction('left'), Direction.LEFT)
        self.assertIs(Direction('down'), Direction.DOWN)
        with self.assertRaises(ValueError):
            Direction('diagonal')

    def test_orientation(self):
        self.assertTrue(Direction.UP.is_vertical)
        self.assertFalse(Direction.LEFT.is_vertical)
        self.assertTrue(Direction.RIGHT.is_reversed)
        self.assertFalse(Direction.UP.is_reversed)


if __name__ == '__main__':
    main()
