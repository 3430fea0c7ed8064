# -*- coding: utf-8 -*-
"""Test cases for grid primitives."""
import unittest

from sudoku_engine.grid import (
    box_index,
    check_shape,
    copy_grid,
    count_available,
    empty_grid,
    format_grid,
    is_consistent,
    is_peer,
    is_solved_grid,
    is_valid_placement,
    parse_grid,
    regions,
    same_block,
    same_col,
    same_row,
)
from tests.grids import PUZZLE, puzzle, solved


class TestPredicates(unittest.TestCase):
    def test_row_col_block(self):
        self.assertTrue(same_row(4, 4))
        self.assertFalse(same_row(4, 5))
        self.assertTrue(same_col(0, 0))
        self.assertFalse(same_col(0, 8))
        self.assertTrue(same_block(0, 0, 2, 2))
        self.assertTrue(same_block(3, 6, 5, 8))
        self.assertFalse(same_block(2, 2, 3, 3))
        self.assertFalse(same_block(0, 2, 0, 3))

    def test_box_index(self):
        self.assertEqual(box_index(0, 0), 0)
        self.assertEqual(box_index(1, 5), 1)
        self.assertEqual(box_index(4, 4), 4)
        self.assertEqual(box_index(8, 8), 8)
        self.assertEqual(box_index(6, 2), 6)

    def test_is_peer(self):
        self.assertTrue(is_peer(0, 0, 0, 8))
        self.assertTrue(is_peer(0, 0, 8, 0))
        self.assertTrue(is_peer(0, 0, 1, 1))
        self.assertFalse(is_peer(0, 0, 4, 4))

    def test_regions(self):
        units = regions()
        self.assertEqual(len(units), 27)
        for unit in units:
            self.assertEqual(len(set(unit)), 9)
        self.assertEqual(units[0], [(0, c) for c in range(9)])
        self.assertEqual(units[9], [(r, 0) for r in range(9)])
        self.assertIn((1, 1), units[18])


class TestPlacement(unittest.TestCase):
    def test_valid_placement_on_puzzle(self):
        grid = puzzle()
        # (0, 2) is empty; 5 and 3 are in the row, 8 in the column, 9 in the block
        self.assertFalse(is_valid_placement(grid, 5, 0, 2))
        self.assertFalse(is_valid_placement(grid, 8, 0, 2))
        self.assertFalse(is_valid_placement(grid, 9, 0, 2))
        self.assertTrue(is_valid_placement(grid, 4, 0, 2))

    def test_target_cell_is_ignored(self):
        grid = solved()
        self.assertTrue(is_valid_placement(grid, grid[4][4], 4, 4))
        self.assertFalse(is_valid_placement(grid, grid[4][5], 4, 4))

    def test_does_not_mutate(self):
        grid = puzzle()
        before = copy_grid(grid)
        is_valid_placement(grid, 1, 0, 2)
        self.assertEqual(grid, before)


class TestGridHelpers(unittest.TestCase):
    def test_check_shape(self):
        check_shape(empty_grid())
        with self.assertRaises(AssertionError):
            check_shape([[0] * 9 for _ in range(8)])
        with self.assertRaises(AssertionError):
            check_shape([[0] * 8 for _ in range(9)])

    def test_copy_is_independent(self):
        grid = solved()
        clone = copy_grid(grid)
        clone[0][0] = 0
        self.assertEqual(grid[0][0], 5)

    def test_consistency(self):
        self.assertTrue(is_consistent(puzzle()))
        self.assertTrue(is_solved_grid(solved()))
        self.assertFalse(is_solved_grid(puzzle()))

        grid = solved()
        grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
        self.assertFalse(is_consistent(grid))
        self.assertFalse(is_solved_grid(grid))

    def test_count_available(self):
        self.assertEqual(count_available(empty_grid()), {d: 9 for d in range(1, 10)})
        self.assertEqual(count_available(solved()), {d: 0 for d in range(1, 10)})

        grid = empty_grid()
        grid[0][0] = 5
        grid[3][3] = 5
        grid[8][8] = 1
        available = count_available(grid)
        self.assertEqual(available[5], 7)
        self.assertEqual(available[1], 8)
        self.assertEqual(available[2], 9)


class TestTextConversion(unittest.TestCase):
    def test_parse(self):
        grid = parse_grid(PUZZLE)
        self.assertEqual(grid[0], [5, 3, 0, 0, 7, 0, 0, 0, 0])
        self.assertEqual(grid[8][8], 9)

    def test_parse_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            parse_grid("123")
        with self.assertRaises(ValueError):
            parse_grid("x" * 81)

    def test_format_then_parse(self):
        grid = puzzle()
        text = format_grid(grid)
        self.assertTrue(text.startswith("+-------+-------+-------+"))
        self.assertIn("| 5 3 . | . 7 . | . . . |", text)
        self.assertEqual(parse_grid(text), grid)


if __name__ == "__main__":
    unittest.main()
