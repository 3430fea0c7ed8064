# -*- coding: utf-8 -*-
"""Test cases for cell state."""
import unittest

from sudoku_engine.cells import CellNote, CellState, build_cell_grid, cell_values
from sudoku_engine.grid import count_available
from tests.grids import puzzle


class TestCellGrid(unittest.TestCase):
    def test_build_from_puzzle(self):
        grid = puzzle()
        cells = build_cell_grid(grid)
        self.assertEqual(cells[0][0].id, "r0_c0")
        self.assertEqual(cells[7][3].id, "r7_c3")
        self.assertTrue(cells[0][0].is_clue)
        self.assertFalse(cells[0][2].is_clue)
        self.assertTrue(cells[0][2].is_empty())
        self.assertFalse(cells[0][0].is_error)
        self.assertEqual(cell_values(cells), grid)

    def test_available_numbers_from_cells(self):
        cells = build_cell_grid(puzzle())
        cells[0][2].value = 4
        available = count_available(cell_values(cells))
        self.assertEqual(available[4], 9 - 3)
        self.assertEqual(available[5], 9 - 3)


class TestNotes(unittest.TestCase):
    def test_add_and_remove(self):
        cell = CellState(id="r0_c0", value=0, is_clue=False)
        note = cell.add_note(3)
        self.assertIs(cell.add_note(3), note)
        self.assertTrue(note.is_visible)
        self.assertFalse(note.is_error)
        cell.remove_note(3)
        cell.remove_note(3)
        self.assertIsNone(cell.note(3))
        with self.assertRaises(AssertionError):
            cell.add_note(10)

    def test_plain_data(self):
        cell = CellState(id="r2_c5", value=0, is_clue=False)
        cell.add_note(7).is_error = True
        cell.add_note(2).is_visible = False
        data = cell.to_dict()
        self.assertEqual([n["value"] for n in data["notes"]], [2, 7])
        restored = CellState.from_dict(data)
        self.assertEqual(restored, cell)
        self.assertEqual(CellNote.from_dict({"value": 1}), CellNote(1))


if __name__ == "__main__":
    unittest.main()
