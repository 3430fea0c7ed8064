# validator.py

from typing import List

from .cells import CellGrid
from .grid import EMPTY, SIZE, Pos, check_shape, is_peer, regions


def _check_position(row: int, col: int) -> None:
    assert 0 <= row < SIZE and 0 <= col < SIZE, f"Cell ({row}, {col}) is off the board"


def _mark_duplicates(cells: CellGrid, unit: List[Pos]) -> None:
    """Flag every cell of ``unit`` whose value appears more than once."""
    seen = set()
    for i, (r, c) in enumerate(unit):
        cell = cells[r][c]
        if cell.is_empty():
            continue
        if cell.value in seen:
            cell.is_error = True
            # earlier occurrences
            for pr, pc in unit[:i]:
                if cells[pr][pc].value == cell.value:
                    cells[pr][pc].is_error = True
        seen.add(cell.value)


def validate_board(cells: CellGrid, changed_value: int, row: int, col: int) -> None:
    """
    Recompute every cell's error flag after an edit at (row, col).

    Errors and note highlights are cleared first, then notes for
    ``changed_value`` in empty peers of the edited cell are hidden (value
    placed) or shown again (cell cleared). Finally each row, column and
    block is scanned and all cells taking part in a duplicate are flagged.
    """
    check_shape(cells)
    _check_position(row, col)

    for line in cells:
        for cell in line:
            cell.is_error = False
            for note in cell.notes.values():
                note.is_highlighted = False

    make_visible = cells[row][col].is_empty()
    for r in range(SIZE):
        for c in range(SIZE):
            cell = cells[r][c]
            if not cell.is_empty() or not is_peer(row, col, r, c):
                continue
            note = cell.note(changed_value)
            if note is not None:
                note.is_visible = make_visible

    # rows, columns, blocks
    for unit in regions():
        _mark_duplicates(cells, unit)


def validate_notes(cells: CellGrid, changed_value: int, row: int, col: int) -> None:
    """
    Flag the ``changed_value`` note of (row, col) if a peer already holds
    that value. The flag is only ever set here, never cleared.
    """
    check_shape(cells)
    _check_position(row, col)
    if changed_value == EMPTY:
        return
    note = cells[row][col].note(changed_value)
    if note is None:
        return

    for r in range(SIZE):
        for c in range(SIZE):
            if is_peer(row, col, r, c) and cells[r][c].value == changed_value:
                note.is_error = True
                return


def is_board_solved(cells: CellGrid) -> bool:
    check_shape(cells)
    return all(not cell.is_empty() and not cell.is_error for line in cells for cell in line)
