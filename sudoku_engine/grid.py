# grid.py

from typing import Dict, List, Tuple

SIZE = 9
BLOCK = 3
EMPTY = 0
DIGITS = list(range(1, SIZE + 1))

Grid = List[List[int]]
Pos = Tuple[int, int]

_SEPARATORS = set(" \t\r\n|+-")


# --------------------------
# Coordinate predicates
# --------------------------


def same_row(r1: int, r2: int) -> bool:
    return r1 == r2


def same_col(c1: int, c2: int) -> bool:
    return c1 == c2


def same_block(r1: int, c1: int, r2: int, c2: int) -> bool:
    return r1 // BLOCK == r2 // BLOCK and c1 // BLOCK == c2 // BLOCK


def box_index(r: int, c: int) -> int:
    return (r // BLOCK) * BLOCK + (c // BLOCK)


def is_peer(r1: int, c1: int, r2: int, c2: int) -> bool:
    """True if the two cells share a row, a column or a block."""
    return same_row(r1, r2) or same_col(c1, c2) or same_block(r1, c1, r2, c2)


# --------------------------
# Grid helpers
# --------------------------


def check_shape(grid) -> None:
    assert len(grid) == SIZE, f"Grid must have {SIZE} rows, got {len(grid)}"
    for row in grid:
        assert len(row) == SIZE, f"Grid rows must have {SIZE} cells, got {len(row)}"


def empty_grid() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def regions() -> List[List[Pos]]:
    """Return all units: rows, then columns, then blocks."""
    units: List[List[Pos]] = []

    # Rows
    for r in range(SIZE):
        units.append([(r, c) for c in range(SIZE)])

    # Cols
    for c in range(SIZE):
        units.append([(r, c) for r in range(SIZE)])

    # Blocks
    for br in range(0, SIZE, BLOCK):
        for bc in range(0, SIZE, BLOCK):
            units.append(
                [(br + dr, bc + dc) for dr in range(BLOCK) for dc in range(BLOCK)]
            )

    return units


def is_valid_placement(grid: Grid, value: int, row: int, col: int) -> bool:
    """
    True if ``value`` does not occur in the row, column or block of
    (row, col). The target cell itself is not inspected.
    """
    for c in range(SIZE):
        if c != col and grid[row][c] == value:
            return False
    for r in range(SIZE):
        if r != row and grid[r][col] == value:
            return False

    br = (row // BLOCK) * BLOCK
    bc = (col // BLOCK) * BLOCK
    for r in range(br, br + BLOCK):
        for c in range(bc, bc + BLOCK):
            if (r, c) != (row, col) and grid[r][c] == value:
                return False
    return True


def _check_unit(grid: Grid, positions: List[Pos]) -> bool:
    seen = set()
    for r, c in positions:
        v = grid[r][c]
        if v == EMPTY:
            continue
        if v in seen:
            return False
        seen.add(v)
    return True


def is_consistent(grid: Grid) -> bool:
    """No non-zero value repeats in any row, column or block."""
    check_shape(grid)
    return all(_check_unit(grid, unit) for unit in regions())


def is_solved_grid(grid: Grid) -> bool:
    check_shape(grid)
    if any(v not in DIGITS for row in grid for v in row):
        return False
    return is_consistent(grid)


def count_available(grid: Grid) -> Dict[int, int]:
    """For each digit, how many more times it can still be placed."""
    check_shape(grid)
    counts = {d: 0 for d in DIGITS}
    for row in grid:
        for v in row:
            if v in counts:
                counts[v] += 1
    return {d: SIZE - counts[d] for d in DIGITS}


# --------------------------
# Text conversion
# --------------------------


def parse_grid(text: str) -> Grid:
    """
    Build a grid from 81 cell characters. Digits 1-9 are values, ``0`` and
    ``.`` are empty cells; whitespace and ``|+-`` box-drawing are skipped.
    """
    cells: List[int] = []
    for ch in text:
        if ch in _SEPARATORS:
            continue
        if ch == ".":
            cells.append(EMPTY)
        elif ch.isdigit():
            cells.append(int(ch))
        else:
            raise ValueError(f"Unexpected character {ch!r} in grid text")
    if len(cells) != SIZE * SIZE:
        raise ValueError(f"Expected {SIZE * SIZE} cells, got {len(cells)}")
    return [cells[r * SIZE: (r + 1) * SIZE] for r in range(SIZE)]


def format_grid(grid: Grid) -> str:
    check_shape(grid)
    horiz = ("+-" + "--" * BLOCK) * (SIZE // BLOCK) + "+"
    lines = []
    for r, row in enumerate(grid):
        if r % BLOCK == 0:
            lines.append(horiz)
        cells = [str(v) if v != EMPTY else "." for v in row]
        line = "| "
        for b in range(SIZE // BLOCK):
            start = b * BLOCK
            line += " ".join(cells[start: start + BLOCK]) + " | "
        lines.append(line.rstrip())
    lines.append(horiz)
    return "\n".join(lines)
