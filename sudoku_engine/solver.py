# solver.py

from dataclasses import dataclass
from typing import Callable, List, Optional, Set
import random

from .exceptions import GenerationCancelled
from .grid import (
    DIGITS,
    EMPTY,
    SIZE,
    Grid,
    Pos,
    box_index,
    check_shape,
    copy_grid,
    is_valid_placement,
)

_ALL_VALUES = frozenset(DIGITS)


@dataclass
class _Counter:
    """Solution accumulator threaded through one counting search."""

    limit: int
    count: int = 0

    @property
    def reached(self) -> bool:
        return self.count >= self.limit


class _Search:
    """
    Used-value sets for every row, column and block of one grid.
    Owned by a single search call; the grid is mutated in place.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.rows: List[Set[int]] = [set() for _ in range(SIZE)]
        self.cols: List[Set[int]] = [set() for _ in range(SIZE)]
        self.boxes: List[Set[int]] = [set() for _ in range(SIZE)]
        self.empties: Set[Pos] = set()

        for r in range(SIZE):
            for c in range(SIZE):
                v = grid[r][c]
                assert v == EMPTY or v in _ALL_VALUES, f"Invalid cell value {v!r}"
                if v == EMPTY:
                    self.empties.add((r, c))
                    continue
                self.rows[r].add(v)
                self.cols[c].add(v)
                self.boxes[box_index(r, c)].add(v)

    def candidates(self, r: int, c: int) -> Set[int]:
        return _ALL_VALUES - (self.rows[r] | self.cols[c] | self.boxes[box_index(r, c)])

    def first_empty(self) -> Optional[Pos]:
        """Row-major scan."""
        if not self.empties:
            return None
        return min(self.empties)

    def fewest_candidates(self) -> Optional[Pos]:
        """Minimum Remaining Values (MRV) heuristic."""
        if not self.empties:
            return None
        return min(self.empties, key=lambda p: (len(self.candidates(*p)), p))

    def place(self, r: int, c: int, v: int) -> None:
        self.grid[r][c] = v
        self.rows[r].add(v)
        self.cols[c].add(v)
        self.boxes[box_index(r, c)].add(v)
        self.empties.discard((r, c))

    def unplace(self, r: int, c: int, v: int) -> None:
        self.grid[r][c] = EMPTY
        self.rows[r].remove(v)
        self.cols[c].remove(v)
        self.boxes[box_index(r, c)].remove(v)
        self.empties.add((r, c))


def givens_are_consistent(grid: Grid) -> bool:
    for r in range(SIZE):
        for c in range(SIZE):
            v = grid[r][c]
            if v != EMPTY and not is_valid_placement(grid, v, r, c):
                return False
    return True


class Solver:
    """
    Backtracking solver and bounded solution counter.

    The solver keeps no state between calls, so one instance can serve any
    number of searches as long as each search gets its own grid.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        mrv: bool = True,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.mrv = mrv
        self.should_stop = should_stop

    # --------------------------
    # Public API
    # --------------------------

    def solve(self, grid: Grid) -> bool:
        """
        Fill ``grid`` in place with one complete assignment. Candidate values
        are tried in a fresh random order for every cell, so repeated calls on
        an empty grid yield different solutions. Returns False and leaves the
        grid unchanged when no solution exists.
        """
        check_shape(grid)
        search = _Search(grid)
        if not givens_are_consistent(grid):
            return False
        return self._fill(search)

    def count_solutions(self, grid: Grid, limit: int = 2) -> int:
        """
        Count completions of ``grid``, stopping once ``limit`` is reached.
        The caller's grid is not modified.
        """
        assert limit >= 1, "Solution limit must be at least 1"
        check_shape(grid)
        search = _Search(copy_grid(grid))
        if not givens_are_consistent(search.grid):
            return 0
        counter = _Counter(limit=limit)
        self._count(search, counter)
        return counter.count

    # --------------------------
    # Internals
    # --------------------------

    def _poll(self) -> None:
        if self.should_stop is not None and self.should_stop():
            raise GenerationCancelled("Search cancelled")

    def _next_cell(self, search: _Search) -> Optional[Pos]:
        if self.mrv:
            return search.fewest_candidates()
        return search.first_empty()

    def _fill(self, search: _Search) -> bool:
        self._poll()
        pos = self._next_cell(search)
        if pos is None:
            return True

        r, c = pos
        values = sorted(search.candidates(r, c))
        self.rng.shuffle(values)
        for v in values:
            search.place(r, c, v)
            if self._fill(search):
                return True
            search.unplace(r, c, v)
        return False

    def _count(self, search: _Search, counter: _Counter) -> None:
        self._poll()
        if counter.reached:
            return
        pos = self._next_cell(search)
        if pos is None:
            counter.count += 1
            return

        r, c = pos
        for v in sorted(search.candidates(r, c)):
            search.place(r, c, v)
            self._count(search, counter)
            search.unplace(r, c, v)
            if counter.reached:
                return


def solve(grid: Grid) -> bool:
    return Solver().solve(grid)


def count_solutions(grid: Grid, limit: int = 2) -> int:
    return Solver().count_solutions(grid, limit)
