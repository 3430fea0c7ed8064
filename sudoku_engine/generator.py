# generator.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple, Union
import logging
import random

from .exceptions import SolverInvariantError
from .grid import EMPTY, SIZE, Grid, check_shape, copy_grid, empty_grid
from .solver import Solver

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def removal_target(self) -> int:
        """Number of clues the carver tries to remove."""
        return _REMOVAL_TARGETS[self]

    @classmethod
    def parse(cls, name: Union[str, "Difficulty"]) -> "Difficulty":
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None


_REMOVAL_TARGETS = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 48,
    Difficulty.HARD: 54,
    Difficulty.EXPERT: 58,  # often settles with a few more clues
}


@dataclass
class PuzzleGenerator:
    """
    Builds a random solved grid and carves a uniquely solvable puzzle out
    of it. Passing a ``seed`` makes the output reproducible.
    """

    seed: Optional[int] = None
    mrv: bool = True
    should_stop: Optional[Callable[[], bool]] = None

    # internal
    _rng: random.Random = field(init=False, repr=False)
    _solver: Solver = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        self._solver = Solver(
            rng=self._rng, mrv=self.mrv, should_stop=self.should_stop
        )

    # --------------------------
    # Public API
    # --------------------------

    def generate(self, difficulty: Union[Difficulty, str]) -> Tuple[Grid, Grid]:
        """Return ``(solution, puzzle)`` as two independent grids."""
        difficulty = Difficulty.parse(difficulty)
        logger.debug("Generating %s puzzle (seed=%s)", difficulty.name, self.seed)
        solution = self.generate_full_solution()
        puzzle = self.carve_puzzle(solution, difficulty)
        return solution, puzzle

    def generate_full_solution(self) -> Grid:
        grid = empty_grid()
        if not self._solver.solve(grid):
            raise SolverInvariantError("Could not fill an empty grid")
        logger.debug("Full solution generated")
        return grid

    def carve_puzzle(self, solution: Grid, difficulty: Union[Difficulty, str]) -> Grid:
        """
        Remove clues from a copy of ``solution`` in random order. A removal
        is kept only if the puzzle still has exactly one solution; removal
        stops once the difficulty's target is reached.
        """
        check_shape(solution)
        difficulty = Difficulty.parse(difficulty)
        target = difficulty.removal_target
        puzzle = copy_grid(solution)

        cells = [(r, c) for r in range(SIZE) for c in range(SIZE)]
        self._rng.shuffle(cells)

        removed = 0
        reverted = 0
        for r, c in cells:
            if removed >= target:
                break
            if puzzle[r][c] == EMPTY:
                continue
            saved = puzzle[r][c]
            puzzle[r][c] = EMPTY

            if self._solver.count_solutions(puzzle, limit=2) != 1:
                puzzle[r][c] = saved
                reverted += 1
            else:
                removed += 1

        if removed < target:
            logger.info(
                "%s target not met: removed %d of %d clues",
                difficulty.name,
                removed,
                target,
            )
        logger.debug(
            "Carved %s puzzle: %d removed, %d reverted", difficulty.name, removed, reverted
        )
        return puzzle


def generate(
    difficulty: Union[Difficulty, str], seed: Optional[int] = None
) -> Tuple[Grid, Grid]:
    return PuzzleGenerator(seed=seed).generate(difficulty)
