# exceptions.py


class SudokuError(Exception):
    pass


class SolverInvariantError(SudokuError, RuntimeError):
    """The solver failed where a solution is guaranteed to exist."""


class GenerationCancelled(SudokuError):
    """A search was stopped by its ``should_stop`` callback."""
