# cells.py

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .grid import EMPTY, Grid, check_shape

CellGrid = List[List["CellState"]]


@dataclass
class CellNote:
    """A pencil-mark candidate inside an empty cell."""

    value: int
    is_visible: bool = True
    is_error: bool = False
    is_highlighted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CellNote":
        return cls(**data)


@dataclass
class CellState:
    """
    Live state of one board cell. ``value`` is 0 for an empty cell;
    ``is_clue`` is fixed when the puzzle is laid out.
    """

    id: str
    value: int
    is_clue: bool
    is_error: bool = False
    notes: Dict[int, CellNote] = field(default_factory=dict)
    is_highlighted: bool = False

    def is_empty(self) -> bool:
        return self.value == EMPTY

    def note(self, value: int) -> Optional[CellNote]:
        return self.notes.get(value)

    def add_note(self, value: int) -> CellNote:
        assert 1 <= value <= 9, f"Note value must be 1..9, got {value}"
        return self.notes.setdefault(value, CellNote(value))

    def remove_note(self, value: int) -> None:
        self.notes.pop(value, None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "is_clue": self.is_clue,
            "is_error": self.is_error,
            "notes": [n.to_dict() for n in sorted(self.notes.values(), key=lambda n: n.value)],
            "is_highlighted": self.is_highlighted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CellState":
        data = dict(data)
        notes = [CellNote.from_dict(n) for n in data.pop("notes", [])]
        return cls(notes={n.value: n for n in notes}, **data)


def build_cell_grid(puzzle: Grid) -> CellGrid:
    check_shape(puzzle)
    return [
        [
            CellState(id=f"r{r}_c{c}", value=value, is_clue=value != EMPTY)
            for c, value in enumerate(row)
        ]
        for r, row in enumerate(puzzle)
    ]


def cell_values(cells: CellGrid) -> Grid:
    check_shape(cells)
    return [[cell.value for cell in row] for row in cells]
