"""Data models supporting the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .constants import Direction, EMPTY_CELL
from .exceptions import InvalidWordError


FrozenGrid = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class WordEntry:
    """A normalized answer together with its clue."""

    word: str
    clue: str

    def __post_init__(self) -> None:
        if not self.word:
            raise InvalidWordError("Word entries cannot be empty")
        if not self.clue:
            raise InvalidWordError(f"Word '{self.word}' is missing a clue")

    @property
    def length(self) -> int:
        return len(self.word)


@dataclass
class PlacedWord:
    """A word written onto the grid at a fixed position and orientation."""

    entry: WordEntry
    row: int
    col: int
    horizontal: bool
    number: int = 0

    @property
    def word(self) -> str:
        return self.entry.word

    @property
    def clue(self) -> str:
        return self.entry.clue

    @property
    def length(self) -> int:
        return self.entry.length

    @property
    def direction(self) -> Direction:
        return Direction.from_horizontal(self.horizontal)

    @property
    def key(self) -> Tuple[int, int, bool]:
        return (self.row, self.col, self.horizontal)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self.horizontal:
            return [(self.row, self.col + i) for i in range(self.length)]
        return [(self.row + i, self.col) for i in range(self.length)]

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]

    def to_jsonable(self) -> dict:
        return {
            "number": self.number,
            "word": self.word,
            "clue": self.clue,
            "row": self.row,
            "col": self.col,
            "horizontal": self.horizontal,
            "direction": self.direction.value,
        }


@dataclass
class GenerationResult:
    """Outcome of a layout run. ``grid is None`` means total failure."""

    grid: Optional[FrozenGrid]
    placed_words: List[PlacedWord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None
    grid_size: int = 0

    @property
    def ok(self) -> bool:
        return self.grid is not None

    @property
    def filled_cells(self) -> int:
        if self.grid is None:
            return 0
        return sum(1 for row in self.grid for cell in row if cell != EMPTY_CELL)

    def to_jsonable(self) -> dict:
        return {
            "ok": self.ok,
            "grid_size": self.grid_size,
            "grid": [list(row) for row in self.grid] if self.grid is not None else None,
            "placed_words": [placed.to_jsonable() for placed in self.placed_words],
            "warnings": list(self.warnings),
            "error": self.error,
        }


@dataclass(frozen=True)
class CrosswordBounds:
    """Inclusive rectangle covering the filled part of a grid."""

    top: int
    bottom: int
    left: int
    right: int
    word_cells: FrozenSet[Tuple[int, int]] = frozenset()

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    def contains(self, row: int, col: int) -> bool:
        return self.top <= row <= self.bottom and self.left <= col <= self.right


@dataclass(frozen=True)
class ClueLine:
    number: int
    clue: str
    word: str
    direction: Direction

    def label(self) -> str:
        return f"{self.number}. {self.clue}"


@dataclass
class ClueGroups:
    across: List[ClueLine] = field(default_factory=list)
    down: List[ClueLine] = field(default_factory=list)

    def to_jsonable(self) -> dict:
        return {
            "across": [_clue_json(line) for line in self.across],
            "down": [_clue_json(line) for line in self.down],
        }


def _clue_json(line: ClueLine) -> dict:
    return {"number": line.number, "clue": line.clue, "word": line.word}


def freeze_grid(cells: Sequence[Sequence[str]]) -> FrozenGrid:
    return tuple(tuple(row) for row in cells)
