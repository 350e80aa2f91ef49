"""Shared constants and enumerations for the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


EMPTY_CELL = ""
PLACEHOLDER_GLYPH = "◼"
CLUE_SEPARATOR = " - "

DEFAULT_GRID_SIZE = 20
NARROW_VIEWPORT_MAX_GRID_SIZE = 20
MIN_FILL_RATIO = 0.20
LONG_WORD_MARGIN = 2
DEFAULT_MAX_BACKTRACK_STEPS = 10_000


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @classmethod
    def from_horizontal(cls, horizontal: bool) -> "Direction":
        return cls.ACROSS if horizontal else cls.DOWN


class RenderVersion(str, Enum):
    """How much of the solution a rendered puzzle reveals."""

    FULL = "full"
    FIRST_LETTER = "first_letter"
    EMPTY = "empty"

    @classmethod
    def cycle(cls, current: "RenderVersion", step: int) -> "RenderVersion":
        members = list(cls)
        return members[(members.index(current) + step) % len(members)]



@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
