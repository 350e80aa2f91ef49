"""Grid representation and placement helpers."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from ..core.constants import EMPTY_CELL, Bounds
from ..core.exceptions import PlacementError
from ..core.models import FrozenGrid, PlacedWord, freeze_grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

PlacementKey = Tuple[int, int, bool]


@dataclass
class GridSnapshot:
    cells: List[List[str]]
    owners: List[List[Set[PlacementKey]]]
    filled_count: int = 0


class LayoutGrid:
    """Square letter grid that knows which placed words own each cell."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[str]] = [[EMPTY_CELL] * size for _ in range(size)]
        self._owners: List[List[Set[PlacementKey]]] = [
            [set() for _ in range(size)] for _ in range(size)
        ]
        self._filled_count = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def is_filled(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col) and self.cells[row][col] != EMPTY_CELL

    @property
    def filled_count(self) -> int:
        return self._filled_count

    @property
    def fill_ratio(self) -> float:
        return self._filled_count / (self.size * self.size)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def can_place_word(
        self,
        word: str,
        row: int,
        col: int,
        horizontal: bool,
        require_intersection: bool = True,
    ) -> bool:
        """Return True if ``word`` may be written starting at ``(row, col)``.

        Filled target cells must be compatible crossings; empty target cells
        must not touch foreign letters on either perpendicular side; the
        cells just before and after the word must be empty or off-grid.
        """

        length = len(word)
        if length == 0:
            return False
        dr, dc = (0, 1) if horizontal else (1, 0)
        end_row = row + dr * (length - 1)
        end_col = col + dc * (length - 1)
        if not (self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)):
            return False

        has_intersection = False
        for index, letter in enumerate(word):
            r = row + dr * index
            c = col + dc * index
            if self.cells[r][c] != EMPTY_CELL:
                if not self.is_compatible_crossing(r, c, letter, horizontal):
                    return False
                has_intersection = True
                continue
            # Perpendicular neighbours: above/below for across, left/right for down.
            if self.is_filled(r + dc, c + dr) or self.is_filled(r - dc, c - dr):
                return False

        if self.is_filled(row - dr, col - dc):
            return False
        if self.is_filled(end_row + dr, end_col + dc):
            return False

        return has_intersection or not require_intersection

    def is_compatible_crossing(self, row: int, col: int, letter: str, horizontal: bool) -> bool:
        """A filled cell can be shared only by perpendicular words agreeing on the letter."""

        if self.cells[row][col] != letter:
            return False
        if any(owner[2] == horizontal for owner in self._owners[row][col]):
            return False
        return not self._runs_through(row, col, horizontal)

    def _runs_through(self, row: int, col: int, horizontal: bool) -> bool:
        # A filled neighbour along the same axis means a same-orientation run already covers the cell.
        dr, dc = (0, 1) if horizontal else (1, 0)
        return self.is_filled(row - dr, col - dc) or self.is_filled(row + dr, col + dc)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(self, placed: PlacedWord) -> None:
        cells = placed.cells
        for (row, col), letter in zip(cells, placed.word):
            if not self.bounds.contains(row, col):
                raise PlacementError(f"'{placed.word}' extends outside the grid at {(row, col)}")
            existing = self.cells[row][col]
            if existing != EMPTY_CELL and existing != letter:
                raise PlacementError(
                    f"Letter conflict at {(row, col)}: '{existing}' vs '{letter}'"
                )

        for (row, col), letter in zip(cells, placed.word):
            if self.cells[row][col] == EMPTY_CELL:
                self._filled_count += 1
            self.cells[row][col] = letter
            self._owners[row][col].add(placed.key)

    def remove_word(self, placed: PlacedWord) -> None:
        """Erase ``placed``, keeping letters still owned by crossing words."""

        for row, col in placed.cells:
            owners = self._owners[row][col]
            owners.discard(placed.key)
            if not owners and self.cells[row][col] != EMPTY_CELL:
                self.cells[row][col] = EMPTY_CELL
                self._filled_count -= 1

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            cells=[list(row) for row in self.cells],
            owners=[[set(owners) for owners in row] for row in self._owners],
            filled_count=self._filled_count,
        )

    def restore(self, snapshot: GridSnapshot) -> None:
        self.cells = [list(row) for row in snapshot.cells]
        self._owners = [[set(owners) for owners in row] for row in snapshot.owners]
        self._filled_count = snapshot.filled_count

    def freeze(self) -> FrozenGrid:
        return freeze_grid(self.cells)


def words_connected(placed_words: Sequence[PlacedWord]) -> bool:
    """Return True when the placed words form a single crossing graph."""

    if len(placed_words) <= 1:
        return True

    by_cell: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for index, placed in enumerate(placed_words):
        for cell in placed.cells:
            by_cell[cell].append(index)

    seen = {0}
    frontier = [0]
    while frontier:
        current = frontier.pop()
        for cell in placed_words[current].cells:
            for neighbour in by_cell[cell]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    frontier.append(neighbour)
    return len(seen) == len(placed_words)


def crossing_cells(placed_words: Iterable[PlacedWord]) -> Set[Tuple[int, int]]:
    """Cells shared by more than one placed word."""

    counts: Dict[Tuple[int, int], int] = defaultdict(int)
    for placed in placed_words:
        for cell in placed.cells:
            counts[cell] += 1
    return {cell for cell, count in counts.items() if count > 1}
