"""Crop rectangle computation for rendered puzzles."""

from __future__ import annotations

from typing import Optional, Sequence, Set, Tuple

from ..core.constants import EMPTY_CELL
from ..core.exceptions import CrosswordError
from ..core.models import CrosswordBounds, FrozenGrid, PlacedWord


def find_crossword_bounds(
    grid: Optional[FrozenGrid],
    placed_words: Optional[Sequence[PlacedWord]],
) -> CrosswordBounds:
    """Return the smallest rectangle covering every word cell and filled cell."""

    if grid is None or placed_words is None:
        raise CrosswordError("Grid or placed words not initialized")

    word_cells: Set[Tuple[int, int]] = set()
    for placed in placed_words:
        word_cells.update(placed.cells)

    covered = set(word_cells)
    for row, cells in enumerate(grid):
        for col, value in enumerate(cells):
            if value != EMPTY_CELL:
                covered.add((row, col))

    if not covered:
        raise CrosswordError("Crossword has no filled cells to bound")

    rows = [row for row, _ in covered]
    cols = [col for _, col in covered]
    return CrosswordBounds(
        top=min(rows),
        bottom=max(rows),
        left=min(cols),
        right=max(cols),
        word_cells=frozenset(word_cells),
    )
