"""Advisory warnings and deterministic integrity checks for generated layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..core.constants import EMPTY_CELL, LONG_WORD_MARGIN, MIN_FILL_RATIO
from ..core.exceptions import ValidationError
from ..core.models import FrozenGrid, PlacedWord, WordEntry
from ..utils.logger import get_logger
from .grid import crossing_cells, words_connected


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Produces user-facing warnings and verifies layout invariants."""

    def __init__(self, min_fill_ratio: float = MIN_FILL_RATIO, long_word_margin: int = LONG_WORD_MARGIN) -> None:
        self.min_fill_ratio = min_fill_ratio
        self.long_word_margin = long_word_margin

    # ------------------------------------------------------------------
    # Advisory warnings
    # ------------------------------------------------------------------
    def validate_personal_puzzle(
        self,
        word_list: Sequence[WordEntry],
        grid: FrozenGrid,
        placed_words: Sequence[PlacedWord],
    ) -> List[str]:
        warnings: List[str] = []
        grid_size = len(grid)

        if len(placed_words) < len(word_list):
            warnings.append(
                f"Could only fit {len(placed_words)} out of {len(word_list)} words. "
                "Try increasing the grid size or removing some longer words."
            )

        filled = sum(1 for row in grid for cell in row if cell != EMPTY_CELL)
        total = grid_size * grid_size
        if total and filled / total < self.min_fill_ratio:
            warnings.append(
                "The puzzle looks a bit empty. "
                "You might want to try a smaller grid size or add more words."
            )

        longest = max((entry.length for entry in word_list), default=0)
        if longest > grid_size - self.long_word_margin:
            warnings.append(
                "Some words might be too long for this grid size. "
                "Consider increasing the grid size or using shorter words."
            )
        return warnings

    # ------------------------------------------------------------------
    # Structural verification
    # ------------------------------------------------------------------
    def verify_layout(self, grid: FrozenGrid, placed_words: Sequence[PlacedWord]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_match(grid, placed_words)
            self._check_boundaries(grid, placed_words)
            self._check_adjacency(grid, placed_words)
            self._check_connectivity(placed_words)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Layout verification failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_match(self, grid: FrozenGrid, placed_words: Sequence[PlacedWord]) -> None:
        size = len(grid)
        seen: Dict[Tuple[int, int], str] = {}
        for placed in placed_words:
            for (row, col), letter in zip(placed.cells, placed.word):
                if not (0 <= row < size and 0 <= col < size):
                    raise ValidationError(f"'{placed.word}' extends outside the grid at {(row, col)}")
                if grid[row][col] != letter:
                    raise ValidationError(
                        f"Cell {(row, col)} holds '{grid[row][col]}' but '{placed.word}' expects '{letter}'"
                    )
                if seen.get((row, col), letter) != letter:
                    raise ValidationError(f"Intersection mismatch at {(row, col)}")
                seen[(row, col)] = letter

    def _check_boundaries(self, grid: FrozenGrid, placed_words: Sequence[PlacedWord]) -> None:
        for placed in placed_words:
            dr, dc = (0, 1) if placed.horizontal else (1, 0)
            end_row, end_col = placed.end
            for row, col in ((placed.row - dr, placed.col - dc), (end_row + dr, end_col + dc)):
                if _filled(grid, row, col):
                    raise ValidationError(
                        f"'{placed.word}' runs into a filled cell at {(row, col)}"
                    )

    def _check_adjacency(self, grid: FrozenGrid, placed_words: Sequence[PlacedWord]) -> None:
        crossings = crossing_cells(placed_words)
        for placed in placed_words:
            dr, dc = (0, 1) if placed.horizontal else (1, 0)
            for row, col in placed.cells:
                if (row, col) in crossings:
                    continue
                # Only crossing cells may have letters on their perpendicular sides.
                for nr, nc in ((row + dc, col + dr), (row - dc, col - dr)):
                    if _filled(grid, nr, nc):
                        raise ValidationError(
                            f"'{placed.word}' touches a foreign letter at {(nr, nc)}"
                        )

    def _check_connectivity(self, placed_words: Sequence[PlacedWord]) -> None:
        if not words_connected(placed_words):
            raise ValidationError("Placed words do not form a single connected crossword")


def _filled(grid: FrozenGrid, row: int, col: int) -> bool:
    size = len(grid)
    return 0 <= row < size and 0 <= col < size and grid[row][col] != EMPTY_CELL
