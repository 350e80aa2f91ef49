"""Crossword layout orchestration.

Words are placed longest first. Each word takes the first legal position
found, scanning the centre of the grid before the whole grid. When a word
cannot be placed, earlier placements are lifted one at a time (most recent
first) to make room. The run is all-or-nothing: if no earlier placement can
be moved, the whole layout fails.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_BACKTRACK_STEPS, NARROW_VIEWPORT_MAX_GRID_SIZE
from ..core.exceptions import CrosswordError
from ..core.models import GenerationResult, PlacedWord, WordEntry
from ..utils.logger import get_logger
from .grid import LayoutGrid, words_connected
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)

FAILURE_MESSAGE = (
    "Couldn't create a crossword with these words. "
    "Try adjusting the grid size or removing some words."
)
EMPTY_INPUT_MESSAGE = "No words to place"


class BacktrackLimitError(CrosswordError):
    """Raised internally when a run exceeds its backtracking budget."""


@dataclass
class GeneratorConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    seed: Optional[int] = None
    narrow_viewport: bool = False
    max_backtrack_steps: int = DEFAULT_MAX_BACKTRACK_STEPS
    verify_layout: bool = True

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.max_backtrack_steps < 0:
            raise ValueError("max_backtrack_steps cannot be negative")

    @property
    def effective_grid_size(self) -> int:
        if self.narrow_viewport:
            return min(self.grid_size, NARROW_VIEWPORT_MAX_GRID_SIZE)
        return self.grid_size


class CrosswordGenerator:
    """Places a word list on a square grid so that every word interlocks."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
        validator: Optional[PuzzleValidator] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.validator = validator or PuzzleValidator()
        self.grid_size = self.config.effective_grid_size
        self.placed_words: List[PlacedWord] = []
        self._backtrack_steps = 0

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, word_list: Sequence[WordEntry]) -> GenerationResult:
        words = list(word_list)
        self._reset_state()
        if not words:
            LOGGER.warning("Layout requested with an empty word list")
            return self._failure(EMPTY_INPUT_MESSAGE)

        LOGGER.info(
            "Laying out %d words on a %dx%d grid", len(words), self.grid_size, self.grid_size
        )
        try:
            grid = self.place_words_in_grid(words)
        except BacktrackLimitError as exc:
            LOGGER.warning("Layout aborted: %s", exc)
            return self._failure(f"{FAILURE_MESSAGE} ({exc})")

        if grid is None:
            LOGGER.warning("No arrangement found for %d words", len(words))
            return self._failure(FAILURE_MESSAGE)

        self._renumber()
        frozen = grid.freeze()
        if self.config.verify_layout:
            verification = self.validator.verify_layout(frozen, self.placed_words)
            if not verification.ok:
                return self._failure(f"Layout verification failed: {'; '.join(verification.messages)}")

        warnings = self.validator.validate_personal_puzzle(words, frozen, self.placed_words)
        LOGGER.info(
            "Placed %d/%d words (%d cells filled, %.0f%% of grid, %d backtracking steps)",
            len(self.placed_words),
            len(words),
            grid.filled_count,
            grid.fill_ratio * 100,
            self._backtrack_steps,
        )
        return GenerationResult(
            grid=frozen,
            placed_words=list(self.placed_words),
            warnings=warnings,
            grid_size=self.grid_size,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def place_words_in_grid(self, words: Sequence[WordEntry]) -> Optional[LayoutGrid]:
        ordered = self.order_words(words)
        grid = LayoutGrid(self.grid_size)
        for index, entry in enumerate(ordered):
            if self.try_place_word(grid, entry) is not None:
                continue
            LOGGER.debug("No direct placement for '%s'; backtracking", entry.word)
            if not self.backtrack(grid, ordered, index):
                return None
        return grid

    def order_words(self, words: Sequence[WordEntry]) -> List[WordEntry]:
        """Longest words first; equal lengths in random relative order."""

        return sorted(words, key=lambda entry: (-entry.length, self.rng.random()))

    def try_place_word(self, grid: LayoutGrid, entry: WordEntry) -> Optional[PlacedWord]:
        orientations = (True, False) if self.rng.random() > 0.5 else (False, True)
        require_intersection = bool(self.placed_words)
        for row, col in self._candidate_positions():
            for horizontal in orientations:
                if grid.can_place_word(entry.word, row, col, horizontal, require_intersection):
                    return self._place(grid, entry, row, col, horizontal)
        return None

    def _candidate_positions(self) -> Iterator[Tuple[int, int]]:
        size = self.grid_size
        center_start = size // 4
        center_end = (size * 3) // 4
        for row in range(center_start, center_end + 1):
            for col in range(center_start, center_end + 1):
                yield row, col
        for row in range(size):
            for col in range(size):
                yield row, col

    def _place(
        self,
        grid: LayoutGrid,
        entry: WordEntry,
        row: int,
        col: int,
        horizontal: bool,
    ) -> PlacedWord:
        placed = PlacedWord(
            entry=entry,
            row=row,
            col=col,
            horizontal=horizontal,
            number=len(self.placed_words) + 1,
        )
        grid.place_word(placed)
        self.placed_words.append(placed)
        return placed

    # ------------------------------------------------------------------
    # Backtracking
    # ------------------------------------------------------------------
    def backtrack(self, grid: LayoutGrid, ordered: Sequence[WordEntry], failing_index: int) -> bool:
        """Lift earlier placements, most recent first, until ``ordered[failing_index]`` fits.

        A step succeeds only if the lifted word goes back on the grid (in its
        old spot, or failing that anywhere legal) and the words still form one
        connected crossing graph. Failed steps restore the grid exactly.
        """

        failing = ordered[failing_index]
        for index in range(failing_index - 1, -1, -1):
            if index >= len(self.placed_words):
                continue
            self._consume_backtrack_step()

            snapshot = grid.snapshot()
            saved_words = list(self.placed_words)
            lifted = self.placed_words.pop(index)
            grid.remove_word(lifted)

            if self.try_place_word(grid, failing) is not None and self._restore_lifted(grid, lifted, index):
                LOGGER.debug(
                    "Placed '%s' after lifting '%s' (step %d)",
                    failing.word,
                    lifted.word,
                    self._backtrack_steps,
                )
                return True

            grid.restore(snapshot)
            self.placed_words = saved_words
        return False

    def _restore_lifted(self, grid: LayoutGrid, lifted: PlacedWord, index: int) -> bool:
        require_intersection = bool(self.placed_words)
        if grid.can_place_word(lifted.word, lifted.row, lifted.col, lifted.horizontal, require_intersection):
            grid.place_word(lifted)
            self.placed_words.insert(index, lifted)
        elif self.try_place_word(grid, lifted.entry) is None:
            return False
        return words_connected(self.placed_words)

    def _consume_backtrack_step(self) -> None:
        self._backtrack_steps += 1
        if self._backtrack_steps > self.config.max_backtrack_steps:
            raise BacktrackLimitError(
                f"backtracking limit of {self.config.max_backtrack_steps} steps reached"
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _renumber(self) -> None:
        for number, placed in enumerate(self.placed_words, start=1):
            placed.number = number

    def _failure(self, message: str) -> GenerationResult:
        return GenerationResult(grid=None, placed_words=[], warnings=[], error=message, grid_size=self.grid_size)

    def _reset_state(self) -> None:
        self.placed_words = []
        self._backtrack_steps = 0


def generate(
    word_list: Sequence[WordEntry],
    grid_size: int = DEFAULT_GRID_SIZE,
    rng: Optional[random.Random] = None,
    **options,
) -> GenerationResult:
    """Functional wrapper around :class:`CrosswordGenerator`."""

    config = GeneratorConfig(grid_size=grid_size, **options)
    return CrosswordGenerator(config, rng=rng).generate(word_list)
