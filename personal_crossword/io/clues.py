"""Clue grouping for placed words."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import ClueGroups, ClueLine, PlacedWord


def start_numbers(placed_words: Sequence[PlacedWord]) -> Dict[Tuple[int, int], int]:
    """Map each word-start cell to the number of the first word placed there."""

    numbers: Dict[Tuple[int, int], int] = {}
    for placed in placed_words:
        numbers.setdefault((placed.row, placed.col), placed.number)
    return numbers


def group_clues(placed_words: Sequence[PlacedWord]) -> ClueGroups:
    """Split placed words into across and down clues, keeping placement order.

    An across and a down word that start on the same cell share that cell's
    number, matching what the rendered grid shows.
    """

    numbers = start_numbers(placed_words)
    groups = ClueGroups()
    for placed in placed_words:
        line = ClueLine(
            number=numbers[(placed.row, placed.col)],
            clue=placed.clue,
            word=placed.word,
            direction=placed.direction,
        )
        if placed.direction == Direction.ACROSS:
            groups.across.append(line)
        else:
            groups.down.append(line)
    return groups
