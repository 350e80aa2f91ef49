"""Pretty-print helpers for crossword layouts."""

from __future__ import annotations

import sys
from collections import Counter
from typing import List, Optional, Sequence

from ..core.constants import EMPTY_CELL, PLACEHOLDER_GLYPH, RenderVersion
from ..core.models import ClueGroups, CrosswordBounds, FrozenGrid, GenerationResult, PlacedWord
from ..engine.bounds import find_crossword_bounds
from ..io.clues import group_clues, start_numbers


BLOCK_SYMBOL = "#"
EMPTY_SYMBOL = "."
HIDDEN_SYMBOL = "_"


def cell_symbol(value: str, is_start: bool, version: RenderVersion) -> str:
    if value == EMPTY_CELL:
        return EMPTY_SYMBOL
    if value == PLACEHOLDER_GLYPH:
        return BLOCK_SYMBOL
    if version == RenderVersion.FULL:
        return value
    if version == RenderVersion.FIRST_LETTER and is_start:
        return value
    return HIDDEN_SYMBOL


def format_grid(
    grid: FrozenGrid,
    placed_words: Sequence[PlacedWord],
    version: RenderVersion = RenderVersion.FULL,
    bounds: Optional[CrosswordBounds] = None,
) -> str:
    """Render ``grid`` as text. Start cells carry their number before the letter."""

    numbers = start_numbers(placed_words)
    top, bottom = (bounds.top, bounds.bottom) if bounds else (0, len(grid) - 1)
    left, right = (bounds.left, bounds.right) if bounds else (0, len(grid) - 1)

    columns = range(left, right + 1)
    lines = ["     " + " ".join(f"{c:>3}" for c in columns)]
    lines.append("     " + "-" * (4 * len(columns) - 1))
    for r in range(top, bottom + 1):
        rendered: List[str] = []
        for c in columns:
            number = numbers.get((r, c))
            symbol = cell_symbol(grid[r][c], number is not None, version)
            prefix = str(number) if number is not None else ""
            rendered.append(f"{prefix:>2}{symbol}")
        lines.append(f"{r:>3} | " + " ".join(rendered))
    return "\n".join(lines)


def format_clues(groups: ClueGroups) -> str:
    lines: List[str] = []
    for title, clue_lines in (("Across", groups.across), ("Down", groups.down)):
        if not clue_lines:
            continue
        if lines:
            lines.append("")
        lines.append(title)
        lines.extend(f"  {line.label()}" for line in clue_lines)
    return "\n".join(lines)


def print_puzzle(
    result: GenerationResult,
    version: RenderVersion = RenderVersion.FULL,
    *,
    crop: bool = True,
    stream=None,
) -> None:
    """Print grid, clues, warnings and layout stats for a generation result."""

    stream = stream or sys.stdout
    if result.grid is None:
        print(f"Error: {result.error}", file=stream)
        return

    bounds = find_crossword_bounds(result.grid, result.placed_words) if crop else None
    print(format_grid(result.grid, result.placed_words, version, bounds), file=stream)
    print(file=stream)
    print(format_clues(group_clues(result.placed_words)), file=stream)

    # --- Layout stats ---
    total_cells = result.grid_size * result.grid_size
    lengths = Counter(placed.length for placed in result.placed_words)
    print(file=stream)
    print("--- Layout ---", file=stream)
    print(f"  Size:          {result.grid_size} x {result.grid_size} ({total_cells} cells)", file=stream)
    if total_cells:
        print(
            f"  Letters:       {result.filled_cells} ({result.filled_cells / total_cells * 100:.0f}%)",
            file=stream,
        )
    print(f"  Words:         {len(result.placed_words)}", file=stream)
    if lengths:
        dist_parts = [f"{length}:{count}" for length, count in sorted(lengths.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if bounds is not None:
        print(f"  Cropped to:    {bounds.height} x {bounds.width}", file=stream)

    if result.warnings:
        print(file=stream)
        print("--- Warnings ---", file=stream)
        for warning in result.warnings:
            print(f"  {warning}", file=stream)
