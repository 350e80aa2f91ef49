"""Raster export of a cropped crossword grid."""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass
from typing import Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from ..core.constants import EMPTY_CELL, PLACEHOLDER_GLYPH, RenderVersion
from ..core.models import CrosswordBounds, FrozenGrid, PlacedWord
from ..engine.bounds import find_crossword_bounds
from ..utils.logger import get_logger
from .clues import start_numbers


LOGGER = get_logger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
MIN_PRINT_DIMENSION = 1000


@dataclass
class PrintCheck:
    is_valid: bool
    width: int
    height: int


def render_png(
    grid: FrozenGrid,
    placed_words: Sequence[PlacedWord],
    version: RenderVersion = RenderVersion.FULL,
    *,
    cell_size: int = 30,
    scale: int = 2,
    padding: int = 20,
    bounds: Optional[CrosswordBounds] = None,
) -> bytes:
    """Draw the puzzle cropped to its filled extent and return PNG bytes."""

    bounds = bounds or find_crossword_bounds(grid, placed_words)
    px = cell_size * scale
    pad = padding * scale
    width = bounds.width * px + 2 * pad
    height = bounds.height * px + 2 * pad

    image = Image.new("RGB", (width, height), WHITE)
    draw = ImageDraw.Draw(image)
    letter_font = ImageFont.load_default(size=int(px * 0.55))
    number_font = ImageFont.load_default(size=max(8, int(px * 0.3)))
    numbers = start_numbers(placed_words)
    outline = max(1, scale)

    for r in range(bounds.top, bounds.bottom + 1):
        for c in range(bounds.left, bounds.right + 1):
            x0 = pad + (c - bounds.left) * px
            y0 = pad + (r - bounds.top) * px
            box = (x0, y0, x0 + px - 1, y0 + px - 1)
            value = grid[r][c]

            if value == PLACEHOLDER_GLYPH:
                draw.rectangle(box, fill=BLACK)
                continue
            if (r, c) in bounds.word_cells:
                draw.rectangle(box, fill=WHITE, outline=BLACK, width=outline)

            number = numbers.get((r, c))
            if value != EMPTY_CELL and _shows_letter(version, number is not None):
                draw.text((x0 + px / 2, y0 + px / 2), value, fill=BLACK, font=letter_font, anchor="mm")
            if number is not None:
                draw.text((x0 + 2 * scale, y0 + scale), str(number), fill=BLACK, font=number_font)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    LOGGER.debug("Rendered %dx%d PNG (%d bytes)", width, height, buffer.tell())
    return buffer.getvalue()


def _shows_letter(version: RenderVersion, is_start: bool) -> bool:
    if version == RenderVersion.FULL:
        return True
    return version == RenderVersion.FIRST_LETTER and is_start


def to_data_uri(png_bytes: bytes, mime_type: str = "image/png") -> str:
    encoded = base64.b64encode(png_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def check_print_resolution(png_bytes: bytes, min_dimension: int = MIN_PRINT_DIMENSION) -> PrintCheck:
    """Report whether an exported image is large enough to print."""

    with Image.open(io.BytesIO(png_bytes)) as image:
        width, height = image.size
    return PrintCheck(
        is_valid=width >= min_dimension and height >= min_dimension,
        width=width,
        height=height,
    )
