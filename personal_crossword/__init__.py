"""Personal crossword layout package.

This package exposes the public API surface via:

- ``personal_crossword.engine.generator.CrosswordGenerator``: lays out a word list.
- ``personal_crossword.data.word_list.parse_word_clues``: parses ``WORD - clue`` input.
- ``personal_crossword.engine.bounds.find_crossword_bounds``: crop rectangle for export.
- ``personal_crossword.io.clues.group_clues``: across/down clue buckets.
"""

from .core.models import GenerationResult, PlacedWord, WordEntry
from .data.word_list import parse_word_clues
from .engine.bounds import find_crossword_bounds
from .engine.generator import CrosswordGenerator, GeneratorConfig, generate
from .io.clues import group_clues

__all__ = [
    "CrosswordGenerator",
    "GeneratorConfig",
    "GenerationResult",
    "PlacedWord",
    "WordEntry",
    "find_crossword_bounds",
    "generate",
    "group_clues",
    "parse_word_clues",
]

__version__ = "0.1.0"
