"""Parsing of raw ``WORD - clue`` input into word entries."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..core.constants import CLUE_SEPARATOR
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .normalization import normalize_word


LOGGER = get_logger(__name__)


def parse_word_clue_line(line: str) -> Optional[WordEntry]:
    """Parse one ``WORD - clue`` line, returning ``None`` for malformed input."""

    parts = line.split(CLUE_SEPARATOR)
    if len(parts) < 2:
        return None
    word = normalize_word(parts[0])
    clue = parts[1].strip()
    if not word or not clue:
        return None
    return WordEntry(word=word, clue=clue)


def parse_word_clues(text: str | Iterable[str]) -> List[WordEntry]:
    """Parse newline separated entries. Malformed lines are dropped silently."""

    lines = text.split("\n") if isinstance(text, str) else list(text)
    entries: List[WordEntry] = []
    dropped = 0
    for line in lines:
        entry = parse_word_clue_line(line)
        if entry is None:
            if line.strip():
                dropped += 1
            continue
        entries.append(entry)
    if dropped:
        LOGGER.debug("Dropped %d malformed word/clue lines", dropped)
    return entries


def read_word_file(path: Path | str) -> List[WordEntry]:
    """Read entries from a file, one per line. Blank lines and # comments are skipped."""

    lines = [
        line
        for line in Path(path).read_text(encoding="utf-8").splitlines()
        if not line.strip().startswith("#")
    ]
    return parse_word_clues(lines)


def word_list_changed(previous: Optional[Sequence[WordEntry]], current: Sequence[WordEntry]) -> bool:
    """Return True when ``current`` differs from the previously parsed list."""

    if previous is None or len(previous) != len(current):
        return True
    return any(
        old.word != new.word or old.clue != new.clue
        for old, new in zip(previous, current)
    )
