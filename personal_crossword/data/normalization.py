"""Shared helpers for answer normalization."""

from __future__ import annotations

import re

from ..core.constants import PLACEHOLDER_GLYPH

WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(text: str) -> str:
    """Return ``text`` trimmed, uppercased, with inner spaces as the placeholder glyph.

    Multi-word answers such as ``"ice cream"`` become ``"ICE◼CREAM"`` so the
    layout engine treats them as one contiguous token.
    """

    if not text:
        return ""
    return WHITESPACE_RE.sub(PLACEHOLDER_GLYPH, text.strip().upper())


__all__ = ["normalize_word", "PLACEHOLDER_GLYPH"]
