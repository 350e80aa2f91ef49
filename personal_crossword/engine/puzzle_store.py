"""Persistent puzzle document store.

Every CLI generation (success or failure) is saved as a JSON document under
``local_db/collections/puzzles/``. Documents carry the input words, the
layout, grouped clues and summary stats, ready for a storefront to render.
"""

from __future__ import annotations

import json
import uuid
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from ..core.models import GenerationResult, WordEntry
from ..io.clues import group_clues
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import GeneratorConfig


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/puzzles")


class PuzzleStore:
    """Save layout results as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save_success(
        self,
        result: GenerationResult,
        config: "GeneratorConfig",
        word_list: Sequence[WordEntry],
        image_url: Optional[str] = None,
    ) -> str:
        """Persist a successful layout and return its document ID."""
        doc = self._base_doc("success", config, word_list)
        doc.update(
            {
                "image_url": image_url,
                "grid": result.to_jsonable()["grid"],
                "placed_words": [placed.to_jsonable() for placed in result.placed_words],
                "clues": group_clues(result.placed_words).to_jsonable(),
                "warnings": list(result.warnings),
                "stats": self._compute_stats(result),
            }
        )
        self._write(doc)
        LOGGER.info("Puzzle saved: %s", doc["id"])
        return doc["id"]

    def save_failure(
        self,
        config: "GeneratorConfig",
        word_list: Sequence[WordEntry],
        error: str,
    ) -> str:
        """Persist a failed layout attempt and return its document ID."""
        doc = self._base_doc("failed", config, word_list)
        doc["error"] = error
        self._write(doc)
        LOGGER.info("Puzzle failure saved: %s", doc["id"])
        return doc["id"]

    def load(self, doc_id: str) -> dict:
        path = self.store_dir / f"{doc_id}.json"
        return json.loads(path.read_text(encoding="utf-8"))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _base_doc(self, status: str, config: "GeneratorConfig", word_list: Sequence[WordEntry]) -> dict:
        return {
            "id": self._new_id(),
            "created_at": datetime.now(timezone.utc).isoformat(),
            "status": status,
            "config": self._serialize_config(config),
            "words": [{"word": entry.word, "clue": entry.clue} for entry in word_list],
        }

    def _write(self, doc: dict) -> None:
        path = self.store_dir / f"{doc['id']}.json"
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")

    @staticmethod
    def _compute_stats(result: GenerationResult) -> dict:
        total_cells = result.grid_size * result.grid_size
        lengths = [placed.length for placed in result.placed_words]
        length_dist = Counter(lengths)
        return {
            "grid_size": result.grid_size,
            "total_cells": total_cells,
            "letter_cells": result.filled_cells,
            "fill_pct": round(result.filled_cells / total_cells * 100, 1) if total_cells else 0.0,
            "words": len(lengths),
            "across": sum(1 for placed in result.placed_words if placed.horizontal),
            "down": sum(1 for placed in result.placed_words if not placed.horizontal),
            "length_min": min(lengths) if lengths else 0,
            "length_max": max(lengths) if lengths else 0,
            "length_distribution": {str(k): v for k, v in sorted(length_dist.items())},
        }

    @staticmethod
    def _serialize_config(config: "GeneratorConfig") -> dict:
        return {
            "grid_size": config.grid_size,
            "effective_grid_size": config.effective_grid_size,
            "narrow_viewport": config.narrow_viewport,
            "seed": config.seed,
            "max_backtrack_steps": config.max_backtrack_steps,
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
