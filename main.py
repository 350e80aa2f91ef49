"""CLI entrypoint for the personal crossword layout engine."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from personal_crossword.core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_BACKTRACK_STEPS, RenderVersion
from personal_crossword.core.exceptions import CrosswordError
from personal_crossword.core.models import WordEntry
from personal_crossword.data.word_list import parse_word_clues, read_word_file
from personal_crossword.engine.bounds import find_crossword_bounds
from personal_crossword.engine.generator import CrosswordGenerator, GeneratorConfig
from personal_crossword.engine.puzzle_store import DEFAULT_STORE_DIR, PuzzleStore
from personal_crossword.io.clues import group_clues
from personal_crossword.io.render import check_print_resolution, render_png, to_data_uri
from personal_crossword.io.upload_client import PuzzleUploadClient
from personal_crossword.utils.logger import configure_logging, get_logger
from personal_crossword.utils.pretty import print_puzzle


LOGGER = get_logger("personal_crossword.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a personal crossword from WORD - clue pairs",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="ENTRY",
        help='Word/clue entries, each formatted "WORD - clue"',
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one 'WORD - clue' entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE, help="Grid side length in cells")
    parser.add_argument(
        "--narrow",
        action="store_true",
        help="Clamp the grid size for narrow (mobile) viewports",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-backtrack-steps",
        type=int,
        default=DEFAULT_MAX_BACKTRACK_STEPS,
        help="Abort layout after this many backtracking steps",
    )
    parser.add_argument(
        "--version",
        type=str,
        choices=[v.value for v in RenderVersion],
        default=RenderVersion.FULL.value,
        help="How much of the solution the rendering reveals",
    )
    parser.add_argument("--no-crop", action="store_true", help="Print the full grid instead of the cropped extent")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--image", type=Path, help="Optional path for a PNG export")
    parser.add_argument(
        "--upload",
        action="store_true",
        help="Upload the PNG export to the save endpoint",
    )
    parser.add_argument(
        "--server-url",
        type=str,
        default=None,
        help="Base URL of the save endpoint (defaults to $CROSSWORD_SERVER_URL)",
    )
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=DEFAULT_STORE_DIR,
        help="Directory for saved puzzle documents",
    )
    parser.add_argument("--no-store", action="store_true", help="Do not persist the puzzle document")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_entries(args: argparse.Namespace, parser: argparse.ArgumentParser) -> List[WordEntry]:
    entries: List[WordEntry] = []
    if args.words:
        entries.extend(parse_word_clues(args.words))
    if args.words_file:
        try:
            entries.extend(read_word_file(args.words_file))
        except (OSError, UnicodeDecodeError) as exc:
            parser.error(f"cannot read {args.words_file}: {exc}")
    return entries


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if not args.words and not args.words_file:
        parser.error("provide --words or --words-file")

    entries = collect_entries(args, parser)
    if not entries:
        parser.error("no valid 'WORD - clue' entries found")

    try:
        config = GeneratorConfig(
            grid_size=args.grid_size,
            seed=args.seed,
            narrow_viewport=args.narrow,
            max_backtrack_steps=args.max_backtrack_steps,
        )
    except ValueError as exc:
        parser.error(str(exc))

    store = None if args.no_store else PuzzleStore(args.store_dir)
    version = RenderVersion(args.version)

    result = CrosswordGenerator(config).generate(entries)
    if not result.ok:
        LOGGER.error("%s", result.error)
        if store is not None:
            store.save_failure(config, entries, result.error or "")
        return 1

    print_puzzle(result, version, crop=not args.no_crop)

    image_url = None
    upload_failed = False
    if args.image or args.upload:
        png = render_png(result.grid, result.placed_words, version)
        check = check_print_resolution(png)
        if not check.is_valid:
            LOGGER.warning("Export is %dx%d px, below print resolution", check.width, check.height)
        if args.image:
            args.image.write_bytes(png)
            LOGGER.info("PNG written to %s", args.image)
        if args.upload:
            try:
                image_url = PuzzleUploadClient(base_url=args.server_url).save_crossword(to_data_uri(png)).url
            except CrosswordError as exc:
                LOGGER.error("Upload failed: %s", exc)
                upload_failed = True

    if store is not None:
        store.save_success(result, config, entries, image_url=image_url)

    payload: Dict[str, Any] = result.to_jsonable()
    payload["bounds"] = _bounds_json(result)
    payload["clues"] = group_clues(result.placed_words).to_jsonable()
    payload["image_url"] = image_url
    if args.output:
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return 1 if upload_failed else 0


def _bounds_json(result) -> Dict[str, int]:
    bounds = find_crossword_bounds(result.grid, result.placed_words)
    return {"top": bounds.top, "bottom": bounds.bottom, "left": bounds.left, "right": bounds.right}


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
