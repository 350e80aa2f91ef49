import io
import unittest

from PIL import Image

from personal_crossword.core.constants import RenderVersion
from personal_crossword.core.models import ClueGroups, GenerationResult, PlacedWord, WordEntry
from personal_crossword.engine.bounds import find_crossword_bounds
from personal_crossword.engine.grid import LayoutGrid
from personal_crossword.io.clues import group_clues
from personal_crossword.io.render import check_print_resolution, render_png, to_data_uri
from personal_crossword.utils.pretty import format_clues, format_grid, print_puzzle


PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def placed(word: str, row: int, col: int, horizontal: bool, number: int) -> PlacedWord:
    return PlacedWord(WordEntry(word=word, clue=f"clue for {word}"), row, col, horizontal, number)


class RenderFixture(unittest.TestCase):
    def setUp(self) -> None:
        grid = LayoutGrid(8)
        self.words = [placed("CATDOG", 2, 1, True, 1), placed("DOG", 2, 4, False, 2)]
        for word in self.words:
            grid.place_word(word)
        self.grid = grid.freeze()


class TextRenderTests(RenderFixture):
    def test_full_version_shows_letters_and_numbers(self) -> None:
        text = format_grid(self.grid, self.words, RenderVersion.FULL)
        self.assertIn(" 1C", text)
        self.assertIn(" 2D", text)
        self.assertIn("  T", text)

    def test_first_letter_version_hides_the_rest(self) -> None:
        text = format_grid(self.grid, self.words, RenderVersion.FIRST_LETTER)
        self.assertIn(" 1C", text)
        self.assertNotIn("T", text)
        self.assertIn("  _", text)

    def test_empty_version_hides_everything(self) -> None:
        text = format_grid(self.grid, self.words, RenderVersion.EMPTY)
        self.assertIn(" 1_", text)
        self.assertNotIn("C", text)

    def test_crop_limits_rows(self) -> None:
        bounds = find_crossword_bounds(self.grid, self.words)
        text = format_grid(self.grid, self.words, bounds=bounds)
        # Column header, rule, then one line per cropped row.
        self.assertEqual(len(text.splitlines()), 2 + bounds.height)

    def test_placeholder_drawn_as_block(self) -> None:
        grid = LayoutGrid(9)
        word = placed("ICE◼CREAM", 0, 0, True, 1)
        grid.place_word(word)
        text = format_grid(grid.freeze(), [word])
        self.assertIn("  #", text)
        self.assertNotIn("◼", text)

    def test_format_clues(self) -> None:
        text = format_clues(group_clues(self.words))
        self.assertEqual(text, "Across\n  1. clue for CATDOG\n\nDown\n  2. clue for DOG")
        self.assertEqual(format_clues(ClueGroups()), "")

    def test_print_puzzle(self) -> None:
        result = GenerationResult(grid=self.grid, placed_words=self.words, warnings=["careful"], grid_size=8)
        stream = io.StringIO()
        print_puzzle(result, stream=stream)
        output = stream.getvalue()
        self.assertIn("--- Layout ---", output)
        self.assertIn("Words:         2", output)
        self.assertIn("Cropped to:    3 x 6", output)
        self.assertIn("--- Warnings ---\n  careful", output)

    def test_print_failure(self) -> None:
        stream = io.StringIO()
        print_puzzle(GenerationResult(grid=None, error="nope"), stream=stream)
        self.assertEqual(stream.getvalue(), "Error: nope\n")

    def test_version_cycle(self) -> None:
        self.assertEqual(RenderVersion.cycle(RenderVersion.FULL, 1), RenderVersion.FIRST_LETTER)
        self.assertEqual(RenderVersion.cycle(RenderVersion.EMPTY, 1), RenderVersion.FULL)
        self.assertEqual(RenderVersion.cycle(RenderVersion.FULL, -1), RenderVersion.EMPTY)


class PngRenderTests(RenderFixture):
    def test_png_is_cropped_and_scaled(self) -> None:
        png = render_png(self.grid, self.words, cell_size=30, scale=2, padding=20)
        self.assertTrue(png.startswith(PNG_MAGIC))
        with Image.open(io.BytesIO(png)) as image:
            # 6 x 3 cells of 60px plus 40px padding on each side.
            self.assertEqual(image.size, (6 * 60 + 80, 3 * 60 + 80))

    def test_every_version_renders(self) -> None:
        for version in RenderVersion:
            self.assertTrue(render_png(self.grid, self.words, version).startswith(PNG_MAGIC))

    def test_print_resolution(self) -> None:
        small = render_png(self.grid, self.words)
        check = check_print_resolution(small)
        self.assertFalse(check.is_valid)
        self.assertEqual((check.width, check.height), (440, 260))

        large = render_png(self.grid, self.words, scale=8)
        self.assertTrue(check_print_resolution(large, min_dimension=1000).is_valid)

    def test_data_uri(self) -> None:
        uri = to_data_uri(b"abc")
        self.assertEqual(uri, "data:image/png;base64,YWJj")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
