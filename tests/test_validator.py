import unittest

from personal_crossword.core.models import PlacedWord, WordEntry
from personal_crossword.engine.grid import LayoutGrid
from personal_crossword.engine.validator import PuzzleValidator


def placed(word: str, row: int, col: int, horizontal: bool) -> PlacedWord:
    return PlacedWord(WordEntry(word=word, clue=f"clue for {word}"), row, col, horizontal)


def build(size: int, *words: PlacedWord):
    grid = LayoutGrid(size)
    for word in words:
        grid.place_word(word)
    return grid.freeze(), list(words)


def small_layout():
    return placed("CAT", 1, 0, True), placed("TOE", 1, 2, False), placed("EGG", 3, 2, True)


class WarningTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = PuzzleValidator()

    def test_dense_layout_has_no_warnings(self) -> None:
        grid, words = build(5, *small_layout())
        entries = [w.entry for w in words]
        self.assertEqual(self.validator.validate_personal_puzzle(entries, grid, words), [])

    def test_missing_words_warning(self) -> None:
        grid, words = build(5, *small_layout())
        entries = [w.entry for w in words] + [WordEntry(word="ZEBRA", clue="striped")]
        warnings = self.validator.validate_personal_puzzle(entries, grid, words)
        self.assertIn(
            "Could only fit 3 out of 4 words. Try increasing the grid size or removing some longer words.",
            warnings,
        )

    def test_sparse_layout_warning(self) -> None:
        grid, words = build(10, placed("CAT", 4, 4, True))
        warnings = self.validator.validate_personal_puzzle([words[0].entry], grid, words)
        self.assertEqual(len(warnings), 1)
        self.assertTrue(warnings[0].startswith("The puzzle looks a bit empty."))

    def test_long_word_warning(self) -> None:
        grid, words = build(5, *small_layout())
        warnings = self.validator.validate_personal_puzzle([w.entry for w in words], grid, words)
        self.assertEqual(warnings, [])

        validator = PuzzleValidator(long_word_margin=3)
        warnings = validator.validate_personal_puzzle([w.entry for w in words], grid, words)
        self.assertEqual(len(warnings), 1)
        self.assertTrue(warnings[0].startswith("Some words might be too long"))


class VerifyLayoutTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = PuzzleValidator()

    def test_valid_layout(self) -> None:
        grid, words = build(7, placed("CATDOG", 3, 0, True), placed("DOG", 3, 3, False))
        result = self.validator.verify_layout(grid, words)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_letter_mismatch(self) -> None:
        grid, _ = build(7, placed("CATDOG", 3, 0, True))
        result = self.validator.verify_layout(grid, [placed("CAP", 3, 0, True)])
        self.assertFalse(result.ok)
        self.assertIn("expects 'P'", result.messages[0])

    def test_run_on_boundary(self) -> None:
        grid, _ = build(7, placed("CATDOG", 3, 0, True))
        # CAT is claimed as a word, but DOG continues straight after it.
        result = self.validator.verify_layout(grid, [placed("CAT", 3, 0, True)])
        self.assertFalse(result.ok)
        self.assertIn("runs into a filled cell", result.messages[0])

    def test_side_by_side_letters(self) -> None:
        top = placed("CAT", 2, 0, True)
        bottom = placed("DOG", 3, 0, True)
        grid, words = build(6, top, bottom)
        result = self.validator.verify_layout(grid, words)
        self.assertFalse(result.ok)
        self.assertIn("touches a foreign letter", result.messages[0])

    def test_disconnected_words(self) -> None:
        grid, words = build(8, placed("CAT", 0, 0, True), placed("DOG", 5, 4, True))
        result = self.validator.verify_layout(grid, words)
        self.assertFalse(result.ok)
        self.assertIn("connected", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
