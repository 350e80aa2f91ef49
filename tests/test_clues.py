import unittest

from personal_crossword.core.constants import Direction
from personal_crossword.core.models import PlacedWord, WordEntry
from personal_crossword.io.clues import group_clues, start_numbers


def placed(word: str, row: int, col: int, horizontal: bool, number: int) -> PlacedWord:
    return PlacedWord(WordEntry(word=word, clue=f"clue for {word}"), row, col, horizontal, number)


class ClueGroupingTests(unittest.TestCase):
    def test_split_by_direction_in_placement_order(self) -> None:
        words = [
            placed("CATDOG", 4, 2, True, 1),
            placed("DOG", 4, 5, False, 2),
            placed("ANT", 4, 3, False, 3),
            placed("GO", 6, 5, True, 4),
        ]
        groups = group_clues(words)
        self.assertEqual([line.word for line in groups.across], ["CATDOG", "GO"])
        self.assertEqual([line.word for line in groups.down], ["DOG", "ANT"])
        self.assertEqual([line.number for line in groups.down], [2, 3])
        self.assertTrue(all(line.direction == Direction.DOWN for line in groups.down))
        self.assertEqual(groups.across[0].label(), "1. clue for CATDOG")

    def test_shared_start_cell_shares_number(self) -> None:
        words = [placed("CAT", 2, 2, True, 1), placed("COW", 2, 2, False, 2)]
        self.assertEqual(start_numbers(words), {(2, 2): 1})
        groups = group_clues(words)
        self.assertEqual(groups.across[0].number, 1)
        self.assertEqual(groups.down[0].number, 1)

    def test_to_jsonable(self) -> None:
        groups = group_clues([placed("CAT", 0, 0, True, 1)])
        self.assertEqual(
            groups.to_jsonable(),
            {"across": [{"number": 1, "clue": "clue for CAT", "word": "CAT"}], "down": []},
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
