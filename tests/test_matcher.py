"""Tests for dictionary matching inside segments and around cells."""

import pytest

from wordfall.data import WordDictionary
from wordfall.engine import (
    Grid,
    InvalidConfigurationError,
    OutOfRangeError,
    Segment,
    check_for_words,
    find_matches,
    find_words_at,
    is_valid_word,
)


WORDS = ["cat", "dog", "hat", "car", "art", "tar", "carts", "at"]


@pytest.fixture
def dictionary():
    return WordDictionary(WORDS)


@pytest.fixture
def board():
    return Grid(6, 7)


def segment(letters, row=0, start=0):
    return Segment(letters=letters, positions=[(row, start + i) for i in range(len(letters))])


class TestIsValidWord:
    """Test the single-word check."""

    def test_valid_word_of_minimum_length(self, dictionary):
        assert is_valid_word("cat", dictionary) is True

    def test_shorter_than_minimum(self, dictionary):
        """'at' is in the dictionary but too short."""
        assert is_valid_word("at", dictionary) is False

    def test_not_in_dictionary(self, dictionary):
        assert is_valid_word("xyz", dictionary) is False

    def test_case_insensitive(self, dictionary):
        assert is_valid_word("CAT", dictionary) is True


class TestFindMatches:
    """Test every-substring matching within one segment."""

    def test_overlapping_and_nested_words(self, dictionary):
        """CARTS yields CAR, ART and CARTS, all reported."""
        matches = find_matches(segment("CARTS"), dictionary, "row")
        assert [m.letters for m in matches] == ["CAR", "ART", "CARTS"]
        art = matches[1]
        assert art.positions == [(0, 1), (0, 2), (0, 3)]
        assert art.direction == "row"

    def test_minimum_length_enforced(self, dictionary):
        """A dictionary-valid two-letter run never matches at length 3."""
        assert find_matches(segment("AT"), dictionary, "row") == []

    def test_configurable_minimum_length(self, dictionary):
        """Lowering the bound admits shorter words."""
        matches = find_matches(segment("AT"), dictionary, "row", min_length=2)
        assert [m.letters for m in matches] == ["AT"]

    def test_single_letter_only_with_min_length_one(self):
        """One-letter words need a minimum length of one."""
        words = WordDictionary(["a"])
        assert find_matches(segment("A"), words, "column") == []
        assert len(find_matches(segment("A"), words, "column", min_length=1)) == 1

    def test_case_preserved_from_board(self, dictionary):
        """Matched letters keep the board's case."""
        matches = find_matches(segment("cAt"), dictionary, "row")
        assert matches[0].letters == "cAt"

    def test_missing_or_empty_dictionary(self):
        """No dictionary means no matches, not an error."""
        assert find_matches(segment("CAT"), None, "row") == []
        assert find_matches(segment("CAT"), WordDictionary(), "row") == []

    @pytest.mark.parametrize("min_length", [0, -2])
    def test_non_positive_min_length(self, dictionary, min_length):
        with pytest.raises(InvalidConfigurationError):
            find_matches(segment("CAT"), dictionary, "row", min_length=min_length)


class TestCheckForWords:
    """Test matching in all four directions through a cell."""

    def test_row_word(self, board, dictionary):
        """CAT on row 2 found from its middle cell."""
        board.set_letter(2, 1, "C")
        board.set_letter(2, 2, "A")
        board.set_letter(2, 3, "T")

        result = check_for_words(board, dictionary, 2, 2)
        assert len(result) == 1
        assert result[0].letters == "CAT"
        assert result[0].direction == "row"
        assert result[0].positions == [(2, 1), (2, 2), (2, 3)]

    def test_column_word(self, board, dictionary):
        board.set_letter(1, 3, "D")
        board.set_letter(2, 3, "O")
        board.set_letter(3, 3, "G")

        result = check_for_words(board, dictionary, 2, 3)
        assert [(m.letters, m.direction) for m in result] == [("DOG", "column")]
        assert result[0].positions == [(1, 3), (2, 3), (3, 3)]

    def test_descending_diagonal_word(self, board, dictionary):
        board.set_letter(1, 1, "H")
        board.set_letter(2, 2, "A")
        board.set_letter(3, 3, "T")

        result = check_for_words(board, dictionary, 3, 3)
        assert [(m.letters, m.direction) for m in result] == [("HAT", "descending")]

    def test_ascending_diagonal_word(self, board, dictionary):
        board.set_letter(4, 1, "T")
        board.set_letter(3, 2, "A")
        board.set_letter(2, 3, "R")

        result = check_for_words(board, dictionary, 4, 1)
        assert [(m.letters, m.direction) for m in result] == [("TAR", "ascending")]
        assert result[0].positions == [(4, 1), (3, 2), (2, 3)]

    def test_shared_letter_two_directions(self, board, dictionary):
        """CAT across and ART down share the A."""
        for col, letter in zip((1, 2, 3), "CAT"):
            board.set_letter(2, col, letter)
        board.set_letter(3, 2, "R")
        board.set_letter(4, 2, "T")

        result = check_for_words(board, dictionary, 2, 2)
        found = {(m.letters, m.direction) for m in result}
        assert found == {("CAT", "row"), ("ART", "column")}

    def test_gap_is_never_bridged(self, board, dictionary):
        """Letters separated by one blank cannot form a word."""
        board.set_letter(2, 0, "C")
        board.set_letter(2, 1, "A")
        board.set_letter(2, 3, "T")
        assert check_for_words(board, dictionary, 2, 1) == []

    def test_word_not_starting_at_checked_cell(self, board, dictionary):
        """The checked cell may be anywhere inside the word."""
        for col, letter in enumerate("XCAT"):
            board.set_letter(5, col, letter)
        result = check_for_words(board, dictionary, 5, 0)
        assert [m.letters for m in result] == ["CAT"]
        assert result[0].positions[0] == (5, 1)

    def test_empty_cell_and_empty_board(self, board, dictionary):
        """An empty board has no words from anywhere."""
        assert check_for_words(board, dictionary, 0, 0) == []

    def test_word_spanning_full_width(self, dictionary):
        """A word as wide as the board is valid."""
        grid = Grid.from_strings(["...", "CAT"])
        result = check_for_words(grid, dictionary, 1, 0)
        assert [m.letters for m in result] == ["CAT"]


class TestFindWordsAt:
    """Test multi-position search with deduplication."""

    def test_deduplicates_across_positions(self, board, dictionary):
        """Checking every cell of CAT and ART reports each word once."""
        for col, letter in zip((1, 2, 3), "CAT"):
            board.set_letter(2, col, letter)
        board.set_letter(3, 2, "R")
        board.set_letter(4, 2, "T")

        positions = [(2, 1), (2, 2), (2, 3), (3, 2), (4, 2)]
        result = find_words_at(board, dictionary, positions)
        assert sorted(m.letters for m in result) == ["ART", "CAT"]

    def test_repeated_positions(self, board, dictionary):
        """Duplicate seeds behave like a single seed."""
        for col, letter in enumerate("CAT"):
            board.set_letter(0, col, letter)
        result = find_words_at(board, dictionary, [(0, 1), (0, 1), [0, 1]])
        assert len(result) == 1

    def test_no_positions(self, board, dictionary):
        assert find_words_at(board, dictionary, []) == []

    def test_out_of_range_positions_reported(self, board, dictionary):
        """Every invalid position is named in the error."""
        with pytest.raises(OutOfRangeError) as exc_info:
            find_words_at(board, dictionary, [(0, 0), (6, 0), (0, 9)])
        assert exc_info.value.positions == [(6, 0), (0, 9)]
