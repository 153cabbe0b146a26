"""Tests for the word dictionary and CSV word list loading."""

import logging

from wordfall.data import NO_DEFINITION, WordDictionary, load_word_lists, read_word_list


class TestWordDictionary:
    """Test membership and definitions."""

    def test_case_insensitive_membership(self):
        words = WordDictionary(["Cat", "DOG"])
        assert words.has_word("cat")
        assert words.has_word("CAT")
        assert words.has_word("dog")
        assert "Dog" in words
        assert len(words) == 2

    def test_empty_and_missing_words(self):
        """Empty strings are simply not found."""
        words = WordDictionary(["cat"])
        assert words.has_word("") is False
        assert words.has_word("cow") is False
        assert 3 not in words

    def test_definitions(self):
        words = WordDictionary(definitions={"Cat": "A small feline"})
        assert words.has_word("cat")
        assert words.get_definition("CAT") == "A small feline"
        assert words.get_definition("dog") == NO_DEFINITION

    def test_add_word(self):
        words = WordDictionary()
        words.add_word("  Tar ", "Black residue")
        words.add_word("")
        assert words.word_count == 1
        assert words.get_definition("tar") == "Black residue"
        assert list(words) == ["tar"]


class TestLoadWordLists:
    """Test CSV word list parsing."""

    def test_reads_word_and_definition_columns(self, tmp_path):
        """Headers are case-insensitive; multi-line definitions are flattened."""
        path = tmp_path / "3_letter_words.csv"
        path.write_text(
            'Definition,Word\n'
            '"A small\nfeline",cat\n'
            'Barks,dog\n'
            'Orphan definition,\n',
            encoding="utf-8",
        )
        assert list(read_word_list(path)) == [
            ("cat", "A small feline"),
            ("dog", "Barks"),
        ]

    def test_missing_definition_uses_marker(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text("word,definition\ncar\n", encoding="utf-8")
        words = load_word_lists([path])
        assert words.has_word("car")
        assert words.get_definition("car") == NO_DEFINITION

    def test_skips_missing_files_and_bad_headers(self, tmp_path, caplog):
        """Unreadable lists are skipped with a warning, the rest still load."""
        good = tmp_path / "good.csv"
        good.write_text("word,definition\nart,Creative work\n", encoding="utf-8")
        bad = tmp_path / "bad.csv"
        bad.write_text("term,meaning\nrat,Rodent\n", encoding="utf-8")
        missing = tmp_path / "missing.csv"

        with caplog.at_level(logging.WARNING, logger="wordfall"):
            words = load_word_lists([missing, bad, good])

        assert len(words) == 1
        assert words.has_word("art")
        assert not words.has_word("rat")
        assert "missing.csv" in caplog.text
        assert "bad.csv" in caplog.text

    def test_extends_existing_dictionary(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text("word,definition\ndog,Barks\n", encoding="utf-8")
        words = WordDictionary(["cat"])
        assert load_word_lists([path], words) is words
        assert len(words) == 2

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert len(load_word_lists([path])) == 0
