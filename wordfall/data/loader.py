"""Load word lists from CSV files with ``word`` and ``definition`` columns."""

import csv
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from ..utils.logger import get_logger
from .dictionary import NO_DEFINITION, WordDictionary


LOGGER = get_logger(__name__)


def read_word_list(path: Path | str) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(word, definition)`` rows from one CSV file.

    Header names are matched case-insensitively. A file without both
    columns yields nothing. Newlines inside a definition become spaces.
    """
    path = Path(path)
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            return
        columns = [h.strip().lower() for h in header]
        if "word" not in columns or "definition" not in columns:
            LOGGER.warning("Skipping %s: missing 'word' or 'definition' column", path)
            return
        word_idx = columns.index("word")
        def_idx = columns.index("definition")

        for row in reader:
            word = row[word_idx].strip() if len(row) > word_idx else ""
            if not word:
                continue
            definition = row[def_idx] if len(row) > def_idx else ""
            definition = " ".join(definition.split()) or NO_DEFINITION
            yield word, definition


def load_word_lists(
    paths: Iterable[Path | str],
    dictionary: Optional[WordDictionary] = None,
) -> WordDictionary:
    """Populate ``dictionary`` (or a new one) from every readable CSV in ``paths``."""
    dictionary = dictionary if dictionary is not None else WordDictionary()
    for path in paths:
        path = Path(path)
        if not path.exists():
            LOGGER.warning("Word list not found: %s", path)
            continue
        before = len(dictionary)
        for word, definition in read_word_list(path):
            dictionary.add_word(word, definition)
        LOGGER.info("Loaded %s word(s) from %s", len(dictionary) - before, path)

    LOGGER.info("Dictionary holds %s word(s)", len(dictionary))
    return dictionary
