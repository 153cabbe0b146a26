"""In-memory dictionary with optional per-word definitions."""

from typing import Dict, Iterable, Iterator, Optional, Set


NO_DEFINITION = "Definition not found"


class WordDictionary:
    """
    Case-insensitive word set.

    Words are stored lower-cased. The engine only calls :meth:`has_word`;
    definitions are for whoever reports the words that were made.
    """

    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        definitions: Optional[Dict[str, str]] = None,
    ) -> None:
        self._words: Set[str] = set()
        self._definitions: Dict[str, str] = {}
        for word in words or ():
            self.add_word(word)
        for word, definition in (definitions or {}).items():
            self.add_word(word, definition)

    @staticmethod
    def normalize(word: str) -> str:
        return word.strip().lower()

    def add_word(self, word: str, definition: Optional[str] = None) -> None:
        key = self.normalize(word)
        if not key:
            return
        self._words.add(key)
        if definition:
            self._definitions[key] = definition

    def has_word(self, word: str) -> bool:
        if not word:
            return False
        return self.normalize(word) in self._words

    def get_definition(self, word: str) -> str:
        return self._definitions.get(self.normalize(word), NO_DEFINITION)

    @property
    def word_count(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.has_word(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))
