"""Word lists and dictionary lookup."""

from .dictionary import WordDictionary, NO_DEFINITION
from .loader import load_word_lists, read_word_list

__all__ = ["WordDictionary", "NO_DEFINITION", "load_word_lists", "read_word_list"]
